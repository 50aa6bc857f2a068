# setup.py - distutils/setuptools configuration for the figplot package
# Copyright (C) 2014 Jochen Voss <voss@seehuhn.de>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

"""distutils/setuptools configuration for the figplot package"""

import os.path
import re

from setuptools import setup


def read_version():
    fname = os.path.join(os.path.dirname(__file__), 'figplot', '__init__.py')
    with open(fname, encoding='utf-8') as fd:
        m = re.search(r"^__version__ = '([^']*)'", fd.read(), re.M)
    return m.group(1)


setup(
    name='figplot',
    version=read_version(),
    packages=['figplot'],
    python_requires='>=3.6',

    install_requires=['cairocffi', 'numpy'],
    extras_require={
        'tests': ['pytest'],
    },

    # metadata for upload to PyPI
    author='Jochen Voss',
    author_email='voss@seehuhn.de',
    description='object-oriented 2D plotting with a pyplot-style interface',
    keywords='cairo graphics plotting',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 or later' +
        ' (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Scientific/Engineering :: Visualization',
    ]
)
