# __init__.py - package directory file for figplot
# Copyright (C) 2014-2018 Jochen Voss <voss@seehuhn.de>
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

"""An Object-Oriented Library for Two-Dimensional Plots
====================================================

:copyright: 2014, Jochen Voss
:license: GPL version 3 or newer, see LICENSE for more details

Quick Start
-----------

Figures can either be built explicitly::

    import figplot

    fig = figplot.Figure(figsize=('12cm', '8cm'))
    ax = fig.add_subplot(1, 1, 0)
    ax.plot([1, 2, 3], [1, 4, 9], 'b-o', label='squares')
    fig.save('squares.pdf')

or using the procedural interface in :py:mod:`figplot.pyplot`, which
keeps track of a current figure.

Modules
-------

The figplot package is composed of the following main modules:

* :py:mod:`figplot.figure`
* :py:mod:`figplot.lines`
* :py:mod:`figplot.pyplot`
* :py:mod:`figplot.config`
* :py:mod:`figplot.renderer`

"""

__title__ = 'figplot'
__version__ = '0.4'
__author__ = 'Jochen Voss'
__license__ = 'GPLv3+'
__copyright__ = 'Copyright (c) 2014-2018 Jochen Voss'

from . import errors
from .artist import Artist
from .config import (rcParams, rcParamsDefault, rcParamsOrig, use,
                     get_backend, rc, rc_defaults, rc_file, rc_file_defaults,
                     rc_context)
from .figure import Figure, Axes, Rect
from .lines import Line2D
from .renderer import Renderer, RecordingRenderer
from .styles import LineStyle, MarkerStyle
