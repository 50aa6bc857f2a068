# cairo_renderer_test.py - unit tests for cairo_renderer.py
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

import io

import numpy as np

import pytest

from . import cairo_renderer
from . import errors
from . import styles

BLACK = (0.0, 0.0, 0.0, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)

MAGIC = {
    'png': b'\x89PNG',
    'pdf': b'%PDF',
    'ps': b'%!PS',
    'eps': b'%!PS',
}


def _draw_something(r):
    r.draw_rectangle([0, 0, r.width, r.height], fill_col=(1, 1, 1, 1))
    r.draw_rectangle([10, 10, 50, 30], edge_col=BLACK, lw=1)
    r.draw_lines([0, 50, np.nan, 60, 100], [0, 50, 60, 40, 80], col=RED,
                 lw=2, dash=[4, 2], clip=[5, 5, 90, 90])
    r.draw_markers([20, 40, 60], [20, 40, 60], styles.MarkerStyle.CIRCLE, 6,
                   col=BLACK)
    r.draw_markers([20, 40], [60, 20], 'x', 6, col=BLACK)
    r.draw_text(50, 50, "Hello", size=12, col=BLACK,
                horizontal_align="center", vertical_align="center",
                rotate=.5)


@pytest.mark.parametrize('file_type', cairo_renderer.FILE_TYPES)
def test_file_output(tmp_path, file_type):
    fname = str(tmp_path / ('out.' + file_type))
    r = cairo_renderer.CairoRenderer(fname, file_type)
    r.begin(200, 100, 72)
    _draw_something(r)
    r.finish()

    with open(fname, 'rb') as fd:
        data = fd.read()
    if file_type == 'svg':
        assert b'<svg' in data
    else:
        assert data.startswith(MAGIC[file_type])


def test_file_object():
    fd = io.BytesIO()
    r = cairo_renderer.CairoRenderer(fd, 'pdf')
    r.begin(100, 100, 72)
    _draw_something(r)
    r.finish()
    assert fd.getvalue().startswith(b'%PDF')


def test_dev_null():
    r = cairo_renderer.CairoRenderer("/dev/null", 'png')
    r.begin(300, 200, 100)
    _draw_something(r)
    assert r.text_width("iiii", 10) <= r.text_width("iiiiiiii", 10)
    r.finish()
    # a second call does nothing
    r.finish()


def test_errors(tmp_path):
    with pytest.raises(errors.InvalidArgument):
        cairo_renderer.CairoRenderer(str(tmp_path / "out.gif"), 'gif')

    r = cairo_renderer.CairoRenderer("/dev/null", 'pdf')
    r.begin(100, 100, 72)
    with pytest.raises(errors.InvalidArgument):
        r.draw_text(0, 0, "x", size=10, col=BLACK, horizontal_align="middle")
    with pytest.raises(errors.InvalidArgument):
        r.draw_text(0, 0, "x", size=10, col=BLACK, vertical_align="up")
    r.finish()

    fname = str(tmp_path / "no" / "such" / "dir" / "out.png")
    r = cairo_renderer.CairoRenderer(fname, 'png')
    r.begin(100, 100, 72)
    with pytest.raises(errors.IOFailure):
        r.finish()
