# lines_test.py - unit tests for lines.py
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

import numpy as np

import pytest

from . import color
from . import config
from . import errors
from . import figure
from . import renderer
from .lines import Line2D
from .styles import LineStyle, MarkerStyle


@pytest.fixture(autouse=True)
def restore_rc():
    with config.rc_context():
        yield


def test_defaults():
    line = Line2D([1, 2, 3], [4, 5, 6])
    assert line.color == color.get('blue')
    assert line.markercolor == color.get('blue')
    assert line.linewidth == 1.0
    assert line.linestyle == LineStyle.SOLID
    assert line.marker == MarkerStyle.NONE
    assert line.markersize == 6.0
    assert line.zorder == 2
    assert line.label is None
    assert line.axes is None

    config.rcParams['lines.linewidth'] = 3
    config.rcParams['lines.marker'] = 's'
    line = Line2D([1, 2], [3, 4])
    assert line.linewidth == 3.0
    assert line.marker == MarkerStyle.SQUARE


def test_style_arguments():
    line = Line2D([0, 1], [0, 1], color='r', linewidth=2, linestyle='--',
                  marker='o', markersize=4, markercolor='#00ff00',
                  label='diagonal')
    assert line.color == (1.0, 0.0, 0.0, 1.0)
    assert line.markercolor == (0.0, 1.0, 0.0, 1.0)
    assert line.linestyle == LineStyle.DASHED
    assert line.marker == MarkerStyle.CIRCLE
    assert line.label == 'diagonal'

    with pytest.raises(errors.InvalidArgument):
        line.linewidth = -1
    with pytest.raises(errors.InvalidArgument):
        line.markersize = 'big'
    with pytest.raises(errors.InvalidArgument):
        line.color = 'nosuchcolor'
    with pytest.raises(errors.InvalidArgument):
        line.linestyle = 'wiggly'
    assert line.linewidth == 2.0


def test_set_data():
    line = Line2D([1, 2, 3], [4, 5, 6])
    old_x = line.x_data
    line.set_data([7, 8], [9, 10])
    assert list(line.x_data) == [7.0, 8.0]
    assert list(line.y_data) == [9.0, 10.0]
    assert list(old_x) == [1.0, 2.0, 3.0]
    assert line.x_data is not old_x

    with pytest.raises(errors.InvalidArgument):
        line.set_data([1, 2, 3], [1, 2])
    assert list(line.x_data) == [7.0, 8.0]

    with pytest.raises(ValueError):
        line.x_data[0] = 99


def test_length_mismatch():
    with pytest.raises(errors.InvalidArgument):
        Line2D([1, 2, 3], [1, 2])


def test_y_only():
    line = Line2D([5, 6, 7], None)
    assert list(line.x_data) == [0.0, 1.0, 2.0]
    assert list(line.y_data) == [5.0, 6.0, 7.0]


def _render(line, visible=True):
    fig = figure.Figure(figsize=(4, 3), dpi=100)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, 4)
    ax.set_ylim(0, 3)
    ax.add_line(line)
    line.visible = visible
    r = renderer.RecordingRenderer()
    r.begin(400, 300, 100)
    line.draw(r)
    return r


def test_draw():
    line = Line2D([0, 2, 4], [0, 3, 0], linewidth=1.44, marker='s')
    r = _render(line)
    prim, = r.of_kind('lines')
    assert list(prim.params['x']) == pytest.approx([0, 200, 400])
    assert list(prim.params['y']) == pytest.approx([0, 300, 0])
    assert prim.params['lw'] == pytest.approx(2)
    assert prim.params['clip'] == pytest.approx([0, 0, 400, 300])
    markers, = r.of_kind('markers')
    assert markers.params['marker'] == MarkerStyle.SQUARE

    line.linestyle = 'none'
    r = _render(line)
    assert r.of_kind('lines') == []
    assert len(r.of_kind('markers')) == 1


def test_draw_nothing():
    line = Line2D([0, 1], [0, 1])
    r = renderer.RecordingRenderer()
    r.begin(100, 100, 72)
    line.draw(r)
    assert r.primitives == []

    r = _render(line, visible=False)
    assert r.primitives == []


def test_nan_breaks_line():
    line = Line2D([0, 1, np.nan, 3], [0, 1, 2, 3])
    r = _render(line)
    prim, = r.of_kind('lines')
    assert np.isnan(prim.params['x'][2])


def test_rejected_defaults():
    with pytest.raises(errors.InvalidArgument):
        config.rcParams['lines.linewidth'] = -1
    with pytest.raises(errors.InvalidArgument):
        config.rcParams['lines.markersize'] = float('nan')
    line = Line2D([1, 2], [3, 4])
    assert line.linewidth == config.rcParams['lines.linewidth'] >= 0
