# color_test.py - unit tests for color.py
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

import pytest

from . import color
from . import errors


def test_color():
    r, g, b, a = color.get('#000000')
    assert r == g == b == 0.0
    assert a == 1.0

    r, g, b, a = color.get('#FFFFFF')
    assert r == g == b == 1.0
    assert a == 1.0

    r, g, b, a = color.get('#123456')
    assert r == pytest.approx(0x12/255)
    assert g == pytest.approx(0x34/255)
    assert b == pytest.approx(0x56/255)
    assert a == 1.0

    r, g, b, a = color.get('#000')
    assert r == g == b == 0.0
    assert a == 1.0

    r, g, b, a = color.get('#FFF')
    assert r == g == b == 1.0
    assert a == 1.0

    r, g, b, a = color.get('#789')
    assert r == pytest.approx(0x77/255)
    assert g == pytest.approx(0x88/255)
    assert b == pytest.approx(0x99/255)
    assert a == 1.0

    with pytest.raises(ValueError):
        color.get('#01234G')

    r, g, b, a = color.get('red')
    assert r - 0.5 > max(g, b) >= 0.0
    assert a == 1.0

    r, g, b, a = color.get('rgba(0, 127.5, 255, 0.3)')
    assert r == pytest.approx(.0)
    assert g == pytest.approx(.5)
    assert b == pytest.approx(1.0)
    assert a == pytest.approx(.3)


def test_letters_and_names():
    assert color.get('b') == (0.0, 0.0, 1.0, 1.0)
    assert color.get('k') == (0.0, 0.0, 0.0, 1.0)
    assert color.get(' White ') == (1.0, 1.0, 1.0, 1.0)
    assert color.get('blue') == color.get('b')

    r, g, b, a = color.get('steelblue')
    assert (r, g, b) == pytest.approx((70/255, 130/255, 180/255))


def test_transparent():
    assert color.get('none') == (0.0, 0.0, 0.0, 0.0)
    assert color.get('transparent')[3] == 0.0

    r, g, b, a = color.get('#FF000080')
    assert r == 1.0
    assert a == pytest.approx(0x80/255)


def test_tuples():
    assert color.get((1, 0, 0)) == (1.0, 0.0, 0.0, 1.0)
    assert color.get([0, 0.5, 1, 0.25]) == (0.0, 0.5, 1.0, 0.25)


@pytest.mark.parametrize('col', [
    'nosuchcolor', '#12345', 'rgb(1, 2)', 'rgba(0, 0, 0, 2)', (1, 2, 3),
    (0, 0), 17, None,
])
def test_invalid(col):
    with pytest.raises(errors.InvalidArgument):
        color.get(col)
