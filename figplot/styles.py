# styles.py - line styles, marker styles and format strings
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

"""Line and Marker Styles
----------------------

The :py:class:`LineStyle` and :py:class:`MarkerStyle` enums list the
available ways to draw the lines and markers of a
:py:class:`figplot.lines.Line2D`.  Both can be given either as enum
members, by name (e.g. ``"dashed"``), or by the short symbols used in
format strings (e.g. ``"--"``).

"""

import enum

from . import color
from . import errors


class LineStyle(enum.Enum):

    SOLID = 'solid'
    DASHED = 'dashed'
    DOTTED = 'dotted'
    DASHDOT = 'dashdot'
    NONE = 'none'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        key = str(value)
        if key in _LINE_SYMBOLS:
            return _LINE_SYMBOLS[key]
        try:
            return cls(key.strip().lower())
        except ValueError:
            raise errors.InvalidArgument(f"invalid line style {value!r}") from None


class MarkerStyle(enum.Enum):

    NONE = 'none'
    POINT = 'point'
    CIRCLE = 'circle'
    SQUARE = 'square'
    DIAMOND = 'diamond'
    TRIANGLE = 'triangle'
    PLUS = 'plus'
    CROSS = 'cross'
    STAR = 'star'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        key = str(value)
        if key in _MARKER_SYMBOLS:
            return _MARKER_SYMBOLS[key]
        try:
            return cls(key.strip().lower())
        except ValueError:
            raise errors.InvalidArgument(f"invalid marker {value!r}") from None


_LINE_SYMBOLS = {
    '-': LineStyle.SOLID,
    '--': LineStyle.DASHED,
    ':': LineStyle.DOTTED,
    '-.': LineStyle.DASHDOT,
    '': LineStyle.NONE,
    ' ': LineStyle.NONE,
    'None': LineStyle.NONE,
}

_MARKER_SYMBOLS = {
    '.': MarkerStyle.POINT,
    'o': MarkerStyle.CIRCLE,
    's': MarkerStyle.SQUARE,
    'D': MarkerStyle.DIAMOND,
    '^': MarkerStyle.TRIANGLE,
    '+': MarkerStyle.PLUS,
    'x': MarkerStyle.CROSS,
    '*': MarkerStyle.STAR,
    '': MarkerStyle.NONE,
    ' ': MarkerStyle.NONE,
    'None': MarkerStyle.NONE,
}

# on/off lengths, in multiples of the line width
_DASHES = {
    LineStyle.SOLID: [],
    LineStyle.DASHED: [3.7, 1.6],
    LineStyle.DOTTED: [1.0, 1.65],
    LineStyle.DASHDOT: [6.4, 1.6, 1.0, 1.6],
    LineStyle.NONE: [],
}


def dash_pattern(linestyle, lw):
    """Return the dash pattern for `linestyle`, scaled for a line of
    width `lw`.

    Lines thinner than one device unit use the pattern for width 1, so
    that the gaps stay visible.

    """
    linestyle = LineStyle.parse(linestyle)
    scale = max(lw, 1.0)
    return [d * scale for d in _DASHES[linestyle]]


def parse_format(fmt):
    """Split a format string like ``"r--o"`` into its components.

    Returns:
        A tuple ``(col, linestyle, marker)``.  Components not present in
        `fmt` are ``None``.  If a marker is given but no line style,
        the line style is :py:data:`LineStyle.NONE`.

    """
    if fmt is None:
        return None, None, None

    # a complete colour name, like "red" or "#FF0000"
    try:
        return color.get(fmt), None, None
    except errors.InvalidArgument:
        pass

    col = None
    linestyle = None
    marker = None
    i = 0
    while i < len(fmt):
        two = fmt[i:i+2]
        c = fmt[i]
        if two in ('--', '-.'):
            if linestyle is not None:
                raise errors.InvalidArgument(
                    f"two line style symbols in format string {fmt!r}")
            linestyle = _LINE_SYMBOLS[two]
            i += 2
            continue
        if c in ('-', ':'):
            if linestyle is not None:
                raise errors.InvalidArgument(
                    f"two line style symbols in format string {fmt!r}")
            linestyle = _LINE_SYMBOLS[c]
        elif c in _MARKER_SYMBOLS and c.strip():
            if marker is not None:
                raise errors.InvalidArgument(
                    f"two marker symbols in format string {fmt!r}")
            marker = _MARKER_SYMBOLS[c]
        elif c in color.letters:
            if col is not None:
                raise errors.InvalidArgument(
                    f"two color symbols in format string {fmt!r}")
            col = color.get(c)
        else:
            raise errors.InvalidArgument(
                f"unrecognized character {c!r} in format string {fmt!r}")
        i += 1

    if linestyle is None and marker is not None:
        linestyle = LineStyle.NONE
    return col, linestyle, marker
