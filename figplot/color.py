# color.py - convert colour specifications to RGBA values
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

"""Colour Specifications
---------------------

Colours can be given in any of the following forms:

* a tuple ``(r, g, b)`` or ``(r, g, b, a)`` of numbers in the range
  [0, 1],
* a hex string ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA``,
* a CSS style string ``rgb(r, g, b)`` or ``rgba(r, g, b, a)``, where
  r, g, b are in the range [0, 255] and a is in [0, 1],
* one of the single letter abbreviations ``b``, ``g``, ``r``, ``c``,
  ``m``, ``y``, ``k``, ``w``,
* a colour name like ``"red"`` or ``"steelblue"``,
* ``"none"`` or ``"transparent"``.

"""

import re

from . import errors

# name: (r, g, b), intensities in 0, ..., 255
names = {
    'aqua': (0, 255, 255),
    'black': (0, 0, 0),
    'blue': (0, 0, 255),
    'brown': (165, 42, 42),
    'cyan': (0, 255, 255),
    'darkblue': (0, 0, 139),
    'darkgray': (169, 169, 169),
    'darkgreen': (0, 100, 0),
    'darkgrey': (169, 169, 169),
    'darkorange': (255, 140, 0),
    'darkred': (139, 0, 0),
    'fuchsia': (255, 0, 255),
    'gold': (255, 215, 0),
    'gray': (128, 128, 128),
    'green': (0, 128, 0),
    'grey': (128, 128, 128),
    'indigo': (75, 0, 130),
    'lightblue': (173, 216, 230),
    'lightgray': (211, 211, 211),
    'lightgreen': (144, 238, 144),
    'lightgrey': (211, 211, 211),
    'lime': (0, 255, 0),
    'magenta': (255, 0, 255),
    'maroon': (128, 0, 0),
    'navy': (0, 0, 128),
    'olive': (128, 128, 0),
    'orange': (255, 165, 0),
    'pink': (255, 192, 203),
    'purple': (128, 0, 128),
    'red': (255, 0, 0),
    'silver': (192, 192, 192),
    'steelblue': (70, 130, 180),
    'tan': (210, 180, 140),
    'teal': (0, 128, 128),
    'turquoise': (64, 224, 208),
    'violet': (238, 130, 238),
    'white': (255, 255, 255),
    'yellow': (255, 255, 0),
}

# single letter abbreviations, as used in format strings
letters = {
    'b': (0.0, 0.0, 1.0),
    'g': (0.0, 0.5, 0.0),
    'r': (1.0, 0.0, 0.0),
    'c': (0.0, 0.75, 0.75),
    'm': (0.75, 0.0, 0.75),
    'y': (0.75, 0.75, 0.0),
    'k': (0.0, 0.0, 0.0),
    'w': (1.0, 1.0, 1.0),
}

_CSS_RE = re.compile(r'^(rgba?)\(([^)]*)\)$')


def get(col):
    """Convert a colour specification into a tuple ``(r, g, b, a)`` of
    floats in the range [0, 1].

    """
    if isinstance(col, str):
        return _from_string(col)

    try:
        values = [float(x) for x in col]
    except (TypeError, ValueError):
        raise errors.InvalidArgument(f"invalid color {col!r}") from None
    if len(values) == 3:
        values.append(1.0)
    if len(values) != 4 or not all(0 <= x <= 1 for x in values):
        raise errors.InvalidArgument(f"invalid color {col!r}")
    return tuple(values)


def _from_string(col):
    s = col.strip().lower()

    if s in ('none', 'transparent'):
        return (0.0, 0.0, 0.0, 0.0)
    if s in letters:
        return letters[s] + (1.0,)
    if s in names:
        r, g, b = names[s]
        return (r / 255, g / 255, b / 255, 1.0)

    if s.startswith('#'):
        digits = s[1:]
        if len(digits) in (3, 4):
            digits = ''.join(c + c for c in digits)
        if len(digits) not in (6, 8):
            raise errors.InvalidArgument(f"invalid color {col!r}")
        try:
            values = [int(digits[i:i+2], 16) / 255
                      for i in range(0, len(digits), 2)]
        except ValueError:
            raise errors.InvalidArgument(f"invalid color {col!r}") from None
        if len(values) == 3:
            values.append(1.0)
        return tuple(values)

    m = _CSS_RE.match(s.replace(' ', ''))
    if m:
        kind, args = m.groups()
        try:
            values = [float(x) for x in args.split(',')]
        except ValueError:
            raise errors.InvalidArgument(f"invalid color {col!r}") from None
        if len(values) != len(kind):
            raise errors.InvalidArgument(f"invalid color {col!r}")
        rgb = [x / 255 for x in values[:3]]
        alpha = values[3] if kind == 'rgba' else 1.0
        res = tuple(rgb) + (alpha,)
        if not all(0 <= x <= 1 for x in res):
            raise errors.InvalidArgument(f"invalid color {col!r}")
        return res

    raise errors.InvalidArgument(f"unknown color {col!r}")
