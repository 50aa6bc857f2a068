# param.py - default parameters for the figplot package
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

import math

from . import backend
from . import cairo_renderer
from . import color
from . import errors
from . import styles
from . import util

# name: (type, default value, description)
DEFAULT = {
    'axes.edgecolor': ('col', 'black', 'axes frame color'),
    'axes.facecolor': ('col', 'white', 'axes background color'),
    'axes.grid': ('bool', False, 'whether to draw grid lines'),
    'axes.labelsize': ('length', 10.0, 'font size for axis labels, in points'),
    'axes.linewidth': ('length', 0.8, 'axes frame line width, in points'),
    'axes.titlesize': ('length', 12.0, 'font size for axes titles, in points'),
    'backend': ('backend', 'auto', 'output backend, "cairo", "null" or "auto"'),
    'figure.dpi': ('pos', 100.0, 'figure resolution in dots per inch'),
    'figure.facecolor': ('col', 'white', 'figure background color'),
    'figure.figsize': ('size', (8.0, 6.0), 'figure width and height, in inches'),
    'grid.color': ('col', '#b0b0b0', 'grid line color'),
    'grid.linestyle': ('linestyle', 'solid', 'grid line style'),
    'grid.linewidth': ('length', 0.8, 'grid line width, in points'),
    'legend.edgecolor': ('col', '#cccccc', 'legend frame color'),
    'legend.facecolor': ('col', 'white', 'legend background color'),
    'legend.fontsize': ('length', 10.0, 'font size for legend entries, in points'),
    'lines.color': ('col', 'blue', 'line color'),
    'lines.linestyle': ('linestyle', 'solid', 'line style'),
    'lines.linewidth': ('length', 1.0, 'line width, in points'),
    'lines.marker': ('marker', 'none', 'marker style'),
    'lines.markercolor': ('col', 'blue', 'marker color'),
    'lines.markersize': ('length', 6.0, 'marker size, in points'),
    'savefig.dpi': ('dpi', 'figure', 'resolution for saved figures, or "figure"'),
    'savefig.format': ('format', 'png', 'file format used when none can be inferred'),
    'text.color': ('col', 'black', 'text color'),
    'xtick.labelsize': ('length', 10.0, 'font size for x-axis tick labels'),
    'xtick.major.size': ('length', 3.5, 'length of x-axis tick marks, in points'),
    'ytick.labelsize': ('length', 10.0, 'font size for y-axis tick labels'),
    'ytick.major.size': ('length', 3.5, 'length of y-axis tick marks, in points'),
}

VALID_KEYS = set(DEFAULT.keys())

ALIASES = {
    'c': 'color',
    'ec': 'edgecolor',
    'fc': 'facecolor',
    'ls': 'linestyle',
    'lw': 'linewidth',
    'mc': 'markercolor',
    'ms': 'markersize',
}

_TRUE = ('true', 'yes', 'on', '1')
_FALSE = ('false', 'no', 'off', '0')


def defaults():
    """Return a dictionary mapping all parameter names to their default
    values.

    """
    return {key: validate(key, info[1]) for key, info in DEFAULT.items()}


def validate(key, value):
    """Check `value` for parameter `key` and convert it to the type used
    internally.

    Values read from files are strings; these are converted as
    required.

    """
    if key not in DEFAULT:
        raise errors.InvalidParameterName(f"invalid parameter '{key}'")
    kind = DEFAULT[key][0]
    try:
        return _VALIDATORS[kind](value)
    except (TypeError, ValueError) as exc:
        raise errors.InvalidArgument(
            f"invalid value {value!r} for parameter '{key}': {exc}") from None


def _to_bool(value):
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError("not a boolean")
    if value in (0, 1):
        return bool(value)
    raise ValueError("not a boolean")


def _to_positive(value):
    res = float(value)
    if not res > 0:
        raise ValueError("must be positive")
    return res


def _to_non_negative(value):
    res = float(value)
    if not (math.isfinite(res) and res >= 0):
        raise ValueError("must be a non-negative number")
    return res


def _to_size(value):
    if isinstance(value, str):
        value = value.split(',')
    w, h = util.check_vec(value, 2)
    w = util.convert_dim(w, 1)
    h = util.convert_dim(h, 1)
    if not (w > 0 and h > 0):
        raise ValueError("must be positive")
    return (w, h)


def _to_color(value):
    # keep the original spelling, but make sure it can be parsed
    color.get(value)
    if isinstance(value, str):
        return value.strip()
    return tuple(value)


def _to_backend(value):
    name = str(value).strip().lower()
    if name != 'auto' and name not in backend.BACKENDS:
        raise ValueError("unknown backend")
    return name


def _to_dpi(value):
    if isinstance(value, str) and value.strip() == 'figure':
        return 'figure'
    return _to_positive(value)


def _to_format(value):
    name = str(value).strip().lower()
    if name not in cairo_renderer.FILE_TYPES:
        raise ValueError("unsupported file format")
    return name


_VALIDATORS = {
    'backend': _to_backend,
    'bool': _to_bool,
    'col': _to_color,
    'dpi': _to_dpi,
    'format': _to_format,
    'length': _to_non_negative,
    'linestyle': styles.LineStyle.parse,
    'marker': styles.MarkerStyle.parse,
    'pos': _to_positive,
    'size': _to_size,
}
