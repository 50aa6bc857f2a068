# util.py - auxiliary functions for FigPlot
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

import numpy as np

from . import errors

UNITS = {
    'in': 1,
    'cm': 1 / 2.54,
    'mm': 1 / 25.4,
    'bp': 1 / 72,
    'pt': 1 / 72.27,
}


def convert_dim(dim, res, parent_length=None):
    """Convert dimensions to device coordinates.

    Args:
        dim: The dimension, either as a number (device units) or a
            dimension string including a unit (e.g. "1cm").
        res: The device resolution in units/inch.
        parent_length: The length of the surrounding element in device
            units.  If this is set, relative lengths (e.g. "50%") are
            allowed.

    Returns:
        How many device units correspond to `dim`.

    """
    if dim is None:
        return None

    unit = None

    try:
        dim = float(dim)
        unit = 1
    except (TypeError, ValueError):
        dim = str(dim).strip()

    if unit is None:
        for pfx, scale in UNITS.items():
            if dim.endswith(pfx):
                dim = dim[:-len(pfx)]
                unit = scale * res
                break

    if unit is None and dim.endswith('px'):
        dim = dim[:-2]
        unit = 1

    if unit is None and dim.endswith('%'):
        if parent_length is None:
            raise errors.InvalidArgument(
                'relative length %s in invalid context' % dim)
        dim = dim[:-1]
        unit = parent_length / 100

    if unit is None:
        raise errors.InvalidArgument(f"invalid dimension {dim!r}")

    try:
        return float(dim) * unit
    except ValueError:
        raise errors.InvalidArgument(f"invalid dimension {dim!r}") from None


def points(value, res):
    """Convert a length in PostScript points (1/72 inch) to device units."""
    return float(value) * UNITS['bp'] * res


def check_vec(v, n, broadcast=False):
    if isinstance(v, str):
        if not broadcast:
            raise TypeError('string "%s" used as vec%d' % (v, n))
        return [v] * n
    try:
        k = len(v)
    except TypeError:
        if not broadcast:
            tmpl = "%s used as vec%d, but does not have a length"
            raise TypeError(tmpl % (repr(v), n))
        k = 1
        v = [v]

    if broadcast and 1 <= k < n and n % k == 0:
        return list(v) * (n // k)
    if k != n:
        tmpl = "%s used as vec%d, but has length %s != %d"
        raise errors.InvalidArgument(tmpl % (repr(v), n, k, n))
    return v


def check_num_vec(v, n, broadcast=False):
    v = check_vec(v, n, broadcast)
    try:
        v = [float(vi) for vi in v]
    except (TypeError, ValueError):
        raise errors.InvalidArgument(
            "%s used as numeric vector, but has non-numeric entries" % repr(v))
    return v


def _as_float_array(v, name):
    try:
        v = np.array(v, dtype=float)
    except (TypeError, ValueError):
        raise errors.InvalidArgument(f'{name} has non-numeric entries') from None
    if not v.shape:
        v = v.reshape((1,))
    return v


def check_coords(x, y):
    """Convert a pair of coordinate sequences into float arrays.

    If `y` is ``None``, the values in `x` are used as vertical
    coordinates and the horizontal coordinates are ``0, 1, ..., n-1``.

    """
    x = _as_float_array(x, 'x')
    if y is None:
        if len(x.shape) != 1:
            raise errors.InvalidArgument('y has wrong shape %s' % repr(x.shape))
        return np.arange(len(x), dtype=float), x
    y = _as_float_array(y, 'y')
    if len(x.shape) != 1:
        raise errors.InvalidArgument('x has wrong shape %s' % repr(x.shape))
    if len(y.shape) != 1:
        raise errors.InvalidArgument('y has wrong shape %s' % repr(y.shape))
    if len(x) != len(y):
        tmpl = 'x and y have incompatible length: %d != %d'
        raise errors.InvalidArgument(tmpl % (len(x), len(y)))
    return x, y


def data_range(*args):
    lower = np.inf
    upper = -np.inf
    for arg in args:
        # ignore default values for unset parameters
        if arg is None:
            continue

        # numbers are easy
        if isinstance(arg, (float, int)):
            if not np.isfinite(arg):
                continue
            if arg < lower:
                lower = arg
            if arg > upper:
                upper = arg
            continue
        if isinstance(arg, (str, bytes)):
            raise TypeError(f"invalid data range {arg!r}")

        # try whether numpy can deal with `arg`
        try:
            aa = np.array(arg, dtype=float).flatten()
            aa = aa[np.isfinite(aa)]
            a = np.min(aa)
            b = np.max(aa)
        except (TypeError, ValueError):
            a = None
        if a is not None:
            if a < lower:
                lower = a
            if b > upper:
                upper = b
            continue

        # try whether `arg` is iterable
        try:
            for a2 in arg:
                a, b = data_range(a2)
                if a < lower:
                    lower = a
                if b > upper:
                    upper = b
        except TypeError:
            raise TypeError(f"invalid data range {arg!r}")
    if lower > upper:
        raise ValueError("no data range specified")
    return lower, upper
