# figure.py - implementation of the Figure and Axes classes
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

"""The Figure and Axes classes
---------------------------

A `Figure` is the top-level container of a plot.  It owns a list of
`Axes`, each of which occupies a rectangle on the figure, given in
normalised figure coordinates (the figure spans ``[0, 1] x [0, 1]``,
with the origin in the bottom left corner).  Axes in turn hold the
lines to be drawn.

"""

import collections
import logging
import math
import operator
import os

import numpy as np

from . import artist
from . import backend
from . import cairo_renderer
from . import color
from . import config
from . import errors
from . import lines
from . import scale
from . import styles
from . import util

logger = logging.getLogger(__name__)

Rect = collections.namedtuple('Rect', ['x', 'y', 'width', 'height'])


class Figure(artist.Artist):

    """The top-level container for a plot.

    Args:
        figsize (pair, optional): The figure width and height.  Each
            entry can either be a number to give the size in inches, or
            a string including a length unit like "10cm".  The default
            is taken from ``rcParams['figure.figsize']``.
        dpi (number, optional): The figure resolution in dots per inch.
            This is used for raster output unless a different
            resolution is given when saving.
        facecolor (optional): The background colour.

    """

    def __init__(self, figsize=None, dpi=None, *, facecolor=None,
                 visible=True, zorder=0, label=None):
        super().__init__(visible=visible, zorder=zorder, label=label)
        rc = config.rcParams
        self.size = rc['figure.figsize'] if figsize is None else figsize
        self.dpi = rc['figure.dpi'] if dpi is None else dpi
        self.facecolor = rc['figure.facecolor'] if facecolor is None else facecolor
        self._axes = []
        self._last_subplot = None
        logger.debug("created figure %.3gin x %.3gin at %g dpi",
                     self._size[0], self._size[1], self._dpi)

    def __str__(self):
        w, h = self._size
        return f'<Figure {w:g}in × {h:g}in, {len(self._axes)} axes>'

    @property
    def size(self):
        """The figure width and height, in inches."""
        return self._size

    @size.setter
    def size(self, value):
        try:
            w, h = util.check_vec(value, 2)
        except TypeError:
            raise errors.InvalidArgument(f"invalid figure size {value!r}") from None
        w = util.convert_dim(w, 1)
        h = util.convert_dim(h, 1)
        if not (w > 0 and h > 0):
            raise errors.InvalidArgument(f"invalid figure size {value!r}")
        self._size = (w, h)

    @property
    def dpi(self):
        """The figure resolution, in dots per inch."""
        return self._dpi

    @dpi.setter
    def dpi(self, value):
        self._dpi = _positive(value, 'dpi')

    @property
    def facecolor(self):
        return self._facecolor

    @facecolor.setter
    def facecolor(self, value):
        self._facecolor = color.get(value)

    @property
    def axes(self):
        """The axes of the figure, in the order they were added."""
        return tuple(self._axes)

    def add_axes(self, rect, **kwargs):
        """Add new axes to the figure.

        Args:
            rect (sequence of length 4): The position ``(x, y, w, h)``
                of the new axes, in normalised figure coordinates.
            kwargs: further keyword arguments for the
                :py:class:`Axes` constructor.

        Returns:
            The new Axes.

        """
        ax = Axes(self, rect, **kwargs)
        self._axes.append(ax)
        logger.debug("added axes at %s", ax.position)
        return ax

    def add_subplot(self, nrows, ncols, index=None, **kwargs):
        """Split the figure into a ``nrows``-times-``ncols`` grid and add
        axes covering the cell in row ``index // ncols`` and column
        ``index % ncols`` (where both row and column counts start with
        0, and row 0 is at the bottom of the figure).

        Args:
            nrows (int): Number of rows.
            ncols (int): Number of columns.
            index (int, optional): The position of the new axes in the
                grid.  If this is omitted, the cell following the one
                used by the previous call with the same grid dimensions
                is used.

        """
        try:
            nrows = operator.index(nrows)
            ncols = operator.index(ncols)
        except TypeError:
            raise errors.InvalidArgument(
                f"grid dimensions must be integers, not {nrows!r}, {ncols!r}") from None
        if nrows <= 0 or ncols <= 0:
            raise errors.InvalidArgument(
                'invalid %d by %d arrangement' % (nrows, ncols))

        if index is None:
            last = self._last_subplot
            if last is not None and last[:2] == (nrows, ncols):
                index = (last[2] + 1) % (nrows * ncols)
            else:
                index = 0
        try:
            index = operator.index(index)
        except TypeError:
            raise errors.InvalidArgument(
                f"subplot index must be an integer, not {index!r}") from None
        if not 0 <= index < nrows * ncols:
            tmpl = 'invalid index %d, not in range 0, ..., %d'
            raise errors.InvalidArgument(tmpl % (index, nrows*ncols - 1))
        self._last_subplot = (nrows, ncols, index)

        row = index // ncols
        col = index % ncols
        rect = (col / ncols, row / nrows, 1 / ncols, 1 / nrows)
        return self.add_axes(rect, **kwargs)

    def remove_axes(self, ax):
        """Remove `ax` from the figure."""
        try:
            self._axes.remove(ax)
        except ValueError:
            raise errors.InvalidArgument(f"{ax} is not part of {self}") from None
        ax._figure = None

    def clear(self):
        """Remove all axes from the figure."""
        for ax in self._axes:
            ax._figure = None
        self._axes.clear()
        self._last_subplot = None

    def draw(self, renderer):
        if not self.visible:
            return
        if self._facecolor[3] > 0:
            renderer.draw_rectangle([0, 0, renderer.width, renderer.height],
                                    fill_col=self._facecolor)
        for ax in artist.by_zorder(self._axes):
            ax.draw(renderer)

    def save(self, filename, format=None, dpi=None):
        """Save the figure to a file.

        Args:
            filename (string or file object): The name of the output
                file, or a binary file object.
            format (string, optional): The file type, one of ``png``,
                ``pdf``, ``ps``, ``eps`` and ``svg``.  If this is not
                given, the file name extension is used, falling back to
                ``rcParams['savefig.format']``.
            dpi (number, optional): The resolution for the output.  The
                default is ``rcParams['savefig.dpi']``.

        """
        if isinstance(filename, os.PathLike):
            filename = os.fspath(filename)
        file_type = _file_type(filename, format)

        if dpi is None:
            dpi = config.rcParams['savefig.dpi']
        if dpi == 'figure':
            dpi = self._dpi
        dpi = _positive(dpi, 'dpi')

        renderer = backend.new_renderer(config.get_backend(), filename,
                                        file_type)
        w, h = self._size
        renderer.begin(w * dpi, h * dpi, dpi)
        try:
            self.draw(renderer)
        finally:
            renderer.finish()
        logger.info("saved figure as %s (%s, %g dpi)", filename, file_type, dpi)


class Axes(artist.Artist):

    """A rectangular region of a figure with its own data coordinates.

    Axes are normally created using :py:meth:`Figure.add_axes` or
    :py:meth:`Figure.add_subplot`.

    Args:
        figure (Figure): the figure the axes belong to.
        rect (sequence of length 4): The position ``(x, y, w, h)`` of
            the axes, in normalised figure coordinates.
        facecolor (optional): The background colour of the data area.

    """

    def __init__(self, figure, rect, *, facecolor=None, visible=True,
                 zorder=0, label=None):
        super().__init__(visible=visible, zorder=zorder, label=label)
        rc = config.rcParams
        self._figure = figure
        self.position = rect
        self.facecolor = rc['axes.facecolor'] if facecolor is None else facecolor
        self._lines = []
        self._xlim = (None, None)
        self._ylim = (None, None)

        self.title = None
        self.xlabel = None
        self.ylabel = None
        self.legend_visible = False
        self.grid_visible = rc['axes.grid']

    def __str__(self):
        tmpl = "<Axes %.3gx%.3g%+.3g%+.3g>"
        x, y, w, h = self.position
        return tmpl % (w, h, x, y)

    @property
    def figure(self):
        """The figure these axes belong to, or ``None`` after the axes
        have been removed (read only).

        """
        return self._figure

    @property
    def position(self):
        """The rectangle covered by the axes, in normalised figure
        coordinates.

        """
        return self._position

    @position.setter
    def position(self, rect):
        self._position = Rect(*util.check_num_vec(rect, 4))

    @property
    def facecolor(self):
        return self._facecolor

    @facecolor.setter
    def facecolor(self, value):
        self._facecolor = color.get(value)

    @property
    def lines(self):
        """The lines attached to the axes, in the order they were added."""
        return tuple(self._lines)

    def add_line(self, line):
        """Attach `line` to the axes.  A line can only be attached to one
        axes at a time; it is detached from its previous axes, if any.

        """
        if line.axes is self:
            return line
        if line.axes is not None:
            line.axes.remove_line(line)
        line.axes = self
        self._lines.append(line)
        return line

    def remove_line(self, line):
        try:
            self._lines.remove(line)
        except ValueError:
            raise errors.InvalidArgument(f"{line} is not part of {self}") from None
        line.axes = None

    def plot(self, x, y=None, fmt=None, *, label=None, **kwargs):
        """Add a line plot to the axes.

        Args:
            x (array with ``shape=(n,)``): The horizontal coordinates.
                If `y` is omitted, these are used as vertical
                coordinates instead and the horizontal coordinates are
                ``0, ..., n-1``.
            y (array with ``shape=(n,)``, optional): The vertical
                coordinates.
            fmt (str, optional): A format string like ``"r--o"``, see
                :py:func:`figplot.styles.parse_format`.
            label (str, optional): The legend label.
            kwargs: style arguments for :py:class:`figplot.lines.Line2D`.
                These override values given in `fmt`.

        Returns:
            The new Line2D.

        """
        if isinstance(y, str) and fmt is None:
            fmt, y = y, None
        col, linestyle, marker = styles.parse_format(fmt)
        style = {}
        if col is not None:
            style['color'] = col
        if linestyle is not None:
            style['linestyle'] = linestyle
        if marker is not None:
            style['marker'] = marker
        style.update(kwargs)
        if 'color' in style and 'markercolor' not in style:
            style['markercolor'] = style['color']

        line = lines.Line2D(x, y, label=label, **style)
        return self.add_line(line)

    def scatter(self, x, y, s=20, c=None, marker=styles.MarkerStyle.CIRCLE,
                label=None):
        """Add a scatter plot to the axes.

        This is a line plot with markers and without connecting
        lines.

        Args:
            x (array with ``shape=(n,)``): The horizontal coordinates.
            y (array with ``shape=(n,)``): The vertical coordinates.
            s (number): The marker size, in points.
            c (optional): The marker color.
            marker (MarkerStyle or str): The marker style.
            label (str, optional): The legend label.

        """
        line = self.plot(x, y, label=label)
        line.marker = marker
        line.markersize = s
        if c is not None:
            line.markercolor = c
        line.linestyle = styles.LineStyle.NONE
        return line

    def legend(self):
        """Show a legend for all lines with a label.

        Labels starting with an underscore are ignored.

        Returns:
            The list of lines shown in the legend.

        """
        self.legend_visible = True
        return self._legend_lines()

    def _legend_lines(self):
        return [line for line in self._lines
                if line.visible and line.label
                and not line.label.startswith('_')]

    def grid(self, visible=True):
        """Switch the grid lines on or off."""
        self.grid_visible = bool(visible)

    def set_xlim(self, left=None, right=None):
        """Set the horizontal data range.

        The arguments can also be given as a pair.  Limits which are
        ``None`` are determined from the data.  If only one limit is
        given and it lies beyond the data, the other limit is placed so
        that the range keeps the width of the automatic range.  Limits
        must be finite numbers.

        """
        self._xlim = _check_lim(left, right)

    def set_ylim(self, bottom=None, top=None):
        """Set the vertical data range, see :py:meth:`set_xlim`."""
        self._ylim = _check_lim(bottom, top)

    def get_xlim(self):
        """Return the horizontal data range ``(left, right)``."""
        return self._get_lim(self._xlim, [l.x_data for l in self._lines if l.visible])

    def get_ylim(self):
        """Return the vertical data range ``(bottom, top)``."""
        return self._get_lim(self._ylim, [l.y_data for l in self._lines if l.visible])

    @staticmethod
    def _get_lim(fixed, data):
        lo, hi = fixed
        if lo is None and hi is None:
            lo, hi = _auto_range(data)
        elif lo is None:
            a, b = _auto_range(data)
            lo = a if a < hi else hi - (b - a)
        elif hi is None:
            a, b = _auto_range(data)
            hi = b if b > lo else lo + (b - a)
        if lo == hi:
            lo, hi = lo - .5, hi + .5
        return (lo, hi)

    def device_rect(self, renderer):
        """The position of the axes, in device coordinates of `renderer`."""
        x, y, w, h = self._position
        return [x * renderer.width, y * renderer.height,
                w * renderer.width, h * renderer.height]

    def data_to_device(self, x, y, renderer):
        """Transform data coordinates into device coordinates."""
        rx, ry, rw, rh = self.device_rect(renderer)
        x0, x1 = self.get_xlim()
        y0, y1 = self.get_ylim()

        # The horizontal scale and offset are determined by the
        # following two equations:
        #     x0 * x_scale + x_offset = rx
        #     x1 * x_scale + x_offset = rx + rw
        x_scale = rw / (x1 - x0)
        x_offset = rx - x0 * x_scale
        # The vertical coordinates are similar:
        y_scale = rh / (y1 - y0)
        y_offset = ry - y0 * y_scale

        x = x_offset + x_scale * np.asarray(x, dtype=float)
        y = y_offset + y_scale * np.asarray(y, dtype=float)
        return x, y

    def draw(self, renderer):
        if not self.visible:
            return
        rc = config.rcParams
        res = renderer.res
        rect = self.device_rect(renderer)

        renderer.draw_rectangle(rect, fill_col=self._facecolor)

        x_ticks = self._ticks(self.get_xlim(), rect[2], res)
        y_ticks = self._ticks(self.get_ylim(), rect[3], res)
        if self.grid_visible:
            self._draw_grid(renderer, rect, x_ticks, y_ticks)

        for line in artist.by_zorder(self._lines):
            line.draw(renderer)

        renderer.draw_rectangle(rect, edge_col=color.get(rc['axes.edgecolor']),
                                lw=util.points(rc['axes.linewidth'], res))
        self._draw_ticks(renderer, rect, x_ticks, y_ticks)
        self._draw_labels(renderer, rect)
        if self.legend_visible:
            self._draw_legend(renderer, rect)

    @staticmethod
    def _ticks(lim, dev_length, res):
        a, b = sorted(lim)
        if dev_length <= 0 or not (math.isfinite(a) and math.isfinite(b)):
            return [], []
        opt_dist = util.convert_dim('2cm', res)
        return scale.Linear().ticks_for_length(a, b, dev_length, opt_dist)

    def _draw_grid(self, renderer, rect, x_ticks, y_ticks):
        rc = config.rcParams
        if rc['grid.linestyle'] == styles.LineStyle.NONE:
            return
        lw = util.points(rc['grid.linewidth'], renderer.res)
        col = color.get(rc['grid.color'])
        dash = styles.dash_pattern(rc['grid.linestyle'], lw)

        rx, ry, rw, rh = rect
        xt, yt = self.data_to_device(x_ticks[0], y_ticks[0], renderer)
        xx = []
        yy = []
        for xi in xt:
            xx.extend([xi, xi, np.nan])
            yy.extend([ry, ry + rh, np.nan])
        for yi in yt:
            xx.extend([rx, rx + rw, np.nan])
            yy.extend([yi, yi, np.nan])
        if xx:
            renderer.draw_lines(xx, yy, col=col, lw=lw, dash=dash, clip=rect)

    def _draw_ticks(self, renderer, rect, x_ticks, y_ticks):
        rc = config.rcParams
        res = renderer.res
        col = color.get(rc['axes.edgecolor'])
        text_col = color.get(rc['text.color'])
        lw = util.points(rc['axes.linewidth'], res)
        label_dist = util.points(3, res)

        rx, ry, _, _ = rect
        xt, yt = self.data_to_device(x_ticks[0], y_ticks[0], renderer)

        x_len = util.points(rc['xtick.major.size'], res)
        x_size = util.points(rc['xtick.labelsize'], res)
        xx = []
        yy = []
        for xi, label in zip(xt, x_ticks[1]):
            xx.extend([xi, xi, np.nan])
            yy.extend([ry, ry - x_len, np.nan])
            renderer.draw_text(xi, ry - x_len - label_dist, label,
                               size=x_size, col=text_col,
                               horizontal_align="center",
                               vertical_align="top")

        y_len = util.points(rc['ytick.major.size'], res)
        y_size = util.points(rc['ytick.labelsize'], res)
        for yi, label in zip(yt, y_ticks[1]):
            xx.extend([rx, rx - y_len, np.nan])
            yy.extend([yi, yi, np.nan])
            renderer.draw_text(rx - y_len - label_dist, yi, label,
                               size=y_size, col=text_col,
                               horizontal_align="right",
                               vertical_align="center")

        if xx:
            renderer.draw_lines(xx, yy, col=col, lw=lw)

    def _draw_labels(self, renderer, rect):
        rc = config.rcParams
        res = renderer.res
        col = color.get(rc['text.color'])
        rx, ry, rw, rh = rect

        if self.title:
            renderer.draw_text(rx + rw/2, ry + rh + util.points(6, res),
                               self.title,
                               size=util.points(rc['axes.titlesize'], res),
                               col=col, horizontal_align="center",
                               vertical_align="bottom")

        label_size = util.points(rc['axes.labelsize'], res)
        if self.xlabel:
            renderer.draw_text(rx + rw/2, ry - util.convert_dim('7mm', res),
                               self.xlabel, size=label_size, col=col,
                               horizontal_align="center",
                               vertical_align="top")
        if self.ylabel:
            renderer.draw_text(rx - util.convert_dim('10mm', res), ry + rh/2,
                               self.ylabel, size=label_size, col=col,
                               horizontal_align="center",
                               vertical_align="bottom", rotate=math.pi/2)

    def _draw_legend(self, renderer, rect):
        entries = self._legend_lines()
        if not entries:
            return

        rc = config.rcParams
        res = renderer.res
        font_size = util.points(rc['legend.fontsize'], res)
        pad = util.points(5, res)
        sample = util.points(20, res)
        row = 1.4 * font_size

        text_w = max(renderer.text_width(line.label, font_size)
                     for line in entries)
        w = 3*pad + sample + text_w
        h = 2*pad + len(entries) * row
        rx, ry, rw, rh = rect
        bx = rx + rw - w - pad
        by = ry + rh - h - pad
        renderer.draw_rectangle([bx, by, w, h],
                                fill_col=color.get(rc['legend.facecolor']),
                                edge_col=color.get(rc['legend.edgecolor']),
                                lw=util.points(.8, res))

        text_col = color.get(rc['text.color'])
        for i, line in enumerate(entries):
            yi = by + h - pad - (i + .5) * row
            line.draw_sample(renderer, [bx + pad, bx + pad + sample], [yi, yi])
            renderer.draw_text(bx + 2*pad + sample, yi, line.label,
                               size=font_size, col=text_col,
                               vertical_align="center")


def _positive(value, name):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise errors.InvalidArgument(f"invalid {name} {value!r}") from None
    if not value > 0:
        raise errors.InvalidArgument(f"{name} must be positive, not {value!r}")
    return value


def _file_type(filename, format):
    if format is None and isinstance(filename, str):
        _, ext = os.path.splitext(filename)
        if ext:
            format = ext[1:]
    if format is None:
        format = config.rcParams['savefig.format']
    file_type = format.lower().lstrip('.')
    if file_type not in cairo_renderer.FILE_TYPES:
        raise errors.InvalidArgument(f'unsupported file type "{format}"')
    return file_type


def _check_lim(lo, hi):
    if hi is None and lo is not None and not np.isscalar(lo):
        lo, hi = util.check_vec(lo, 2)
    lo = _finite_or_none(lo)
    hi = _finite_or_none(hi)
    if lo is not None and lo == hi:
        raise errors.InvalidArgument(f"empty data range [{lo}, {hi}]")
    return (lo, hi)


def _finite_or_none(value):
    if value is None:
        return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise errors.InvalidArgument(f"invalid axis limit {value!r}") from None
    if not math.isfinite(value):
        raise errors.InvalidArgument(f"axis limit must be finite, not {value}")
    return value


def _auto_range(data):
    try:
        a, b = util.data_range(*data)
    except ValueError:
        return (0.0, 1.0)
    a = float(a)
    b = float(b)
    if a == b:
        return (a - .5, b + .5)
    margin = .05 * (b - a)
    return (a - margin, b + margin)
