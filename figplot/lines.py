# lines.py - implementation of the Line2D class
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

"""The Line2D class
----------------

A `Line2D` holds a sequence of vertices in data coordinates, together
with the style used to draw the line and its markers.  Lines are drawn
once they are attached to an :py:class:`figplot.figure.Axes`.

"""

from . import artist
from . import color
from . import config
from . import errors
from . import styles
from . import util


class Line2D(artist.Artist):

    """A line through the points ``(x[i], y[i])``.

    Style arguments which are not given are taken from the ``lines.*``
    entries of :py:data:`figplot.config.rcParams`.

    Args:
        x (array with ``shape=(n,)``): horizontal coordinates.
        y (array with ``shape=(n,)``): vertical coordinates.
        color: the line color, see :py:mod:`figplot.color`.
        linewidth (number): the line width in points.
        linestyle (LineStyle or str): how to draw the line.
        marker (MarkerStyle or str): which marker to draw at the vertices.
        markersize (number): marker size in points.
        markercolor: the marker color.
        label (str, optional): the legend label.
        zorder (int): the stacking order within the axes.

    """

    def __init__(self, x, y, *, color=None, linewidth=None, linestyle=None,
                 marker=None, markersize=None, markercolor=None, label=None,
                 zorder=2, visible=True):
        super().__init__(visible=visible, zorder=zorder, label=label)
        rc = config.rcParams

        self._x, self._y = self._convert(x, y)
        self.axes = None
        """The Axes this line is attached to, or ``None``."""

        self.color = rc['lines.color'] if color is None else color
        self.linewidth = rc['lines.linewidth'] if linewidth is None else linewidth
        self.linestyle = rc['lines.linestyle'] if linestyle is None else linestyle
        self.marker = rc['lines.marker'] if marker is None else marker
        self.markersize = (rc['lines.markersize']
                           if markersize is None else markersize)
        self.markercolor = (rc['lines.markercolor']
                            if markercolor is None else markercolor)

    def __str__(self):
        tmpl = "<Line2D %d points%s>"
        label = f" {self.label!r}" if self.label else ""
        return tmpl % (len(self._x), label)

    @staticmethod
    def _convert(x, y):
        x, y = util.check_coords(x, y)
        x.setflags(write=False)
        y.setflags(write=False)
        return x, y

    @property
    def x_data(self):
        """The horizontal coordinates, as a read-only numpy array."""
        return self._x

    @property
    def y_data(self):
        """The vertical coordinates, as a read-only numpy array."""
        return self._y

    def set_data(self, x, y):
        """Replace the vertices of the line.

        Both sequences must have the same length.  If they don't, an
        exception is raised and the line keeps its previous data.

        """
        self._x, self._y = self._convert(x, y)

    @property
    def color(self):
        return self._color

    @color.setter
    def color(self, value):
        self._color = color.get(value)

    @property
    def markercolor(self):
        return self._markercolor

    @markercolor.setter
    def markercolor(self, value):
        self._markercolor = color.get(value)

    @property
    def linestyle(self):
        return self._linestyle

    @linestyle.setter
    def linestyle(self, value):
        self._linestyle = styles.LineStyle.parse(value)

    @property
    def marker(self):
        return self._marker

    @marker.setter
    def marker(self, value):
        self._marker = styles.MarkerStyle.parse(value)

    @property
    def linewidth(self):
        return self._linewidth

    @linewidth.setter
    def linewidth(self, value):
        self._linewidth = _non_negative(value, 'linewidth')

    @property
    def markersize(self):
        return self._markersize

    @markersize.setter
    def markersize(self, value):
        self._markersize = _non_negative(value, 'markersize')

    def draw(self, renderer):
        if not self.visible or self.axes is None:
            return
        x, y = self.axes.data_to_device(self._x, self._y, renderer)
        clip = self.axes.device_rect(renderer)
        self.draw_sample(renderer, x, y, clip=clip)

    def draw_sample(self, renderer, x, y, *, clip=None):
        """Draw the line and markers through the device coordinates
        ``(x[i], y[i])``.

        This is also used to draw the line samples in legends.

        """
        if self._linestyle != styles.LineStyle.NONE and self._linewidth > 0:
            lw = util.points(self._linewidth, renderer.res)
            dash = styles.dash_pattern(self._linestyle, lw)
            renderer.draw_lines(x, y, col=self._color, lw=lw, dash=dash,
                                clip=clip)
        if self._marker != styles.MarkerStyle.NONE and self._markersize > 0:
            size = util.points(self._markersize, renderer.res)
            renderer.draw_markers(x, y, self._marker, size,
                                  col=self._markercolor, clip=clip)


def _non_negative(value, name):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise errors.InvalidArgument(f"invalid {name} {value!r}") from None
    if value < 0:
        raise errors.InvalidArgument(f"{name} must not be negative")
    return value
