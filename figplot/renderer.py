# renderer.py - the interface between artists and output devices
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

"""Renderers
---------

Artists draw themselves by calling the methods of a `Renderer`.  All
coordinates are device coordinates: the origin is in the bottom left
corner of the page, the vertical axis points upwards, and one inch
corresponds to `res` device units.  Colours are RGBA tuples, as
returned by :py:func:`figplot.color.get`.

"""

import collections

import numpy as np


class Renderer:

    """Base class for all renderers.

    Subclasses must implement the drawing methods.  The page size is
    set by :py:meth:`begin`, which must be called before anything is
    drawn.

    """

    def __init__(self):
        self.width = None
        """Page width in device units (read only)."""

        self.height = None
        """Page height in device units (read only)."""

        self.res = None
        """Device resolution, *i.e.* the number of device units per inch
        (read only)."""

    def begin(self, width, height, res):
        """Start a new page of size `width` x `height` device units."""
        self.width = width
        self.height = height
        self.res = res

    def finish(self):
        """Complete the page and write all outstanding output."""
        pass

    def draw_rectangle(self, rect, *, fill_col=None, edge_col=None, lw=0):
        raise NotImplementedError("draw_rectangle")

    def draw_lines(self, x, y, *, col, lw, dash=(), clip=None):
        """Draw a polygonal line through the vertices ``(x[i], y[i])``.

        Vertices where at least one of the coordinates is ``nan`` are
        ignored and the line is interrupted where such vertices occur.

        """
        raise NotImplementedError("draw_lines")

    def draw_markers(self, x, y, marker, size, *, col, clip=None):
        raise NotImplementedError("draw_markers")

    def draw_text(self, x, y, text, *, size, col, horizontal_align="start",
                  vertical_align="baseline", rotate=0):
        raise NotImplementedError("draw_text")

    def text_width(self, text, size):
        """Returns the width of the text bounding box."""
        raise NotImplementedError("text_width")


Primitive = collections.namedtuple('Primitive', ['kind', 'params'])


class RecordingRenderer(Renderer):

    """A renderer which keeps a list of the primitives it receives.

    Nothing is written anywhere.  This is used by the ``null`` backend
    and is convenient for inspecting what a figure would draw.

    """

    def __init__(self):
        super().__init__()
        self.primitives = []
        self.finished = False

    def __str__(self):
        return f'<RecordingRenderer {len(self.primitives)} primitives>'

    def finish(self):
        self.finished = True

    def of_kind(self, kind):
        """Return the recorded primitives of the given kind, in order."""
        return [p for p in self.primitives if p.kind == kind]

    def _record(self, kind, **params):
        self.primitives.append(Primitive(kind, params))

    def draw_rectangle(self, rect, *, fill_col=None, edge_col=None, lw=0):
        self._record('rectangle', rect=list(rect), fill_col=fill_col,
                     edge_col=edge_col, lw=lw)

    def draw_lines(self, x, y, *, col, lw, dash=(), clip=None):
        self._record('lines', x=np.array(x, dtype=float),
                     y=np.array(y, dtype=float), col=col, lw=lw,
                     dash=list(dash), clip=clip)

    def draw_markers(self, x, y, marker, size, *, col, clip=None):
        self._record('markers', x=np.array(x, dtype=float),
                     y=np.array(y, dtype=float), marker=marker, size=size,
                     col=col, clip=clip)

    def draw_text(self, x, y, text, *, size, col, horizontal_align="start",
                  vertical_align="baseline", rotate=0):
        self._record('text', x=x, y=y, text=text, size=size, col=col,
                     horizontal_align=horizontal_align,
                     vertical_align=vertical_align, rotate=rotate)

    def text_width(self, text, size):
        # rough estimate, there is no font to measure
        return .6 * size * len(text)
