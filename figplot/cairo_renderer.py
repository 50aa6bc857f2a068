# cairo_renderer.py - write figures to files using Cairo
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

"""The Cairo Renderer
------------------

The `CairoRenderer` class draws figures into PDF, PostScript,
encapsulated PostScript, SVG or PNG files.

"""

import math

import numpy as np

import cairocffi as cairo

from . import errors
from . import renderer
from . import styles

FILE_TYPES = ('png', 'pdf', 'ps', 'eps', 'svg')


class CairoRenderer(renderer.Renderer):

    """A renderer which writes to a file.

    Args:
        target (string or file object): The name of the output file,
            or a binary file object.  Any previously existing file
            with this name will be overwritten.  The special name
            ``"/dev/null"`` draws into memory and writes nothing.
        file_type (string): One of ``png``, ``pdf``, ``ps``, ``eps``
            and ``svg``.

    """

    def __init__(self, target, file_type):
        super().__init__()
        if file_type not in FILE_TYPES:
            raise errors.InvalidArgument(f'unsupported file type "{file_type}"')
        self.target = target
        self.file_type = file_type
        self.surface = None
        self.ctx = None

    def __str__(self):
        return f'<CairoRenderer {self.file_type} {self.target!r}>'

    def begin(self, width, height, res):
        super().begin(width, height, res)

        if self.file_type == 'png':
            base_res = res
        else:
            base_res = 72
        q = base_res / res
        w_dev = max(int(width * q + .5), 1)
        h_dev = max(int(height * q + .5), 1)

        target = self.target
        try:
            if target == "/dev/null":
                surface = cairo.RecordingSurface(cairo.CONTENT_COLOR_ALPHA,
                                                 (0, 0, w_dev, h_dev))
            elif self.file_type == 'pdf':
                surface = cairo.PDFSurface(target, w_dev, h_dev)
            elif self.file_type == 'ps':
                surface = cairo.PSSurface(target, w_dev, h_dev)
            elif self.file_type == 'eps':
                surface = cairo.PSSurface(target, w_dev, h_dev)
                surface.set_eps(True)
            elif self.file_type == 'svg':
                surface = cairo.SVGSurface(target, w_dev, h_dev)
            else:
                surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, w_dev, h_dev)
        except (OSError, cairo.CairoError) as exc:
            raise errors.IOFailure(f"cannot create {target!r}: {exc}") from exc
        ctx = cairo.Context(surface)

        # move the origin to the bottom left corner:
        ctx.scale(q, -q)
        ctx.translate(0, -height)
        ctx.set_line_join(cairo.LINE_JOIN_ROUND)
        ctx.set_line_cap(cairo.LINE_CAP_ROUND)

        self.surface = surface
        self.ctx = ctx

    def finish(self):
        """Write all outstanding changes to the file.  The renderer cannot
        be used any more after this call.

        """
        if self.surface is None:
            return
        try:
            if self.file_type == 'png' and self.target != "/dev/null":
                self.surface.write_to_png(self.target)
            else:
                self.surface.finish()
        except (OSError, cairo.CairoError) as exc:
            raise errors.IOFailure(
                f"cannot write {self.target!r}: {exc}") from exc
        finally:
            self.surface = None
            self.ctx = None

    def _clip(self, clip):
        if clip is not None:
            self.ctx.rectangle(*clip)
            self.ctx.clip()

    def draw_rectangle(self, rect, *, fill_col=None, edge_col=None, lw=0):
        ctx = self.ctx
        ctx.save()
        ctx.rectangle(*rect)
        if fill_col is not None and fill_col[3] > 0:
            ctx.set_source_rgba(*fill_col)
            ctx.fill_preserve()
        if edge_col is not None and edge_col[3] > 0 and lw > 0:
            ctx.set_line_width(lw)
            ctx.set_line_join(cairo.LINE_JOIN_MITER)
            ctx.set_source_rgba(*edge_col)
            ctx.stroke()
        ctx.new_path()
        ctx.restore()

    def draw_lines(self, x, y, *, col, lw, dash=(), clip=None):
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)

        ctx = self.ctx
        ctx.save()
        self._clip(clip)
        ctx.set_line_width(lw)
        ctx.set_source_rgba(*col)
        ctx.set_dash(list(dash))
        nan = np.logical_or(np.isnan(x), np.isnan(y)).nonzero()[0]
        nan = [-1] + list(nan) + [len(x)]
        for j in range(1, len(nan)):
            i0 = nan[j-1] + 1
            i1 = nan[j]
            if i0 >= i1:
                continue
            ctx.move_to(x[i0], y[i0])
            if i1 == i0+1:
                # only one vertex, so draw a point instead of a line
                ctx.line_to(x[i0], y[i0])
                continue
            for i in range(i0+1, i1):
                ctx.line_to(x[i], y[i])
        ctx.stroke()
        ctx.restore()

    def draw_markers(self, x, y, marker, size, *, col, clip=None):
        marker = styles.MarkerStyle.parse(marker)
        if marker == styles.MarkerStyle.NONE:
            return
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)

        ctx = self.ctx
        ctx.save()
        self._clip(clip)
        ctx.set_source_rgba(*col)
        ctx.set_dash([])
        r = size / 2
        stroked = marker in (styles.MarkerStyle.PLUS, styles.MarkerStyle.CROSS)
        if stroked:
            ctx.set_line_width(max(size / 8, 1))
            ctx.set_line_cap(cairo.LINE_CAP_BUTT)
        for xi, yi in zip(x, y):
            if not (np.isfinite(xi) and np.isfinite(yi)):
                continue
            _marker_path(ctx, marker, xi, yi, r)
        if stroked:
            ctx.stroke()
        else:
            ctx.fill()
        ctx.restore()

    def draw_text(self, x, y, text, *, size, col, horizontal_align="start",
                  vertical_align="baseline", rotate=0):
        ctx = self.ctx
        ctx.save()
        ctx.set_font_matrix(cairo.Matrix(size, 0, 0, -size, 0, 0))

        ext = ctx.text_extents(text)
        if horizontal_align == "start":
            x_offs = 0
        elif horizontal_align == "end":
            x_offs = -ext[4]
        elif horizontal_align == "left":
            x_offs = -ext[0]
        elif horizontal_align == "right":
            x_offs = -ext[0] - ext[2]
        elif horizontal_align == "center":
            x_offs = -ext[0] - .5 * ext[2]
        else:
            raise errors.InvalidArgument(
                f"invalid horizontal alignment {horizontal_align!r}")
        ascent, descent, _, _, _ = ctx.font_extents()
        if vertical_align == "baseline":
            y_offs = 0
        elif vertical_align == "top":
            y_offs = -ascent
        elif vertical_align == "bottom":
            y_offs = descent
        elif vertical_align == "center":
            y_offs = (descent - ascent) / 2
        else:
            raise errors.InvalidArgument(
                f"invalid vertical alignment {vertical_align!r}")

        ctx.set_source_rgba(*col)
        ctx.move_to(x, y)
        ctx.rotate(rotate)
        ctx.rel_move_to(x_offs, y_offs)
        ctx.show_text(text)
        ctx.restore()

    def text_width(self, text, size):
        self.ctx.save()
        self.ctx.set_font_matrix(cairo.Matrix(size, 0, 0, -size, 0, 0))
        ext = self.ctx.text_extents(text)
        self.ctx.restore()
        return ext[2]


def _marker_path(ctx, marker, x, y, r):
    M = styles.MarkerStyle
    if marker == M.POINT:
        ctx.new_sub_path()
        ctx.arc(x, y, r / 2, 0, 2 * math.pi)
    elif marker == M.CIRCLE:
        ctx.new_sub_path()
        ctx.arc(x, y, r, 0, 2 * math.pi)
    elif marker == M.SQUARE:
        ctx.rectangle(x - r, y - r, 2 * r, 2 * r)
    elif marker == M.DIAMOND:
        ctx.move_to(x, y - r)
        ctx.line_to(x + r, y)
        ctx.line_to(x, y + r)
        ctx.line_to(x - r, y)
        ctx.close_path()
    elif marker == M.TRIANGLE:
        h = r * math.sqrt(3) / 2
        ctx.move_to(x, y + r)
        ctx.line_to(x + h, y - r / 2)
        ctx.line_to(x - h, y - r / 2)
        ctx.close_path()
    elif marker == M.PLUS:
        ctx.move_to(x - r, y)
        ctx.line_to(x + r, y)
        ctx.move_to(x, y - r)
        ctx.line_to(x, y + r)
    elif marker == M.CROSS:
        d = r / math.sqrt(2)
        ctx.move_to(x - d, y - d)
        ctx.line_to(x + d, y + d)
        ctx.move_to(x - d, y + d)
        ctx.line_to(x + d, y - d)
    elif marker == M.STAR:
        for k in range(10):
            rk = r if k % 2 == 0 else r * .4
            phi = math.pi / 2 + k * math.pi / 5
            op = ctx.move_to if k == 0 else ctx.line_to
            op(x + rk * math.cos(phi), y + rk * math.sin(phi))
        ctx.close_path()
