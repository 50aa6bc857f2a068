"""Backends
--------

A backend decides which renderer :py:meth:`figplot.figure.Figure.save`
uses.  The ``cairo`` backend writes files, the ``null`` backend draws
into a :py:class:`figplot.renderer.RecordingRenderer` and writes
nothing.

"""

from . import cairo_renderer
from . import errors
from . import renderer

BACKENDS = ('cairo', 'null')
DEFAULT_BACKEND = 'cairo'


def new_renderer(backend, target, file_type):
    if backend == 'cairo':
        return cairo_renderer.CairoRenderer(target, file_type)
    if backend == 'null':
        return renderer.RecordingRenderer()
    raise errors.InvalidArgument(f"unknown backend {backend!r}")
