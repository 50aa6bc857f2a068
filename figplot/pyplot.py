# pyplot.py - a procedural interface to figplot
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

"""The Procedural Interface
------------------------

The functions in this module operate on an implicit "current figure",
which is created on first use::

    import figplot.pyplot as plt

    plt.plot([1, 2, 3], [1, 4, 9], 'r-o', label='squares')
    plt.title('Squares')
    plt.legend()
    plt.savefig('squares.pdf')

The current figure is kept in a :py:class:`Session`.  Each thread has
its own stack of sessions, and :py:func:`use_session` makes a session
current for the duration of a ``with`` block::

    with plt.use_session() as session:
        plt.plot(x, y)
        fig = session.gcf()

"""

import contextlib
import logging
import threading

from . import errors
from . import styles
from .figure import Figure

logger = logging.getLogger(__name__)


class Session:

    """Holder of the current figure and axes for the procedural
    interface.

    All module-level functions of :py:mod:`figplot.pyplot` are also
    available as methods of this class.

    """

    def __init__(self):
        self._figure = None
        self._axes = None

    def figure(self, figsize=None, dpi=None, **kwargs):
        """Create a new figure and make it current."""
        fig = Figure(figsize, dpi, **kwargs)
        self._figure = fig
        self._axes = None
        return fig

    def gcf(self):
        """Return the current figure, creating one if needed."""
        if self._figure is None:
            self.figure()
        return self._figure

    def gca(self):
        """Return the current axes of the current figure.

        These are the axes most recently created by :py:meth:`subplot`
        or selected with :py:meth:`sca`, otherwise the first axes of the
        figure.  If the figure has no axes, a 1x1 subplot is created.

        """
        fig = self.gcf()
        ax = self._axes
        if ax is not None and ax.figure is fig:
            return ax
        if fig.axes:
            ax = fig.axes[0]
        else:
            ax = fig.add_subplot(1, 1, 0)
        self._axes = ax
        return ax

    def sca(self, ax):
        """Make `ax` and its figure current."""
        if ax.figure is None:
            raise errors.InvalidArgument(f"{ax} does not belong to a figure")
        self._figure = ax.figure
        self._axes = ax

    def clf(self):
        """Remove all axes from the current figure."""
        if self._figure is not None:
            self._figure.clear()
        self._axes = None

    def close(self):
        """Forget the current figure."""
        self._figure = None
        self._axes = None

    def savefig(self, filename, format=None, dpi=None):
        """Save the current figure, see :py:meth:`figplot.figure.Figure.save`."""
        self.gcf().save(filename, format=format, dpi=dpi)

    def subplot(self, nrows, ncols, index=None):
        """Add axes in cell `index` of a `nrows` x `ncols` grid to the
        current figure and make them current.

        See :py:meth:`figplot.figure.Figure.add_subplot` for details.

        """
        ax = self.gcf().add_subplot(nrows, ncols, index)
        self._axes = ax
        return ax

    def plot(self, x, y=None, fmt=None, *, label=None, **kwargs):
        """Plot a line on the current axes.

        See :py:meth:`figplot.figure.Axes.plot` for details.

        """
        return self.gca().plot(x, y, fmt, label=label, **kwargs)

    def scatter(self, x, y, s=20, c=None, marker=styles.MarkerStyle.CIRCLE,
                label=None):
        return self.gca().scatter(x, y, s=s, c=c, marker=marker, label=label)

    def title(self, s):
        self.gca().title = s

    def xlabel(self, s):
        self.gca().xlabel = s

    def ylabel(self, s):
        self.gca().ylabel = s

    def legend(self):
        return self.gca().legend()

    def grid(self, visible=True):
        self.gca().grid(visible)

    def xlim(self, left=None, right=None):
        """Set the horizontal range of the current axes, if any argument
        is given, and return the range in use.

        """
        ax = self.gca()
        if left is not None or right is not None:
            ax.set_xlim(left, right)
        return ax.get_xlim()

    def ylim(self, bottom=None, top=None):
        """Vertical version of :py:meth:`xlim`."""
        ax = self.gca()
        if bottom is not None or top is not None:
            ax.set_ylim(bottom, top)
        return ax.get_ylim()


_LOCAL = threading.local()


def _session_stack():
    stack = getattr(_LOCAL, 'stack', None)
    if stack is None:
        stack = [Session()]
        _LOCAL.stack = stack
    return stack


def get_session():
    """Return the session used by the module-level functions in the
    calling thread.

    """
    return _session_stack()[-1]


@contextlib.contextmanager
def use_session(session=None):
    """Make `session` current inside a ``with`` block.

    If `session` is omitted, a fresh session is used.

    """
    if session is None:
        session = Session()
    stack = _session_stack()
    stack.append(session)
    logger.debug("entering session, depth %d", len(stack))
    try:
        yield session
    finally:
        for i in range(len(stack) - 1, 0, -1):
            if stack[i] is session:
                del stack[i]
                break


def figure(figsize=None, dpi=None, **kwargs):
    return get_session().figure(figsize, dpi, **kwargs)


def gcf():
    return get_session().gcf()


def gca():
    return get_session().gca()


def sca(ax):
    get_session().sca(ax)


def clf():
    get_session().clf()


def close():
    get_session().close()


def savefig(filename, format=None, dpi=None):
    get_session().savefig(filename, format=format, dpi=dpi)


def subplot(nrows, ncols, index=None):
    return get_session().subplot(nrows, ncols, index)


def plot(x, y=None, fmt=None, *, label=None, **kwargs):
    return get_session().plot(x, y, fmt, label=label, **kwargs)


def scatter(x, y, s=20, c=None, marker=styles.MarkerStyle.CIRCLE, label=None):
    return get_session().scatter(x, y, s=s, c=c, marker=marker, label=label)


def title(s):
    get_session().title(s)


def xlabel(s):
    get_session().xlabel(s)


def ylabel(s):
    get_session().ylabel(s)


def legend():
    return get_session().legend()


def grid(visible=True):
    get_session().grid(visible)


def xlim(left=None, right=None):
    return get_session().xlim(left, right)


def ylim(bottom=None, top=None):
    return get_session().ylim(bottom, top)
