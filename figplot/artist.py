# artist.py - the base class for everything which can be drawn
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

"""The Artist class
----------------

All objects which can be drawn onto a renderer, *i.e.* figures, axes
and lines, derive from the `Artist` class.

"""

import abc
import uuid


class Artist(abc.ABC):

    """Base class for all drawable objects.

    Args:
        visible (bool): whether the artist is drawn.
        zorder (int): the stacking order; artists with lower values are
            drawn first.
        label (str, optional): a label for the artist, shown in legends.

    """

    def __init__(self, *, visible=True, zorder=0, label=None):
        self._id = uuid.uuid4()
        self.visible = visible
        self.zorder = zorder
        self.label = label
        self._properties = {}

    @property
    def id(self):
        """A unique identifier for the artist (read only)."""
        return self._id

    @abc.abstractmethod
    def draw(self, renderer):
        """Draw the artist using `renderer`."""

    def set_property(self, name, value):
        """Store an arbitrary value under the key `name`."""
        self._properties[name] = value

    def get_property(self, name, default=None):
        """Return the value stored under `name`, or `default` if there is
        no such value.

        """
        return self._properties.get(name, default)

    def properties(self):
        """Return a copy of all stored properties."""
        return dict(self._properties)


def by_zorder(artists):
    """Return `artists` sorted by ascending z-order.

    Artists with equal z-order keep their relative order.

    """
    return sorted(artists, key=lambda a: a.zorder)
