# config.py - process-wide configuration settings
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

"""Configuration
-------------

The settings used by all figures are kept in the dictionary-like object
:py:data:`rcParams`.  Keys have the form ``group.name``, see
:py:data:`figplot.param.DEFAULT` for the list of valid keys.  Two
further dictionaries keep the built-in defaults
(:py:data:`rcParamsDefault`) and the settings in effect after start-up
(:py:data:`rcParamsOrig`); the latter include the settings from the
file named by the ``FIGPLOTRC`` environment variable, if any.

Configuration files contain one ``key : value`` pair per line.  A
``#`` starts a comment::

    lines.linewidth : 1.5      # thicker lines
    figure.figsize  : 12cm, 8cm

"""

import contextlib
import logging
import os

from . import backend
from . import errors
from . import param

logger = logging.getLogger(__name__)


class RcParams(dict):

    """A dictionary of configuration settings, which checks keys and
    values on assignment.

    """

    def __init__(self, *args, **kwargs):
        super().__init__()
        self.update(*args, **kwargs)

    def __setitem__(self, key, value):
        super().__setitem__(key, param.validate(key, value))

    def update(self, *args, **kwargs):
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key, default=None):
        if key not in self:
            self[key] = default
        return self[key]

    def copy(self):
        return RcParams(self)

    def __delitem__(self, key):
        raise errors.WrongUsage(f"cannot delete parameter '{key}'")


rcParamsDefault = RcParams(param.defaults())
rcParams = RcParams(rcParamsDefault)


def use(name, force=True):
    """Select the backend used for saving figures.

    Args:
        name (str): one of ``"cairo"``, ``"null"`` or ``"auto"``.
        force (bool): if true, an unknown backend name raises
            :py:class:`figplot.errors.InvalidArgument`.  Otherwise a
            warning is logged and the backend is left unchanged.

    """
    try:
        rcParams['backend'] = name
    except errors.InvalidArgument:
        if force:
            raise
        logger.warning("ignoring unknown backend %r, keeping %r",
                       name, rcParams['backend'])
        return
    logger.debug("backend set to %r", rcParams['backend'])


def get_backend(auto_select=True):
    """Return the name of the current backend.

    If the backend is still ``"auto"``, it is resolved to the default
    backend when `auto_select` is true.  Otherwise ``None`` is returned.

    """
    name = rcParams['backend']
    if name == 'auto':
        if not auto_select:
            return None
        name = backend.DEFAULT_BACKEND
        rcParams['backend'] = name
        logger.debug("automatically selected backend %r", name)
    return name


def rc(group, params=None, **kwargs):
    """Set several parameters of one group at once.

    The call ``rc('lines', linewidth=2, color='r')`` is equivalent to
    setting ``rcParams['lines.linewidth'] = 2`` and
    ``rcParams['lines.color'] = 'r'``.  `group` can also be a tuple of
    group names, to set the same values in several groups.  The short
    names listed in :py:data:`figplot.param.ALIASES` (e.g. ``lw``) can
    be used in place of the full names.

    """
    if isinstance(group, str):
        group = (group,)
    values = dict(params or {}, **kwargs)
    updates = {}
    for g in group:
        for name, value in values.items():
            name = param.ALIASES.get(name, name)
            updates[f'{g}.{name}'] = value
    # check everything first, so that an invalid entry changes nothing
    updates = {key: param.validate(key, value) for key, value in updates.items()}
    rcParams.update(updates)


def rc_defaults():
    """Restore all settings to the built-in defaults."""
    rcParams.update(rcParamsDefault)


def rc_file_defaults():
    """Restore all settings to the values in effect after start-up."""
    rcParams.update(rcParamsOrig)


def rc_params_from_file(filename):
    """Read a configuration file and return the valid settings found.

    Invalid lines, unknown keys and invalid values are skipped with a
    warning.

    """
    try:
        with open(filename, encoding='utf-8') as fd:
            lines = fd.readlines()
    except OSError as exc:
        raise errors.IOFailure(
            f"cannot read configuration file {filename!r}: {exc}") from exc

    res = {}
    for line_no, line in enumerate(lines, 1):
        line = line.split('#', 1)[0].strip()
        if not line:
            continue
        key, sep, value = line.partition(':')
        key = key.strip()
        value = value.strip()
        if not sep or not key:
            logger.warning("%s:%d: missing colon in %r", filename, line_no, line)
            continue
        try:
            res[key] = param.validate(key, value)
        except errors.InvalidParameterName:
            logger.warning("%s:%d: unknown parameter %r", filename, line_no, key)
        except errors.InvalidArgument as exc:
            logger.warning("%s:%d: %s", filename, line_no, exc)
    return res


def rc_file(filename, use_default_template=True):
    """Load settings from a configuration file.

    Args:
        filename (str): the name of the configuration file.
        use_default_template (bool): if true, all settings are reset
            to the built-in defaults before the file is applied.

    """
    values = rc_params_from_file(filename)
    if use_default_template:
        rc_defaults()
    rcParams.update(values)
    logger.info("loaded %d settings from %s", len(values), filename)


@contextlib.contextmanager
def rc_context(rc=None, filename=None):
    """Temporarily change settings.

    Inside the ``with`` block, the settings from `filename` and then
    the entries of the dictionary `rc` are in effect.  All settings are
    restored on exit, also if an exception occurred.

    Example::

        with rc_context({'lines.linewidth': 3}):
            plt.plot(x, y)
            plt.savefig('thick.pdf')

    """
    orig = dict(rcParams)
    try:
        if filename is not None:
            rcParams.update(rc_params_from_file(filename))
        if rc is not None:
            rcParams.update(rc)
        yield rcParams
    finally:
        dict.update(rcParams, orig)


def _load_startup_file():
    filename = os.environ.get('FIGPLOTRC')
    if not filename:
        return
    try:
        rcParams.update(rc_params_from_file(filename))
    except errors.IOFailure as exc:
        logger.warning("%s", exc)


_load_startup_file()
rcParamsOrig = RcParams(rcParams)
