#! /usr/bin/env python3

import pytest

from . import errors
from . import param
from . import styles


def test_defaults():
    values = param.defaults()
    assert set(values) == param.VALID_KEYS
    assert values['figure.figsize'] == (8.0, 6.0)
    assert values['figure.dpi'] == 100.0
    assert values['lines.color'] == 'blue'
    assert values['lines.linewidth'] == 1.0
    assert values['lines.linestyle'] == styles.LineStyle.SOLID
    assert values['lines.marker'] == styles.MarkerStyle.NONE
    assert values['lines.markersize'] == 6.0
    assert values['backend'] == 'auto'

    for key, (kind, _, desc) in param.DEFAULT.items():
        assert '.' in key or key == 'backend'
        assert desc


def test_string_values():
    assert param.validate('axes.grid', 'yes') is True
    assert param.validate('axes.grid', 'Off') is False
    assert param.validate('lines.linewidth', '2.5') == 2.5
    assert param.validate('lines.linestyle', '--') == styles.LineStyle.DASHED
    assert param.validate('lines.marker', 'o') == styles.MarkerStyle.CIRCLE
    assert param.validate('figure.figsize', '4, 3') == (4.0, 3.0)
    w, h = param.validate('figure.figsize', '2.54cm, 72bp')
    assert w == pytest.approx(1) and h == pytest.approx(1)
    assert param.validate('savefig.dpi', 'figure') == 'figure'
    assert param.validate('savefig.dpi', '300') == 300.0
    assert param.validate('savefig.format', 'PDF') == 'pdf'
    assert param.validate('backend', 'Null') == 'null'
    assert param.validate('grid.color', ' #b0b0b0 ') == '#b0b0b0'


@pytest.mark.parametrize('key, value', [
    ('axes.grid', 'maybe'),
    ('figure.dpi', 0),
    ('figure.dpi', 'lots'),
    ('figure.figsize', (1, -1)),
    ('figure.figsize', 5),
    ('lines.color', 'nosuchcolor'),
    ('lines.linestyle', 'wavy'),
    ('lines.marker', 'Q'),
    ('savefig.format', 'gif'),
    ('backend', 'tk'),
    ('lines.linewidth', -1),
    ('lines.markersize', 'nan'),
    ('axes.linewidth', float('inf')),
    ('grid.linewidth', -0.5),
    ('legend.fontsize', -10),
    ('xtick.major.size', '-3'),
])
def test_invalid_values(key, value):
    with pytest.raises(errors.InvalidArgument):
        param.validate(key, value)


def test_invalid_name():
    with pytest.raises(errors.InvalidParameterName):
        param.validate('lines.colour', 'red')
    with pytest.raises(KeyError):
        param.validate('nonsense', 1)


def test_lengths():
    assert param.validate('lines.linewidth', 0) == 0.0
    assert param.validate('lines.markersize', '4.5') == 4.5
    for key, (kind, _, _) in param.DEFAULT.items():
        if kind == 'length':
            with pytest.raises(errors.InvalidArgument):
                param.validate(key, -1)
