import logging

import pytest

from gridpath.config import (
    ANIMATION_DELAY_MS,
    DEFAULT_TOLERANCE,
    GRID_SIZE,
    Settings,
    resolve_settings,
)


def test_defaults():
    s = resolve_settings(argv=[], environ={})
    assert s == Settings()
    assert s.grid_size == GRID_SIZE
    assert s.delay_ms == ANIMATION_DELAY_MS
    assert s.tolerance == DEFAULT_TOLERANCE
    assert s.numeric_log_level == logging.INFO


def test_environment_overrides_defaults():
    s = resolve_settings(argv=[], environ={
        "GRIDPATH_SIZE": "12",
        "GRIDPATH_DELAY_MS": "0",
        "GRIDPATH_LOG_LEVEL": "debug",
    })
    assert s.grid_size == 12
    assert s.delay_ms == 0
    assert s.log_level == "DEBUG"


def test_flags_override_environment():
    s = resolve_settings(argv=["--size=8", "--tolerance=1e-9", "--cell-size=30"],
                         environ={"GRIDPATH_SIZE": "12"})
    assert s.grid_size == 8
    assert s.tolerance == 1e-9
    assert s.cell_size == 30


def test_unrelated_arguments_are_ignored():
    s = resolve_settings(argv=["--mode=student", "-v", "positional"], environ={})
    assert s == Settings()


@pytest.mark.parametrize("argv,environ", [
    (["--size=1"], {}),
    (["--size=big"], {}),
    (["--delay-ms=-5"], {}),
    (["--tolerance=-1"], {}),
    (["--tolerance=nan"], {}),
    ([], {"GRIDPATH_LOG_LEVEL": "chatty"}),
    ([], {"GRIDPATH_CELL_SIZE": "2"}),
])
def test_invalid_values_raise(argv, environ):
    with pytest.raises(ValueError):
        resolve_settings(argv=argv, environ=environ)
