import dataclasses

import pytest

from errorplus.config import (
    Config,
    get_config,
    get_default_config,
    reset_config,
    update_config,
)


@pytest.fixture(autouse=True)
def _restore_config():
    reset_config()
    yield
    reset_config()


def test_default_values():
    cfg = get_default_config()
    assert cfg.trace_skip_first == 3
    assert cfg.trace_max_depth == 15
    assert cfg.trace_skip_last == 2
    assert cfg.separator == " | "
    assert cfg.show_trace and cfg.show_message and cfg.obscure_args


def test_current_equals_default_after_reset():
    assert get_config() == get_default_config()


def test_empty_config_clears_flags_but_keeps_guarded_values():
    default = get_default_config()
    update_config(Config())
    cfg = get_config()
    assert not any(
        [cfg.show_trace, cfg.show_message, cfg.show_tags, cfg.obscure_args, cfg.show_fn]
    )
    assert cfg.trace_max_depth == 0
    assert cfg.trace_skip_first == 0
    assert cfg.trace_skip_last == default.trace_skip_last
    assert cfg.time_format == default.time_format
    assert cfg.separator == default.separator


def test_negative_max_depth_is_ignored():
    default = get_default_config()
    update_config(dataclasses.replace(default, trace_max_depth=-1))
    assert get_config().trace_max_depth == default.trace_max_depth


def test_skip_last_at_or_above_max_depth_is_ignored():
    default = get_default_config()
    update_config(dataclasses.replace(default, trace_max_depth=4, trace_skip_last=4))
    cfg = get_config()
    assert cfg.trace_max_depth == 4
    assert cfg.trace_skip_last == default.trace_skip_last


def test_skip_last_within_range_is_set():
    default = get_default_config()
    update_config(dataclasses.replace(default, trace_skip_last=1))
    assert get_config().trace_skip_last == 1


def test_negative_skip_first_is_still_copied():
    default = get_default_config()
    update_config(dataclasses.replace(default, trace_skip_first=-5))
    assert get_config().trace_skip_first == -5


def test_separator_and_time_format_are_set_when_non_empty():
    default = get_default_config()
    update_config(dataclasses.replace(default, separator=" / ", time_format="%H:%M"))
    cfg = get_config()
    assert cfg.separator == " / "
    assert cfg.time_format == "%H:%M"


def test_default_snapshot_survives_updates():
    before = get_default_config()
    update_config(Config(separator="::"))
    assert get_default_config() == before
    assert get_config().separator == "::"


def test_reset_restores_defaults():
    update_config(Config(trace_max_depth=1, separator="x"))
    assert get_config() != get_default_config()
    reset_config()
    assert get_config() == get_default_config()


def test_config_is_immutable():
    cfg = get_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.show_trace = False
    assert cfg.show_trace is True
    assert get_config().show_trace is True