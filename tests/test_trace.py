import dataclasses

import pytest

from errorplus.config import get_config, reset_config, update_config
from errorplus.trace import Trace, capture_trace, format_trace


@pytest.fixture(autouse=True)
def _restore_config():
    reset_config()
    yield
    reset_config()


def _frames(count):
    return [Trace(f"file{n}.py", f"pkg.fn{n}", n) for n in range(count)]


def test_trace_str():
    t = Trace("main.py", "pkg.run", 12)
    assert str(t) == "func: pkg.run at: main.py line: 12"
    assert t.line_str() == "12"


def test_capture_starts_with_itself_then_caller():
    frames = capture_trace()
    assert frames[0].function.endswith(".capture_trace")
    assert frames[1].function.endswith(".test_capture_starts_with_itself_then_caller")
    assert frames[1].file == __file__


def test_capture_respects_max_depth():
    update_config(dataclasses.replace(get_config(), trace_max_depth=4))
    frames = capture_trace()
    assert 0 < len(frames) <= 4


def test_capture_with_zero_depth_is_empty():
    update_config(dataclasses.replace(get_config(), trace_max_depth=0))
    assert capture_trace() == []


def test_format_trims_both_ends_with_defaults():
    frames = _frames(10)
    result = format_trace(frames)
    assert [t.line for t in result] == [3, 4, 5, 6, 7]


def test_format_short_list_keeps_head_when_not_longer_than_skip():
    frames = _frames(3)
    result = format_trace(frames)
    assert result == frames[:1]


def test_format_none_is_empty():
    assert format_trace(None) == []


def test_format_without_skips_keeps_everything():
    update_config(dataclasses.replace(get_config(), trace_skip_first=0, trace_skip_last=0))
    frames = _frames(6)
    assert format_trace(frames) == frames


def test_format_negative_skip_gives_empty():
    update_config(dataclasses.replace(get_config(), trace_skip_first=-1))
    assert format_trace(_frames(6)) == []


def test_format_returns_new_list():
    frames = _frames(10)
    result = format_trace(frames)
    result.clear()
    assert len(frames) == 10