import pytest

from errorplus.config import reset_config
from errorplus.errors import ErrorPlus, Severity
from errorplus.playground import (
    ERR_PROCESSING,
    encode_bytes_to_str,
    encode_str_to_bytes,
    main,
    pipeline,
    process,
)


@pytest.fixture(autouse=True)
def _restore_config():
    reset_config()
    yield
    reset_config()


def test_pipeline_success():
    assert pipeline("hello") == "hello"


def test_pipeline_too_long():
    with pytest.raises(ErrorPlus) as info:
        pipeline("this is a long string")
    assert str(info.value) == "input string is too long"


def test_pipeline_empty_input():
    with pytest.raises(ErrorPlus) as info:
        pipeline("")
    assert str(info.value) == "encoding error"
    assert isinstance(info.value.wrapped, ValueError)
    assert str(info.value.wrapped) == "input string is empty"


def test_pipeline_processing_failure():
    with pytest.raises(ErrorPlus) as info:
        pipeline("abc", always_fail=True)
    assert str(info.value) == "processing error"
    inner = info.value.wrapped
    assert isinstance(inner, ErrorPlus)
    assert inner.cause is ERR_PROCESSING


def test_encode_round_trip():
    data = encode_str_to_bytes("abc")
    assert data == b"abc"
    assert encode_bytes_to_str(data) == "abc"


def test_encode_str_empty_raises():
    with pytest.raises(ValueError, match="input string is empty"):
        encode_str_to_bytes("")


def test_encode_bytes_empty_is_critical():
    with pytest.raises(ErrorPlus) as info:
        encode_bytes_to_str(b"")
    assert info.value.severity is Severity.CRITICAL
    assert str(info.value) == "input byte slice is empty"


def test_process_passes_data_through():
    assert process(b"xy", False) == b"xy"


def test_main_prints_verbose_error(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("Error: this is a test error\n")
    assert "Trace:" in out