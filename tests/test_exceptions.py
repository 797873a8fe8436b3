from subreflow.exceptions import (
    ConfigurationError,
    CueNotFoundError,
    DocumentFormatError,
    ErrorCategory,
    SubReflowError,
    TimecodeError,
)


def test_defaults_and_labels() -> None:
    err = SubReflowError("boom")
    assert err.category == ErrorCategory.RUNTIME
    assert err.exit_code == 1
    assert err.label() == "Runtime error"
    assert str(err) == "boom"


def test_configuration_error_category_and_code() -> None:
    err = ConfigurationError("config oops")
    assert err.category == ErrorCategory.CONFIG
    assert err.exit_code == 2
    assert err.label() == "Configuration error"


def test_input_errors_share_category_and_code() -> None:
    for err in (DocumentFormatError("bad doc"), TimecodeError("bad time"), CueNotFoundError("no cue")):
        assert err.category == ErrorCategory.INPUT
        assert err.exit_code == 4
        assert err.label() == "Input error"


def test_exit_code_passthrough() -> None:
    err = DocumentFormatError("bad doc", exit_code=9)
    assert err.exit_code == 9


def test_builtin_bases_are_kept() -> None:
    assert isinstance(TimecodeError("x"), ValueError)
    assert isinstance(CueNotFoundError("x"), IndexError)
