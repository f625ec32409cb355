"""Tests for contentkit.errors."""

from contentkit.errors import (
    AlreadyExistsError,
    BadStateError,
    ContentKitError,
    HandlerError,
    InvalidArgumentError,
    InvalidArgumentValue,
    NotFoundError,
)


def test_content_kit_error_is_exception() -> None:
    assert issubclass(ContentKitError, Exception)


def test_all_errors_derive_from_base() -> None:
    for error_class in (InvalidArgumentError, NotFoundError, BadStateError, HandlerError):
        assert issubclass(error_class, ContentKitError)


def test_invalid_value_and_already_exists_are_invalid_argument_errors() -> None:
    assert issubclass(InvalidArgumentValue, InvalidArgumentError)
    assert issubclass(AlreadyExistsError, InvalidArgumentError)


def test_invalid_argument_carries_attributes() -> None:
    err = InvalidArgumentError("local_file", "file does not exist")
    assert err.argument_name == "local_file"
    assert err.reason == "file does not exist"
    assert "local_file" in str(err)


def test_invalid_argument_value_names_field_and_struct() -> None:
    err = InvalidArgumentValue("size", -1, "BinaryFileCreateStruct")
    assert err.argument_name == "size"
    assert err.value == -1
    assert err.what == "BinaryFileCreateStruct"
    msg = str(err)
    assert "size" in msg
    assert "-1" in msg
    assert "BinaryFileCreateStruct" in msg


def test_invalid_argument_value_without_struct() -> None:
    err = InvalidArgumentValue("binary_file_id", "")
    assert err.what is None
    assert "binary_file_id" in str(err)


def test_already_exists_message() -> None:
    err = AlreadyExistsError("identifier", "news")
    assert err.value == "news"
    assert "news" in str(err)


def test_not_found_carries_identifier() -> None:
    err = NotFoundError("BinaryFile", "abc123")
    assert err.what == "BinaryFile"
    assert err.identifier == "abc123"
    assert "abc123" in str(err)


def test_bad_state_message() -> None:
    err = BadStateError("section", "still assigned to 2 contents")
    assert err.argument_name == "section"
    assert "still assigned" in str(err)
