"""Tests for sqlbatch.exceptions."""

import pytest

from sqlbatch.exceptions import (
    InvalidNamedParameterPrefixError,
    LexicalError,
    MissingNamedParametersError,
    MissingPositionalParametersError,
    MixedParameterKindsError,
    ParameterError,
    SQLBatchError,
    StatementExecutionError,
    UnsupportedIndexedPositionalError,
    UnsupportedOperationError,
)


def test_base_error_message_and_detail() -> None:
    error = SQLBatchError("Test message")
    assert str(error) == "Test message"
    assert error.detail == "Test message"
    assert repr(error) == "SQLBatchError - Test message"


def test_base_error_without_detail() -> None:
    assert repr(SQLBatchError()) == "SQLBatchError"


@pytest.mark.parametrize(
    "error",
    [
        MixedParameterKindsError(),
        UnsupportedIndexedPositionalError("?1"),
        InvalidNamedParameterPrefixError("%x"),
        MissingPositionalParametersError(2, 1),
        MissingNamedParametersError(["a"]),
    ],
    ids=lambda error: type(error).__name__,
)
def test_parameter_errors_share_base(error: ParameterError) -> None:
    assert isinstance(error, ParameterError)
    assert isinstance(error, SQLBatchError)


def test_parameter_error_includes_sql() -> None:
    error = MissingPositionalParametersError(2, 0, sql="SELECT ?, ?")
    assert error.sql == "SELECT ?, ?"
    assert "SQL: SELECT ?, ?" in str(error)
    assert "needs 2, only 0 remaining" in str(error)


def test_mixed_kinds_default_message() -> None:
    assert "cannot mix positional and named parameters" in str(MixedParameterKindsError())


def test_missing_named_sorted() -> None:
    error = MissingNamedParametersError({"b", "a"})
    assert error.missing == ("a", "b")
    assert "missing named parameters: a, b" in str(error)


def test_lexical_error_position() -> None:
    error = LexicalError("unterminated literal", position=4)
    assert error.position == 4
    assert str(error) == "unterminated literal (position 4)"
    assert str(LexicalError()) == "Issues tokenizing SQL text."


def test_statement_execution_error() -> None:
    error = StatementExecutionError("no such table: t", sql="SELECT * FROM t")
    assert str(error) == "failed to execute SQL: SELECT * FROM t\nno such table: t"


def test_unsupported_operation() -> None:
    error = UnsupportedOperationError("begin")
    assert error.operation == "begin"
    assert str(error) == "begin method not implemented"
