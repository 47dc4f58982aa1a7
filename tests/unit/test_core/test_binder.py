"""Tests for per-statement parameter binding and batch preparation."""

import pytest

from sqlbatch.config import BatchConfig
from sqlbatch.core.binder import BoundStatement, StatementBinder, bind_statement, bind_statements, prepare_batch
from sqlbatch.core.parameters import Named, ParameterEntry, ParameterSet
from sqlbatch.exceptions import (
    MissingNamedParametersError,
    MissingPositionalParametersError,
    MixedParameterKindsError,
    UnsupportedIndexedPositionalError,
)


class TestPositionalBinding:
    def test_running_offset_across_statements(self) -> None:
        parameters = ParameterSet.from_values([10, 20])
        stmt = "INSERT INTO t VALUES (?)"

        first, offset = bind_statement(stmt, parameters, 0)
        assert first == ParameterSet.from_values([10])
        assert offset == 1

        second, offset = bind_statement(stmt, parameters, offset)
        assert second == ParameterSet.from_values([20])
        assert offset == 2

    def test_statement_without_markers_gets_empty_slice(self) -> None:
        stmt_parameters, offset = bind_statement("SELECT 1", ParameterSet.from_values([1, 2]), 1)
        assert stmt_parameters == ParameterSet.from_values()
        assert offset == 1

    def test_missing_positional_parameters(self) -> None:
        with pytest.raises(MissingPositionalParametersError) as exc_info:
            bind_statement("SELECT ?, ?", ParameterSet.from_values([1, 2, 3]), 2)
        assert exc_info.value.required == 2
        assert exc_info.value.available == 1
        assert exc_info.value.sql == "SELECT ?, ?"

    def test_empty_call_parameters(self) -> None:
        with pytest.raises(MissingPositionalParametersError):
            bind_statement("SELECT ?", ParameterSet.from_values(), 0)

    def test_positional_call_against_named_statement(self) -> None:
        """Names are not checked in lazy mode; the statement gets no values."""
        stmt_parameters, offset = bind_statement("SELECT :a", ParameterSet.from_values([1]), 0)
        assert stmt_parameters == ParameterSet.from_values()
        assert offset == 0

    def test_bind_statements(self) -> None:
        bound = bind_statements(
            ["INSERT INTO t VALUES (?, ?)", "SELECT 1", "UPDATE t SET a = ?"], ParameterSet.from_values(["a", "b", "c"])
        )
        assert [statement.parameters.positional for statement in bound] == [("a", "b"), (), ("c",)]


class TestNamedBinding:
    def test_extra_names_dropped(self) -> None:
        parameters = ParameterSet.from_mapping({"a": 1, "b": 2, "c": 3})
        stmt_parameters, _ = bind_statement("SELECT :a, @b", parameters)
        assert stmt_parameters == ParameterSet.from_mapping({"a": 1, "b": 2})

    def test_offset_advances_by_positional_count(self) -> None:
        _, offset = bind_statement("SELECT :a, ?", ParameterSet.from_mapping({"a": 1}), 3)
        assert offset == 4

    def test_missing_name_is_lazy_by_default(self) -> None:
        stmt_parameters, _ = bind_statement("SELECT :a, :b", ParameterSet.from_mapping({"a": 1}))
        assert stmt_parameters == ParameterSet.from_mapping({"a": 1})

    def test_missing_name_is_eager_in_strict_mode(self) -> None:
        with pytest.raises(MissingNamedParametersError) as exc_info:
            bind_statement("SELECT :a, :c, :b", ParameterSet.from_mapping({"a": 1}), strict_named_parameters=True)
        assert exc_info.value.missing == ("b", "c")
        assert exc_info.value.sql == "SELECT :a, :c, :b"

    def test_strict_mode_positional_call_against_named_statement(self) -> None:
        with pytest.raises(MissingNamedParametersError):
            bind_statement("SELECT :a", ParameterSet.from_values([1]), strict_named_parameters=True)

    def test_strict_mode_passes_complete_names(self) -> None:
        binder = StatementBinder(strict_named_parameters=True)
        stmt_parameters, _ = binder.bind("SELECT $a", ParameterSet.from_mapping({"a": 1, "z": 0}))
        assert stmt_parameters == ParameterSet.from_mapping({"a": 1})


class TestPrepareBatch:
    def test_positional_batch(self) -> None:
        bound = prepare_batch("INSERT INTO t VALUES (?); INSERT INTO t VALUES (?);", [10, 20])
        assert bound == [
            BoundStatement("INSERT INTO t VALUES (?)", ParameterSet.from_values([10])),
            BoundStatement("INSERT INTO t VALUES (?)", ParameterSet.from_values([20])),
        ]

    def test_named_batch(self) -> None:
        bound = prepare_batch("SELECT :a; SELECT :b, :a; SELECT 1", {"a": 1, "b": 2, "c": 3})
        assert [statement.parameters for statement in bound] == [
            ParameterSet.from_mapping({"a": 1}),
            ParameterSet.from_mapping({"b": 2, "a": 1}),
            ParameterSet.from_mapping({}),
        ]

    def test_no_parameters(self) -> None:
        bound = prepare_batch("CREATE TABLE t (id INTEGER); SELECT * FROM t")
        assert [statement.sql for statement in bound] == ["CREATE TABLE t (id INTEGER)", "SELECT * FROM t"]
        assert all(len(statement.parameters) == 0 for statement in bound)

    def test_bound_statement_unpacks(self) -> None:
        sql, parameters = prepare_batch("SELECT ?", [1])[0]
        assert sql == "SELECT ?"
        assert parameters == ParameterSet.from_values([1])

    def test_mixed_parameters_raise(self) -> None:
        with pytest.raises(MixedParameterKindsError):
            prepare_batch("SELECT ?, :a", [1, Named("a", 2)])

    def test_shortage_in_later_statement_fails_whole_batch(self) -> None:
        with pytest.raises(MissingPositionalParametersError) as exc_info:
            prepare_batch("SELECT ?; SELECT ?, ?", [1, 2])
        assert exc_info.value.sql == "SELECT ?, ?"

    def test_indexed_marker_fails_whole_batch(self) -> None:
        with pytest.raises(UnsupportedIndexedPositionalError):
            prepare_batch("SELECT ?; SELECT ?2", [1, 2])

    def test_strict_config(self) -> None:
        with pytest.raises(MissingNamedParametersError):
            prepare_batch("SELECT :a", {"b": 1}, BatchConfig(strict_named_parameters=True))

    def test_extra_positional_values_are_ignored(self) -> None:
        bound = prepare_batch("SELECT ?", [1, 2, 3])
        assert bound[0].parameters == ParameterSet.from_values([1])

    def test_caller_entry_ordinals_order_values(self) -> None:
        bound = prepare_batch("SELECT ?, ?", [ParameterEntry("b", ordinal=2), ParameterEntry("a", ordinal=1)])
        assert bound[0].parameters.positional == ("a", "b")

    def test_none_is_a_value_inside_a_list(self) -> None:
        bound = prepare_batch("INSERT INTO t VALUES (?)", [None])
        assert bound[0].parameters == ParameterSet.from_values([None])

    def test_scalar_is_a_single_value(self) -> None:
        bound = prepare_batch("SELECT ?", 5)
        assert bound[0].parameters == ParameterSet.from_values([5])
