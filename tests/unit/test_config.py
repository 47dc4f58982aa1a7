"""Tests for BatchConfig."""

import pytest

from sqlbatch.config import BatchConfig
from sqlbatch.core.lexer import LexicalRules, SQLiteLexicalRules


def test_defaults() -> None:
    config = BatchConfig()
    assert isinstance(config.lexical_rules, SQLiteLexicalRules)
    assert config.strict_named_parameters is False


def test_replace_returns_new_instance() -> None:
    config = BatchConfig()
    strict = config.replace(strict_named_parameters=True)

    assert strict is not config
    assert strict.strict_named_parameters is True
    assert config.strict_named_parameters is False
    assert strict != config


def test_replace_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError, match="'dialect' is not a field in BatchConfig"):
        BatchConfig().replace(dialect="sqlite")


def test_equality_by_rule_type() -> None:
    assert BatchConfig() == BatchConfig(SQLiteLexicalRules())
    assert BatchConfig() != BatchConfig(LexicalRules())
    assert hash(BatchConfig()) == hash(BatchConfig())


def test_repr() -> None:
    assert repr(BatchConfig()) == "BatchConfig(lexical_rules=SQLiteLexicalRules(), strict_named_parameters=False)"
