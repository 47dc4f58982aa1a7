from typing import Any, Optional

from sqlbatch.core.lexer import LexicalRules, SQLiteLexicalRules

__all__ = ("BATCH_CONFIG_SLOTS", "BatchConfig")

BATCH_CONFIG_SLOTS = ("lexical_rules", "strict_named_parameters")


class BatchConfig:
    """Configuration for splitting and binding a batch.

    Attributes:
        lexical_rules: Rule set used to tokenize statements (default: SQLite rules)
        strict_named_parameters: Raise ``MissingNamedParametersError`` while binding
            when a statement requires a name the caller did not supply. When False
            (the default) the statement is sent anyway and the remote service
            reports the unbound parameter.
    """

    __slots__ = BATCH_CONFIG_SLOTS

    def __init__(self, lexical_rules: Optional[LexicalRules] = None, strict_named_parameters: bool = False) -> None:
        self.lexical_rules = lexical_rules or SQLiteLexicalRules()
        self.strict_named_parameters = strict_named_parameters

    def replace(self, **kwargs: Any) -> "BatchConfig":
        """Return a copy with the given attributes replaced.

        Raises:
            TypeError: An unknown attribute name was given.
        """
        for key in kwargs:
            if key not in BATCH_CONFIG_SLOTS:
                msg = f"{key!r} is not a field in {type(self).__name__}"
                raise TypeError(msg)

        current_kwargs = {slot: getattr(self, slot) for slot in BATCH_CONFIG_SLOTS}
        current_kwargs.update(kwargs)
        return type(self)(**current_kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BatchConfig):
            return NotImplemented
        return (
            type(self.lexical_rules) is type(other.lexical_rules)
            and self.strict_named_parameters == other.strict_named_parameters
        )

    def __hash__(self) -> int:
        return hash((type(self.lexical_rules), self.strict_named_parameters))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(lexical_rules={type(self.lexical_rules).__name__}(), "
            f"strict_named_parameters={self.strict_named_parameters!r})"
        )
