"""Parameter sets and caller parameter classification.

Components:
- ParameterKind enum: positional or named
- ParameterSet: a call's (or a statement's) parameters, exactly one kind
- ParameterEntry: one caller-supplied argument with optional name and ordinal
- Named: helper for naming a single argument in a positional call signature
- convert_entries: classifies a flat entry list into a ParameterSet
- build_parameter_set: normalizes Python call signatures into entries first
- coerce_parameter_set: normalizes one object holding all of a call's parameters
"""

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any, Optional, Union

from mypy_extensions import mypyc_attr

from sqlbatch.exceptions import MixedParameterKindsError
from sqlbatch.utils.type_guards import is_iterable_parameters, is_mapping_parameters, is_parameter_entry

__all__ = (
    "Named",
    "ParameterEntry",
    "ParameterKind",
    "ParameterSet",
    "build_parameter_entries",
    "build_parameter_set",
    "coerce_parameter_set",
    "convert_entries",
)


class ParameterKind(str, Enum):
    """How a parameter set binds to markers."""

    POSITIONAL = "positional"
    NAMED = "named"


@mypyc_attr(allow_interpreted_subclasses=False)
class ParameterSet:
    """Parameters of one call or one statement.

    A set is either positional (ordered values) or named (name to value, names
    without their sigil). It is not mutated after construction; the binder
    derives new sets from it with :meth:`slice` and :meth:`select`.
    """

    __slots__ = ("_kind", "_named", "_positional")

    def __init__(
        self,
        kind: ParameterKind,
        positional: Optional[Iterable[Any]] = None,
        named: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if kind is ParameterKind.POSITIONAL and named:
            msg = "positional parameter set cannot hold named values"
            raise ValueError(msg)
        if kind is ParameterKind.NAMED and positional:
            msg = "named parameter set cannot hold positional values"
            raise ValueError(msg)
        self._kind = kind
        self._positional: tuple[Any, ...] = tuple(positional or ())
        self._named: dict[str, Any] = dict(named or {})

    @classmethod
    def from_values(cls, values: Iterable[Any] = ()) -> "ParameterSet":
        return cls(ParameterKind.POSITIONAL, positional=values)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ParameterSet":
        return cls(ParameterKind.NAMED, named=mapping)

    @property
    def kind(self) -> ParameterKind:
        return self._kind

    @property
    def is_positional(self) -> bool:
        return self._kind is ParameterKind.POSITIONAL

    @property
    def is_named(self) -> bool:
        return self._kind is ParameterKind.NAMED

    @property
    def positional(self) -> "tuple[Any, ...]":
        return self._positional

    @property
    def named(self) -> "dict[str, Any]":
        """A copy of the name to value mapping."""
        return dict(self._named)

    def slice(self, start: int, stop: int) -> "ParameterSet":
        """Return the positional values ``[start:stop]`` as a new set."""
        return ParameterSet.from_values(self._positional[start:stop])

    def select(self, names: Iterable[str]) -> "ParameterSet":
        """Return a named set restricted to those of ``names`` present here."""
        return ParameterSet.from_mapping({name: self._named[name] for name in names if name in self._named})

    def missing(self, names: Iterable[str]) -> "set[str]":
        """Names from ``names`` with no value in this set."""
        if self.is_positional:
            return set(names)
        return {name for name in names if name not in self._named}

    def to_driver_parameters(self) -> "Union[list[Any], dict[str, Any]]":
        """Plain ``list`` or ``dict`` form for DB-API style transports."""
        if self.is_positional:
            return list(self._positional)
        return dict(self._named)

    def __len__(self) -> int:
        return len(self._positional) if self.is_positional else len(self._named)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return self._kind is other._kind and self._positional == other._positional and self._named == other._named

    def __hash__(self) -> int:
        return hash((self._kind, self._positional, tuple(sorted(self._named))))

    def __repr__(self) -> str:
        if self.is_positional:
            return f"ParameterSet.from_values({list(self._positional)!r})"
        return f"ParameterSet.from_mapping({self._named!r})"


@mypyc_attr(allow_interpreted_subclasses=False)
class ParameterEntry:
    """One caller-supplied argument.

    Attributes:
        value: The opaque parameter value
        name: Parameter name; empty or None for a positional argument
        ordinal: Position of the argument in the call, used only for ordering
    """

    __slots__ = ("name", "ordinal", "value")

    def __init__(self, value: Any, name: Optional[str] = None, ordinal: int = 0) -> None:
        self.value = value
        self.name = name
        self.ordinal = ordinal

    @property
    def kind(self) -> ParameterKind:
        return ParameterKind.NAMED if self.name else ParameterKind.POSITIONAL

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterEntry):
            return NotImplemented
        return (self.value, self.name, self.ordinal) == (other.value, other.name, other.ordinal)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name_part = f", name={self.name!r}" if self.name else ""
        return f"ParameterEntry({self.value!r}{name_part}, ordinal={self.ordinal})"


def Named(name: str, value: Any) -> ParameterEntry:  # noqa: N802
    """Name a single argument, like ``sql.Named`` in Go's database/sql."""
    return ParameterEntry(value, name=name)


def convert_entries(entries: Sequence[ParameterEntry]) -> ParameterSet:
    """Classify a call's entries into a single :class:`ParameterSet`.

    Entries are stable-sorted by ordinal. The first entry fixes the kind of the
    whole call; an empty list is an empty positional set.

    Raises:
        MixedParameterKindsError: Named and positional entries were mixed.
    """
    if not entries:
        return ParameterSet.from_values()

    sorted_entries = sorted(entries, key=lambda entry: entry.ordinal)
    kind = sorted_entries[0].kind

    positional: list[Any] = []
    named: dict[str, Any] = {}
    for entry in sorted_entries:
        if entry.kind is not kind:
            raise MixedParameterKindsError
        if kind is ParameterKind.POSITIONAL:
            positional.append(entry.value)
        else:
            named[entry.name] = entry.value  # type: ignore[index]

    if kind is ParameterKind.POSITIONAL:
        return ParameterSet.from_values(positional)
    return ParameterSet.from_mapping(named)


def build_parameter_entries(*parameters: Any, **named_parameters: Any) -> "list[ParameterEntry]":
    """Turn a Python call signature into entries, one per argument.

    Positional arguments are positional values in argument order and are never
    unpacked, so a lone ``None``, list or dict is bound as a single value.
    :class:`ParameterEntry` arguments (including :func:`Named`) are kept as
    given, ordinal included. Keyword arguments are named values placed after
    all positional arguments.
    """
    entries: list[ParameterEntry] = []
    for position, value in enumerate(parameters, start=1):
        entries.append(value if is_parameter_entry(value) else ParameterEntry(value, ordinal=position))
    for position, (name, value) in enumerate(named_parameters.items(), start=len(parameters) + 1):
        entries.append(ParameterEntry(value, name=name, ordinal=position))
    return entries


def build_parameter_set(*parameters: Any, **named_parameters: Any) -> ParameterSet:
    """Build a call's :class:`ParameterSet` from Python arguments.

    Raises:
        MixedParameterKindsError: Named and positional arguments were mixed.
    """
    return convert_entries(build_parameter_entries(*parameters, **named_parameters))


def coerce_parameter_set(parameters: Any = None) -> ParameterSet:
    """Build a :class:`ParameterSet` from one object holding all of a call's parameters.

    ``None`` means no parameters, a mapping supplies named values, a list or
    tuple supplies one entry per item, and a :class:`ParameterSet` is returned
    unchanged. Any other object is a single positional value.

    Raises:
        MixedParameterKindsError: Named and positional parameters were mixed.
    """
    if parameters is None:
        return ParameterSet.from_values()
    if isinstance(parameters, ParameterSet):
        return parameters
    if is_mapping_parameters(parameters):
        return build_parameter_set(**parameters)
    if is_iterable_parameters(parameters):
        return build_parameter_set(*parameters)
    return build_parameter_set(parameters)
