"""Type guards for caller-supplied parameter shapes."""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlbatch.core.parameters import ParameterEntry

__all__ = ("is_iterable_parameters", "is_mapping_parameters", "is_parameter_entry")


def is_iterable_parameters(params: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if parameters are a sequence of values (but not a string, bytes or mapping).

    Args:
        params: The parameters to check

    Returns:
        True if the parameters are a value sequence, False otherwise
    """
    return isinstance(params, Sequence) and not isinstance(params, (str, bytes, bytearray, Mapping))


def is_mapping_parameters(params: Any) -> "TypeGuard[Mapping[str, Any]]":
    """Check if parameters are a name to value mapping."""
    return isinstance(params, Mapping)


def is_parameter_entry(obj: Any) -> "TypeGuard[ParameterEntry]":
    from sqlbatch.core.parameters import ParameterEntry

    return isinstance(obj, ParameterEntry)
