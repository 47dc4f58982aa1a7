"""sqlbatch: statement splitting and parameter binding for multi-statement SQL batches."""

from sqlbatch import adapters, core, driver, exceptions, utils
from sqlbatch.__metadata__ import __version__
from sqlbatch.config import BatchConfig
from sqlbatch.core import (
    BoundStatement,
    Named,
    ParameterEntry,
    ParameterKind,
    ParameterSet,
    StatementMarkers,
    bind_statement,
    bind_statements,
    build_parameter_set,
    coerce_parameter_set,
    convert_entries,
    extract_markers,
    prepare_batch,
    split_statements,
)
from sqlbatch.driver import AsyncBatchDriver, ExecuteResult, StatementResult, SyncBatchDriver
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

__all__ = (
    "AsyncBatchDriver",
    "BatchConfig",
    "BoundStatement",
    "ExecuteResult",
    "InvalidNamedParameterPrefixError",
    "LexicalError",
    "MissingNamedParametersError",
    "MissingPositionalParametersError",
    "MixedParameterKindsError",
    "Named",
    "ParameterEntry",
    "ParameterError",
    "ParameterKind",
    "ParameterSet",
    "SQLBatchError",
    "StatementExecutionError",
    "StatementMarkers",
    "StatementResult",
    "SyncBatchDriver",
    "UnsupportedIndexedPositionalError",
    "UnsupportedOperationError",
    "__version__",
    "adapters",
    "bind_statement",
    "bind_statements",
    "build_parameter_set",
    "coerce_parameter_set",
    "convert_entries",
    "core",
    "driver",
    "exceptions",
    "extract_markers",
    "prepare_batch",
    "split_statements",
    "utils",
)
