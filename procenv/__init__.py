"""Helpers for reading, merging and mutating process environment variables."""

from procenv.config import EnvConfig
from procenv.enums import JoinMode
from procenv.env import (
    clear,
    exists,
    get,
    get_default_service,
    get_names,
    get_vars,
    join,
    set,
    set_default_service,
    set_vars,
    unset,
)
from procenv.services import RuntimeEnvService
from procenv.table import (
    EnvironmentTable,
    EnvironmentWriteError,
    InMemoryEnvironmentTable,
    OsEnvironmentTable,
)

__all__ = [
    "EnvConfig",
    "EnvironmentTable",
    "EnvironmentWriteError",
    "InMemoryEnvironmentTable",
    "JoinMode",
    "OsEnvironmentTable",
    "RuntimeEnvService",
    "clear",
    "exists",
    "get",
    "get_default_service",
    "get_names",
    "get_vars",
    "join",
    "set",
    "set_default_service",
    "set_vars",
    "unset",
]
