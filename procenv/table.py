"""Environment table backends.

All direct access to a variable table lives here. ``OsEnvironmentTable``
talks to the real process environment; ``InMemoryEnvironmentTable`` keeps a
private dict so tests (and dry runs) never mutate process-wide state.

Both render their contents as raw ``NAME=VALUE`` lines, the same shape the
operating system hands a process at startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


class EnvironmentWriteError(Exception):
    """Raised when setting or unsetting a variable fails.

    Attributes:
        name: The variable name that could not be written.
        cause: The underlying platform error.
    """

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Failed to write environment variable {name!r}: {cause}")
        self.name = name
        self.cause = cause


@runtime_checkable
class EnvironmentTable(Protocol):
    """Minimal interface over a name/value variable table."""

    def entries(self) -> list[str]:
        """Return every variable as a raw ``NAME=VALUE`` line."""
        ...

    def lookup(self, name: str) -> str | None:
        """Return the value for ``name``, or None if it is not defined."""
        ...

    def setenv(self, name: str, value: str) -> None:
        """Create or overwrite ``name``."""
        ...

    def unsetenv(self, name: str) -> None:
        """Remove ``name``; a missing name is a no-op."""
        ...


class OsEnvironmentTable:
    """The live process environment, via ``os.environ``."""

    def entries(self) -> list[str]:
        return [f"{k}={v}" for k, v in os.environ.items()]

    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)

    def setenv(self, name: str, value: str) -> None:
        try:
            os.environ[name] = value
        except (OSError, ValueError) as e:
            # Illegal names surface as ValueError or OSError depending on the Python version.
            raise EnvironmentWriteError(name, e) from e

    def unsetenv(self, name: str) -> None:
        try:
            os.environ.pop(name, None)
        except (OSError, ValueError) as e:
            raise EnvironmentWriteError(name, e) from e


def _check_name(name: str) -> None:
    if "=" in name or "\x00" in name:
        raise EnvironmentWriteError(name, ValueError("illegal environment variable name"))


class InMemoryEnvironmentTable:
    """A private variable table backed by a dict.

    Rejects names containing "=" or NUL like the real table does. The empty
    name is allowed.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._vars: dict[str, str] = {}
        for name, value in (initial or {}).items():
            _check_name(name)
            self._vars[name] = value

    def entries(self) -> list[str]:
        return [f"{k}={v}" for k, v in self._vars.items()]

    def lookup(self, name: str) -> str | None:
        return self._vars.get(name)

    def setenv(self, name: str, value: str) -> None:
        _check_name(name)
        self._vars[name] = value

    def unsetenv(self, name: str) -> None:
        self._vars.pop(name, None)

    def __len__(self) -> int:
        return len(self._vars)
