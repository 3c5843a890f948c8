"""Runtime environment variable service.

This service centralizes reads/writes to a process environment table.

Why it exists:
- Callers avoid touching os.environ directly.
- Centralizing env mutation makes it easy to audit and to test against an
  in-memory table instead of the real, process-wide one.

Note: This is intentionally small and synchronous. Each write is an
independent operation; nothing here is transactional.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager, nullcontext

from procenv.config import EnvConfig
from procenv.enums import JoinMode
from procenv.observability.redaction import preview_vars, redact_value
from procenv.table import EnvironmentTable, EnvironmentWriteError, OsEnvironmentTable

logger = logging.getLogger(__name__)


class RuntimeEnvService:
    """Convenience operations over an environment table."""

    def __init__(
        self,
        table: EnvironmentTable | None = None,
        config: EnvConfig | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            table: Variable table to operate on. Defaults to the live
                process environment.
            config: Behavioral options. Defaults to ``EnvConfig()``.
        """
        self.table = table if table is not None else OsEnvironmentTable()
        self.config = config if config is not None else EnvConfig()
        self._lock = threading.RLock()

    @contextmanager
    def _guard(self) -> Iterator[None]:
        with self._lock if self.config.thread_safe else nullcontext():
            yield

    def _value_preview(self, name: str, value: str) -> str:
        if not self.config.log_values:
            return "<hidden>"
        return redact_value(name, value, max_chars=self.config.log_max_chars)

    def _write(self, name: str, value: str) -> None:
        try:
            self.table.setenv(name, value)
        except EnvironmentWriteError as e:
            logger.warning("Failed to set env var %r: %s", name, e.cause)
            raise
        logger.debug("Set env var %r=%s", name, self._value_preview(name, value))

    def _remove(self, name: str) -> None:
        try:
            self.table.unsetenv(name)
        except EnvironmentWriteError as e:
            logger.warning("Failed to unset env var %r: %s", name, e.cause)
            raise

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------

    def exists(self, name: str) -> bool:
        """Return whether ``name`` is defined (an empty value counts)."""
        with self._guard():
            return self.table.lookup(name) is not None

    def get(self, name: str, default: str | None = None) -> str | None:
        with self._guard():
            value = self.table.lookup(name)
        return default if value is None else value

    def get_vars(self) -> dict[str, str]:
        """Return a fresh snapshot of the table.

        Each raw ``NAME=VALUE`` entry is split on ``=``: the first segment is
        the name and the rest are re-joined into the value, so values may
        contain ``=``. Entries without any ``=`` are skipped.
        """
        with self._guard():
            lines = self.table.entries()

        vars: dict[str, str] = {}
        for line in lines:
            parts = line.split("=")
            if len(parts) >= 2:
                vars[parts[0]] = "=".join(parts[1:])
        return vars

    def get_names(self, vars: Mapping[str, str]) -> list[str]:
        """Return the names in ``vars``, skipping the empty name."""
        return [name for name in vars if name]

    def join(self, base: dict[str, str], override: Mapping[str, str]) -> dict[str, str]:
        """Merge ``override`` into ``base``; override wins on shared keys.

        In ``JoinMode.ALIAS`` (the default) ``base`` is updated in place and
        returned, except that an empty ``base`` returns ``override`` itself.
        Callers must not assume the result is a copy. In ``JoinMode.COPY`` a
        new dict is returned and neither argument is touched.
        """
        if self.config.join_mode == JoinMode.COPY:
            return {**base, **override}

        if len(base) == 0:
            return override  # type: ignore[return-value]
        for k, v in override.items():
            base[k] = v
        return base

    # ------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------

    def set(self, name: str, value: str) -> None:
        with self._guard():
            self._write(name, value)

    def unset(self, name: str) -> None:
        with self._guard():
            self._remove(name)
        logger.debug("Unset env var %r", name)

    def set_vars(self, vars: Mapping[str, str]) -> None:
        """Set every entry of ``vars``, overwriting existing values.

        Raises:
            EnvironmentWriteError: If a write fails. Earlier writes stay applied.
        """
        with self._guard():
            for name, value in vars.items():
                self._write(name, value)
        logger.debug(
            "Set %d env vars: %s",
            len(vars),
            preview_vars(
                vars,
                include_values=self.config.log_values,
                max_chars=self.config.log_max_chars,
            ),
        )

    def clear(self, *exceptions: str) -> None:
        """Unset every variable whose name is not in ``exceptions``.

        Names are matched exactly (case and whitespace sensitive). The empty
        name is never removed since ``get_names`` skips it.

        Raises:
            EnvironmentWriteError: If an unset fails.
        """
        keep = set(exceptions)
        with self._guard():
            names = self.get_names(self.get_vars())
            removed = 0
            for name in names:
                if name not in keep:
                    self._remove(name)
                    removed += 1
        logger.debug("Cleared %d env vars, kept %d", removed, len(names) - removed)
