"""Module-level environment helpers.

Thin functions over a shared default ``RuntimeEnvService`` bound to the live
process environment. Host applications that need a different table or
config install their own service with ``set_default_service``.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping

from procenv.services.runtime_env_service import RuntimeEnvService

_DEFAULT_SERVICE: RuntimeEnvService | None = None
_DEFAULT_SERVICE_LOCK = threading.Lock()


def get_default_service() -> RuntimeEnvService:
    """Return the shared service, creating it on first use."""
    global _DEFAULT_SERVICE

    with _DEFAULT_SERVICE_LOCK:
        if _DEFAULT_SERVICE is None:
            _DEFAULT_SERVICE = RuntimeEnvService()
        return _DEFAULT_SERVICE


def set_default_service(service: RuntimeEnvService | None) -> RuntimeEnvService | None:
    """Replace the shared service and return the previous one.

    Passing None resets it; the next call recreates a default service.
    """
    global _DEFAULT_SERVICE

    with _DEFAULT_SERVICE_LOCK:
        previous = _DEFAULT_SERVICE
        _DEFAULT_SERVICE = service
        return previous


def clear(*exceptions: str) -> None:
    get_default_service().clear(*exceptions)


def exists(name: str) -> bool:
    return get_default_service().exists(name)


def get(name: str, default: str | None = None) -> str | None:
    return get_default_service().get(name, default)


def get_vars() -> dict[str, str]:
    return get_default_service().get_vars()


def get_names(vars: Mapping[str, str]) -> list[str]:
    return get_default_service().get_names(vars)


def join(base: dict[str, str], override: Mapping[str, str]) -> dict[str, str]:
    return get_default_service().join(base, override)


def set(name: str, value: str) -> None:
    get_default_service().set(name, value)


def set_vars(vars: Mapping[str, str]) -> None:
    get_default_service().set_vars(vars)


def unset(name: str) -> None:
    get_default_service().unset(name)
