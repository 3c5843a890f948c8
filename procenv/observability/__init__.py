"""Observability helpers (log-safe previews of environment data)."""

from procenv.observability.redaction import (
    looks_sensitive_name,
    preview_vars,
    redact_value,
)

__all__ = [
    "looks_sensitive_name",
    "preview_vars",
    "redact_value",
]
