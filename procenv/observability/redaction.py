"""Redaction helpers to keep secrets out of debug logs.

Environment variables routinely carry credentials, so anything this library
logs about a value goes through here first.

- Names that look secret-like (``*_TOKEN``, ``*_PASSWORD``, ``API_KEY``...)
  always log as ``[REDACTED]``.
- Other values are scanned for common token formats.
- Previews are truncated.

NOTE: This is *not* a DLP system. It catches the common cases.
"""

from __future__ import annotations

import re
from collections.abc import Mapping


_REPLACEMENT = "[REDACTED]"
_TRUNC_SUFFIX = "…(truncated)"


_SECRET_NAME_RE = re.compile(
    r"(^|_)(password|passwd|pwd|secret|token|api[_-]?key|access[_-]?key|private[_-]?key|credentials?|authorization)($|_)",
    flags=re.IGNORECASE,
)

_SENSITIVE_VALUE_RES: list[re.Pattern[str]] = [
    # OpenAI-ish
    re.compile(r"\b(?:sk-|pk-)[A-Za-z0-9]{20,}\b"),
    # AWS access key id
    re.compile(r"\bAKIA[A-Z0-9]{16}\b"),
    # GitHub tokens
    re.compile(r"\bgh[pousr]_[A-Za-z0-9]{20,}\b"),
    re.compile(r"\bBearer\s+[A-Za-z0-9._\-]+\b", flags=re.IGNORECASE),
    # user:password@ in URLs (database DSNs, proxies)
    re.compile(r"(?<=://)[^/\s:@]+:[^/\s@]+(?=@)"),
]


def looks_sensitive_name(name: str) -> bool:
    """Return True if a variable name suggests its value is a secret."""
    return bool(_SECRET_NAME_RE.search(name.strip()))


def _truncate(text: str, max_chars: int) -> str:
    if max_chars and len(text) > max_chars:
        return text[:max_chars] + _TRUNC_SUFFIX
    return text


def redact_value(name: str, value: str, *, max_chars: int = 200) -> str:
    """Return a log-safe preview of ``value`` stored under ``name``."""
    if looks_sensitive_name(name):
        return _REPLACEMENT

    out = value
    for rx in _SENSITIVE_VALUE_RES:
        out = rx.sub(_REPLACEMENT, out)
    return _truncate(out, max_chars)


def preview_vars(
    vars: Mapping[str, str],
    *,
    include_values: bool = False,
    max_chars: int = 200,
) -> dict[str, str] | list[str]:
    """Build a log-safe preview of a variable mapping.

    Without ``include_values`` only the names are returned, as a list.
    """
    if not include_values:
        return list(vars)
    return {k: redact_value(k, v, max_chars=max_chars) for k, v in vars.items()}
