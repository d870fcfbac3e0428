"""
gitconverge logging utilities.

Provides configurable logging for HTTP requests/responses, client bootstrap
and reconciliation. Ensures no credentials (passwords, access tokens, secret
data) are logged.
"""

import logging
import re
from typing import Any

# Package loggers
_root_logger = logging.getLogger("gitconverge")
_http_logger = logging.getLogger("gitconverge.http")
_bootstrap_logger = logging.getLogger("gitconverge.bootstrap")
_reconcile_logger = logging.getLogger("gitconverge.reconcile")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Basic auth header values
    (re.compile(r"(Authorization['\"]?\s*[:=]\s*['\"]?)(Basic|Bearer|token)\s+[A-Za-z0-9+/=._-]+", re.IGNORECASE), r"\1[REDACTED]"),
    # Credentials embedded in URLs
    (re.compile(r"(https?://)[^/\s:@]+:[^/\s@]+@"), r"\1[REDACTED]@"),
    # Gitea token sha1 field
    (re.compile(r'"sha1"\s*:\s*"[A-Za-z0-9]+"'), '"sha1": "[REDACTED]"'),
    # Secret/token/password patterns
    (re.compile(r"(secret|token|password|sha1)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"password", "token", "sha1", "secret", "authorization", "data"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    bootstrap_level: int | None = None,
    reconcile_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure gitconverge logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        bootstrap_level: Log level for client bootstrap (default: same as level)
        reconcile_level: Log level for convergence operations (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from gitconverge.logging import configure_logging

        # Show every HTTP call made to the git server
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _bootstrap_logger.setLevel(bootstrap_level if bootstrap_level is not None else level)
    _reconcile_logger.setLevel(reconcile_level if reconcile_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a gitconverge logger.

    Args:
        name: Logger name suffix (e.g., "http", "bootstrap"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"gitconverge.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces authorization headers, URL credentials, passwords and access
    tokens with redacted placeholders.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Keys to mask (default: password, token, sha1, secret, authorization, data)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    """Log an HTTP request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if body:
        log_parts.append(f"body={safe_log_dict(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    body: Any = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log an HTTP response at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if isinstance(body, dict) and body:
        log_parts.append(f"body={safe_log_dict(body)}")
    elif isinstance(body, list):
        log_parts.append(f"items={len(body)}")

    _http_logger.debug(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
