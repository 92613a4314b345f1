"""Checks on the command-line flags of the HTTP client."""

from __future__ import annotations

import json
from collections.abc import Iterable
from urllib.parse import urlsplit

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH"})
SUPPORTED_SCHEMES = frozenset({"http", "https"})


class ValidationError(ValueError):
    """A flag or argument of the HTTP client is malformed or unsupported."""


def _validate_raw_url(raw_url: str) -> None:
    try:
        parts = urlsplit(raw_url)
    except ValueError as exc:
        raise ValidationError(f"parse {raw_url!r}: {exc}") from exc
    if not parts.scheme and not raw_url.startswith("/"):
        raise ValidationError(f"parse {raw_url!r}: invalid URI for request")
    if parts.scheme not in SUPPORTED_SCHEMES:
        raise ValidationError(f"url schema '{parts.scheme}' is not supported")


def _validate_method(method: str) -> None:
    if method not in SUPPORTED_METHODS:
        raise ValidationError(f"HTTP method '{method}' is not supported")


def _validate_data(data: str) -> None:
    text = data.strip()
    if not text:
        return
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"json parse error: {exc}") from exc
    if parsed is not None and not isinstance(parsed, dict):
        raise ValidationError(
            f"json parse error: cannot unmarshal {type(parsed).__name__} into an object"
        )


def _validate_headers(custom_headers: Iterable[str]) -> None:
    for header in custom_headers:
        text = header.strip()
        parts = text.split(":")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ValidationError(f"invalid format header: {text}")


def validate_flags(
    raw_url: str,
    method: str,
    data: str = "",
    custom_headers: Iterable[str] = (),
) -> None:
    """Raise ValidationError unless the URL, method, body and headers are all acceptable."""
    _validate_raw_url(raw_url)
    _validate_method(method)
    _validate_data(data)
    _validate_headers(custom_headers)