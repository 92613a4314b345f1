"""A small HTTP client that reports the request it sent and the response it got."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from urllib.parse import urlsplit

import requests

_BODYLESS_METHODS = frozenset({"GET", "DELETE"})
_JSON = "application/json"


class ClientError(Exception):
    """The request could not be built or sent."""


@dataclass
class HttpClient:
    """One prepared HTTP call: target URL, method, optional body and headers."""

    url: str
    method: str
    body: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    def send_request(self) -> tuple[requests.Request, requests.Response]:
        """Send the request; return what was sent and what came back."""
        request = requests.Request(
            method=self.method,
            url=self.url,
            headers=dict(self.headers),
            data=self.body,
        )
        try:
            with requests.Session() as session:
                response = session.send(session.prepare_request(request))
        except requests.RequestException as exc:
            raise ClientError(str(exc)) from exc
        return request, response

    def execute(self) -> tuple[str, str]:
        """Send the request and return the request and response as report texts."""
        request, response = self.send_request()
        with response:
            return request_text(request), response_text(response)


def build_client(
    raw_url: str,
    method: str,
    data: str = "",
    custom_headers: Iterable[str] = (),
) -> HttpClient:
    """Build a client from command-line values.

    GET and DELETE carry no body and no Content-Type; other methods need JSON data
    and are sent with ``Content-Type: application/json``.
    """
    try:
        urlsplit(raw_url)
    except ValueError as exc:
        raise ClientError(f"parse {raw_url!r}: {exc}") from exc

    headers: dict[str, str] = {}
    for header in custom_headers:
        parts = header.split(": ")
        if len(parts) < 2:
            raise ClientError(f"invalid format header: {header}")
        headers[parts[0]] = parts[1]

    if method in _BODYLESS_METHODS:
        headers.pop("Content-Type", None)
        body = None
    else:
        if not data:
            raise ClientError("requests data json")
        body = data
        headers["Content-Type"] = _JSON

    return HttpClient(url=raw_url, method=method, body=body, headers=headers)


def _canonical(key: str) -> str:
    if " " in key:
        return key
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


def _header_lines(headers: Mapping[str, str] | None) -> str:
    canonical = {_canonical(key): value for key, value in (headers or {}).items()}
    return "".join(f"  {key}: {canonical[key]}\n" for key in sorted(canonical))


def request_text(request: requests.Request) -> str:
    """Report the URL, method and headers of a request."""
    return (
        "\n===Request===\n"
        f"[URL] {request.url}\n"
        f"[Method] {request.method}\n"
        "[Headers]\n"
        f"{_header_lines(request.headers)}"
    )


def response_text(response: requests.Response) -> str:
    """Report the status, headers and body of a response."""
    body = response.content or b""
    return (
        "\n===Response===\n"
        f"[Status] {response.status_code}\n"
        "[Headers]\n"
        f"{_header_lines(response.headers)}"
        "[Body]\n"
        f"{body.decode('utf-8', errors='replace')}\n"
    )