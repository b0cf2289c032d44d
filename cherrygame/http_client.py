"""Small HTTP client helpers built on requests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

import requests

POST_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

DEFAULT_TIMEOUT = 5.0
"""Request timeout in seconds."""


def to_url_values(values: Mapping[str, str] | None) -> dict[str, list[str]]:
    """Turn a flat mapping into multi-valued query parameters."""
    return {k: [v] for k, v in (values or {}).items()}


def _encode(params: Mapping[str, list[str]]) -> str:
    return urlencode(sorted(params.items()), doseq=True)


def add_params(url: str, params: Mapping[str, list[str]] | None) -> str:
    """Append encoded query parameters (sorted by key) to ``url``."""
    if not params:
        return url
    if "?" not in url:
        url += "?"
    if url.endswith("?") or url.endswith("&"):
        return url + _encode(params)
    return url + "&" + _encode(params)


def _merge_headers(base: dict[str, str], headers: Mapping[str, str] | None) -> dict[str, str]:
    merged = dict(base)
    if headers:
        merged.update(headers)
    return merged


def get(
    url: str,
    values: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> tuple[bytes, requests.Response]:
    """Send a GET request with ``values`` as query parameters.

    Returns the body and the response; network failures raise
    :class:`requests.RequestException`.
    """
    if values:
        url = add_params(url, to_url_values(values))
    response = requests.get(url, headers=_merge_headers({}, headers), timeout=DEFAULT_TIMEOUT)
    return response.content, response


def post(
    url: str,
    values: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> tuple[bytes, requests.Response]:
    """Send ``values`` as a form-encoded POST body."""
    body = _encode(to_url_values(values))
    response = requests.post(
        url,
        data=body.encode("ascii"),
        headers=_merge_headers({"Content-Type": POST_CONTENT_TYPE}, headers),
        timeout=DEFAULT_TIMEOUT,
    )
    return response.content, response


def post_json(
    url: str,
    values: Any = None,
    headers: Mapping[str, str] | None = None,
) -> tuple[bytes, requests.Response]:
    """Send ``values`` encoded as JSON in a POST body.

    Raises TypeError or ValueError when ``values`` cannot be encoded.
    """
    payload = json.dumps(values, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    response = requests.post(
        url,
        data=payload,
        headers=_merge_headers({"Content-Type": JSON_CONTENT_TYPE}, headers),
        timeout=DEFAULT_TIMEOUT,
    )
    return response.content, response