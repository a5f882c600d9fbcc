"""JSON request helper shared by every remote backend.

All backends follow the same convention: a 2xx status is required but not
sufficient, since a body of ``{"status": "error", "message": "..."}`` is a
failure as well. Errors are raised as :class:`BackendError` carrying the most
specific message available.
"""

from typing import Any

import requests

from .exceptions import BackendError


def _decode(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        if not response.ok:
            raise BackendError(
                f"API Error: {response.status_code} {response.reason}".strip(),
                status_code=response.status_code,
            ) from e
        raise BackendError("Invalid response format from API", status_code=response.status_code) from e


def is_error_payload(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get("status") == "error"


def request_json(
    session: requests.Session,
    method: str,
    url: str,
    *,
    timeout: float,
    default_error: str = "Request failed",
    **kwargs: Any,
) -> Any:
    """
    Perform a request and return its decoded JSON payload.

    Args:
        session: Session used for the call
        method: HTTP method
        url: Target URL
        timeout: Request timeout in seconds
        default_error: Message used for an error payload without ``message``
        **kwargs: Passed through to ``session.request`` (params, json, ...)

    Returns:
        Decoded JSON payload

    Raises:
        BackendError: On transport failure, non-2xx status, undecodable body
            or an error-status payload
    """
    try:
        response = session.request(method, url, timeout=timeout, **kwargs)
    except requests.RequestException as e:
        raise BackendError(f"Network error: {e}") from e

    payload = _decode(response)

    if is_error_payload(payload):
        raise BackendError(payload.get("message") or default_error, status_code=response.status_code)

    if not response.ok:
        raise BackendError(
            f"API Error: {response.status_code} {response.reason}".strip(),
            status_code=response.status_code,
        )

    return payload


def unwrap_data(payload: Any) -> dict:
    """Return the result record, which may be nested under ``data`` or inline."""
    if not isinstance(payload, dict):
        raise BackendError("Invalid response format from API")
    data = payload.get("data")
    if isinstance(data, dict) and data:
        return data
    return payload
