import os
import time
from dataclasses import dataclass
from typing import Any

import httpx


_TRANSIENT_STATUS_CODES = {408, 425, 429, 500, 502, 503, 504}


class CircuitOpenError(RuntimeError):
    pass


@dataclass
class _CircuitState:
    failures: int = 0
    opened_until_epoch: float = 0.0


_CIRCUIT_STATES: dict[str, _CircuitState] = {}


def _is_truthy(value: str | None, *, default: str) -> bool:
    normalized = str(value if value is not None else default).strip().lower()
    return normalized in {"1", "true", "yes"}


def _circuit_enabled() -> bool:
    return _is_truthy(os.getenv("PILGRIMAGE_HTTP_CIRCUIT_BREAKER_ENABLED"), default="1")


def _failure_threshold() -> int:
    return max(1, int(os.getenv("PILGRIMAGE_HTTP_CIRCUIT_FAILURE_THRESHOLD", "3")))


def _reset_seconds() -> float:
    return max(0.0, float(os.getenv("PILGRIMAGE_HTTP_CIRCUIT_RESET_SECONDS", "120")))


def _circuit_key(client: httpx.Client) -> str:
    return str(getattr(client, "base_url", "unknown") or "unknown")


def _before_attempt(client: httpx.Client) -> None:
    if not _circuit_enabled():
        return
    key = _circuit_key(client)
    state = _CIRCUIT_STATES.get(key)
    if state is None:
        return

    now = time.time()
    if state.opened_until_epoch > now:
        raise CircuitOpenError(f"HTTP circuit open for {key} until {int(state.opened_until_epoch)}")

    if state.opened_until_epoch > 0:
        _CIRCUIT_STATES[key] = _CircuitState()


def _record_success(client: httpx.Client) -> None:
    if not _circuit_enabled():
        return
    key = _circuit_key(client)
    if key in _CIRCUIT_STATES:
        _CIRCUIT_STATES[key] = _CircuitState()


def _record_failure(client: httpx.Client) -> None:
    if not _circuit_enabled():
        return
    key = _circuit_key(client)
    state = _CIRCUIT_STATES.setdefault(key, _CircuitState())
    state.failures += 1
    if state.failures >= _failure_threshold():
        state.opened_until_epoch = time.time() + _reset_seconds()


def reset_circuit_breakers() -> None:
    _CIRCUIT_STATES.clear()


def _is_transient_failure(exc: Exception) -> bool:
    if isinstance(exc, (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in _TRANSIENT_STATUS_CODES
    return False


def post_json(
    client: httpx.Client,
    path: str,
    *,
    payload: dict[str, Any],
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """POST ``payload`` once and return the decoded JSON object.

    There is no second attempt. Transient failures count toward the host's
    circuit breaker; only a well-formed JSON object closes it again.
    """

    _before_attempt(client)
    try:
        response = client.post(path, json=payload, params=params, headers=headers)
        response.raise_for_status()
        body = response.json()
    except Exception as exc:
        if _is_transient_failure(exc):
            _record_failure(client)
        raise
    if not isinstance(body, dict):
        raise ValueError("Expected a JSON object in the response body")
    _record_success(client)
    return body
