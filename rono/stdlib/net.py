#!/usr/bin/env python3
"""
Blocking HTTP verbs for compiled Rono programs.

Every call issues exactly one request on its own session and returns the
whole response body as text. Transport failures of any kind collapse into
None; the caller never sees a partial body or the cause.
"""

import logging
import threading
from time import monotonic
from typing import Dict, List, Optional, Union

import requests

from .. import config
from ..utils.once import Once
from .data import HttpResponse
from .enums import HttpMethod

logger = logging.getLogger(__name__)

_engine = Once("http-engine")
_base_headers: Dict[str, str] = {}

# Floor for the per-read timeout once the budget is nearly spent
MIN_WAIT = 0.01


def _init_engine():
    headers = requests.utils.default_headers()
    headers['User-Agent'] = config.USER_AGENT
    _base_headers.clear()
    _base_headers.update(headers)
    logger.debug(f"HTTP engine ready (requests {requests.__version__}, user agent {config.USER_AGENT})")


def ensure_engine():
    _engine.run(_init_engine)


def _coerce_method(method: Union[HttpMethod, str]) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    return HttpMethod(method.upper())


def send_request(method: Union[HttpMethod, str], url: str, body: Optional[str] = None) -> Optional[HttpResponse]:
    """Perform one request and collect status, body and content type.

    Any HTTP status counts as a completed exchange. Returns None on transport
    failure (DNS, refused connection, timeout, TLS, malformed URL, broken
    stream). The exchange runs on a short-lived worker thread; the caller waits
    at most HTTP_TIMEOUT seconds in total.
    """
    ensure_engine()
    method = _coerce_method(method)

    headers = dict(_base_headers)
    data = None
    if method.sends_body:
        data = (body or "").encode("utf-8")
        headers['Content-Type'] = config.FORM_CONTENT_TYPE

    logger.debug(f"{method.value} {url}")
    deadline = monotonic() + config.HTTP_TIMEOUT
    outcome: List[HttpResponse] = []
    worker = threading.Thread(
        target=_exchange,
        args=(method, url, data, headers, deadline, outcome),
        name=f"rono-http-{method.value.lower()}",
        daemon=True,
    )
    worker.start()
    worker.join(max(deadline - monotonic(), 0.0))
    if worker.is_alive():
        # Abandoned: the worker stops at its own read timeout and its result is dropped
        logger.debug(f"{method.value} {url} failed: no complete response within {config.HTTP_TIMEOUT:g}s")
        return None
    return outcome[0] if outcome else None


def _exchange(method: HttpMethod, url: str, data: Optional[bytes], headers: Dict[str, str],
              deadline: float, outcome: List[HttpResponse]):
    """Run one request to completion and append the response to outcome on success"""
    remaining = max(deadline - monotonic(), MIN_WAIT)
    buffer = bytearray()
    try:
        with requests.Session() as session:
            with session.request(method.value, url, data=data, headers=headers,
                                 timeout=(remaining, remaining), stream=True) as response:
                for chunk in response.iter_content(chunk_size=config.HTTP_CHUNK_SIZE):
                    buffer.extend(chunk)
                    if monotonic() > deadline:
                        raise requests.Timeout(f"no complete response within {config.HTTP_TIMEOUT:g}s")
                if monotonic() > deadline:
                    raise requests.Timeout(f"no complete response within {config.HTTP_TIMEOUT:g}s")
                status = response.status_code
                content_type = response.headers.get('Content-Type', '')
    except requests.RequestException as e:
        logger.debug(f"{method.value} {url} failed: {e}")
        return

    outcome.append(HttpResponse(
        status=status,
        body=buffer.decode("utf-8", errors="replace"),
        content_type=content_type,
    ))


def _body_or_none(response: Optional[HttpResponse]) -> Optional[str]:
    return None if response is None else response.body


def http_get(url: str) -> Optional[str]:
    return _body_or_none(send_request(HttpMethod.GET, url))


def http_post(url: str, body: Optional[str]) -> Optional[str]:
    return _body_or_none(send_request(HttpMethod.POST, url, body))


def http_put(url: str, body: Optional[str]) -> Optional[str]:
    return _body_or_none(send_request(HttpMethod.PUT, url, body))


def http_delete(url: str) -> Optional[str]:
    return _body_or_none(send_request(HttpMethod.DELETE, url))
