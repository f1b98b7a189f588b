"""Interceptors that wrap the execution of Bot API requests.

An invoker is a callable taking a :class:`Request` and returning the decoded
result, raising on failure. An interceptor receives the request and the next
invoker and decides how, or whether, to call it.
"""

from __future__ import annotations

import random
import time
from datetime import timedelta
from typing import Any, Callable, Optional

from .parse_mode import ParseMode
from .request import Request
from .response import TelegramError

Invoker = Callable[[Request], Any]
Interceptor = Callable[[Request, Invoker], Any]
Sleep = Callable[[float], Any]

_TOO_MANY_REQUESTS = 429
_INTERNAL_SERVER_ERROR = 500


def _find_telegram_error(err: BaseException) -> Optional[TelegramError]:
    """Find a TelegramError in the exception or the chain of its causes."""
    seen: set[int] = set()
    current: Optional[BaseException] = err
    while current is not None and id(current) not in seen:
        if isinstance(current, TelegramError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def retry_flood_error(
    tries: int = 3,
    max_retry_after: timedelta = timedelta(hours=1),
    sleep: Sleep = time.sleep,
) -> Interceptor:
    """Retry requests rejected with a flood error (HTTP 429).

    The interceptor waits for the ``retry_after`` the server asked for and
    tries again, up to ``tries`` times. A flood error asking for a longer
    wait than ``max_retry_after`` is raised at once. ``sleep`` receives the
    wait in seconds; whatever it raises ends the retries.
    """

    def interceptor(request: Request, invoker: Invoker) -> Any:
        last_error: Optional[BaseException] = None
        for _ in range(tries):
            try:
                return invoker(request)
            except Exception as err:  # noqa: BLE001 - re-raised below
                last_error = err
                tg_error = _find_telegram_error(err)
                if (
                    tg_error is None
                    or tg_error.code != _TOO_MANY_REQUESTS
                    or tg_error.parameters is None
                ):
                    raise
                wait = tg_error.parameters.retry_after_duration()
                if wait > max_retry_after:
                    raise
                sleep(wait.total_seconds())
        if last_error is not None:
            raise last_error
        return None

    return interceptor


def retry_internal_server_error(
    tries: int = 10,
    delay: timedelta = timedelta(milliseconds=100),
    sleep: Sleep = time.sleep,
) -> Interceptor:
    """Retry requests that failed with an internal server error (HTTP 500).

    Before attempt ``i`` (counting from zero) is repeated the interceptor
    waits ``delay * 2**i`` plus a random jitter below that same amount.
    ``sleep`` receives the wait in seconds; whatever it raises ends the
    retries.
    """

    def interceptor(request: Request, invoker: Invoker) -> Any:
        last_error: Optional[BaseException] = None
        for attempt in range(tries):
            try:
                return invoker(request)
            except Exception as err:  # noqa: BLE001 - re-raised below
                last_error = err
                tg_error = _find_telegram_error(err)
                if tg_error is None or tg_error.code != _INTERNAL_SERVER_ERROR:
                    raise
                backoff = delay.total_seconds() * (2**attempt)
                jitter = random.random() * backoff
                sleep(backoff + jitter)
        if last_error is not None:
            raise last_error
        return None

    return interceptor


def default_parse_mode(parse_mode: ParseMode) -> Interceptor:
    """Set ``parse_mode`` on requests that do not carry one already.

    Combine with :func:`method_filter` to apply it to chosen methods only.
    """

    def interceptor(request: Request, invoker: Invoker) -> Any:
        if not request.has("parse_mode"):
            request.stringer("parse_mode", parse_mode)
        return invoker(request)

    return interceptor


def method_filter(interceptor: Interceptor, *methods: str) -> Interceptor:
    """Apply ``interceptor`` only to requests for the given methods."""
    allowed = frozenset(methods)

    def filtered(request: Request, invoker: Invoker) -> Any:
        if request.method in allowed:
            return interceptor(request, invoker)
        return invoker(request)

    return filtered