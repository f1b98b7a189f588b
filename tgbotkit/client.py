"""Bot API client: builds HTTP requests, runs interceptors and decodes replies."""

from __future__ import annotations

import io
import json
import queue
import threading
from typing import Any, Callable, Iterable, Iterator

import httpx

from .encoder import MultipartEncoder, URLEncodedEncoder
from .interceptors import Interceptor, Invoker
from .request import Request
from .response import Response, TelegramError

DEFAULT_SERVER = "https://api.telegram.org"

_PIPE_DEPTH = 16
_PUT_TIMEOUT = 0.1
_EOF = object()


class _PipeClosed(Exception):
    """Raised in the producer when the consumer stopped reading."""


class _PipeWriter:
    """File-like sink that hands written chunks to a reading generator."""

    def __init__(self, chunks: queue.Queue, cancelled: threading.Event) -> None:
        self._chunks = chunks
        self._cancelled = cancelled

    def put(self, item: object) -> bool:
        while not self._cancelled.is_set():
            try:
                self._chunks.put(item, timeout=_PUT_TIMEOUT)
                return True
            except queue.Full:
                continue
        return False

    def write(self, data: bytes) -> int:
        if data and not self.put(bytes(data)):
            raise _PipeClosed()
        return len(data)


class _StreamBody(io.RawIOBase):
    """Readable stream over the body of an HTTP response."""

    def __init__(self, response: httpx.Response) -> None:
        super().__init__()
        self._response = response
        self._chunks = response.iter_bytes()
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return 0
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self) -> None:
        if not self.closed:
            self._response.close()
        super().close()


def _chain(interceptor: Interceptor, following: Invoker) -> Invoker:
    return lambda request: interceptor(request, following)


class Client:
    """Client of the Telegram Bot API."""

    def __init__(
        self,
        token: str,
        *,
        server: str = DEFAULT_SERVER,
        http_client: httpx.Client | None = None,
        test_env: bool = False,
        interceptors: Iterable[Interceptor] = (),
    ) -> None:
        self._token = token
        self.server = server
        self.test_env = test_env
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=None)
        self._interceptors = tuple(interceptors)
        self._me: Any = None
        self._me_lock = threading.Lock()
        self._invoker = self._build_invoker()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    def token(self) -> str:
        return self._token

    def _build_invoker(self) -> Invoker:
        invoker: Invoker = self._invoke
        for interceptor in reversed(self._interceptors):
            invoker = _chain(interceptor, invoker)
        return invoker

    def _call_url(self, method: str) -> str:
        if self.test_env:
            return f"{self.server}/bot{self._token}/test/{method}"
        return f"{self.server}/bot{self._token}/{method}"

    def _download_url(self, path: str) -> str:
        return f"{self.server}/file/bot{self._token}/{path}"

    def _post(self, request: Request, content: Any, content_type: str) -> Response:
        http_request = self._http.build_request(
            "POST",
            self._call_url(request.method),
            content=content,
            headers={"Content-Type": content_type},
        )
        http_response = self._http.send(http_request)
        try:
            data = json.loads(http_response.content)
        except ValueError as err:
            raise ValueError(f"unmarshal response: {err}") from err
        return Response.from_dict(data, status_code=http_response.status_code)

    def _stream_multipart(self, request: Request) -> tuple[str, Iterator[bytes]]:
        chunks: queue.Queue = queue.Queue(maxsize=_PIPE_DEPTH)
        cancelled = threading.Event()
        writer = _PipeWriter(chunks, cancelled)
        encoder = MultipartEncoder(writer)

        def produce() -> None:
            try:
                request.encode(encoder)
                encoder.close()
            except _PipeClosed:
                return
            except BaseException as err:  # noqa: BLE001 - handed to the reader
                writer.put(err)
                return
            writer.put(_EOF)

        def body() -> Iterator[bytes]:
            producer = threading.Thread(target=produce, daemon=True)
            producer.start()
            try:
                while True:
                    item = chunks.get()
                    if item is _EOF:
                        return
                    if isinstance(item, BaseException):
                        raise item
                    yield item
            finally:
                cancelled.set()

        return encoder.content_type(), body()

    def execute(self, request: Request) -> Response:
        """Send ``request`` and return the decoded response envelope."""
        if request.has_files():
            content_type, body = self._stream_multipart(request)
            return self._post(request, body, content_type)

        buffer = io.BytesIO()
        encoder = URLEncodedEncoder(buffer)
        request.encode(encoder)
        encoder.close()
        return self._post(request, buffer.getvalue(), encoder.content_type())

    def _invoke(self, request: Request) -> Any:
        response = self.execute(request)
        if not response.ok:
            raise TelegramError(
                response.error_code, response.description, response.parameters
            )
        return response.result

    def do(self, request: Request) -> Any:
        """Run ``request`` through the interceptors and return its result."""
        return self._invoker(request)

    def download(self, path: str) -> io.RawIOBase:
        """Open the file at ``path``, as returned by getFile; close it after use."""
        http_request = self._http.build_request("GET", self._download_url(path))
        http_response = self._http.send(http_request, stream=True)
        if http_response.status_code != httpx.codes.OK:
            try:
                data = json.loads(http_response.read())
            finally:
                http_response.close()
            reply = Response.from_dict(data, status_code=http_response.status_code)
            raise TelegramError(reply.error_code, reply.description, reply.parameters)
        return _StreamBody(http_response)

    def me(self) -> Any:
        """Information about the bot, fetched once and then cached."""
        with self._me_lock:
            if self._me is None:
                self._me = self.do(Request("getMe"))
            return self._me


ClientFactory = Callable[..., Client]