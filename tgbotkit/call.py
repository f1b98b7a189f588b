"""Prepared Bot API calls bound to a client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from .request import Request

if TYPE_CHECKING:
    from .client import Client

T = TypeVar("T")
C = TypeVar("C")


def _require_client(client: Optional["Client"]) -> "Client":
    if client is None:
        raise RuntimeError("call is not bound to a client")
    return client


@dataclass
class Call(Generic[T]):
    """A request whose result is decoded by ``parse``."""

    request: Request
    client: Optional["Client"] = None
    parse: Optional[Callable[[Any], T]] = field(default=None, repr=False)

    def bind(self, client: "Client") -> None:
        self.client = client

    def to_json(self) -> str:
        return self.request.to_json()

    def do(self) -> T:
        """Execute the call and return its decoded result."""
        result = _require_client(self.client).do(self.request)
        return self.parse(result) if self.parse is not None else result

    def do_void(self) -> None:
        """Execute the call, discarding its result."""
        _require_client(self.client).do(self.request)


@dataclass
class CallNoResult:
    """A request whose result carries nothing of interest."""

    request: Request
    client: Optional["Client"] = None

    def bind(self, client: "Client") -> None:
        self.client = client

    def to_json(self) -> str:
        return self.request.to_json()

    def do_void(self) -> None:
        """Execute the call."""
        _require_client(self.client).do(self.request)


def bind_client(call: C, client: "Client") -> C:
    """Bind ``client`` to ``call`` and return the call, for chaining."""
    call.bind(client)
    return call