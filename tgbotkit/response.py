"""Bot API response envelope and the error raised for unsuccessful calls."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping


@dataclass
class ResponseParameters:
    """Extra information explaining why a request was unsuccessful."""

    migrate_to_chat_id: int = 0
    retry_after: int = 0

    def retry_after_duration(self) -> timedelta:
        """Time to wait before the request may be repeated."""
        return timedelta(seconds=self.retry_after)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResponseParameters":
        return cls(
            migrate_to_chat_id=int(data.get("migrate_to_chat_id", 0) or 0),
            retry_after=int(data.get("retry_after", 0) or 0),
        )


@dataclass
class Response:
    """Decoded body of a Bot API response."""

    ok: bool = False
    description: str = ""
    result: Any = None
    error_code: int = 0
    parameters: ResponseParameters | None = None
    status_code: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], status_code: int = 0) -> "Response":
        raw_parameters = data.get("parameters")
        parameters = (
            ResponseParameters.from_dict(raw_parameters)
            if raw_parameters is not None
            else None
        )
        return cls(
            ok=bool(data.get("ok", False)),
            description=str(data.get("description", "") or ""),
            result=data.get("result"),
            error_code=int(data.get("error_code", 0) or 0),
            parameters=parameters,
            status_code=status_code,
        )


class TelegramError(Exception):
    """Error reported by the Bot API."""

    def __init__(
        self,
        code: int,
        message: str,
        parameters: ResponseParameters | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.parameters = parameters
        super().__init__(code, message, parameters)

    def __str__(self) -> str:
        if self.parameters is None:
            return f"{self.code}: {self.message}"
        return f"{self.code}: {self.message} ({self.parameters})"

    def contains(self, value: str) -> bool:
        """Whether the lower-cased message contains ``value``."""
        return value in self.message.lower()