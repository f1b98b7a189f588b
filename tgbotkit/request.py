"""Bot API request: a method name with its string, JSON and file arguments."""

from __future__ import annotations

import dataclasses
import json as _json
import math
from decimal import Decimal
from typing import Any

from .encoder import Encoder
from .input_file import InputFile

_JSON_HTML_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _json_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return _json.loads(to_json())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _dumps(value: Any) -> str:
    text = _json.dumps(
        value,
        default=_json_default,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
    )
    for char, escaped in _JSON_HTML_ESCAPES:
        text = text.replace(char, escaped)
    return text


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


class Request:
    """Arguments of one Bot API method call, built by chained setters."""

    def __init__(self, method: str) -> None:
        self.method = method
        self._json: dict[str, Any] = {}
        self._args: dict[str, str] = {}
        self._files: dict[str, InputFile] = {}

    def __repr__(self) -> str:
        return f"Request({self.method!r})"

    def json(self, name: str, value: Any) -> "Request":
        """Set an argument that is sent JSON-encoded."""
        self._json[name] = value
        return self

    def input_file(self, name: str, file: InputFile) -> "Request":
        """Set a file argument to upload."""
        self._files[name] = file
        return self

    def string(self, name: str, value: str) -> "Request":
        self._args[name] = value
        return self

    def bool(self, name: str, value: bool) -> "Request":
        return self.string(name, "true" if value else "false")

    def int(self, name: str, value: int) -> "Request":
        return self.string(name, str(int(value)))

    def float(self, name: str, value: float) -> "Request":
        return self.string(name, _format_float(float(value)))

    def chat_id(self, name: str, value: int) -> "Request":
        return self.int(name, value)

    def stringer(self, name: str, value: object) -> "Request":
        """Set an argument to the string form of ``value``."""
        return self.string(name, str(value))

    def has(self, name: str) -> bool:
        return name in self._json or name in self._args or name in self._files

    def has_files(self) -> bool:
        return bool(self._files)

    def get_arg(self, name: str) -> str | None:
        """The string argument ``name``, or None when it is not set."""
        return self._args.get(name)

    def get_json(self, name: str) -> Any:
        """The JSON argument ``name``, or None when it is not set."""
        return self._json.get(name)

    def _json_to_args(self) -> None:
        for key, value in self._json.items():
            try:
                self._args[key] = _dumps(value)
            except (TypeError, ValueError) as err:
                raise ValueError(f"failed to marshal {key}: {err}") from err

    def encode(self, encoder: Encoder) -> None:
        """Write all files and then all arguments to ``encoder``."""
        self._json_to_args()
        for key, file in self._files.items():
            encoder.write_file(key, file)
        for key, value in self._args.items():
            encoder.write_string(key, value)

    def to_json(self) -> str:
        """The request as a JSON object including its method name."""
        self._json_to_args()
        if self._files:
            raise ValueError("files are not supported in JSON requests")
        return _dumps({"method": self.method, **self._args})