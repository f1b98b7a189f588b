"""Encoders that serialise request arguments into an HTTP body."""

from __future__ import annotations

import secrets
import shutil
from abc import ABC, abstractmethod
from typing import BinaryIO
from urllib.parse import quote_plus

from .input_file import InputFile


class Encoder(ABC):
    """Sink for request arguments."""

    @abstractmethod
    def write_string(self, key: str, value: str) -> None:
        """Write a string argument."""

    @abstractmethod
    def write_file(self, key: str, file: InputFile) -> None:
        """Write a file argument."""


class URLEncodedEncoder(Encoder):
    """Writes ``application/x-www-form-urlencoded`` pairs."""

    def __init__(self, dst: BinaryIO | None) -> None:
        self._dst = dst
        self._pairs = 0

    def write_string(self, key: str, value: str) -> None:
        prefix = "&" if self._pairs else ""
        chunk = f"{prefix}{quote_plus(key, safe='')}={quote_plus(value, safe='')}"
        self._dst.write(chunk.encode("ascii"))
        self._pairs += 1

    def write_file(self, key: str, file: InputFile) -> None:
        raise TypeError("URL-encoded encoder doesn't support files")

    def content_type(self) -> str:
        return "application/x-www-form-urlencoded"

    def close(self) -> None:
        """Nothing to flush for URL-encoded bodies."""


def _escape_quotes(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class MultipartEncoder(Encoder):
    """Writes a ``multipart/form-data`` body."""

    def __init__(self, dst: BinaryIO | None) -> None:
        self._dst = dst
        self._boundary = secrets.token_hex(30)
        self._has_parts = False
        self._closed = False

    def _begin_part(self, headers: dict[str, str]) -> None:
        if self._closed:
            raise ValueError("multipart encoder is closed")
        opening = "\r\n--" if self._has_parts else "--"
        lines = [f"{opening}{self._boundary}\r\n"]
        lines.extend(f"{name}: {headers[name]}\r\n" for name in sorted(headers))
        lines.append("\r\n")
        self._dst.write("".join(lines).encode("utf-8"))
        self._has_parts = True

    def write_string(self, key: str, value: str) -> None:
        self._begin_part(
            {"Content-Disposition": f'form-data; name="{_escape_quotes(key)}"'}
        )
        self._dst.write(value.encode("utf-8"))

    def write_file(self, key: str, file: InputFile) -> None:
        if file.body is None:
            raise ValueError(f"form file '{key}' has no body")
        self._begin_part(
            {
                "Content-Disposition": (
                    f'form-data; name="{_escape_quotes(key)}"; '
                    f'filename="{_escape_quotes(file.name)}"'
                ),
                "Content-Type": "application/octet-stream",
            }
        )
        shutil.copyfileobj(file.body, self._dst)

    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self._boundary}"

    def close(self) -> None:
        if self._closed:
            return
        opening = "\r\n--" if self._has_parts else "--"
        self._dst.write(f"{opening}{self._boundary}--\r\n".encode("ascii"))
        self._closed = True