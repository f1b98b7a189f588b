"""Files to be uploaded to the Bot API."""

from __future__ import annotations

import dataclasses
import io
import json
import os
from dataclasses import dataclass, field
from typing import BinaryIO


@dataclass
class InputFile:
    """A named binary stream to upload, or an ``attach://`` reference."""

    name: str
    body: BinaryIO | None = None
    addr: str = field(default="", repr=False)

    def with_name(self, name: str) -> "InputFile":
        """Return a copy with another name."""
        return dataclasses.replace(self, name=name)

    def close(self) -> None:
        """Close the body if it can be closed."""
        closer = getattr(self.body, "close", None)
        if callable(closer):
            closer()

    def __enter__(self) -> "InputFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def to_json(self) -> str:
        """JSON form of the file: its attachment address."""
        if not self.addr:
            raise ValueError("can't marshal InputFile without address")
        return json.dumps(self.addr)

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "InputFile":
        return cls(name, io.BytesIO(data))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "InputFile":
        """Open a local file; the caller closes it after sending."""
        body = open(path, "rb")
        return cls(os.path.basename(os.fspath(path)), body)