"""
Per-event output buffering.

Every live builder writes into a :class:`BufferedWriter`; nothing touches the
destination until ``flush()``, which performs exactly one write.
"""

from __future__ import annotations

import io
from typing import Any


class _Discard:
    """Destination that drops everything written to it.

    Loggers recognise the :data:`DISCARD` instance and skip building events.
    """

    __slots__ = ()

    def write(self, data: Any) -> int:
        return len(data)

    def flush(self) -> None:
        pass

    def __repr__(self) -> str:
        return "DISCARD"


DISCARD = _Discard()


def is_text_stream(out: Any) -> bool:
    """True when ``out`` expects ``str`` rather than ``bytes``.

    ``io`` text streams take ``str`` and ``io`` raw or buffered streams take
    ``bytes``. Any other object is treated as text only if it has an
    ``encoding`` attribute, the way file-like wrappers advertise it.
    """
    if isinstance(out, io.TextIOBase):
        return True
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        return False
    return hasattr(out, "encoding")


class BufferedWriter:
    """Growable in-memory buffer bound to one destination stream.

    Args:
        out: Destination. Text streams (``sys.stderr``, ``io.StringIO``) receive
            decoded UTF-8; anything else receives ``bytes``.
    """

    __slots__ = ("_buf", "_out")

    def __init__(self, out: Any):
        self._buf = bytearray()
        self._out = out

    def write(self, text: str) -> None:
        self._buf += text.encode("utf-8")

    def write_bytes(self, data: bytes) -> None:
        self._buf += data

    def __len__(self) -> int:
        return len(self._buf)

    def getvalue(self) -> bytes:
        """Bytes accumulated so far (not yet flushed)."""
        return bytes(self._buf)

    def flush(self) -> None:
        """Copy the whole buffer to the destination in one write.

        The buffer is emptied before writing; I/O errors from the destination
        propagate to the caller.
        """
        data = bytes(self._buf)
        self._buf.clear()

        if is_text_stream(self._out):
            self._out.write(data.decode("utf-8"))
        else:
            self._out.write(data)

        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()
