"""
Writers used by the formatters: an indenting wrapper and a counting sink wrapper.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io
from typing import Any, Protocol

# Local ----------------------------------------------------------------------------------------------------------------
from .syntax import INDENT, NEWLINE
from .utils import fmt_type

# Constants ------------------------------------------------------------------------------------------------------------
ENCODING = "utf-8"


# Classes --------------------------------------------------------------------------------------------------------------

class Writer(Protocol):
    """Anything text can be written to."""

    def write(self, s: str) -> Any: ...


class WriteError(OSError):
    """
    Raised when the sink a literal is being written to fails.

    The sink's own exception is chained as __cause__.

    Attributes:
        written: Units (characters or bytes) the sink accepted before it failed.
    """

    def __init__(self, message: str, written: int = 0) -> None:
        super().__init__(message)
        self.written = written


class IndentWriter:
    """
    A writer that indents every line after the first by one indentation unit.

    Each newline that passes through the writer is followed by the indentation
    unit before anything else is forwarded. Nothing is inserted before the
    first fragment, so the opening line of a block stays where the caller put
    it. Writers nest: an IndentWriter over an IndentWriter indents by two units.

    Args:
        writer: The wrapped writer.
        indent: The indentation unit.

    Example:
        >>> buf = io.StringIO()
        >>> w = IndentWriter(buf, indent="  ")
        >>> w.write("[\\n1,")
        4
        >>> buf.getvalue()
        '[\\n  1,'
    """

    def __init__(self, writer: Writer, indent: str = INDENT) -> None:
        self.writer = writer
        self.indent = indent

    def write(self, s: str) -> int:
        """
        Write s, inserting the indentation unit after every newline.

        Returns:
            Number of characters of s written; the inserted indentation is not counted.
        """
        total = 0
        last = 0
        pos = s.find(NEWLINE)
        while pos >= 0:
            self.writer.write(s[last:pos + 1])
            total += pos + 1 - last
            self.writer.write(self.indent)
            last = pos + 1
            pos = s.find(NEWLINE, last)
        if last != len(s):
            self.writer.write(s[last:])
            total += len(s) - last
        return total


class CountingWriter:
    """
    Wraps a caller's sink, counting what it accepts and converting its failures.

    Text sinks receive str; binary sinks (io.RawIOBase, io.BufferedIOBase, or
    anything opened with a 'b' mode) receive UTF-8 bytes, and the count is in
    bytes. The first exception raised by the sink is stored in `error` and
    re-raised as WriteError; later writes fail the same way without touching
    the sink.

    Attributes:
        count: Units written so far.
        error: The sink's first exception, or None.

    Raises:
        TypeError: If sink has no write() method.
    """

    count: int
    error: BaseException | None

    def __init__(self, sink: Any) -> None:
        if not callable(getattr(sink, "write", None)):
            raise TypeError(f"sink must have a write() method, but got {fmt_type(sink)}")
        self.sink = sink
        self.binary = _is_binary(sink)
        self.count = 0
        self.error = None

    def write(self, s: str) -> int:
        if self.error is not None:
            raise WriteError(f"sink failed earlier: {self.error}", written=self.count) from self.error

        data = s.encode(ENCODING) if self.binary else s
        try:
            n = self.sink.write(data)
        except Exception as exc:
            self.error = exc
            raise WriteError(f"sink write failed: {exc}", written=self.count) from exc

        # Sinks such as sys.stdout wrappers or custom objects may return None
        self.count += len(data) if n is None else n
        return len(s)


# Helper Functions -----------------------------------------------------------------------------------------------------

def _is_binary(sink: Any) -> bool:
    """Check whether sink expects bytes rather than str."""
    if isinstance(sink, io.TextIOBase):
        return False
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in str(getattr(sink, "mode", ""))
