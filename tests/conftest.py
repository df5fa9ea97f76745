#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import array
import collections
import collections.abc
import ctypes
import dataclasses
import enum
import io
import queue
import types
import typing

# Third-party ----------------------------------------------------------------------------------------------------------
import frozendict
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from litprint.formatters import Printer
from litprint.utils import module_alias, public_module

# Fixtures -------------------------------------------------------------------------------------------------------------


@pytest.fixture
def printer() -> Printer:
    """Printer with default hooks and options."""
    return Printer()


@pytest.fixture
def eval_ns(request) -> dict:
    """
    Globals for eval() of generated literals.

    Binds every module a literal may name under the alias the default
    namespace hook writes, including the requesting test module.
    """
    module = request.module
    return {
        module_alias(module.__name__): module,
        "array": array,
        "abc": collections.abc,
        "collections": collections,
        "ctypes": ctypes,
        "dataclasses": dataclasses,
        "enum": enum,
        "queue": queue,
        "types": types,
        "typing": typing,
        module_alias(public_module(frozendict.frozendict)): frozendict,
    }


@pytest.fixture
def failing_sink():
    """Factory for a text sink that accepts `limit` writes and then raises OSError."""

    class FailingSink(io.StringIO):
        def __init__(self, limit: int):
            super().__init__()
            self.limit = limit
            self.calls = 0

        def write(self, s: str) -> int:
            self.calls += 1
            if self.calls > self.limit:
                raise OSError("disk full")
            return super().write(s)

    return FailingSink
