"""
Naming utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys
from typing import Any

# Constants ------------------------------------------------------------------------------------------------------------

# Modules whose names are in scope without an import
UNQUALIFIED_MODULES = frozenset({"builtins", "__main__"})


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.
    Nested classes are named by their qualified name ('Outer.Inner').

    Parameters:
        obj (Any): An object or a class.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(str)
        'str'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    return getattr(cls, "__qualname__", cls.__name__)


def fmt_type(obj: Any) -> str:
    """
    Format the type of obj for exception messages, like '<int>'.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(str)
        '<str>'
    """
    return f"<{class_name(obj)}>"


def module_alias(module: str) -> str:
    """
    Return the name a module is usually bound to after import: its last dotted segment.

    Modules that need no import ('builtins', '__main__') map to an empty string.

    Examples:
        >>> module_alias("collections.abc")
        'abc'
        >>> module_alias("builtins")
        ''
    """
    if not module or module in UNQUALIFIED_MODULES:
        return ""
    return module.rsplit(".", 1)[-1]


def public_module(cls: type) -> str:
    """
    Return the module a class is best imported from.

    Prefers the shortest parent package that re-exports the class under the
    same name ('asyncio' for 'asyncio.queues.Queue'), then the public twin of
    a private accelerator module ('queue' for '_queue.SimpleQueue'), and
    falls back to cls.__module__.

    Examples:
        >>> import asyncio
        >>> public_module(asyncio.Queue)
        'asyncio'
    """
    module = getattr(cls, "__module__", None) or ""
    name = getattr(cls, "__name__", "")
    parts = module.split(".")
    for i in range(1, len(parts)):
        parent = sys.modules.get(".".join(parts[:i]))
        if parent is not None and getattr(parent, name, None) is cls:
            return ".".join(parts[:i])
    if module.startswith("_"):
        twin = sys.modules.get(module.lstrip("_"))
        if twin is not None and getattr(twin, name, None) is cls:
            return twin.__name__
    return module


def qualified_name(obj: Any) -> str:
    """
    Return 'alias.QualName' for a class or function, the way generated code refers to it.

    Examples:
        >>> import collections
        >>> qualified_name(collections.OrderedDict)
        'collections.OrderedDict'
        >>> qualified_name(list)
        'list'
    """
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)
    alias = module_alias(public_module(obj))
    return f"{alias}.{name}" if alias else name
