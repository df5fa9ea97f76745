"""
Customization hooks of a Printer and their defaults.

A Printer calls four hooks while formatting:

    namespace(writer, t) -> None
        Writes the qualified name of a named type t.
    field_filter(t, name) -> bool
        Decides whether a record field is written at all.
    field_replacer(writer, t, name, value) -> bool
        May write a field value itself; returns True when it did.
    element_replacer(writer, t, index, value) -> bool
        May write a sequence element itself; returns True when it did.

Replacers write with the writer they are given, which takes care of
indentation, so multi-line replacements line up with the surrounding literal.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import TYPE_CHECKING, Any, Callable, Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .io import Writer
from .syntax import DOT
from .utils import fmt_type, module_alias

if TYPE_CHECKING:
    from .reflect import TypeInfo

# Hook types -----------------------------------------------------------------------------------------------------------

NamespaceHook = Callable[[Writer, "TypeInfo"], None]
FieldFilter = Callable[["TypeInfo", str], bool]
FieldReplacer = Callable[[Writer, "TypeInfo", str, Any], bool]
ElementReplacer = Callable[[Writer, "TypeInfo", int, Any], bool]


# Defaults -------------------------------------------------------------------------------------------------------------

def pkg_name(writer: Writer, t: "TypeInfo") -> None:
    """
    Write 'alias.Name' for a named type, where alias is the last segment of its module.

    Types from 'builtins' and '__main__' are written unqualified.
    """
    alias = module_alias(t.namespace)
    if alias:
        writer.write(alias)
        writer.write(DOT)
    writer.write(t.name)


def no_filter(t: "TypeInfo", name: str) -> bool:
    return True


def no_field_replace(writer: Writer, t: "TypeInfo", name: str, value: Any) -> bool:
    return False


def no_element_replace(writer: Writer, t: "TypeInfo", index: int, value: Any) -> bool:
    return False


# Helpers --------------------------------------------------------------------------------------------------------------

def exclude_fields(record: type, *names: str) -> FieldFilter:
    """
    Build a field filter that drops the named fields of one record type.

    Fields of other record types are kept.

    Example:
        >>> p = Printer(field_filter=exclude_fields(User, "password"))
    """
    if not isinstance(record, type):
        raise TypeError(f"record must be a class, but got {fmt_type(record)}")
    excluded = frozenset(names)

    def field_filter(t: "TypeInfo", name: str) -> bool:
        return not (t.py_type is record and name in excluded)

    return field_filter


def named_constants(constants: Mapping[Any, str]) -> Callable[[Writer, "TypeInfo", Any, Any], bool]:
    """
    Build a replacer that writes a symbolic name in place of known values.

    Values match by type and equality, so True does not match a constant
    registered for 1. The result works as both a field replacer and an
    element replacer.

    Example:
        >>> p = Printer(field_replacer=named_constants({0o644: "DEFAULT_MODE"}))
    """
    if not isinstance(constants, abc.Mapping):
        raise TypeError(f"constants must be a mapping, but got {fmt_type(constants)}")
    table = {(type(value), value): name for value, name in constants.items()}

    def replace(writer: Writer, t: "TypeInfo", key: Any, value: Any) -> bool:
        try:
            name = table.get((type(value), value))
        except TypeError:
            # Unhashable values never match
            return False
        if name is None:
            return False
        writer.write(name)
        return True

    return replace
