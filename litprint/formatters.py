"""
Formatting of arbitrary values as Python literals.

A Printer walks a value by reflection and writes a Python expression that,
evaluated with the named modules imported, rebuilds an equivalent value.
Records render as constructor calls with one keyword argument per line,
sequences and maps as indented displays, and types by their qualified names.

Example:
    >>> print(fmt_literal([1, 2]))
    [
        1,
        2,
    ]

Output conventions:
    - Every element, entry and field sits on its own line and ends with ','
    - Fields equal to their default are omitted unless formatting verbosely
    - Functions render as None; a value revisited on its own path renders as ...
    - Values with no literal form (plain objects, say) render as nothing
"""

# Standard library -----------------------------------------------------------------------------------------------------
import array
import collections
import collections.abc as abc
import ctypes
import io
import logging
import math
from dataclasses import dataclass, field
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .hooks import ElementReplacer, FieldFilter, FieldReplacer, NamespaceHook
from .hooks import no_element_replace, no_field_replace, no_filter, pkg_name
from .io import CountingWriter, IndentWriter, Writer
from .reflect import ANY, Flavor, Kind, TypeInfo, type_of
from .sentinels import MISSING, UNSET, UnsetType
from .syntax import (
    ANY as ANY_TYPE, BRACE_CLOSE, BRACE_OPEN, BRACKET_CLOSE, BRACKET_OPEN, CALLABLE, COLON_SPACE, COMMA,
    COMMA_SPACE, COMPLEX_ADD, COMPLEX_CALL, CTYPES_CFUNCTYPE, CTYPES_POINTER, CTYPES_POINTER_TYPE, CTYPES_STRUCTURE,
    CTYPES_UNION, CYCLE, DOT, ELLIPSIS, EMPTY_SET, EQUALS, FALSE, FIELDS_KEY, FLOAT_INF, FLOAT_NAN, FLOAT_NEG_INF,
    IMAG_UNIT, INDENT, MAKE_DATACLASS, MAXLEN, MAXSIZE, NAMED_TUPLE, NEWLINE, NONE, PAREN_CLOSE, PAREN_OPEN, TIMES,
    TRUE, TUPLE, TYPE, TYPE_CALL, TYPED_DICT, UNION, ZERO_COMPLEX,
)
from .utils import fmt_type

logger = logging.getLogger(__name__)

# Constants ------------------------------------------------------------------------------------------------------------

# Kinds that open a block and are tracked for cycles
_CONTAINER_KINDS = frozenset({Kind.REFERENCE, Kind.RECORD, Kind.ARRAY, Kind.LIST, Kind.MAP})

# Kinds whose literal already names the runtime type, so a dynamic slot needs no annotation
_SELF_DESCRIBING = frozenset({
    Kind.REFERENCE, Kind.RECORD, Kind.ARRAY, Kind.LIST, Kind.MAP,
    Kind.CHANNEL, Kind.FUNCTION, Kind.ENUM, Kind.TYPE, Kind.INVALID,
})

_BUILTIN_SCALARS = frozenset({int, float, complex, bool, str, bytes})

# Builtin containers written as displays rather than constructor calls
_DISPLAY_BRACKETS = {
    list: (BRACKET_OPEN, BRACKET_CLOSE),
    tuple: (PAREN_OPEN, PAREN_CLOSE),
    set: (BRACE_OPEN, BRACE_CLOSE),
}


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatContext:
    """
    Per-call formatting state threaded through recursion.

    Attributes:
        verbose: Write fields even when they equal their default.
        in_array: The value is an element of a sequence or a map value.
        path: Identities of the containers on the current recursion path.
    """

    verbose: bool = False
    in_array: bool = False
    path: set = field(default_factory=set, repr=False, compare=False)

    def nested(self,
               verbose: bool | UnsetType = UNSET,
               in_array: bool | UnsetType = UNSET,
               ) -> "FormatContext":
        """Return a context for a nested value; the cycle path is shared."""
        verbose = self.verbose if verbose is UNSET else verbose
        in_array = self.in_array if in_array is UNSET else in_array
        return FormatContext(verbose=verbose, in_array=in_array, path=self.path)


@dataclass(frozen=True)
class Printer:
    """
    Formats values as Python literals.

    A Printer is an immutable configuration; one instance can be shared and
    reused. All hooks are called synchronously during formatting, see
    litprint.hooks for their contracts.

    Attributes:
        namespace: Writes the qualified name of a named type.
        field_filter: Decides whether a record field is written.
        field_replacer: May write a record field value in place of its literal.
        element_replacer: May write a sequence element in place of its literal.
        indent: Indentation unit of nested blocks.
        sort_keys: Sort map keys and set elements instead of using iteration order.

    Raises:
        TypeError: If a hook is not callable, indent is not a str or sort_keys is not a bool.

    Example:
        >>> p = Printer(indent="  ")
        >>> print(p.to_str({"a": [1]}))
        {
          'a': [
            1,
          ],
        }
    """

    namespace: NamespaceHook = pkg_name
    field_filter: FieldFilter = no_filter
    field_replacer: FieldReplacer = no_field_replace
    element_replacer: ElementReplacer = no_element_replace
    indent: str = INDENT
    sort_keys: bool = False

    def __post_init__(self):
        """Validate hooks and options"""
        for name in ("namespace", "field_filter", "field_replacer", "element_replacer"):
            hook = getattr(self, name)
            if not callable(hook):
                raise TypeError(f"{name} must be callable, but got {fmt_type(hook)}")
        if not isinstance(self.indent, str):
            raise TypeError(f"indent must be str, but got {fmt_type(self.indent)}")
        if not isinstance(self.sort_keys, bool):
            raise TypeError(f"sort_keys must be bool, but got {fmt_type(self.sort_keys)}")

    def merge(self,
              namespace: NamespaceHook | UnsetType = UNSET,
              field_filter: FieldFilter | UnsetType = UNSET,
              field_replacer: FieldReplacer | UnsetType = UNSET,
              element_replacer: ElementReplacer | UnsetType = UNSET,
              indent: str | UnsetType = UNSET,
              sort_keys: bool | UnsetType = UNSET,
              ) -> "Printer":
        """
        Create a new Printer with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.

        Returns:
            New Printer instance with merged configuration.
        """
        namespace = self.namespace if namespace is UNSET else namespace
        field_filter = self.field_filter if field_filter is UNSET else field_filter
        field_replacer = self.field_replacer if field_replacer is UNSET else field_replacer
        element_replacer = self.element_replacer if element_replacer is UNSET else element_replacer
        indent = self.indent if indent is UNSET else indent
        sort_keys = self.sort_keys if sort_keys is UNSET else sort_keys
        return Printer(namespace=namespace,
                       field_filter=field_filter,
                       field_replacer=field_replacer,
                       element_replacer=element_replacer,
                       indent=indent,
                       sort_keys=sort_keys)

    # Entry points ------------------------------------------------------------

    def format(self, sink: Any, value: Any) -> int:
        """
        Write the literal of value to sink, omitting fields equal to their default.

        Args:
            sink: Text or binary stream; binary sinks receive UTF-8.

        Returns:
            Characters (or bytes, for binary sinks) written.

        Raises:
            WriteError: If the sink fails; carries the count written before the failure.
        """
        return self._write(sink, value, verbose=False)

    def format_verbose(self, sink: Any, value: Any) -> int:
        """Write the literal of value to sink, including fields equal to their default."""
        return self._write(sink, value, verbose=True)

    def to_str(self, value: Any, verbose: bool = False) -> str:
        """Return the literal of value as a string."""
        buf = io.StringIO()
        self._write(buf, value, verbose=verbose)
        return buf.getvalue()

    def wrap(self, value: Any) -> "Value":
        return Value(value, self)

    def write_value(self, writer: Writer, value: Any, t: TypeInfo | None = None, verbose: bool = False) -> None:
        """
        Write the literal of value to writer as if it filled a slot of type t.

        Meant for replacer hooks that write a literal of their own around a nested value.
        """
        t = type_of(type(value)) if t is None else t
        self._format(writer, value, t, FormatContext(verbose=verbose))

    def _write(self, sink: Any, value: Any, verbose: bool) -> int:
        writer = CountingWriter(sink)
        self._format(writer, value, type_of(type(value)), FormatContext(verbose=verbose))
        return writer.count

    # Type formatter ----------------------------------------------------------

    def format_type(self, w: Writer, t: TypeInfo, in_dynamic: bool = False) -> None:
        """
        Write a Python expression that evaluates to type t.

        Named types are written by the namespace hook. Anonymous types are
        written structurally: generic aliases with their parameters, local
        records and protocols in their functional construction form.

        Args:
            in_dynamic: t is a method signature inside a protocol listing; the
                receiver parameter is dropped.
        """
        if t.named:
            self.namespace(w, t)
            return

        kind = t.kind
        if kind is Kind.REFERENCE:
            if t.flavor is Flavor.CTYPES:
                w.write(CTYPES_POINTER_TYPE)
                self.format_type(w, t.elem)
                w.write(PAREN_CLOSE)
            else:
                self.format_type(w, t.elem)
                w.write(UNION)
                w.write(NONE)
        elif kind is Kind.RECORD and t.flavor is not Flavor.NAMESPACE:
            self._format_record_type(w, t)
        elif kind is Kind.ARRAY:
            self._format_array_type(w, t)
        elif kind in (Kind.LIST, Kind.CHANNEL):
            self.format_type(w, type_of(t.py_type))
            w.write(BRACKET_OPEN)
            self.format_type(w, t.elem)
            w.write(BRACKET_CLOSE)
        elif kind is Kind.MAP:
            self.format_type(w, type_of(t.py_type))
            w.write(BRACKET_OPEN)
            self.format_type(w, t.key)
            w.write(COMMA_SPACE)
            self.format_type(w, t.elem)
            w.write(BRACKET_CLOSE)
        elif kind is Kind.DYNAMIC:
            if t.flavor is Flavor.UNION:
                for i, member in enumerate(t.members):
                    if i:
                        w.write(UNION)
                    self.format_type(w, member)
            elif t.flavor is Flavor.PROTOCOL:
                self._format_protocol_type(w, t)
            else:
                w.write(ANY_TYPE)
        elif kind is Kind.FUNCTION:
            self._format_function_type(w, t, in_dynamic)
        elif kind is Kind.TYPE:
            w.write(TYPE)
            w.write(BRACKET_OPEN)
            self.format_type(w, t.elem)
            w.write(BRACKET_CLOSE)
        else:
            base = _importable_base(t)
            if base is None:
                logger.debug("no type expression for %r", t)
            else:
                logger.debug("no type expression for %r, writing its base %r", t, base)
                self.format_type(w, base)

    def _format_record_type(self, w: Writer, t: TypeInfo) -> None:
        cls = t.py_type
        name = repr(cls.__name__)
        flavor = t.flavor

        if flavor is Flavor.TYPEDDICT:
            w.write(TYPED_DICT + name + COMMA_SPACE)
            opening, closing = BRACE_OPEN, BRACE_CLOSE + PAREN_CLOSE
        elif flavor is Flavor.CTYPES:
            base = CTYPES_UNION if issubclass(cls, ctypes.Union) else CTYPES_STRUCTURE
            w.write(f"{TYPE_CALL}{name}{COMMA_SPACE}{PAREN_OPEN}{base}{COMMA}{PAREN_CLOSE}{COMMA_SPACE}")
            w.write(BRACE_OPEN + FIELDS_KEY)
            opening, closing = BRACKET_OPEN, BRACKET_CLOSE + BRACE_CLOSE + PAREN_CLOSE
        elif flavor is Flavor.NAMEDTUPLE:
            w.write(NAMED_TUPLE + name + COMMA_SPACE)
            opening, closing = BRACKET_OPEN, BRACKET_CLOSE + PAREN_CLOSE
        else:
            w.write(MAKE_DATACLASS + name + COMMA_SPACE)
            opening, closing = BRACKET_OPEN, BRACKET_CLOSE + PAREN_CLOSE

        w.write(opening)
        if t.fields:
            iw = IndentWriter(w, self.indent)
            for f in t.fields:
                iw.write(NEWLINE)
                if flavor is Flavor.TYPEDDICT:
                    iw.write(repr(f.name) + COLON_SPACE)
                    self.format_type(iw, f.type)
                else:
                    iw.write(PAREN_OPEN + repr(f.name) + COMMA_SPACE)
                    self.format_type(iw, f.type)
                    if f.tag:
                        iw.write(COMMA_SPACE + f.tag)
                    iw.write(PAREN_CLOSE)
                iw.write(COMMA)
            w.write(NEWLINE)
        w.write(closing)

    def _format_array_type(self, w: Writer, t: TypeInfo) -> None:
        if t.flavor is Flavor.CTYPES:
            w.write(PAREN_OPEN)
            self.format_type(w, t.elem)
            w.write(TIMES + str(t.length) + PAREN_CLOSE)
            return

        w.write(TUPLE + BRACKET_OPEN)
        if t.homogeneous:
            self.format_type(w, t.elem)
            w.write(COMMA_SPACE + ELLIPSIS)
        elif t.items:
            for i, item in enumerate(t.items):
                if i:
                    w.write(COMMA_SPACE)
                self.format_type(w, item)
        else:
            w.write(PAREN_OPEN + PAREN_CLOSE)
        w.write(BRACKET_CLOSE)

    def _format_protocol_type(self, w: Writer, t: TypeInfo) -> None:
        cls = t.py_type
        w.write(TYPE_CALL + repr(cls.__name__) + COMMA_SPACE + PAREN_OPEN)
        for i, base in enumerate(cls.__bases__):
            if i:
                w.write(COMMA_SPACE)
            self.format_type(w, type_of(base))
        if len(cls.__bases__) == 1:
            w.write(COMMA)
        w.write(PAREN_CLOSE + COMMA_SPACE + BRACE_OPEN)

        if t.methods:
            iw = IndentWriter(w, self.indent)
            for method in t.methods:
                iw.write(NEWLINE + repr(method.name) + COLON_SPACE)
                self.format_type(iw, method.type, in_dynamic=True)
                iw.write(COMMA)
            w.write(NEWLINE)
        w.write(BRACE_CLOSE + PAREN_CLOSE)

    def _format_function_type(self, w: Writer, t: TypeInfo, in_dynamic: bool) -> None:
        if t.flavor is Flavor.CTYPES:
            w.write(CTYPES_CFUNCTYPE)
            if t.results:
                self.format_type(w, t.results[0])
            else:
                w.write(NONE)
            for param in t.params:
                w.write(COMMA_SPACE)
                self.format_type(w, param)
            w.write(PAREN_CLOSE)
            return

        params = t.params[1:] if in_dynamic else t.params
        w.write(CALLABLE + BRACKET_OPEN)
        if t.variadic:
            w.write(ELLIPSIS)
        else:
            w.write(BRACKET_OPEN)
            for i, param in enumerate(params):
                if i:
                    w.write(COMMA_SPACE)
                self.format_type(w, param)
            w.write(BRACKET_CLOSE)
        w.write(COMMA_SPACE)

        results = t.results
        if not results:
            w.write(NONE)
        elif len(results) == 1:
            self.format_type(w, results[0])
        else:
            w.write(TUPLE + BRACKET_OPEN)
            for i, result in enumerate(results):
                if i:
                    w.write(COMMA_SPACE)
                self.format_type(w, result)
            w.write(BRACKET_CLOSE)
        w.write(BRACKET_CLOSE)

    # Value formatter ---------------------------------------------------------

    def _format(self, w: Writer, value: Any, t: TypeInfo, ctx: FormatContext) -> None:
        """Write the literal of value filling a slot declared as t."""
        if not t.conforms(value):
            t = ANY
        kind = t.kind

        if kind is Kind.DYNAMIC:
            self._format_dynamic(w, value, ctx)
        elif kind is Kind.REFERENCE and t.flavor is Flavor.OPTIONAL:
            self._format(w, value, t.elem, ctx)
        elif value is None:
            w.write(NONE)
        elif kind in _CONTAINER_KINDS:
            self._format_container(w, value, t, ctx)
        elif kind in (Kind.INT, Kind.UINT):
            w.write(str(int(_scalar(value))))
        elif kind is Kind.FLOAT:
            w.write(_float_literal(float(_scalar(value))))
        elif kind is Kind.COMPLEX:
            w.write(_complex_literal(complex(value)))
        elif kind is Kind.BOOL:
            w.write(TRUE if _scalar(value) else FALSE)
        elif kind is Kind.STR:
            w.write(_str_literal(_scalar(value)))
        elif kind is Kind.ADDRESS:
            address = _scalar(value)
            w.write(NONE if address is None else str(address))
        elif kind is Kind.CHANNEL:
            self._format_channel(w, value)
        elif kind is Kind.FUNCTION:
            w.write(NONE)
        elif kind is Kind.ENUM:
            self._format_enum(w, value, ctx)
        elif kind is Kind.TYPE:
            self.format_type(w, type_of(value))
        else:
            logger.debug("no literal form for %s", fmt_type(value))

    def _format_container(self, w: Writer, value: Any, t: TypeInfo, ctx: FormatContext) -> None:
        key = _identity(value)
        if key in ctx.path:
            logger.debug("%s refers back to itself, writing %s", fmt_type(value), CYCLE)
            w.write(CYCLE)
            return

        ctx.path.add(key)
        try:
            if t.kind is Kind.REFERENCE:
                self._format_reference(w, value, ctx)
            elif t.kind is Kind.RECORD:
                self._format_record(w, value, t, ctx)
            elif t.kind is Kind.MAP:
                self._format_map(w, value, t, ctx)
            else:
                self._format_sequence(w, value, t, ctx)
        finally:
            ctx.path.discard(key)

    def _format_reference(self, w: Writer, value: Any, ctx: FormatContext) -> None:
        # Null ctypes pointers are falsy
        if not value:
            w.write(NONE)
            return

        pointee = value.contents
        pt = type_of(type(pointee))
        w.write(CTYPES_POINTER)
        if pt.kind in (Kind.RECORD, Kind.ARRAY, Kind.REFERENCE):
            self._format(w, pointee, pt, ctx.nested(in_array=False))
        else:
            self.format_type(w, pt)
            w.write(PAREN_OPEN)
            self._format(w, pointee, pt, ctx.nested(in_array=True))
            w.write(PAREN_CLOSE)
        w.write(PAREN_CLOSE)

    def _format_record(self, w: Writer, value: Any, t: TypeInfo, ctx: FormatContext) -> None:
        # TypedDicts are plain dicts: elements use a display, and so does any key that is not an identifier
        as_dict = t.flavor is Flavor.TYPEDDICT and (ctx.in_array or not t.identifier_fields(value))
        if as_dict:
            w.write(BRACE_OPEN)
        else:
            self.format_type(w, t)
            w.write(PAREN_OPEN)

        iw = IndentWriter(w, self.indent)
        inner = ctx.nested(in_array=False)
        written = False
        for f in t.record_fields(value):
            fv = t.field_value(value, f)
            if fv is MISSING:
                continue
            if not ctx.verbose and f.is_default(fv):
                continue
            if not self.field_filter(t, f.name):
                continue

            iw.write(NEWLINE)
            if as_dict:
                iw.write(repr(f.name) + COLON_SPACE)
            else:
                iw.write(f.name + EQUALS)
            if not self.field_replacer(iw, t, f.name, fv):
                self._format(iw, fv, f.type, inner)
            iw.write(COMMA)
            written = True

        if written:
            w.write(NEWLINE)
        w.write(BRACE_CLOSE if as_dict else PAREN_CLOSE)

    def _format_sequence(self, w: Writer, value: Any, t: TypeInfo, ctx: FormatContext) -> None:
        items = self._ordered(value) if isinstance(value, abc.Set) else list(value)
        cls = type(value)
        tail = ""

        if isinstance(value, ctypes.Array):
            self.format_type(w, type_of(cls))
            opening, closing = PAREN_OPEN, PAREN_CLOSE
        elif cls in _DISPLAY_BRACKETS:
            if cls is set and not items:
                w.write(EMPTY_SET)
                return
            opening, closing = _DISPLAY_BRACKETS[cls]
        else:
            # Constructor call: Type(typecode, [items], maxlen=N)
            self.format_type(w, type_of(cls))
            w.write(PAREN_OPEN)
            if isinstance(value, array.array):
                w.write(repr(value.typecode))
                if items:
                    w.write(COMMA_SPACE)
            capacity = f"{MAXLEN}{value.maxlen}" if _shows_capacity(value, ctx) else ""
            if not items:
                w.write(capacity + PAREN_CLOSE)
                return
            opening, closing = _argument_brackets(value)
            tail = (COMMA_SPACE + capacity if capacity else "") + PAREN_CLOSE

        w.write(opening)
        if items:
            iw = IndentWriter(w, self.indent)
            inner = ctx.nested(in_array=True)
            for i, item in enumerate(items):
                iw.write(NEWLINE)
                if not self.element_replacer(iw, t, i, item):
                    self._format(iw, item, t.elem_at(i), inner)
                iw.write(COMMA)
            w.write(NEWLINE)
        w.write(closing + tail)

    def _format_map(self, w: Writer, value: Any, t: TypeInfo, ctx: FormatContext) -> None:
        entries = list(value.items())
        if self.sort_keys:
            entries = _sorted(entries, key=lambda entry: entry[0])

        if type(value) is dict:
            closing = BRACE_CLOSE
        else:
            self.format_type(w, type_of(type(value)))
            w.write(PAREN_OPEN)
            if isinstance(value, collections.defaultdict):
                self._format_factory(w, value.default_factory)
                if entries:
                    w.write(COMMA_SPACE)
            if not entries:
                w.write(PAREN_CLOSE)
                return
            closing = BRACE_CLOSE + PAREN_CLOSE

        w.write(BRACE_OPEN)
        if entries:
            iw = IndentWriter(w, self.indent)
            key_ctx = ctx.nested(in_array=False)
            value_ctx = ctx.nested(in_array=True)
            key_type, value_type = t.key or ANY, t.elem or ANY
            for k, v in entries:
                iw.write(NEWLINE)
                self._format(iw, k, key_type, key_ctx)
                iw.write(COLON_SPACE)
                self._format(iw, v, value_type, value_ctx)
                iw.write(COMMA)
            w.write(NEWLINE)
        w.write(closing)

    def _format_factory(self, w: Writer, factory: Any) -> None:
        """Write a defaultdict factory; only classes have a literal, other callables render as None."""
        if isinstance(factory, type):
            self.format_type(w, type_of(factory))
        else:
            if factory is not None:
                logger.debug("no literal form for default factory %r", factory)
            w.write(NONE)

    def _format_dynamic(self, w: Writer, value: Any, ctx: FormatContext) -> None:
        if value is None:
            w.write(NONE)
            return

        dyn = type_of(type(value))
        if dyn.kind is Kind.DYNAMIC:
            logger.debug("no literal form for %s", fmt_type(value))
            return

        plain = ctx.nested(verbose=False, in_array=False)
        if dyn.kind in _SELF_DESCRIBING or dyn.py_type in _BUILTIN_SCALARS:
            self._format(w, value, dyn, plain)
        else:
            self.format_type(w, dyn)
            w.write(PAREN_OPEN)
            self._format(w, value, dyn, plain)
            w.write(PAREN_CLOSE)

    def _format_channel(self, w: Writer, value: Any) -> None:
        self.format_type(w, type_of(type(value)))
        w.write(PAREN_OPEN)
        maxsize = getattr(value, "maxsize", 0)
        if maxsize > 0:
            w.write(MAXSIZE + str(maxsize))
        w.write(PAREN_CLOSE)

    def _format_enum(self, w: Writer, value: Any, ctx: FormatContext) -> None:
        cls = type(value)
        if not type_of(cls).named:
            # Members of a local enum are only reachable through their value
            logger.debug("%s is not importable, writing the member value", fmt_type(value))
            self._format(w, value.value, type_of(type(value.value)), ctx)
            return
        self.format_type(w, type_of(cls))
        name = value.name
        if name is not None and cls.__members__.get(name) is value:
            w.write(DOT + name)
        else:
            # Flag combinations without a name of their own
            w.write(PAREN_OPEN)
            self._format(w, value.value, type_of(type(value.value)), ctx)
            w.write(PAREN_CLOSE)

    def _ordered(self, items: Any) -> list:
        return _sorted(items) if self.sort_keys else list(items)


@dataclass(frozen=True)
class Value:
    """
    A value bound to a Printer, for use with format() and f-strings.

    The '+' flag selects verbose output.

    Example:
        >>> v = wrap([1])
        >>> f"{v}" == f"{v:+}" == "[\\n    1,\\n]"
        True
    """

    value: Any
    printer: Printer = field(default_factory=Printer)

    def __format__(self, format_spec: str) -> str:
        return self.printer.to_str(self.value, verbose="+" in format_spec)

    def __str__(self) -> str:
        return self.printer.to_str(self.value)

    def write_to(self, sink: Any) -> int:
        """Write the verbose literal to sink and return the count written."""
        return self.printer.format_verbose(sink, self.value)


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_literal(value: Any, *, verbose: bool = False, **options) -> str:
    """
    Return value as a Python literal.

    Args:
        value: Any object.
        verbose: Include fields equal to their default.
        **options: Printer options (namespace, field_filter, indent, sort_keys, ...).

    Examples:
        >>> fmt_literal(1.5 + 2j)
        '1.5 + 2.0j'
        >>> fmt_literal({"a": None}, indent="  ")
        "{\\n  'a': None,\\n}"
    """
    return Printer(**options).to_str(value, verbose=verbose)


def write_literal(sink: Any, value: Any, *, verbose: bool = False, **options) -> int:
    """Write value as a Python literal to sink and return the count written."""
    printer = Printer(**options)
    if verbose:
        return printer.format_verbose(sink, value)
    return printer.format(sink, value)


def wrap(value: Any, **options) -> Value:
    """Bind value to a Printer built from options; see Value."""
    return Value(value, Printer(**options))


# Helper Functions -----------------------------------------------------------------------------------------------------

def _identity(value: Any) -> Any:
    """Identity of a container; ctypes aggregates are identified by their memory, not their wrapper."""
    if isinstance(value, (ctypes.Structure, ctypes.Union, ctypes.Array)):
        return type(value), ctypes.addressof(value)
    return id(value)


def _scalar(value: Any) -> Any:
    """Python value of a ctypes scalar; other values are returned unchanged."""
    if isinstance(value, ctypes._SimpleCData):
        return value.value
    return value


def _shows_capacity(value: Any, ctx: FormatContext) -> bool:
    return (ctx.verbose
            and isinstance(value, collections.deque)
            and value.maxlen is not None)


def _argument_brackets(value: Any) -> tuple[str, str]:
    """Brackets of the display passed to a container constructor."""
    if isinstance(value, abc.Set):
        return BRACE_OPEN, BRACE_CLOSE
    if isinstance(value, tuple):
        return PAREN_OPEN, PAREN_CLOSE
    return BRACKET_OPEN, BRACKET_CLOSE


def _sorted(items: Any, key: Any = None) -> list:
    """Sort items, falling back to their repr when they are not mutually comparable."""
    items = list(items)
    try:
        return sorted(items, key=key)
    except TypeError:
        logger.debug("items are not mutually comparable, sorting by repr")
        return sorted(items, key=lambda item: repr(item if key is None else key(item)))


def _float_literal(x: float) -> str:
    if math.isnan(x):
        return FLOAT_NAN
    if math.isinf(x):
        return FLOAT_INF if x > 0 else FLOAT_NEG_INF
    return float.__repr__(x)


def _complex_literal(c: complex) -> str:
    """
    Python expression of a complex number: '1.5 + 2.0j', '2.0j', '1.5' or '0j'.

    Non-finite parts are written as complex(re, im).
    """
    real, imag = c.real, c.imag
    if not (math.isfinite(real) and math.isfinite(imag)):
        return f"{COMPLEX_CALL}{_float_literal(real)}{COMMA_SPACE}{_float_literal(imag)}{PAREN_CLOSE}"
    if real == 0 and imag == 0:
        return ZERO_COMPLEX
    if imag == 0:
        return float.__repr__(real)
    if real == 0:
        return float.__repr__(imag) + IMAG_UNIT
    return float.__repr__(real) + COMPLEX_ADD + float.__repr__(imag) + IMAG_UNIT


def _str_literal(s: Any) -> str:
    if s is None:
        return NONE
    if isinstance(s, str):
        return str.__repr__(s)
    return bytes.__repr__(bytes(s))


def _importable_base(t: TypeInfo) -> TypeInfo | None:
    """Nearest named base class of an unnamed local class, skipping object."""
    cls = t.py_type
    if not isinstance(cls, type):
        return None
    for base in cls.__mro__[1:-1]:
        info = type_of(base)
        if info.named:
            return info
    return None
