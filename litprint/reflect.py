"""
Runtime type descriptors.

Classes and type hints are mapped onto a closed set of structural kinds
(see Kind) that the formatters dispatch on. A TypeInfo describes one class or
hint; its constituents (element, key and field types, method signatures) are
resolved lazily and TypeInfo objects are cached per hint, so recursive types
such as a linked-list node referring to itself resolve without recursion.

Functions:
    type_of: Return the TypeInfo for a class or a type hint
    signature_of: Return a FUNCTION TypeInfo for a concrete function
"""

# Standard library -----------------------------------------------------------------------------------------------------
import array
import collections.abc as abc
import ctypes
import dataclasses
import enum
import functools
import inspect
import keyword
import logging
import queue
import sys
import types
import typing

from dataclasses import dataclass
from enum import Enum, unique
from functools import cached_property
from typing import Any, get_args, get_origin, get_type_hints

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import MISSING
from .utils import public_module, qualified_name

logger = logging.getLogger(__name__)

NoneType = type(None)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(str, Enum):
    """Structural kind of a type; the formatters handle each one in its own branch."""

    REFERENCE = "reference"
    RECORD = "record"
    ARRAY = "array"
    LIST = "list"
    MAP = "map"
    DYNAMIC = "dynamic"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    COMPLEX = "complex"
    BOOL = "bool"
    STR = "str"
    CHANNEL = "channel"
    FUNCTION = "function"
    ADDRESS = "address"
    ENUM = "enum"
    TYPE = "type"
    INVALID = "invalid"


@unique
class Flavor(str, Enum):
    """The family a type belongs to within its kind."""

    NONE = "none"
    OPTIONAL = "optional"
    CTYPES = "ctypes"
    DATACLASS = "dataclass"
    NAMEDTUPLE = "namedtuple"
    TYPEDDICT = "typeddict"
    NAMESPACE = "namespace"
    TUPLE = "tuple"
    SET = "set"
    UNION = "union"
    PROTOCOL = "protocol"
    CALLABLE = "callable"
    SIGNATURE = "signature"


@dataclass(frozen=True)
class Field:
    """
    A declared field of a record type.

    Attributes:
        name: Declared field name.
        type: Declared TypeInfo of the field.
        index: Position in declaration order.
        tag: Raw metadata: the dataclasses.field(...) call for dataclass fields
            with a default or metadata, the bit width of a ctypes bit field,
            empty otherwise.
        default: The value a field left unset takes, or MISSING for required fields.
    """

    name: str
    type: "TypeInfo"
    index: int
    tag: str = ""
    default: Any = MISSING

    def is_default(self, value: Any) -> bool:
        """Check whether value equals this field's default; required fields never do."""
        if self.default is MISSING:
            return False
        return _same_value(value, self.default)


@dataclass(frozen=True)
class Method:
    """A method of a protocol or abstract class with its signature as a FUNCTION TypeInfo."""

    name: str
    type: "TypeInfo"


class TypeInfo:
    """
    Structural description of a class or type hint.

    TypeInfo objects are built by type_of() and should be treated as immutable.
    Constituent types are cached properties, computed on first access.

    Attributes:
        kind: The structural Kind.
        py_type: The described class, the origin of a generic alias, or the
            function of a SIGNATURE; None for unions and typing.Any.
        name: Declared name, empty for anonymous types.
        namespace: Module the type is importable from, empty for anonymous types.
        flavor: The family within the kind.
        args: Type arguments of a generic alias or union.
    """

    def __init__(
        self,
        kind: Kind,
        py_type: Any = None,
        *,
        name: str = "",
        namespace: str = "",
        flavor: Flavor = Flavor.NONE,
        args: tuple = (),
    ) -> None:
        self.kind = kind
        self.py_type = py_type
        self.name = name
        self.namespace = namespace
        self.flavor = flavor
        self.args = args

    def __repr__(self) -> str:
        label = self.name or (self.args and repr(self.args)) or repr(self.py_type)
        return f"TypeInfo({self.kind.value}, {self.flavor.value}, {label})"

    @property
    def named(self) -> bool:
        return bool(self.name)

    @property
    def homogeneous(self) -> bool:
        """True for variable-length tuple hints, tuple[T, ...]."""
        return len(self.args) == 2 and self.args[1] is Ellipsis

    # Constituents ------------------------------------------------------------

    @cached_property
    def elem(self) -> "TypeInfo | None":
        """
        Pointee type of a REFERENCE, element type of a sequence or CHANNEL,
        value type of a MAP, argument of a TYPE; None when not applicable.
        """
        kind, flavor, args = self.kind, self.flavor, self.args
        if kind is Kind.REFERENCE:
            if flavor is Flavor.OPTIONAL:
                return type_of(args[0])
            if flavor is Flavor.CTYPES:
                return type_of(self.py_type._type_)
            return None
        if kind is Kind.ARRAY:
            if flavor is Flavor.CTYPES:
                return type_of(self.py_type._type_)
            return type_of(args[0]) if self.homogeneous else ANY
        if kind in (Kind.LIST, Kind.CHANNEL, Kind.TYPE):
            return type_of(args[0]) if args else ANY
        if kind is Kind.MAP:
            return type_of(args[1]) if len(args) == 2 else ANY
        return None

    @cached_property
    def key(self) -> "TypeInfo | None":
        if self.kind is not Kind.MAP:
            return None
        return type_of(self.args[0]) if self.args else ANY

    @cached_property
    def items(self) -> "tuple[TypeInfo, ...]":
        """Per-position member types of a fixed tuple hint such as tuple[int, str]."""
        if self.flavor is not Flavor.TUPLE or self.homogeneous:
            return ()
        return tuple(type_of(arg) for arg in self.args if arg != ())

    @cached_property
    def length(self) -> int | None:
        if self.kind is not Kind.ARRAY:
            return None
        if self.flavor is Flavor.CTYPES:
            return self.py_type._length_
        if self.args and not self.homogeneous:
            return len(self.items)
        return None

    @cached_property
    def fields(self) -> tuple[Field, ...]:
        """Declared fields of a RECORD in declaration order; SimpleNamespace fields are per instance."""
        if self.kind is not Kind.RECORD:
            return ()
        flavor = self.flavor
        if flavor is Flavor.DATACLASS:
            return _dataclass_fields(self.py_type)
        if flavor is Flavor.NAMEDTUPLE:
            return _namedtuple_fields(self.py_type)
        if flavor is Flavor.TYPEDDICT:
            hints = _hints(self.py_type)
            return tuple(Field(name, type_of(hint), i) for i, (name, hint) in enumerate(hints.items()))
        if flavor is Flavor.CTYPES:
            return _ctypes_fields(self.py_type)
        return ()

    @cached_property
    def methods(self) -> tuple[Method, ...]:
        """Public methods of a protocol or abstract class, base classes first, in definition order."""
        if self.kind is not Kind.DYNAMIC or not isinstance(self.py_type, type):
            return ()
        found = {}
        for klass in reversed(self.py_type.__mro__):
            if klass.__module__ in _FRAMEWORK_MODULES:
                continue
            for name, attr in vars(klass).items():
                if not name.startswith("_") and inspect.isfunction(attr):
                    found[name] = attr
        return tuple(Method(name, signature_of(func)) for name, func in found.items())

    @cached_property
    def params(self) -> "tuple[TypeInfo, ...]":
        """Positional parameter types of a FUNCTION."""
        if self.kind is not Kind.FUNCTION:
            return ()
        flavor = self.flavor
        if flavor is Flavor.CALLABLE:
            if not self.args or self.args[0] is Ellipsis:
                return ()
            return tuple(type_of(arg) for arg in self.args[0])
        if flavor is Flavor.CTYPES:
            return tuple(type_of(arg) for arg in (self.py_type._argtypes_ or ()))
        if flavor is Flavor.SIGNATURE:
            sig = _signature(self.py_type)
            if sig is None:
                return ()
            hints = _hints(self.py_type)
            return tuple(
                type_of(hints.get(p.name, Any))
                for p in sig.parameters.values()
                if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
            )
        return ()

    @cached_property
    def variadic(self) -> bool:
        """True when a FUNCTION accepts arbitrary positional arguments."""
        if self.kind is not Kind.FUNCTION:
            return False
        if self.flavor is Flavor.CALLABLE:
            return not self.args or self.args[0] is Ellipsis
        if self.flavor is Flavor.SIGNATURE:
            sig = _signature(self.py_type)
            return sig is not None and any(p.kind is p.VAR_POSITIONAL for p in sig.parameters.values())
        return False

    @cached_property
    def results(self) -> "tuple[TypeInfo, ...]":
        """Result types of a FUNCTION; empty when it returns None."""
        if self.kind is not Kind.FUNCTION:
            return ()
        if self.flavor is Flavor.CALLABLE:
            ret = self.args[-1] if self.args else Any
        elif self.flavor is Flavor.CTYPES:
            ret = self.py_type._restype_
        elif self.flavor is Flavor.SIGNATURE:
            ret = _hints(self.py_type).get("return", Any)
        else:
            return ()
        if ret is None or ret is NoneType:
            return ()
        return (type_of(ret),)

    @cached_property
    def members(self) -> "tuple[TypeInfo, ...]":
        """Member types of a union."""
        if self.flavor is not Flavor.UNION:
            return ()
        return tuple(type_of(arg) for arg in self.args)

    # Per-value access --------------------------------------------------------

    def elem_at(self, index: int) -> "TypeInfo":
        """Declared type of the element at index of a sequence value."""
        if self.items:
            return self.items[index] if index < len(self.items) else ANY
        return self.elem or ANY

    def record_fields(self, value: Any) -> tuple[Field, ...]:
        """Fields of a record value; SimpleNamespace instances list their own attributes."""
        if self.flavor is Flavor.NAMESPACE:
            return tuple(Field(name, ANY, i) for i, name in enumerate(vars(value)))
        return self.fields

    def field_value(self, value: Any, field: Field) -> Any:
        """Value of a field on a record value, or MISSING when the field is absent."""
        if self.flavor is Flavor.TYPEDDICT:
            return value.get(field.name, MISSING)
        return getattr(value, field.name, MISSING)

    def identifier_fields(self, value: Any) -> bool:
        """Check whether every field of a record value can be passed as a keyword argument."""
        return all(
            f.name.isidentifier() and not keyword.iskeyword(f.name)
            for f in self.record_fields(value)
        )

    def conforms(self, value: Any) -> bool:
        """
        Check whether value can be formatted as this declared type.

        A slot whose value does not conform (a str in an int field, say) is
        formatted as if it were declared DYNAMIC.
        """
        kind = self.kind
        if kind is Kind.DYNAMIC:
            return True
        if value is None:
            return kind in _NILABLE
        py_type = self.py_type

        if kind is Kind.REFERENCE:
            if self.flavor is Flavor.OPTIONAL:
                return self.elem.conforms(value)
            return self.flavor is Flavor.CTYPES and isinstance(value, py_type)
        # Enum members keep their enum rendering even in an int or str slot
        if isinstance(value, enum.Enum):
            return kind is Kind.ENUM and isinstance(value, py_type)
        # Scalars and records match exactly; a subclass value keeps its own type through a conversion literal
        if kind in _SCALAR_BUILTINS:
            return type(value) in _SCALAR_BUILTINS[kind] or type(value) is py_type
        if kind is Kind.RECORD:
            if self.flavor is Flavor.TYPEDDICT:
                return isinstance(value, dict) and value.keys() <= {f.name for f in self.fields}
            return type(value) is py_type
        if kind in (Kind.ARRAY, Kind.LIST, Kind.MAP):
            # A namedtuple is a tuple but not an ARRAY value
            return isinstance(value, py_type) and type_of(type(value)).kind is kind
        if kind is Kind.FUNCTION:
            return callable(value)
        if kind is Kind.TYPE:
            return isinstance(value, _TYPE_CLASSES)
        if kind is Kind.INVALID:
            return False
        return isinstance(value, py_type)


# Constants ------------------------------------------------------------------------------------------------------------

ANY = TypeInfo(Kind.DYNAMIC)

# Kinds whose slots may hold None as their nil value
_NILABLE = frozenset({Kind.REFERENCE, Kind.LIST, Kind.MAP, Kind.CHANNEL, Kind.FUNCTION, Kind.ADDRESS})

# Python types read from a scalar slot, keyed by kind; ctypes fields hand out these as well
_SCALAR_BUILTINS = {
    Kind.INT: (int,),
    Kind.UINT: (int,),
    Kind.ADDRESS: (int,),
    Kind.FLOAT: (float,),
    Kind.COMPLEX: (complex,),
    Kind.BOOL: (bool,),
    Kind.STR: (str, bytes),
}

# Modules whose classes contribute no methods to a protocol listing
_FRAMEWORK_MODULES = frozenset({"builtins", "typing", "abc", "typing_extensions", "_collections_abc"})

# ctypes simple-type codes
_CTYPES_CODES = {
    **dict.fromkeys("bhilq", Kind.INT),
    **dict.fromkeys("BHILQ", Kind.UINT),
    **dict.fromkeys("fdg", Kind.FLOAT),
    **dict.fromkeys("?v", Kind.BOOL),
    **dict.fromkeys("zZcu", Kind.STR),
    "P": Kind.ADDRESS,
}

_FUNCTION_CLASSES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    functools.partial,
)

# Classes of objects that stand for types: classes, generic aliases, unions, special forms
_TYPE_CLASSES = (
    type,
    types.GenericAlias,
    types.UnionType,
    type(typing.List[int]),
    type(typing.Union[int, str]),
    type(typing.Optional),
    type(typing.Any),
)

# Bound on cached descriptors; local classes created per call would otherwise pile up
_CACHE_SIZE = 1024

_CTYPES_POINTER = ctypes._Pointer
_CTYPES_FUNCTION = ctypes._CFuncPtr
_CTYPES_SIMPLE = ctypes._SimpleCData


# Methods --------------------------------------------------------------------------------------------------------------

def type_of(hint: Any) -> TypeInfo:
    """
    Return the TypeInfo for a class or a type hint.

    Accepts classes, generic aliases (list[int], typing.Dict[str, int]),
    unions and Optional, Callable, Annotated, Literal, NewType and type[...]
    hints. Unresolved forward references, TypeVars and unsupported hints map
    to the DYNAMIC descriptor ANY.

    Examples:
        >>> type_of(int).kind
        <Kind.INT: 'int'>
        >>> type_of(list[int]).elem.kind
        <Kind.INT: 'int'>
        >>> type_of(int | None).kind
        <Kind.REFERENCE: 'reference'>
    """
    key = _hint_key(hint)
    try:
        hash((key, hint))
    except TypeError:
        return _resolve(hint)
    return _cached_resolve(key, hint)


def signature_of(func: Any) -> TypeInfo:
    """Return a FUNCTION TypeInfo whose parameters and results come from func's signature."""
    return TypeInfo(Kind.FUNCTION, func, flavor=Flavor.SIGNATURE)


# Helper Functions -----------------------------------------------------------------------------------------------------

@functools.lru_cache(maxsize=_CACHE_SIZE)
def _cached_resolve(key: Any, hint: Any) -> TypeInfo:
    return _resolve(hint)


def _hint_key(hint: Any) -> Any:
    """
    Cache key of a hint that tells apart hints equal up to union member order.

    int | str == str | int, but the two are written differently.
    """
    if isinstance(hint, list):
        return tuple(_hint_key(arg) for arg in hint)
    args = get_args(hint)
    if not args:
        return hint
    return hint, tuple(_hint_key(arg) for arg in args)


def _resolve(hint: Any) -> TypeInfo:
    if hint is None:
        hint = NoneType
    if hint is Any or hint is Ellipsis or isinstance(hint, (str, typing.TypeVar, typing.ForwardRef)):
        return ANY

    origin = get_origin(hint)
    args = get_args(hint)

    if origin is typing.Annotated:
        return type_of(args[0])
    if origin in (typing.ClassVar, typing.Final) or _is_required_marker(origin):
        return type_of(args[0]) if args else ANY
    if origin is typing.Literal:
        return type_of(type(args[0])) if args else ANY
    if origin is typing.Union or origin is types.UnionType:
        return _union_info(args)

    if origin is not None:
        if origin is abc.Callable:
            return TypeInfo(Kind.FUNCTION, origin, flavor=Flavor.CALLABLE, args=args)
        if origin is type:
            return TypeInfo(Kind.TYPE, type, args=args)
        if origin is tuple:
            return TypeInfo(Kind.ARRAY, tuple, flavor=Flavor.TUPLE, args=args)
        if not isinstance(origin, type):
            logger.debug("no descriptor for hint %r, using typing.Any", hint)
            return ANY
        base = type_of(origin)
        if base.kind in (Kind.LIST, Kind.MAP, Kind.CHANNEL, Kind.ARRAY):
            return TypeInfo(base.kind, origin, flavor=base.flavor, args=args)
        return base

    if isinstance(hint, typing.NewType):
        return type_of(hint.__supertype__)
    if isinstance(hint, type):
        return _class_info(hint)

    logger.debug("no descriptor for hint %r, using typing.Any", hint)
    return ANY


def _union_info(args: tuple) -> TypeInfo:
    rest = tuple(arg for arg in args if arg is not NoneType)
    if len(rest) < len(args):
        inner = rest[0] if len(rest) == 1 else typing.Union[rest]
        return TypeInfo(Kind.REFERENCE, flavor=Flavor.OPTIONAL, args=(inner,))
    return TypeInfo(Kind.DYNAMIC, flavor=Flavor.UNION, args=args)


def _class_info(cls: type) -> TypeInfo:
    kind, flavor = _classify(cls)
    info = TypeInfo(kind, cls, flavor=flavor)

    if cls is NoneType:
        info.name = "None"
        info.namespace = "builtins"
        return info
    if kind in (Kind.REFERENCE, Kind.ARRAY, Kind.FUNCTION) and flavor is Flavor.CTYPES:
        return info
    # Local classes cannot be imported: records and protocols are written structurally, others by an importable base
    if "<locals>" in cls.__qualname__:
        logger.debug("%s is local to a function, leaving it unnamed", cls.__qualname__)
        return info

    info.name = cls.__qualname__
    info.namespace = public_module(cls)
    return info


def _classify(cls: type) -> tuple[Kind, Flavor]:
    """Return the Kind and Flavor of a class. Order matters: bool is an int, IntEnum is an Enum, and so on."""
    if cls is NoneType:
        return Kind.REFERENCE, Flavor.NONE
    if issubclass(cls, enum.Enum):
        return Kind.ENUM, Flavor.NONE
    if issubclass(cls, bool):
        return Kind.BOOL, Flavor.NONE
    if issubclass(cls, int):
        return Kind.INT, Flavor.NONE
    if issubclass(cls, float):
        return Kind.FLOAT, Flavor.NONE
    if issubclass(cls, complex):
        return Kind.COMPLEX, Flavor.NONE
    if issubclass(cls, (str, bytes)):
        return Kind.STR, Flavor.NONE

    # ctypes
    if issubclass(cls, _CTYPES_SIMPLE):
        return _CTYPES_CODES.get(getattr(cls, "_type_", ""), Kind.INVALID), Flavor.CTYPES
    if issubclass(cls, _CTYPES_POINTER):
        return Kind.REFERENCE, Flavor.CTYPES
    if issubclass(cls, (ctypes.Structure, ctypes.Union)):
        return Kind.RECORD, Flavor.CTYPES
    if issubclass(cls, ctypes.Array):
        return Kind.ARRAY, Flavor.CTYPES
    if issubclass(cls, _CTYPES_FUNCTION):
        return Kind.FUNCTION, Flavor.CTYPES

    # Records
    if typing.is_typeddict(cls):
        return Kind.RECORD, Flavor.TYPEDDICT
    if dataclasses.is_dataclass(cls):
        return Kind.RECORD, Flavor.DATACLASS
    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return Kind.RECORD, Flavor.NAMEDTUPLE
    if issubclass(cls, types.SimpleNamespace):
        return Kind.RECORD, Flavor.NAMESPACE

    # Containers
    if issubclass(cls, tuple):
        return Kind.ARRAY, Flavor.TUPLE
    if issubclass(cls, abc.Mapping):
        return Kind.MAP, Flavor.NONE
    if issubclass(cls, abc.Set):
        return Kind.LIST, Flavor.SET
    if issubclass(cls, (abc.MutableSequence, array.array)):
        return Kind.LIST, Flavor.NONE
    if _is_queue_class(cls):
        return Kind.CHANNEL, Flavor.NONE

    if issubclass(cls, _FUNCTION_CLASSES):
        return Kind.FUNCTION, Flavor.NONE
    if issubclass(cls, _TYPE_CLASSES):
        return Kind.TYPE, Flavor.NONE

    if cls is object:
        return Kind.DYNAMIC, Flavor.NONE
    if getattr(cls, "_is_protocol", False) or inspect.isabstract(cls):
        return Kind.DYNAMIC, Flavor.PROTOCOL
    return Kind.INVALID, Flavor.NONE


def _is_queue_class(cls: type) -> bool:
    if issubclass(cls, (queue.Queue, queue.SimpleQueue)):
        return True
    # No asyncio.Queue can exist unless asyncio has been imported
    asyncio = sys.modules.get("asyncio")
    return asyncio is not None and issubclass(cls, asyncio.Queue)


def _is_required_marker(origin: Any) -> bool:
    return origin is not None and origin in (getattr(typing, "Required", None), getattr(typing, "NotRequired", None))


def _hints(obj: Any) -> dict:
    """
    Resolved annotations of a class or function.

    Falls back to the raw annotations when a forward reference cannot be
    resolved; the unresolved strings then map to typing.Any.
    """
    try:
        return get_type_hints(obj)
    except (NameError, TypeError, AttributeError, SyntaxError) as exc:
        logger.debug("cannot resolve type hints of %r: %s", obj, exc)
        return dict(getattr(obj, "__annotations__", None) or {})


def _signature(func: Any) -> inspect.Signature | None:
    try:
        return inspect.signature(func)
    except (TypeError, ValueError):
        return None


def _dataclass_fields(cls: type) -> tuple[Field, ...]:
    hints = _hints(cls)
    result = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        if f.default is not dataclasses.MISSING:
            default = f.default
        elif f.default_factory is not dataclasses.MISSING:
            default = f.default_factory()
        else:
            default = MISSING
        result.append(Field(f.name, type_of(hints.get(f.name, Any)), len(result), _dataclass_tag(f), default))
    return tuple(result)


def _dataclass_tag(f: dataclasses.Field) -> str:
    """Render the dataclasses.field(...) call that recreates a field's default and metadata."""
    args = []
    if f.default is not dataclasses.MISSING:
        args.append(f"default={f.default!r}")
    elif f.default_factory is not dataclasses.MISSING:
        args.append(f"default_factory={qualified_name(f.default_factory)}")
    if f.metadata:
        args.append(f"metadata={dict(f.metadata)!r}")
    return f"dataclasses.field({', '.join(args)})" if args else ""


def _namedtuple_fields(cls: type) -> tuple[Field, ...]:
    hints = _hints(cls)
    defaults = getattr(cls, "_field_defaults", {})
    return tuple(
        Field(name, type_of(hints.get(name, Any)), i, "", defaults.get(name, MISSING))
        for i, name in enumerate(cls._fields)
    )


def _ctypes_fields(cls: type) -> tuple[Field, ...]:
    """Fields of a ctypes Structure or Union, base class fields first, defaulting to the zeroed value."""
    entries = []
    for klass in reversed(cls.__mro__):
        entries.extend(vars(klass).get("_fields_", ()))
    zero = cls()
    return tuple(
        Field(entry[0], type_of(entry[1]), i, str(entry[2]) if len(entry) > 2 else "", getattr(zero, entry[0]))
        for i, entry in enumerate(entries)
    )


def _same_value(a: Any, b: Any) -> bool:
    """Type-exact equality; ctypes aggregates compare by content and null pointers are equal."""
    if type(a) is not type(b):
        return False
    if isinstance(a, (ctypes.Structure, ctypes.Union)):
        return all(_same_value(getattr(a, f.name), getattr(b, f.name)) for f in type_of(type(a)).fields)
    if isinstance(a, ctypes.Array):
        return all(_same_value(x, y) for x, y in zip(a, b))
    if isinstance(a, _CTYPES_POINTER):
        return not a and not b
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False
