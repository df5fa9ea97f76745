"""
Syntax fragments of the generated Python literals.

Read-only module constants; every piece of punctuation or keyword the
formatters emit comes from here.
"""

# Punctuation ----------------------------------------------------------------------------------------------------------

DOT = "."
COMMA = ","
COMMA_SPACE = ", "
COLON_SPACE = ": "
EQUALS = "="
NEWLINE = "\n"
BRACKET_OPEN = "["
BRACKET_CLOSE = "]"
BRACE_OPEN = "{"
BRACE_CLOSE = "}"
PAREN_OPEN = "("
PAREN_CLOSE = ")"
ELLIPSIS = "..."
UNION = " | "
TIMES = " * "

# Default indentation unit
INDENT = "    "

# Literals -------------------------------------------------------------------------------------------------------------

NONE = "None"
TRUE = "True"
FALSE = "False"
EMPTY_SET = "set()"
COMPLEX_ADD = " + "
IMAG_UNIT = "j"
ZERO_COMPLEX = "0j"
FLOAT_INF = "float('inf')"
FLOAT_NEG_INF = "float('-inf')"
FLOAT_NAN = "float('nan')"
COMPLEX_CALL = "complex("
CYCLE = ELLIPSIS

# Constructors and markers ---------------------------------------------------------------------------------------------

ANY = "typing.Any"
CALLABLE = "collections.abc.Callable"
TYPE = "type"
TUPLE = "tuple"
CTYPES_POINTER_TYPE = "ctypes.POINTER("
CTYPES_POINTER = "ctypes.pointer("
CTYPES_CFUNCTYPE = "ctypes.CFUNCTYPE("
CTYPES_STRUCTURE = "ctypes.Structure"
CTYPES_UNION = "ctypes.Union"
MAKE_DATACLASS = "dataclasses.make_dataclass("
NAMED_TUPLE = "typing.NamedTuple("
TYPED_DICT = "typing.TypedDict("
TYPE_CALL = "type("
FIELDS_KEY = "'_fields_': "
MAXSIZE = "maxsize="
MAXLEN = "maxlen="
