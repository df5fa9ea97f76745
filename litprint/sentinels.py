"""
Sentinel objects for distinguishing "not provided" and "no default" from None.

None is a meaningful value for a formatter (it is the nil literal), so optional
arguments and field defaults need markers of their own. Sentinels are singletons
and are compared with 'is'.

Sentinels:
    UNSET: An optional argument that was not provided (see Printer.merge)
    MISSING: A record field with no default value, or an absent TypedDict key

Example:
    >>> def merge(indent: str | UnsetType = UNSET) -> str:
    ...     return "    " if indent is UNSET else indent
"""

from typing import Any

__all__ = [
    'UNSET',
    'MISSING',
    'UnsetType',
    'MissingType',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for sentinel singletons.

    Falsy, identity-compared, with an angle-bracketed repr.
    """
    __slots__ = ('_name',)

    _instance: '_SentinelBase | None' = None

    def __new__(cls) -> '_SentinelBase':
        """Ensures singleton behavior per subclass."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Unpickling returns the singleton."""
        return (self.__class__, ())


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType(_SentinelBase):
    """
    Sentinel type for UNSET.

    Marks an optional argument that the caller did not pass, so that None
    can still be passed explicitly.
    """
    _instance: 'UnsetType | None' = None

    def __init__(self) -> None:
        self._name = "UNSET"


class MissingType(_SentinelBase):
    """
    Sentinel type for MISSING.

    Marks a record field without a default value (such a field is never
    omitted from output) or a TypedDict key that is absent from the value.
    """
    _instance: 'MissingType | None' = None

    def __init__(self) -> None:
        self._name = "MISSING"


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET = UnsetType()
MISSING = MissingType()

