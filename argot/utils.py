"""
Argot utilities (internal helpers shared by the option model and the parser)

Overview
- UnsetType / Unset
  • Singleton sentinel meaning “not provided”, distinct from None and "".
  • Falsey, printable as "Unset", non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default; every other value (None, "", 0) is kept.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated callables for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr).
    Containers are handed out as fresh tuples/dicts so callers cannot mutate
    registry state through the public API.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce("", "fallback")
    ''
    >>> class X:
    ...     _aliases = ["-x", "--ex"]
    ...     aliases = mirror("aliases")
    >>> X().aliases
    ('-x', '--ex')
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Used where None is not a good marker (e.g. an optional validator that may
    legitimately be any callable). A single instance, Unset, is exposed.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is, only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce("", "fallback")     -> ""
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable
    - rename(name) -> decorator

    Raises
    - TypeError on wrong arity, a non-string name, or a callable whose names
      cannot be updated (built-ins).
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    """
    Copy container values into detached, read-only friendly shapes.

    - Sequence (non-string) → tuple
    - Mapping → dict (new object, values processed)
    - Set → frozenset
    - anything else → returned as-is (Unset materialized to None)
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_freeze, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_freeze, object.values())))
    elif isinstance(object, Set):
        return frozenset(map(_freeze, object))
    else:
        return coalesce(object)


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    Given self._items, declare items = mirror("items") to expose it safely.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Singleton, falsey, and distinct from None. Materialize with coalesce(value, default).
"""


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "UnsetType",
    "Unset",
)
