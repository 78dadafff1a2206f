r"""
Argot option model: options, their argument slots, and the @option decorator.

Overview
- Model
  • Argument: a named slot consumed right after its option's flag token. Holds an
    id (unique within the option), a short description, and the captured value.
  • Option: a recognizable flag with one or more aliases (e.g., -v/--version),
    a description, a mandatory marking, an ordered tuple of Argument slots, and
    an optional validator.

- Decorator
  • @option(...): build an Option and bind the decorated function as its
    validator. The decorator returns the configured Option.

- Introspection & representation
  • ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes the
    fields listed in __introspectable__ as read-only properties (see mirror()).

Metadata (sanitized on construction)
- Shared
  • descr: str (free text, may be empty).
- Option only
  • aliases: one or more non-empty strings, no duplicates; order is kept and the
    first alias is the canonical name used in help and diagnostics.
  • mandatory: bool (defaults to True).
  • arguments: Iterable of Argument | str | (id, descr); ids must be unique.
  • validator: Unset | Callable[[Option], bool].

Parsing state
- Option.provided flips to True the first time the parser accepts the option.
- Argument.value holds the last token captured for the slot ("" until then).
Both are written only by the parser; everything else is fixed after construction.

Quick example:
    >>> from argot.arguments import Option, Argument, option
    >>> verbose = Option("-v", "--verbose", descr="Talk more.", mandatory=False)
    >>> copy = Option("--copy", arguments=[Argument("src"), Argument("dst")])
    ...
    >>> @option("--port", arguments=["number"], mandatory=False)
    >>> def port(option):
    ...     return option.value("number").isdigit()
"""
import functools
import operator
import re
from collections.abc import Iterable

from .faults import ArgumentNotFoundError
from .utils import *


class ArgumentType(type):
    """
    Metaclass that turns model classes into introspectable descriptors.

    Responsibilities
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__.
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics; __displayable__ (if set) narrows what is shown.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Example
            - option(aliases=('-v', '--verbose'), descr='', mandatory=False, ...)
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate the 'descr' field shared by Option and Argument.

    Raises
    - TypeError: if 'descr' is not a string.
    """
    if not isinstance(metadata["descr"], str):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")


def _sanitize_named_metadata(cls, metadata, /):
    """
    Internal: validate and normalize the aliases of an Option.

    Aliases are arbitrary spellings (conventionally "-x" or "--long-name", but
    "/x" or plain words are accepted too). Each one must be a non-empty string
    and unique within the option. The collection is normalized into a tuple so
    registration order, and therefore the canonical alias, is preserved.

    Raises
    - TypeError: when no alias is given or an alias is not a string.
    - ValueError: when an alias is blank or duplicated.
    """
    aliases = []
    if not metadata["aliases"]:
        raise TypeError(f"{cls.__typename__} must specify at least one alias")

    for alias in metadata["aliases"]:
        if not isinstance(alias, str):
            raise TypeError(f"{cls.__typename__} aliases must be strings")
        elif not alias.strip():
            raise ValueError(f"{cls.__typename__} aliases cannot be empty-strings")
        elif alias in aliases:
            raise ValueError(f"{cls.__typename__} aliases cannot contain duplicates")
        aliases.append(alias)

    metadata["aliases"] = tuple(aliases)


def _sanitize_slot_metadata(cls, metadata, /):
    """
    Internal: validate and normalize the argument slots and validator of an Option.

    Accepted slot forms
    - Argument("id", "descr")
    - "id"               → Argument("id")
    - ("id", "descr")    → Argument("id", "descr")

    Raises
    - TypeError: when 'arguments' is not iterable, holds an unsupported entry,
      or 'validator' is neither Unset nor callable.
    - ValueError: when two slots share the same id.
    """
    if isinstance(metadata["arguments"], str) or not isinstance(metadata["arguments"], Iterable):
        raise TypeError(f"{cls.__typename__} 'arguments' must be an iterable of arguments")

    arguments = []
    for argument in metadata["arguments"]:
        match argument:
            case Argument():
                pass
            case str():
                argument = Argument(argument)
            case (str() as id, str() as descr):
                argument = Argument(id, descr)
            case _:
                raise TypeError(f"{cls.__typename__} 'arguments' entries must be arguments, ids or (id, descr) pairs")
        if any(argument.id == other.id for other in arguments):
            raise ValueError(f"{cls.__typename__} argument ids cannot contain duplicates")
        arguments.append(argument)

    metadata["arguments"] = tuple(arguments)

    if metadata["validator"] is not Unset and not callable(metadata["validator"]):
        raise TypeError(f"{cls.__typename__} 'validator' must be callable")


class Argument(metaclass=ArgumentType):
    """
    Named slot consumed by an option, one token per occurrence.

    Properties
    - id: identifier used to read the value back (Option.value(id)).
    - descr: free text shown in help, under the owning option.
    - value: the last captured token, "" until the parser fills the slot.
    """

    __introspectable__ = (
        "id",
        "descr",
        "value",
    )

    def __init__(self, id, /, descr=""):
        if not isinstance(id, str):
            raise TypeError(f"{type(self).__typename__} 'id' must be a string")
        elif not id.strip():
            raise ValueError(f"{type(self).__typename__} 'id' cannot be empty")

        metadata = {
            "id": id,
            "descr": descr,
        }
        _sanitize_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._value = ""

    def _capture(self, token, /):
        # Plain token text, no coercion.
        self._value = token


class Option(metaclass=ArgumentType):
    """
    Recognizable flag with aliases and an optional list of argument slots.

    Highlights
    - aliases: ordered; the first one is canonical (help rows, diagnostics).
    - mandatory: when True, the parse fails unless the option was provided.
    - arguments: slots filled in declared order right after each occurrence.
    - validator: called as validator(option) once per occurrence, after the
      slots are filled. A falsey result rejects the occurrence.
    - provided: False until the parser accepts the option once.

    Calling the option runs its validator against its current state, returning
    True when no validator was declared.
    """

    __introspectable__ = (
        "aliases",
        "descr",
        "mandatory",
        "arguments",
        "validator",
        "provided",
    )

    __displayable__ = (
        "aliases",
        "descr",
        "mandatory",
        "arguments",
        "provided",
    )

    def __init__(
            self,
            *aliases,
            descr="",
            mandatory=True,
            arguments=(),
            validator=Unset,
    ):
        """
        Construct an Option with the provided metadata.

        Parameters
        - aliases: one or more str
          Spellings matched verbatim against tokens. Unique within the option.
        - descr: str
          Description rendered in help (word-wrapped).
        - mandatory: bool
          Absence after a full parse is a failure. Defaults to True.
        - arguments: Iterable[Argument | str | tuple[str, str]]
          Slots consumed in order after the flag token.
        - validator: Callable[[Option], bool]
          Optional acceptance check run after the slots are filled.

        Notes
        - Metadata is sanitized in three passes (_sanitize_metadata,
          _sanitize_named_metadata, _sanitize_slot_metadata).
        """
        metadata = {
            "aliases": aliases,
            "descr": descr,
            "mandatory": bool(mandatory),
            "arguments": arguments,
            "validator": validator,
        }
        _sanitize_metadata(type(self), metadata)
        _sanitize_named_metadata(type(self), metadata)
        _sanitize_slot_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._provided = False
        self._slots = {argument.id: argument for argument in self._arguments}

    def __call__(self):
        if self._validator is Unset:
            return True
        return bool(self._validator(self))

    def __getitem__(self, id, /):
        return self.value(id)

    def value(self, id, /):
        """
        Return the token captured for the slot named 'id' ("" if not captured yet).

        Raises
        - ArgumentNotFoundError: the option declares no slot with that id.
        """
        try:
            return self._slots[id].value
        except KeyError:
            raise ArgumentNotFoundError(
                f"{type(self).__typename__} {self._aliases[0]!r} has no argument {id!r}"
            ) from None

    def values(self):
        """
        Return the captured values as an ordered {id: value} mapping.
        """
        return {argument.id: argument.value for argument in self._arguments}

    def _provide(self):
        self._provided = True


def option(*args, **kwargs):
    """
    Decorator/factory binding a validator to a new Option.

    Usage
        @option("--port", arguments=["number"], mandatory=False)
        def port(option):
            return option.value("number").isdigit()

    Behavior
    - The Option is built (and its metadata validated) when option(...) is called.
    - The decorated callable becomes the validator; the Option is returned.
    - A given decorator can be applied only once.

    Parameters
    - *args, **kwargs: forwarded to Option(...) (aliases, descr, mandatory, arguments).
    """
    if "validator" in kwargs:
        raise TypeError("@option() binds the decorated callable as validator")

    option = Option(*args, **kwargs)

    @rename("option")
    def wrapper(validator, /):
        if not callable(validator):
            raise TypeError("@option() must be applied to a callable")
        if option._validator is not Unset:
            raise TypeError("@option() must be applied only once")
        option._validator = validator
        return option

    return wrapper


__all__ = (
    "Argument",
    "Option",
    "option",
)

# Not part of the public API.
del ArgumentType
