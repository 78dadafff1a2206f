"""
Argot outcomes, faults (user-input diagnostics) and programmer errors.

Scope
- Outcome: the four results a parse call can return; values double as exit codes.
- FaultCode: canonical, stable numeric identifiers for user-facing diagnostics.
- ParserFault: base type for user-input problems. Faults carry a message plus
  context options and know how to render themselves; the parser reports them
  through trigger() and returns an Outcome instead of raising.
- ParsingException: base type for contract violations by the calling code
  (unknown alias or argument id on lookup, duplicated alias on registration).
  These are raised.
- ShadowedAliasWarning: registration-time notice for aliases that can never match.

Integration
- The parser builds a fault, then calls trigger(fault, **ctx) where ctx holds
  the rendering options (program, colorful, fancy).
- The default rendering prints the message on stderr through rich. Plain mode
  prints only the message line; fancy mode wraps message and hint in a panel.
"""
import copy
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset


class Outcome(IntEnum):
    """
    result of a parse call.

    - OK: every token matched and every mandatory option was provided.
    - HELP: a reserved help spelling was reached; help was printed.
    - FAILED: unknown option, missing argument value or missing mandatory option.
    - FAILED_VALIDATOR: an option validator rejected an occurrence.
    """
    OK                = 0
    HELP              = 1
    FAILED            = -2
    FAILED_VALIDATOR  = -3


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - matching (1111x): UNKNOWN_OPTION
    - consuming (1112x): MISSING_ARGUMENT
    - completeness (1113x): MISSING_MANDATORY
    - delegated to validators (1114x): REJECTED_OPTION
    - registration warnings (12xxx): SHADOWED_ALIAS
    """
    UNKNOWN_OPTION     = 11112
    MISSING_ARGUMENT   = 11122
    MISSING_MANDATORY  = 11135
    REJECTED_OPTION    = 11141

    SHADOWED_ALIAS     = 12111

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__ to
        override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParsingException(Exception):
    """
    raised when the code consuming the library breaks its contract.
    """


class OptionNotFoundError(ParsingException, LookupError): ...
class ArgumentNotFoundError(ParsingException, LookupError): ...
class DuplicatedAliasError(ParsingException, ValueError): ...


class ShadowedAliasWarning(UserWarning): ...


class ParserFault(Exception):
    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return self.message

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # pinky title
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[style] if colorful else "")

        message = text(self.message, "error-message")

        if not self.options.get("fancy", False):
            return message

        code = self.options.get("code", Unset)
        header = Text.assemble(
            "[ ",
            text(self.options.get("program") or "error", "prog-name"),
            " — ",
            text(code.normalize() if code else "", "code"),
            " | ",
            text(self.options.get("title", "").title(), "error-title"),
            " ]"
        )
        hint = Text.assemble(text(" → ", "hint-arrow"), text(self.options.get("hint", ""), "hint"))
        return Panel(Group(message, hint), title=header, title_align="left")

    def __trigger__(self):
        console = Console(stderr=True)
        console.print(self, soft_wrap=not self.options.get("fancy", False))

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionFault(ParserFault): ...
class MissingArgumentFault(ParserFault): ...
class MissingMandatoryFault(ParserFault): ...
class RejectedOptionFault(ParserFault): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given rendering options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParserFault).
    - options are merged into a copy of the fault via copy.replace() before
      triggering, so the original fault object is never mutated.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "Outcome",
    "FaultCode",
    "ParsingException",
    "OptionNotFoundError",
    "ArgumentNotFoundError",
    "DuplicatedAliasError",
    "ShadowedAliasWarning",
    "ParserFault",
    "UnknownOptionFault",
    "MissingArgumentFault",
    "MissingMandatoryFault",
    "RejectedOptionFault",
    "trigger",
)
