"""
Argot parsing engine: match tokens, fill argument slots, validate, report.

What this module provides
- Parser: a Registry that also knows how to parse an argument vector, render
  help for its options, and report user-input faults.

Parsing (single left-to-right pass, no backtracking)
- a reserved help spelling (--help, -h, /?) prints help and returns HELP
  right away; nothing after it is looked at and mandatory checks are skipped.
- any other token must be a registered alias, otherwise FAILED.
- the matched option consumes one token per argument slot, in order; running
  out of tokens is FAILED.
- the option's validator runs once per occurrence, after its slots are filled;
  a falsey result is FAILED_VALIDATOR and the occurrence is not accepted.
- the option is marked provided.
- after the last token, the first mandatory option (registration order) that
  was not provided makes the parse FAILED; otherwise the result is OK.

Repeated options re-fill their slots (last occurrence wins) and re-run their
validator. Failures are never raised: each one is reported as a fault on
stderr (or handed to the installed fallback) and the Outcome is returned.

Quick start
    from argot import Parser, Option, Outcome

    parser = Parser("Sample Application", "9.9.9.9", "What the sample does.")

    @parser.option("-v", "--version", descr="Shows the version.", mandatory=False)
    def version(option):
        return True

    parser.add_options(Option("--mandatory", arguments=[("arg1", "The argument 1.")]))

    if parser.parse() == Outcome.OK:
        print(parser["--mandatory"].value("arg1"))
"""
import copy
import shlex
import sys
from collections import defaultdict
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from .arguments import option
from .faults import *
from .help import compose, label
from .registry import Registry, RESERVED
from .utils import *


class Parser(Registry):
    """
    Option registry plus the parsing engine and help rendering.

    Configuration (affects rendering only, never matching)
    - program: name shown in the help banner (no banner when empty).
    - version: shown right-aligned next to the program name.
    - descr: paragraph shown under the banner.
    - width: fixed line width of the help document.
    - colorful: style help and diagnostics.
    - fancy: render diagnostics inside a panel with code, title and hint.
    - autohelp: print help on stderr after a failure diagnostic.
    """

    def __init__(
            self,
            program="",
            version="",
            descr="",
            *,
            width=80,
            colorful=False,
            fancy=False,
            autohelp=False,
    ):
        super().__init__()

        for name, object in (("program", program), ("version", version), ("descr", descr)):
            if not isinstance(object, str):
                raise TypeError(f"parser {name!r} must be a string")
        if not isinstance(width, int) or width < 10:
            raise ValueError("parser 'width' must be an integer of at least 10")

        self._program = program
        self._version = version
        self._descr = descr
        self._width = width
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)
        self._autohelp = bool(autohelp)
        self._fallback = Unset

    program = mirror("program")
    version = mirror("version")
    descr = mirror("descr")
    width = mirror("width")
    colorful = mirror("colorful")
    fancy = mirror("fancy")
    autohelp = mirror("autohelp")

    def option(self, *args, **kwargs):
        """
        Decorator registering an Option whose validator is the decorated callable.

            @parser.option("--port", arguments=["number"], mandatory=False)
            def port(option):
                return option.value("number").isdigit()

        Returns the registered Option.
        """
        decorator = option(*args, **kwargs)

        @rename("option")
        def wrapper(validator, /):
            self.register(result := decorator(validator))
            return result

        return wrapper

    def fallback(self, fallback, /):
        """
        Install a handler receiving every fault instead of the stderr report.

        The handler is called as fallback(fault) with the rendering options
        already merged into fault.options. Returns the handler so it can be
        used as a decorator.
        """
        if not callable(fallback):
            raise TypeError("fallback() argument must be callable")
        self._fallback = fallback
        return fallback

    def compose_help(self):
        """
        Return the help document for the registered options.
        """
        return compose(
            self._options,
            program=self._program,
            version=self._version,
            descr=self._descr,
            width=self._width,
        )

    def helper(self, *, stderr=False):
        """
        Print the help document through rich.

        Palette keys (override through a __styles__ mapping in __main__)
        - program-name, program-version, mandatory-option, option-name

        When colorful is False the document is printed without styling.
        """
        console = Console(stderr=stderr)
        styles = defaultdict(str, {
            "program-name": "bold #FF4D94",  # MAGENTA-PINK
            "program-version": "bold #00E6FF",  # CYAN
            "mandatory-option": "bold #FFD600",  # AMBER
            "option-name": "bold #22C55E",  # GREEN
        } | getattr(__import__("__main__"), "__styles__", {}))

        renderable = Text(self.compose_help())

        if self._colorful:
            if self._program:
                renderable.highlight_words([self._program], styles["program-name"])
            if self._version:
                renderable.highlight_words([self._version], styles["program-version"])
            for option in self._options:
                renderable.highlight_words(
                    [label(option)], styles["mandatory-option" if option.mandatory else "option-name"]
                )

        console.print(renderable, soft_wrap=True)

    def trigger(self, fault, /, **options):
        """
        Report a fault with this parser's rendering options merged in.
        """
        fault = copy.replace(
            fault,
            **options,
            program=self._program,
            colorful=self._colorful,
            fancy=self._fancy,
        )
        if self._fallback:
            self._fallback(fault)
        else:
            trigger(fault)
        if self._autohelp:
            self.helper(stderr=True)

    def parse(self, tokens=Unset, /):
        """
        Parse an argument vector and return an Outcome.

        Parameters
        - tokens:
          • Unset: read tokens from sys.argv[1:].
          • str: shell-like string; split via shlex.split.
          • Iterable[str]: pre-tokenized sequence, used verbatim.

        Raises
        - TypeError: when tokens is not Unset/str/Iterable[str].
        Validator exceptions propagate unchanged.
        """
        if tokens is Unset:
            tokens = sys.argv[1:]
        elif isinstance(tokens, str):
            tokens = shlex.split(tokens)
        elif isinstance(tokens, Iterable):
            tokens = list(tokens)
            if not all(isinstance(token, str) for token in tokens):
                raise TypeError("parse() argument must be a string or an iterable of strings")
        else:
            raise TypeError("parse() argument must be a string or an iterable of strings")

        index = 0
        while index < len(tokens):
            token = tokens[index]

            if token in RESERVED:
                self.helper()
                return Outcome.HELP

            try:
                option = self.lookup(token)
            except OptionNotFoundError:
                self.trigger(UnknownOptionFault(
                    "Invalid argument {'%s'}. Please use --help for more information." % token,
                    title="unknown option",
                    code=FaultCode.UNKNOWN_OPTION,
                    hint="run with --help to see all available options",
                    input=token,
                    index=index,
                ))
                return Outcome.FAILED

            for argument in option.arguments:
                if index + 1 >= len(tokens):
                    self.trigger(MissingArgumentFault(
                        "Missing argument {'%s'} for parameter '%s'. Please use --help for more information." % (
                            argument.id, token
                        ),
                        title="missing argument",
                        code=FaultCode.MISSING_ARGUMENT,
                        hint="pass a value for {%s} after %s" % (argument.id, token),
                        input=token,
                        index=index,
                        argument=argument,
                    ))
                    return Outcome.FAILED
                index += 1
                argument._capture(tokens[index])

            if not option():
                self.trigger(RejectedOptionFault(
                    "Validation failed for parameter '%s'. Please use --help for more information." % token,
                    title="rejected option",
                    code=FaultCode.REJECTED_OPTION,
                    hint="check the values given to %s" % token,
                    input=token,
                    index=index,
                    option=option,
                ))
                return Outcome.FAILED_VALIDATOR

            option._provide()
            index += 1

        for option in self._options:
            if option.mandatory and not option.provided:
                self.trigger(MissingMandatoryFault(
                    "Mandatory parameter {'%s'} not provided. Please use --help for more information." % (
                        option.aliases[0]
                    ),
                    title="missing mandatory option",
                    code=FaultCode.MISSING_MANDATORY,
                    hint="add %s to the command line" % option.aliases[0],
                    option=option,
                ))
                return Outcome.FAILED

        return Outcome.OK


__all__ = (
    "Parser",
)
