"""
Argot option registry: the single owner of every registered Option.

The registry keeps two views of the same options:
- an ordered list (registration order drives help rendering and the
  mandatory-option check);
- an alias index mapping every spelling to its owning Option.

Duplicate aliases are rejected at registration time, before anything is
stored, so each alias always resolves to exactly one option. Reserved help
spellings can be registered but are never matched (the parser checks them
first); registering one emits a ShadowedAliasWarning.
"""
import warnings

from .arguments import Option
from .faults import DuplicatedAliasError, OptionNotFoundError, ShadowedAliasWarning

RESERVED = ("--help", "-h", "/?")


class Registry:
    """
    Ordered collection of options with alias lookup.

    Lookups accept any registered alias:
        registry.lookup("--mandatory") is registry["--mandatory"] is registry("--mandatory")
    """

    def __init__(self):
        self._options = []
        self._aliases = {}

    @property
    def options(self):
        """
        Registered options, in registration order.
        """
        return tuple(self._options)

    def register(self, option, /):
        """
        Append an option and index each of its aliases.

        Raises
        - TypeError: 'option' is not an Option.
        - DuplicatedAliasError: one of its aliases is already registered (the
          registry is left unchanged).
        """
        if not isinstance(option, Option):
            raise TypeError("register() argument must be an option")

        for alias in option.aliases:
            if alias in self._aliases:
                raise DuplicatedAliasError(
                    f"alias {alias!r} is already registered by option {self._aliases[alias].aliases[0]!r}"
                )

        for alias in option.aliases:
            if alias in RESERVED:
                warnings.warn(ShadowedAliasWarning(
                    f"alias {alias!r} is reserved for help and will never be matched"
                ), stacklevel=2)

        self._options.append(option)
        for alias in option.aliases:
            self._aliases[alias] = option

    def add_options(self, *options):
        for option in options:
            self.register(option)

    def lookup(self, alias, /):
        """
        Return the option owning 'alias'.

        Raises
        - OptionNotFoundError: no registered option has that alias.
        """
        try:
            return self._aliases[alias]
        except KeyError:
            raise OptionNotFoundError(f"option {alias!r} not found") from None

    __getitem__ = lookup
    __call__ = lookup

    def __contains__(self, alias):
        return alias in self._aliases

    def __iter__(self):
        return iter(self.options)

    def __len__(self):
        return len(self._options)


__all__ = (
    "Registry",
    "RESERVED",
)
