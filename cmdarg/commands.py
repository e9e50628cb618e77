"""
cmdarg command layer: split a raw argv into a structured, read-only result.

What this module provides
- ParsedOption: one classified token seen before the separator.
- ParsedCommand: the whole result (program name, options, positionals).
- build(tokens): the single-pass splitter that produces a ParsedCommand.
- get(): build() over a snapshot of sys.argv.
- cmd_str(): sys.argv joined by single spaces, for logging the exact invocation.

Core ideas
- One pass, no lookahead: every token is either classified (before "--") or
  copied verbatim (after the first "--").
- Bundled short options expand in place: "-iv" becomes "-i", "-v".
- Long options split on the first "=" only; the rest is a comma-delimited
  value list (see cmdarg.tokens.parse_values).
- Results are immutable snapshots: fields are read-only tuples and the types
  are sealed against subclassing.

Quick start
    from cmdarg import build

    command = build(["prog", "-iv", "file.txt", "--data=apple, banana", "--", "pos1"])
    command.program_name   # 'prog'
    command.options[3]     # parsed-option(kind=<ArgKind.LONG_OPTION: 3>, text='--data', values=('apple', 'banana'))
    command.positionals    # ('pos1',)
"""
import functools
import operator
import re
import sys
from collections import deque

from loguru import logger

from .tokens import SEPARATOR, ArgKind, classify, parse_values
from .utils import *


class ParsedType(type):
    """
    Metaclass for parse results: read-only fields, value semantics, stable reprs.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      backed by "_{name}" (see mirror()).
    - Provide __repr__/__rich_repr__ over those names for diagnostics.
    - Provide __eq__/__hash__ over those names so equal parses compare equal.
    - Seal the resulting classes against subclassing.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in reprs and error messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                field: mirror(field) for field in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Example
            - parsed-option(kind=<ArgKind.SIMPLE: 1>, text='file.txt', values=())
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for field in type(self).__introspectable__:
                yield field, getattr(self, field)
        self.__rich_repr__ = __rich_repr__

        @rename("__eq__")
        def __eq__(self, other):
            if type(other) is not type(self):
                return NotImplemented
            return tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())
        self.__eq__ = __eq__

        @rename("__hash__")
        def __hash__(self):
            return hash((type(self).__typename__, *self.__rich_repr__()))
        self.__hash__ = __hash__

        @rename("__init_subclass__")
        def __init_subclass__(cls, **options):  # NOQA: F-841
            raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
        self.__init_subclass__ = classmethod(__init_subclass__)

        return self


def _strings(iterable, message, /):
    """
    Snapshot an iterable of strings into a tuple, or raise TypeError(message).

    A bare string is rejected: it is iterable, but never a token sequence.
    """
    if isinstance(iterable, str):
        raise TypeError(message)
    try:
        snapshot = tuple(iterable)
    except TypeError:
        raise TypeError(message) from None
    if not all(isinstance(item, str) for item in snapshot):
        raise TypeError(message)
    return snapshot


class ParsedOption(metaclass=ParsedType):
    """
    One classified token that appeared before the separator.

    Fields
    - kind: ArgKind
    - text: canonical token text
      • SIMPLE / single SHORT_OPTION / LONG_OPTION without "=": the full token.
      • LONG_OPTION with "=": the part before the first "=" ("--data").
      • bundled SHORT_OPTION: "-" plus one character of the bundle.
    - values: tuple[str, ...], only ever non-empty for LONG_OPTION.
    """
    __introspectable__ = (
        "kind",
        "text",
        "values",
    )
    __slots__ = ("_kind", "_text", "_values")

    def __init__(self, kind, text, /, values=()):
        if not isinstance(kind, ArgKind):
            raise TypeError("ParsedOption() first argument must be an arg-kind")
        if not isinstance(text, str):
            raise TypeError("ParsedOption() second argument must be a string")
        values = _strings(values, "ParsedOption() values must be an iterable of strings")
        if values and kind is not ArgKind.LONG_OPTION:
            raise ValueError(f"{kind.label.lower()} {text!r} cannot carry values")
        self._kind = kind
        self._text = text
        self._values = values


class ParsedCommand(metaclass=ParsedType):
    """
    The parse result of one command line (read-only snapshot).

    Fields
    - program_name: first raw token, or "" when there were no tokens at all.
    - options: tuple[ParsedOption, ...] in command-line order, bundles expanded in place.
    - positionals: tuple[str, ...] every token after the first "--", verbatim.

    Display
    - str(command) gives the uncoloured multi-line rendering.
    - rich consoles render it through cmdarg.rendering.render (colorful, not fancy).
    """
    __introspectable__ = (
        "program_name",
        "options",
        "positionals",
    )
    __slots__ = ("_program_name", "_options", "_positionals")

    def __init__(self, program_name, /, options=(), positionals=()):
        if not isinstance(program_name, str):
            raise TypeError("ParsedCommand() first argument must be a string")
        try:
            options = tuple(options)
        except TypeError:
            raise TypeError("ParsedCommand() options must be an iterable of parsed-options") from None
        if not all(isinstance(option, ParsedOption) for option in options):
            raise TypeError("ParsedCommand() options must be an iterable of parsed-options")
        self._program_name = program_name
        self._options = options
        self._positionals = _strings(positionals, "ParsedCommand() positionals must be an iterable of strings")

    def __rich__(self):
        from .rendering import render
        return render(self)

    def __str__(self):
        from .rendering import tostring
        return tostring(self)


class _CommandBuilder:
    """
    Accumulates the pieces of one ParsedCommand during a scan.

    Internal to build(): callers only ever see the finalized ParsedCommand.
    """
    __slots__ = ("_program_name", "_options", "_positionals")

    def __init__(self, program_name, /):
        self._program_name = program_name
        self._options = []
        self._positionals = []

    def add_option(self, kind, text, /, values=()):
        self._options.append(ParsedOption(kind, text, values))

    def add_positionals(self, tokens, /):
        self._positionals.extend(tokens)

    def feed(self, token, /):
        """
        Classify one pre-separator token and record the option(s) it yields.
        """
        match classify(token):
            case ArgKind.LONG_OPTION:
                # Only the first "=" splits; "--k=a=b" keeps "a=b" as the value text.
                key, equals, value = token.partition("=")
                if equals:
                    self.add_option(ArgKind.LONG_OPTION, key, parse_values(value))
                else:
                    self.add_option(ArgKind.LONG_OPTION, token)
            case ArgKind.SHORT_OPTION if len(token) > 2:
                # Bundle: one entry per character, repeats included ("-aa" -> "-a", "-a").
                for character in token[1:]:
                    self.add_option(ArgKind.SHORT_OPTION, "-" + character)
            case kind:
                self.add_option(kind, token)

    def finalize(self):
        return ParsedCommand(self._program_name, self._options, self._positionals)


def build(tokens, /):
    """
    Split an argv-like token sequence into a ParsedCommand.

    phases
    - snapshot: tokens are captured once into a tuple (any iterable of str).
    - head: the first token is the program name ("" when there are none).
    - scan: left to right, single pass, no lookahead.
      • token == "--": every remaining token goes verbatim to positionals; scan ends.
      • otherwise the token is classified and recorded (see _CommandBuilder.feed).

    Returns
    - ParsedCommand. Every finite token sequence yields a result; there are no
      parse errors. TypeError is raised only for non-string input.
    """
    tokens = _strings(tokens, "build() argument must be an iterable of strings")
    if not tokens:
        logger.debug("no tokens to parse, returning an unnamed command")
        return ParsedCommand("")

    builder = _CommandBuilder(tokens[0])
    remaining = deque(tokens[1:])
    while remaining:
        token = remaining.popleft()
        # Literal comparison before classify(): "--" would otherwise be a LONG_OPTION.
        if token == SEPARATOR:
            builder.add_positionals(remaining)
            break
        builder.feed(token)

    command = builder.finalize()
    logger.debug(
        "parsed {!r}: {} option(s), {} positional(s)",
        command.program_name,
        len(command.options),
        len(command.positionals),
    )
    return command


def get():
    """
    Parse the arguments of the running process.

    sys.argv is read exactly once into a snapshot before parsing starts.
    """
    argv = tuple(sys.argv)
    logger.debug("invoked as {}", " ".join(argv))
    return build(argv)


def cmd_str():
    """
    Return the full raw command line (program name included) joined by single spaces.

    No classification happens here; this is meant for logging the exact invocation.
    """
    return " ".join(sys.argv)


__all__ = (
    "ParsedOption",
    "ParsedCommand",
    "build",
    "get",
    "cmd_str",
)

# Remove the internal metaclass from the module namespace; not part of the public API.
del ParsedType
