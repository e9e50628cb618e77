"""
cmdarg token classification.

Scope
- ArgKind: closed set of syntactic categories a raw token can fall into.
- classify(token): map one token to its ArgKind from its leading hyphens and length.
- parse_values(raw): turn the text after '=' in a long option into a value list.
- SEPARATOR: the literal token that ends option scanning.

Rules (evaluated in order)
- "--..."              → LONG_OPTION  (this includes the bare separator "--")
- "-x...", len > 1     → SHORT_OPTION
- anything else        → SIMPLE       ("", "-", "file.txt", ...)

The separator is never a classification outcome: the builder compares tokens
against SEPARATOR before calling classify().

Quick example:
    >>> classify("-abc")
    <ArgKind.SHORT_OPTION: 2>
    >>> parse_values(" apple, ,banana,")
    ('apple', 'banana')
"""
from enum import IntEnum

from rich.text import Text

SEPARATOR = "--"


class ArgKind(IntEnum):
    """
    syntactic category of a command-line token.

    members
    - SIMPLE: bare words, the single "-" and the empty string.
    - SHORT_OPTION: one leading hyphen followed by at least one character ("-v", "-abc").
    - LONG_OPTION: two leading hyphens ("--verbose", "--data=a,b").
    """
    SIMPLE       = 1
    SHORT_OPTION = 2
    LONG_OPTION  = 3

    @property
    def label(self):
        """
        human label used by the renderer ("Simple", "Short Option", "Long Option").
        """
        return self.name.replace("_", " ").title()

    def __rich__(self):
        return Text(self.label)


def classify(token, /):
    """
    Classify a single token.

    Parameters
    - token: str (positional-only)

    Returns
    - ArgKind. The function is total over strings; the result depends on the
      token content only, never on its position.
    """
    if not isinstance(token, str):
        raise TypeError("classify() argument must be a string")
    if token.startswith("--"):
        return ArgKind.LONG_OPTION
    # A lone "-" falls through to SIMPLE (conventionally stdin/stdout).
    if token.startswith("-") and len(token) > 1:
        return ArgKind.SHORT_OPTION
    return ArgKind.SIMPLE


def parse_values(raw, /):
    """
    Split a comma-delimited value string into trimmed, non-empty pieces.

    There is no quoting or escaping: every ',' splits. Pieces that are empty
    after stripping are dropped; the order of the remaining ones is kept.

    Examples
    - parse_values("apple, banana") -> ("apple", "banana")
    - parse_values(",,")            -> ()
    - parse_values("")              -> ()
    """
    if not isinstance(raw, str):
        raise TypeError("parse_values() argument must be a string")
    return tuple(piece for piece in map(str.strip, raw.split(",")) if piece)


__all__ = (
    "SEPARATOR",
    "ArgKind",
    "classify",
    "parse_values",
)
