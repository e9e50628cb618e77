"""
cmdarg rendering (rich-based, read-only consumer of ParsedCommand).

Layout
    Command: prog
    Options:
      1. -i (Type: Short Option): Values: None
      2. --data (Type: Long Option): Values: [apple, banana]
    Arguments (-- after):
      1. pos1

Empty sections are rendered as an explicit notice instead of an empty list:
"No Options provided (before --)." / "No arguments provided after --.".

Tokens are shown through rich.text.Text, so the rendering is a display form,
not the raw token: control codes (BEL, BS, VT, FF, CR) are stripped and tabs
are expanded to spaces. The ParsedCommand itself keeps every token verbatim.

Options
- colorful: apply the style palette (otherwise plain text, no styles at all).
- fancy: wrap the sections in a rounded Panel titled with the command line header.

Styling
- The default palette can be overridden by the host application through a
  __styles__ mapping defined in __main__ (keys as in _STYLES below).
"""
from collections import defaultdict

from rich.box import ROUNDED
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .commands import ParsedCommand
from .utils import *

stdout = Console()

_STYLES = {
    # header
    "command-label": "bold cyan",
    "program-name": "blue",

    # sections
    "options-label": "bold green",
    "arguments-label": "bold green",
    "index": "bold",
    "field-label": "cyan",
    "empty": "red",

    # options
    "option-text": "magenta",
    "simple": "purple",
    "short-option": "yellow",
    "long-option": "cyan",
    "values": "green",

    # positionals
    "positional": "blue",

    # fancy panel
    "panel-border": "#6B6F7A",
}


def render(command, /, *, colorful=True, fancy=False):
    """
    Build a rich renderable for a ParsedCommand.

    Returns
    - rich.console.Group of Text lines, or a Panel around them when fancy=True.
    """
    if not isinstance(command, ParsedCommand):
        raise TypeError("render() argument must be a parsed-command")

    styles = defaultdict(str, _STYLES | getattr(__import__("__main__"), "__styles__", {}))

    def text(fragment, style=""):
        # Plain mode drops every style, including ones already on Text fragments.
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), styles[style])

    header = Text.assemble(text("Command", "command-label"), ": ", text(command.program_name, "program-name"))

    renders = [Text.assemble(text("Options", "options-label"), ":")]
    if not command.options:
        renders.append(Text.assemble("  ", text("No Options provided (before --).", "empty")))
    for index, option in enumerate(command.options, 1):
        if option.values:
            values = Text.assemble("[", text(", ".join(option.values), "values"), "]")
        else:
            values = text("None", "empty")
        renders.append(Text.assemble(
            "  ",
            text(index, "index"),
            ". ",
            text(option.text, "option-text"),
            " (",
            text("Type", "field-label"),
            ": ",
            text(option.kind.label, option.kind.name.lower().replace("_", "-")),
            "): ",
            text("Values", "field-label"),
            ": ",
            values,
        ))

    renders.append(Text.assemble(text("Arguments (-- after)", "arguments-label"), ":"))
    if not command.positionals:
        renders.append(Text.assemble("  ", text("No arguments provided after --.", "empty")))
    for index, positional in enumerate(command.positionals, 1):
        renders.append(Text.assemble("  ", text(index, "index"), ". ", text(positional, "positional")))

    if fancy:
        return Panel(
            Group(*renders),
            title=header,
            title_align="left",
            box=ROUNDED,
            border_style=styles["panel-border"] if colorful else "",
        )
    return Group(header, *renders)


def display(command, /, *, console=Unset, colorful=True, fancy=False):
    """
    Print the rendering of a ParsedCommand (to stdout unless a console is given).
    """
    coalesce(console, stdout).print(render(command, colorful=colorful, fancy=fancy), soft_wrap=True)


def tostring(command, /):
    """
    Return the uncoloured rendering as a plain string (no trailing newline).
    """
    buffer = Console(color_system=None, force_terminal=False, highlight=False)
    with buffer.capture() as capture:
        buffer.print(render(command, colorful=False), soft_wrap=True)
    return capture.get().removesuffix("\n")


__all__ = (
    "render",
    "display",
    "tostring",
)
