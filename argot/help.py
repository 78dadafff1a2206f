"""
Argot help composer: fixed-width, word-wrapped usage text.

Layout (width W, default 80)
- banner (only with a program name):
    separator
    program left-aligned in 75% of W, version right-aligned in the other 25%
    separator
- description (only when set): wrapped to W, then a separator
- a blank line
- one row per option in registration order:
    "*" marker for mandatory options, aliases joined with ", ",
    " {args...}" when the option has slots; this label fills 30% of W and the
    description is wrapped into the remaining 70%, continuation lines padded
    to the description column
- for options with slots, an "Arguments: " sub-header and one "{id} => " line
  per slot, using the same column discipline

The composer only reads option metadata; it never touches parse state.
"""


def separator(width=80, /):
    return "-" * width


def wordwrap(text, width=80, padding="", /):
    """
    Wrap 'text' into lines of at most 'width' characters.

    Algorithm
    - while the remainder is longer than width, look at its first width
      characters; break at the last space in that block (the space is
      dropped), or hard-break at width when the block has no space.
    - the first line is emitted as-is, every later line is prefixed with
      'padding'.

    Lines are joined with "\\n"; no trailing newline is added.

    Raises
    - ValueError: width is not a positive integer.
    """
    if not isinstance(width, int) or width < 1:
        raise ValueError("wordwrap() width must be a positive integer")

    lines = []
    prefix = ""
    while len(text) > width:
        block = text[:width]
        index = block.rfind(" ")
        if index != -1:
            lines.append(prefix + block[:index])
            text = text[index + 1:]
        else:
            lines.append(prefix + block)
            text = text[width:]
        prefix = padding
    lines.append(prefix + text)
    return "\n".join(lines)


def label(option, /):
    """
    Render the alias column of an option row, e.g. "*--copy, -c {args...}".
    """
    label = ("*" if option.mandatory else "") + ", ".join(option.aliases)
    if option.arguments:
        label += " {args...}"
    return label


def compose(options, /, program="", version="", descr="", width=80):
    """
    Compose the full help document for 'options' (an iterable of Option).

    The output is deterministic for a fixed set of options and settings.
    """
    column = width * 30 // 100
    padding = " " * column
    renders = []

    if program:
        renders.append(separator(width) + "\n")
        renders.append(program.ljust(width * 75 // 100) + version.rjust(width * 25 // 100) + "\n")
        renders.append(separator(width) + "\n")

    if descr:
        renders.append(wordwrap(descr, width) + "\n")
        renders.append(separator(width) + "\n")

    renders.append("\n")

    for option in options:
        renders.append(label(option).ljust(column))
        renders.append(wordwrap(option.descr, width * 70 // 100, padding) + "\n")

        if option.arguments:
            renders.append(padding + "Arguments: \n")
            for argument in option.arguments:
                renders.append(padding + "{%s} => " % argument.id)
                renders.append(wordwrap(argument.descr, width * 70 // 100, padding) + "\n")

    return "".join(renders)


__all__ = (
    "separator",
    "wordwrap",
    "label",
    "compose",
)
