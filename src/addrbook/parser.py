"""Command line tokenizing and parsing."""

from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import ParseError

COMMAND_PREFIX = "/"
COMMANDS = ("add", "delete", "list", "help", "quit")

# Tokenizer states
OUTSIDE = "outside"
IN_DOUBLE = "double"
IN_SINGLE = "single"


@dataclass
class Command:
    """A parsed line: command name plus its argument tokens."""

    name: str
    args: List[str] = field(default_factory=list)


def tokenize(text: str) -> List[str]:
    """Split text into tokens, keeping quoted spans together.

    "..." and '...' each yield their inner text, quotes stripped and no
    escape processing. Unquoted non-whitespace runs yield one token each.
    A quote only opens a span at the start of a token; inside a bare run it
    is an ordinary character. Empty tokens are dropped.

    Raises ParseError if a quoted span is never closed.
    """
    tokens: List[str] = []
    cur: List[str] = []
    state = OUTSIDE
    in_run = False

    for ch in text:
        if state == OUTSIDE:
            if ch.isspace():
                if cur:
                    tokens.append("".join(cur))
                cur = []
                in_run = False
            elif not in_run and ch == '"':
                state = IN_DOUBLE
            elif not in_run and ch == "'":
                state = IN_SINGLE
            else:
                cur.append(ch)
                in_run = True
        elif (state == IN_DOUBLE and ch == '"') or (state == IN_SINGLE and ch == "'"):
            if cur:
                tokens.append("".join(cur))
            cur = []
            state = OUTSIDE
        else:
            cur.append(ch)

    if state != OUTSIDE:
        raise ParseError("unterminated quote")
    if cur:
        tokens.append("".join(cur))
    return tokens


def split_command(line: str) -> Tuple[str, str]:
    """Split a line into its first word and the remainder."""
    parts = line.strip().split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def parse_command(line: str) -> Command:
    """Parse one input line into a Command.

    Lines starting with '/' name a command; anything else is a search.
    """
    word, rest = split_command(line)
    if not word:
        raise ParseError("no input")

    word = word.lower()
    if word.startswith(COMMAND_PREFIX):
        name = word[len(COMMAND_PREFIX):]
        if name not in COMMANDS:
            raise ParseError("unknown command")
        return Command(name=name, args=tokenize(rest))

    return Command(name="search", args=tokenize(line.strip()))
