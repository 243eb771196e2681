"""
Property declaration parsing.
Recovers a Property from the declaration at or above the cursor line.
"""

import logging
import re
from typing import NamedTuple, Sequence

from .exceptions import PropertyNotFound
from .key_words import NULL_TYPE, is_modifier, is_pseudo_type, is_statement_key_word
from .property import Property

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No property found. Please select a property to use this extension."

_WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_TYPE_NAME = r"\??\\?[A-Za-z_][A-Za-z0-9_\\]*"
_TYPE_TOKEN = re.compile(rf"{_TYPE_NAME}(?:\|{_TYPE_NAME})*")
_VARIABLE = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")
_INTEGER = re.compile(r"[+-]?(?:0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO]?[0-7_]+|[1-9][0-9_]*|0)")
_FLOAT = re.compile(
    r"[+-]?(?:\d[\d_]*)?\.\d[\d_]*(?:[eE][+-]?\d+)?"
    r"|[+-]?\d[\d_]*\.(?:[eE][+-]?\d+)?"
    r"|[+-]?\d[\d_]*[eE][+-]?\d+"
)
_ARRAY_CALL = re.compile(r"array\s*\(.*\)", re.IGNORECASE | re.DOTALL)


class DocBlock(NamedTuple):
    type: str | None
    description: str | None


class Declaration(NamedTuple):
    name: str
    type_hint: str | None
    default: str | None


def infer_literal_type(expression: str) -> str | None:
    """
    Guess the type of a default value from its literal shape.

    Returns 'string', 'int', 'float', 'bool', 'array' or 'null', and None
    for anything that is not a recognisable literal.
    """
    value = expression.strip().rstrip(";").strip()
    if not value:
        return None

    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return "string"
    if _INTEGER.fullmatch(value):
        return "int"
    if _FLOAT.fullmatch(value):
        return "float"

    lowered = value.lower()
    if lowered in ("true", "false"):
        return "bool"
    if lowered == "null":
        return NULL_TYPE
    if (value.startswith("[") and value.endswith("]")) or _ARRAY_CALL.fullmatch(value):
        return "array"

    return None


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _ends_token(text: str, pos: int) -> bool:
    return pos == len(text) or text[pos].isspace()


def _statement_text(text: str) -> str:
    """Cut text at the first `;` or comment that is not inside a string literal."""
    quote = None
    pos = 0
    while pos < len(text):
        char = text[pos]
        if quote:
            if char == "\\":
                pos += 1
            elif char == quote:
                quote = None
        elif char in "'\"":
            quote = char
        elif char in ";#" or text.startswith(("//", "/*"), pos):
            return text[:pos].rstrip()
        pos += 1
    return text.rstrip()


def scan_declaration(text: str) -> Declaration | None:
    """
    Scan a stripped line as modifiers, optional type hint, $name and optional default.

    Returns None when the line does not have that shape.
    """
    pos = 0

    # Modifiers, any number and any order
    while True:
        match = _WORD.match(text, pos)
        if not match or not is_modifier(match.group()) or not _ends_token(text, match.end()):
            break
        pos = _skip_whitespace(text, match.end())

    # Optional type hint
    type_hint = None
    if not text.startswith("$", pos):
        match = _TYPE_TOKEN.match(text, pos)
        if not match or not _ends_token(text, match.end()):
            return None
        type_hint = match.group()
        bare = type_hint.lstrip("?\\")
        if is_modifier(bare) or is_statement_key_word(bare):
            return None
        pos = _skip_whitespace(text, match.end())

    # Name
    match = _VARIABLE.match(text, pos)
    if not match:
        return None
    name = match.group(1)
    rest = _statement_text(text[_skip_whitespace(text, match.end()):])

    # End of statement or default value
    if not rest or rest[0] == ",":
        return Declaration(name, type_hint, None)
    if rest.startswith("=") and not rest.startswith("=="):
        return Declaration(name, type_hint, rest[1:].strip())

    return None


def _clean_doc_line(text: str) -> str:
    if text.startswith("/**"):
        text = text[3:]
    if text.endswith("*/"):
        text = text[:-2]
    text = text.strip()
    if text.startswith("*"):
        text = text[1:]
    return text.strip()


def read_docblock(lines: Sequence[str], line_number: int) -> DocBlock:
    """Read the `/** ... */` block directly above a line, if there is one."""
    previous = line_number - 1
    if previous < 0 or not lines[previous].strip().endswith("*/"):
        return DocBlock(None, None)

    # Every line up to the opener must be a docblock line
    block = []
    for number in range(previous, -1, -1):
        text = lines[number].strip()
        block.append(text)
        if text.startswith("/**"):
            break
        if not text.startswith("*"):
            return DocBlock(None, None)
    else:
        # Unterminated comment
        return DocBlock(None, None)
    block.reverse()

    summary = None
    var_type = None
    var_text = None
    for text in map(_clean_doc_line, block):
        if not text:
            continue
        if not text.startswith("@"):
            if summary is None:
                summary = text
            continue

        parts = text.split()
        if parts[0] != "@var" or len(parts) < 2:
            continue
        var_type = parts[1]
        remaining = parts[2:]
        if remaining and remaining[0].startswith("$"):
            remaining = remaining[1:]
        var_text = " ".join(remaining) or None

    return DocBlock(var_type, summary or var_text)


class PropertyParser:
    """Locates and parses a single property declaration."""

    @classmethod
    def parse_line(cls, lines: Sequence[str], line_number: int) -> Property | None:
        """Parse one line of the document, returning None if it is not a declaration."""
        line = lines[line_number].rstrip("\r\n")
        declaration = scan_declaration(line.strip())
        if declaration is None:
            return None

        indentation = line[: len(line) - len(line.lstrip())]
        doc = read_docblock(lines, line_number)
        hint = declaration.type_hint
        pseudo_hint = hint is not None and is_pseudo_type(hint)

        inferred = None
        if declaration.default is not None:
            inferred = infer_literal_type(declaration.default)
            if inferred == NULL_TYPE:
                inferred = None

        # Docblock, then concrete hint, then literal, then pseudo-type
        type_name = doc.type
        if type_name is None and hint is not None and not pseudo_hint:
            type_name = hint
        if type_name is None:
            type_name = inferred
        if type_name is None and pseudo_hint:
            type_name = hint

        return Property(
            name=declaration.name,
            type_hint=None if pseudo_hint else hint,
            type=type_name,
            description=doc.description,
            indentation=indentation,
        )

    @classmethod
    def from_position(cls, lines: Sequence[str], cursor_line: int) -> Property:
        """
        Find the declaration at or above cursor_line.

        Scans upward to the top of the document; the first line that parses
        as a declaration wins.
        """
        if not lines:
            raise PropertyNotFound(NOT_FOUND_MESSAGE)

        start = min(max(cursor_line, 0), len(lines) - 1)
        for line_number in range(start, -1, -1):
            prop = cls.parse_line(lines, line_number)
            if prop is not None:
                logger.debug("Found property $%s on line %d", prop.name, line_number)
                return prop

        raise PropertyNotFound(NOT_FOUND_MESSAGE)


def from_position(lines: Sequence[str], cursor_line: int) -> Property:
    """Shortcut for PropertyParser.from_position."""
    return PropertyParser.from_position(lines, cursor_line)
