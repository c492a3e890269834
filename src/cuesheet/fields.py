from __future__ import annotations

import dataclasses
import re

from lark import Lark, Token, Transformer, v_args

from .consts import DELIMITERS

__all__ = ["QUOTES", "FieldCursor", "read_field", "unquote", "unescape", "quote"]

QUOTES = "\"'"
_escape_sequence = re.compile(r"\\(.)", re.DOTALL)


def unescape(value: str) -> str:
    return _escape_sequence.sub(r"\1", value)


def quote(value: str, quote_char: str = '"') -> str:
    escaped = value.replace("\\", "\\\\").replace(quote_char, f"\\{quote_char}")
    return f"{quote_char}{escaped}{quote_char}"


@dataclasses.dataclass(frozen=True)
class Field:
    value: str
    end: int
    bare: bool = False


@v_args(inline=True)
class FieldTransformer(Transformer):
    def quoted(self, token: Token) -> Field:
        return Field(unescape(token[1:-1]), token.end_pos)

    def unterminated(self, token: Token) -> Field:
        return Field(unescape(token[1:]), token.end_pos)

    def bare(self, token: Token) -> Field:
        return Field(str(token), token.end_pos, bare=True)

    def start(self, *fields: Field) -> list[Field]:
        return list(fields)


field_parser = Lark.open(
    "fields.lark",
    rel_to=__file__,
    parser="lalr",
    lexer="basic",
    transformer=FieldTransformer(),
)


class FieldCursor:
    """The unread remainder of a line; each read advances past one field."""

    def __init__(self, text: str):
        self.remainder = text

    def __bool__(self) -> bool:
        return bool(self.remainder)

    def __repr__(self) -> str:
        return f"FieldCursor({self.remainder!r})"


def read_field(cursor: FieldCursor) -> str:
    fields: list[Field] = field_parser.parse(cursor.remainder)
    if not fields:
        cursor.remainder = ""
        return ""
    field = fields[0]
    rest = cursor.remainder[field.end :]
    if field.bare and rest.startswith(" "):
        rest = rest[1:]
    cursor.remainder = rest
    return field.value


def unquote(text: str) -> str:
    stripped = text.lstrip(DELIMITERS)
    if stripped and stripped[0] in QUOTES:
        return read_field(FieldCursor(stripped))
    return text
