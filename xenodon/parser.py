"""Character-level parser for small configuration grammars."""

from __future__ import annotations

import io
import string

from xenodon.errors import Error

_WHITESPACE = frozenset(" \t\n\v\f\r")
_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)

_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def _is_space(c):
    return c in _WHITESPACE and c != ""


def _is_alpha(c):
    return c in _ALPHA and c != ""


def _is_digit(c):
    return c in _DIGITS and c != ""


class Parser:
    """Reads a text stream one character at a time, tracking position.

    ``peek`` returns the next character, or an empty string at end of input.
    """

    def __init__(self, stream, multiline=False):
        self._stream = stream
        self._lookahead: str | None = None
        self.line = 1
        self.column = 1
        self.multiline = multiline

    def _raw_peek(self):
        if self._lookahead is None:
            self._lookahead = self._stream.read(1)
        return self._lookahead

    def _raw_get(self):
        c = self._raw_peek()
        self._lookahead = None
        return c

    def peek(self):
        c = self._raw_peek()
        if c == "#":
            if self.multiline:
                raise ParseError(self, "Unexpected character '#'")
            while c not in ("\n", ""):
                self._raw_get()
                c = self._raw_peek()
        return c

    def consume(self):
        c = self._raw_peek()
        if c == "":
            raise ParseError(self, "Unexpected end of input")
        self._raw_get()
        if c == "\n":
            if not self.multiline:
                raise ParseError(self, "Unexpected newline")
            self.line += 1
            self.column = 0
        self.column += 1
        return c

    def expect(self, expected):
        actual = self.consume()
        if actual != expected:
            raise ParseError(self, "Expected character '{}', found '{}'", expected, actual)

    def optws(self):
        while _is_space(self.peek()):
            self.consume()

    def expectws(self):
        c = self.peek()
        if not _is_space(c):
            raise ParseError(self, "Expected whitespace character, found '{}'", c)
        self.optws()

    def parse_key(self):
        c = self.consume()
        if not _is_alpha(c):
            raise ParseError(self, "Expected alphabetic key, found '{}'", c)
        chars = [c]
        while _is_alpha(self.peek()):
            chars.append(self.consume())
        return "".join(chars)


class ParseError(Error):
    """Error raised at the parser's current position."""

    def __init__(self, parser, fmt, *args):
        if parser.multiline:
            prefix = f"Parse error at line {parser.line}, col {parser.column}: "
        else:
            prefix = f"Parse error at col {parser.column}: "
        super().__init__("{}", prefix + fmt.format(*args))
        self.line = parser.line
        self.column = parser.column


def parse_size(p):
    """Parse an unsigned decimal integer."""
    c = p.consume()
    if not _is_digit(c):
        raise ParseError(p, "Expected numeric character, found '{}'", c)
    value = int(c)
    c = p.peek()
    while _is_digit(c):
        value = value * 10 + int(c)
        p.consume()
        c = p.peek()
    return value


def parse_string(p):
    """Parse a double-quoted string with backslash escapes."""
    p.expect('"')
    chars = []
    c = p.peek()
    while c not in ("", '"'):
        if c == "\\":
            p.consume()
            escaped = p.peek()
            if escaped not in _ESCAPES:
                raise ParseError(p, "Faulty escape character '{}'", escaped)
            chars.append(_ESCAPES[escaped])
        else:
            chars.append(c)
        p.consume()
        c = p.peek()
    p.expect('"')
    return "".join(chars)


def pair_parser(first, second):
    """Build a parser for ``(a, b)`` from parsers of each element."""

    def parse_pair(p):
        p.expect("(")
        p.optws()
        x = first(p)
        p.optws()
        p.expect(",")
        p.optws()
        y = second(p)
        p.optws()
        p.expect(")")
        return x, y

    return parse_pair


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _to_uint32(value):
    return value & 0xFFFFFFFF


_parse_size_pair = pair_parser(parse_size, parse_size)


def parse_offset2d(p):
    """Parse ``(x, y)`` as a signed 32-bit offset."""
    x, y = _parse_size_pair(p)
    return _to_int32(x), _to_int32(y)


def parse_extent2d(p):
    """Parse ``(width, height)`` as an unsigned 32-bit extent."""
    x, y = _parse_size_pair(p)
    return _to_uint32(x), _to_uint32(y)


def parse(source, parse_fn, multiline=False):
    """Parse a whole string or stream with ``parse_fn``, requiring end of input."""
    stream = io.StringIO(source) if isinstance(source, str) else source
    parser = Parser(stream, multiline)
    result = parse_fn(parser)
    c = parser.peek()
    if c not in ("", "\0"):
        raise ParseError(parser, "Expected end of input, found '{}'", c)
    return result