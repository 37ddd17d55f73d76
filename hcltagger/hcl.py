"""A small HCL tokenizer and parser that keeps every token, so files can be edited and written back."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Mapping, Union


class HclSyntaxError(ValueError):
    """Raised when HCL source cannot be tokenized or parsed."""


class TokenType(Enum):
    O_BRACE = "{"
    C_BRACE = "}"
    O_BRACK = "["
    C_BRACK = "]"
    O_PAREN = "("
    C_PAREN = ")"
    O_QUOTE = "oquote"
    C_QUOTE = "cquote"
    QUOTED_LIT = "quotedlit"
    TEMPLATE_INTERP = "${"
    TEMPLATE_CONTROL = "%{"
    TEMPLATE_SEQ_END = "templateseqend"
    HEREDOC = "heredoc"
    IDENT = "ident"
    NUMBER_LIT = "number"
    EQUAL = "="
    COMMA = ","
    DOT = "."
    NEWLINE = "newline"
    COMMENT = "comment"
    OPERATOR = "operator"


@dataclass
class Token:
    """One lexical token, with the spaces that precede it and its source line."""

    type: TokenType
    text: str
    spaces_before: int = 0
    line: int = 0

    @property
    def end_line(self) -> int:
        return self.line + self.text.count("\n")


_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_NUMBER_RE = re.compile(r"\d+(\.\d+)?([eE][+-]?\d+)?")
_HEREDOC_RE = re.compile(r"<<(-?)([A-Za-z_][A-Za-z0-9_-]*)[ \t]*\n")
_PUNCT = (
    ("...", TokenType.OPERATOR), ("==", TokenType.OPERATOR), ("!=", TokenType.OPERATOR),
    ("<=", TokenType.OPERATOR), (">=", TokenType.OPERATOR), ("&&", TokenType.OPERATOR),
    ("||", TokenType.OPERATOR), ("=>", TokenType.OPERATOR),
    ("=", TokenType.EQUAL), ("(", TokenType.O_PAREN), (")", TokenType.C_PAREN),
    ("[", TokenType.O_BRACK), ("]", TokenType.C_BRACK), (",", TokenType.COMMA),
    (".", TokenType.DOT),
) + tuple((c, TokenType.OPERATOR) for c in "+-*/%<>!?:")


def tokenize(src: str) -> list[Token]:
    """Split HCL source into tokens; raises HclSyntaxError on bad input."""
    tokens: list[Token] = []
    # Each frame is ["code", brace_depth] or ["string", 0].
    stack: list[list] = [["code", 0]]
    i, n, line, spaces = 0, len(src), 1, 0

    def emit(ttype: TokenType, text: str) -> None:
        nonlocal spaces, line
        tokens.append(Token(ttype, text, spaces, line))
        spaces = 0
        line += text.count("\n")

    while i < n:
        frame = stack[-1]
        c = src[i]
        if frame[0] == "string":
            if c == '"':
                emit(TokenType.C_QUOTE, '"')
                stack.pop()
                i += 1
                continue
            if src.startswith("${", i) or src.startswith("%{", i):
                kind = TokenType.TEMPLATE_INTERP if c == "$" else TokenType.TEMPLATE_CONTROL
                emit(kind, src[i:i + 2])
                stack.append(["code", 0])
                i += 2
                continue
            if c == "\n":
                raise HclSyntaxError(f"unterminated string on line {line}")
            j = i
            while j < n:
                if src[j] == "\\":
                    j += 2
                elif src.startswith("$${", j) or src.startswith("%%{", j):
                    j += 3
                elif src[j] in '"\n' or src.startswith("${", j) or src.startswith("%{", j):
                    break
                else:
                    j += 1
            emit(TokenType.QUOTED_LIT, src[i:j])
            i = j
            continue

        if c in " \t\r":
            spaces += 1
            i += 1
        elif c == "\n":
            emit(TokenType.NEWLINE, "\n")
            i += 1
        elif c == "#" or src.startswith("//", i):
            j = src.find("\n", i)
            j = n if j < 0 else j
            emit(TokenType.COMMENT, src[i:j])
            i = j
        elif src.startswith("/*", i):
            j = src.find("*/", i + 2)
            if j < 0:
                raise HclSyntaxError(f"unterminated comment on line {line}")
            emit(TokenType.COMMENT, src[i:j + 2])
            i = j + 2
        elif c == '"':
            emit(TokenType.O_QUOTE, '"')
            stack.append(["string", 0])
            i += 1
        elif src.startswith("<<", i) and (m := _HEREDOC_RE.match(src, i)):
            marker = m.group(2)
            j = m.end()
            while True:
                end = src.find("\n", j)
                current = src[j:] if end < 0 else src[j:end]
                if current.strip() == marker:
                    j = j + len(current)
                    break
                if end < 0:
                    raise HclSyntaxError(f"unterminated heredoc {marker} on line {line}")
                j = end + 1
            emit(TokenType.HEREDOC, src[i:j])
            i = j
        elif c == "{":
            frame[1] += 1
            emit(TokenType.O_BRACE, "{")
            i += 1
        elif c == "}":
            if frame[1] == 0 and len(stack) > 1:
                emit(TokenType.TEMPLATE_SEQ_END, "}")
                stack.pop()
            else:
                frame[1] = max(frame[1] - 1, 0)
                emit(TokenType.C_BRACE, "}")
            i += 1
        elif m := _IDENT_RE.match(src, i):
            emit(TokenType.IDENT, m.group())
            i = m.end()
        elif m := _NUMBER_RE.match(src, i):
            emit(TokenType.NUMBER_LIT, m.group())
            i = m.end()
        else:
            for text, ttype in _PUNCT:
                if src.startswith(text, i):
                    emit(ttype, text)
                    i += len(text)
                    break
            else:
                raise HclSyntaxError(f"invalid character {c!r} on line {line}")
    if len(stack) > 1:
        raise HclSyntaxError("unterminated string or template at end of input")
    return tokens


def tokens_bytes(tokens: Iterable[Token]) -> str:
    """Render tokens back into source text."""
    return "".join(" " * t.spaces_before + t.text for t in tokens)


def _escape(value: str) -> str:
    return (
        value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        .replace("${", "$${").replace("%{", "%%{")
    )


def _string_tokens(value: str, spaces_before: int) -> list[Token]:
    return [
        Token(TokenType.O_QUOTE, '"', spaces_before),
        Token(TokenType.QUOTED_LIT, _escape(value)),
        Token(TokenType.C_QUOTE, '"'),
    ]


def tokens_for_map(mapping: Mapping[str, str]) -> list[Token]:
    """Build tokens for a map of strings, keys sorted, one entry per line."""
    out = [Token(TokenType.O_BRACE, "{"), Token(TokenType.NEWLINE, "\n")]
    for key in sorted(mapping):
        if _IDENT_RE.fullmatch(key):
            out.append(Token(TokenType.IDENT, key))
        else:
            out.extend(_string_tokens(key, 0))
        out.append(Token(TokenType.EQUAL, "=", 1))
        out.extend(_string_tokens(mapping[key], 1))
        out.append(Token(TokenType.NEWLINE, "\n"))
    out.append(Token(TokenType.C_BRACE, "}"))
    return out


@dataclass
class Attribute:
    """A `name = expression` entry in a body."""

    name: str
    name_token: Token
    equal_token: Token
    expr: list[Token]

    @property
    def start_line(self) -> int:
        return self.name_token.line

    @property
    def end_line(self) -> int:
        return self.expr[-1].end_line if self.expr else self.name_token.line

    def tokens(self) -> list[Token]:
        return [self.name_token, self.equal_token, *self.expr]


Node = Union[Attribute, "Block", Token]


@dataclass
class Block:
    """A block such as `resource "type" "name" { ... }`."""

    type: str
    labels: list[str]
    header: list[Token]
    open_token: Token
    body: list[Node]
    close_token: Token

    @property
    def start_line(self) -> int:
        return self.header[0].line

    @property
    def body_start_line(self) -> int:
        return self.open_token.line

    @property
    def body_end_line(self) -> int:
        return self.close_token.line

    @property
    def attributes(self) -> dict[str, Attribute]:
        return {n.name: n for n in self.body if isinstance(n, Attribute)}

    @property
    def blocks(self) -> list[Block]:
        return [n for n in self.body if isinstance(n, Block)]

    def get_attribute(self, name: str) -> Attribute | None:
        """Return the attribute with this name, or None."""
        return self.attributes.get(name)

    def set_attribute_raw(self, name: str, tokens: list[Token]) -> None:
        """Set an attribute's expression to the given tokens, adding it if absent."""
        expr = list(tokens)
        if expr and expr[0].spaces_before == 0:
            expr[0] = replace(expr[0], spaces_before=1)
        existing = self.get_attribute(name)
        if existing is not None:
            existing.expr = expr
            return
        indent = self.close_token.spaces_before + 2
        if not self.body or not (
            isinstance(self.body[-1], Token) and self.body[-1].type is TokenType.NEWLINE
        ):
            self.body.append(Token(TokenType.NEWLINE, "\n"))
        self.body.append(
            Attribute(name, Token(TokenType.IDENT, name, indent), Token(TokenType.EQUAL, "=", 1), expr)
        )
        self.body.append(Token(TokenType.NEWLINE, "\n"))

    def tokens(self) -> list[Token]:
        return [*self.header, self.open_token, *_body_tokens(self.body), self.close_token]


def _body_tokens(body: list[Node]) -> list[Token]:
    out: list[Token] = []
    for node in body:
        out.extend([node] if isinstance(node, Token) else node.tokens())
    return out


@dataclass
class HclFile:
    """A parsed HCL file that can be rendered back to text."""

    filename: str
    body: list[Node] = field(default_factory=list)

    @property
    def blocks(self) -> list[Block]:
        return [n for n in self.body if isinstance(n, Block)]

    def render(self) -> str:
        """Return the file's source text."""
        return tokens_bytes(_body_tokens(self.body))


_OPENERS = {TokenType.O_BRACE, TokenType.O_BRACK, TokenType.O_PAREN, TokenType.O_QUOTE,
            TokenType.TEMPLATE_INTERP, TokenType.TEMPLATE_CONTROL}
_CLOSERS = {TokenType.C_BRACE, TokenType.C_BRACK, TokenType.C_PAREN, TokenType.C_QUOTE,
            TokenType.TEMPLATE_SEQ_END}


class _Parser:
    def __init__(self, tokens: list[Token], filename: str) -> None:
        self.tokens = tokens
        self.pos = 0
        self.filename = filename

    def _error(self, message: str, token: Token | None = None) -> HclSyntaxError:
        where = f":{token.line}" if token else ""
        return HclSyntaxError(f"{self.filename}{where}: {message}")

    def _peek(self, offset: int = 0) -> Token | None:
        idx = self.pos + offset
        return self.tokens[idx] if idx < len(self.tokens) else None

    def parse_body(self, nested: bool) -> tuple[list[Node], Token | None]:
        nodes: list[Node] = []
        names: set[str] = set()
        while True:
            tok = self._peek()
            if tok is None:
                if nested:
                    raise self._error("unclosed block")
                return nodes, None
            if tok.type in (TokenType.NEWLINE, TokenType.COMMENT):
                nodes.append(tok)
                self.pos += 1
            elif tok.type is TokenType.C_BRACE:
                if not nested:
                    raise self._error("unexpected '}'", tok)
                self.pos += 1
                return nodes, tok
            elif tok.type is not TokenType.IDENT:
                raise self._error(f"unexpected token {tok.text!r}", tok)
            elif (nxt := self._peek(1)) is not None and nxt.type is TokenType.EQUAL:
                if tok.text in names:
                    raise self._error(f"attribute {tok.text!r} redefined", tok)
                names.add(tok.text)
                nodes.append(self._attribute())
            else:
                nodes.append(self._block())

    def _attribute(self) -> Attribute:
        name_tok, eq_tok = self.tokens[self.pos], self.tokens[self.pos + 1]
        self.pos += 2
        expr: list[Token] = []
        depth = 0
        while (tok := self._peek()) is not None:
            if depth == 0 and tok.type in (TokenType.NEWLINE, TokenType.COMMENT, TokenType.C_BRACE):
                break
            if tok.type in _OPENERS:
                depth += 1
            elif tok.type in _CLOSERS:
                depth -= 1
            expr.append(tok)
            self.pos += 1
        if not expr or depth != 0:
            raise self._error(f"invalid expression for {name_tok.text!r}", name_tok)
        return Attribute(name_tok.text, name_tok, eq_tok, expr)

    def _block(self) -> Block:
        header = [self.tokens[self.pos]]
        self.pos += 1
        labels: list[str] = []
        while (tok := self._peek()) is not None and tok.type in (TokenType.IDENT, TokenType.O_QUOTE):
            if tok.type is TokenType.IDENT:
                labels.append(tok.text)
                header.append(tok)
                self.pos += 1
                continue
            parts = [tok]
            self.pos += 1
            if (lit := self._peek()) is not None and lit.type is TokenType.QUOTED_LIT:
                parts.append(lit)
                self.pos += 1
            close = self._peek()
            if close is None or close.type is not TokenType.C_QUOTE:
                raise self._error("invalid block label", tok)
            parts.append(close)
            self.pos += 1
            labels.append(parts[1].text if len(parts) == 3 else "")
            header.extend(parts)
        opening = self._peek()
        if opening is None or opening.type is not TokenType.O_BRACE:
            raise self._error(f"expected '{{' after block {header[0].text!r}", header[0])
        self.pos += 1
        body, close = self.parse_body(True)
        return Block(header[0].text, labels, header, opening, body, close)


def parse_config(src: str, filename: str = "") -> HclFile:
    """Parse HCL source into an editable file; raises HclSyntaxError on errors."""
    tokens = tokenize(src)
    body, _ = _Parser(tokens, filename).parse_body(False)
    return HclFile(filename, body)