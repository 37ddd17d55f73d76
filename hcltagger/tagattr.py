"""Reading and building the token sequences of tags attributes."""

from __future__ import annotations

import json
from typing import Iterable

from hcltagger.block import Tag
from hcltagger.hcl import Token, TokenType, tokens_bytes, tokens_for_map

_SEPARATORS = (TokenType.COMMA, TokenType.NEWLINE, TokenType.COMMENT)
_CLOSING_TO_OPENING = {TokenType.C_PAREN: TokenType.O_PAREN, TokenType.C_BRACK: TokenType.O_BRACK}


def get_hcl_maps_contents(tokens: list[Token]) -> list[list[Token]]:
    """Return the token runs found between curly braces.

    For `merge({a=1, b=2}, {c=3})` this gives the tokens of `a=1, b=2` and `c=3`.
    """
    maps: list[list[Token]] = []
    open_index = -1
    for i, token in enumerate(tokens):
        if token.type is TokenType.O_BRACE:
            open_index = i
        if token.type is TokenType.C_BRACE:
            maps.append(tokens[open_index + 1:i])
    return maps


def extract_tag_pairs(tokens: list[Token]) -> list[list[Token]]:
    """Split map contents into `key = value` runs.

    Commas, newlines and comments separate entries unless inside parentheses or brackets.
    """
    counters = {TokenType.O_PAREN: 0, TokenType.O_BRACK: 0}
    pairs: list[list[Token]] = []
    start = 0
    has_eq = False
    for i, token in enumerate(tokens):
        if token.type in _SEPARATORS and sum(counters.values()) == 0:
            if has_eq:
                end = i + 1 if token.type is TokenType.COMMENT else i
                pairs.append(tokens[start:end])
            start = i + 1
            has_eq = False
        if token.type is TokenType.EQUAL:
            has_eq = True
        if token.type in counters:
            counters[token.type] += 1
        if token.type in _CLOSING_TO_OPENING:
            counters[_CLOSING_TO_OPENING[token.type]] -= 1
    if has_eq:
        pairs.append(tokens[start:])
    return pairs


def _unquote(text: str) -> str:
    try:
        decoded = json.loads(text)
    except ValueError:
        return text
    return decoded if isinstance(decoded, str) else text


def parse_tag_attribute(tokens: list[Token]) -> dict[str, str]:
    """Read the key/value pairs from every map literal in a tags expression."""
    parsed: dict[str, str] = {}
    for hcl_map in get_hcl_maps_contents(tokens):
        for entry in extract_tag_pairs(hcl_map):
            value_start = -1
            key = ""
            for j, token in enumerate(entry):
                if token.type is TokenType.EQUAL:
                    value_start = j + 1
                    key = tokens_bytes(entry[:j]).strip()
            value = tokens_bytes(entry[value_start:])
            value = value.removesuffix(" ").removeprefix(" ")
            parsed[_unquote(key)] = _unquote(value)
    return parsed


def extract_tag_keys_from_raw_tokens(tokens: Iterable[Token]) -> list[str]:
    """Collect the texts that may be tag keys in a tags expression."""
    keys: list[str] = []
    current = ""
    in_interpolation = False
    for text in (t.text for t in tokens):
        if text == "{":
            continue
        if text == "${":
            current += text
            in_interpolation = True
        elif text == "}":
            if in_interpolation:
                current += text
                in_interpolation = False
        elif text in ("=", "\n", ","):
            keys.append(current)
            current = ""
        else:
            current += text
    return [
        key[1:-1] if key.startswith('"') and key.endswith('"') and len(key) > 2 else key
        for key in keys
    ]


def build_tags_tokens(tags: Iterable[Tag]) -> list[Token] | None:
    """Tokens for a map literal holding the tags, or None when there are none."""
    mapping = {tag.key: tag.value for tag in tags}
    return tokens_for_map(mapping) if mapping else None


def insert_token(tokens: list[Token], index: int, value: Token) -> list[Token]:
    """Return a new list with the token inserted at the index."""
    result = list(tokens)
    result.insert(index, value)
    return result


def insert_tokens(tokens: list[Token], values: list[Token]) -> list[Token]:
    """Insert tag entry tokens on their own lines before the closing brace."""
    suffix_length = 2 if tokens[-2].type is TokenType.NEWLINE else 1
    result = list(tokens[:-suffix_length])
    result.append(Token(TokenType.NEWLINE, "\n"))
    result.extend(values)
    if suffix_length == 1:
        result.append(Token(TokenType.NEWLINE, "\n"))
    result.extend(tokens[-suffix_length:])
    return result