import pytest

from hcltagger.block import Tag
from hcltagger.hcl import Token, TokenType, tokenize, tokens_bytes
from hcltagger.tagattr import (
    build_tags_tokens,
    extract_tag_keys_from_raw_tokens,
    extract_tag_pairs,
    get_hcl_maps_contents,
    insert_token,
    insert_tokens,
    parse_tag_attribute,
)


def _t(ttype, text, spaces=0):
    return Token(ttype, text, spaces)


def _texts(groups):
    return [[t.text for t in group] for group in groups]


STANDARD = [
    _t(TokenType.O_QUOTE, '"', 1),
    _t(TokenType.QUOTED_LIT, "Name"),
    _t(TokenType.C_QUOTE, '"'),
    _t(TokenType.EQUAL, "=", 1),
    _t(TokenType.O_QUOTE, '"', 1),
    _t(TokenType.IDENT, "test"),
    _t(TokenType.O_QUOTE, '"'),
    _t(TokenType.COMMA, ","),
    _t(TokenType.O_QUOTE, '"', 1),
    _t(TokenType.QUOTED_LIT, "Second"),
    _t(TokenType.C_QUOTE, '"'),
    _t(TokenType.EQUAL, "=", 1),
    _t(TokenType.O_QUOTE, '"', 1),
    _t(TokenType.IDENT, "test_second"),
    _t(TokenType.O_QUOTE, '"'),
]

WITH_FUNC = [
    _t(TokenType.O_QUOTE, '"', 1),
    _t(TokenType.QUOTED_LIT, "Name"),
    _t(TokenType.C_QUOTE, '"'),
    _t(TokenType.EQUAL, "=", 1),
    _t(TokenType.IDENT, "format", 1),
    _t(TokenType.O_PAREN, "("),
    _t(TokenType.QUOTED_LIT, "%"),
    _t(TokenType.QUOTED_LIT, "s-sample"),
    _t(TokenType.C_QUOTE, '"'),
    _t(TokenType.COMMA, ","),
    _t(TokenType.IDENT, "var", 1),
    _t(TokenType.DOT, "."),
    _t(TokenType.IDENT, "this"),
    _t(TokenType.C_PAREN, ")"),
]


def test_extract_tag_pairs_standard():
    assert _texts(extract_tag_pairs(STANDARD)) == [
        ['"', "Name", '"', "=", '"', "test", '"'],
        ['"', "Second", '"', "=", '"', "test_second", '"'],
    ]


def test_extract_tag_pairs_with_func():
    assert _texts(extract_tag_pairs(WITH_FUNC)) == [[t.text for t in WITH_FUNC]]


def test_get_hcl_maps_contents_merge():
    tokens = tokenize('merge({a = "1", b = "2"}, {c = "3"})')
    maps = get_hcl_maps_contents(tokens)
    assert [tokens_bytes(m) for m in maps] == ['a = "1", b = "2"', 'c = "3"']


@pytest.mark.parametrize(
    ("expr", "expected"),
    [
        ('{ Name = "tag-for-s3", Environment = "prod" }', {"Name": "tag-for-s3", "Environment": "prod"}),
        ("var.tags", {}),
        ("null", {}),
        (
            'merge(var.tags, {yor_trace = "4329587194", git_org = "bana"})',
            {"yor_trace": "4329587194", "git_org": "bana"},
        ),
        (
            '{\n    Name = "${local.resource_prefix.value}-eks-subnet"\n'
            '    "kubernetes.io/cluster/${local.eks_name.value}" = "shared"\n  }',
            {
                "Name": "${local.resource_prefix.value}-eks-subnet",
                "kubernetes.io/cluster/${local.eks_name.value}": "shared",
            },
        ),
        ("{ n = 1 }", {"n": "1"}),
        ('{ x = format("%s-a", var.y) }', {"x": 'format("%s-a", var.y)'}),
    ],
)
def test_parse_tag_attribute(expr, expected):
    assert parse_tag_attribute(tokenize(expr)) == expected


def test_parse_tag_attribute_with_comment():
    parsed = parse_tag_attribute(tokenize('{\n  a = "1" # note\n  b = "2"\n}'))
    assert parsed["b"] == "2"
    assert set(parsed) == {"a", "b"}


def test_extract_tag_keys_from_raw_tokens():
    tokens = tokenize('{ Name = "x", Env = "y" }')
    assert extract_tag_keys_from_raw_tokens(tokens) == ["Name", "x", "Env"]


def test_extract_tag_keys_with_interpolation():
    tokens = tokenize('{ "k-${var.a}" = "v" }')
    assert extract_tag_keys_from_raw_tokens(tokens)[0] == "k-${var.a}"


def test_build_tags_tokens_sorted():
    tokens = build_tags_tokens([Tag("b", "2"), Tag("a", "1")])
    assert tokens_bytes(tokens) == '{\na = "1"\nb = "2"\n}'


def test_build_tags_tokens_quotes_non_identifier_keys():
    tokens = build_tags_tokens([Tag("kubernetes.io/x", "v")])
    assert tokens_bytes(tokens) == '{\n"kubernetes.io/x" = "v"\n}'


def test_build_tags_tokens_empty():
    assert build_tags_tokens([]) is None


def test_build_tags_round_trip():
    tags = [Tag("git_org", "example"), Tag("yor_trace", "some-uuid")]
    assert parse_tag_attribute(build_tags_tokens(tags)) == {"git_org": "example", "yor_trace": "some-uuid"}


def test_insert_token():
    tokens = tokenize("a b c")
    new = _t(TokenType.IDENT, "x")
    assert [t.text for t in insert_token(tokens, 1, new)] == ["a", "x", "b", "c"]
    assert [t.text for t in insert_token(tokens, 3, new)] == ["a", "b", "c", "x"]
    assert [t.text for t in tokens] == ["a", "b", "c"]


def test_insert_tokens_multiline():
    tokens = tokenize('{\n  a = "1"\n}')
    values = build_tags_tokens([Tag("b", "2")])[2:-2]
    assert tokens_bytes(insert_tokens(tokens, values)) == '{\n  a = "1"\nb = "2"\n}'


def test_insert_tokens_single_line():
    tokens = tokenize('{ a = "1" }')
    values = build_tags_tokens([Tag("b", "2")])[2:-2]
    assert tokens_bytes(insert_tokens(tokens, values)) == '{ a = "1"\nb = "2"\n }'