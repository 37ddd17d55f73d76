import pytest

from hcltagger.hcl import (
    HclSyntaxError,
    TokenType,
    parse_config,
    tokenize,
    tokens_bytes,
    tokens_for_map,
)

SRC = '''resource "aws_s3_bucket" "b" {
  bucket = "my-${var.x}-bucket"
  tags = {
    Name = "n" # comment
  }
  nested {
    a = [1, 2]
  }
}

module "m" {
  source = "./mod"
}
'''


def test_round_trip_render():
    assert parse_config(SRC, "main.tf").render() == SRC


def test_tokenize_round_trip():
    assert tokens_bytes(tokenize(SRC)) == SRC


def test_blocks_and_labels():
    f = parse_config(SRC)
    assert [b.type for b in f.blocks] == ["resource", "module"]
    assert f.blocks[0].labels == ["aws_s3_bucket", "b"]
    assert f.blocks[1].labels == ["m"]


def test_lines():
    b = parse_config(SRC).blocks[0]
    assert (b.body_start_line, b.body_end_line) == (1, 9)
    tags = b.get_attribute("tags")
    assert (tags.start_line, tags.end_line) == (3, 5)
    assert b.get_attribute("missing") is None


def test_template_tokens():
    types = [t.type for t in tokenize('"a${b}c"')]
    assert types == [
        TokenType.O_QUOTE, TokenType.QUOTED_LIT, TokenType.TEMPLATE_INTERP,
        TokenType.IDENT, TokenType.TEMPLATE_SEQ_END, TokenType.QUOTED_LIT, TokenType.C_QUOTE,
    ]


def test_duplicate_attribute_raises():
    with pytest.raises(HclSyntaxError):
        parse_config('resource "a" "b" {\n  x = 1\n  x = 2\n}\n')


@pytest.mark.parametrize("src", ['x = "abc\n', 'resource "a" {\n', "x = @\n"])
def test_malformed_raises(src):
    with pytest.raises(HclSyntaxError):
        parse_config(src)


def test_tokens_for_map_sorted_and_quoted():
    text = tokens_bytes(tokens_for_map({"b": "2", "a": "1", "k.io/x": "v"}))
    assert text == '{\na = "1"\nb = "2"\n"k.io/x" = "v"\n}'


def test_set_attribute_raw_adds_and_reparses():
    f = parse_config('resource "aws_vpc" "v" {\n  cidr = "x"\n}\n')
    block = f.blocks[0]
    block.set_attribute_raw("tags", tokens_for_map({"env": "dev"}))
    reparsed = parse_config(f.render()).blocks[0]
    assert "tags" in reparsed.attributes
    assert 'env = "dev"' in tokens_bytes(reparsed.get_attribute("tags").expr)


def test_set_attribute_raw_replaces():
    f = parse_config('resource "a" "b" {\n  tags = null\n}\n')
    f.blocks[0].set_attribute_raw("tags", tokens_for_map({"k": "v"}))
    reparsed = parse_config(f.render()).blocks[0]
    assert list(reparsed.attributes) == ["tags"]
    assert "null" not in f.render()