import os

import pytest

from hcltagger.block import Tag
from hcltagger.hcl import HclSyntaxError
from hcltagger.parser import (
    TerraformParser,
    get_provider_from_resource_type,
    get_tag_attribute_by_resource_type,
)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return str(path)


def _tags(block):
    return {t.key: t.value for t in block.existing_tags}


def test_provider_helpers():
    assert get_provider_from_resource_type("aws_s3_bucket") == "aws"
    assert get_tag_attribute_by_resource_type("google_storage_bucket") == "labels"
    assert get_tag_attribute_by_resource_type("oci_core_instance") == "freeform_tags"
    with pytest.raises(ValueError):
        get_tag_attribute_by_resource_type("foo_thing")


def test_skip_all_comment(tmp_path):
    f = _write(tmp_path / "skipAll.tf", (
        '#yor:skipAll\nresource "aws_vpc" "example_vpc" {\n  cidr_block = "10.0.0.0/16"\n}\n\n'
        'resource "aws_subnet" "example_subnet" {\n  vpc_id = "x"\n}\n\n'
        'resource "aws_instance" "example_instance" {\n  ami = "a"\n}\n'
    ))
    p = TerraformParser(str(tmp_path))
    p.parse_file(f)
    assert p.skipped_by_comment == [
        "aws_vpc.example_vpc", "aws_subnet.example_subnet", "aws_instance.example_instance"]


def test_skip_one_and_none(tmp_path):
    f = _write(tmp_path / "skipOne.tf", (
        'resource "aws_vpc" "example_vpc" {\n  cidr_block = "10.0.0.0/16"\n}\n\n'
        '#yor:skip\nresource "aws_instance" "example_instance" {\n  ami = "a"\n}\n'
    ))
    p = TerraformParser(str(tmp_path))
    p.parse_file(f)
    assert p.skipped_by_comment == ["aws_instance.example_instance"]
    g = _write(tmp_path / "no" / "noSkip.tf", 'resource "aws_vpc" "v" {\n  a = "b"\n}\n')
    q = TerraformParser(str(tmp_path / "no"))
    q.parse_file(g)
    assert q.skipped_by_comment == []


def test_parse_existing_tags_and_lines(tmp_path):
    f = _write(tmp_path / "main.tf", (
        'resource "aws_vpc" "eks_vpc" {\n'
        '  cidr_block = "10.0.0.0/16"\n'
        '  tags = {\n'
        '    Name = "${local.prefix}-eks-vpc"\n'
        '    "kubernetes.io/cluster" = "shared"\n'
        '  }\n'
        '}\n'
    ))
    blocks = TerraformParser(str(tmp_path)).parse_file(f)
    assert len(blocks) == 1
    b = blocks[0]
    assert b.is_taggable
    assert b.resource_id == "aws_vpc.eks_vpc"
    assert _tags(b) == {"Name": "${local.prefix}-eks-vpc", "kubernetes.io/cluster": "shared"}
    assert (b.get_lines().start, b.get_lines().end) == (1, 7)


def test_unsupported_and_mixed_blocks(tmp_path):
    f = _write(tmp_path / "mixed.tf", (
        'provider "aws" {\n  region = "us-east-1"\n}\n'
        'data "aws_caller_identity" "me" {\n}\n'
        'resource "aws_s3_bucket" "test-bucket" {\n  bucket = "b"\n}\n'
        'resource "aws_autoscaling_group" "asg" {\n  name = "n"\n}\n'
        'resource "random_string" "r" {\n  length = 4\n}\n'
    ))
    blocks = TerraformParser(str(tmp_path)).parse_file(f)
    ids = [b.resource_id for b in blocks]
    assert ids == ["aws_s3_bucket.test-bucket", "aws_autoscaling_group.asg"]
    assert blocks[0].is_taggable
    assert not blocks[1].is_taggable


def test_malformed_file_raises(tmp_path):
    f = _write(tmp_path / "bad.tf", 'resource "aws_vpc" "v" {\n  a = \n')
    with pytest.raises(HclSyntaxError):
        TerraformParser(str(tmp_path)).parse_file(f)


def test_write_adds_tags_to_block_without_tags(tmp_path):
    f = _write(tmp_path / "main.tf", 'resource "aws_s3_bucket" "b" {\n  bucket = "x"\n}\n')
    p = TerraformParser(str(tmp_path))
    blocks = p.parse_file(f)
    blocks[0].add_new_tags([Tag("yor_trace", "some-uuid"), Tag("mock_tag", "mock_value")])
    out = str(tmp_path / "out.tf")
    p.write_file(f, blocks, out)
    again = p.parse_file(out)
    assert _tags(again[0]) == {"yor_trace": "some-uuid", "mock_tag": "mock_value"}


def test_write_updates_and_appends_existing_map(tmp_path):
    f = _write(tmp_path / "main.tf", (
        'resource "aws_s3_bucket" "b" {\n  tags = {\n    Name = "x"\n  }\n}\n'))
    p = TerraformParser(str(tmp_path))
    blocks = p.parse_file(f)
    blocks[0].add_new_tags([Tag("Name", "y"), Tag("yor_trace", "abc")])
    out = str(tmp_path / "out.tf")
    p.write_file(f, blocks, out)
    assert _tags(p.parse_file(out)[0]) == {"Name": "y", "yor_trace": "abc"}


def test_module_blocks(tmp_path):
    f = _write(tmp_path / "main.tf", (
        'module "complete_sg" {\n  source = "terraform-aws-modules/security-group/aws"\n'
        '  tags = {\n    Env = "dev"\n  }\n}\n'
        'module "sub_module" {\n  source = "./sub"\n}\n'
    ))
    (tmp_path / "sub").mkdir()
    blocks = TerraformParser(str(tmp_path)).parse_file(f)
    remote, local = blocks
    assert remote.resource_id == "complete_sg"
    assert remote.is_taggable and remote.tags_attribute_name == "tags"
    assert _tags(remote) == {"Env": "dev"}
    assert not local.is_taggable


def test_get_source_files_follows_local_modules(tmp_path):
    _write(tmp_path / "module1" / "main.tf", 'module "m2" {\n  source = "../module2"\n}\n')
    _write(tmp_path / "module2" / "main.tf", 'resource "aws_vpc" "v" {\n  a = "b"\n}\n')
    _write(tmp_path / "module2" / "outputs.tf", "")
    d = str(tmp_path / "module1")
    files = TerraformParser(d).get_source_files(d)
    tails = sorted("/".join(os.path.normpath(x).split(os.sep)[-2:]) for x in files)
    assert tails == ["module1/main.tf", "module2/main.tf", "module2/outputs.tf"]


def test_tag_modules_disabled(tmp_path):
    _write(tmp_path / "main.tf", 'module "m2" {\n  source = "../other"\n}\n')
    _write(tmp_path.parent / "other" / "x.tf", "")
    p = TerraformParser(str(tmp_path), {"tag-modules": "false"})
    files = p.get_source_files(str(tmp_path))
    assert [os.path.basename(x) for x in files] == ["main.tf"]