import pytest

from hcltagger.taggable import TAGGABLE_RESOURCE_TYPES, is_known_taggable


@pytest.mark.parametrize(
    "resource_type",
    [
        "aws_s3_bucket",
        "aws_vpc",
        "aws_subnet",
        "aws_iam_role",
        "aws_eks_cluster",
        "aws_db_instance",
        "azurerm_resource_group",
        "azurerm_storage_account",
        "google_storage_bucket",
        "google_compute_instance",
    ],
)
def test_listed_types_are_taggable(resource_type):
    assert is_known_taggable(resource_type) is True


@pytest.mark.parametrize(
    "resource_type",
    [
        "random_string",
        "null_resource",
        "aws_iam_policy_attachment",
        "aws_s3",
        "",
    ],
)
def test_unlisted_types_are_not_taggable(resource_type):
    assert is_known_taggable(resource_type) is False


def test_lookup_is_case_sensitive():
    assert is_known_taggable("AWS_S3_BUCKET") is False
    assert is_known_taggable("aws_s3_bucket") is True


def test_every_listed_type_is_recognised():
    assert all(is_known_taggable(t) for t in TAGGABLE_RESOURCE_TYPES)


def test_listed_types_under_another_provider_are_not_recognised():
    prefixes = ("aws_", "azurerm_", "google_")
    for resource_type in TAGGABLE_RESOURCE_TYPES:
        prefix = next(p for p in prefixes if resource_type.startswith(p))
        renamed = "random_" + resource_type[len(prefix):]
        assert is_known_taggable(renamed) is False


@pytest.mark.parametrize(
    "resource_type",
    [" aws_s3_bucket", "aws_s3_bucket ", "\taws_vpc", "google_storage_bucket\n"],
)
def test_padded_names_are_not_recognised(resource_type):
    assert is_known_taggable(resource_type) is False
    assert is_known_taggable(resource_type.strip()) is True