"""Terraform blocks and their tags."""

from __future__ import annotations

from dataclasses import dataclass, field

from hcltagger.hcl import Block

PROVIDER_TO_TAG_ATTRIBUTE: dict[str, str] = {
    "aws": "tags",
    "azurerm": "tags",
    "google": "labels",
    "oci": "freeform_tags",
    "alicloud": "tags",
}

RESOURCE_BLOCK_TYPE = "resource"
MODULE_BLOCK_TYPE = "module"
DATA_BLOCK_TYPE = "data"
LOCAL_BLOCK_TYPE = "local"
VAR_BLOCK_TYPE = "var"
VARIABLE_BLOCK_TYPE = "variable"
EACH_BLOCK_TYPE = "each"

SUPPORTED_BLOCK_TYPES = (RESOURCE_BLOCK_TYPE, MODULE_BLOCK_TYPE, VARIABLE_BLOCK_TYPE)

YOR_TRACE_TAG_KEY = "yor_trace"


@dataclass
class Tag:
    key: str
    value: str


@dataclass(frozen=True)
class Lines:
    start: int
    end: int


@dataclass
class TerraformBlock:
    """A parsed Terraform block together with its existing and new tags."""

    syntax_block: Block
    file_path: str = ""
    existing_tags: list[Tag] = field(default_factory=list)
    new_tags: list[Tag] = field(default_factory=list)
    is_taggable: bool = False
    tags_attribute_name: str = ""
    resource_type: str = ""

    @property
    def resource_id(self) -> str:
        return ".".join(self.syntax_block.labels)

    @property
    def resource_name(self) -> str:
        return self.resource_id.replace(f"{self.resource_type}.", "")

    @property
    def separator(self) -> str:
        return "="

    def get_lines(self, content_lines_only: bool = False) -> Lines:
        """Line range of the block body; optionally only up to its last attribute."""
        start = self.syntax_block.body_start_line
        if not content_lines_only:
            return Lines(start, self.syntax_block.body_end_line)
        end = max((a.end_line for a in self.syntax_block.attributes.values()), default=start)
        return Lines(start, max(end, start))

    def tags_lines(self) -> Lines:
        """Line range of the tags attribute, or (-1, -1) when absent."""
        attr = self.syntax_block.get_attribute(self.tags_attribute_name)
        if attr is None:
            return Lines(-1, -1)
        return Lines(attr.start_line, attr.end_line)

    def is_gcp_block(self) -> bool:
        return (
            self.resource_id.startswith("google_")
            or self.tags_attribute_name == PROVIDER_TO_TAG_ATTRIBUTE["google"]
        )

    def add_new_tags(self, tags: list[Tag]) -> None:
        """Add tags to be applied, replacing earlier new tags with the same key."""
        by_key = {t.key: t for t in self.new_tags}
        for tag in tags:
            by_key[tag.key] = tag
        self.new_tags = list(by_key.values())

    def merge_tags(self) -> list[Tag]:
        """Existing tags overridden by new ones, except that an existing trace tag is kept."""
        merged = {t.key: Tag(t.key, t.value) for t in self.existing_tags}
        for tag in self.new_tags:
            if tag.key == YOR_TRACE_TAG_KEY and tag.key in merged:
                continue
            merged[tag.key] = Tag(tag.key, tag.value)
        return list(merged.values())