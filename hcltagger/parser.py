"""Reading Terraform files into taggable blocks and writing tags back into them."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Mapping

from hcltagger.block import (
    DATA_BLOCK_TYPE,
    EACH_BLOCK_TYPE,
    LOCAL_BLOCK_TYPE,
    MODULE_BLOCK_TYPE,
    PROVIDER_TO_TAG_ATTRIBUTE,
    RESOURCE_BLOCK_TYPE,
    SUPPORTED_BLOCK_TYPES,
    VAR_BLOCK_TYPE,
    VARIABLE_BLOCK_TYPE,
    Tag,
    TerraformBlock,
)
from hcltagger.hcl import (
    Block,
    HclSyntaxError,
    Token,
    TokenType,
    parse_config,
    tokens_bytes,
)
from hcltagger.module import (
    SKIPPED_PROVIDERS,
    TerraformModule,
    extract_provider_from_module_src,
    extract_subdir_from_remote_module_src,
    is_remote_module,
    is_terraform_registry_module,
)
from hcltagger.tagattr import (
    build_tags_tokens,
    extract_tag_keys_from_raw_tokens,
    insert_token,
    insert_tokens,
    parse_tag_attribute,
)
from hcltagger.taggable import is_known_taggable

logger = logging.getLogger(__name__)

IGNORED_DIRS = (".git", ".DS_Store", ".idea", ".terraform")

UNSUPPORTED_TERRAFORM_BLOCKS = (
    "aws_autoscaling_group",
    "aws_lb_listener",
    "aws_lb_listener_rule",
    "aws_cloudwatch_log_destination",
    "google_monitoring_notification_channel",
    "aws_secretsmanager_secret_rotation",
)

_RENDERED_PREFIXES = (VAR_BLOCK_TYPE, LOCAL_BLOCK_TYPE, MODULE_BLOCK_TYPE, DATA_BLOCK_TYPE, EACH_BLOCK_TYPE)
_MODULE_TAG_ATTRIBUTES = ("extra_tags", "tags", "common_tags", "labels")


class _SkippedBlock(Exception):
    """A block that is deliberately not handled."""


def get_provider_from_resource_type(resource_type: str) -> str:
    """The provider prefix of a resource type, e.g. 'aws' for 'aws_s3_bucket'."""
    return resource_type.split("_")[0]


def get_tag_attribute_by_resource_type(resource_type: str) -> str:
    """The tags attribute name for a resource type; raises ValueError if unknown."""
    name = PROVIDER_TO_TAG_ATTRIBUTE.get(get_provider_from_resource_type(resource_type), "")
    if not name:
        raise ValueError(f"failed to find tags attribute name for resource type {resource_type}")
    return name


def _parse_bool(text: str, default: bool) -> bool:
    lowered = text.strip().lower()
    if lowered in ("1", "t", "true"):
        return True
    if lowered in ("0", "f", "false"):
        return False
    return default


class TerraformParser:
    """Parses Terraform files into blocks and writes merged tags back."""

    name = "Terraform"
    skipped_dirs = IGNORED_DIRS
    supported_file_extensions = (".tf",)

    def __init__(
        self,
        root_dir: str,
        args: Mapping[str, str] | None = None,
        module_install_dir: str | None = None,
    ) -> None:
        args = args or {}
        self.root_dir = root_dir
        self.tag_modules = _parse_bool(args.get("tag-modules", "true"), True)
        self.tag_local_modules = _parse_bool(args.get("tag-local-modules", "false"), False)
        self.module_install_dir = module_install_dir or os.path.join(os.getcwd(), ".terraform", "modules")
        self.skipped_by_comment: list[str] = []
        self._taggable_cache: dict[str, bool] = {}
        try:
            self.terraform_module: TerraformModule | None = TerraformModule(root_dir)
        except (OSError, HclSyntaxError) as exc:
            logger.warning("%s", exc)
            self.terraform_module = None

    def get_source_files(self, directory: str) -> list[str]:
        """All .tf files under the directory and, if enabled, its local modules."""
        if self.tag_modules and self.terraform_module is not None:
            directories = self.terraform_module.get_modules_directories()
        else:
            directories = [directory]

        def fail(exc: OSError) -> None:
            raise OSError(f"failed to get .tf files because {exc}") from exc

        files: list[str] = []
        for root_dir in directories:
            for current, dirs, names in os.walk(root_dir, onerror=fail):
                dirs.sort()
                files.extend(os.path.join(current, n) for n in sorted(names) if n.endswith(".tf"))
        return files

    def parse_file(self, file_path: str) -> list[TerraformBlock]:
        """Parse a file into its supported blocks; raises on unreadable or malformed files."""
        with open(file_path, encoding="utf-8") as handle:
            src = handle.read()
        lines = src.split("\n")
        try:
            hcl_file = parse_config(src, file_path)
        except HclSyntaxError as exc:
            raise HclSyntaxError(f"failed to parse hcl file {file_path} because of errors {exc}") from exc

        skip_all = False
        parsed: list[TerraformBlock] = []
        for block in hcl_file.blocks:
            if block.type not in SUPPORTED_BLOCK_TYPES:
                continue
            block_id = ".".join(block.labels)
            try:
                tf_block = self._parse_block(block, file_path)
            except _SkippedBlock:
                logger.info(
                    "skipping block %s because the provider %s does not exist locally or does not support tags",
                    block_id, block_id.split("_")[0],
                )
                continue
            except ValueError as exc:
                logger.warning("failed to parse terraform block because %s", exc)
                continue
            line = tf_block.get_lines().start
            if 1 < line <= len(lines):
                above = lines[line - 2].strip().upper()
                if above == "#YOR:SKIPALL":
                    skip_all = True
                if above == "#YOR:SKIP" or skip_all:
                    self.skipped_by_comment.append(tf_block.resource_id)
            parsed.append(tf_block)
        return parsed

    def _parse_block(self, block: Block, file_path: str) -> TerraformBlock:
        existing: list[Tag] = []
        taggable = False
        attr_name = ""
        resource_type = ""
        if block.type == RESOURCE_BLOCK_TYPE:
            if not block.labels:
                raise ValueError("resource block without labels")
            resource_type = block.labels[0]
            provider = get_provider_from_resource_type(resource_type)
            if provider in SKIPPED_PROVIDERS:
                raise _SkippedBlock(provider)
            attr_name = get_tag_attribute_by_resource_type(resource_type)
            existing, taggable = self._get_existing_tags(block, attr_name)
            if not taggable:
                taggable = self.is_block_taggable(block)
        elif block.type == MODULE_BLOCK_TYPE:
            resource_type = "module"
            taggable, existing, attr_name = self._extract_tags_from_module(block, file_path)
        return TerraformBlock(
            syntax_block=block,
            file_path=file_path,
            existing_tags=existing,
            is_taggable=taggable,
            tags_attribute_name=attr_name,
            resource_type=resource_type,
        )

    def _extract_tags_from_module(self, block: Block, file_path: str) -> tuple[bool, list[Tag], str]:
        source_attr = block.get_attribute("source")
        if source_attr is None:
            raise ValueError(f"failed to parse module.{'.'.join(block.labels)}")
        source = tokens_bytes(source_attr.expr).strip('" ')
        if not is_remote_module(source) and not is_terraform_registry_module(source) and not self.tag_local_modules:
            return False, [], ""
        names = list(_MODULE_TAG_ATTRIBUTES)
        provider_attr = PROVIDER_TO_TAG_ATTRIBUTE.get(extract_provider_from_module_src(source))
        if provider_attr:
            names.append(provider_attr)
        for name in names:
            attr = block.get_attribute(name)
            if attr is not None:
                tags = [Tag(k, v) for k, v in parse_tag_attribute(attr.expr).items()]
                return True, tags, name
        module_dir = extract_subdir_from_remote_module_src(source)
        taggable, name = self._is_module_taggable(".".join(block.labels), module_dir, names)
        return taggable, [], name

    def _is_module_taggable(self, module_name: str, module_dir: str, names: list[str]) -> tuple[bool, str]:
        logger.info("Searching module %s for %s", module_name, names)
        expected = os.path.join(self.module_install_dir, module_name, module_dir)
        if not os.path.isdir(expected):
            return False, ""
        for entry in sorted(os.listdir(expected)):
            if not entry.endswith(".tf"):
                continue
            try:
                blocks = self.parse_file(os.path.join(expected, entry))
            except (OSError, HclSyntaxError):
                continue
            for b in blocks:
                if b.syntax_block.type == VARIABLE_BLOCK_TYPE and b.resource_id in names:
                    return True, b.resource_id
        return False, ""

    def _get_existing_tags(self, block: Block, attr_name: str) -> tuple[list[Tag], bool]:
        attr = block.get_attribute(attr_name)
        if attr is None:
            return [], False
        try:
            taggable = self.is_block_taggable(block)
        except ValueError:
            taggable = False
        return [Tag(k, v) for k, v in parse_tag_attribute(attr.expr).items()], taggable

    def is_block_taggable(self, block: Block) -> bool:
        """Whether a resource block's type accepts tags."""
        resource_type = block.labels[0]
        if resource_type in UNSUPPORTED_TERRAFORM_BLOCKS:
            return False
        if is_known_taggable(resource_type):
            return True
        if resource_type in self._taggable_cache:
            return self._taggable_cache[resource_type]
        get_tag_attribute_by_resource_type(resource_type)
        # No provider schema is available, so types not listed are treated as untaggable.
        self._taggable_cache[resource_type] = False
        return False

    def write_file(self, read_file_path: str, blocks: Iterable[TerraformBlock], write_file_path: str) -> None:
        """Write the file with each taggable block's merged tags applied."""
        with open(read_file_path, encoding="utf-8") as handle:
            src = handle.read()
        try:
            hcl_file = parse_config(src, read_file_path)
        except HclSyntaxError as exc:
            raise HclSyntaxError(f"failed to parse hcl file {read_file_path} because of errors {exc}") from exc
        blocks = list(blocks)
        for raw in hcl_file.blocks:
            for parsed in blocks:
                if parsed.is_taggable and parsed.syntax_block.labels == raw.labels:
                    self._modify_block_tags(raw, parsed)
        output = hcl_file.render()
        try:
            parse_config(output, write_file_path)
        except HclSyntaxError as exc:
            raise ValueError(f"editing file {read_file_path} resulted in malformed terraform") from exc
        with open(write_file_path, "w", encoding="utf-8") as handle:
            handle.write(output)

    def _modify_block_tags(self, raw: Block, parsed: TerraformBlock) -> None:
        merged = parsed.merge_tags()
        attr_name = parsed.tags_attribute_name
        if raw.type == DATA_BLOCK_TYPE:
            return
        attr = raw.get_attribute(attr_name)
        if attr is None:
            new_tokens = build_tags_tokens(merged)
            if new_tokens is not None:
                raw.set_attribute_raw(attr_name, new_tokens)
            return

        raw_tokens: list[Token] = attr.expr
        existing = parse_tag_attribute(raw_tokens)
        is_merge = False
        is_rendered = False
        for i, token in enumerate(raw_tokens):
            if token.text == "merge":
                is_merge = True
                break
            if i == 0 and token.text in _RENDERED_PREFIXES:
                is_rendered = True
                break

        possible_keys = extract_tag_keys_from_raw_tokens(raw_tokens)
        replaced: list[Tag] = []
        new: list[Tag] = []
        for tag in merged:
            stripped = tag.key.replace('"', "")
            if any(k == tag.key or k == stripped or stripped in k for k in possible_keys):
                replaced.append(tag)
            else:
                new.append(tag)

        for tag in replaced:
            old_value = existing.get(tag.key, "").replace('"', "")
            if not old_value:
                old_value = existing.get(f'"{tag.key}"', "").replace('"', "")
            new_value = tag.value.replace('"', "")
            found_key = False
            for token in raw_tokens:
                if token.text == tag.key:
                    found_key = True
                if token.text == old_value and found_key:
                    token.text = new_value

        if not new:
            logger.debug("Nothing to update for block %s (%s)", parsed.resource_id, parsed.file_path)
            return

        new_tokens = build_tags_tokens(new) or []
        if not is_merge and not is_rendered:
            if len(raw_tokens) == 1:
                raw_tokens = new_tokens
            else:
                raw_tokens = insert_tokens(raw_tokens, new_tokens[2:-2])
            raw.set_attribute_raw(attr_name, raw_tokens)
            return

        if not is_merge:
            raw_tokens = insert_token(raw_tokens, 0, Token(TokenType.IDENT, "merge"))
            raw_tokens = insert_token(raw_tokens, 1, Token(TokenType.O_PAREN, "("))
            raw_tokens = insert_token(raw_tokens, len(raw_tokens), Token(TokenType.C_PAREN, ")"))
        if len(raw_tokens) < 3 or (
            raw_tokens[-3].type is not TokenType.COMMA and raw_tokens[-2].type is not TokenType.COMMA
        ):
            raw_tokens = insert_token(raw_tokens, len(raw_tokens) - 1, Token(TokenType.COMMA, ","))
        for token in new_tokens:
            raw_tokens = insert_token(raw_tokens, len(raw_tokens) - 1, token)
        raw.set_attribute_raw(attr_name, raw_tokens)