"""Terraform module loading and classification of module sources."""

from __future__ import annotations

import json
import logging
import os
import re

from hcltagger.block import MODULE_BLOCK_TYPE, PROVIDER_TO_TAG_ATTRIBUTE
from hcltagger.hcl import HclSyntaxError, parse_config, tokens_bytes

logger = logging.getLogger(__name__)

SKIPPED_PROVIDERS = ("null", "random", "tls", "local", "sops")

REGISTRY_MODULE_REGEX = re.compile(
    r"^((?P<MODULE_HOSTNAME>[^/]+)/)?(?P<MODULE_NAMESPACE>[^/]+)/"
    r"(?P<MODULE_NAME>[^/]+)/(?P<PROVIDER>[a-z]+)"
)

_REMOTE_PREFIXES = (
    "git::",
    "hg::",
    "s3::",
    "gcs::",
    "github.com/",
    "bitbucket.org/",
    "app.terraform.io/",
    "https://",
    "git@",
)


def is_remote_module(source: str) -> bool:
    """True if the module source points at a VCS, bucket or URL."""
    return source.startswith(_REMOTE_PREFIXES)


def is_terraform_registry_module(source: str) -> bool:
    """True if the source looks like a registry address for a known provider."""
    match = REGISTRY_MODULE_REGEX.match(source)
    return match is not None and match.group("PROVIDER") in PROVIDER_TO_TAG_ATTRIBUTE


def extract_subdir_from_remote_module_src(raw: str) -> str:
    """Return the `//sub/dir` part of a module source, without any query string."""
    rest = raw.split("://")[-1]
    parts = rest.split("//")
    if len(parts) == 1:
        return ""
    return parts[1].split("?")[0]


def extract_provider_from_module_src(source: str) -> str:
    """Guess the provider a module source belongs to, or return ''."""
    if source.startswith("app.terraform.io"):
        # <HOSTNAME>/<ORGANIZATION>/<MODULE NAME>/<PROVIDER>
        return source.split("/")[3]
    if is_terraform_registry_module(source):
        match = REGISTRY_MODULE_REGEX.match(source)
        return match.group("PROVIDER") if match else ""
    without_ref = source.split("//")[0]
    for part in without_ref.rstrip(".git").split("/"):
        if part.startswith("terraform-"):
            return part.split("-")[1]
    return ""


def _is_ignored_file(name: str) -> bool:
    return (
        name.startswith((".", "~"))
        or name.endswith("~")
        or (name.startswith("#") and name.endswith("#"))
    )


def _json_module_calls(text: str, path: str) -> list[tuple[str, str]]:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise HclSyntaxError(f"{path}: {exc}") from exc
    modules = data.get("module") if isinstance(data, dict) else None
    entries = modules if isinstance(modules, list) else [modules or {}]
    calls: list[tuple[str, str]] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        for name, body in entry.items():
            source = body.get("source", "") if isinstance(body, dict) else ""
            calls.append((name, str(source)))
    return calls


def _hcl_module_calls(text: str, path: str) -> list[tuple[str, str]]:
    calls: list[tuple[str, str]] = []
    for block in parse_config(text, path).blocks:
        if block.type != MODULE_BLOCK_TYPE or not block.labels:
            continue
        attr = block.get_attribute("source")
        source = tokens_bytes(attr.expr).strip('" ') if attr is not None else ""
        calls.append((block.labels[0], source))
    return calls


class TerraformModule:
    """The Terraform configuration found in one directory."""

    def __init__(self, root_dir: str) -> None:
        self.root_dir = root_dir
        self.module_calls: dict[str, str] = {}
        for name in sorted(os.listdir(root_dir)):
            if _is_ignored_file(name):
                continue
            path = os.path.join(root_dir, name)
            if not os.path.isfile(path):
                continue
            if name.endswith(".tf"):
                reader = _hcl_module_calls
            elif name.endswith(".tf.json"):
                reader = _json_module_calls
            else:
                continue
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
            for call_name, source in reader(text, path):
                if call_name in self.module_calls:
                    raise HclSyntaxError(f"{path}: duplicate module call {call_name!r}")
                self.module_calls[call_name] = source

    def get_modules_directories(self) -> list[str]:
        """The root directory followed by every local module directory it reaches."""
        return self._directories({os.path.normpath(self.root_dir)})

    def _directories(self, seen: set[str]) -> list[str]:
        directories = [self.root_dir]
        for source in self.module_calls.values():
            if not source or is_remote_module(source) or is_terraform_registry_module(source):
                continue
            child_dir = os.path.normpath(os.path.join(self.root_dir, source))
            if child_dir in seen:
                continue
            seen.add(child_dir)
            try:
                child = TerraformModule(child_dir)
            except (OSError, HclSyntaxError) as exc:
                logger.warning("failed to load module in directory %s: %s", child_dir, exc)
                continue
            for path in child._directories(seen):
                if os.path.exists(path) and path not in directories:
                    directories.append(path)
        return directories