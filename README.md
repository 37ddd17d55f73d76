# hcltagger

A library that reads Terraform configuration files. It works out which
resources and modules can carry tags (or labels) and writes merged tags back
into the files. Comments and layout are kept.

## Installation

```
pip install hcltagger
```

To run the tests:

```
pip install "hcltagger[test]"
pytest
```

## What it does

- Handles `resource`, `module` and `variable` blocks. Other block types are
  ignored. Resources of the `null`, `random`, `tls`, `local` and `sops`
  providers are skipped.
- Chooses the tag attribute by provider:
  - `tags` for `aws`, `azurerm` and `alicloud`
  - `labels` for `google`
  - `freeform_tags` for `oci`

  A resource whose provider has no entry here is left out of the parsed
  blocks, and a warning is logged.
- Decides whether a resource type can be tagged. It checks a built-in list of
  known taggable types (`hcltagger.taggable.is_known_taggable`) and a list of
  types that do not support tags. Types on neither list are treated as not
  taggable.
- Reads the tags already present. This includes map literals inside
  `merge(...)` calls and keys with interpolations.
- Reads skip markers. A comment `#yor:skip` on the line directly above a block
  marks that block. `#yor:skipall` marks that block and every supported block
  after it in the file. Case does not matter. The resource ids of marked
  blocks collect in `TerraformParser.skipped_by_comment`.
- Writes the merged tags. How depends on the current tags attribute:
  - No attribute: a new map attribute is added.
  - A map literal: it is extended.
  - `null`: it is replaced.
  - An expression starting with `var`, `local`, `module`, `data` or `each`:
    it is wrapped in `merge(...)` together with a new map.
  - A `merge(...)` call: a new map is added as a further argument.

  The result is parsed again before it is written. If it no longer parses, a
  `ValueError` is raised.
- Module blocks with a remote or registry source are checked for one of
  `extra_tags`, `tags`, `common_tags` or `labels`, plus the provider's own tag
  attribute. Local modules are not tagged unless the parser is created with
  `{"tag-local-modules": "true"}`.

## Usage

```python
from hcltagger.block import Tag
from hcltagger.parser import TerraformParser

parser = TerraformParser("infra")

for path in parser.get_source_files("infra"):
    blocks = parser.parse_file(path)
    for block in blocks:
        if block.is_taggable:
            block.add_new_tags([Tag("team", "platform"), Tag("env", "prod")])
    parser.write_file(path, blocks, path)
```

`TerraformParser(root_dir, args=None, module_install_dir=None)` accepts these
options in `args`, given as strings:

- `"tag-modules"` (default `"true"`): `get_source_files` also walks the local
  module directories that the root configuration refers to.
- `"tag-local-modules"` (default `"false"`): local modules count as taggable.

`module_install_dir` is where installed copies of remote modules are looked
up. It defaults to `.terraform/modules` under the current working directory.
For a remote module that has no tag attribute, the parser reads the `variable`
blocks of the installed copy to find out whether it accepts one.

Each `TerraformBlock` provides:

- `resource_id`
- `existing_tags` and `new_tags`
- `is_taggable` and `tags_attribute_name`
- `get_lines()` and `tags_lines()`
- `is_gcp_block()`
- `merge_tags()`, which returns the tags the block will have after writing.
  New values override existing ones, except that an existing `yor_trace` value
  is kept.

`parse_file` raises `hcltagger.hcl.HclSyntaxError` on malformed files and
`OSError` on unreadable ones.

## Lower-level pieces

- `hcltagger.hcl` is a small HCL tokenizer and parser. It provides
  `tokenize`, `parse_config`, `HclFile.render`, `Block.get_attribute`,
  `Block.set_attribute_raw`, `tokens_bytes` and `tokens_for_map`. It keeps
  comments, newlines and the spacing before each token, so an unedited file
  renders back as it was read. The exceptions are tabs and carriage returns,
  which render as spaces.
- `hcltagger.tagattr` holds helpers for tag-map tokens:
  - `get_hcl_maps_contents`
  - `extract_tag_pairs`
  - `parse_tag_attribute`
  - `extract_tag_keys_from_raw_tokens`
  - `build_tags_tokens`
  - `insert_token`
  - `insert_tokens`
- `hcltagger.module` holds helpers for module sources:
  - `is_remote_module`
  - `is_terraform_registry_module`
  - `extract_provider_from_module_src`
  - `extract_subdir_from_remote_module_src`

  It also provides `TerraformModule`, which reads module calls from `.tf` and
  `.tf.json` files. `TerraformModule.get_modules_directories()` lists the local
  module directories.
- `hcltagger.taggable` provides `is_known_taggable(resource_type)`.

## What it does not do

- It has no command-line tool. It is used as a library only.
- It does not compute tag values such as git commit, author or trace ids. The
  caller supplies the tags to add.
- It does not download providers or modules, and it does not query provider
  schemas. Taggability comes only from the built-in lists and from module
  copies already in `module_install_dir`.