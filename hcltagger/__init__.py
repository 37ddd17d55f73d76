"""Parse Terraform configuration, find taggable blocks, and write merged tags back."""

__version__ = "0.1.0"
__all__ = ["block", "hcl", "module", "parser", "tagattr", "taggable"]