"""Manifest — schema + parser."""
from .schema import ManifestPost, ManifestBlock
from .parser import parse_post, new_block, seed_block, block_class

__all__ = [
    "ManifestPost",
    "ManifestBlock",
    "parse_post",
    "new_block",
    "seed_block",
    "block_class",
]
