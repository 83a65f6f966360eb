"""Bloc Social — saisie brute (URL ou snippet HTML), jamais la forme normalisée."""
from typing import Literal

from .base import BaseBlock, VariantData


class SocialData(VariantData):
    embed_source: str = ""


class SocialBlock(BaseBlock):
    kind: Literal["social"] = "social"
    variant_data: SocialData = SocialData()
