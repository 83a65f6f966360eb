"""Bloc Citation — texte (description) + auteur (source)."""
from typing import Literal

from .base import BaseBlock, VariantData


class QuoteData(VariantData):
    pass


class QuoteBlock(BaseBlock):
    kind: Literal["quote"] = "quote"
    variant_data: QuoteData = QuoteData()
