"""Bloc Avant/Après — comparaison de deux images."""
from typing import Literal

from .base import BaseBlock, VariantData


class BeforeAfterData(VariantData):
    before_image: str = ""
    after_image: str = ""
    before_label: str = ""
    after_label: str = ""


class BeforeAfterBlock(BaseBlock):
    kind: Literal["beforeAfter"] = "beforeAfter"
    variant_data: BeforeAfterData = BeforeAfterData()
