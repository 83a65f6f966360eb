"""Bloc Versus — duel gauche/droite, exactement 2 options."""
from typing import List, Literal

from .base import BaseBlock, VariantData
from .options import Option


class VersusData(VariantData):
    options: List[Option] = []

    @property
    def left(self) -> Option | None:
        return self.options[0] if len(self.options) == 2 else None

    @property
    def right(self) -> Option | None:
        return self.options[1] if len(self.options) == 2 else None


class VersusBlock(BaseBlock):
    kind: Literal["versus"] = "versus"
    variant_data: VersusData = VersusData()
