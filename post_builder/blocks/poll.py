"""Bloc Sondage — options ordonnées, texte ou image, grille 2/3 colonnes."""
from typing import List, Literal

from .base import BaseBlock, VariantData
from .options import Option


class PollData(VariantData):
    is_image_poll: bool = True
    columns: Literal[2, 3] = 2
    options: List[Option] = []


class PollBlock(BaseBlock):
    kind: Literal["poll"] = "poll"
    variant_data: PollData = PollData()
