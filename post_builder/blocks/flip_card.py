"""Bloc Flip card — deux faces indépendantes (recto / verso)."""
from typing import Literal

from .base import BaseBlock, VariantData


class FlipCardData(VariantData):
    front_image: str = ""
    front_title: str = ""
    front_link: str = ""
    front_description: str = ""   # HTML, profil éditeur "restricted"
    back_image: str = ""
    back_title: str = ""
    back_link: str = ""
    back_description: str = ""


class FlipCardBlock(BaseBlock):
    kind: Literal["flipCard"] = "flipCard"
    variant_data: FlipCardData = FlipCardData()
