"""Bloc Fichier — pièce jointe (media_url) + titre/description/source."""
from typing import Literal

from .base import BaseBlock, VariantData


class FileData(VariantData):
    pass


class FileBlock(BaseBlock):
    kind: Literal["file"] = "file"
    variant_data: FileData = FileData()
