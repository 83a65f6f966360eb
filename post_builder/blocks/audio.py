"""Bloc Audio — fichier audio direct ou URL YouTube / YouTube Music."""
from typing import Literal

from .base import BaseBlock, VariantData


class AudioData(VariantData):
    media_url: str = ""


class AudioBlock(BaseBlock):
    kind: Literal["audio"] = "audio"
    variant_data: AudioData = AudioData()
