"""
Blocs de post — exports publics + BlockUnion discriminé sur `kind`.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, PostModel, VariantData, new_id
from .options import Option
from .audio import AudioBlock, AudioData
from .before_after import BeforeAfterBlock, BeforeAfterData
from .file import FileBlock, FileData
from .flip_card import FlipCardBlock, FlipCardData
from .poll import PollBlock, PollData
from .quiz import QuizBlock, QuizData, QuizQuestion, QuizAnswer, QuizResult
from .quote import QuoteBlock, QuoteData
from .review import ReviewBlock, ReviewData, BreakdownRow
from .social import SocialBlock, SocialData
from .versus import VersusBlock, VersusData

# Union discriminée par kind : un seul payload par bloc
BlockUnion = Annotated[
    Union[
        AudioBlock,
        BeforeAfterBlock,
        FileBlock,
        FlipCardBlock,
        PollBlock,
        QuizBlock,
        QuoteBlock,
        ReviewBlock,
        SocialBlock,
        VersusBlock,
    ],
    Field(discriminator="kind"),
]

BLOCK_CLASSES = [
    AudioBlock, BeforeAfterBlock, FileBlock, FlipCardBlock, PollBlock,
    QuizBlock, QuoteBlock, ReviewBlock, SocialBlock, VersusBlock,
]

__all__ = [
    # Base
    "BaseBlock", "PostModel", "VariantData", "new_id", "Option",
    # Blocs
    "AudioBlock", "AudioData",
    "BeforeAfterBlock", "BeforeAfterData",
    "FileBlock", "FileData",
    "FlipCardBlock", "FlipCardData",
    "PollBlock", "PollData",
    "QuizBlock", "QuizData", "QuizQuestion", "QuizAnswer", "QuizResult",
    "QuoteBlock", "QuoteData",
    "ReviewBlock", "ReviewData", "BreakdownRow",
    "SocialBlock", "SocialData",
    "VersusBlock", "VersusData",
    # Union
    "BlockUnion", "BLOCK_CLASSES",
]
