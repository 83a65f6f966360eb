"""Bloc Review — note globale dérivée de la moyenne des critères (breakdown)."""
from typing import List, Literal

from pydantic import field_validator

from .base import BaseBlock, PostModel, VariantData


class BreakdownRow(PostModel):
    label: str = ""
    score: int = 80

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, v):
        """Le slider borne la note à [0, 100] ; valeur non numérique laissée à la validation int."""
        if isinstance(v, bool) or not isinstance(v, (int, float, str)):
            return v
        try:
            return max(0, min(100, int(v)))
        except ValueError:
            return v


class ReviewData(VariantData):
    product_name: str = ""
    product_image: str = ""
    score: int = 0                  # dérivé, voir editor.review.aggregate_score
    pros: List[str] = []
    cons: List[str] = []
    breakdown: List[BreakdownRow] = []
    verdict: str = ""               # HTML


class ReviewBlock(BaseBlock):
    kind: Literal["review"] = "review"
    variant_data: ReviewData = ReviewData()
