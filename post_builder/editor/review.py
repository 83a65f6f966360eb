"""
Review — agrégation de la note globale + édition pros/cons/breakdown.

La note (score) est dérivée : moyenne arrondie des breakdown[].score,
recalculée après CHAQUE mutation du breakdown. Breakdown vide → note inchangée.
"""
import logging
from typing import Any, Literal, Sequence

from ..blocks import BreakdownRow, ReviewBlock, ReviewData
from ..core.i18n import t
from ..core.schemas import Post
from .mutator import update_block, with_changes

log = logging.getLogger(__name__)

ListName = Literal["pros", "cons"]

DEFAULT_ROW_SCORE = 80


# ── Agrégation ───────────────────────────────────────────────────────────────

def aggregate_score(breakdown: Sequence[BreakdownRow], previous: int) -> int:
    """round(mean(breakdown.score)), arrondi au demi supérieur ; `previous` si vide."""
    if not breakdown:
        return previous
    total, count = sum(row.score for row in breakdown), len(breakdown)
    return (2 * total + count) // (2 * count)


def apply_score(data: ReviewData) -> ReviewData:
    """Réécrit score uniquement s'il diffère (évite un cycle d'update inutile)."""
    score = aggregate_score(data.breakdown, data.score)
    if score == data.score:
        return data
    return data.model_copy(update={"score": score})


def _review(post: Post, block_id: str) -> ReviewData | None:
    block = post.find(block_id)
    return block.variant_data if isinstance(block, ReviewBlock) else None


def update_review(post: Post, block_id: str, **changes: Any) -> Post:
    """Read-merge-write du payload review (note recalculée par update_block)."""
    data = _review(post, block_id)
    if data is None:
        log.debug("update_review: bloc %s absent ou non review, no-op", block_id)
        return post
    return update_block(post, block_id, "variant_data", with_changes(data, **changes))


# ── Breakdown ────────────────────────────────────────────────────────────────

def add_breakdown(post: Post, block_id: str, label: str = "", score: int = DEFAULT_ROW_SCORE) -> Post:
    data = _review(post, block_id)
    if data is None:
        return post
    return update_review(post, block_id, breakdown=[*data.breakdown, BreakdownRow(label=label, score=score)])


def update_breakdown(post: Post, block_id: str, index: int, field: Literal["label", "score"], value: Any) -> Post:
    data = _review(post, block_id)
    if data is None or not 0 <= index < len(data.breakdown):
        return post
    rows = list(data.breakdown)
    rows[index] = with_changes(rows[index], **{field: value})
    return update_review(post, block_id, breakdown=rows)


def remove_breakdown(post: Post, block_id: str, index: int) -> Post:
    data = _review(post, block_id)
    if data is None:
        return post
    return update_review(post, block_id, breakdown=[r for i, r in enumerate(data.breakdown) if i != index])


# ── Pros / cons ──────────────────────────────────────────────────────────────

def add_list_item(post: Post, block_id: str, name: ListName) -> Post:
    data = _review(post, block_id)
    if data is None:
        return post
    return update_review(post, block_id, **{name: [*getattr(data, name), ""]})


def update_list_item(post: Post, block_id: str, name: ListName, index: int, value: str) -> Post:
    data = _review(post, block_id)
    if data is None or not 0 <= index < len(getattr(data, name)):
        return post
    items = list(getattr(data, name))
    items[index] = value
    return update_review(post, block_id, **{name: items})


def remove_list_item(post: Post, block_id: str, name: ListName, index: int) -> Post:
    data = _review(post, block_id)
    if data is None:
        return post
    return update_review(post, block_id, **{name: [v for i, v in enumerate(getattr(data, name)) if i != index]})


# ── Seeding ──────────────────────────────────────────────────────────────────

def seed_review(block: ReviewBlock, lang: str | None = None) -> ReviewBlock:
    """Review neuve : exemple pré-rempli, note initiale 85 (= moyenne du breakdown)."""
    data = ReviewData(
        score=85,
        pros=[t("review.pro_design", lang), t("review.pro_performance", lang)],
        cons=[t("review.con_price", lang)],
        breakdown=[
            BreakdownRow(label=t("review.criteria_design", lang), score=90),
            BreakdownRow(label=t("review.criteria_performance", lang), score=95),
            BreakdownRow(label=t("review.criteria_price", lang), score=70),
        ],
        verdict=t("review.verdict", lang),
    )
    return block.model_copy(update={"variant_data": data})
