"""Options de sondage / duel — ajout, retrait, édition, drag, seeding initial."""
import logging
from typing import Any

from ..blocks import Option, PollBlock, VersusBlock
from ..core.i18n import t
from ..core.schemas import Post
from .mutator import append_item, remove_item, replace_item, update_variant
from .reorder import drag

log = logging.getLogger(__name__)

POLL_SEED_SIZE = 2


def _options_block(post: Post, block_id: str):
    block = post.find(block_id)
    if isinstance(block, (PollBlock, VersusBlock)):
        return block
    return None


# ── Seeding ──────────────────────────────────────────────────────────────────

def seed_poll(block: PollBlock) -> PollBlock:
    """Sondage neuf : 2 options vides."""
    if block.variant_data.options:
        return block
    options = [Option() for _ in range(POLL_SEED_SIZE)]
    return block.model_copy(update={
        "variant_data": block.variant_data.model_copy(update={"options": options}),
    })


def seed_versus(block: VersusBlock, lang: str | None = None) -> VersusBlock:
    """Duel : exactement 2 options (gauche/droite), re-seedé dès que le compte dérive."""
    if len(block.variant_data.options) == 2:
        return block
    options = [Option(text=t("versus.left", lang)), Option(text=t("versus.right", lang))]
    return block.model_copy(update={
        "variant_data": block.variant_data.model_copy(update={"options": options}),
    })


# ── Mutations ────────────────────────────────────────────────────────────────

def add_option(post: Post, block_id: str) -> Post:
    block = _options_block(post, block_id)
    if not isinstance(block, PollBlock):
        log.debug("add_option: bloc %s n'est pas un sondage, no-op", block_id)
        return post
    return update_variant(post, block_id, options=append_item(block.variant_data.options, Option()))


def remove_option(post: Post, block_id: str, option_id: str) -> Post:
    block = _options_block(post, block_id)
    if not isinstance(block, PollBlock):
        log.debug("remove_option: bloc %s n'est pas un sondage, no-op", block_id)
        return post
    return update_variant(post, block_id, options=remove_item(block.variant_data.options, option_id))


def update_option(post: Post, block_id: str, option_id: str, field: str, value: Any) -> Post:
    block = _options_block(post, block_id)
    if block is None:
        return post
    options = replace_item(block.variant_data.options, option_id, **{field: value})
    return update_variant(post, block_id, options=options)


def reorder_options(post: Post, block_id: str, source: int, *over: int) -> Post:
    """Applique un geste de drag (start=source, over…) aux options du bloc."""
    block = _options_block(post, block_id)
    if block is None:
        return post
    return update_variant(post, block_id, options=drag(block.variant_data.options, source, *over))
