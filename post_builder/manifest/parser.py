"""
Manifest parser — ManifestPost → Post.
Instancie chaque bloc depuis le registry puis applique le seeding du kind
(options de sondage/duel, review d'exemple, libellés avant/après).
"""
import logging
from typing import Any

from ..blocks import (
    AudioBlock, BeforeAfterBlock, FileBlock, FlipCardBlock, PollBlock,
    QuizBlock, QuoteBlock, ReviewBlock, SocialBlock, VersusBlock, BaseBlock,
)
from ..core.i18n import t
from ..core.schemas import Post
from ..editor.poll import seed_poll, seed_versus
from ..editor.review import seed_review
from ..errors import UnknownBlockKindError
from .schema import ManifestBlock, ManifestPost

log = logging.getLogger(__name__)

# ── Registry des blocs ───────────────────────────────────────────────────────

_BLOCK_REGISTRY: dict = {
    "audio":       AudioBlock,
    "beforeAfter": BeforeAfterBlock,
    "file":        FileBlock,
    "flipCard":    FlipCardBlock,
    "poll":        PollBlock,
    "quiz":        QuizBlock,
    "quote":       QuoteBlock,
    "review":      ReviewBlock,
    "social":      SocialBlock,
    "versus":      VersusBlock,
}


def block_class(kind: str) -> type[BaseBlock]:
    block_cls = _BLOCK_REGISTRY.get(kind)
    if block_cls is None:
        raise UnknownBlockKindError(kind, list(_BLOCK_REGISTRY))
    return block_cls


def seed_before_after(block: BeforeAfterBlock, lang: str | None = None) -> BeforeAfterBlock:
    """Libellés par défaut avant/après."""
    data = block.variant_data.model_copy(update={
        "before_label": block.variant_data.before_label or t("before_after.before", lang),
        "after_label": block.variant_data.after_label or t("before_after.after", lang),
    })
    return block.model_copy(update={"variant_data": data})


def seed_block(block: BaseBlock, lang: str | None = None, fresh: bool = False) -> BaseBlock:
    """
    Payload par défaut du kind.
    Sondage / duel : toujours vérifiés (contenu). Review / avant-après : seulement
    si le payload était absent (`fresh`).
    """
    if isinstance(block, PollBlock):
        return seed_poll(block)
    if isinstance(block, VersusBlock):
        return seed_versus(block, lang)
    if fresh and isinstance(block, ReviewBlock):
        return seed_review(block, lang)
    if fresh and isinstance(block, BeforeAfterBlock):
        return seed_before_after(block, lang)
    return block


def new_block(kind: str, lang: str | None = None, **fields: Any) -> BaseBlock:
    """Bloc neuf : id généré + payload par défaut du kind."""
    block = block_class(kind)(**fields)
    return seed_block(block, lang, fresh="variant_data" not in fields and "variantData" not in fields)


def _parse_block(cfg: ManifestBlock, lang: str) -> BaseBlock:
    raw = cfg.model_dump()
    block = block_class(cfg.kind).model_validate(raw)
    return seed_block(block, lang, fresh="variantData" not in raw and "variant_data" not in raw)


def parse_post(manifest: ManifestPost | dict) -> Post:
    """
    Convertit un manifest (ou son dict JSON) en Post prêt à éditer.

    1. Valide la structure du manifest
    2. Instancie chaque bloc depuis le registry (UnknownBlockKindError sinon)
    3. Applique le seeding du kind
    """
    if isinstance(manifest, dict):
        manifest = ManifestPost.model_validate(manifest)

    blocks = [_parse_block(cfg, manifest.lang) for cfg in manifest.blocks]
    log.debug("post %s : %d blocs parsés", manifest.id, len(blocks))

    fields = {
        "title": manifest.title,
        "lang": manifest.lang,
        "active_sort": manifest.active_sort,
        "blocks": blocks,
    }
    if manifest.id:
        fields["id"] = manifest.id
    return Post(**fields)
