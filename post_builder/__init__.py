"""
Post Builder — éditeur de posts à blocs hétérogènes (sondage, quiz, review…).

Usage (manifest):
    >>> from post_builder import parse_post, render_post
    >>> post = parse_post({"title": "Top 5", "blocks": [{"kind": "poll"}]})
    >>> html = render_post(post)

Usage (édition):
    >>> from post_builder import editor
    >>> post = editor.update_option(post, block_id, option_id, "text", "Oui")
"""

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, Option,
    AudioBlock, BeforeAfterBlock, FileBlock, FlipCardBlock, PollBlock,
    QuizBlock, QuoteBlock, ReviewBlock, SocialBlock, VersusBlock,
    BlockUnion,
)
from .core.schemas import Post, EDITOR_PROFILES
from .core.i18n import t

# ── Manifest / rendu ─────────────────────────────────────────────────────────
from .manifest import ManifestPost, parse_post, new_block
from .renderer.html import render_post, render_block

# ── Édition ──────────────────────────────────────────────────────────────────
from . import editor
from .actions import EditAction, apply_action
from .embed import normalize_embed, parse_video_url
from .errors import (
    PostBuilderError, UnknownBlockKindError, UnknownOperationError,
    BlockFieldError, BlockNotDeletableError,
)

__version__ = "1.0.0"

__all__ = [
    # Blocs
    "BaseBlock", "Option",
    "AudioBlock", "BeforeAfterBlock", "FileBlock", "FlipCardBlock", "PollBlock",
    "QuizBlock", "QuoteBlock", "ReviewBlock", "SocialBlock", "VersusBlock",
    "BlockUnion", "Post", "EDITOR_PROFILES", "t",
    # Manifest / rendu
    "ManifestPost", "parse_post", "new_block", "render_post", "render_block",
    # Édition
    "editor", "EditAction", "apply_action", "normalize_embed", "parse_video_url",
    # Erreurs
    "PostBuilderError", "UnknownBlockKindError", "UnknownOperationError",
    "BlockFieldError", "BlockNotDeletableError",
]
