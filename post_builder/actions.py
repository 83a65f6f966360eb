"""
Actions — dispatch nommé des opérations d'édition (endpoint POST /apply).

{"op": "update_option", "args": {"block_id": "…", "option_id": "…", "field": "text", "value": "A"}}
→ editor.update_option(post, **args)
"""
import logging
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from . import editor
from .core.schemas import Post
from .errors import UnknownOperationError
from .manifest.parser import new_block

log = logging.getLogger(__name__)


class EditAction(BaseModel):
    op: str
    args: Dict[str, Any] = Field(default_factory=dict)


def _add_block(post: Post, kind: str, **fields: Any) -> Post:
    return editor.add_block(post, new_block(kind, post.lang, **fields))


def _remove_block(post: Post, block_id: str) -> Post:
    editor.ensure_deletable(post, block_id)
    return editor.remove_block(post, block_id)


def _reorder(fn):
    """Adapte fn(post, block_id, source, *over) à des args JSON {source, over: [...]}."""
    def op(post: Post, block_id: str, source: int, over: List[int] | None = None) -> Post:
        return fn(post, block_id, source, *(over or []))
    return op


def _apply_asset(post: Post, url: str, **target: Any) -> Post:
    return editor.apply_asset(post, editor.AssetTarget(**target), url)


def _update_variant(post: Post, block_id: str, changes: Dict[str, Any]) -> Post:
    return editor.update_variant(post, block_id, **changes)


def _update_quiz(post: Post, block_id: str, changes: Dict[str, Any]) -> Post:
    return editor.update_quiz(post, block_id, **changes)


def _reorder_answers(post: Post, block_id: str, question_id: str, source: int, over: List[int] | None = None) -> Post:
    return editor.reorder_answers(post, block_id, question_id, source, *(over or []))


# ── Registry des opérations ──────────────────────────────────────────────────

_OPERATIONS: dict = {
    # Blocs
    "add_block":         _add_block,
    "update_block":      editor.update_block,
    "update_variant":    _update_variant,
    "remove_block":      _remove_block,
    "move_up":           editor.move_up,
    "move_down":         editor.move_down,
    "sort_blocks":       editor.sort_blocks,
    "set_path":          editor.set_path,
    "apply_asset":       _apply_asset,
    # Sondage / duel
    "add_option":        editor.add_option,
    "remove_option":     editor.remove_option,
    "update_option":     editor.update_option,
    "reorder_options":   _reorder(editor.reorder_options),
    # Quiz
    "update_quiz":       _update_quiz,
    "add_result":        editor.add_result,
    "remove_result":     editor.remove_result,
    "update_result":     editor.update_result,
    "add_question":      editor.add_question,
    "remove_question":   editor.remove_question,
    "update_question":   editor.update_question,
    "reorder_questions": _reorder(editor.reorder_questions),
    "add_answer":        editor.add_answer,
    "remove_answer":     editor.remove_answer,
    "update_answer":     editor.update_answer,
    "reorder_answers":   _reorder_answers,
    # Review
    "add_breakdown":     editor.add_breakdown,
    "update_breakdown":  editor.update_breakdown,
    "remove_breakdown":  editor.remove_breakdown,
    "add_list_item":     editor.add_list_item,
    "update_list_item":  editor.update_list_item,
    "remove_list_item":  editor.remove_list_item,
}


def operations() -> List[str]:
    return sorted(_OPERATIONS)


def apply_action(post: Post, action: EditAction) -> Post:
    """Applique une action nommée ; UnknownOperationError si l'op n'existe pas."""
    fn = _OPERATIONS.get(action.op)
    if fn is None:
        raise UnknownOperationError(action.op, operations())
    log.debug("apply %s %s", action.op, action.args)
    return fn(editor.settle_post(post), **action.args)
