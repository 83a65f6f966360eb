"""Éditeur — mutations pures d'un Post (chaque appel retourne un nouveau Post)."""
from .mutator import (
    update_block, update_variant, remove_block, ensure_deletable,
    move_up, move_down, add_block, sort_blocks, display_number, next_order_number,
    settle_block, settle_post,
    replace_item, remove_item, append_item, with_changes,
)
from .reorder import DragReorder, move_before, drag
from .poll import add_option, remove_option, update_option, reorder_options, seed_poll, seed_versus
from .quiz import (
    update_quiz, add_result, remove_result, update_result, resolve_result,
    add_question, remove_question, update_question, reorder_questions, question_ordinals,
    add_answer, remove_answer, update_answer, reorder_answers,
)
from .review import (
    aggregate_score, apply_score, update_review,
    add_breakdown, update_breakdown, remove_breakdown,
    add_list_item, update_list_item, remove_list_item, seed_review,
)
from .assets import AssetTarget, apply_asset, set_path

__all__ = [
    # Mutator
    "update_block", "update_variant", "remove_block", "ensure_deletable",
    "move_up", "move_down", "add_block", "sort_blocks", "display_number", "next_order_number",
    "settle_block", "settle_post",
    "replace_item", "remove_item", "append_item", "with_changes",
    # Drag
    "DragReorder", "move_before", "drag",
    # Poll / versus
    "add_option", "remove_option", "update_option", "reorder_options", "seed_poll", "seed_versus",
    # Quiz
    "update_quiz", "add_result", "remove_result", "update_result", "resolve_result",
    "add_question", "remove_question", "update_question", "reorder_questions", "question_ordinals",
    "add_answer", "remove_answer", "update_answer", "reorder_answers",
    # Review
    "aggregate_score", "apply_score", "update_review",
    "add_breakdown", "update_breakdown", "remove_breakdown",
    "add_list_item", "update_list_item", "remove_list_item", "seed_review",
    # Assets
    "AssetTarget", "apply_asset", "set_path",
]
