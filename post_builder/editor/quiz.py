"""
Quiz — mutations du graphe questions → réponses + résultats.

Même discipline que le mutator, à un ou deux niveaux de profondeur :
pour modifier une réponse, on reconstruit la liste des réponses de sa question,
puis la liste des questions, puis on réécrit `questions` en un seul champ.

Supprimer un résultat ne nettoie PAS les resultId des réponses : un id orphelin
est lu comme "aucun résultat" (resolve_result → None).
"""
import logging
from typing import Any, List, Optional

from ..blocks import QuizAnswer, QuizBlock, QuizData, QuizQuestion, QuizResult
from ..core.schemas import Post
from .mutator import append_item, remove_item, replace_item, update_variant, with_changes
from .reorder import drag

log = logging.getLogger(__name__)

NEW_QUESTION_ANSWERS = 2


def _quiz(post: Post, block_id: str) -> QuizData | None:
    block = post.find(block_id)
    if not isinstance(block, QuizBlock):
        log.debug("quiz: bloc %s absent ou non quiz, no-op", block_id)
        return None
    return block.variant_data


def update_quiz(post: Post, block_id: str, **changes: Any) -> Post:
    """Réglages de premier niveau (quizType, questionSorting, allowMultiple, showResults, endDate)."""
    if _quiz(post, block_id) is None:
        return post
    return update_variant(post, block_id, **changes)


# ── Résultats ────────────────────────────────────────────────────────────────

def add_result(post: Post, block_id: str) -> Post:
    data = _quiz(post, block_id)
    if data is None:
        return post
    return update_variant(post, block_id, results=append_item(data.results, QuizResult()))


def remove_result(post: Post, block_id: str, result_id: str) -> Post:
    data = _quiz(post, block_id)
    if data is None:
        return post
    return update_variant(post, block_id, results=remove_item(data.results, result_id))


def update_result(post: Post, block_id: str, result_id: str, field: str, value: Any) -> Post:
    data = _quiz(post, block_id)
    if data is None:
        return post
    return update_variant(post, block_id, results=replace_item(data.results, result_id, **{field: value}))


def resolve_result(data: QuizData, result_id: str) -> Optional[QuizResult]:
    """Résultat référencé par une réponse ; id vide ou orphelin → None."""
    if not result_id:
        return None
    return next((r for r in data.results if r.id == result_id), None)


# ── Questions ────────────────────────────────────────────────────────────────

def new_question() -> QuizQuestion:
    """Question neuve : 2 réponses vides, layout liste, visible en couverture."""
    return QuizQuestion(answers=[QuizAnswer() for _ in range(NEW_QUESTION_ANSWERS)])


def add_question(post: Post, block_id: str) -> Post:
    data = _quiz(post, block_id)
    if data is None:
        return post
    return update_variant(post, block_id, questions=append_item(data.questions, new_question()))


def remove_question(post: Post, block_id: str, question_id: str) -> Post:
    data = _quiz(post, block_id)
    if data is None:
        return post
    return update_variant(post, block_id, questions=remove_item(data.questions, question_id))


def update_question(post: Post, block_id: str, question_id: str, field: str, value: Any) -> Post:
    data = _quiz(post, block_id)
    if data is None:
        return post
    return update_variant(post, block_id, questions=replace_item(data.questions, question_id, **{field: value}))


def reorder_questions(post: Post, block_id: str, source: int, *over: int) -> Post:
    data = _quiz(post, block_id)
    if data is None:
        return post
    return update_variant(post, block_id, questions=drag(data.questions, source, *over))


def question_ordinals(sorting: str, count: int) -> List[Optional[int]]:
    """
    Numéros affichés par position : asc → 1..N, desc → N..1, hidden → aucun.
    L'ordre du contenu n'est jamais modifié.
    """
    if sorting == "hidden":
        return [None] * count
    if sorting == "desc":
        return [count - i for i in range(count)]
    return [i + 1 for i in range(count)]


# ── Réponses ─────────────────────────────────────────────────────────────────

def _rebuild_answers(post: Post, block_id: str, question_id: str, rebuild) -> Post:
    """Applique `rebuild(answers) → answers` à une question, puis réécrit `questions`."""
    data = _quiz(post, block_id)
    if data is None:
        return post
    questions = [
        with_changes(q, answers=rebuild(q.answers)) if q.id == question_id else q
        for q in data.questions
    ]
    return update_variant(post, block_id, questions=questions)


def add_answer(post: Post, block_id: str, question_id: str) -> Post:
    return _rebuild_answers(post, block_id, question_id, lambda answers: append_item(answers, QuizAnswer()))


def remove_answer(post: Post, block_id: str, question_id: str, answer_id: str) -> Post:
    return _rebuild_answers(post, block_id, question_id, lambda answers: remove_item(answers, answer_id))


def update_answer(post: Post, block_id: str, question_id: str, answer_id: str, field: str, value: Any) -> Post:
    return _rebuild_answers(
        post, block_id, question_id,
        lambda answers: replace_item(answers, answer_id, **{field: value}),
    )


def reorder_answers(post: Post, block_id: str, question_id: str, source: int, *over: int) -> Post:
    return _rebuild_answers(post, block_id, question_id, lambda answers: drag(answers, source, *over))
