"""Tests quiz — questions, réponses, résultats, numérotation."""
from post_builder.core.schemas import Post
from post_builder.editor import (
    add_answer, add_question, add_result, question_ordinals, remove_answer,
    remove_question, remove_result, reorder_answers, reorder_questions,
    resolve_result, update_answer, update_question, update_quiz, update_result,
)
from post_builder.manifest import new_block


def _quiz_post(questions=1):
    block = new_block("quiz")
    post = Post(blocks=[block])
    for _ in range(questions):
        post = add_question(post, block.id)
    return post, block.id


def _data(post, block_id):
    return post.find(block_id).variant_data


# ── Questions ─────────────────────────────────────────────────────────────────

class TestQuestions:
    def test_new_question_has_two_answers(self):
        post, block_id = _quiz_post()
        question = _data(post, block_id).questions[0]
        assert len(question.answers) == 2
        assert question.layout == "list"
        assert question.show_on_cover is True

    def test_update_question(self):
        post, block_id = _quiz_post(2)
        qid = _data(post, block_id).questions[1].id
        updated = update_question(post, block_id, qid, "title", "Hangi renk?")
        questions = _data(updated, block_id).questions
        assert questions[1].title == "Hangi renk?"
        assert questions[0].title == ""

    def test_remove_question(self):
        post, block_id = _quiz_post(2)
        first, second = _data(post, block_id).questions
        updated = remove_question(post, block_id, first.id)
        assert [q.id for q in _data(updated, block_id).questions] == [second.id]

    def test_reorder_questions(self):
        post, block_id = _quiz_post(3)
        ids = [q.id for q in _data(post, block_id).questions]
        updated = reorder_questions(post, block_id, 0, 1, 2)
        assert [q.id for q in _data(updated, block_id).questions] == [ids[1], ids[2], ids[0]]


class TestOrdinals:
    def test_asc(self):
        assert question_ordinals("asc", 3) == [1, 2, 3]

    def test_desc(self):
        assert question_ordinals("desc", 3) == [3, 2, 1]

    def test_hidden(self):
        assert question_ordinals("hidden", 2) == [None, None]

    def test_sorting_does_not_reorder_content(self):
        post, block_id = _quiz_post(2)
        ids = [q.id for q in _data(post, block_id).questions]
        updated = update_quiz(post, block_id, question_sorting="desc")
        assert [q.id for q in _data(updated, block_id).questions] == ids


# ── Réponses ──────────────────────────────────────────────────────────────────

class TestAnswers:
    def test_add_answer(self):
        post, block_id = _quiz_post()
        qid = _data(post, block_id).questions[0].id
        updated = add_answer(post, block_id, qid)
        assert len(_data(updated, block_id).questions[0].answers) == 3

    def test_update_answer_only_target(self):
        post, block_id = _quiz_post(2)
        question = _data(post, block_id).questions[0]
        aid = question.answers[1].id
        updated = update_answer(post, block_id, question.id, aid, "text", "Mavi")
        questions = _data(updated, block_id).questions
        assert questions[0].answers[1].text == "Mavi"
        assert questions[0].answers[0].text == ""
        assert all(a.text == "" for a in questions[1].answers)

    def test_remove_answer(self):
        post, block_id = _quiz_post()
        question = _data(post, block_id).questions[0]
        updated = remove_answer(post, block_id, question.id, question.answers[0].id)
        answers = _data(updated, block_id).questions[0].answers
        assert [a.id for a in answers] == [question.answers[1].id]

    def test_reorder_answers(self):
        post, block_id = _quiz_post()
        question = _data(post, block_id).questions[0]
        ids = [a.id for a in question.answers]
        updated = reorder_answers(post, block_id, question.id, 1, 0)
        assert [a.id for a in _data(updated, block_id).questions[0].answers] == ids[::-1]

    def test_unknown_question_is_noop_on_content(self):
        post, block_id = _quiz_post()
        updated = add_answer(post, block_id, "absent")
        assert _data(updated, block_id) == _data(post, block_id)


# ── Résultats ─────────────────────────────────────────────────────────────────

class TestResults:
    def test_add_and_update_result(self):
        post, block_id = _quiz_post()
        post = add_result(post, block_id)
        rid = _data(post, block_id).results[0].id
        post = update_result(post, block_id, rid, "title", "Maceracı")
        assert _data(post, block_id).results[0].title == "Maceracı"

    def test_resolve_linked_result(self):
        post, block_id = _quiz_post()
        post = add_result(post, block_id)
        rid = _data(post, block_id).results[0].id
        question = _data(post, block_id).questions[0]
        post = update_answer(post, block_id, question.id, question.answers[0].id, "resultId", rid)
        answer = _data(post, block_id).questions[0].answers[0]
        assert resolve_result(_data(post, block_id), answer.result_id).id == rid

    def test_removed_result_leaves_dangling_reference(self):
        post, block_id = _quiz_post()
        post = add_result(post, block_id)
        rid = _data(post, block_id).results[0].id
        question = _data(post, block_id).questions[0]
        post = update_answer(post, block_id, question.id, question.answers[0].id, "result_id", rid)
        post = remove_result(post, block_id, rid)
        data = _data(post, block_id)
        assert data.questions[0].answers[0].result_id == rid
        assert resolve_result(data, rid) is None

    def test_empty_result_id(self):
        post, block_id = _quiz_post()
        assert resolve_result(_data(post, block_id), "") is None


def test_quiz_ops_on_other_kind_noop():
    block = new_block("poll")
    post = Post(blocks=[block])
    assert add_question(post, block.id) is post
