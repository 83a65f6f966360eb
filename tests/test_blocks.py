"""Tests blocs — défauts, alias camelCase, union discriminée sur kind."""
import pytest
from pydantic import ValidationError

from post_builder.blocks import (
    BreakdownRow, PollBlock, QuizBlock, QuizData, ReviewBlock, VersusData, Option,
)
from post_builder.core.schemas import Post, EDITOR_PROFILES


# ── Défauts ───────────────────────────────────────────────────────────────────

def test_new_block_has_generated_id():
    a, b = PollBlock(), PollBlock()
    assert a.id and b.id
    assert a.id != b.id


def test_base_defaults():
    block = PollBlock()
    assert block.order_number is None
    assert block.is_deletable is True
    assert block.show_on_homepage is False
    assert block.variant_data.columns == 2
    assert block.variant_data.is_image_poll is True


def test_quiz_defaults():
    data = QuizData()
    assert data.quiz_type == "personality"
    assert data.question_sorting == "asc"
    assert data.show_results is True
    assert data.allow_multiple is False
    assert data.end_date is None


# ── Sérialisation camelCase ──────────────────────────────────────────────────

def test_dump_uses_camel_case():
    data = PollBlock().model_dump(by_alias=True)
    assert "variantData" in data
    assert "orderNumber" in data
    assert "isImagePoll" in data["variantData"]


def test_accepts_camel_and_snake():
    a = PollBlock.model_validate({"variantData": {"columns": 3}})
    b = PollBlock(variant_data={"columns": 3})
    assert a.variant_data.columns == b.variant_data.columns == 3


def test_poll_columns_restricted():
    with pytest.raises(ValidationError):
        PollBlock.model_validate({"variantData": {"columns": 4}})


# ── Union discriminée ────────────────────────────────────────────────────────

def test_post_dispatches_on_kind():
    post = Post.model_validate({"blocks": [{"kind": "quiz"}, {"kind": "review"}]})
    assert isinstance(post.blocks[0], QuizBlock)
    assert isinstance(post.blocks[1], ReviewBlock)


def test_post_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        Post.model_validate({"blocks": [{"kind": "carousel"}]})


def test_post_find():
    block = PollBlock()
    post = Post(blocks=[block])
    assert post.find(block.id) is block
    assert post.find("absent") is None


# ── Payloads ─────────────────────────────────────────────────────────────────

class TestBreakdownRow:
    def test_default_score(self):
        assert BreakdownRow().score == 80

    def test_score_clamped_high(self):
        assert BreakdownRow(score=150).score == 100

    def test_score_clamped_low(self):
        assert BreakdownRow(score=-5).score == 0


class TestVersusData:
    def test_left_right(self):
        data = VersusData(options=[Option(text="A"), Option(text="B")])
        assert data.left.text == "A"
        assert data.right.text == "B"

    def test_wrong_count_has_no_sides(self):
        data = VersusData(options=[Option(text="A")])
        assert data.left is None
        assert data.right is None


def test_restricted_profile_has_no_link_or_image():
    formats = EDITOR_PROFILES["restricted"].formats
    assert "link" not in formats
    assert "image" not in formats
    assert "link" in EDITOR_PROFILES["full"].formats
