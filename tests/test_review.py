"""Tests review — note dérivée du breakdown, pros/cons, seeding."""
import pytest
from pydantic import ValidationError

from post_builder.actions import EditAction, apply_action
from post_builder.blocks import BreakdownRow
from post_builder.core.schemas import Post
from post_builder.editor import (
    add_breakdown, add_list_item, aggregate_score, remove_breakdown,
    remove_list_item, set_path, update_breakdown, update_list_item, update_review,
    update_variant,
)
from post_builder.manifest import new_block


def _rows(*scores):
    return [BreakdownRow(score=s) for s in scores]


def _review_post(lang="tr"):
    block = new_block("review", lang)
    return Post(lang=lang, blocks=[block]), block.id


# ── aggregate_score ───────────────────────────────────────────────────────────

class TestAggregate:
    def test_mean(self):
        assert aggregate_score(_rows(90, 95, 70), previous=0) == 85

    def test_rounds_half_up(self):
        assert aggregate_score(_rows(1, 2), previous=0) == 2

    def test_rounds_down(self):
        assert aggregate_score(_rows(80, 80, 81), previous=0) == 80

    def test_empty_keeps_previous(self):
        assert aggregate_score([], previous=42) == 42


# ── Seeding ───────────────────────────────────────────────────────────────────

def test_new_review_is_seeded():
    post, block_id = _review_post()
    data = post.find(block_id).variant_data
    assert data.score == 85
    assert [r.label for r in data.breakdown] == ["Tasarım", "Performans", "Fiyat"]
    assert [r.score for r in data.breakdown] == [90, 95, 70]
    assert len(data.pros) == 2
    assert len(data.cons) == 1
    assert data.verdict


def test_seed_localized():
    post, block_id = _review_post("en")
    assert post.find(block_id).variant_data.breakdown[0].label == "Design"


# ── Breakdown ─────────────────────────────────────────────────────────────────

class TestBreakdown:
    def test_add_row_rescores(self):
        post, block_id = _review_post()
        updated = add_breakdown(post, block_id)
        data = updated.find(block_id).variant_data
        assert data.breakdown[-1].score == 80
        assert data.score == 84

    def test_update_row_clamps_and_rescores(self):
        post, block_id = _review_post()
        updated = update_breakdown(post, block_id, 0, "score", 150)
        data = updated.find(block_id).variant_data
        assert data.breakdown[0].score == 100
        assert data.score == 88

    def test_update_label_keeps_score(self):
        post, block_id = _review_post()
        updated = update_breakdown(post, block_id, 0, "label", "Tasarım & renk")
        data = updated.find(block_id).variant_data
        assert data.breakdown[0].label == "Tasarım & renk"
        assert data.score == 85

    def test_remove_down_to_empty_keeps_last_score(self):
        post, block_id = _review_post()
        post = remove_breakdown(post, block_id, 0)
        assert post.find(block_id).variant_data.score == 83
        post = remove_breakdown(post, block_id, 0)
        assert post.find(block_id).variant_data.score == 70
        post = remove_breakdown(post, block_id, 0)
        data = post.find(block_id).variant_data
        assert data.breakdown == []
        assert data.score == 70

    def test_out_of_range_index_noop(self):
        post, block_id = _review_post()
        assert update_breakdown(post, block_id, 9, "score", 10) is post


# ── Pros / cons ───────────────────────────────────────────────────────────────

class TestLists:
    def test_add_pro(self):
        post, block_id = _review_post()
        updated = add_list_item(post, block_id, "pros")
        assert updated.find(block_id).variant_data.pros[-1] == ""
        assert len(updated.find(block_id).variant_data.pros) == 3

    def test_update_con(self):
        post, block_id = _review_post()
        updated = update_list_item(post, block_id, "cons", 0, "Pahalı")
        assert updated.find(block_id).variant_data.cons == ["Pahalı"]

    def test_remove_pro(self):
        post, block_id = _review_post()
        updated = remove_list_item(post, block_id, "pros", 0)
        assert updated.find(block_id).variant_data.pros == ["Yüksek performans"]

    def test_list_edit_keeps_score(self):
        post, block_id = _review_post()
        updated = update_list_item(post, block_id, "pros", 0, "Şık")
        assert updated.find(block_id).variant_data.score == 85


def test_update_review_product_fields():
    post, block_id = _review_post()
    updated = update_review(post, block_id, product_name="Kulaklık X", productImage="https://cdn/x.png")
    data = updated.find(block_id).variant_data
    assert data.product_name == "Kulaklık X"
    assert data.product_image == "https://cdn/x.png"
    assert data.score == 85


def test_update_review_on_other_kind_noop():
    block = new_block("quote")
    post = Post(blocks=[block])
    assert update_review(post, block.id, verdict="x") is post


# ── Note dérivée via les chemins génériques ───────────────────────────────────

class TestScoreOnGenericWrites:
    def test_update_variant_action_rescores(self):
        post, block_id = _review_post()
        updated = apply_action(post, EditAction(op="update_variant", args={
            "block_id": block_id, "changes": {"breakdown": [{"label": "x", "score": 10}]},
        }))
        assert updated.find(block_id).variant_data.score == 10

    def test_set_path_on_row_score_rescores(self):
        post, block_id = _review_post()
        updated = set_path(post, block_id, "breakdown.0.score", 0)
        data = updated.find(block_id).variant_data
        assert data.breakdown[0].score == 0
        assert data.score == 55

    def test_direct_score_write_follows_breakdown(self):
        post, block_id = _review_post()
        updated = update_variant(post, block_id, score=12)
        assert updated.find(block_id).variant_data.score == 85

    def test_received_post_is_rescored(self):
        post, block_id = _review_post()
        stale = Post.model_validate(post.model_dump())
        stale.blocks[0].variant_data.score = 3
        updated = apply_action(stale, EditAction(op="update_block", args={
            "block_id": block_id, "field": "title", "value": "Kulaklık",
        }))
        assert updated.find(block_id).variant_data.score == 85


def test_null_row_score_rejected():
    with pytest.raises(ValidationError):
        BreakdownRow.model_validate({"label": "a", "score": None})
