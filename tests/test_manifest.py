"""Tests manifest — parse, registry, seeding des blocs neufs."""
import pytest
from pydantic import ValidationError

from post_builder.blocks import PollBlock, ReviewBlock, SocialBlock
from post_builder.errors import UnknownBlockKindError
from post_builder.manifest import ManifestPost, block_class, new_block, parse_post


# ── parse_post ────────────────────────────────────────────────────────────────

def test_parse_post_from_dict():
    post = parse_post({
        "id": "post-1",
        "title": "En iyi kulaklıklar",
        "lang": "tr",
        "activeSort": "desc",
        "blocks": [
            {"kind": "review", "title": "Verdict"},
            {"kind": "poll", "variantData": {"columns": 3}},
            {"kind": "social", "variantData": {"embedSource": "https://x.com/u/status/1"}},
        ],
    })
    assert post.id == "post-1"
    assert post.active_sort == "desc"
    assert [type(b) for b in post.blocks] == [ReviewBlock, PollBlock, SocialBlock]
    assert post.blocks[1].variant_data.columns == 3
    assert post.blocks[2].variant_data.embed_source == "https://x.com/u/status/1"


def test_parse_post_from_manifest():
    manifest = ManifestPost(title="T", blocks=[{"kind": "quote", "description": "<p>Söz</p>"}])
    post = parse_post(manifest)
    assert post.blocks[0].description == "<p>Söz</p>"


def test_generated_post_id():
    assert parse_post({"title": "T"}).id


def test_block_ids_preserved():
    post = parse_post({"blocks": [{"kind": "file", "id": "blk-1", "orderNumber": 4}]})
    assert post.blocks[0].id == "blk-1"
    assert post.blocks[0].order_number == 4


def test_unknown_kind_raises():
    with pytest.raises(UnknownBlockKindError):
        parse_post({"blocks": [{"kind": "carousel"}]})


def test_invalid_payload_raises():
    with pytest.raises(ValidationError):
        parse_post({"blocks": [{"kind": "poll", "variantData": {"columns": 5}}]})


# ── Seeding ───────────────────────────────────────────────────────────────────

class TestSeeding:
    def test_review_without_payload_seeded(self):
        post = parse_post({"blocks": [{"kind": "review"}]})
        assert post.blocks[0].variant_data.score == 85

    def test_review_with_payload_untouched(self):
        post = parse_post({"blocks": [{"kind": "review", "variantData": {"score": 12}}]})
        data = post.blocks[0].variant_data
        assert data.score == 12
        assert data.breakdown == []

    def test_before_after_labels(self):
        post = parse_post({"lang": "tr", "blocks": [{"kind": "beforeAfter"}]})
        data = post.blocks[0].variant_data
        assert (data.before_label, data.after_label) == ("ÖNCE", "SONRA")

    def test_before_after_labels_en(self):
        block = new_block("beforeAfter", "en")
        assert block.variant_data.before_label == "BEFORE"


# ── Registry ──────────────────────────────────────────────────────────────────

def test_block_class():
    assert block_class("poll") is PollBlock


def test_block_class_unknown():
    with pytest.raises(UnknownBlockKindError) as exc:
        block_class("carousel")
    assert exc.value.kind == "carousel"


def test_new_block_fields():
    block = new_block("quote", title="Alıntı", source="Kaynak")
    assert block.title == "Alıntı"
    assert block.source == "Kaynak"
