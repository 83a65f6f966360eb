"""Tests database — persistance des posts (SQLite temporaire)."""
import pytest

from post_builder import database
from post_builder.database import PostDB, load_post, save_post
from post_builder.manifest import parse_post


@pytest.fixture
def db(tmp_path):
    database.init_db(f"sqlite:///{tmp_path / 'test.db'}")
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _post():
    return parse_post({"id": "p1", "title": "İlk", "blocks": [{"kind": "versus"}, {"kind": "quiz"}]})


def test_save_and_load(db):
    post = _post()
    save_post(db, post)
    loaded = load_post(db, "p1")
    assert loaded.model_dump() == post.model_dump()


def test_body_stored_camel_case(db):
    row = save_post(db, _post())
    assert "variantData" in row.body["blocks"][0]
    assert row.title == "İlk"


def test_save_is_upsert(db):
    post = _post()
    save_post(db, post)
    save_post(db, post.model_copy(update={"title": "İkinci"}))
    assert db.query(PostDB).count() == 1
    assert load_post(db, "p1").title == "İkinci"


def test_load_unknown(db):
    assert load_post(db, "absent") is None


def test_get_db_yields_session(tmp_path):
    database.init_db(f"sqlite:///{tmp_path / 'other.db'}")
    gen = database.get_db()
    session = next(gen)
    assert session.query(PostDB).count() == 0
    gen.close()


def test_load_restores_block_invariants(db):
    post = _post()
    row = save_post(db, post)
    body = dict(row.body)
    blocks = [dict(b) for b in body["blocks"]]
    blocks[0] = {**blocks[0], "variantData": {"options": [{"text": "solo"}]}}
    row.body = {**body, "blocks": blocks}
    db.commit()
    loaded = load_post(db, "p1")
    assert len(loaded.blocks[0].variant_data.options) == 2
