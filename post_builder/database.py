"""SQLite — init + session + persistance des posts (document JSON complet)"""
import logging
import os
from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from .core.schemas import Post
from .editor.mutator import settle_post

log = logging.getLogger(__name__)

DB_URL = os.getenv("POST_BUILDER_DB", "sqlite:///post_builder.db")

ENGINE = None
SessionLocal = sessionmaker(autoflush=False)


class Base(DeclarativeBase):
    pass


class PostDB(Base):
    __tablename__ = "posts"

    post_id:    Mapped[str]      = mapped_column(sa.String, primary_key=True)
    title:      Mapped[str]      = mapped_column(sa.String, default="")
    body:       Mapped[dict]     = mapped_column(sa.JSON)
    updated_at: Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


def init_db(db_url: Optional[str] = None):
    """Crée l'engine (URL explicite ou POST_BUILDER_DB) et les tables."""
    global ENGINE
    url = db_url or DB_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    ENGINE = create_engine(url, connect_args=connect_args)
    SessionLocal.configure(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    log.info("DB post_builder initialisée (%s)", url)
    return ENGINE


def get_db():
    if ENGINE is None:
        init_db()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── Posts ──

def save_post(db: Session, post: Post) -> PostDB:
    """Upsert du document complet (camelCase, comme le manifest)."""
    row = db.get(PostDB, post.id)
    body = post.model_dump(mode="json", by_alias=True)
    if row is None:
        row = PostDB(post_id=post.id, title=post.title, body=body)
        db.add(row)
    else:
        row.title = post.title
        row.body = body
        row.updated_at = datetime.utcnow()
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.warning("Échec enregistrement post %s : %s", post.id, e)
        raise
    db.refresh(row)
    return row


def load_post(db: Session, post_id: str) -> Optional[Post]:
    row = db.get(PostDB, post_id)
    if row is None:
        return None
    return settle_post(Post.model_validate(row.body))
