"""Shared test fixtures."""

import os

os.environ.setdefault("FLASHBOOK_DATABASE_URL", "sqlite://")

from datetime import date, datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from flashbook.database import init_db
from flashbook.schemas import GrammarItem, SentenceItem, SRSFields, VocabularyItem


TODAY = date(2024, 1, 10)


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


def make_item(kind, item_id, next_review_at="2024-01-10", lesson="", interval=0):
    """Build a schema item; next_review_at=None means no SRS state."""
    srs = None
    if next_review_at is not None:
        srs = SRSFields(next_review_at=next_review_at, interval=interval, ease_factor=2.5)
    common = dict(id=item_id, created=datetime(2024, 1, 1), lesson=lesson, srs=srs)
    if kind == "grammar":
        return GrammarItem(title=f"grammar-{item_id}", **common)
    if kind == "vocab":
        return VocabularyItem(word=f"word-{item_id}", **common)
    return SentenceItem(japanese_text=f"sentence-{item_id}", **common)
