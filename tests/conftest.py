# tests/conftest.py
"""Shared fixtures — an in-memory stand-in for the plate collection."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest


class InMemoryPlateCollection:
    """Dict-backed collection with the same add / where_plate surface as SqlPlateCollection."""

    def __init__(self):
        self.docs = {}
        self.query_calls = 0

    def add(self, record):
        doc_id = f"doc-{len(self.docs) + 1}"
        self.docs[doc_id] = record
        return doc_id

    def where_plate(self, plate):
        self.query_calls += 1
        return [r for r in self.docs.values() if r.plate == plate]


@pytest.fixture
def collection():
    return InMemoryPlateCollection()


@pytest.fixture
def db():
    """Session on a throwaway in-memory SQLite database with the plate tables created."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool
    from app.database import create_tables

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
