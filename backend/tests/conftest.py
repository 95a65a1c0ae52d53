from __future__ import annotations

import os

# Antes de importar o app: nenhum teste deve tocar no PostgreSQL configurado
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db, get_sequence_store
from app.database import build_engine
from app.main import app
from app.models import Base
from app.services.sequence_store import SequenceStore


@pytest.fixture()
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'intake.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def store(session_factory) -> SequenceStore:
    return SequenceStore(session_factory)


@pytest.fixture()
def unreachable_store(tmp_path) -> SequenceStore:
    broken = build_engine(f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}")
    yield SequenceStore(sessionmaker(bind=broken))
    broken.dispose()


@pytest.fixture()
def client(session_factory, store):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_sequence_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
