from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool

from app.core.exceptions import InvariantViolation, StorageUnavailable
from app.models import Base
from app.services.sequence_store import SequenceStore


def _raw_last_value(engine, prefix: str):
    with engine.connect() as conn:
        return conn.execute(
            text("SELECT last_value FROM sequence_counters WHERE prefix = :p"), {"p": prefix}
        ).scalar_one_or_none()


def test_first_allocation_creates_counter_at_one(store, engine) -> None:
    assert store.current("LV-SPD") is None

    assert store.allocate("LV-SPD") == 1
    assert _raw_last_value(engine, "LV-SPD") == 1


def test_sequential_allocations_strictly_increase(store) -> None:
    values = [store.allocate("LV-NVF") for _ in range(10)]

    assert values == list(range(1, 11))
    assert store.current("LV-NVF") == 10


def test_interleaved_prefixes_are_independent(store) -> None:
    lv, ch = [], []
    for _ in range(5):
        lv.append(store.allocate("LV-SPD"))
        ch.append(store.allocate("CH-FLP"))

    assert lv == [1, 2, 3, 4, 5]
    assert ch == [1, 2, 3, 4, 5]


def test_concurrent_allocations_never_duplicate(store) -> None:
    with ThreadPoolExecutor(max_workers=20) as pool:
        values = list(pool.map(lambda _: store.allocate("LV-SPD"), range(100)))

    assert sorted(values) == list(range(1, 101))
    assert store.current("LV-SPD") == 100


def test_concurrent_allocations_across_prefixes(store) -> None:
    prefixes = ["LV-SPD", "CH-FLP"] * 50

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda p: (p, store.allocate(p)), prefixes))

    for prefix in ("LV-SPD", "CH-FLP"):
        values = sorted(v for p, v in results if p == prefix)
        assert values == list(range(1, 51))


def test_negative_counter_raises_and_is_not_repaired(store, engine) -> None:
    with engine.begin() as conn:
        conn.exec_driver_sql("PRAGMA ignore_check_constraints = ON")
        conn.exec_driver_sql("INSERT INTO sequence_counters (prefix, last_value) VALUES ('GC-JAC', -3)")
        conn.exec_driver_sql("PRAGMA ignore_check_constraints = OFF")

    with pytest.raises(InvariantViolation) as exc_info:
        store.allocate("GC-JAC")

    assert exc_info.value.prefix == "GC-JAC"
    assert _raw_last_value(engine, "GC-JAC") == -3


def test_non_integer_counter_raises(store, engine) -> None:
    with engine.begin() as conn:
        conn.exec_driver_sql("INSERT INTO sequence_counters (prefix, last_value) VALUES ('PR-GAL', 'abc')")

    with pytest.raises(InvariantViolation):
        store.allocate("PR-GAL")

    assert _raw_last_value(engine, "PR-GAL") == "abc"


def test_unreachable_storage_raises_storage_unavailable(unreachable_store) -> None:
    with pytest.raises(StorageUnavailable) as exc_info:
        unreachable_store.allocate("LV-SPD")

    assert exc_info.value.prefix == "LV-SPD"


def test_empty_prefix_is_rejected(store) -> None:
    with pytest.raises(ValueError):
        store.allocate("")


def test_pool_timeout_raises_storage_unavailable(tmp_path) -> None:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'pool.db'}",
        poolclass=QueuePool,
        pool_size=1,
        max_overflow=0,
        pool_timeout=0.1,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    store = SequenceStore(sessionmaker(bind=engine))

    held = engine.connect()
    try:
        with pytest.raises(StorageUnavailable) as exc_info:
            store.allocate("LV-SPD")
        with pytest.raises(StorageUnavailable):
            store.current("LV-SPD")
    finally:
        held.close()
        engine.dispose()

    assert exc_info.value.prefix == "LV-SPD"
