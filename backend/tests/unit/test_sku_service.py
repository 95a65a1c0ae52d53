from __future__ import annotations

import pytest

from app.core.exceptions import StorageUnavailable
from app.models.inventory_item import InventoryItem
from app.services.sku_service import (
    assign_item_number,
    build_inventory_slug,
    claim_item_number,
    format_item_number,
    generate_sku,
    parse_item_number,
)


class FakeStore:
    def __init__(self) -> None:
        self.counters: dict[str, int] = {}
        self.calls: list[str] = []

    def allocate(self, prefix: str) -> int:
        self.calls.append(prefix)
        self.counters[prefix] = self.counters.get(prefix, 0) + 1
        return self.counters[prefix]

    def current(self, prefix: str):
        return self.counters.get(prefix)


class UnavailableStore:
    def allocate(self, prefix: str) -> int:
        raise StorageUnavailable(prefix, "connection refused")


def test_format_item_number_pads_to_three_digits() -> None:
    assert format_item_number("LV", "SPD", 7) == "LV-SPD-EMZ-007"
    assert format_item_number("CH", "FLP", 42) == "CH-FLP-EMZ-042"


def test_format_item_number_never_truncates() -> None:
    assert format_item_number("BR-GEN", "GEN", 1250) == "BR-GEN-GEN-EMZ-1250"


def test_build_inventory_slug_combines_number_brand_and_model() -> None:
    slug = build_inventory_slug("LV-SPD-EMZ-007", "Louis Vuitton", "Speedy 30")
    assert slug == "lv-spd-emz-007-louis-vuitton-speedy-30"


def test_build_inventory_slug_strips_accents_and_symbols() -> None:
    assert build_inventory_slug(None, "Céline", "Trio (Small)!") == "celine-trio-small"


def test_build_inventory_slug_partial_inputs() -> None:
    assert build_inventory_slug("LV-SPD-EMZ-001") == "lv-spd-emz-001"
    assert build_inventory_slug("", "Chanel", None) == "chanel"
    assert build_inventory_slug(None, None, None) == ""


def test_generate_sku_allocates_on_composite_prefix() -> None:
    store = FakeStore()

    first = generate_sku(store, "Louis Vuitton", "Speedy 30")
    second = generate_sku(store, "LV", "speedy bandouliere")

    assert store.calls == ["LV-SPD", "LV-SPD"]
    assert first.item_number == "LV-SPD-EMZ-001"
    assert second.item_number == "LV-SPD-EMZ-002"
    assert (second.brand_code, second.model_code, second.sequence) == ("LV", "SPD", 2)


def test_generate_sku_response_shape() -> None:
    response = generate_sku(FakeStore(), "Chanel", "Flap").as_response()

    assert response == {
        "ok": True,
        "itemNumber": "CH-FLA-EMZ-001",
        "brandCode": "CH",
        "modelCode": "FLA",
        "sequence": 1,
        "slug": "ch-fla-emz-001-chanel-flap",
        "fullSlug": "ch-fla-emz-001-chanel-flap",
    }


def test_generate_sku_propagates_storage_failure() -> None:
    with pytest.raises(StorageUnavailable):
        generate_sku(UnavailableStore(), "Louis Vuitton", "Speedy")


def test_assign_item_number_locks_item() -> None:
    store = FakeStore()
    item = InventoryItem(brand="Louis Vuitton", model="Neverfull MM")

    assign_item_number(store, item)

    assert item.item_number == "LV-NVF-EMZ-001"
    assert item.item_number_locked is True
    assert (item.brand_code, item.model_code, item.sequence) == ("LV", "NVF", 1)
    assert item.full_slug == "lv-nvf-emz-001-louis-vuitton-neverfull-mm"


def test_locked_item_keeps_number_after_brand_change() -> None:
    store = FakeStore()
    item = InventoryItem(brand="Louis Vuitton", model="Speedy")
    assign_item_number(store, item)

    item.brand = "Chanel"
    item.model = "Boy"
    assign_item_number(store, item)

    assert item.item_number == "LV-SPD-EMZ-001"
    assert store.calls == ["LV-SPD"]


def test_reset_reallocates_from_current_brand_and_model() -> None:
    store = FakeStore()
    item = InventoryItem(brand="Louis Vuitton", model="Speedy")
    assign_item_number(store, item)

    item.brand = "Chanel"
    item.model = "Boy"
    assign_item_number(store, item, reset=True)

    assert item.item_number == "CH-BOY-EMZ-001"
    assert item.item_number_locked is True
    assert item.full_slug == "ch-boy-emz-001-chanel-boy"


def test_assign_keeps_user_supplied_slug() -> None:
    item = InventoryItem(brand="Gucci", model="Jackie", slug="gucci-jackie", full_slug="bags/gucci-jackie")

    assign_item_number(FakeStore(), item)

    assert item.item_number == "GC-JAC-EMZ-001"
    assert item.full_slug == "bags/gucci-jackie"


def test_failed_allocation_leaves_item_unlocked() -> None:
    item = InventoryItem(brand="Prada", model="Galleria")

    with pytest.raises(StorageUnavailable):
        assign_item_number(UnavailableStore(), item)

    assert item.item_number is None
    assert not item.item_number_locked


def test_assign_keeps_user_slug_when_full_slug_empty() -> None:
    item = InventoryItem(brand="Coach", model="Tabby", slug="coach-tabby-26")

    assign_item_number(FakeStore(), item)

    assert item.slug == "coach-tabby-26"
    assert item.full_slug == "chc-tab-emz-001-coach-tabby"


def test_parse_item_number() -> None:
    assert parse_item_number("LV-SPD-EMZ-007") == ("LV", "SPD", 7)
    assert parse_item_number("BR-GEN-GEN-EMZ-1250") == ("BR-GEN", "GEN", 1250)
    assert parse_item_number("LV-SPD-EMZ-07") is None
    assert parse_item_number("LV-SPD-EMZ-0007") is None
    assert parse_item_number("LV-SPD-XYZ-007") is None
    assert parse_item_number("SPD-EMZ-007") is None
    assert parse_item_number("") is None


def test_claim_item_number_accepts_issued_number() -> None:
    store = FakeStore()
    generated = generate_sku(store, "Louis Vuitton", "Speedy 30")
    item = InventoryItem(brand="Louis Vuitton", model="Speedy 30")

    assert claim_item_number(store, item, generated.item_number) is True

    assert item.item_number == "LV-SPD-EMZ-001"
    assert item.item_number_locked is True
    assert (item.brand_code, item.model_code, item.sequence) == ("LV", "SPD", 1)
    assert item.full_slug == generated.slug
    assert store.calls == ["LV-SPD"]


def test_claim_item_number_rejects_unissued_number() -> None:
    store = FakeStore()
    store.allocate("LV-SPD")
    item = InventoryItem(brand="Louis Vuitton", model="Speedy")

    assert claim_item_number(store, item, "LV-SPD-EMZ-002") is False
    assert claim_item_number(store, item, "CH-FLA-EMZ-001") is False
    assert item.item_number is None
    assert not item.item_number_locked
