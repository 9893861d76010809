"""Tests for built-in presets."""

from typing import Any

import pytest

from semsearch.exceptions import PresetNotFoundError
from semsearch.search.presets import PRESETS, get_preset, list_presets


class TestPresetLookup:
    """Tests for preset lookup."""

    def test_list_presets(self) -> None:
        """Test the built-in presets and their order."""
        assert [p.name for p in list_presets()] == ["orders", "users", "faq"]

    def test_get_preset_case_insensitive(self) -> None:
        """Test lookup ignores case and whitespace."""
        assert get_preset(" ORDERS ") is PRESETS["orders"]

    def test_unknown_preset(self) -> None:
        """Test an unknown name."""
        with pytest.raises(PresetNotFoundError) as exc_info:
            get_preset("invoices")
        assert "orders" in str(exc_info.value)


class TestPresetSettings:
    """Tests for preset tuning."""

    def test_orders(self) -> None:
        """Test the orders preset."""
        preset = get_preset("orders")
        assert preset.fields == (
            "id",
            "client",
            "date",
            "amount",
            "paymentMethod",
            "status",
        )
        assert preset.options.weight_for("id") == 3
        assert preset.options.fuzzy_threshold == 0.65
        assert preset.options.number_tolerance == 0.20

    def test_users_numeric_disabled(self) -> None:
        """Test the users preset skips numeric matching."""
        assert get_preset("users").options.enable_numeric_search is False

    def test_faq_weights(self) -> None:
        """Test the FAQ preset favors titles."""
        options = get_preset("faq").options
        assert options.weight_for("title") == 2
        assert options.weight_for("content") == 1


class TestPresetSearch:
    """Tests for searching with presets."""

    def test_orders_amount(self, order_records: list[dict[str, Any]]) -> None:
        """Test approximate amount search over orders."""
        with get_preset("orders").create_engine() as engine:
            results = engine.rank(order_records, "563")
        assert [r["id"] for r in results] == ["ORD-1001", "ORD-1002"]

    def test_orders_status_prefix(self, order_records: list[dict[str, Any]]) -> None:
        """Test partially typed status search over orders."""
        with get_preset("orders").create_engine() as engine:
            results = engine.rank(order_records, "aprobad")
        assert [r["id"] for r in results] == ["ORD-1001"]

    def test_users_role_synonym(self, user_records: list[dict[str, Any]]) -> None:
        """Test role synonyms over users."""
        with get_preset("users").create_engine() as engine:
            results = engine.rank(user_records, "admin")
        assert results == [user_records[0]]

    def test_faq_misspelled(self, faq_records: list[dict[str, Any]]) -> None:
        """Test a misspelled FAQ query."""
        with get_preset("faq").create_engine() as engine:
            results = engine.rank(faq_records, "kodigo qr")
        assert results[0] is faq_records[1]

    def test_create_engine_cache_size(self) -> None:
        """Test the phonetic cache size is passed through."""
        engine = get_preset("faq").create_engine(phonetic_cache_size=5)
        assert engine.matcher.cache_stats()["capacity"] == 5
