"""Tests for semantic map expansion."""

import pytest

from semsearch.search.presets import PRESETS
from semsearch.search.synonyms import (
    MAX_EXPANSIONS,
    ExpandedSemanticMap,
    expand_semantic_map,
)


class TestExpandSemanticMap:
    """Tests for expand_semantic_map()."""

    def test_none_gives_empty_map(self) -> None:
        """Test expanding nothing."""
        expanded = expand_semantic_map(None)
        assert isinstance(expanded, ExpandedSemanticMap)
        assert len(expanded) == 0
        assert expanded.related("qr") == []

    def test_forward_entries_include_normalized_values(self) -> None:
        """Test that keys map to values and their accent-free forms."""
        expanded = expand_semantic_map({"Código": ["QR", "escáner"]})
        assert expanded["Código"] == ("QR", "escáner", "qr", "escaner")
        assert expanded["codigo"] == expanded["Código"]

    def test_reverse_entries(self) -> None:
        """Test that every value points back to its key."""
        expanded = expand_semantic_map({"qr": ["codigo", "escanear"]})
        assert expanded["escanear"] == ("qr", "codigo", "escanear")
        assert expanded.related("escanear") == ["qr", "codigo", "escanear"]

    def test_related_is_accent_and_case_insensitive(self) -> None:
        """Test lookup normalizes the query word."""
        expanded = expand_semantic_map({"Código": ["QR", "escáner"]})
        assert expanded.related("CÓDIGO") == ["qr", "escaner"]
        assert expanded.related("qr") == ["codigo", "qr", "escaner"]

    def test_forward_entry_wins_over_reverse(self) -> None:
        """Test that a later key replaces an earlier back-reference."""
        expanded = expand_semantic_map({"a": ["b"], "b": ["c"]})
        assert expanded["b"] == ("c",)

    def test_reverse_entry_is_not_overwritten(self) -> None:
        """Test that the first key claiming a value keeps it."""
        expanded = expand_semantic_map({"pago": ["cobro"], "abono": ["cobro"]})
        assert expanded["cobro"] == ("pago", "cobro")

    def test_reverse_entries_are_capped(self) -> None:
        """Test that only the first values get back-references."""
        values = [f"term{i}" for i in range(MAX_EXPANSIONS + 5)]
        expanded = expand_semantic_map({"key": values})
        assert f"term{MAX_EXPANSIONS - 1}" in expanded
        assert f"term{MAX_EXPANSIONS}" not in expanded
        # Back-references list the key and at most ten values
        assert len(expanded["term0"]) == 11

    def test_idempotent(self) -> None:
        """Test expanding an expanded map returns it unchanged."""
        once = expand_semantic_map({"orden": ["pedido", "transacción"]})
        assert expand_semantic_map(once) is once

    @pytest.mark.parametrize("preset", sorted(PRESETS))
    def test_reexpanding_plain_copy_keeps_relations(self, preset: str) -> None:
        """Test expanding a plain-dict copy again relates the same terms."""
        once = expand_semantic_map(PRESETS[preset].semantic_map)
        twice = expand_semantic_map(dict(once))

        assert twice is not once
        for term in once:
            assert twice.related(term) == once.related(term)

    def test_does_not_mutate_input(self) -> None:
        """Test the source map is left untouched."""
        source = {"qr": ["código"]}
        expand_semantic_map(source)
        assert source == {"qr": ["código"]}

    def test_related_skips_duplicates(self) -> None:
        """Test that related terms are deduplicated after normalization."""
        expanded = expand_semantic_map({"qr": ["código", "codigo"]})
        assert expanded.related("qr") == ["codigo"]
