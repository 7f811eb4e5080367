"""Unit tests for spend history deserialization."""

import pytest

from coins_api.coins.schemas import DetailedBalanceResponse, coerce_spend_history


class TestCoerceSpendHistory:
    def test_list_passes_through(self):
        entries = [{"item": "hat"}, 3]
        assert coerce_spend_history(entries) == entries

    def test_json_text_is_decoded(self):
        assert coerce_spend_history('[{"item": "hat"}]') == [{"item": "hat"}]

    def test_json_bytes_are_decoded(self):
        assert coerce_spend_history(b"[1, 2]") == [1, 2]

    @pytest.mark.parametrize("value", [None, "", "{broken", '{"a": 1}', '"text"', 5, {"a": 1}])
    def test_fallback_to_empty(self, value):
        assert coerce_spend_history(value) == []


class TestSchemaIntegration:
    def test_missing_history_defaults_to_empty(self):
        response = DetailedBalanceResponse(email="a@b.com", coins=1)
        assert response.spend_history == []

    def test_null_history_becomes_empty(self):
        response = DetailedBalanceResponse(email="a@b.com", coins=1, spend_history=None)
        assert response.spend_history == []

    def test_text_history_decoded_by_validator(self):
        response = DetailedBalanceResponse.model_validate(
            {"email": "a@b.com", "coins": 1, "spend_history": "[1]"}
        )
        assert response.spend_history == [1]
