"""Unit tests for the plain-mapping entry point.

Tests cover:
- Executed transfers write new balances back into the caller's dicts
- Failed and pending outcomes leave the dicts untouched
- Missing keys in the request
- Malformed account mappings
"""

import pytest

from src.application.services.payment_instruction_service import (
    process_payment_instruction,
)
from tests.conftest import build_handler

INSTRUCTION = "DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122"


@pytest.fixture
def raw_accounts() -> list[dict]:
    return [
        {"id": "N90394", "balance": 1000, "currency": "USD"},
        {"id": "N9122", "balance": 500, "currency": "USD"},
    ]


@pytest.mark.unit
class TestProcessPaymentInstruction:
    """Test process_payment_instruction()."""

    def test_executed_transfer_updates_caller_dicts(self, raw_accounts):
        result = process_payment_instruction(
            {"accounts": raw_accounts, "instruction": INSTRUCTION},
            handler=build_handler(),
        )

        assert result["httpStatus"] == 200
        assert result["data"]["status"] == "successful"
        assert raw_accounts[0]["balance"] == 500
        assert raw_accounts[1]["balance"] == 1000

    def test_failed_transfer_leaves_dicts_untouched(self, raw_accounts):
        result = process_payment_instruction(
            {"accounts": raw_accounts, "instruction": INSTRUCTION.replace("500", "5000")},
            handler=build_handler(),
        )

        assert result["httpStatus"] == 400
        assert result["data"]["status_code"] == "AC01"
        assert [raw["balance"] for raw in raw_accounts] == [1000, 500]

    def test_pending_transfer_leaves_dicts_untouched(self, raw_accounts):
        result = process_payment_instruction(
            {"accounts": raw_accounts, "instruction": f"{INSTRUCTION} ON 2999-12-31"},
            handler=build_handler(),
        )

        assert result["data"]["status_code"] == "AP02"
        assert [raw["balance"] for raw in raw_accounts] == [1000, 500]

    def test_missing_instruction_is_malformed(self, raw_accounts):
        result = process_payment_instruction(
            {"accounts": raw_accounts}, handler=build_handler()
        )

        assert result["httpStatus"] == 400
        assert result["data"]["status_code"] == "SY03"

    def test_missing_accounts_means_no_accounts(self):
        result = process_payment_instruction(
            {"instruction": INSTRUCTION}, handler=build_handler()
        )

        assert result["data"]["status_code"] == "AC03"
        assert result["data"]["accounts"] == []

    def test_malformed_account_raises(self):
        with pytest.raises(ValueError):
            process_payment_instruction(
                {"accounts": [{"id": "N90394", "balance": 10}], "instruction": INSTRUCTION},
                handler=build_handler(),
            )

    def test_defaults_to_container_handler(self, raw_accounts):
        result = process_payment_instruction(
            {"accounts": raw_accounts, "instruction": INSTRUCTION}
        )

        assert result["data"]["status_code"] == "AP00"
        assert raw_accounts[0]["balance"] == 500
