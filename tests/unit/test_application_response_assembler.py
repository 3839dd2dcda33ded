"""Unit tests for ResponseAssembler.

Tests cover:
- Parse failure payload (all transfer fields null, no accounts)
- Validation failure payload (draft echoed, pre-transfer snapshots)
- Pending and successful payloads
- Input-order snapshots with upper-cased currency
- leading_integer() amount echo
"""

import pytest

from src.application.dtos import ExecutedTransfer, ValidatedTransfer
from src.application.services.response_assembler import (
    ResponseAssembler,
    involved_snapshots,
    leading_integer,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.domain.entities import DraftTransfer
from src.domain.enums import InstructionType, TransferStatus
from src.domain.errors import InstructionSyntaxError
from tests.conftest import create_account


@pytest.fixture
def assembler() -> ResponseAssembler:
    return ResponseAssembler()


@pytest.fixture
def draft() -> DraftTransfer:
    return DraftTransfer(
        type=InstructionType.CREDIT,
        amount="500",
        currency="USD",
        debit_account_id="N9122",
        credit_account_id="N90394",
        execute_on="2026-12-31",
    )


@pytest.mark.unit
class TestLeadingInteger:
    """Test leading_integer()."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("500", 500),
            ("0100", 100),
            ("100.0", 100),
            ("12x", 12),
            ("-100", -100),
            ("+7", 7),
            ("0", 0),
            ("abc", None),
            ("", None),
            ("-", None),
            ("1" * 5000, None),
            ("-" + "9" * 5000 + "x", None),
        ],
    )
    def test_leading_integer(self, raw, expected):
        assert leading_integer(raw) == expected


@pytest.mark.unit
class TestFailurePayloads:
    """Test parse_failure() and validation_failure()."""

    def test_parse_failure(self, assembler):
        error = InstructionSyntaxError(
            code=ErrorCode.MISSING_KEYWORD, message="Missing required keyword: FOR"
        )

        result = assembler.parse_failure(error)

        assert result.http_status == 400
        assert result.data.to_dict() == {
            "type": None,
            "amount": None,
            "currency": None,
            "debit_account": None,
            "credit_account": None,
            "execute_by": None,
            "status": "failed",
            "status_reason": "Missing required keyword: FOR",
            "status_code": "SY01",
            "accounts": [],
        }

    def test_validation_failure_echoes_draft(self, assembler, draft):
        accounts = [create_account("N90394", 1000, "usd"), create_account("N9122", 500, "usd")]
        error = ValidationError(code=ErrorCode.CURRENCY_MISMATCH, message="Account currency mismatch")

        result = assembler.validation_failure(draft, accounts, error)

        data = result.data
        assert result.http_status == 400
        assert data.type == "CREDIT"
        assert data.amount == 500
        assert data.debit_account == "N9122"
        assert data.credit_account == "N90394"
        assert data.execute_by == "2026-12-31"
        assert data.status == TransferStatus.FAILED
        assert data.status_code == "CU01"
        assert [snapshot.to_dict() for snapshot in data.accounts] == [
            {"id": "N90394", "balance": 1000, "balance_before": 1000, "currency": "USD"},
            {"id": "N9122", "balance": 500, "balance_before": 500, "currency": "USD"},
        ]

    @pytest.mark.parametrize("raw,expected", [("0", None), ("abc", None), ("-100", -100)])
    def test_validation_failure_amount_echo(self, assembler, draft, raw, expected):
        bad = DraftTransfer(
            type=draft.type,
            amount=raw,
            currency=draft.currency,
            debit_account_id=draft.debit_account_id,
            credit_account_id=draft.credit_account_id,
        )
        error = ValidationError(code=ErrorCode.INVALID_AMOUNT, message="x")

        assert assembler.validation_failure(bad, [], error).data.amount == expected

    def test_validation_failure_lists_only_resolvable_accounts(self, assembler, draft):
        accounts = [create_account("other", 1), create_account("N9122", 500)]
        error = ValidationError(code=ErrorCode.ACCOUNT_NOT_FOUND, message="Account not found: N90394")

        result = assembler.validation_failure(draft, accounts, error)

        assert [snapshot.id for snapshot in result.data.accounts] == ["N9122"]


@pytest.mark.unit
class TestApprovedPayloads:
    """Test pending() and successful()."""

    def test_successful(self, assembler, draft):
        credit = create_account("N90394", 1500, "usd")
        debit = create_account("N9122", 0, "usd")
        accounts = [credit, debit]
        executed = ExecutedTransfer(
            transfer=ValidatedTransfer(
                draft=draft, amount=500, debit_account=debit, credit_account=credit
            ),
            executed=True,
            debit_balance_before=500,
            credit_balance_before=1000,
        )

        result = assembler.successful(executed, accounts)

        assert result.http_status == 200
        body = result.to_dict()
        assert body["httpStatus"] == 200
        assert body["data"]["status"] == "successful"
        assert body["data"]["status_code"] == "AP00"
        assert body["data"]["status_reason"] == "Transaction executed successfully"
        assert body["data"]["accounts"] == [
            {"id": "N90394", "balance": 1500, "balance_before": 1000, "currency": "USD"},
            {"id": "N9122", "balance": 0, "balance_before": 500, "currency": "USD"},
        ]

    def test_pending(self, assembler, draft):
        credit = create_account("N90394", 1000)
        debit = create_account("N9122", 500)
        executed = ExecutedTransfer(
            transfer=ValidatedTransfer(
                draft=draft, amount=500, debit_account=debit, credit_account=credit
            ),
            executed=False,
            debit_balance_before=500,
            credit_balance_before=1000,
        )

        result = assembler.pending(executed, [debit, credit])

        assert result.http_status == 200
        assert result.data.status == TransferStatus.PENDING
        assert result.data.status_code == "AP02"
        assert result.data.status_reason == "Transaction scheduled for future execution"
        assert result.data.amount == 500
        for snapshot in result.data.accounts:
            assert snapshot.balance == snapshot.balance_before

    def test_snapshots_follow_input_order(self, draft):
        accounts = [
            create_account("N9122", 1),
            create_account("x", 2),
            create_account("N90394", 3),
        ]

        snapshots = involved_snapshots(accounts, draft)

        assert [snapshot.id for snapshot in snapshots] == ["N9122", "N90394"]
