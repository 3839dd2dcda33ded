"""Unit tests for the payment instruction parser.

Tests cover:
- DEBIT and CREDIT forms, including the debit/credit swap for CREDIT
- Case-insensitive keywords, case-preserved identifiers, whitespace collapse
- Optional ON clause
- SY01 (missing keyword), SY02 (keyword out of order), SY03 (malformed)
- Whole-word keyword matching
"""

from unittest.mock import patch

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums.instruction_type import InstructionType
from src.infrastructure.parsers.instruction_parser import (
    InstructionParser,
    KeywordMatch,
    count_keyword,
    find_keyword,
    normalize_whitespace,
)

DEBIT_INSTRUCTION = "DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122"
CREDIT_INSTRUCTION = "CREDIT 300 NGN TO ACCOUNT acc-002 FOR DEBIT FROM ACCOUNT acc-001"


# =============================================================================
# Scanning helpers
# =============================================================================


@pytest.mark.unit
class TestScanningHelpers:
    """Test module-level scanning functions."""

    def test_normalize_whitespace_collapses_runs(self):
        assert normalize_whitespace("  DEBIT \t 5\n\nUSD  ") == "DEBIT 5 USD"

    def test_find_keyword_matches_whole_word(self):
        assert find_keyword("DEBIT 5 USD FROM ACCOUNT A", "ACCOUNT") == 17

    def test_find_keyword_ignores_word_prefix(self):
        assert find_keyword("DEBIT 5 USD FROMAGE", "FROM") == -1

    def test_find_keyword_ignores_word_suffix(self):
        assert find_keyword("DEBIT 5 USD TOFROM", "FROM") == -1

    def test_find_keyword_skips_embedded_match_and_finds_later_word(self):
        assert find_keyword("FORTUNE FOR", "FOR") == 8

    def test_find_keyword_respects_start(self):
        text = "ACCOUNT A FOR ACCOUNT B"
        assert find_keyword(text, "ACCOUNT", 1) == 14

    def test_count_keyword(self):
        assert count_keyword("ACCOUNT ACCOUNTS ACCOUNT", "ACCOUNT") == 2

    def test_keyword_match_end(self):
        assert KeywordMatch(keyword="FROM", position=12).end == 16


# =============================================================================
# Successful parsing
# =============================================================================


@pytest.mark.unit
class TestParseSuccess:
    """Test instructions that parse into a DraftTransfer."""

    def test_debit_form(self, parser):
        result = parser.parse(DEBIT_INSTRUCTION)

        assert isinstance(result, Success)
        draft = result.value
        assert draft.type == InstructionType.DEBIT
        assert draft.amount == "500"
        assert draft.currency == "USD"
        assert draft.debit_account_id == "N90394"
        assert draft.credit_account_id == "N9122"
        assert draft.execute_on is None

    def test_credit_form_swaps_account_roles(self, parser):
        result = parser.parse(CREDIT_INSTRUCTION)

        assert isinstance(result, Success)
        draft = result.value
        assert draft.type == InstructionType.CREDIT
        assert draft.amount == "300"
        assert draft.currency == "NGN"
        assert draft.debit_account_id == "acc-001"
        assert draft.credit_account_id == "acc-002"

    def test_keywords_are_case_insensitive_and_ids_keep_case(self, parser):
        result = parser.parse(
            "debit 100 gbp from account Ab-1 for credit to account cD.2"
        )

        assert isinstance(result, Success)
        assert result.value.currency == "GBP"
        assert result.value.debit_account_id == "Ab-1"
        assert result.value.credit_account_id == "cD.2"

    def test_irregular_whitespace_is_tolerated(self, parser):
        result = parser.parse(
            "  DEBIT   500\tUSD FROM\n ACCOUNT  N90394 FOR CREDIT TO ACCOUNT   N9122  "
        )

        assert isinstance(result, Success)
        assert result.value.amount == "500"
        assert result.value.debit_account_id == "N90394"
        assert result.value.credit_account_id == "N9122"

    def test_on_clause_sets_execution_date(self, parser):
        result = parser.parse(f"{DEBIT_INSTRUCTION} ON 2026-12-31")

        assert isinstance(result, Success)
        assert result.value.execute_on == "2026-12-31"
        assert result.value.credit_account_id == "N9122"
        assert result.value.has_execution_date

    def test_on_clause_in_credit_form(self, parser):
        result = parser.parse(f"{CREDIT_INSTRUCTION} on 2027-01-01")

        assert isinstance(result, Success)
        assert result.value.execute_on == "2027-01-01"
        assert result.value.debit_account_id == "acc-001"

    def test_on_without_date_yields_empty_date(self, parser):
        result = parser.parse(f"{DEBIT_INSTRUCTION} ON")

        assert isinstance(result, Success)
        assert result.value.execute_on == ""
        assert not result.value.has_execution_date

    def test_date_token_is_not_reformatted(self, parser):
        result = parser.parse(f"{DEBIT_INSTRUCTION} ON 2026/12/31")

        assert isinstance(result, Success)
        assert result.value.execute_on == "2026/12/31"

    def test_ids_containing_keyword_text_are_kept_whole(self, parser):
        result = parser.parse(
            "DEBIT 5 USD FROM ACCOUNT FORTUNE FOR CREDIT TO ACCOUNT TOMORROW"
        )

        assert isinstance(result, Success)
        assert result.value.debit_account_id == "FORTUNE"
        assert result.value.credit_account_id == "TOMORROW"

    def test_amount_is_not_validated_by_parser(self, parser):
        result = parser.parse(DEBIT_INSTRUCTION.replace("500", "-100"))

        assert isinstance(result, Success)
        assert result.value.amount == "-100"


# =============================================================================
# Syntax errors
# =============================================================================


@pytest.mark.unit
class TestParseSyntaxErrors:
    """Test SY01, SY02 and SY03 outcomes."""

    @pytest.mark.parametrize("instruction", ["", "   ", "\n\t", None, 123, ["DEBIT"]])
    def test_empty_or_non_text_is_malformed(self, parser, instruction):
        result = parser.parse(instruction)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MALFORMED_INSTRUCTION

    def test_unknown_leading_keyword_is_missing_keyword(self, parser):
        result = parser.parse("SEND 100 USD TO ACCOUNT b")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_KEYWORD
        assert result.error.message == "Missing required keyword: DEBIT or CREDIT"

    def test_type_keyword_must_be_first_word(self, parser):
        result = parser.parse(f"PLEASE {DEBIT_INSTRUCTION}")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_KEYWORD

    def test_type_keyword_must_be_whole_word(self, parser):
        result = parser.parse(DEBIT_INSTRUCTION.replace("DEBIT", "DEBITS", 1))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_KEYWORD

    def test_missing_for_keyword(self, parser):
        result = parser.parse("DEBIT 500 USD FROM ACCOUNT N90394 CREDIT TO ACCOUNT N9122")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_KEYWORD
        assert result.error.keyword == "FOR"
        assert result.error.message == "Missing required keyword: FOR"

    def test_missing_second_account_keyword(self, parser):
        result = parser.parse("DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO N9122")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_KEYWORD
        assert result.error.message == "Missing required keyword: ACCOUNT after TO"

    def test_keyword_before_its_predecessor_is_out_of_order(self, parser):
        result = parser.parse(
            "DEBIT 500 USD FOR CREDIT TO ACCOUNT N9122 FROM ACCOUNT N90394"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_KEYWORD_ORDER
        assert result.error.keyword == "FOR"
        assert result.error.message == "Invalid keyword order: FOR must come after ACCOUNT"

    def test_credit_form_with_debit_form_connectors_is_out_of_order(self, parser):
        result = parser.parse(
            "CREDIT 300 NGN FROM ACCOUNT acc-001 FOR DEBIT TO ACCOUNT acc-002"
        )

        assert isinstance(result, Failure)
        assert result.error.code in (
            ErrorCode.MISSING_KEYWORD,
            ErrorCode.INVALID_KEYWORD_ORDER,
        )
        assert result.error.code.is_syntax_error

    def test_missing_currency_token_is_malformed(self, parser):
        result = parser.parse("DEBIT 500 FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MALFORMED_INSTRUCTION
        assert "after DEBIT" in result.error.message

    def test_extra_amount_token_is_malformed(self, parser):
        result = parser.parse(
            "DEBIT 500 US D FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MALFORMED_INSTRUCTION

    def test_unexpected_fault_is_reported_as_malformed(self, parser):
        with patch.object(InstructionParser, "_parse", side_effect=RuntimeError("boom")):
            result = parser.parse(DEBIT_INSTRUCTION)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MALFORMED_INSTRUCTION
