"""Shared pytest fixtures.

Provides:
1. Fresh account sets per test (accounts are mutated by executed transfers)
2. A handler wired with a fixed clock and a mock logger
3. Cache isolation for container singletons
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.commands.handlers.process_payment_instruction_handler import (
    ProcessPaymentInstructionHandler,
)
from src.application.services.execution_scheduler import ExecutionScheduler
from src.application.services.response_assembler import ResponseAssembler
from src.application.services.transfer_executor import TransferExecutor
from src.application.services.transfer_validator import TransferValidator
from src.core.container import get_instruction_parser, get_logger
from src.domain.entities.account import Account
from src.infrastructure.parsers.instruction_parser import InstructionParser

SUPPORTED_CURRENCIES = ("NGN", "USD", "GBP", "GHS")

# "Today" for every handler built by the fixtures below
FIXED_TODAY = date(2026, 10, 19)


def create_account(
    account_id: str = "N90394", balance: int = 1000, currency: str = "USD"
) -> Account:
    """Helper to create an Account for testing."""
    return Account(id=account_id, balance=balance, currency=currency)


def build_handler(
    today: date = FIXED_TODAY,
    logger: MagicMock | None = None,
) -> ProcessPaymentInstructionHandler:
    """Helper to build a handler with real stages, a fixed clock and a mock logger."""
    return ProcessPaymentInstructionHandler(
        parser=InstructionParser(),
        validator=TransferValidator(supported_currencies=SUPPORTED_CURRENCIES),
        scheduler=ExecutionScheduler(clock=lambda: today),
        executor=TransferExecutor(),
        assembler=ResponseAssembler(),
        logger=logger or MagicMock(),
    )


@pytest.fixture
def usd_accounts() -> list[Account]:
    """Two USD accounts: N90394 (1000) and N9122 (500)."""
    return [
        create_account("N90394", 1000, "USD"),
        create_account("N9122", 500, "USD"),
    ]


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording every call."""
    return MagicMock()


@pytest.fixture
def handler(mock_logger: MagicMock) -> ProcessPaymentInstructionHandler:
    """Handler whose "today" is FIXED_TODAY."""
    return build_handler(logger=mock_logger)


@pytest.fixture
def parser() -> InstructionParser:
    return InstructionParser()


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Drop container singletons so patched settings take effect per test."""
    get_logger.cache_clear()
    get_instruction_parser.cache_clear()
    yield
    get_logger.cache_clear()
    get_instruction_parser.cache_clear()
