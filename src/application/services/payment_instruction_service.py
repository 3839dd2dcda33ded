"""Plain-mapping entry point for payment instructions.

Accepts ``{"accounts": [...], "instruction": "..."}`` and returns
``{"httpStatus": int, "data": {...}}``. Balances moved by an executed
transfer are written back into the caller's account mappings, so callers
holding plain dicts observe the same in-place update as callers holding
Account objects.

Usage:
    from src.application.services.payment_instruction_service import (
        process_payment_instruction,
    )

    accounts = [
        {"id": "N90394", "balance": 1000, "currency": "USD"},
        {"id": "N9122", "balance": 500, "currency": "USD"},
    ]
    result = process_payment_instruction({
        "accounts": accounts,
        "instruction": "DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122",
    })
    # result["httpStatus"] == 200; accounts[0]["balance"] == 500
"""

from collections.abc import Mapping, MutableMapping
from typing import Any

from src.application.commands.handlers.process_payment_instruction_handler import (
    ProcessPaymentInstructionHandler,
)
from src.application.commands.payment_instruction_commands import (
    ProcessPaymentInstruction,
)
from src.domain.entities.account import Account


def process_payment_instruction(
    payload: Mapping[str, Any],
    handler: ProcessPaymentInstructionHandler | None = None,
) -> dict[str, Any]:
    """Process one instruction request.

    Args:
        payload: Mapping with ``accounts`` (list of ``{id, balance, currency}``
            mappings) and ``instruction``. A missing ``accounts`` key means no
            accounts; a missing ``instruction`` fails parsing with SY03.
        handler: Handler to use. Defaults to the container's handler.

    Returns:
        ``{"httpStatus": int, "data": dict}``.

    Raises:
        ValueError: If an account mapping lacks a field or has a wrong type.
    """
    if handler is None:
        from src.core.container import get_process_payment_instruction_handler

        handler = get_process_payment_instruction_handler()

    raw_accounts = list(payload.get("accounts") or [])
    accounts = [Account.from_dict(raw) for raw in raw_accounts]

    result = handler.handle(
        ProcessPaymentInstruction(
            accounts=accounts,
            instruction=payload.get("instruction"),
        )
    )

    for raw, account in zip(raw_accounts, accounts):
        if isinstance(raw, MutableMapping) and raw["balance"] != account.balance:
            raw["balance"] = account.balance

    return result.to_dict()
