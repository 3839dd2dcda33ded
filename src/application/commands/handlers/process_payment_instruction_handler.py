"""ProcessPaymentInstruction command handler.

Runs one instruction through the whole pipeline and returns the response
payload. Every failure is converted into a failed payload at the stage that
produced it; the handler never raises for bad input.

Architecture:
    - Application layer handler (orchestrates pipeline stages)
    - Synchronous: no I/O, no suspension points
    - Stages are injected so each one is replaceable in tests
"""

from src.application.commands.payment_instruction_commands import (
    ProcessPaymentInstruction,
)
from src.application.dtos.payment_instruction_dtos import PaymentInstructionResult
from src.application.services.execution_scheduler import ExecutionScheduler
from src.application.services.response_assembler import ResponseAssembler
from src.application.services.transfer_executor import TransferExecutor
from src.application.services.transfer_validator import TransferValidator
from src.core.errors import DomainError
from src.core.result import Failure
from src.domain.entities.draft_transfer import DraftTransfer
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.parsers.instruction_parser import InstructionParser


class ProcessPaymentInstructionHandler:
    """Handler for ProcessPaymentInstruction command.

    Flow:
        1. Parse instruction text (SY01/SY02/SY03 on failure)
        2. Validate draft against the accounts (first failing rule wins)
        3. Decide immediate vs. deferred execution
        4. Move balances, or hold the transfer
        5. Assemble the response payload

    Dependencies (injected via constructor):
        - InstructionParser: Text to DraftTransfer
        - TransferValidator: Ordered rule chain
        - ExecutionScheduler: Date-based execution decision
        - TransferExecutor: Balance mutation
        - ResponseAssembler: Payload construction
        - LoggerProtocol: Structured logging

    Returns:
        PaymentInstructionResult: HTTP status and payload for every outcome.
    """

    def __init__(
        self,
        parser: InstructionParser,
        validator: TransferValidator,
        scheduler: ExecutionScheduler,
        executor: TransferExecutor,
        assembler: ResponseAssembler,
        logger: LoggerProtocol,
    ) -> None:
        self._parser = parser
        self._validator = validator
        self._scheduler = scheduler
        self._executor = executor
        self._assembler = assembler
        self._logger = logger

    def handle(self, command: ProcessPaymentInstruction) -> PaymentInstructionResult:
        """Handle ProcessPaymentInstruction command.

        Args:
            command: Accounts and raw instruction text.

        Returns:
            PaymentInstructionResult: Failed (400), pending or successful (200).
        """
        # 1. Parse
        parsed = self._parser.parse(command.instruction)
        if isinstance(parsed, Failure):
            self._log_rejected("parse", parsed.error)
            return self._assembler.parse_failure(parsed.error)
        draft = parsed.value

        # 2. Validate
        validated = self._validator.validate(draft, command.accounts)
        if isinstance(validated, Failure):
            self._log_rejected("validate", validated.error, draft)
            return self._assembler.validation_failure(
                draft, command.accounts, validated.error
            )
        transfer = validated.value

        # 3. Schedule
        if not self._scheduler.is_immediate(draft.execute_on):
            held = self._executor.hold(transfer)
            self._logger.info(
                "transfer_scheduled",
                instruction_type=draft.type.value,
                debit_account=draft.debit_account_id,
                credit_account=draft.credit_account_id,
                amount=transfer.amount,
                currency=draft.currency,
                execute_on=draft.execute_on,
            )
            return self._assembler.pending(held, command.accounts)

        # 4. Execute
        executed = self._executor.execute(transfer)
        if isinstance(executed, Failure):
            self._log_rejected("execute", executed.error, draft)
            return self._assembler.validation_failure(
                draft, command.accounts, executed.error
            )

        self._logger.info(
            "transfer_executed",
            instruction_type=draft.type.value,
            debit_account=draft.debit_account_id,
            credit_account=draft.credit_account_id,
            amount=transfer.amount,
            currency=draft.currency,
            debit_balance_before=executed.value.debit_balance_before,
            debit_balance=transfer.debit_account.balance,
            credit_balance_before=executed.value.credit_balance_before,
            credit_balance=transfer.credit_account.balance,
        )

        # 5. Respond
        return self._assembler.successful(executed.value, command.accounts)

    def _log_rejected(
        self, stage: str, error: DomainError, draft: DraftTransfer | None = None
    ) -> None:
        self._logger.warning(
            "payment_instruction_rejected",
            stage=stage,
            status_code=error.code.value,
            status_reason=error.message,
            instruction_type=draft.type.value if draft is not None else None,
        )
