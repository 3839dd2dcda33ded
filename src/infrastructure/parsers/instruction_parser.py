"""Payment instruction text parser.

Turns free text such as::

    DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122 ON 2026-12-31
    CREDIT 300 NGN TO ACCOUNT acc-002 FOR DEBIT FROM ACCOUNT acc-001

into a DraftTransfer, or an InstructionSyntaxError.

Architecture:
    InstructionParser scans keyword positions rather than matching a pattern:
    - Whitespace is collapsed; an upper-cased copy is used for keyword lookup
      only, values are cut from the original-case text
    - Keywords are whole space-delimited words, located left to right, each
      search starting right after the previous keyword, so the repeated
      ACCOUNT keyword binds to the right occurrence
    - Every value is the text between two located keywords

    Error codes:
    - SY01: a keyword is missing
    - SY02: a keyword only appears before the keyword it must follow
    - SY03: empty or non-text input, wrong amount/currency token count,
      or any unexpected fault while scanning
"""

from dataclasses import dataclass

import structlog

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.draft_transfer import DraftTransfer
from src.domain.enums.instruction_type import InstructionType
from src.domain.errors import InstructionError, InstructionSyntaxError

logger = structlog.get_logger(__name__)

DATE_KEYWORD = "ON"


@dataclass(frozen=True, slots=True)
class KeywordMatch:
    """A grammar keyword located in the normalized instruction.

    Attributes:
        keyword: Upper-case keyword text.
        position: Index of the keyword's first character.
    """

    keyword: str
    position: int

    @property
    def end(self) -> int:
        """Index just past the keyword."""
        return self.position + len(self.keyword)


def normalize_whitespace(text: str) -> str:
    """Trim and collapse every whitespace run to a single space."""
    return " ".join(text.split())


def find_keyword(upper: str, keyword: str, start: int = 0) -> int:
    """Find ``keyword`` as a whole word at or after ``start``.

    Args:
        upper: Upper-cased, whitespace-normalized instruction.
        keyword: Upper-case keyword.
        start: Index to start searching from.

    Returns:
        Index of the match, or -1 when the word does not occur.

    Example:
        >>> find_keyword("DEBIT 5 USD FROM ACCOUNT A", "ACCOUNT")
        17
        >>> find_keyword("DEBIT 5 USD FROMAGE", "FROM")
        -1
    """
    position = upper.find(keyword, start)
    while position != -1:
        end = position + len(keyword)
        starts_word = position == 0 or upper[position - 1] == " "
        ends_word = end == len(upper) or upper[end] == " "
        if starts_word and ends_word:
            return position
        position = upper.find(keyword, position + 1)
    return -1


def count_keyword(upper: str, keyword: str) -> int:
    """Count whole-word occurrences of ``keyword``."""
    count = 0
    position = find_keyword(upper, keyword)
    while position != -1:
        count += 1
        position = find_keyword(upper, keyword, position + len(keyword))
    return count


class InstructionParser:
    """Parser for DEBIT/CREDIT payment instructions.

    Thread-safe: No mutable state, can be reused across requests.

    Example:
        >>> parser = InstructionParser()
        >>> match parser.parse("debit 100 gbp from account a for credit to account b"):
        ...     case Success(value=draft):
        ...         print(draft.currency, draft.debit_account_id)
        ...     case Failure(error=error):
        ...         print(error.code.value)
        GBP a
    """

    def parse(self, instruction: object) -> Result[DraftTransfer, InstructionSyntaxError]:
        """Parse instruction text into a draft transfer.

        Args:
            instruction: Raw instruction. Anything other than non-blank text
                is reported as SY03.

        Returns:
            Success(DraftTransfer): Keywords located and values extracted.
            Failure(InstructionSyntaxError): SY01, SY02 or SY03.
        """
        if not isinstance(instruction, str) or not instruction.strip():
            logger.warning(
                "instruction_parse_rejected",
                status_code=ErrorCode.MALFORMED_INSTRUCTION.value,
                reason="empty_or_not_text",
            )
            return self._failure(
                ErrorCode.MALFORMED_INSTRUCTION, InstructionError.MALFORMED_INSTRUCTION
            )

        try:
            result = self._parse(normalize_whitespace(instruction))
        except Exception as e:
            logger.error(
                "instruction_parse_failed",
                error_type=type(e).__name__,
                error=str(e),
            )
            return self._failure(
                ErrorCode.MALFORMED_INSTRUCTION, InstructionError.MALFORMED_INSTRUCTION
            )

        match result:
            case Success(value=draft):
                logger.info(
                    "instruction_parsed",
                    instruction_type=draft.type.value,
                    currency=draft.currency,
                    has_execution_date=draft.has_execution_date,
                )
            case Failure(error=error):
                logger.warning(
                    "instruction_parse_rejected",
                    status_code=error.code.value,
                    keyword=error.keyword,
                )
        return result

    # -------------------------------------------------------------------------
    # Scanning
    # -------------------------------------------------------------------------

    def _parse(self, normalized: str) -> Result[DraftTransfer, InstructionSyntaxError]:
        upper = normalized.upper()

        instruction_type = self._detect_type(upper)
        if instruction_type is None:
            return self._failure(
                ErrorCode.MISSING_KEYWORD, InstructionError.MISSING_TYPE_KEYWORD
            )

        located = self._locate_keywords(upper, instruction_type.keyword_sequence)
        if isinstance(located, Failure):
            return located
        matches = located.value

        order_check = self._check_order(matches)
        if isinstance(order_check, Failure):
            return order_check

        # ON is optional and only counts after the second ACCOUNT
        date_position = find_keyword(upper, DATE_KEYWORD, matches[-1].end)

        return self._extract(normalized, instruction_type, matches, date_position)

    def _detect_type(self, upper: str) -> InstructionType | None:
        for instruction_type in InstructionType:
            if find_keyword(upper, instruction_type.value) == 0:
                return instruction_type
        return None

    def _locate_keywords(
        self, upper: str, sequence: tuple[str, ...]
    ) -> Result[list[KeywordMatch], InstructionSyntaxError]:
        """Locate each keyword after the one before it.

        A keyword missing after its predecessor is SY02 when the text still
        holds enough occurrences of it (it was written too early), SY01
        otherwise.
        """
        matches: list[KeywordMatch] = []
        required: dict[str, int] = {}
        cursor = 0

        for keyword in sequence:
            required[keyword] = required.get(keyword, 0) + 1
            position = find_keyword(upper, keyword, cursor)

            if position == -1:
                previous = matches[-1].keyword if matches else None
                if previous is not None and count_keyword(upper, keyword) >= required[keyword]:
                    return self._failure(
                        ErrorCode.INVALID_KEYWORD_ORDER,
                        InstructionError.keyword_out_of_order(keyword, previous),
                        keyword=keyword,
                    )
                return self._failure(
                    ErrorCode.MISSING_KEYWORD,
                    InstructionError.missing_keyword(keyword, previous),
                    keyword=keyword,
                )

            match = KeywordMatch(keyword=keyword, position=position)
            logger.debug("instruction_keyword_located", keyword=keyword, position=position)
            matches.append(match)
            cursor = match.end

        return Success(value=matches)

    def _check_order(
        self, matches: list[KeywordMatch]
    ) -> Result[None, InstructionSyntaxError]:
        for previous, current in zip(matches, matches[1:]):
            if current.position <= previous.position:
                return self._failure(
                    ErrorCode.INVALID_KEYWORD_ORDER,
                    InstructionError.INVALID_KEYWORD_ORDER,
                    keyword=current.keyword,
                )
        return Success(value=None)

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def _extract(
        self,
        normalized: str,
        instruction_type: InstructionType,
        matches: list[KeywordMatch],
        date_position: int,
    ) -> Result[DraftTransfer, InstructionSyntaxError]:
        # matches: type, kw, ACCOUNT, FOR, kw, kw, ACCOUNT
        type_match, after_type, first_account, for_match = matches[:4]
        second_account = matches[6]

        tokens = normalized[type_match.end : after_type.position].split()
        if len(tokens) != 2:
            return self._failure(
                ErrorCode.MALFORMED_INSTRUCTION,
                InstructionError.missing_amount_and_currency(instruction_type.value),
            )
        amount, currency = tokens[0], tokens[1].upper()

        first_id = normalized[first_account.end : for_match.position].strip()
        if date_position == -1:
            second_id = normalized[second_account.end :].strip()
            execute_on = None
        else:
            second_id = normalized[second_account.end : date_position].strip()
            execute_on = normalized[date_position + len(DATE_KEYWORD) :].strip()

        if instruction_type is InstructionType.DEBIT:
            debit_account_id, credit_account_id = first_id, second_id
        else:
            credit_account_id, debit_account_id = first_id, second_id

        return Success(
            value=DraftTransfer(
                type=instruction_type,
                amount=amount,
                currency=currency,
                debit_account_id=debit_account_id,
                credit_account_id=credit_account_id,
                execute_on=execute_on,
            )
        )

    @staticmethod
    def _failure(
        code: ErrorCode, message: str, keyword: str | None = None
    ) -> Failure[InstructionSyntaxError]:
        return Failure(
            error=InstructionSyntaxError(code=code, message=message, keyword=keyword)
        )
