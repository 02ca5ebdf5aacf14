"""Presentation-neutral operation sessions.

A session holds the state a front end needs to drive one operation:
the current input, the last output, and the precondition/postcondition
flags shown as status indicators. The flags are re-derived from the same
predicates the operations enforce, never duplicated here.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from textpipe.contracts import (
    OPERATION_CONTRACTS,
    POSTCONDITIONS,
    ContractViolation,
    PreconditionError,
    has_visible_text,
)
from textpipe.pipeline.operations import get_operation

__all__ = ["OperationOutcome", "OperationSession", "indicator"]

logger = logging.getLogger(__name__)


def indicator(flag: bool) -> str:
    """Status indicator name for a contract flag."""
    return "green" if flag else "red"


@dataclass(frozen=True)
class OperationOutcome:
    """Result of one session execution.

    Exactly one of ``output`` and ``error_kind`` is set.
    """
    operation: str
    input_text: Optional[str]
    output: Optional[str]
    error_kind: Optional[str]
    error_message: Optional[str]
    precondition_satisfied: bool
    postcondition_satisfied: bool

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class OperationSession:
    """State and commands for a single text operation.

    Example usage::

        session = OperationSession("collapse_whitespace")
        session.input_text = "  hello    world  "
        outcome = session.execute()
        outcome.output                    # 'hello world'
        session.postcondition_satisfied   # True
    """

    def __init__(self, operation: str, input_text: Optional[str] = ""):
        self._func = get_operation(operation)
        self.operation = operation
        self._input_text = input_text
        self._output_text = ""
        self._executed = False

    @property
    def title(self) -> str:
        return OPERATION_CONTRACTS[self.operation]["title"]

    @property
    def contract(self) -> dict:
        return OPERATION_CONTRACTS[self.operation]

    @property
    def input_text(self) -> Optional[str]:
        return self._input_text

    @input_text.setter
    def input_text(self, value: Optional[str]) -> None:
        # New input invalidates the previous result
        self._input_text = value
        self._output_text = ""
        self._executed = False

    @property
    def output_text(self) -> str:
        return self._output_text

    @property
    def precondition_satisfied(self) -> bool:
        return has_visible_text(self._input_text)

    @property
    def postcondition_satisfied(self) -> bool:
        if not self._executed or not self._output_text:
            return False
        return POSTCONDITIONS[self.operation](self._input_text, self._output_text)

    def execute(self) -> OperationOutcome:
        """Run the operation on the current input.

        Precondition failures are captured in the outcome. A
        ContractViolation is logged and re-raised: it is an operation bug
        and must not be displayed as an ordinary result.
        """
        if not self.precondition_satisfied:
            kind = "NullInputError" if self._input_text is None else "InvalidArgumentError"
            logger.warning("%s: precondition not satisfied, operation not run", self.operation)
            return self._outcome(None, kind, "Precondition not satisfied: enter non-blank text")

        try:
            output = self._func(self._input_text)
        except PreconditionError as e:
            logger.warning("%s: %s", self.operation, e)
            self._executed = False
            return self._outcome(None, type(e).__name__, str(e))
        except ContractViolation as e:
            logger.critical("CRITICAL: %s contract violated: %s", self.operation, e)
            self._executed = False
            raise

        self._output_text = output
        self._executed = True
        logger.info("%s: %d -> %d chars", self.operation, len(self._input_text), len(output))
        return self._outcome(output, None, None)

    def describe_contract(self) -> str:
        """Human-readable rendering of the operation contract."""
        contract = self.contract
        valid_in, valid_out = contract["valid_example"]
        invalid_in, invalid_out = contract["invalid_example"]

        lines = [
            f"OPERATION: {contract['title']}",
            "",
            "PRECONDITION (Pre):",
            f"- {contract['precondition']}",
            "",
            "POSTCONDITION (Post):",
        ]
        lines.extend(f"- {item}" for item in contract["postconditions"])
        lines.extend([
            "",
            "EXAMPLES:",
            f"valid:   {valid_in!r} -> {valid_out!r}",
            f"invalid: {invalid_in!r} -> {invalid_out}",
        ])
        return "\n".join(lines)

    def _outcome(self, output, error_kind, error_message) -> OperationOutcome:
        return OperationOutcome(
            operation=self.operation,
            input_text=self._input_text,
            output=output,
            error_kind=error_kind,
            error_message=error_message,
            precondition_satisfied=self.precondition_satisfied,
            postcondition_satisfied=self.postcondition_satisfied,
        )
