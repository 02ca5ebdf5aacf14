"""Centralized failure kinds for text pipeline contracts.

Preconditions and postconditions fail with different exception families.
Callers recover from precondition errors; they never recover from a
ContractViolation.
"""


class PreconditionError(Exception):
    """Base class for caller-facing precondition failures.

    Raised before an operation does any work. The input is the problem,
    not the operation.
    """
    pass


class NullInputError(PreconditionError, TypeError):
    """Raised when no input was provided at all (``None``).

    Always a caller bug. Distinct from InvalidArgumentError so callers can
    tell "nothing provided" apart from "provided but blank".
    """
    pass


class InvalidArgumentError(PreconditionError, ValueError):
    """Raised when input is present but fails the non-blank precondition.

    Expected and recoverable: the caller should ask for different input.
    """
    pass


class ContractViolation(RuntimeError):
    """Raised when an operation breaks its own postcondition.

    This indicates a bug in the operation, not bad user input. It is not
    a PreconditionError.

    Key distinction:
    - NullInputError / InvalidArgumentError: caller error (recoverable)
    - ContractViolation: operation bug (programmer error, fatal)
    """
    pass
