"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidAmountError(ValidationError):
    """A monetary amount could not be parsed as a finite decimal number."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class MoneyArithmeticError(DomainException, ArithmeticError):
    """A monetary operation has no defined result (e.g. division by zero)."""


class IncompleteStepError(ValidationError):
    """One or more wizard steps still have invalid or missing fields."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{path}: {message}" for path, message in self.errors.items())
        super().__init__(f"Order is incomplete: {details}")
