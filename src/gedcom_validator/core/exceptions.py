class ValidatorError(Exception):
    """Base exception for validator failures."""


class LoadError(ValidatorError):
    """Raised when a GEDCOM file cannot be turned into a record store."""


class ReportSinkError(ValidatorError):
    """Raised when findings cannot be appended to the report sink."""


class UnknownRuleError(ValidatorError):
    """Raised when a rule code is not in the catalog."""


class RecordNotFoundError(ValidatorError, KeyError):
    """Raised when an id does not resolve in the record store."""

    def __str__(self) -> str:
        return Exception.__str__(self)
