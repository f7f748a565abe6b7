"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction record is not in a shape the engine can read"""

    pass


class InsightsGenerationError(DomainException):
    """Report could not be produced from the supplied transactions"""

    pass
