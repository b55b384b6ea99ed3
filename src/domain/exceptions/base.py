"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Business denials are verdicts, not exceptions. Domain exceptions are
    reserved for malformed input and failing collaborators.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
