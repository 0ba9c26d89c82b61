"""Domain-level exceptions.

Only value objects and input-parsing use cases raise these. Cart and order
operations never do: bad input there degrades to a silent no-op.
The CLI layer catches DomainException uniformly and turns it into a
user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or invariant was violated."""
