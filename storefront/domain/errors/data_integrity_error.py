"""Data integrity fault.

Unlike every other error in the domain this one IS an exception. It signals
state that must never exist (a verification record whose account is gone)
and is raised so the unit of work rolls back and the failure escalates
instead of continuing in an inconsistent state.
"""


class DataIntegrityError(Exception):
    """Stored state violates a structural invariant.

    Attributes:
        entity: Type of the dangling reference.
        reference: Value that could not be resolved.
    """

    def __init__(self, message: str, *, entity: str, reference: str) -> None:
        super().__init__(message)
        self.entity = entity
        self.reference = reference
