"""Domain errors raised by the matching services."""


class MatchingError(Exception):
    """Base class for matching errors."""
    pass


class FamilyNotFoundError(MatchingError):
    """Raised when a family profile does not exist."""

    def __init__(self, family_user_id: str, message: str = "Family user not found"):
        super().__init__(message)
        self.family_user_id = family_user_id


class CaregiverNotFoundError(MatchingError):
    """Raised when a caregiver profile does not exist."""

    def __init__(self, caregiver_id: str, message: str = "Caregiver not found"):
        super().__init__(message)
        self.caregiver_id = caregiver_id


class PersistenceError(MatchingError):
    """Raised when the datastore rejects a read or write."""
    pass


class IdempotencyConflictError(MatchingError):
    """Raised when an idempotency key is reused for a different family."""

    def __init__(self, idempotency_key: str, message: str = "Idempotency key already used for another family"):
        super().__init__(message)
        self.idempotency_key = idempotency_key
