"""Exception hierarchy raised across the onboarding flow."""


class OnboardingError(Exception):
    """Base exception for all onboarding errors."""


class InvalidAccountError(OnboardingError):
    """Raised when an account is missing or not in a state the operation accepts."""


class PersistenceError(OnboardingError):
    """Raised when a repository cannot store an account."""


class DuplicateAccountError(PersistenceError):
    """Raised when an account with the same identifier is already stored."""


class NotificationError(OnboardingError):
    """Raised when a welcome notification cannot be dispatched."""
