class AssistantError(Exception):
    """Base class for application assistant failures"""


class InvalidInput(AssistantError, ValueError):
    """Raised when a required field is missing, empty or too long.

    Detected before any call to the completion provider.
    """


class CompletionFailed(AssistantError):
    """Raised when the completion provider call itself fails"""


class ParseFailed(AssistantError):
    """Raised when completion content cannot be read as the expected structure"""
