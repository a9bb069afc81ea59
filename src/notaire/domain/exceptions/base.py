"""
Base domain exceptions.
"""


class NotaireException(Exception):
    """Base exception for all Notaire domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(NotaireException):
    """Raised when entity is not found in repository."""

    def __init__(self, entity_type: str, entity_id: str):
        message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class ValidationError(NotaireException):
    """Raised when entity validation fails."""

    def __init__(self, field: str, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")


class ConfigurationError(NotaireException):
    """Raised when required configuration is missing or inconsistent."""

    def __init__(self, setting: str, reason: str):
        message = f"Invalid configuration for {setting}: {reason}"
        super().__init__(message, code="CONFIGURATION_ERROR")
        self.setting = setting
