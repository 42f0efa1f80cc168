"""Exception types raised by buildmeta."""


class BuildMetaError(Exception):
    """Base class for buildmeta errors."""


class UnsupportedLanguageError(BuildMetaError, ValueError):
    """Raised when a language identifier has no registered profile."""

    def __init__(self, language: str | None, available: list[str]):
        self.language = language
        self.available = available
        super().__init__(f"Unknown language '{language}'. Available: {available}")


class RequiredAttributeError(BuildMetaError, ValueError):
    """Raised when a required artifact attribute is missing."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f"The {attribute} attribute is required")
