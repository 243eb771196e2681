"""Exception hierarchy for php_getters_setters."""


class GettersSettersError(Exception):
    """Base exception for all php_getters_setters errors."""


class NotApplicableDocument(GettersSettersError):
    """Raised when the active document is not a PHP source file."""


class PropertyNotFound(GettersSettersError):
    """Raised when no property declaration is found above a selection."""


class MissingTemplate(GettersSettersError):
    """Raised when there is nothing to insert."""


class InsertionPointNotFound(GettersSettersError):
    """Raised when the closing brace of the class cannot be located."""


class EditApplicationFailed(GettersSettersError):
    """Raised when the host rejects or fails to apply an edit."""


class ConfigurationError(GettersSettersError):
    """Raised when a settings file cannot be read."""
