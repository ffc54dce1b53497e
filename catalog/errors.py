"""
Exceptions raised by the catalog store and query engine.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class CatalogLoadError(CatalogError):
    """The catalog source is missing or malformed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to load catalog from {path}: {reason}")


class LookupMiss(CatalogError):
    """A lookup produced nothing the caller can return."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingParameterError(LookupMiss):
    """A required lookup parameter was not supplied."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Falta el parámetro {parameter}")
