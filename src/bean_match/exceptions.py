"""Custom exceptions for bean-match."""


class BeanMatchError(Exception):
    """Base exception for bean-match."""

    pass


class UnknownCategoryError(BeanMatchError, ValueError):
    """Raised when a caller asks for a category the matcher does not know."""

    pass


class CatalogError(BeanMatchError):
    """Raised when a reference catalog cannot be loaded or is malformed."""

    pass
