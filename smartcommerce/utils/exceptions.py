class SmartCommerceError(Exception):
    """Base exception for the project."""

class DataLoadError(SmartCommerceError):
    """Raised when the product catalog cannot be loaded."""

class ProductNotFoundError(SmartCommerceError):
    """Raised when a product id is not in the catalog."""
