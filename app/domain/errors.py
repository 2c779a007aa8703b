"""
Storefront domain errors. Routers map them to HTTP status codes.
The pricing and recommendation engines never raise these.
"""


class StorefrontError(Exception):
    """Base class for storefront failures the caller can act on."""
    status_code = 400


class ProductNotFoundError(StorefrontError):
    """Raised when a product id does not exist in the catalog."""
    status_code = 404

    def __init__(self, product_id: str):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class InvalidProductError(ProductNotFoundError):
    """Raised when a cart operation names a product that does not exist."""
    status_code = 400


class EmptyCartError(StorefrontError):
    """Raised when checking out with nothing in the cart."""

    def __init__(self):
        super().__init__("Cart is empty")


class CartUnavailableError(StorefrontError):
    """Raised when the cart store (Redis) is not configured or unreachable."""
    status_code = 503

    def __init__(self):
        super().__init__("Cart store unavailable")


class CartBusyError(StorefrontError):
    """Raised when another request kept the user's cart locked for too long."""
    status_code = 409

    def __init__(self):
        super().__init__("Cart is busy, try again")
