"""
Catalog module exceptions.
"""

from shared.exceptions import NotFoundError


class ProductNotFoundError(NotFoundError):
    """
    Raised when a product is missing or not active.

    The two cases are reported identically so that draft and archived
    products are not disclosed.
    """

    def __init__(self, product_id: str):
        super().__init__(
            "Product not found",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )
