class ProductFetchError(Exception):
    """Raised by a product source when the product list cannot be obtained.

    Transport failures, non-success statuses and unparseable bodies all surface
    as this one type; the original cause is chained on ``__cause__``.
    """

    def __init__(self, message: str = "Failed to fetch products") -> None:
        super().__init__(message)
        self.message = message
