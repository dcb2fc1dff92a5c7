from .products import Product, ProductList

__all__ = [
    "Product",
    "ProductList",
]
