from typing import List, Sequence

from smartcommerce.config.settings import ALL_CATEGORIES
from smartcommerce.models.product import Product

def list_categories(products: Sequence[Product]) -> List[str]:
    return sorted({p.category for p in products})

def matches_query(product: Product, query: str) -> bool:
    q = query.lower()
    if not q:
        return True
    return (
        q in product.name.lower()
        or q in product.description.lower()
        or any(q in f.lower() for f in product.features)
    )

def filter_products(
    products: Sequence[Product],
    query: str = "",
    category: str = ALL_CATEGORIES,
) -> List[Product]:
    return [
        p for p in products
        if matches_query(p, query)
        and (category == ALL_CATEGORIES or p.category == category)
    ]
