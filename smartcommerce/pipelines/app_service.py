from typing import List, Dict, Any, Optional
import matplotlib.pyplot as plt

from smartcommerce.config.settings import ALL_CATEGORIES, DEFAULT_TOP_N
from smartcommerce.models.product import Product, Recommendation
from smartcommerce.data_access.loader import load_products
from smartcommerce.core.catalog import filter_products, list_categories
from smartcommerce.core.ranking import rank
from smartcommerce.core.similarity import analyze
from smartcommerce.core.visualize import visualize_recommendations
from smartcommerce.utils.exceptions import ProductNotFoundError
from smartcommerce.utils.logger import logger

class AppService:
    """High-level service used by Streamlit app."""

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self.products: List[Product] = products if products is not None else load_products()
        self._by_id: Dict[str, Product] = {p.product_id: p for p in self.products}

    def list_categories(self) -> List[str]:
        return list_categories(self.products)

    def filter_products(self, query: str = "", category: str = ALL_CATEGORIES) -> List[Product]:
        return filter_products(self.products, query, category)

    def get_product(self, product_id: str) -> Product:
        product = self._by_id.get(product_id)
        if product is None:
            logger.error(f"Unknown product id: {product_id}")
            raise ProductNotFoundError(f"Unknown product id: {product_id}")
        return product

    def recommend(self, product_id: str, top_n: Optional[int] = None, rng=None) -> Dict[str, Any]:
        selected = self.get_product(product_id)
        recs = rank(selected, self.products, top_n if top_n is not None else DEFAULT_TOP_N, rng)

        others = [p for p in self.products if p.product_id != selected.product_id]
        if not others:
            message = "No other products to compare against."
        else:
            message = f"Showing {len(recs)} of {len(others)} products similar to {selected.name}."

        if recs:
            analysis = recs[0].analysis
        else:
            # Breakdown against the first other product, or the selection itself in a one-item catalog.
            analysis = analyze(selected, others[0] if others else selected, rng)

        return {
            "selected": selected,
            "recommendations": recs,
            "analysis": analysis,
            "message": message,
        }

    def build_visualization(self, selected: Product, recs: List[Recommendation]) -> Optional[plt.Figure]:
        return visualize_recommendations(selected, recs)
