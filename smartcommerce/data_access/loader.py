import json
from typing import List, Any, Optional
from smartcommerce.config.paths import PRODUCTS_PATH
from smartcommerce.models.product import Product
from smartcommerce.utils.exceptions import DataLoadError
from smartcommerce.utils.logger import logger

def _load_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"File not found: {path}")
        raise DataLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}")
        raise DataLoadError(f"Invalid JSON in {path}") from e

def _to_product(item: Any) -> Product:
    if not isinstance(item, dict):
        logger.error(f"Product record must be an object, got {type(item).__name__}")
        raise DataLoadError(f"Product record must be an object, got {type(item).__name__}")
    features = item.get("features", [])
    if not isinstance(features, list) or not all(isinstance(f, str) for f in features):
        logger.error(f"Malformed features in product record: {item.get('product_id', '<no id>')}")
        raise DataLoadError(f"Product features must be a list of strings, got {features!r}")
    try:
        return Product(**{**item, "features": tuple(features)})
    except TypeError as e:
        logger.error(f"Malformed product record: {item.get('product_id', '<no id>')}")
        raise DataLoadError(f"Malformed product record: {e}") from e

def load_products(path: Optional[str] = None) -> List[Product]:
    path = path or PRODUCTS_PATH
    raw = _load_json(path)
    if not isinstance(raw, list):
        logger.error(f"Expected a list of products in {path}")
        raise DataLoadError(f"Expected a list of products in {path}")
    products = [_to_product(item) for item in raw]
    logger.info(f"Loaded {len(products)} products from {path}")
    return products
