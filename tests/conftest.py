import matplotlib

matplotlib.use("Agg")

import pytest

from smartcommerce.data_access.loader import load_products
from smartcommerce.models.product import Product


class FixedRandom:
    """Random source that always returns the same draw."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def make_product(product_id, name="", category="Misc", description="", features=(), price=10.0):
    return Product(
        product_id=product_id,
        name=name,
        category=category,
        price=price,
        description=description,
        features=tuple(features),
    )


@pytest.fixture
def headphones():
    return make_product(
        "hp",
        name="Studio Headphones",
        category="Electronics",
        description="Over-ear wireless headphones",
        features=["Wireless", "Noise Canceling"],
    )


@pytest.fixture
def sport_watch():
    return make_product(
        "sw",
        name="Sport Watch",
        category="Electronics",
        description="Wireless sport watch with GPS",
        features=["Wireless", "GPS"],
    )


@pytest.fixture
def mug():
    return make_product(
        "mug",
        name="Ceramic Mug",
        category="Kitchen",
        description="Glazed tea cup",
        features=["Dishwasher Safe"],
    )


@pytest.fixture
def kettle():
    return make_product(
        "kettle",
        name="Steel Kettle",
        category="Kitchen",
        description="Stovetop kettle for water",
        features=["Stovetop"],
    )


@pytest.fixture
def scarf():
    return make_product(
        "scarf",
        name="Wool Scarf",
        category="Apparel",
        description="Knitted winter scarf",
        features=["Hand Knit"],
    )


@pytest.fixture
def catalog():
    return load_products()
