import os

# Number of recommendations shown for a selected product.
DEFAULT_TOP_N = int(os.environ.get("SMARTCOMMERCE_TOP_N", "3"))

# Category filter value that disables category filtering.
ALL_CATEGORIES = "all"
