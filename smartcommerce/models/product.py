from dataclasses import dataclass, field
from typing import List, Optional, Tuple

@dataclass(frozen=True)
class Product:
    product_id: str
    name: str
    category: str
    price: float
    description: str = ""
    image: str = ""
    features: Tuple[str, ...] = ()
    rating: float = 0.0
    reviews: int = 0

@dataclass
class SimilarityAnalysis:
    bow_score: float
    tfidf_score: float
    word2vec_score: float
    overall_similarity: float
    key_terms: List[str] = field(default_factory=list)

@dataclass
class Recommendation:
    product: Product
    similarity: float
    method: str
    reasoning: str
    analysis: Optional[SimilarityAnalysis] = None
