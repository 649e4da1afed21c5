from dataclasses import dataclass
from typing import List, Tuple

from config.logging_config import get_logger, log_function_call
from pta.config import settings
from pta.models import Dataset, Product

logger = get_logger(__name__)

# settings can lower the opportunity rank ceiling, never raise it
RANK_CEILING = 100_000


@dataclass(frozen=True)
class DatasetStats:
    product_count: int
    node_count: int
    edge_count: int
    average_out_degree: float


@dataclass(frozen=True)
class TrendCluster:
    """Products that can all reach each other through "similar" links."""

    products: Tuple[Product, ...]

    @property
    def size(self) -> int:
        return len(self.products)

    @property
    def asins(self) -> List[str]:
        return [p.asin for p in self.products]


@dataclass(frozen=True)
class Opportunity:
    product: Product
    score: float


class Analyzer:
    """
    Read-only queries over a loaded `Dataset`.

    Every sort carries the asin as a secondary key so that repeated runs give
    the same order. Ids that only appear as similar-item references have a
    graph node but no `Product`; they shape degrees and components but never
    show up in a result.
    """

    def __init__(self, dataset: Dataset, max_sales_rank: int | None = None):
        self.dataset = dataset
        self.graph = dataset.graph
        self.products = dataset.products
        limit = settings.max_sales_rank if max_sales_rank is None else max_sales_rank
        self.max_sales_rank = min(limit, RANK_CEILING)

    def _known_products(self):
        for asin in self.graph.nodes():
            product = self.products.get(asin)
            if product is not None:
                yield asin, product

    @log_function_call(logger)
    def rank_by_connections(self, limit: int) -> List[Product]:
        """Top `limit` products by out-degree, highest first."""
        if limit <= 0:
            return []
        ranked = [(self.graph.out_degree(asin), product) for asin, product in self._known_products()]
        ranked.sort(key=lambda x: (-x[0], x[1].asin))
        return [product for _, product in ranked[:limit]]

    @log_function_call(logger)
    def detect_trend_clusters(self, min_size: int) -> List[TrendCluster]:
        """
        Strongly connected components holding at least `min_size` known products.

        Size is counted after dropping reference-only ids, so a component of five
        nodes with two unknown ids is a cluster of three. Largest clusters come
        first, ties broken by their smallest asin.
        """
        clusters: List[TrendCluster] = []
        for component in self.graph.strongly_connected_components():
            members = sorted(
                (self.products[asin] for asin in component if asin in self.products),
                key=lambda p: p.asin,
            )
            if not members or len(members) < min_size:
                continue
            clusters.append(TrendCluster(products=tuple(members)))

        clusters.sort(key=lambda c: (-c.size, c.products[0].asin))
        logger.debug(f"{len(clusters)} clusters with at least {min_size} products")
        return clusters

    def opportunity_score(self, product: Product) -> float:
        # lower is better: a good rank spread over many similar-item links
        connectivity = self.graph.out_degree(product.asin)
        return product.sales_rank / max(connectivity, 1)

    def _is_candidate(self, product: Product) -> bool:
        return product.has_known_rank and 0 < product.sales_rank <= self.max_sales_rank

    @log_function_call(logger)
    def find_low_competition_products(self, top_n: int) -> List[Opportunity]:
        """Products ranked within `max_sales_rank`, lowest opportunity score first."""
        if top_n <= 0:
            return []
        scored = [
            Opportunity(product=product, score=self.opportunity_score(product))
            for _, product in self._known_products()
            if self._is_candidate(product)
        ]
        scored.sort(key=lambda o: (o.score, o.product.asin))
        return scored[:top_n]

    def summary_statistics(self) -> DatasetStats:
        nodes = self.graph.node_count()
        edges = self.graph.edge_count()
        return DatasetStats(
            product_count=len(self.products),
            node_count=nodes,
            edge_count=edges,
            average_out_degree=edges / nodes if nodes else 0.0,
        )
