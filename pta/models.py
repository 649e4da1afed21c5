from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from pta.graph import ProductGraph


@dataclass(frozen=True)
class Product:
    """A catalog item. `sales_rank` is None when the dump has no usable rank."""

    asin: str
    title: str = ""
    group: str = ""
    sales_rank: int | None = None

    @property
    def has_known_rank(self) -> bool:
        return self.sales_rank is not None


@dataclass(frozen=True)
class Dataset:
    """The relationship graph plus the asin -> Product registry of one dump.

    Both are frozen when the dataset is created; every registry key has a
    graph node, while the graph may hold ids that were only ever referenced.
    """

    graph: ProductGraph
    products: Mapping[str, Product] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.products, MappingProxyType):
            object.__setattr__(self, "products", MappingProxyType(dict(self.products)))
        if not self.graph.is_frozen:
            for asin in self.products:
                self.graph.add_node(asin)
            self.graph.freeze()
        missing = [asin for asin in self.products if not self.graph.contains_node(asin)]
        if missing:
            raise ValueError(f"products without a graph node: {sorted(missing)[:5]}")

    @property
    def product_count(self) -> int:
        return len(self.products)
