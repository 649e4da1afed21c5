from typing import Iterable, Iterator, List, Set

import networkx as nx


class ProductGraph:
    """Directed "similar item" graph keyed by asin.

    Thin wrapper over `nx.DiGraph` so the loader and analyzer only see the
    handful of operations they need. Adding a node or an edge twice is a no-op.
    Once frozen, any mutation raises `nx.NetworkXError`.
    """

    def __init__(self, edges: Iterable[tuple] = ()):
        self._g = nx.DiGraph()
        for a, b in edges:
            self.add_edge(a, b)

    # -------- Building --------

    def add_node(self, label: str) -> None:
        if label not in self._g:
            self._g.add_node(label)

    def add_edge(self, source: str, target: str) -> bool:
        """Add `source -> target`; returns False when the edge already existed."""
        if self._g.has_edge(source, target):
            return False
        self._g.add_edge(source, target)
        return True

    def freeze(self) -> "ProductGraph":
        nx.freeze(self._g)
        return self

    @property
    def is_frozen(self) -> bool:
        return nx.is_frozen(self._g)

    # -------- Queries --------

    def node_count(self) -> int:
        return self._g.number_of_nodes()

    def edge_count(self) -> int:
        return self._g.number_of_edges()

    def nodes(self) -> Iterator[str]:
        return iter(self._g.nodes)

    def contains_node(self, label: str) -> bool:
        return label in self._g

    def contains_edge(self, source: str, target: str) -> bool:
        return self._g.has_edge(source, target)

    def out_neighbors(self, label: str) -> Iterator[str]:
        if label not in self._g:
            return iter(())
        return iter(self._g.successors(label))

    def out_degree(self, label: str) -> int:
        if label not in self._g:
            return 0
        return self._g.out_degree(label)

    def strongly_connected_components(self) -> List[Set[str]]:
        """Kosaraju: DFS finishing order, then DFS over the reversed graph."""
        return [set(c) for c in nx.kosaraju_strongly_connected_components(self._g)]
