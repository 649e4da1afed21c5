"""Parse an Amazon-style product metadata dump into a `Dataset`.

The dump is a sequence of blank-line separated blocks:

    ASIN: 0827229534
      title: Patterns of Preaching: A Sermon Sampler
      group: Book
      salesrank: 396585
      similar: 5  0804215715  156101074X  0687023955  0687074231  082721619X

Lines are matched by prefix after stripping surrounding whitespace, and
anything unrecognised is skipped. The parser is lenient: a block without a
title is dropped, an unparseable rank becomes unknown, and the count on a
`similar:` line is never checked against the ids that follow it.
"""
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable

from config.logging_config import get_logger, log_function_call
from pta.errors import EmptyDataset, SourceNotFound
from pta.graph import ProductGraph
from pta.models import Dataset, Product

logger = get_logger(__name__)

ASIN_PREFIX = "ASIN:"
TITLE_PREFIX = "title:"
GROUP_PREFIX = "group:"
SALESRANK_PREFIX = "salesrank:"
SIMILAR_PREFIX = "similar:"


def _parse_rank(raw: str, asin: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        logger.debug(f"Unparseable salesrank {raw!r} for {asin}; treating rank as unknown")
        return None


@dataclass
class _Draft:
    """A product whose block is still being read."""

    asin: str
    title: str = ""
    group: str = ""
    sales_rank: int | None = None

    @property
    def complete(self) -> bool:
        return bool(self.title)

    def to_product(self) -> Product:
        return Product(asin=self.asin, title=self.title, group=self.group, sales_rank=self.sales_rank)


class DatasetBuilder:
    """Line-at-a-time state machine that accumulates the graph and the registry."""

    def __init__(self):
        self.graph = ProductGraph()
        self.products: Dict[str, Product] = {}
        self.current: _Draft | None = None

    # -------- Registry / graph --------

    def _register(self, draft: _Draft) -> None:
        # first writer wins
        if draft.asin not in self.products:
            self.products[draft.asin] = draft.to_product()
        self.graph.add_node(draft.asin)

    def _finish_current(self) -> None:
        if self.current is not None and self.current.complete:
            self._register(self.current)
        self.current = None

    def _link_similar(self, line: str) -> None:
        draft = self.current
        self._register(draft)
        # "similar:" and the declared count come first
        for similar_asin in line.split()[2:]:
            self.graph.add_node(similar_asin)
            self.graph.add_edge(draft.asin, similar_asin)

    # -------- Parsing --------

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()
        if not line:
            self._finish_current()
            return

        if line.startswith(ASIN_PREFIX):
            self._finish_current()
            asin = line[len(ASIN_PREFIX):].strip()
            self.current = _Draft(asin=asin) if asin else None
            return

        draft = self.current
        if draft is None:
            return

        if line.startswith(TITLE_PREFIX):
            draft.title = line[len(TITLE_PREFIX):].strip()
        elif line.startswith(GROUP_PREFIX):
            draft.group = line[len(GROUP_PREFIX):].strip()
        elif line.startswith(SALESRANK_PREFIX):
            draft.sales_rank = _parse_rank(line[len(SALESRANK_PREFIX):].strip(), draft.asin)
        elif line.startswith(SIMILAR_PREFIX):
            self._link_similar(line)

    def build(self) -> Dataset:
        self._finish_current()
        return Dataset(graph=self.graph, products=self.products)


def parse_lines(lines: Iterable[str]) -> Dataset:
    """Run the block parser over `lines`; may return an empty dataset."""
    builder = DatasetBuilder()
    for line in lines:
        builder.feed(line)
    return builder.build()


@log_function_call(logger)
def load_dataset(file_path: str | os.PathLike) -> Dataset:
    """
    Load a product dump from `file_path`.

    Raises:
        SourceNotFound: the path does not exist, is not a regular file, or cannot be read.
        EmptyDataset: parsing finished without registering a single product.
    """
    path = Path(file_path)
    if not path.is_file():
        raise SourceNotFound(str(path))

    timer = time.perf_counter()
    logger.info(f"Loading dataset from: {path}")
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            dataset = parse_lines(f)
    except OSError as e:
        raise SourceNotFound(str(path)) from e

    if dataset.product_count == 0:
        raise EmptyDataset(str(path))

    logger.info(f"Dataset loaded in {time.perf_counter() - timer:.2f} seconds")
    logger.info(
        f"Products processed: {dataset.product_count}, "
        f"connections established: {dataset.graph.edge_count()}"
    )
    return dataset
