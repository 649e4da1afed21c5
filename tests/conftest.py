"""Shared fixtures: small dumps on disk and hand-built datasets."""

from pathlib import Path
from typing import Dict, Iterable, Tuple

import pytest

from pta.graph import ProductGraph
from pta.models import Dataset, Product


def product(asin: str, sales_rank: int | None = 1000) -> Product:
    return Product(asin=asin, title=f"Test {asin}", group="Electronics", sales_rank=sales_rank)


def make_dataset(edges: Iterable[Tuple[str, str]], products: Dict[str, int | None]) -> Dataset:
    """`products` maps asin -> sales rank; every other edge endpoint stays reference-only."""
    graph = ProductGraph(edges)
    return Dataset(graph=graph, products={asin: product(asin, rank) for asin, rank in products.items()})


@pytest.fixture
def write_dump(tmp_path):
    def _write(text: str, name: str = "meta.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_path() -> Path:
    from pta.config import SAMPLE_DATA

    return SAMPLE_DATA
