# pta/app.py
from functools import lru_cache
from typing import List

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from config.logging_config import get_logger
from pta.analysis.analyzer import Analyzer
from pta.config import settings
from pta.errors import DatasetError
from pta.ingest.loader import load_dataset
from pta.models import Product

logger = get_logger(__name__)

app = FastAPI(title="Amazon Product Trend Analyzer")


class ProductOut(BaseModel):
    asin: str
    title: str
    group: str
    sales_rank: int | None

    @classmethod
    def of(cls, p: Product) -> "ProductOut":
        return cls(asin=p.asin, title=p.title, group=p.group, sales_rank=p.sales_rank)


class StatsOut(BaseModel):
    product_count: int
    node_count: int
    edge_count: int
    average_out_degree: float


class ClusterOut(BaseModel):
    size: int
    products: List[ProductOut]


class OpportunityOut(BaseModel):
    product: ProductOut
    score: float


@lru_cache(maxsize=1)
def get_analyzer() -> Analyzer:
    """Load the dump once per process."""
    return Analyzer(load_dataset(settings.data_path))


def _analyzer() -> Analyzer:
    try:
        return get_analyzer()
    except DatasetError as e:
        logger.error(f"Dataset unavailable: {e}")
        raise HTTPException(status_code=503, detail=str(e))


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/stats", response_model=StatsOut)
def stats():
    s = _analyzer().summary_statistics()
    return StatsOut(
        product_count=s.product_count,
        node_count=s.node_count,
        edge_count=s.edge_count,
        average_out_degree=s.average_out_degree,
    )


@app.get("/products/top", response_model=List[ProductOut])
def top_products(limit: int = Query(settings.top_n, ge=0)):
    return [ProductOut.of(p) for p in _analyzer().rank_by_connections(limit)]


@app.get("/clusters", response_model=List[ClusterOut])
def clusters(min_size: int = Query(settings.min_cluster_size, ge=1)):
    return [
        ClusterOut(size=c.size, products=[ProductOut.of(p) for p in c.products])
        for c in _analyzer().detect_trend_clusters(min_size)
    ]


@app.get("/opportunities", response_model=List[OpportunityOut])
def opportunities(top_n: int = Query(settings.top_n, ge=0)):
    return [
        OpportunityOut(product=ProductOut.of(o.product), score=o.score)
        for o in _analyzer().find_low_competition_products(top_n)
    ]
