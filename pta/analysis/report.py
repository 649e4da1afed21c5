from typing import List

import pandas as pd

from pta.analysis.analyzer import Analyzer, DatasetStats, Opportunity, TrendCluster
from pta.config import Settings, settings as default_settings
from pta.models import Product


def _rank_text(product: Product) -> str:
    return str(product.sales_rank) if product.has_known_rank else "unknown"


def stats_frame(stats: DatasetStats) -> pd.DataFrame:
    return pd.DataFrame(
        [
            ("Products", stats.product_count),
            ("Nodes", stats.node_count),
            ("Connections", stats.edge_count),
            ("Avg connections per product", f"{stats.average_out_degree:.2f}"),
        ],
        columns=["metric", "value"],
    )


def ranking_frame(products: List[Product], analyzer: Analyzer) -> pd.DataFrame:
    rows = [
        {
            "rank": i,
            "asin": p.asin,
            "title": p.title,
            "category": p.group,
            "sales_rank": _rank_text(p),
            "connections": analyzer.graph.out_degree(p.asin),
        }
        for i, p in enumerate(products, start=1)
    ]
    return pd.DataFrame(rows, columns=["rank", "asin", "title", "category", "sales_rank", "connections"])


def cluster_frame(clusters: List[TrendCluster], preview: int) -> pd.DataFrame:
    """One row per previewed member; `cluster` numbers start at 1."""
    rows = [
        {"cluster": i, "size": c.size, "asin": p.asin, "title": p.title, "sales_rank": _rank_text(p)}
        for i, c in enumerate(clusters, start=1)
        for p in c.products[:preview]
    ]
    return pd.DataFrame(rows, columns=["cluster", "size", "asin", "title", "sales_rank"])


def opportunity_frame(opportunities: List[Opportunity]) -> pd.DataFrame:
    rows = [
        {
            "rank": i,
            "asin": o.product.asin,
            "title": o.product.title,
            "category": o.product.group,
            "sales_rank": o.product.sales_rank,
            "score": round(o.score, 2),
        }
        for i, o in enumerate(opportunities, start=1)
    ]
    return pd.DataFrame(rows, columns=["rank", "asin", "title", "category", "sales_rank", "score"])


def _section(title: str, frame: pd.DataFrame, empty_message: str) -> str:
    body = empty_message if frame.empty else frame.to_string(index=False)
    return f"\n{title}\n{'-' * len(title)}\n{body}"


def render_report(analyzer: Analyzer, settings: Settings = default_settings) -> str:
    """Console report: statistics, top products, sample clusters, opportunities."""
    clusters = analyzer.detect_trend_clusters(settings.min_cluster_size)[: settings.cluster_samples]
    parts = [
        "Amazon Product Trend Analyzer",
        _section("Dataset Statistics", stats_frame(analyzer.summary_statistics()), "Empty dataset."),
        _section(
            f"Top {settings.top_n} Products by Connections",
            ranking_frame(analyzer.rank_by_connections(settings.top_n), analyzer),
            "No products found with connections.",
        ),
        _section(
            f"Trend Clusters (min size {settings.min_cluster_size})",
            cluster_frame(clusters, settings.cluster_preview),
            "No trend clusters found.",
        ),
        _section(
            "Best Market Opportunities",
            opportunity_frame(analyzer.find_low_competition_products(settings.top_n)),
            "No low competition products found.",
        ),
    ]
    return "\n".join(parts) + "\n"
