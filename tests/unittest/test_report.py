from dataclasses import replace

from conftest import make_dataset
from pta.analysis.analyzer import Analyzer
from pta.analysis.report import cluster_frame, opportunity_frame, ranking_frame, render_report, stats_frame
from pta.config import settings
from pta.graph import ProductGraph
from pta.models import Dataset


def _cycle():
    edges = [("A", "B"), ("B", "C"), ("C", "A"), ("A", "X")]
    return Analyzer(make_dataset(edges, {"A": 300, "B": None, "C": 900}))


def test_stats_frame():
    frame = stats_frame(_cycle().summary_statistics())
    assert dict(zip(frame["metric"], frame["value"])) == {
        "Products": 3,
        "Nodes": 4,
        "Connections": 4,
        "Avg connections per product": "1.00",
    }


def test_ranking_frame_shows_unknown_rank():
    analyzer = _cycle()
    frame = ranking_frame(analyzer.rank_by_connections(3), analyzer)
    assert list(frame["asin"]) == ["A", "B", "C"]
    assert list(frame["connections"]) == [2, 1, 1]
    assert frame.loc[frame["asin"] == "B", "sales_rank"].item() == "unknown"


def test_cluster_frame_limits_preview():
    frame = cluster_frame(_cycle().detect_trend_clusters(3), preview=2)
    assert list(frame["asin"]) == ["A", "B"]
    assert set(frame["size"]) == {3}


def test_opportunity_frame():
    frame = opportunity_frame(_cycle().find_low_competition_products(5))
    assert list(frame["asin"]) == ["A", "C"]
    assert list(frame["score"]) == [150.0, 900.0]


def test_render_report_sections():
    text = render_report(_cycle(), replace(settings, min_cluster_size=3, top_n=2))
    assert "Dataset Statistics" in text
    assert "Top 2 Products by Connections" in text
    assert "Trend Clusters (min size 3)" in text
    assert "Best Market Opportunities" in text
    assert "No trend clusters found." not in text


def test_render_report_empty_sections():
    analyzer = Analyzer(Dataset(graph=ProductGraph(), products={}))
    text = render_report(analyzer, settings)
    assert "No products found with connections." in text
    assert "No trend clusters found." in text
    assert "No low competition products found." in text
