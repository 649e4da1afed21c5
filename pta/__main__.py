import argparse
from dataclasses import replace
import sys

import uvicorn

from config.logging_config import get_logger
from pta.analysis.analyzer import Analyzer
from pta.analysis.report import render_report
from pta.config import settings
from pta.errors import DatasetError
from pta.ingest.loader import load_dataset

logger = get_logger("pta")


def analyze(args) -> int:
    run_settings = replace(
        settings,
        data_path=args.data or settings.data_path,
        top_n=args.top if args.top is not None else settings.top_n,
        min_cluster_size=args.min_cluster_size if args.min_cluster_size is not None else settings.min_cluster_size,
        cluster_samples=args.clusters if args.clusters is not None else settings.cluster_samples,
    )
    try:
        dataset = load_dataset(run_settings.data_path)
    except DatasetError as e:
        logger.error(f"Fatal error: {e}")
        return 1
    print(render_report(Analyzer(dataset, max_sales_rank=run_settings.max_sales_rank), run_settings), end="")
    return 0


def main(argv=None) -> int:
    p = argparse.ArgumentParser("pta")
    sub = p.add_subparsers(dest="cmd", required=True)

    a = sub.add_parser("analyze", help="load a dump and print the trend report")
    a.add_argument("--data", help=f"product dump to read (default: {settings.data_path})")
    a.add_argument("--top", type=int, help="products shown in the ranking and opportunity sections")
    a.add_argument("--min-cluster-size", type=int)
    a.add_argument("--clusters", type=int, help="number of sample clusters shown")

    sub.add_parser("run-server")

    args = p.parse_args(argv)
    if args.cmd == "analyze":
        return analyze(args)
    elif args.cmd == "run-server":
        uvicorn.run("pta.app:app", host=settings.api_host, port=settings.api_port, reload=False)
    return 0

if __name__ == "__main__":
    sys.exit(main())
