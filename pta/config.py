from dataclasses import dataclass
import os
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = ROOT / "data"
SAMPLE_DATA = ROOT / "pta" / "data" / "sample-meta.txt"

@dataclass
class Settings:
    data_path: str = os.getenv("PTA_DATA_PATH", str(DATA_DIR / "amazon-meta.txt"))

    # report sizes
    top_n: int = int(os.getenv("PTA_TOP_N", "5"))
    min_cluster_size: int = int(os.getenv("PTA_MIN_CLUSTER_SIZE", "5"))
    cluster_samples: int = int(os.getenv("PTA_CLUSTER_SAMPLES", "3"))
    cluster_preview: int = int(os.getenv("PTA_CLUSTER_PREVIEW", "3"))

    # opportunity rank ceiling; values above 100000 are capped
    max_sales_rank: int = int(os.getenv("PTA_MAX_SALES_RANK", "100000"))

    api_host: str = os.getenv("PTA_API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PTA_API_PORT", "8000"))

settings = Settings()
