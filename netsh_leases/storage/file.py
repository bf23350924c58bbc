import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

DATA_DIR = Path("data")


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d_%H-%M-%S")


def _identifier(server: str, scope: str) -> str:
    return f"{server}_{scope}".replace("\\", "").replace("/", "_")


def save_raw_output(raw_text: str, server: str, scope: str, base_dir: Path = DATA_DIR) -> Path:
    output_dir = Path(base_dir) / "raw" / "dhcp"
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / f"{_identifier(server, scope)}_{_timestamp()}_show_clients.txt"
    path.write_text(raw_text, encoding="utf-8")
    logger.info("Сохранён raw: %s", path)
    return path


def save_parsed(parsed_data: Dict, server: str, scope: str, base_dir: Path = DATA_DIR) -> Path:
    output_dir = Path(base_dir) / "parsed" / "dhcp"
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / f"{_identifier(server, scope)}_{_timestamp()}_show_clients.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(parsed_data, f, ensure_ascii=False, indent=2)

    logger.info("Сохранён parsed: %s", path)
    return path


def save_snapshot(snapshot: Dict, base_dir: Path = DATA_DIR) -> Path:
    output_dir = Path(base_dir) / "snapshots" / "dhcp"
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / f"{_timestamp()}_dhcp_snapshot.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot, f, ensure_ascii=False, indent=2)

    logger.info("Сохранён snapshot: %s", path)
    return path
