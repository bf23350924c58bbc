import logging
from pathlib import Path
from typing import Dict, List

import yaml

logger = logging.getLogger(__name__)

SERVERS_FILE = Path("config/servers.yaml")


def load_dhcp_servers(path: Path = SERVERS_FILE) -> List[Dict]:
    """
    Читает список DHCP-серверов:

        DHCP_servers:
          - server: dhcp01.example.local
            scopes: [10.19.10.0, 10.19.12.0]
    """
    path = Path(path)
    if not path.exists():
        logger.warning("%s не найден — DHCP отключён", path)
        return []

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("%s пустой — DHCP отключён", path)
        return []

    servers = []
    for entry in data.get("DHCP_servers") or []:
        if not entry.get("server"):
            logger.warning("Пропущена запись без server: %s", entry)
            continue
        servers.append({"server": str(entry["server"]), "scopes": [str(s) for s in entry.get("scopes") or []]})
    return servers
