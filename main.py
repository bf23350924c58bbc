import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv

from netsh_leases.collectors.netsh_collector import build_show_clients_command, collect_clients_raw, runner_from_env
from netsh_leases.config import load_dhcp_servers
from netsh_leases.exceptions import NetshLeasesError
from netsh_leases.normalizer.dhcp import DhcpNormalizer
from netsh_leases.parsers import get_parser
from netsh_leases.parsers.registry import registered_parsers
from netsh_leases.storage.file import DATA_DIR, save_parsed, save_raw_output, save_snapshot

logger = logging.getLogger("netsh_leases.main")


def setup_logging():
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def process_scope(server: str, scope: str, runner, base_dir: Path = DATA_DIR) -> dict:
    lines = collect_clients_raw(server, scope, runner=runner)
    raw_text = "\n".join(lines)
    save_raw_output(raw_text, server, scope, base_dir=base_dir)

    command = build_show_clients_command(server, scope)
    parser = get_parser("netsh", "show_clients")
    parsed = parser(command, raw_text, "netsh")
    save_parsed(parsed, server, scope, base_dir=base_dir)

    for error in parsed.get("errors", []):
        logger.warning("[DHCP] %s scope %s, строка отчёта %d: %s", server, scope, error["report_line"], error["error"])

    return DhcpNormalizer.normalize_clients(parsed, server, scope)


def collect_all(servers: List[Dict], runner, base_dir: Path = DATA_DIR) -> dict:
    """Обходит все scope всех серверов; ошибка одного scope не останавливает остальные."""
    all_entries = []
    errors = 0

    for entry in servers:
        server = entry["server"]
        for scope in entry["scopes"]:
            logger.info("=== %s scope %s ===", server, scope)
            try:
                normalized = process_scope(server, scope, runner, base_dir=base_dir)
            except NetshLeasesError as e:
                logger.error("Ошибка обработки %s scope %s: %s", server, scope, e)
                errors += 1
                continue
            all_entries.extend(normalized["dhcp_clients_normalized"])

    now = datetime.now(timezone.utc)
    return {
        "snapshot": {
            "id": now.isoformat(),
            "type": "dhcp_clients",
            "created_at": now.isoformat(),
            "schema_version": "1.0",
            "summary": {
                "servers_total": len(servers),
                "leases_total": len(all_entries),
                "errors": errors,
            },
        },
        "dhcp_clients": all_entries,
    }


def main():
    setup_logging()
    logger.info("Парсеры: %s", ", ".join(f"{source}/{slug}" for source, slug in registered_parsers()))

    servers = load_dhcp_servers()
    logger.info("Загружено DHCP-серверов: %d", len(servers))
    if not servers:
        return

    snapshot = collect_all(servers, runner_from_env())
    save_snapshot(snapshot)

    summary = snapshot["snapshot"]["summary"]
    logger.info("Всего аренд: %d, ошибок: %d", summary["leases_total"], summary["errors"])


if __name__ == "__main__":
    main()
