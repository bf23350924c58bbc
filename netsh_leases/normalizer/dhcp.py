import logging
from typing import Dict, Any, List

from pydantic import ValidationError

from netsh_leases.models.dhcp import DhcpEntry
from netsh_leases.models.lease import INACTIVE, NEVER_EXPIRES, LeaseType

logger = logging.getLogger(__name__)


def clean_mac(mac: str) -> str:
    return mac.replace("-", "").replace(":", "").replace(".", "").lower()


def lease_status(expiration: str | None) -> str:
    if not expiration:
        return "unknown"
    if expiration == INACTIVE:
        return "inactive"
    return "active"


class DhcpNormalizer:
    @classmethod
    def normalize_clients(cls, parsed_data: Dict[str, Any], server: str, scope: str) -> Dict[str, Any]:
        """
        Приводит вывод NetshClientsParser к формату инвентаря:
        MAC без разделителей, резервирования как type="reserved",
        status из колонки Lease Expires (INACTIVE -> "inactive"), lease_end только для дат.
        """
        entries = parsed_data.get("dhcp_clients", [])
        normalized: List[Dict] = []

        for entry in entries:
            is_reservation = entry.get("type") == LeaseType.RESERVATION.value
            expiration = entry.get("lease_expiration")
            norm = {
                "ip": entry.get("ip_address"),
                "mac": clean_mac(entry.get("mac_address") or ""),
                "hostname": entry.get("name") or None,
                "type": "reserved" if is_reservation else "lease",
                "status": lease_status(expiration),
                "lease_end": None if not expiration or expiration in (NEVER_EXPIRES, INACTIVE) else expiration,
                "dhcp_server": server,  # ← сохраняем для merge
                "scope": scope,
            }
            try:
                normalized.append(DhcpEntry(**norm).model_dump())
            except ValidationError as e:
                logger.warning("[DHCP] Ошибка валидации аренды %s: %s", norm["ip"], e)
                continue

        return {"dhcp_clients_normalized": normalized}
