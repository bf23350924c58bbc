import logging
from typing import List

from netsh_leases.collectors.netsh_collector import collect_clients_raw
from netsh_leases.models.lease import LeaseRecord
from netsh_leases.parsers.netsh_clients import parse_lease_lines, report_line_number

logger = logging.getLogger(__name__)


def get_dhcp_leases(server: str, scope: str, *, runner=None, strict: bool = True) -> List[LeaseRecord]:
    """
    Аренды scope на DHCP-сервере в порядке строк отчёта.

    strict=True: первая же неразобранная строка поднимает её исключение
    (MalformedLineError / AmbiguousMatchError / MissingFieldError).
    strict=False: такие строки пропускаются с предупреждением в лог.
    """
    lines = collect_clients_raw(server, scope, runner=runner)
    batch = parse_lease_lines(lines)

    if strict:
        batch.raise_for_failures()
    else:
        for failure in batch.failures:
            logger.warning(
                "[DHCP] %s scope %s: пропущена строка отчёта %d (%s): %r",
                server, scope, report_line_number(failure), failure.error, failure.line,
            )

    logger.info("[DHCP] %s scope %s: аренд %d", server, scope, len(batch.records))
    return batch.records
