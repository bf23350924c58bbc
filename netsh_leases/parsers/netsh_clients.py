import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from netsh_leases.exceptions import (
    AmbiguousMatchError,
    LeaseParseError,
    MalformedLineError,
    MissingFieldError,
)
from netsh_leases.models.lease import LeaseBatch, LeaseRecord, LeaseType, LineFailure
from netsh_leases.parsers.base_parser import BaseParser
from netsh_leases.parsers.layout import (
    FIELD_DELIMITER,
    FOOTER_LINES,
    HEADER_LINES,
    LEASE_EXPIRATION_OFFSET,
    LEASE_TYPE_PATTERN,
    MAC_ADDRESS_PATTERN,
    ZERO_RECORDS_PATTERN,
)
from netsh_leases.parsers.registry import register_parser
from netsh_leases.utils.text import NOT_FOUND, nth_occurrence

logger = logging.getLogger(__name__)


# ============================================================
# Выбор строк данных
# ============================================================

def select_data_rows(lines: List[str]) -> List[str]:
    """Отрезает фиксированную шапку и подвал отчёта по индексам (см. layout)."""
    if len(lines) <= HEADER_LINES + FOOTER_LINES:
        return []
    return list(lines[HEADER_LINES:len(lines) - FOOTER_LINES])


# ============================================================
# Извлечение полей из строки данных
# ============================================================

def extract_ip_address(line: str) -> str:
    end = line.find(FIELD_DELIMITER)
    if end == NOT_FOUND:
        raise MalformedLineError("Нет разделителя после IP-адреса", line)
    return line[:end].strip()


def extract_subnet_mask(line: str) -> str:
    start = nth_occurrence(line, FIELD_DELIMITER, 1)
    end = nth_occurrence(line, FIELD_DELIMITER, 2)
    if start == NOT_FOUND or end == NOT_FOUND:
        raise MalformedLineError("Нет колонки маски подсети", line)
    return line[start + 1:end].strip()


def _single_match(pattern, line: str, field: str):
    matches = list(pattern.finditer(line))
    if len(matches) > 1:
        found = ", ".join(m.group(0) for m in matches)
        raise AmbiguousMatchError(f"Найдено несколько значений {field}: {found}", line)
    return matches[0] if matches else None


def extract_mac_address(line: str) -> Optional[str]:
    # MAC сам содержит "-", поэтому ищется шаблоном, а не по разделителям
    match = _single_match(MAC_ADDRESS_PATTERN, line, "MAC")
    return match.group(0) if match else None


def extract_lease_expiration(line: str) -> str:
    if len(line) <= LEASE_EXPIRATION_OFFSET:
        raise MalformedLineError(
            f"Строка короче смещения колонки Lease Expires ({LEASE_EXPIRATION_OFFSET})", line
        )
    end = line.find(FIELD_DELIMITER, LEASE_EXPIRATION_OFFSET)
    if end == NOT_FOUND:
        raise MalformedLineError("Нет разделителя после колонки Lease Expires", line)
    return line[LEASE_EXPIRATION_OFFSET:end].strip()


def extract_lease_type(line: str) -> Optional[str]:
    match = _single_match(LEASE_TYPE_PATTERN, line, "типа")
    return match.group(1) if match else None


def extract_name(line: str) -> str:
    start = line.rfind(FIELD_DELIMITER)
    if start == NOT_FOUND:
        return ""
    return line[start + 1:].strip()


# ============================================================
# Сборка записей
# ============================================================

def is_skipped_line(line: Optional[str]) -> bool:
    """Пустые строки и итог пустого scope ("0 in the Scope") записей не дают."""
    if not line or not line.strip():
        return True
    return ZERO_RECORDS_PATTERN.search(line) is not None


def build_lease_record(line: str) -> LeaseRecord:
    ip_address = extract_ip_address(line)
    subnet_mask = extract_subnet_mask(line)
    mac_address = extract_mac_address(line)
    lease_expiration = extract_lease_expiration(line)
    type_code = extract_lease_type(line)
    name = extract_name(line)

    if not ip_address:
        raise MissingFieldError("Пустой IP-адрес", line)
    if mac_address is None:
        raise MissingFieldError("MAC-адрес не найден", line)
    if type_code is None:
        raise MissingFieldError("Тип аренды не найден", line)

    try:
        lease_type = LeaseType(type_code)
    except ValueError:
        raise MalformedLineError(f"Неизвестный тип аренды: {type_code}", line) from None

    try:
        return LeaseRecord(
            ip_address=ip_address,
            subnet_mask=subnet_mask,
            mac_address=mac_address,
            lease_expiration=lease_expiration,
            type=lease_type,
            name=name,
        )
    except ValidationError as e:
        raise MalformedLineError(f"Запись не прошла валидацию: {e}", line) from e


def parse_lease_lines(lines: Iterable[str]) -> LeaseBatch:
    """
    Разбирает полный вывод show clients (список строк) в LeaseBatch.
    Ошибки по строкам не прерывают разбор: они копятся в failures,
    решение (падать или пропускать) остаётся за вызывающим.
    """
    records: List[LeaseRecord] = []
    failures: List[LineFailure] = []

    rows = select_data_rows(list(lines))
    for number, line in enumerate(rows, start=1):
        if is_skipped_line(line):
            continue
        try:
            records.append(build_lease_record(line))
        except LeaseParseError as e:
            logger.debug("[NETSH PARSER] Строка %d не разобрана: %s", number, e)
            failures.append(LineFailure(line_number=number, line=line, error=e))

    logger.debug("[NETSH PARSER] Спарсено leases: %d, ошибок: %d", len(records), len(failures))
    return LeaseBatch(records=records, failures=failures)


def report_line_number(failure: LineFailure) -> int:
    """Номер строки (с единицы) в полном выводе netsh, вместе с шапкой."""
    return HEADER_LINES + failure.line_number


def parse_report(raw_text: str) -> LeaseBatch:
    return parse_lease_lines(raw_text.splitlines())


class NetshClientsParser(BaseParser):
    command_marker = "show clients"

    @classmethod
    def parse(cls, command: str, raw_text: str, vendor: str = None) -> Dict[str, Any]:
        if not cls.accepts(command):
            return {}

        batch = parse_report(raw_text)
        return {
            "dhcp_clients": [record.model_dump(mode="json") for record in batch.records],
            "errors": [
                {
                    "line_number": f.line_number,  # среди строк данных
                    "report_line": report_line_number(f),  # в raw-файле
                    "line": f.line,
                    "error": str(f.error),
                }
                for f in batch.failures
            ],
        }


# Регистрация (должна быть в конце файла)
register_parser("netsh", "show_clients", NetshClientsParser.parse)
