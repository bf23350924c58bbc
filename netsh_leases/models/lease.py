from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from netsh_leases.exceptions import LeaseParseError


# Колонка "Lease Expires" для аренд без срока (резервирования)
NEVER_EXPIRES = "NEVER EXPIRES"
# Неактивное резервирование (клиент не брал адрес)
INACTIVE = "INACTIVE"


class LeaseType(str, Enum):
    NONE = "N"
    DHCP = "D"
    BOOTP = "B"
    UNSPECIFIED = "U"
    RESERVATION = "R"


class LeaseRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    ip_address: str = Field(..., min_length=1)
    subnet_mask: str
    mac_address: str = Field(..., pattern=r"^[0-9A-Fa-f]{2}([:-][0-9A-Fa-f]{2}){5}$")  # регистр как в отчёте
    lease_expiration: str
    type: LeaseType
    name: str = ""

    @property
    def never_expires(self) -> bool:
        return self.lease_expiration == NEVER_EXPIRES


class LineFailure(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    line_number: int  # с единицы, среди строк данных (без шапки отчёта)
    line: str
    error: LeaseParseError


class LeaseBatch(BaseModel):
    """Результат разбора отчёта: удачные записи и ошибки по строкам, в порядке строк."""
    model_config = ConfigDict(frozen=True)

    records: List[LeaseRecord] = Field(default_factory=list)
    failures: List[LineFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def first_failure(self) -> Optional[LineFailure]:
        return self.failures[0] if self.failures else None

    def raise_for_failures(self) -> None:
        failure = self.first_failure()
        if failure is not None:
            raise failure.error
