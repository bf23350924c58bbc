from pydantic import BaseModel, Field
from typing import Optional, Literal

class DhcpEntry(BaseModel):
    ip: str
    mac: str = Field(..., pattern=r'^[0-9a-f]{12}$')  # чистим до 12 hex
    hostname: Optional[str] = None  # из колонки Name
    type: Literal["lease", "reserved"] = "lease"
    status: Literal["active", "inactive", "unknown"] = "unknown"
    lease_end: Optional[str] = None  # None для NEVER EXPIRES
    dhcp_server: Optional[str] = None
    scope: Optional[str] = None
    source: str = "netsh"  # откуда пришла запись
