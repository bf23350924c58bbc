from netsh_leases.exceptions import (
    AmbiguousMatchError,
    LeaseParseError,
    MalformedLineError,
    MissingFieldError,
    NetshCommandError,
    NetshLeasesError,
)
from netsh_leases.leases import get_dhcp_leases
from netsh_leases.models.lease import LeaseBatch, LeaseRecord, LeaseType, LineFailure
from netsh_leases.parsers.netsh_clients import parse_lease_lines, parse_report

__version__ = "0.1.0"
