import pytest
from pydantic import ValidationError

from netsh_leases.exceptions import AmbiguousMatchError, MalformedLineError, MissingFieldError
from netsh_leases.models.lease import LeaseRecord, LeaseType
from netsh_leases.parsers.netsh_clients import (
    build_lease_record,
    extract_ip_address,
    extract_lease_expiration,
    extract_lease_type,
    extract_mac_address,
    extract_name,
    extract_subnet_mask,
    is_skipped_line,
    parse_lease_lines,
    parse_report,
    select_data_rows,
)

from tests.sample_reports import (
    HEADER,
    ROW_DATED,
    ROW_ONE,
    ROW_RESERVED,
    ROW_THREE,
    ROW_TWO,
    ROW_TWO_MACS,
    make_report,
)


# ============================================================
# Row selector
# ============================================================

def test_select_data_rows_drops_header_and_footer(sample_report_lines):
    assert select_data_rows(sample_report_lines) == [ROW_ONE, ROW_TWO, ROW_THREE]


def test_select_data_rows_empty_scope(empty_report_lines):
    assert select_data_rows(empty_report_lines) == []


def test_select_data_rows_short_input():
    assert select_data_rows([]) == []
    assert select_data_rows(HEADER) == []


# ============================================================
# Field extractors
# ============================================================

def test_extract_ip_address():
    assert extract_ip_address(ROW_ONE) == "10.19.10.8"


def test_extract_ip_address_without_delimiter():
    with pytest.raises(MalformedLineError):
        extract_ip_address("10.19.10.8 255.255.252.0")


def test_extract_subnet_mask():
    assert extract_subnet_mask(ROW_TWO) == "255.255.252.0"


def test_extract_subnet_mask_needs_three_segments():
    with pytest.raises(MalformedLineError):
        extract_subnet_mask("10.19.10.8 - 255.255.252.0")


def test_dashed_mac_does_not_confuse_ip_and_mask():
    # MAC 00-23-24-11-92-30 содержит пять "-"
    assert extract_ip_address(ROW_ONE) == "10.19.10.8"
    assert extract_subnet_mask(ROW_ONE) == "255.255.252.0"


@pytest.mark.parametrize("line, mac", [
    (ROW_ONE, "00-23-24-11-92-30"),
    (ROW_TWO, "24-be-05-04-b5-a5"),
    (ROW_RESERVED, "00:15:5D:01:0A:3D"),
])
def test_extract_mac_address_keeps_case_and_separator(line, mac):
    assert extract_mac_address(line) == mac


def test_extract_mac_address_absent():
    assert extract_mac_address("10.19.10.8 - 255.255.252.0 - 0023.2411.9230 -D- host") is None


def test_extract_mac_address_ambiguous():
    with pytest.raises(AmbiguousMatchError) as exc:
        extract_mac_address(ROW_TWO_MACS)
    assert exc.value.line == ROW_TWO_MACS


@pytest.mark.parametrize("line, expiration", [
    (ROW_ONE, "NEVER EXPIRES"),
    (ROW_DATED, "10/21/2026 9:14:02 AM"),
    (ROW_RESERVED, "INACTIVE"),
])
def test_extract_lease_expiration(line, expiration):
    assert extract_lease_expiration(line) == expiration


def test_extract_lease_expiration_short_line():
    with pytest.raises(MalformedLineError):
        extract_lease_expiration("10.19.10.8 - 255.255.252.0 - 00-23-24-11-92-30")


def test_extract_lease_expiration_without_trailing_delimiter():
    line = ROW_ONE[:70]
    with pytest.raises(MalformedLineError):
        extract_lease_expiration(line)


def test_extract_lease_type():
    assert extract_lease_type(ROW_ONE) == "D"
    assert extract_lease_type(ROW_RESERVED) == "R"


def test_extract_lease_type_absent():
    assert extract_lease_type("10.19.10.8 - 255.255.252.0 - host") is None


def test_extract_lease_type_ambiguous():
    line = ROW_ONE.replace("ComputerOne", "-B- ComputerOne")
    with pytest.raises(AmbiguousMatchError):
        extract_lease_type(line)


def test_extract_name():
    assert extract_name(ROW_THREE) == "ComputerThree"


def test_extract_name_empty():
    assert extract_name(ROW_ONE.replace("  ComputerOne", "  ")) == ""
    assert extract_name("no delimiter") == ""


# ============================================================
# Record builder
# ============================================================

def test_build_lease_record():
    record = build_lease_record(ROW_DATED)
    assert record == LeaseRecord(
        ip_address="10.19.10.50",
        subnet_mask="255.255.252.0",
        mac_address="00-15-5d-01-0a-3c",
        lease_expiration="10/21/2026 9:14:02 AM",
        type=LeaseType.DHCP,
        name="laptop07",
    )
    assert not record.never_expires


def test_build_lease_record_reservation():
    record = build_lease_record(ROW_RESERVED)
    assert record.type is LeaseType.RESERVATION
    assert record.mac_address == "00:15:5D:01:0A:3D"


def test_build_lease_record_is_immutable():
    record = build_lease_record(ROW_ONE)
    with pytest.raises(ValidationError):
        record.name = "other"


def test_fields_keep_line_order():
    for line in (ROW_ONE, ROW_TWO, ROW_THREE, ROW_DATED, ROW_RESERVED):
        record = build_lease_record(line)
        values = [
            record.ip_address,
            record.subnet_mask,
            record.mac_address,
            record.lease_expiration,
            f"-{record.type.value}-",
            record.name,
        ]
        positions = []
        start = 0
        for value in values:
            index = line.index(value, start)
            positions.append(index)
            start = index + len(value)
        assert positions == sorted(positions)


def test_build_lease_record_missing_mac():
    line = ROW_ONE.replace("00-23-24-11-92-30", "0023.2411.9230   ")
    with pytest.raises(MissingFieldError):
        build_lease_record(line)


def test_build_lease_record_missing_type():
    line = ROW_ONE.replace("-D-", "---")
    with pytest.raises(MissingFieldError):
        build_lease_record(line)


def test_build_lease_record_unknown_type():
    line = ROW_ONE.replace("-D-", "-X-")
    with pytest.raises(MalformedLineError):
        build_lease_record(line)


def test_build_lease_record_ambiguous_mac():
    with pytest.raises(AmbiguousMatchError):
        build_lease_record(ROW_TWO_MACS)


@pytest.mark.parametrize("line", [
    "",
    "   ",
    None,
    "No of Clients(version 4): 0 in the Scope : 10.19.10.0.",
])
def test_is_skipped_line(line):
    assert is_skipped_line(line)


def test_is_skipped_line_not_for_ten_clients():
    assert not is_skipped_line("No of Clients(version 4): 10 in the Scope : 10.19.10.0.")
    assert not is_skipped_line(ROW_ONE)


# ============================================================
# Batch
# ============================================================

def test_sample_report(sample_report_lines):
    batch = parse_lease_lines(sample_report_lines)

    assert batch.ok
    assert [(r.ip_address, r.mac_address, r.lease_expiration, r.type, r.name) for r in batch.records] == [
        ("10.19.10.8", "00-23-24-11-92-30", "NEVER EXPIRES", LeaseType.DHCP, "ComputerOne"),
        ("10.19.10.11", "24-be-05-04-b5-a5", "NEVER EXPIRES", LeaseType.DHCP, "ComputerTwo"),
        ("10.19.11.254", "00-50-aa-26-a1-9c", "NEVER EXPIRES", LeaseType.DHCP, "ComputerThree"),
    ]
    assert all(r.subnet_mask == "255.255.252.0" for r in batch.records)
    assert all(r.never_expires for r in batch.records)


def test_empty_scope_report(empty_report_lines):
    batch = parse_lease_lines(empty_report_lines)
    assert batch.records == []
    assert batch.ok


def test_sentinel_and_blank_rows_inside_data_range():
    lines = make_report(["", "No of Clients(version 4): 0 in the Scope : 10.19.10.0.", ROW_ONE])
    batch = parse_lease_lines(lines)
    assert [r.ip_address for r in batch.records] == ["10.19.10.8"]
    assert batch.ok


def test_failures_are_collected_in_order():
    lines = make_report([ROW_ONE, ROW_TWO_MACS, ROW_TWO, "garbage"])
    batch = parse_lease_lines(lines)

    assert [r.name for r in batch.records] == ["ComputerOne", "ComputerTwo"]
    assert [f.line_number for f in batch.failures] == [2, 4]
    assert isinstance(batch.failures[0].error, AmbiguousMatchError)
    assert isinstance(batch.failures[1].error, MalformedLineError)
    assert batch.failures[1].line == "garbage"
    assert not batch.ok


def test_raise_for_failures_raises_first():
    batch = parse_lease_lines(make_report([ROW_ONE, ROW_TWO_MACS]))
    with pytest.raises(AmbiguousMatchError):
        batch.raise_for_failures()


def test_parse_report_from_text(sample_report_lines):
    batch = parse_report("\r\n".join(sample_report_lines) + "\r\n")
    assert [r.name for r in batch.records] == ["ComputerOne", "ComputerTwo", "ComputerThree"]


def test_duplicates_are_kept():
    batch = parse_lease_lines(make_report([ROW_ONE, ROW_ONE]))
    assert len(batch.records) == 2
    assert batch.records[0] == batch.records[1]
