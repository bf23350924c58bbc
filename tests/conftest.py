import pytest

from tests.fakes import FakeRunner
from tests.sample_reports import ROW_ONE, ROW_THREE, ROW_TWO, make_report


@pytest.fixture
def sample_report_lines():
    return make_report([ROW_ONE, ROW_TWO, ROW_THREE])


@pytest.fixture
def empty_report_lines():
    return make_report([], count=0)


@pytest.fixture
def fake_runner(sample_report_lines):
    return FakeRunner(sample_report_lines)
