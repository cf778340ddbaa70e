import pytest

from core.invoker import OutboundCallInvoker
from core.patients import PatientDirectory
from tests.fakes import API_URL, RecordingTransport


@pytest.fixture
def directory():
    return PatientDirectory.builtin()


@pytest.fixture
def ok_transport():
    return RecordingTransport(body={"success": True, "callSid": "CA0001"})


@pytest.fixture
def ok_invoker(ok_transport):
    return OutboundCallInvoker(API_URL, transport=ok_transport)
