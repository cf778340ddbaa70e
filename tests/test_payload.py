import pytest

from core.errors import MissingNumber
from core.models import CallRequest
from core.payload import build_call_request, call_request_from_arguments
from core.prompts import DEFAULT_FIRST_MESSAGE, DEFAULT_PROMPT


def test_defaults_fill_missing_texts():
    request = build_call_request("+15551234567")

    assert request == CallRequest(
        number="+15551234567",
        prompt=DEFAULT_PROMPT,
        first_message=DEFAULT_FIRST_MESSAGE,
    )
    assert request.to_payload() == {
        "number": "+15551234567",
        "prompt": DEFAULT_PROMPT,
        "first_message": DEFAULT_FIRST_MESSAGE,
    }


def test_number_is_trimmed_and_texts_kept():
    request = build_call_request("  +44 20 7946 0000\n", "Be brief.", "Hi there")

    assert request.number == "+44 20 7946 0000"
    assert request.prompt == "Be brief."
    assert request.first_message == "Hi there"


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_texts_fall_back_to_defaults(blank):
    request = build_call_request("+15551234567", blank, blank)

    assert request.prompt == DEFAULT_PROMPT
    assert request.first_message == DEFAULT_FIRST_MESSAGE


def test_builder_is_deterministic():
    args = {"number": " +15551234567 ", "prompt": "Custom", "first_message": ""}

    first = call_request_from_arguments(args)
    second = call_request_from_arguments(args)
    rebuilt = call_request_from_arguments(first.to_payload())

    assert first == second == rebuilt


@pytest.mark.parametrize("args", [{}, {"number": None}, {"number": ""}, {"number": "   "}])
def test_missing_number_is_rejected(args):
    with pytest.raises(MissingNumber):
        call_request_from_arguments(args)


def test_number_format_is_not_checked():
    assert call_request_from_arguments({"number": "not-a-number"}).number == "not-a-number"
