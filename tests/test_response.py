"""Response translation characterization tests."""

from __future__ import annotations

from types import SimpleNamespace

from openai.types.chat import ChatCompletion
import pytest

from genai_openai.errors import VendorContractError
from genai_openai.translation.response import translate_response
from genai_openai.types import (
    DataPart,
    FinishReason,
    Role,
    TextPart,
    ToolRequestPart,
    Usage,
)
from tests.helpers import choice, completion, tool_call

pytestmark = pytest.mark.contract


def test_length_finish_reason_maps_to_length() -> None:
    resp = translate_response(completion(choice(finish_reason="length")), False)

    assert resp.candidates[0].finish_reason is FinishReason.LENGTH


@pytest.mark.parametrize("reason", ["something_new", None, "null"])
def test_unrecognized_finish_reasons_are_unknown(reason: str | None) -> None:
    resp = translate_response(completion(choice(finish_reason=reason)), False)

    assert resp.candidates[0].finish_reason is FinishReason.UNKNOWN


def test_one_candidate_per_choice_with_index_preserved() -> None:
    resp = translate_response(
        completion(
            choice("first", index=0),
            choice("second", index=1, finish_reason="content_filter"),
        ),
        False,
    )

    assert [c.index for c in resp.candidates] == [0, 1]
    assert [c.text() for c in resp.candidates] == ["first", "second"]
    assert resp.candidates[1].finish_reason is FinishReason.BLOCKED
    assert all(c.message.role is Role.MODEL for c in resp.candidates)


def test_text_content_becomes_single_text_part() -> None:
    resp = translate_response(completion(choice("France")), False)

    assert resp.candidates[0].message.content == (TextPart("France"),)
    assert resp.text() == "France"


def test_json_mode_content_becomes_data_part_with_raw_string() -> None:
    raw = '{"dish": "pizza"}'
    resp = translate_response(completion(choice(raw)), True)

    assert resp.candidates[0].message.content == (DataPart(raw),)


def test_missing_content_becomes_empty_text() -> None:
    resp = translate_response(completion(choice(None)), False)

    assert resp.candidates[0].message.content == (TextPart(""),)


def test_tool_calls_become_tool_requests_and_drop_text() -> None:
    resp = translate_response(
        completion(
            choice(
                "I will call tools.",
                finish_reason="tool_calls",
                tool_calls=[
                    tool_call("lookup", '{"x": 1}'),
                    tool_call("weather", '{"city": "Oslo", "days": [1, 2]}', "call_2"),
                ],
            )
        ),
        True,
    )

    candidate = resp.candidates[0]
    assert candidate.finish_reason is FinishReason.STOP
    assert candidate.message.content == (
        ToolRequestPart("lookup", {"x": 1}),
        ToolRequestPart("weather", {"city": "Oslo", "days": [1, 2]}),
    )


@pytest.mark.parametrize("arguments", ["{bad json", "", "[1, 2]"])
def test_malformed_tool_arguments_are_contract_violations(arguments: str) -> None:
    vendor = completion(choice(None, tool_calls=[tool_call("lookup", arguments)]))

    with pytest.raises(VendorContractError):
        translate_response(vendor, False)


def test_usage_is_copied_from_vendor_counts() -> None:
    resp = translate_response(
        completion(prompt_tokens=11, completion_tokens=7, total_tokens=18), False
    )

    assert resp.usage == Usage(input_tokens=11, output_tokens=7, total_tokens=18)


def test_missing_usage_is_zero() -> None:
    resp = translate_response(completion(usage=False), False)

    assert resp.usage == Usage()


def test_raw_response_is_kept_and_request_left_to_caller() -> None:
    vendor = completion()

    resp = translate_response(vendor, False)

    assert resp.custom is vendor
    assert resp.request is None


def test_empty_choices_produce_no_candidates() -> None:
    resp = translate_response(SimpleNamespace(choices=[], usage=None), False)

    assert resp.candidates == ()
    assert resp.text() == ""


def test_translates_sdk_chat_completion_objects() -> None:
    vendor = ChatCompletion.model_validate(
        {
            "id": "chatcmpl-123",
            "object": "chat.completion",
            "created": 1_700_000_000,
            "model": "gpt-4o-mini",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": "France"},
                },
                {
                    "index": 1,
                    "finish_reason": "tool_calls",
                    "message": {
                        "role": "assistant",
                        "content": None,
                        "tool_calls": [
                            {
                                "id": "call_abc",
                                "type": "function",
                                "function": {
                                    "name": "gablorken",
                                    "arguments": '{"value": 2, "over": 3.5}',
                                },
                            }
                        ],
                    },
                },
            ],
            "usage": {"prompt_tokens": 9, "completion_tokens": 1, "total_tokens": 10},
        }
    )

    resp = translate_response(vendor, False)

    assert resp.text() == "France"
    assert resp.candidates[1].message.content == (
        ToolRequestPart("gablorken", {"value": 2, "over": 3.5}),
    )
    assert resp.usage.total_tokens == 10
