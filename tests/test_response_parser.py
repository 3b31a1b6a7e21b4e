import pytest

from app.agent.response_parser import parse_ai_response, strip_code_fences
from app.errors import AIResponseParseError

PAYLOAD = '{"mainProblem": "Worn pads", "problemType": "brake", "severity": "high"}'


def test_plain_json():
    assert parse_ai_response(PAYLOAD)["problemType"] == "brake"


def test_json_wrapped_in_code_fences():
    text = f"```json\n{PAYLOAD}\n```"

    assert strip_code_fences(text) == PAYLOAD
    assert parse_ai_response(text)["mainProblem"] == "Worn pads"


def test_bare_fences_are_stripped():
    assert parse_ai_response(f"```\n{PAYLOAD}```")["severity"] == "high"


def test_object_is_extracted_from_surrounding_text():
    text = f"Here is the analysis you asked for:\n{PAYLOAD}\nHope this helps."

    assert parse_ai_response(text)["severity"] == "high"


def test_text_without_object_fails():
    with pytest.raises(AIResponseParseError) as exc:
        parse_ai_response("I could not analyze this recording.")

    assert str(exc.value).startswith("Failed to parse AI response")


def test_broken_object_fails():
    with pytest.raises(AIResponseParseError):
        parse_ai_response('{"mainProblem": "Worn pads", }')


def test_non_object_json_fails():
    with pytest.raises(AIResponseParseError):
        parse_ai_response('["brake", "engine"]')


def test_non_string_response_fails():
    with pytest.raises(AIResponseParseError):
        parse_ai_response(None)
