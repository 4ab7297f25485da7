import pytest

from conftest import QUIZ_JSON
from promptrelay.errors import ResponseParseError
from promptrelay.parsing import parse_json_payload, parse_quiz, strip_code_fence


def test_strip_code_fence_variants():
	assert strip_code_fence("```json\n{\"a\": 1}\n```") == '{"a": 1}'
	assert strip_code_fence("```\n{\"a\": 1}\n```") == '{"a": 1}'
	assert strip_code_fence("  ```JSON\n[1, 2]\n```\n") == "[1, 2]"
	assert strip_code_fence('{"a": 1}') == '{"a": 1}'


def test_fenced_payload_parses():
	assert parse_json_payload("```json\n{\"a\": [1, 2]}\n```") == {"a": [1, 2]}


def test_bare_payload_parses():
	assert parse_json_payload('  {"a": true}  ') == {"a": True}


def test_malformed_payload_is_a_parse_error():
	with pytest.raises(ResponseParseError) as excinfo:
		parse_json_payload("```json\n{\"a\": \n```")
	assert excinfo.value.status_code == 500


def test_prose_is_a_parse_error():
	with pytest.raises(ResponseParseError):
		parse_json_payload("Hier is je quiz! Veel plezier.")


def test_empty_reply_is_a_parse_error():
	with pytest.raises(ResponseParseError):
		parse_json_payload("```json\n```")


def test_parse_quiz_reads_fenced_reply():
	quiz = parse_quiz(f"```json\n{QUIZ_JSON}\n```")
	assert len(quiz.questions) == 1
	question = quiz.questions[0]
	assert question.question == "Welk ras is het kleinst?"
	assert question.options[1] == "B) Labrador"
	assert question.correct_answer == "A) Chihuahua"


def test_parse_quiz_rejects_wrong_shape():
	with pytest.raises(ResponseParseError) as excinfo:
		parse_quiz('{"questions": [{"question": "Zonder opties"}]}')
	assert excinfo.value.message == "Invalid quiz format"
	with pytest.raises(ResponseParseError):
		parse_quiz("[1, 2, 3]")
