import json

import pytest

from snapcaption.utils.json_extractor import EMPTY_ARRAY, extract_json_text, strip_code_fences


@pytest.mark.parametrize("text", [None, ""])
def test_missing_input_gives_empty_array(text):
    assert extract_json_text(text) == EMPTY_ARRAY == "[]"


def test_text_without_brackets_is_only_trimmed():
    assert extract_json_text("   just some prose, no payload  \n") == "just some prose, no payload"


def test_fenced_array():
    assert extract_json_text("```json\n[1,2,3]\n```") == "[1,2,3]"


def test_bare_fence_without_language_tag():
    assert extract_json_text("```\n{\"a\": 1}\n```") == '{"a": 1}'


def test_fences_are_removed_anywhere_in_the_text():
    text = "Here you go:\n```json\n[\"one\", \"two\"]\n```\nEnjoy!"
    assert extract_json_text(text) == '["one", "two"]'


def test_prose_around_object():
    assert extract_json_text('prefix {"a":1} suffix') == '{"a":1}'


def test_prose_around_array():
    assert extract_json_text("prefix [1,2] suffix") == "[1,2]"


def test_object_containing_array_is_kept_whole():
    assert extract_json_text('{"items": [1,2,3]}') == '{"items": [1,2,3]}'


def test_array_of_objects_is_kept_whole():
    text = '[{"style": "humorous", "content": "hi"}, {"style": "concise", "content": "yo"}]'
    assert extract_json_text(text) == text


def test_object_before_trailing_array_wins():
    # Regression fixture: the object opens first, so only the object span is taken.
    assert extract_json_text('{"a":1} then [1,2]') == '{"a":1}'


def test_array_before_trailing_object_wins():
    assert extract_json_text('[1,2] then {"a":1}') == '[1,2]'


def test_multiple_values_take_widest_span():
    assert extract_json_text("[1] and also [2]") == "[1] and also [2]"


def test_unbalanced_brackets_fall_through():
    assert extract_json_text("oops ] then [") == "oops ] then ["


@pytest.mark.parametrize("text", [
    "```json\n[1,2,3]\n```",
    'prefix {"a":1} suffix',
    "prefix [1,2] suffix",
    '{"items": [1,2,3]}',
    '{"a":1} then [1,2]',
    "no brackets here",
    "",
])
def test_second_pass_is_a_no_op(text):
    once = extract_json_text(text)
    assert extract_json_text(once) == once


def test_extracted_model_output_parses():
    raw = 'Sure! Here are your captions:\n```json\n[{"style": "poetic", "content": "Golden hour 🌅"}]\n```'
    assert json.loads(extract_json_text(raw)) == [{"style": "poetic", "content": "Golden hour 🌅"}]


def test_strip_code_fences_only_touches_fences():
    assert strip_code_fences("```json\n{}\n```") == "{}\n"
