"""Tests for turning request bodies into submitted fields."""

import pytest

from clean_slate_api.app.core.submission import form_fields, json_fields


def test_json_object_is_used_as_is():
    assert json_fields({"name": "A", "x": [1]}) == {"name": "A", "x": [1]}


def test_json_array_is_keyed_by_index():
    assert json_fields(["a", None]) == {"0": "a", "1": None}


@pytest.mark.parametrize("payload", [42, "text", None, True])
def test_json_scalars_are_refused(payload):
    with pytest.raises(ValueError):
        json_fields(payload)


def test_form_single_values():
    assert form_fields([("name", "A"), ("audienceProfile", "staffer")]) == {
        "name": "A",
        "audienceProfile": "staffer",
    }


def test_form_bracket_keys_collect_lists():
    items = [("selectedTraits[]", "a"), ("name", "A"), ("selectedTraits[]", "b")]
    assert form_fields(items) == {"selectedTraits": ["a", "b"], "name": "A"}


def test_form_single_bracket_key_is_still_a_list():
    assert form_fields([("adjectives[]", "clear")]) == {"adjectives": ["clear"]}


def test_form_repeated_keys_collect_lists():
    items = [("priorities", "jobs"), ("priorities", "health"), ("priorities", "housing")]
    assert form_fields(items) == {"priorities": ["jobs", "health", "housing"]}


def test_form_nested_keys_are_kept_verbatim():
    assert form_fields([("answers[q1]", "yes")]) == {"answers[q1]": "yes"}
