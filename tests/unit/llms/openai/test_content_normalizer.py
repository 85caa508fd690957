"""Tests for host content normalization."""

import pytest

from oaiprovider.llms.openai.content import normalize_content


pytestmark = pytest.mark.unit


@pytest.mark.parametrize("text", ["", "Hello", "multi\nline", "ünïcødé"])
def test_strings_pass_through(text: str) -> None:
    assert normalize_content(text) == text


def test_object_is_compact_json() -> None:
    assert normalize_content({"a": 1, "b": [True, None]}) == '{"a":1,"b":[true,null]}'


def test_array_is_compact_json() -> None:
    content = [{"type": "text", "text": "Hi"}, {"type": "image", "url": "x"}]

    assert (
        normalize_content(content)
        == '[{"type":"text","text":"Hi"},{"type":"image","url":"x"}]'
    )


def test_non_ascii_is_kept() -> None:
    assert normalize_content({"city": "Zürich"}) == '{"city":"Zürich"}'


@pytest.mark.parametrize("value", [None, 0, 3.5, True, False])
def test_other_shapes_become_empty(value: object) -> None:
    assert normalize_content(value) == ""


def test_unserializable_structure_becomes_empty() -> None:
    assert normalize_content({"when": object()}) == ""


def test_is_idempotent_on_its_output() -> None:
    once = normalize_content({"k": "v"})

    assert normalize_content(once) == once
