# tests/test_content.py

import json

import pytest

from custom_components.yomicycle.yomicycle_lib.content import (
    ContentTable,
    ContentUnit,
    load_table_file,
    table_from_pairs,
    table_from_sections,
)
from custom_components.yomicycle.yomicycle_lib.errors import ConfigurationError

SECTIONS = [
    {"title": "הקדמה", "content": "intro"},
    {"title": "שער א", "content": "one", "id": "ignored"},
    {"title": "שער ב", "content": "two"},
]


def test_pairs_numbered_from_one():
    table = table_from_pairs([("a", "1"), ("b", "2")])
    assert list(table) == [ContentUnit(1, "a", "1"), ContentUnit(2, "b", "2")]
    assert len(table) == 2
    assert table[-1].title == "b"


def test_empty_table_rejected():
    with pytest.raises(ConfigurationError):
        ContentTable([])


def test_out_of_order_rejected():
    with pytest.raises(ConfigurationError):
        ContentTable([ContentUnit(2, "a", ""), ContentUnit(1, "b", "")])


def test_untitled_unit_rejected():
    with pytest.raises(ConfigurationError):
        ContentTable([ContentUnit(1, "", "body")])


def test_sections_keep_intro_by_default():
    table = table_from_sections(SECTIONS)
    assert [u.title for u in table] == ["הקדמה", "שער א", "שער ב"]


def test_skip_intro_applied_before_numbering():
    table = table_from_sections(SECTIONS, skip_intro=True)
    assert table[0] == ContentUnit(1, "שער א", "one")
    assert table[1].day_index == 2


def test_body_key_accepted():
    table = table_from_sections([{"title": "t", "body": "b"}])
    assert table[0].body == "b"


@pytest.mark.parametrize(
    "section",
    [
        {"content": "no title"},
        {"title": "  ", "content": "blank title"},
        {"title": "no content"},
        "not a mapping",
    ],
)
def test_malformed_sections(section):
    with pytest.raises(ConfigurationError):
        table_from_sections([section])


def test_intro_only_file_is_empty_after_skip():
    with pytest.raises(ConfigurationError):
        table_from_sections(SECTIONS[:1], skip_intro=True)


def test_load_list_file(tmp_path):
    path = tmp_path / "orchos_tzadikim.json"
    path.write_text(json.dumps(SECTIONS, ensure_ascii=False), encoding="utf-8")
    table = load_table_file(path, skip_intro=True)
    assert [u.body for u in table] == ["one", "two"]


def test_load_wrapped_file(tmp_path):
    path = tmp_path / "tehilim.json"
    path.write_text(json.dumps({"sections": SECTIONS[1:]}), encoding="utf-8")
    assert len(load_table_file(path)) == 2


def test_load_bad_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_table_file(path)


def test_load_wrong_shape(tmp_path):
    path = tmp_path / "shape.json"
    path.write_text(json.dumps({"title": "x"}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_table_file(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_table_file(tmp_path / "missing.json")
