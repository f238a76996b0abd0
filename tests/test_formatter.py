from __future__ import annotations

import pytest

from getnotes2vault.formatter import escape_yaml, format_frontmatter, format_note


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Foo", "Foo"),
        ("会议纪要", "会议纪要"),
        ("a: b", '"a: b"'),
        ('say "hi", ok', '"say \\"hi\\", ok"'),
        (" lead", '" lead"'),
        ("trail ", '"trail "'),
        ("#topic", '"#topic"'),
    ],
)
def test_escape_yaml(value: str, expected: str) -> None:
    assert escape_yaml(value) == expected


def test_plain_quotes_are_left_unquoted() -> None:
    assert escape_yaml('say "hi"') == 'say "hi"'


def test_frontmatter_with_all_fields() -> None:
    note = format_note(
        "Body\n", "Foo", ["alpha", "Get笔记"], "2023-03-03 12:00:00"
    )
    assert note == (
        "---\n"
        "title: Foo\n"
        'created: "2023-03-03 12:00:00"\n'
        "tags:\n"
        "  - alpha\n"
        "  - Get笔记\n"
        "---\n"
        "\n"
        "Body\n"
    )


def test_frontmatter_omits_empty_fields() -> None:
    assert format_frontmatter("Foo") == "---\ntitle: Foo\n---"
    assert format_note("Body", "Foo", [], None) == "---\ntitle: Foo\n---\n\nBody"
