from __future__ import annotations

from getnotes2vault.cleanup import (
    cleanup_markdown,
    remove_duplicate_title,
    strip_metadata_lines,
)


def test_event_listener_calls_are_removed() -> None:
    markdown = "Text\n\ndocument.addEventListener('load', init);\n\nwindow.addEventListener('x', y)\n\nMore\n"
    cleaned = cleanup_markdown(markdown)
    assert "addEventListener" not in cleaned
    assert cleaned.startswith("Text")
    assert "More" in cleaned


def test_function_blocks_are_removed() -> None:
    cleaned = cleanup_markdown("before\nfunction init() { run(); }\nafter\n")
    assert "function" not in cleaned
    assert "before" in cleaned
    assert cleaned.endswith("after\n")


def test_function_block_with_nested_braces_is_cut_at_first_brace() -> None:
    cleaned = cleanup_markdown("a\nfunction f() { if (x) { y(); } z(); }\nb")
    assert cleaned == "a\n z(); }\nb\n"


def test_markup_remnants_are_removed() -> None:
    markdown = (
        "<script>alert(1)</script>Intro\n\n"
        "<!-- hidden -->\n\n"
        '<button onclick="go()">Go</button>\n'
    )
    cleaned = cleanup_markdown(markdown)
    assert "alert" not in cleaned
    assert "hidden" not in cleaned
    assert "onclick" not in cleaned
    assert "<button" not in cleaned
    assert cleaned == "Intro\n\nGo\n"


def test_trailing_call_is_removed() -> None:
    assert cleanup_markdown("Body text\n\ninit();\n") == "Body text\n"


def test_blank_runs_collapse_and_single_trailing_newline() -> None:
    assert cleanup_markdown("a\n\n\n\nb\n\n\n") == "a\n\nb\n"
    assert cleanup_markdown("a") == "a\n"


def test_duplicate_title_line_is_removed() -> None:
    cleaned = cleanup_markdown("Foo - Get笔记\n\n# Foo\n\nBody\n")
    assert "Get笔记" not in cleaned
    assert "# Foo" in cleaned
    assert "Body" in cleaned


def test_distinct_first_line_is_kept() -> None:
    markdown = "Intro\n\n# Other\n\nBody"
    assert remove_duplicate_title(markdown) == markdown


def test_short_documents_are_left_alone() -> None:
    assert remove_duplicate_title("Foo\n# Foo") == "Foo\n# Foo"


def test_only_first_matching_line_is_removed() -> None:
    markdown = "Foo!\n# Foo\nFoo!\n"
    assert remove_duplicate_title(markdown) == "# Foo\nFoo!\n"


def test_metadata_lines_are_stripped() -> None:
    markdown = "# Foo\n\n标签: alpha, beta\n\n创建于: 2023-03-03 12:00:00\n\nBody\n"
    assert strip_metadata_lines(markdown) == "# Foo\n\nBody\n"


def test_metadata_labels_in_english_ignore_case() -> None:
    markdown = "Tags: x\nDATE：2023-01-01\nKeep me\n"
    assert strip_metadata_lines(markdown) == "\n\nKeep me\n"


def test_labels_mid_line_are_kept() -> None:
    markdown = "See tags: here\n"
    assert strip_metadata_lines(markdown) == markdown


def test_trailing_cjk_parenthetical_is_kept() -> None:
    markdown = "# 会议纪要\n\n正文\n\n下次会议时间待定(下周)\n"
    assert cleanup_markdown(markdown) == markdown


def test_cjk_text_is_not_mistaken_for_script() -> None:
    markdown = 'Intro\n\nfunction 说明() {保留}\n\nSection讨论="要点"\n'
    assert cleanup_markdown(markdown) == markdown
