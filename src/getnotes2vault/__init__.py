"""Import Get笔记 HTML exports into an Obsidian vault as Markdown notes."""

__version__ = "0.1.0"
