"""Unit tests for core/sections.py"""

from mdprose.core.parse import parse_text
from mdprose.core.sections import section_stats


def _stats(md: str, **kwargs):
    return section_stats(parse_text(md), **kwargs)


def test_sample_sections(sample_doc):
    """Headings and break sentinels open sections; annotations add no words."""
    sections = section_stats(sample_doc)
    assert [s.title for s in sections] == ["Chapter One", "Scene", "", "Bibliography"]
    assert [s.level for s in sections] == [1, 2, 2, 1]
    assert [s.word_count for s in sections] == [8, 5, 3, 4]
    assert [s.pseudo for s in sections] == [False, False, True, False]
    assert [s.bibliography for s in sections] == [False, False, False, True]
    assert [s.position for s in sections] == [0, 1, 2, 3]


def test_preamble_section():
    sections = _stats("Intro words here.\n\n# One\n\nBody.\n")
    assert (sections[0].title, sections[0].level, sections[0].word_count) == ("", 0, 3)
    assert (sections[1].title, sections[1].word_count) == ("One", 2)


def test_no_preamble_without_words():
    sections = _stats("<!-- ::comment:: not prose -->\n\n# One\n")
    assert [s.title for s in sections] == ["One"]


def test_document_without_headings():
    sections = _stats("Just a paragraph of prose.\n")
    assert len(sections) == 1
    assert sections[0].level == 0
    assert sections[0].word_count == 5


def test_empty_document():
    assert _stats("") == []


def test_heading_in_code_fence_is_not_a_boundary():
    sections = _stats("# Real\n\n```\n# not a heading\n```\n")
    assert [s.title for s in sections] == ["Real"]
    assert sections[0].word_count == 4


def test_heading_in_multiline_annotation_is_not_a_boundary():
    sections = _stats("# A\n\n<!-- ::comment::\n# Hidden\n-->\n\ntext\n")
    assert [s.title for s in sections] == ["A"]
    assert sections[0].word_count == 2


def test_max_nesting_folds_deeper_headings():
    sections = _stats("# A\n\n## B\n\ntext\n", max_nesting=1)
    assert [s.title for s in sections] == ["A"]
    assert sections[0].word_count == 3


def test_title_is_plain_text():
    sections = _stats("## The **bold** [plan](u)\n")
    assert sections[0].title == "The bold plan"


def test_break_before_first_heading_inherits_level_one():
    sections = _stats("Intro.\n\n<!-- ::break:: -->\n\nMore.\n")
    assert [(s.level, s.pseudo, s.word_count) for s in sections] == [(0, False, 1), (1, True, 1)]


def test_bibliography_by_title_ends_at_same_level():
    md = (
        "# Book\n\nText.\n\n"
        "## References\n\nRef one.\n\n"
        "### Sub\n\nMore.\n\n"
        "## Appendix\n\nEnd.\n"
    )
    sections = _stats(md)
    assert [(s.title, s.bibliography) for s in sections] == [
        ("Book", False), ("References", True), ("Sub", True), ("Appendix", False),
    ]


def test_custom_bibliography_titles():
    sections = _stats("# Body\n\nx\n\n# Works Cited\n\ny\n", bibliography_titles=["Works Cited"])
    assert [s.bibliography for s in sections] == [False, True]


def test_standalone_bibliography_marker_flags_rest():
    md = "# Body\n\nText.\n\n<!-- ::auto-bibliography:: -->\n# Works Cited\n\nRef.\n\n# Later\n\nx\n"
    sections = _stats(md)
    assert [(s.title, s.bibliography) for s in sections] == [
        ("Body", False), ("Works Cited", True), ("Later", True),
    ]


def test_crlf_line_endings():
    sections = _stats("# A\r\n\r\nword\r\n# B\r\nx y\r\n")
    assert [(s.title, s.word_count) for s in sections] == [("A", 2), ("B", 3)]
