"""Tests for splitting documents into pages."""

import pytest
from slidemark.model import Page, PageKind
from slidemark.parser import (
    DocumentParser,
    DocumentStructureError,
    ParserState,
    parse_document,
    require_pages,
)


def test_title_and_sections_scenario():
    """Title page, a plain section and a section that starts with a sub-heading."""
    doc = "# Title\nintro text\n## Page One\nbody one\n## Page Two\n### Sub A\nsub body\n"
    pages = parse_document(doc)

    assert pages == [
        Page(kind=PageKind.TITLE, title="Title", content="intro text"),
        Page(kind=PageKind.CONTENT, title="Page One", content="body one"),
        Page(kind=PageKind.CONTENT, title="Page Two", content="sub body", subtitle="Sub A"),
    ]


def test_title_only_document():
    pages = parse_document("# Just a title\n\nSome words.\n")
    assert len(pages) == 1
    assert pages[0].kind == PageKind.TITLE
    assert pages[0].title == "Just a title"
    assert pages[0].content == "Some words."


def test_title_without_body_has_empty_content():
    pages = parse_document("# Title\n## Section\ntext")
    assert pages[0] == Page(kind=PageKind.TITLE, title="Title", content="")
    assert pages[1].title == "Section"


def test_sections_without_subheadings():
    """N second-level headings give N content pages without subtitles."""
    doc = "\n".join(f"## Section {i}\nbody {i}" for i in range(5))
    pages = parse_document(doc)
    assert len(pages) == 5
    assert all(p.kind == PageKind.CONTENT for p in pages)
    assert all(p.subtitle is None for p in pages)
    assert [p.title for p in pages] == [f"Section {i}" for i in range(5)]


def test_title_page_comes_first():
    pages = parse_document("# T\n## A\na\n## B\nb")
    assert [p.kind for p in pages] == [PageKind.TITLE, PageKind.CONTENT, PageKind.CONTENT]


def test_empty_section_still_yields_a_page():
    pages = parse_document("## Empty\n\n\n## Full\ntext")
    assert pages[0] == Page(kind=PageKind.CONTENT, title="Empty", content="", subtitle=None)
    assert pages[1].content == "text"


def test_subsections_share_section_title():
    doc = (
        "## Section\n"
        "intro paragraph\n"
        "### First\n"
        "one\n"
        "### Second\n"
        "two\n"
        "### Third\n"
        "three\n"
    )
    pages = parse_document(doc)
    assert len(pages) == 4
    assert all(p.title == "Section" for p in pages)
    assert [p.subtitle for p in pages] == [None, "First", "Second", "Third"]
    assert [p.content for p in pages] == ["intro paragraph", "one", "two", "three"]


def test_subsections_without_intro_text():
    doc = "## Section\n\n### First\none\n### Second\ntwo\n"
    pages = parse_document(doc)
    assert [p.subtitle for p in pages] == ["First", "Second"]


def test_subsection_with_empty_body_is_skipped():
    doc = "## Section\n### Empty\n\n### Filled\nbody\n"
    pages = parse_document(doc)
    assert len(pages) == 1
    assert pages[0].subtitle == "Filled"


def test_section_with_only_empty_subsections():
    pages = parse_document("## Section\n### A\n### B\n")
    assert pages == [Page(kind=PageKind.CONTENT, title="Section", content="")]


def test_subsection_block_ends_at_next_section():
    pages = parse_document("## One\n### Sub\nsub text\n## Two\ntwo text")
    assert pages[0].content == "sub text"
    assert pages[1] == Page(kind=PageKind.CONTENT, title="Two", content="two text")


def test_internal_blank_lines_preserved():
    pages = parse_document("## S\n\n\nfirst\n\nsecond\n\n\n")
    assert pages[0].content == "first\n\nsecond"


def test_level_four_headings_are_body_text():
    pages = parse_document("## S\n#### Detail\ntext")
    assert len(pages) == 1
    assert pages[0].content == "#### Detail\ntext"


def test_heading_requires_space_after_marker():
    pages = parse_document("#Title\n##Section\n## Real\nbody")
    assert len(pages) == 1
    assert pages[0].title == "Real"


def test_orphan_subheading_before_any_section_is_ignored():
    pages = parse_document("### Orphan\norphan text\n## Section\nbody")
    assert pages == [Page(kind=PageKind.CONTENT, title="Section", content="body")]


def test_title_body_stops_at_subheading():
    pages = parse_document("# T\nintro\n### Orphan\nignored\n## S\nbody")
    assert pages[0].content == "intro"
    assert len(pages) == 2
    assert pages[1].content == "body"


def test_sections_before_title_are_skipped():
    pages = parse_document("## Early\nx\n# Title\n## Late\ny")
    assert [p.title for p in pages] == ["Title", "Late"]


def test_second_top_level_heading_is_body_text():
    pages = parse_document("# One\n## S\ntext\n# Two\nmore")
    assert len(pages) == 2
    assert pages[1].content == "text\n# Two\nmore"


def test_heading_text_is_stripped():
    pages = parse_document("##   Spaced out   \nbody")
    assert pages[0].title == "Spaced out"


def test_empty_headings_are_not_headings():
    assert parse_document("# \n## S\nbody") == [Page(kind=PageKind.CONTENT, title="S", content="body")]
    assert parse_document("## \nbody") == []
    assert parse_document("##   \n## S\nx") == [Page(kind=PageKind.CONTENT, title="S", content="x")]


def test_empty_heading_inside_a_block_is_body_text():
    pages = parse_document("# T\nintro\n## \nmore\n## S\nx\n###\t\ny")
    assert [p.title for p in pages] == ["T", "S"]
    assert pages[0].content == "intro\n## \nmore"
    assert pages[1].content == "x\n###\t\ny"
    assert pages[1].subtitle is None


def test_no_headings_gives_no_pages():
    assert parse_document("just some text\nwithout headings\n") == []
    assert parse_document("") == []


def test_require_pages():
    pages = parse_document("## S\nbody")
    assert require_pages(pages) is pages
    with pytest.raises(DocumentStructureError, match="need H1 or H2 headings"):
        require_pages([])


def test_parser_states():
    parser = DocumentParser(has_title=True)
    assert parser.state == ParserState.SCANNING_FOR_TITLE
    parser.feed("# T")
    parser.feed("## S")
    assert parser.state == ParserState.IN_SECTION
    parser.feed("### Sub")
    assert parser.state == ParserState.IN_SUBSECTION
    parser.feed("text")
    pages = parser.finish()
    assert len(pages) == 2
    assert pages[1].subtitle == "Sub"


def test_parser_without_title_starts_scanning_for_sections():
    parser = DocumentParser(has_title=False)
    assert parser.state == ParserState.SCANNING_FOR_SECTION
    parser.feed("# Not looked for")
    assert parser.finish() == []
