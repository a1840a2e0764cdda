import pytest
from bs4 import BeautifulSoup

from rabbit_hole.parser.html_parser import (
    PageDetails,
    collapse_whitespace,
    parse_page_details,
    render_content,
    select_container,
)

URL = "https://x.com/page"


def content_of(html: str) -> str:
    return parse_page_details(URL, html).content


def test_heading_and_paragraph_with_link():
    html = '<h2>Title</h2><p>Hello <a href="/x">there</a></p>'
    assert content_of(html) == "## Title\nHello[there](/x)\n"


def test_ordered_list():
    assert content_of("<ol><li>One</li><li>Two</li></ol>") == "1. One\n2. Two\n"


def test_ordered_numbering_restarts_per_list():
    html = "<ol><li>a</li></ol><p>between</p><ol><li>b</li><li>c</li></ol>"
    assert content_of(html) == "1. a\nbetween\n1. b\n2. c\n"


def test_unordered_list_collapses_whitespace():
    html = "<ul><li>One <b>bold</b></li><li>Two\n   lines</li></ul>"
    assert content_of(html) == "- One bold\n- Two lines\n"


@pytest.mark.parametrize("level", range(1, 7))
def test_heading_levels(level):
    html = f"<h{level}>  Big \n\t Title </h{level}>"
    assert content_of(html) == f"{'#' * level} Big Title\n"


def test_paragraph_image_on_its_own_line():
    html = '<p><img src="/logo.png" alt=" Logo "> caption</p><p><img alt="none"><img src="/a.gif"></p>'
    assert content_of(html) == "![Logo](/logo.png)\ncaption\n![](/a.gif)\n\n"


def test_paragraph_children_concatenate_without_separator():
    html = "<p>Hello <b>big</b> world<!-- hidden --> <a>no href</a> end</p>"
    assert content_of(html) == "Hellobigworldend\n"


def test_link_text_is_collapsed():
    html = '<p><a href="https://x.com/Docs?a=1">  read\n  the   docs </a></p>'
    assert content_of(html) == "[read the docs](https://x.com/Docs?a=1)\n"


def test_nested_blocks_are_rendered_in_document_order():
    html = "<div><section><h3>Deep</h3><ul><li><p>Inner</p></li></ul></section></div><span>skipped</span>"
    assert content_of(html) == "### Deep\n- Inner\nInner\n"


@pytest.mark.parametrize(
    "html,expected",
    [
        (
            '<div class="main-content"><p>Div</p></div><main><p>Main</p></main><article><p>Article</p></article>',
            "Article\n",
        ),
        ('<div class="main-content"><p>Div</p></div><main><p>Main</p></main>', "Main\n"),
        ('<p>Outside</p><section class="page content"><p>Div</p></section>', "Div\n"),
        ("<p>A</p><div><p>B</p></div>", "A\nB\n"),
    ],
)
def test_container_preference(html, expected):
    assert content_of(html) == expected


def test_custom_selectors():
    soup = BeautifulSoup('<main><p>Main</p></main><div id="body"><p>Body</p></div>', "html.parser")
    assert render_content(select_container(soup, ["#body", "main"])) == "Body\n"


def test_empty_container_gives_empty_content():
    details = parse_page_details(URL, "<article><div>no blocks here</div></article>")
    assert details.content == ""


def test_metadata():
    html = (
        "<html><head><title>  Hi  there </title>"
        '<meta name="description" content=" A page. ">'
        '<meta name="keywords">'
        "</head><body><p>Body</p></body></html>"
    )
    details = parse_page_details(URL, html)
    assert details == PageDetails(
        url=URL,
        title="Hi  there",
        description="A page.",
        keywords="",
        content="Body\n",
    )


def test_missing_metadata_is_none():
    details = parse_page_details(URL, b"<p>x</p>")
    assert details.title is None
    assert details.description is None
    assert details.keywords is None
    assert details.content == "x\n"


def test_page_details_is_immutable():
    details = PageDetails(url=URL)
    with pytest.raises(AttributeError):
        details.title = "changed"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("  a  ", "a"),
        ("a\n\tb", "a b"),
        ("a   b", "a b"),
        ("", ""),
    ],
)
def test_collapse_whitespace(text, expected):
    assert collapse_whitespace(text) == expected


def test_bytes_decoded_with_declared_encoding():
    html = "<title>Привет мир</title><p>Статья</p>".encode("cp1251")
    details = parse_page_details(URL, html, encoding="windows-1251")
    assert details.title == "Привет мир"
    assert details.content == "Статья\n"
