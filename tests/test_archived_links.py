from archivelink import archived_links as al

DOC = """# Reading list

- https://example.com/docs/page <a class="archivedLink" href="file:///srv/page.html">(archived)</a>
- https://example.org/ not archived yet
- <a href="https://example.net">regular link</a>
- <a href="file:///srv/orphan.html" class="archivedLink">(archived)</a>
"""


def test_find_archived_links_in_document_order():
    links = al.find_archived_links(DOC)

    assert [link.href for link in links] == ["file:///srv/page.html", "file:///srv/orphan.html"]
    assert links[0].url == "https://example.com/docs/page"
    assert links[0].line == 3
    assert links[1].url is None
    assert links[1].line == 6


def test_find_archived_links_spans_cover_anchor():
    link = al.find_archived_links(DOC)[0]
    assert DOC[link.start : link.end].startswith('<a class="archivedLink"')
    assert DOC[link.start : link.end].endswith("</a>")


def test_find_archived_links_ignores_other_anchors():
    assert al.find_archived_links('<a class="external" href="https://e.com">x</a>') == []
    assert al.find_archived_links("no links here") == []


def test_open_archived_link_uses_browser(monkeypatch):
    opened = []
    monkeypatch.setattr(al.webbrowser, "open", lambda href: opened.append(href) or True)

    assert al.open_archived_link("file:///srv/page.html") is True
    assert opened == ["file:///srv/page.html"]


def test_find_archived_links_accepts_any_attribute_quoting():
    doc = (
        "https://e.com/a <a class='archivedLink' href='file:///srv/a.html'>(archived)</a>\n"
        "https://e.com/b <a href=file:///srv/b.html class=archivedLink>(archived)</a>\n"
        'https://e.com/c <a class="note archivedLink" title="x" href="file:///srv/c.html">(archived)</a>\n'
    )

    links = al.find_archived_links(doc)

    assert [link.href for link in links] == ["file:///srv/a.html", "file:///srv/b.html", "file:///srv/c.html"]
    assert [link.url for link in links] == ["https://e.com/a", "https://e.com/b", "https://e.com/c"]


def test_preceding_markdown_link_drops_closing_paren():
    doc = '[docs](https://e.com/docs) <a class="archivedLink" href="file:///srv/docs.html">(archived)</a>'
    assert al.find_archived_links(doc)[0].url == "https://e.com/docs"


def test_preceding_url_keeps_balanced_parens():
    doc = 'https://en.wikipedia.org/wiki/Foo_(bar) <a class="archivedLink" href="file:///srv/x.html">(archived)</a>'
    assert al.find_archived_links(doc)[0].url == "https://en.wikipedia.org/wiki/Foo_(bar)"


def test_generated_anchor_with_quote_reads_back_whole():
    from archivelink.links import anchor_for, output_filename, parse_url, replacement_text

    url = parse_url('https://e.com/a"b')
    doc = replacement_text(url, anchor_for("/srv", output_filename(url)))

    link = al.find_archived_links(doc)[0]

    assert link.href == "file:///srv/a%2522b.html"
    assert link.url == url
