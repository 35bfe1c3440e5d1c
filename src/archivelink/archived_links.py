"""Find archived-link anchors in a document and open them."""

from __future__ import annotations

import re
import webbrowser
from dataclasses import dataclass

from .links import ARCHIVED_LINK_CLASS

_ANCHOR_RE = re.compile(r"<a\b(?P<attrs>[^>]*)>(?P<text>.*?)</a>", re.IGNORECASE | re.DOTALL)
# name="value", name='value' or name=value
_ATTR_RE = re.compile(r"""([A-Za-z_:][-\w:.]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")
# URL immediately before an anchor on the same line
_PRECEDING_URL_RE = re.compile(r"([A-Za-z][A-Za-z0-9+.-]*:\S+)\s+$")


@dataclass(frozen=True)
class ArchivedLink:
    """An archived-link anchor found in a document.

    Attributes:
        href: Location of the archived copy (file:// URL)
        url: The original URL written before the anchor, if any
        start: Offset of the anchor in the document
        end: Offset just past the anchor
        line: 1-based line number of the anchor
    """

    href: str
    url: str | None
    start: int
    end: int
    line: int


def find_archived_links(text: str) -> list[ArchivedLink]:
    """Return every ``archivedLink`` anchor in text, in document order."""
    links = []
    for match in _ANCHOR_RE.finditer(text):
        attrs = _parse_attrs(match.group("attrs"))
        if ARCHIVED_LINK_CLASS not in attrs.get("class", "").split() or "href" not in attrs:
            continue
        href = attrs["href"]

        line_start = text.rfind("\n", 0, match.start()) + 1
        before = _PRECEDING_URL_RE.search(text[line_start : match.start()])
        links.append(
            ArchivedLink(
                href=href,
                url=_strip_closing_paren(before.group(1)) if before else None,
                start=match.start(),
                end=match.end(),
                line=text.count("\n", 0, match.start()) + 1,
            )
        )
    return links


def _parse_attrs(attrs: str) -> dict[str, str]:
    parsed = {}
    for name, double, single, bare in _ATTR_RE.findall(attrs):
        parsed.setdefault(name.lower(), double or single or bare)
    return parsed


def _strip_closing_paren(url: str) -> str:
    # [label](url) leaves the link's closing paren on the URL
    if url.endswith(")") and url.count(")") > url.count("("):
        return url[:-1]
    return url


def open_archived_link(href: str) -> bool:
    """Open an archived copy in the default browser."""
    return webbrowser.open(href)
