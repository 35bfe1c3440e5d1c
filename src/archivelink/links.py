"""URL validation and link formatting for archived pages."""

from __future__ import annotations

import re
from urllib.parse import quote, urlsplit, urlunsplit

from .exceptions import InvalidURLError

ARCHIVED_LINK_CLASS = "archivedLink"
ARCHIVED_LINK_TEXT = "(archived)"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
# Schemes that must carry a host
_SPECIAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}
# Characters left as-is when percent-encoding each component of a special URL
_PATH_SAFE = "/%:@!$&'()*+,;=[]|^"
_QUERY_SAFE = "/?%:@!$&()*+,;=[]|^{}`\\"
_FRAGMENT_SAFE = "/?#%:@!$&'()*+,;=[]|^{}\\"


def parse_url(text: str | None) -> str:
    """Validate a selection as an absolute URL and return it normalized.

    Raises:
        InvalidURLError: If the text is empty or not an absolute URL.
    """
    candidate = (text or "").strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        raise InvalidURLError(f"Not a URL: {text!r}")

    try:
        parts = urlsplit(candidate)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise InvalidURLError(f"Not a URL: {text!r}") from e

    scheme = parts.scheme.lower()
    if not scheme or not _SCHEME_RE.match(scheme):
        raise InvalidURLError(f"Not a URL: {text!r}")

    if scheme in _SPECIAL_SCHEMES:
        if not parts.hostname:
            raise InvalidURLError(f"URL has no host: {text!r}")
        netloc = parts.netloc.rsplit("@", 1)
        netloc[-1] = netloc[-1].lower()
        return urlunsplit(
            (
                scheme,
                "@".join(netloc),
                quote(parts.path or "/", safe=_PATH_SAFE),
                quote(parts.query, safe=_QUERY_SAFE),
                quote(parts.fragment, safe=_FRAGMENT_SAFE),
            )
        )

    if not (parts.netloc or parts.path):
        raise InvalidURLError(f"Not a URL: {text!r}")
    return urlunsplit((scheme, parts.netloc, parts.path, parts.query, parts.fragment))


def output_filename(url: str) -> str:
    """Name of the archive file for a URL: its last path segment plus .html.

    A trailing slash is skipped, so both ``/docs/page`` and ``/docs/page/``
    give ``page.html``. A URL without a usable segment falls back to its host.
    """
    parts = urlsplit(url)
    segments = parts.path.split("/")
    name = segments.pop() or (segments.pop() if segments else "")
    if not name:
        name = parts.hostname or "index"
    return f"{name}.html"


def build_args(cli_opts: list[str], output_file: str, url: str) -> list[str]:
    """Arguments for one monolith run.

    The configured flags come first, unless the setting is empty (its first
    entry is the empty string).
    """
    base_args = [f"-o{output_file}", url]
    if cli_opts and cli_opts[0] != "":
        return [*cli_opts, *base_args]
    return base_args


def anchor_for(output_path: str, output_file: str) -> str:
    """Anchor pointing at the saved file.

    The file path is percent-encoded, so a file named ``a%22b.html`` on disk
    is linked as ``a%2522b.html``.
    """
    href = "file://" + quote(f"{output_path.rstrip('/')}/{output_file}")
    return f'<a class="{ARCHIVED_LINK_CLASS}" href="{href}">{ARCHIVED_LINK_TEXT}</a>'


def replacement_text(url: str, anchor: str) -> str:
    """Text that replaces the selected URL: the URL followed by the anchor."""
    return f"{url} {anchor}"


def splice(text: str, start: int, end: int, replacement: str) -> str:
    """Replace the range [start, end) of a text buffer."""
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"Invalid range {start}:{end} for text of length {len(text)}")
    return text[:start] + replacement + text[end:]
