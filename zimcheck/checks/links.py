"""
Link extraction, classification and resolution.

Links are pulled from the attributes of an HTML document (``href`` and
``src`` by default) and classified by the shape of their target:

- ``""``                    -> EMPTY
- ``#frag`` / ``?query``    -> ANCHOR, same document
- ``scheme://...``, ``//x`` -> EXTERNAL
- ``mailto:``, ``data:``... -> FOREIGN_SCHEME, for the ignored schemes only
- anything else             -> INTERNAL, resolved against the article path

A colon alone does not make a scheme: ``Category:Paris`` is an internal
path unless ``category`` is listed among the ignored schemes.
"""

import re
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence
from urllib.parse import unquote

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

# Short articles such as "index.html" look like file names to bs4
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_EXTERNAL_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.\-]*:)?//")

DEFAULT_IGNORED_SCHEMES = (
    "mailto", "tel", "sms", "data", "javascript", "about",
    "geo", "irc", "magnet", "news", "urn",
)


class LinkKind(str, Enum):
    """Classification of a link target."""
    INTERNAL = "internal"
    EXTERNAL = "external"
    EMPTY = "empty"
    ANCHOR = "anchor"
    FOREIGN_SCHEME = "foreign-scheme"


@dataclass(frozen=True)
class Link:
    """One reference found in an article."""
    target: str
    attribute: str
    kind: LinkKind


class OutOfBoundsError(ValueError):
    """A relative link climbs above the root of the archive."""

    def __init__(self, target: str, base_path: str):
        self.target = target
        self.base_path = base_path
        super().__init__(f"{target} escapes the archive root from {base_path!r}")


def classify(target: str, ignored_schemes: Sequence[str] = DEFAULT_IGNORED_SCHEMES) -> LinkKind:
    """Classify a raw link target."""
    if not target:
        return LinkKind.EMPTY
    if target[0] in "#?":
        return LinkKind.ANCHOR
    if _EXTERNAL_RE.match(target):
        return LinkKind.EXTERNAL
    scheme = _SCHEME_RE.match(target)
    if scheme and scheme.group(1).lower() in ignored_schemes:
        return LinkKind.FOREIGN_SCHEME
    return LinkKind.INTERNAL


def extract_links(
    content: bytes,
    attributes: Sequence[str] = ("href", "src"),
    ignored_schemes: Sequence[str] = DEFAULT_IGNORED_SCHEMES,
) -> List[Link]:
    """Return every link of an HTML document, in document order.

    Targets are stripped of surrounding whitespace, as browsers do.
    """
    soup = BeautifulSoup(content, "html.parser")
    wanted = set(attributes)
    links = []
    for tag in soup.find_all(True):
        for attribute, value in tag.attrs.items():
            if attribute not in wanted:
                continue
            if isinstance(value, list):
                value = " ".join(value)
            target = value.strip()
            links.append(Link(target, attribute, classify(target, ignored_schemes)))
    return links


def base_directory(article_path: str) -> str:
    """Directory part of an article path ("" for top-level articles)."""
    slash = article_path.rfind("/")
    return article_path[:slash] if slash >= 0 else ""


def _strip_query_and_fragment(target: str) -> str:
    for separator in ("#", "?"):
        position = target.find(separator)
        if position >= 0:
            target = target[:position]
    return target


def resolve_link(target: str, article_path: str) -> str:
    """Resolve an internal link target to an archive path.

    The query string and fragment are dropped and percent escapes decoded.
    Paths starting with ``/`` are taken from the archive root.

    Raises:
        OutOfBoundsError: If ``..`` segments climb above the root
    """
    path = unquote(_strip_query_and_fragment(target))
    if path.startswith("/"):
        segments: List[str] = []
    else:
        base = base_directory(article_path)
        segments = base.split("/") if base else []

    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not segments:
                raise OutOfBoundsError(target, article_path)
            segments.pop()
        else:
            segments.append(segment)
    return "/".join(segments)


def distinct(targets: Iterable[str]) -> List[str]:
    """Targets without duplicates, first occurrence order."""
    return list(dict.fromkeys(targets))
