"""Pattern-based scanner for the inline pseudo-markup used in translations.

Translations may embed ``<Link href="...">label</Link>`` and
``<Tooltip content="some.key">label</Tooltip>``. This is not a parser: the
full tag is found with one pattern per kind, and attributes are pulled out
of the matched span with independent sub-patterns. A tag without its
closing counterpart never matches, so it stays in the output as literal
text.

:func:`next_tag` is the only entry point the resolver uses, so the patterns
can be replaced by a real tokenizer without touching it.
"""

import re
from dataclasses import dataclass

from lessonlab.i18n.fragments import TagKind

_TAG_RES = {
    TagKind.LINK: re.compile(r"<Link(.*?)>(.*?)</Link>", re.IGNORECASE | re.MULTILINE),
    TagKind.TOOLTIP: re.compile(r"<Tooltip(.*?)>(.*?)</Tooltip>", re.IGNORECASE | re.MULTILINE),
}

_LABEL_RE = re.compile(r">(.*?)<")
_HREF_RE = re.compile(r'href="(.*?)"')
_CLASS_NAME_RE = re.compile(r'className="(.*?)"')
_CONTENT_RE = re.compile(r'content="(.*?)"')

# Closing tags whose presence marks a string as needing interpolation.
CLOSING_TAGS = ("</Link>", "</Tooltip>")


@dataclass(frozen=True)
class LinkAttributes:
    label: str
    href: str | None = None
    class_name: str | None = None


@dataclass(frozen=True)
class TooltipAttributes:
    label: str
    href: str | None = None
    class_name: str | None = None
    content: str | None = None


@dataclass(frozen=True)
class TagMatch:
    kind: TagKind
    start: int
    end: int
    html: str

    def attributes(self) -> LinkAttributes | TooltipAttributes:
        label = _search(_LABEL_RE, self.html) or ""
        href = _search(_HREF_RE, self.html)
        class_name = _search(_CLASS_NAME_RE, self.html)
        if self.kind is TagKind.TOOLTIP:
            return TooltipAttributes(
                label=label,
                href=href,
                class_name=class_name,
                content=_search(_CONTENT_RE, self.html),
            )
        return LinkAttributes(label=label, href=href, class_name=class_name)


def _search(pattern: re.Pattern, text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def has_markup(text: str) -> bool:
    """True when *text* contains at least one closing tag."""
    return any(tag in text for tag in CLOSING_TAGS)


def next_tag(text: str, kind: TagKind, pos: int = 0) -> TagMatch | None:
    """Return the first complete *kind* tag in *text* at or after *pos*."""
    match = _TAG_RES[kind].search(text, pos)
    if match is None:
        return None
    return TagMatch(kind=kind, start=match.start(), end=match.end(), html=match.group(0))
