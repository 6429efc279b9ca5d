"""Fragment types produced by resolving a translated string.

A fragment sequence is a flat list mixing :class:`Text` spans with rich
nodes. Nodes carry resolved data only; rendering is up to the caller.
"""

import enum
from dataclasses import dataclass


class TagKind(str, enum.Enum):
    LINK = "Link"
    TOOLTIP = "Tooltip"


class Text(str):
    """Plain text span. Compares equal to the ``str`` it wraps."""

    __slots__ = ()

    kind = None


@dataclass(frozen=True)
class LinkNode:
    label: str
    href: str | None = None
    class_name: str = "cursor-pointer"
    target: str = "_blank"

    kind = TagKind.LINK


@dataclass(frozen=True)
class TooltipNode:
    label: str
    content: str = ""
    content_key: str = ""
    href: str | None = None
    class_name: str = "cursor-pointer"

    kind = TagKind.TOOLTIP


Fragment = Text | LinkNode | TooltipNode
