"""View models for output rendering.

Display-oriented, already-rendered data produced from presenters. Output
writers only read these; they never touch documents or field configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class FieldView:
    """One rendered field.

    Attributes:
        key: Field configuration key.
        label: Display label.
        value: Rendered, markup-safe value.
    """

    key: str
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class LinkView:
    """One alternate representation link."""

    title: str
    content_type: str
    href: str
    rel: str = "alternate"


@dataclass(frozen=True, slots=True)
class DocumentView:
    """Rendered document.

    Attributes:
        id: Document identity.
        heading: Rendered page heading.
        html_title: Rendered HTML title.
        fields: Rendered fields in configured order.
        alternates: Alternate representation links.
        link_tags: The alternates rendered as ``<link>`` tags.
    """

    id: str
    heading: str
    html_title: str
    fields: Sequence[FieldView]
    alternates: Sequence[LinkView] = ()
    link_tags: str = ""
