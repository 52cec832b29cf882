"""Alternate-representation links for a document's export formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from DocPresenter.context.render import RenderContext
from DocPresenter.core.document import DocumentAccessor
from DocPresenter.core.markup import SafeText, escape


@dataclass(frozen=True, slots=True)
class LinkDescriptor:
    """One ``<link rel="alternate">`` tag.

    Attributes:
        title: Export format identifier.
        content_type: MIME type of the representation.
        href: URL of the representation.
        rel: Link relation.
    """

    title: str
    content_type: str
    href: str
    rel: str = "alternate"

    def to_tag(self) -> SafeText:
        """Render as an HTML ``<link>`` tag with escaped attributes."""
        return SafeText(
            f'<link rel="{escape(self.rel)}" title="{escape(self.title)}"'
            f' type="{escape(self.content_type)}" href="{escape(self.href)}" />'
        )


def link_rel_alternates(
    document: DocumentAccessor,
    context: RenderContext,
    *,
    unique: bool = False,
    exclude: Iterable[str] = (),
) -> list[LinkDescriptor]:
    """Build one link per export format of ``document``.

    Formats keep the document's enumeration order. Excluded formats are
    skipped before uniqueness is considered, so they never hide a later format
    with the same content type.

    Args:
        document: Document whose export formats are listed.
        context: Builds the URL for each format.
        unique: Keep only the first format per content type.
        exclude: Format identifiers to leave out.

    Returns:
        Link descriptors.
    """
    excluded = set(exclude)
    seen: set[str] = set()
    links: list[LinkDescriptor] = []
    for format_id, export_format in document.export_formats().items():
        if format_id in excluded:
            continue
        content_type = export_format.content_type
        if unique and content_type in seen:
            continue
        seen.add(content_type)
        links.append(
            LinkDescriptor(
                title=str(format_id),
                content_type=content_type,
                href=context.export_url(document, format_id),
            )
        )
    return links


def render_link_rel_alternates(
    document: DocumentAccessor,
    context: RenderContext,
    *,
    unique: bool = False,
    exclude: Iterable[str] = (),
) -> SafeText:
    """Render the alternate links as newline-separated ``<link>`` tags."""
    links = link_rel_alternates(document, context, unique=unique, exclude=exclude)
    return SafeText("\n".join(link.to_tag() for link in links))
