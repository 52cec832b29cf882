"""Map presenters to `DocumentView` display models."""

from __future__ import annotations

from DocPresenter.presenters.base import DocumentPresenter
from DocPresenter.presenters.formatter import format_value
from DocPresenter.presenters.links import LinkDescriptor
from DocPresenter.renderers.view_models import DocumentView, FieldView, LinkView


def map_link_to_view(link: LinkDescriptor) -> LinkView:
    return LinkView(title=link.title, content_type=link.content_type, href=link.href, rel=link.rel)


def map_presenter_to_view(presenter: DocumentPresenter) -> DocumentView:
    """Render every displayable field of a presenter's document.

    Args:
        presenter: Presenter bound to one document.

    Returns:
        DocumentView with rendered heading, title, fields and alternate links.
    """
    fields = [
        FieldView(key=field_config.key, label=field_config.label, value=str(presenter.field_value(field_config)))
        for field_config in presenter.fields_to_render()
    ]
    links = presenter.link_rel_alternates()
    return DocumentView(
        id=str(format_value(presenter.document.id)),
        heading=str(presenter.heading()),
        html_title=str(presenter.html_title()),
        fields=fields,
        alternates=[map_link_to_view(link) for link in links],
        link_tags="\n".join(link.to_tag() for link in links),
    )

