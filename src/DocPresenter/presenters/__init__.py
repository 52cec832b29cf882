"""Presenters resolving and rendering document fields.

The building blocks (value resolver, formatter, heading resolver and
alternate-link generator) can be used on their own; `ShowPresenter` and
`IndexPresenter` combine them for one document and one view.
"""

from __future__ import annotations

from DocPresenter.presenters.base import DocumentPresenter
from DocPresenter.presenters.formatter import format_value, to_sentence
from DocPresenter.presenters.index import IndexPresenter
from DocPresenter.presenters.links import LinkDescriptor, link_rel_alternates, render_link_rel_alternates
from DocPresenter.presenters.resolver import UNSET, FieldValueResolver, Strategy, select_strategy
from DocPresenter.presenters.show import ShowPresenter
from DocPresenter.presenters.titles import resolve_candidates, resolve_heading, resolve_title

__all__ = [
    "UNSET",
    "DocumentPresenter",
    "FieldValueResolver",
    "IndexPresenter",
    "LinkDescriptor",
    "ShowPresenter",
    "Strategy",
    "format_value",
    "link_rel_alternates",
    "render_link_rel_alternates",
    "resolve_candidates",
    "resolve_heading",
    "resolve_title",
    "select_strategy",
    "to_sentence",
]
