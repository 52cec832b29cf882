"""Tests for alternate-link generation from export formats."""

import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DocPresenter.config.display import AlternatesConfig, DisplayConfig
from DocPresenter.config.routes import RoutesConfig
from DocPresenter.context.render import UrlRenderContext
from DocPresenter.core.document import IndexDocument
from DocPresenter.core.markup import SafeText
from DocPresenter.presenters.links import LinkDescriptor, link_rel_alternates, render_link_rel_alternates
from DocPresenter.presenters.show import ShowPresenter


class _MockDocument(IndexDocument):
    pass


def _mock_extension(document: IndexDocument) -> None:
    document.will_export_as("weird", "application/weird", lambda doc: "weird")
    document.will_export_as("weirder", "application/weirder", lambda doc: "weirder")
    document.will_export_as("weird_dup", "application/weird", lambda doc: "weird_dup")


_MockDocument.use_extension(_mock_extension)


class TestLinkRelAlternates(unittest.TestCase):
    def setUp(self) -> None:
        self.document = _MockDocument(id="MOCK_ID1")
        self.context = UrlRenderContext(RoutesConfig(base_url="http://example.org"))

    def test_one_link_per_format(self) -> None:
        links = link_rel_alternates(self.document, self.context)
        self.assertEqual([link.title for link in links], ["weird", "weirder", "weird_dup"])
        for link in links:
            self.assertEqual(link.rel, "alternate")
            self.assertEqual(link.href, f"http://example.org/catalog/MOCK_ID1.{link.title}")
        self.assertEqual(links[1].content_type, "application/weirder")

    def test_href_comes_from_context(self) -> None:
        context = MagicMock()
        context.export_url.side_effect = lambda document, format_id: f"url.{format_id}"
        links = link_rel_alternates(self.document, context)
        self.assertEqual([link.href for link in links], ["url.weird", "url.weirder", "url.weird_dup"])
        context.export_url.assert_any_call(self.document, "weird")

    def test_unique_keeps_first_format_per_content_type(self) -> None:
        links = link_rel_alternates(self.document, self.context, unique=True)
        self.assertEqual([link.title for link in links], ["weird", "weirder"])
        self.assertEqual([link.content_type for link in links].count("application/weird"), 1)

    def test_exclude_without_unique(self) -> None:
        links = link_rel_alternates(self.document, self.context, exclude={"weird_dup"})
        self.assertEqual([link.title for link in links], ["weird", "weirder"])

    def test_exclude_with_unique(self) -> None:
        links = link_rel_alternates(self.document, self.context, unique=True, exclude={"weird_dup"})
        self.assertNotIn("weird_dup", [link.title for link in links])

    def test_excluded_format_does_not_hide_later_duplicate(self) -> None:
        links = link_rel_alternates(self.document, self.context, unique=True, exclude={"weird"})
        self.assertEqual([link.title for link in links], ["weirder", "weird_dup"])

    def test_document_without_formats(self) -> None:
        self.assertEqual(link_rel_alternates(IndexDocument(id="plain"), self.context), [])
        self.assertEqual(render_link_rel_alternates(IndexDocument(id="plain"), self.context), "")

    def test_idempotent(self) -> None:
        first = link_rel_alternates(self.document, self.context, unique=True)
        second = link_rel_alternates(self.document, self.context, unique=True)
        self.assertEqual(first, second)

    def test_render_link_tags(self) -> None:
        rendered = render_link_rel_alternates(self.document, self.context)
        self.assertIsInstance(rendered, SafeText)
        lines = rendered.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertEqual(
            lines[0],
            '<link rel="alternate" title="weird" type="application/weird"'
            ' href="http://example.org/catalog/MOCK_ID1.weird" />',
        )

    def test_link_tag_escapes_attributes(self) -> None:
        link = LinkDescriptor(title='a"b', content_type="text/plain", href="/x?a=1&b=2")
        self.assertIn('title="a&quot;b"', link.to_tag())
        self.assertIn('href="/x?a=1&amp;b=2"', link.to_tag())

    def test_extension_does_not_leak_to_parent_class(self) -> None:
        self.assertEqual(dict(IndexDocument(id="plain").export_formats()), {})


class TestPresenterLinkRelAlternates(unittest.TestCase):
    def test_defaults_come_from_display_config(self) -> None:
        config = DisplayConfig(alternates=AlternatesConfig(unique=True, exclude=("weirder",)))
        presenter = ShowPresenter(_MockDocument(id="MOCK_ID1"), UrlRenderContext(), config)
        self.assertEqual([link.title for link in presenter.link_rel_alternates()], ["weird"])

    def test_arguments_override_config(self) -> None:
        config = DisplayConfig(alternates=AlternatesConfig(unique=True, exclude=("weirder",)))
        presenter = ShowPresenter(_MockDocument(id="MOCK_ID1"), UrlRenderContext(), config)
        links = presenter.link_rel_alternates(unique=False, exclude=())
        self.assertEqual([link.title for link in links], ["weird", "weirder", "weird_dup"])
        self.assertEqual(presenter.render_link_rel_alternates(unique=False, exclude=()).count("<link "), 3)


if __name__ == "__main__":
    unittest.main()
