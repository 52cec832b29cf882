"""Tests for ShowPresenter field values, headings and titles."""

import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, Mock

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DocPresenter.config.display import DisplayConfig, ViewConfig
from DocPresenter.context.render import HelperArguments
from DocPresenter.core.document import IndexDocument
from DocPresenter.core.fields import AccessorNotFoundError
from DocPresenter.core.markup import SafeText
from DocPresenter.presenters.show import ShowPresenter


class _CatalogDocument(IndexDocument):
    def solr_doc_accessor(self) -> str:
        return "123"

    def solr_doc_accessor_with_arg(self, field: str) -> str:
        return f"123 for {field}"


def _config() -> DisplayConfig:
    config = DisplayConfig()
    config.add_show_field("qwer")
    config.add_show_field("asdf", helper_method="render_asdf_document_show_field")
    config.add_show_field("link_to_facet_true", link_to_facet=True)
    config.add_show_field("link_to_facet_named", link_to_facet="some_field")
    config.add_show_field("highlight", highlight=True)
    config.add_show_field("solr_doc_accessor", accessor=True)
    config.add_show_field("explicit_accessor", accessor="solr_doc_accessor")
    config.add_show_field("explicit_array_accessor", accessor=["solr_doc_accessor", "some_method"])
    config.add_show_field("explicit_accessor_with_arg", accessor="solr_doc_accessor_with_arg")
    config.add_show_field("missing_accessor", accessor="no_such_accessor")
    config.accessors.register_method("solr_doc_accessor")
    config.accessors.register_method("solr_doc_accessor_with_arg", takes_field=True)
    config.accessors.register("some_method", lambda value: f"{value} via some_method")
    return config


def _document(**highlighting: list) -> _CatalogDocument:
    return _CatalogDocument(
        {
            "id": 1,
            "link_to_facet_true": "x",
            "link_to_facet_named": "x",
            "qwer": "document qwer value",
            "mnbv": "document mnbv value",
            "highlight": "raw highlight value",
        },
        highlighting=highlighting,
    )


class TestFieldValue(unittest.TestCase):
    def setUp(self) -> None:
        self.config = _config()
        self.context = MagicMock()
        self.presenter = ShowPresenter(_document(), self.context, self.config)

    def test_html_escapes_values(self) -> None:
        value = self.presenter.field_value("asdf", value="<b>val1</b>")
        self.assertEqual(value, "&lt;b&gt;val1&lt;/b&gt;")

    def test_joins_two_values(self) -> None:
        self.assertEqual(self.presenter.field_value("asdf", value=["<a", "b"]), "&lt;a and b")

    def test_joins_three_values(self) -> None:
        self.assertEqual(self.presenter.field_value("asdf", value=["a", "b", "c"]), "a, b, and c")

    def test_explicit_value_skips_helper(self) -> None:
        value = self.presenter.field_value(self.config.show_fields["asdf"], value="val1")
        self.assertEqual(value, "val1")
        self.context.call_helper.assert_not_called()

    def test_explicit_value_skips_highlight_and_accessor(self) -> None:
        self.assertEqual(self.presenter.field_value("highlight", value="given"), "given")
        self.assertEqual(self.presenter.field_value("missing_accessor", value="given"), "given")

    def test_explicit_none_is_blank(self) -> None:
        self.assertEqual(self.presenter.field_value("qwer", value=None), "")

    def test_helper_method(self) -> None:
        self.context.call_helper.return_value = "custom asdf value"
        value = self.presenter.field_value("asdf")
        self.assertEqual(value, "custom asdf value")
        name, arguments = self.context.call_helper.call_args.args
        self.assertEqual(name, "render_asdf_document_show_field")
        self.assertIsInstance(arguments, HelperArguments)
        self.assertEqual(arguments.field, "asdf")
        self.assertIs(arguments.config, self.config.show_fields["asdf"])

    def test_helper_safe_result_is_not_escaped(self) -> None:
        self.context.call_helper.return_value = SafeText("<i>custom</i>")
        self.assertEqual(self.presenter.field_value("asdf"), "<i>custom</i>")

    def test_helper_failure_propagates(self) -> None:
        self.context.call_helper.side_effect = RuntimeError("boom")
        with self.assertRaisesRegex(RuntimeError, "boom"):
            self.presenter.field_value("asdf")

    def test_link_to_facet(self) -> None:
        self.context.search_action_path.return_value = "/foo"
        self.context.link_to.return_value = "bar"
        value = self.presenter.field_value("link_to_facet_true")
        self.assertEqual(value, "bar")
        self.context.link_to.assert_called_once_with("x", "/foo")
        self.context.search_action_path.assert_called_once_with("link_to_facet_true", "x")

    def test_link_to_facet_with_field_name(self) -> None:
        self.context.search_action_path.return_value = "/foo"
        self.context.link_to.return_value = "bar"
        value = self.presenter.field_value("link_to_facet_named")
        self.assertEqual(value, "bar")
        self.context.link_to.assert_called_once_with("x", "/foo")
        self.context.search_action_path.assert_called_once_with("some_field", "x")

    def test_link_to_facet_without_values_is_blank(self) -> None:
        self.config.add_show_field("empty_facet", link_to_facet=True)
        self.assertEqual(self.presenter.field_value("empty_facet"), "")
        self.context.link_to.assert_not_called()

    def test_missing_highlight_is_blank(self) -> None:
        value = self.presenter.field_value("highlight")
        self.assertEqual(value, "")

    def test_highlighted_field(self) -> None:
        presenter = ShowPresenter(_document(highlight=["<em>highlight</em>"]), self.context, self.config)
        self.assertEqual(presenter.field_value("highlight"), "<em>highlight</em>")

    def test_multivalued_highlight_keeps_markup(self) -> None:
        document = _document(highlight=["<em>highlight</em>", "<em>other highlight</em>"])
        presenter = ShowPresenter(document, self.context, self.config)
        self.assertEqual(presenter.field_value("highlight"), "<em>highlight</em> and <em>other highlight</em>")

    def test_document_field_value(self) -> None:
        self.assertEqual(self.presenter.field_value("qwer"), "document qwer value")

    def test_unconfigured_field_reads_document(self) -> None:
        self.assertEqual(self.presenter.field_value("mnbv"), "document mnbv value")

    def test_generic_accessor(self) -> None:
        self.assertEqual(self.presenter.field_value("solr_doc_accessor"), "123")

    def test_explicit_accessor(self) -> None:
        self.assertEqual(self.presenter.field_value("explicit_accessor"), "123")

    def test_explicit_array_accessor(self) -> None:
        self.assertEqual(self.presenter.field_value("explicit_array_accessor"), "123 via some_method")

    def test_accessor_with_field_argument(self) -> None:
        value = self.presenter.field_value("explicit_accessor_with_arg")
        self.assertEqual(value, "123 for explicit_accessor_with_arg")

    def test_unknown_accessor_raises(self) -> None:
        with self.assertRaises(AccessorNotFoundError):
            self.presenter.field_value("missing_accessor")


class TestFieldValues(unittest.TestCase):
    def test_helper_receives_document_field_value_config_and_options(self) -> None:
        config = DisplayConfig()
        field_config = config.add_facet_field("field_with_helper", helper_method="render_field_with_helper")
        document = IndexDocument({"id": 1, "field_with_helper": "value"})
        context = MagicMock()
        context.call_helper.side_effect = lambda name, arguments: arguments.to_mapping()

        options = ShowPresenter(document, context, config).field_values(field_config, a=1)

        self.assertIs(options["document"], document)
        self.assertEqual(options["field"], "field_with_helper")
        self.assertEqual(options["value"], ["value"])
        self.assertIs(options["config"], field_config)
        self.assertEqual(options["a"], 1)

    def test_field_options_are_merged_under_call_options(self) -> None:
        config = DisplayConfig()
        field_config = config.add_show_field("f", helper_method="h", options={"a": 0, "b": 2})
        context = MagicMock()
        context.call_helper.side_effect = lambda name, arguments: arguments.to_mapping()

        options = ShowPresenter(IndexDocument(id=1), context, config).field_values(field_config, a=1)

        self.assertEqual(options["a"], 1)
        self.assertEqual(options["b"], 2)
        self.assertEqual(options["value"], [])

    def test_fixed_keys_win_over_options(self) -> None:
        config = DisplayConfig()
        field_config = config.add_show_field("f", helper_method="h", options={"field": "spoofed"})
        context = MagicMock()
        context.call_helper.side_effect = lambda name, arguments: arguments.to_mapping()

        options = ShowPresenter(IndexDocument(id=1), context, config).field_values(field_config)

        self.assertEqual(options["field"], "f")


class TestRenderField(unittest.TestCase):
    def setUp(self) -> None:
        self.context = MagicMock()
        self.presenter = ShowPresenter(IndexDocument(id=1), self.context, DisplayConfig())

    def test_true_when_enabled_and_has_value(self) -> None:
        self.context.should_render_field.return_value = True
        self.context.document_has_value.return_value = True
        self.assertTrue(self.presenter.render_field("anything"))

    def test_false_without_value(self) -> None:
        self.context.should_render_field.return_value = True
        self.context.document_has_value.return_value = False
        self.assertFalse(self.presenter.render_field("anything"))

    def test_false_when_disabled(self) -> None:
        self.context.should_render_field.return_value = False
        self.context.document_has_value.return_value = True
        self.assertFalse(self.presenter.render_field("anything"))


class TestHeading(unittest.TestCase):
    def setUp(self) -> None:
        self.config = DisplayConfig()
        self.document = Mock()
        self.document.id = "xyz"

    def test_falls_back_to_id(self) -> None:
        presenter = ShowPresenter(IndexDocument(id="xyz"), MagicMock(), self.config)
        self.assertEqual(presenter.heading(), "xyz")

    def test_returns_value_of_field(self) -> None:
        self.config.show = ViewConfig(title_field=("x",))
        self.document.has.return_value = True
        self.document.get.return_value = "value"
        self.assertEqual(ShowPresenter(self.document, MagicMock(), self.config).heading(), "value")
        self.document.get.assert_called_once_with("x")

    def test_returns_first_present_value(self) -> None:
        self.config.show = ViewConfig(title_field=("x", "y"))
        self.document.has.side_effect = lambda field: field == "y"
        self.document.get.return_value = "value"
        self.assertEqual(ShowPresenter(self.document, MagicMock(), self.config).heading(), "value")
        self.document.get.assert_called_once_with("y")

    def test_no_present_candidate_falls_back_to_id(self) -> None:
        self.config.show = ViewConfig(title_field=("x", "y"))
        self.document.has.return_value = False
        self.assertEqual(ShowPresenter(self.document, MagicMock(), self.config).heading(), "xyz")

    def test_heading_is_escaped(self) -> None:
        self.config.show = ViewConfig(title_field=("title",))
        document = IndexDocument(id="1", title="<Motorcycle>")
        self.assertEqual(ShowPresenter(document, MagicMock(), self.config).heading(), "&lt;Motorcycle&gt;")


class TestHtmlTitle(unittest.TestCase):
    def setUp(self) -> None:
        self.config = DisplayConfig()
        self.document = Mock()
        self.document.id = "xyz"

    def test_falls_back_to_id(self) -> None:
        presenter = ShowPresenter(IndexDocument(id="xyz"), MagicMock(), self.config)
        self.assertEqual(presenter.html_title(), "xyz")

    def test_returns_value_of_field(self) -> None:
        self.config.show = ViewConfig(html_title_field=("x",))
        self.document.has.return_value = True
        self.document.get_or_default.return_value = "value"
        self.assertEqual(ShowPresenter(self.document, MagicMock(), self.config).html_title(), "value")
        self.document.get_or_default.assert_called_once_with("x", None)

    def test_returns_first_present_value(self) -> None:
        self.config.show = ViewConfig(html_title_field=("x", "y"))
        self.document.has.side_effect = lambda field: field == "y"
        self.document.get_or_default.return_value = "value"
        self.assertEqual(ShowPresenter(self.document, MagicMock(), self.config).html_title(), "value")
        self.document.get_or_default.assert_called_once_with("y", None)

    def test_missing_value_falls_through(self) -> None:
        self.config.show = ViewConfig(html_title_field=("x", "y"))
        self.document.has.return_value = True
        self.document.get_or_default.side_effect = lambda field, default: default if field == "x" else "y value"
        self.assertEqual(ShowPresenter(self.document, MagicMock(), self.config).html_title(), "y value")

    def test_uses_title_field_when_html_title_field_unset(self) -> None:
        self.config.show = ViewConfig(title_field=("title",))
        document = IndexDocument(id="1", title="A title")
        self.assertEqual(ShowPresenter(document, MagicMock(), self.config).html_title(), "A title")


if __name__ == "__main__":
    unittest.main()
