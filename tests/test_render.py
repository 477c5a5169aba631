from unittest import TestCase

from looseorder.render import RecordRenderer
from looseorder.settings import Settings


class Item:
    def __init__(self, name):
        self.name = name


class TestRender(TestCase):
    def setUp(self):
        self.settings = Settings()

    def test_mapping(self):
        renderer = RecordRenderer(self.settings, "{{position}}. {{title}} ({{id}})")
        records = [{"id": "b", "title": "Second"}, {"id": "a", "title": "First"}]
        self.assertEqual(list(renderer.render_all(records)), ["1. Second (b)", "2. First (a)"])

    def test_object(self):
        renderer = RecordRenderer(self.settings, "{{record.name}}")
        self.assertEqual(renderer.render(Item("foo"), 1), "foo")

    def test_no_escape(self):
        renderer = RecordRenderer(self.settings, "{{title}}")
        self.assertEqual(renderer.render({"title": "<a & b>"}, 1), "<a & b>")

    def test_settings(self):
        renderer = RecordRenderer(self.settings, "{{record[ID_FIELD]}}")
        self.assertEqual(renderer.render({"id": "x"}, 1), "x")

    def test_unsandboxed(self):
        self.settings.JINJA2_SANDBOXED = False
        renderer = RecordRenderer(self.settings, "{{title|upper}}")
        self.assertEqual(renderer.render({"title": "foo"}, 1), "FOO")

    def test_invalid(self):
        with self.assertRaisesRegex(ValueError, "invalid record template"):
            RecordRenderer(self.settings, "{{title")

    def test_reserved_names(self):
        # Record fields can be named like arguments of Template.render
        renderer = RecordRenderer(self.settings, "{{title}} {{self}}")
        self.assertEqual(renderer.render({"title": "x", "self": "y"}, 1), "x y")

    def test_settings_globals(self):
        self.settings.SYNTHETIC_ID_PREFIX = "gen:"
        renderer = RecordRenderer(self.settings, "{{SYNTHETIC_ID_PREFIX}}{{position}}")
        self.assertEqual(renderer.render({}, 3), "gen:3")
