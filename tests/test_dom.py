"""Tests for renderers, materialization and the in-memory DOM."""

from htmlbuilder import DomRenderer, Element, EventRegistry, Renderer, Text, compile_template, render_page
from htmlbuilder.dom import decode, materialize


class RecordingRenderer(Renderer):
    """Records capability calls; handles are tag names with a counter."""

    def __init__(self):
        self.calls = []
        self.count = 0

    def create_node(self, tag):
        self.count += 1
        handle = f"{tag}#{self.count}"
        self.calls.append(("create_node", tag))
        return handle

    def apply_class(self, handle, name):
        self.calls.append(("apply_class", handle, name))

    def set_id(self, handle, id):
        self.calls.append(("set_id", handle, id))

    def set_attribute(self, handle, name, value):
        self.calls.append(("set_attribute", handle, name, value))

    def append_text(self, handle, text):
        self.calls.append(("append_text", handle, text))

    def add_child(self, parent, child):
        self.calls.append(("add_child", parent, child))

    def add_event_binding(self, handle, binding):
        self.calls.append(("add_event_binding", handle, binding.name))

    def mount(self, roots, container):
        self.calls.append(("mount", list(roots), container))


def test_materialize_drives_any_renderer():
    registry = EventRegistry()
    registry.register("go", "click", lambda event: None)
    trees = compile_template("ul.list#menu[role=menu;hidden]@go\n>li(One &amp; two)")

    renderer = RecordingRenderer()
    roots = materialize(trees, renderer, registry)

    assert roots == ["ul#1"]
    assert renderer.calls == [
        ("create_node", "ul"),
        ("apply_class", "ul#1", "list"),
        ("set_id", "ul#1", "menu"),
        ("set_attribute", "ul#1", "role", "menu"),
        ("set_attribute", "ul#1", "hidden", None),
        ("add_event_binding", "ul#1", "go"),
        ("create_node", "li"),
        ("append_text", "li#2", "One & two"),
        ("add_child", "ul#1", "li#2"),
    ]


def test_materialize_without_decoder_keeps_content():
    renderer = RecordingRenderer()
    materialize(compile_template("p(&lt;b&gt;)"), renderer, decoder=None)
    assert ("append_text", "p#1", "&lt;b&gt;") in renderer.calls


def test_decode_leaves_unknown_references():
    assert decode("&amp; &bogus; &#x41;") == "& &bogus; A"


def test_duplicate_classes_apply_once():
    (div,) = materialize(compile_template("div.a.b.a"), DomRenderer())
    assert div.class_list == ["a", "b"]


def test_presence_attribute_and_void_element():
    (inp,) = materialize(compile_template("input[type=checkbox;checked]"), DomRenderer())
    assert inp.attributes == {"type": "checkbox", "checked": None}
    assert inp.to_html() == '<input type="checkbox" checked>'


def test_class_and_id_attributes_map_to_element_fields():
    el = Element("div")
    el.set_attribute("class", "a b a")
    el.set_attribute("id", "main")
    assert el.class_list == ["a", "b"]
    assert el.id == "main"
    assert el.attributes == {}


def test_text_and_attributes_are_escaped():
    el = Element("a")
    el.set_attribute("title", 'say "hi" <now>')
    el.append_child(Text("1 < 2 & 3"))
    assert el.to_html() == '<a title="say &quot;hi&quot; &lt;now&gt;">1 &lt; 2 &amp; 3</a>'


def test_dispatch_matches_trigger_type_and_once():
    registry = EventRegistry()
    seen = []
    registry.register("a", "click", lambda e: seen.append(("a", e)), {"once": True})
    registry.register("b", "click", lambda e: seen.append(("b", e)))
    registry.register("c", "keydown", lambda e: seen.append(("c", e)))
    (button,) = materialize(compile_template("button@a;b;c"), DomRenderer(), registry)

    assert button.dispatch("click", 1) == 2
    assert button.dispatch("click", 2) == 1
    assert button.dispatch("keydown", 3) == 1
    assert seen == [("a", 1), ("b", 1), ("b", 2), ("c", 3)]


def test_find_by_id_and_text_content():
    (root,) = materialize(
        compile_template("div\n>p#first(Hello )\n>>b(world)\n>p#second(!)"),
        DomRenderer(),
    )
    assert root.find_by_id("second").text_content == "!"
    assert root.find_by_id("missing") is None
    assert root.text_content == "Hello world!"
    assert [el.tag for el in root.iter()] == ["div", "p", "b", "p"]


def test_dom_renderer_mount_appends_in_order():
    body = Element("body")
    body.append_child(Element("nav"))
    renderer = DomRenderer()
    roots = [renderer.create_node("main"), renderer.create_node("footer")]
    renderer.mount(roots, body)
    assert [c.tag for c in body.children] == ["nav", "main", "footer"]


def test_render_page():
    html = render_page("<p>hi</p>", title="A & B")
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>A &amp; B</title>" in html
    assert "<p>hi</p>" in html
