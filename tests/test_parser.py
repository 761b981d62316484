"""libclang integration tests against samples/Widget.h."""

from pathlib import Path

import pytest

cindex = pytest.importorskip("clang.cindex")

from objchx.config import ParseConfig  # noqa: E402
from objchx.haxe_generator import HaxeGenerator  # noqa: E402
from objchx.sink import MemorySink  # noqa: E402
from objchx.types import DeclKind, TypeKind  # noqa: E402
from objchx.walker import DeclarationWalker  # noqa: E402

SAMPLE = Path(__file__).parent.parent / "samples" / "Widget.h"


def _libclang_available() -> bool:
    try:
        cindex.conf.lib
    except cindex.LibclangError:
        return False
    return True


pytestmark = pytest.mark.skipif(not _libclang_available(), reason="libclang shared library not found")


@pytest.fixture(scope="module")
def parsed():
    from objchx.parser import ClangParser

    clang = ClangParser(ParseConfig(header=SAMPLE))
    root = clang.parse()
    return clang, root


@pytest.fixture(scope="module")
def widget(parsed):
    _, root = parsed
    for child in root.children:
        if child.kind == DeclKind.INTERFACE and child.name == "Widget":
            return child
    pytest.fail("Widget interface not found")


@pytest.fixture(scope="module")
def units(parsed):
    _, root = parsed
    sink = MemorySink()
    DeclarationWalker(HaxeGenerator(), sink).walk(root)
    return sink.units


def methods_by_selector(widget):
    return {m.selector: m for m in HaxeGenerator().emit_class(widget).methods}


def test_top_level_kinds(parsed):
    _, root = parsed
    kinds = {child.name: child.kind for child in root.children if child.name}
    assert kinds["Widget"] == DeclKind.INTERFACE
    assert kinds["WidgetDelegate"] == DeclKind.PROTOCOL
    assert kinds["WidgetSize"] == DeclKind.RECORD


def test_protocols_and_records_are_not_emitted(units):
    assert "Widget" in units
    assert "NSArray" in units
    assert "WidgetDelegate" not in units
    assert "WidgetSize" not in units


def test_method_order_with_implicit_accessor(widget):
    unit = HaxeGenerator().emit_class(widget)
    # The property itself is skipped; clang lists its implicit getter after
    # the explicit methods
    assert [m.selector for m in unit.methods] == [
        "doThing:withOption:",
        "widgetNamed:",
        "perform:",
        "runWithHandler:",
        "labels",
        "count",
        "owner",
    ]


def test_implicit_getter_binding(widget):
    entry = methods_by_selector(widget)["owner"]
    assert not entry.is_static
    assert entry.params == []
    assert entry.return_type == "cpp.objc.NSObject"


def test_widget_scenario(widget):
    entry = methods_by_selector(widget)["doThing:withOption:"]
    assert entry.name == "doThing"
    assert not entry.is_static
    assert [(p.name, p.type) for p in entry.params] == [
        ("thing", "cpp.Star</* ObjCInterface */ Foo>"),
        ("opt", "cpp.objc.NSObject"),
    ]
    assert entry.return_type == "Void"


def test_class_method_is_static(widget):
    entry = methods_by_selector(widget)["widgetNamed:"]
    assert entry.is_static
    assert entry.params[0].name == "name"


def test_selector_and_block_types(widget):
    methods = methods_by_selector(widget)
    assert methods["perform:"].params[0].type == "SEL"
    assert methods["runWithHandler:"].params[0].type.startswith("cpp.objc.ObjcBlock<")


def test_parameterized_return_type(widget):
    labels = methods_by_selector(widget)["labels"].return_type
    assert labels == "cpp.Star</* ObjCInterface */ NSArray<cpp.Star</* ObjCInterface */ NSString>>>"


def test_parameterized_type_views(widget):
    method = next(c for c in widget.children if c.name == "labels")
    pointee = method.result_type.pointee
    assert pointee.kind == TypeKind.OBJC_OBJECT
    assert pointee.base_type.kind == TypeKind.OBJC_INTERFACE
    assert pointee.base_type.display_name == "NSArray"
    assert [a.kind for a in pointee.type_arguments] == [TypeKind.OBJC_OBJECT_POINTER]


def test_generic_class_with_superclass(parsed):
    _, root = parsed
    array = next(c for c in root.children if c.kind == DeclKind.INTERFACE and c.name == "NSArray")
    unit = HaxeGenerator().emit_class(array)
    assert [m.selector for m in unit.methods] == ["firstObject"]
    # Type parameters have no structural mapping
    assert unit.methods[0].return_type == "ObjectType /* ObjCTypeParam */"


def test_generic_class_renders(units):
    assert "@:objc extern class NSArray {" in units["NSArray"]
    assert "ObjCTypeParam" in units["NSArray"]


def test_unmapped_type_is_flagged(widget):
    assert methods_by_selector(widget)["count"].return_type == "int /* Int */"


def test_parameter_views(widget):
    method = next(c for c in widget.children if c.name == "doThing:withOption:")
    thing, opt = method.arguments
    assert thing.kind == DeclKind.PARAMETER
    assert thing.type.kind == TypeKind.OBJC_OBJECT_POINTER
    assert thing.type.pointee.kind == TypeKind.OBJC_INTERFACE
    assert opt.type.kind == TypeKind.OBJC_ID


def test_diagnostics_are_text(parsed):
    clang, _ = parsed
    assert all(isinstance(d, str) for d in clang.diagnostics)


def test_sample_parses_cleanly(parsed):
    clang, _ = parsed
    assert clang.diagnostics == []
