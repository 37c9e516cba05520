import pytest

from cssvendor.css.declaration import Declaration, Template


@pytest.mark.parametrize(
    "line",
    [
        "display: flex;",
        "  display: flex;",
        "\tmargin :  0 auto  !important ;",
        "color:red;",
        "color: red ;",
        "    $gutter: 10px !default;",
        "width: calc(100% - 10px);",
        "  justify-content: space-between !important;",
    ],
)
def test_render_reproduces_source(line):
    decl = Declaration.parse(line)
    assert decl is not None
    assert decl.raw == line
    assert decl.render() == line


def test_parse_fields():
    decl = Declaration.parse("    color: red !important;\n")
    assert decl.property == "color"
    assert decl.value == "red"
    assert decl.bang == "!important"
    assert decl.indent == 4
    assert decl.whitespace == "    "
    assert decl.raw == "    color: red !important;"


@pytest.mark.parametrize("line", ["", "   ", "no colon here", ": value", "   : value"])
def test_parse_without_declaration(line):
    assert Declaration.parse(line) is None


def test_parse_empty_value():
    decl = Declaration.parse("content: ;")
    assert decl is not None
    assert decl.value == ""
    assert decl.render() == "content: ;"


def test_parse_without_terminator_renders_terminator():
    decl = Declaration.parse("  color: red")
    assert decl is not None
    assert decl.value == "red"
    assert decl.render() == "  color: red;"


def test_property_text_inside_value_keeps_its_place():
    decl = Declaration.parse("  order: order;")
    assert decl.replace(property="-webkit-order").render() == "  -webkit-order: order;"
    assert decl.replace(value="2").render() == "  order: 2;"


def test_transplanted_template_keeps_formatting():
    source = Declaration.parse("\tflex :  1 1 0%  !important;")
    variant = Declaration("-ms-flex", "1 1 0%", "!important").with_template(source.template)
    assert variant.render() == "\t-ms-flex :  1 1 0%  !important;"


def test_bang_added_to_template_without_bang():
    source = Declaration.parse("  display: flex;")
    variant = Declaration("display", "flex", "!important").with_template(source.template)
    assert variant.render() == "  display: flex !important;"


def test_default_template():
    assert Declaration("a", "b").render() == "a: b;"
    assert Declaration("a", "b", "!important").render() == "a: b !important;"
    assert Template.default() == Template()


def test_declarations_are_immutable():
    decl = Declaration("a", "b")
    with pytest.raises(AttributeError):
        decl.value = "c"
    assert decl.replace(value="c").value == "c"
    assert decl.value == "b"
