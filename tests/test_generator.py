import ast

import pytest

from jsoncodegen.generator import (
    UNNAMED_PREFIX,
    Generator,
    Settings,
    char_literal,
    safe_name,
)
from jsoncodegen.type_name import Substance, TypeName


class FakeStringType:
    name = TypeName("std::string")


class FakeType:
    def __init__(self, body, suffix="", substance=Substance.ACTUAL):
        self.name = TypeName(body, suffix, substance)


def make(class_name="MyParser", **settings):
    return Generator(class_name, FakeStringType(), Settings(**settings))


def test_class_name_split_into_namespaces():
    gen = make("outer::inner::Cls")
    assert gen.class_name == "Cls"
    assert gen.class_namespaces == ["outer", "inner"]
    assert gen._begin_namespace() == "namespace outer {\n\nnamespace inner {\n\n"
    assert gen._end_namespace() == "\n}\n" * 2


def test_plain_class_name_has_no_namespace():
    gen = make("Cls")
    assert gen.class_namespaces == []
    assert gen._begin_namespace() == ""
    assert gen._end_namespace() == ""


def test_default_settings():
    gen = Generator("X", FakeStringType())
    assert gen.settings == Settings()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Error", "::Error"),
        ("NonRef", "::NonRef"),
        ("ns::Error", "::ns::Error"),
        (UNNAMED_PREFIX + "3", "::" + UNNAMED_PREFIX + "3"),
        ("ErrorCode", "ErrorCode"),
        ("MyError", "MyError"),
        (UNNAMED_PREFIX + "X", UNNAMED_PREFIX + "X"),
        ("::Error", "::Error"),
        ("", ""),
        ("Foo", "Foo"),
    ],
)
def test_safe_name(name, expected):
    assert safe_name(name) == expected


def test_char_literal_escapes():
    assert char_literal("\n") == "'\\n'"
    assert char_literal("\0") == "'\\0'"
    assert char_literal("\\") == "'\\\\'"
    assert char_literal("a") == "'a'"
    assert char_literal(0x80) == "'\\x80'"


@pytest.mark.parametrize("code", range(256))
def test_char_literal_round_trip(code):
    assert ast.literal_eval(char_literal(code)) == chr(code)


def test_char_literal_rejects_wide_characters():
    with pytest.raises(ValueError):
        char_literal(0x100)


def test_json_literals_are_quoted():
    gen = make()
    assert gen.json_member_name_literal("name") == '"name"'
    assert gen.json_enum_value_literal("RED") == '"RED"'


def test_add_feature_accumulates_bits():
    gen = make()
    gen.add_feature(Generator.FEATURE_CSTDLIB)
    gen.add_feature(0x0100)
    assert gen.feature_bits == Generator.FEATURE_CSTDLIB | 0x0100


def test_add_type_include():
    gen = make()
    gen.add_type_include('"a.h"')
    gen.add_type_include("<b.h>")
    assert gen.type_includes == ['"a.h"', "<b.h>"]


def test_function_name_collisions_produce_unique_names():
    gen = make()
    names = [gen._generate_function_name("parse", FakeType("my_type")) for _ in range(4)]
    assert names[0] == "parseMyType"
    assert len(set(names)) == 4
    assert all(name.startswith("parseMyType") for name in names)


def test_function_name_ending_in_digit_gets_separator():
    gen = make()
    first = gen._generate_function_name("parse", FakeType("Vec2"))
    second = gen._generate_function_name("parse", FakeType("Vec2"))
    assert first == "parseVec2"
    assert second.startswith("parseVec2_")


def test_function_name_includes_array_suffix():
    gen = make()
    name = gen._generate_function_name("parse", FakeType("int", "[4]"))
    assert name == "parseInt_4"


def test_virtual_typename_resolved_once():
    gen = make()
    unnamed = FakeType(UNNAMED_PREFIX + "0", "[2][3]", Substance.VIRTUAL)
    parent = FakeType("Parent")
    gen.resolve_virtual_typename(unnamed, parent, "member")
    gen.resolve_virtual_typename(unnamed, parent, "member")
    code = gen._generate_virtual_typedefs("")
    line = "typedef typename NonRef<decltype(Parent::member[0][0])>::Type " + UNNAMED_PREFIX + "0;\n"
    assert code.count(line) == 1
    assert code.count("typedef typename NonRef") == 1
    assert code.startswith("template <typename T> struct NonRef { typedef T Type; };\n")


def test_actual_typename_not_resolved():
    gen = make()
    gen.resolve_virtual_typename(FakeType("Named"), FakeType("Parent"), "member")
    assert gen._generate_virtual_typedefs("    ") == ""