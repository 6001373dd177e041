from jsoncodegen.generator import Settings
from jsoncodegen.serializer_generator import SerializerGenerator
from jsoncodegen.type_name import TypeName


class FakeStringType:
    name = TypeName("std::string")

    def generate_clear(self, s):
        return s + ".clear()"

    def generate_append_string_literal(self, s, literal):
        return s + " += " + literal

    def generate_append_char(self, s, c):
        return s + ".push_back(" + c + ")"

    def generate_append_c_str(self, s, c_str):
        return s + " += " + c_str


class FakeType:
    def __init__(self, body, code="    json += value;\n"):
        self.name = TypeName(body)
        self.code = code
        self.calls = 0

    def generate_serializer_function_body(self, generator, indent):
        self.calls += 1
        return self.code


def make(class_name="Ser", **settings):
    return SerializerGenerator(class_name, FakeStringType(), Settings(**settings))


def test_error_statement_throw_and_return():
    assert make().generate_error_statement("UNKNOWN_ENUM_VALUE") == (
        "throw Error(Error::UNKNOWN_ENUM_VALUE, &value)"
    )
    assert make(no_throw=True).generate_error_statement("UNKNOWN_ENUM_VALUE") == (
        "return Error(Error::UNKNOWN_ENUM_VALUE, &value)"
    )


def test_function_generated_once():
    gen = make()
    foo = FakeType("Foo")
    first = gen.generate_serializer_function_call(foo, "a")
    second = gen.generate_serializer_function_call(foo, "b")
    assert first == "serializeFoo(a)"
    assert second == "serializeFoo(b)"
    assert foo.calls == 1


def test_function_call_of_none_is_empty():
    assert make().generate_serializer_function_call(None, "x") == ""


def test_value_serialization_throwing():
    gen = make()
    foo = FakeType("Foo")
    assert gen.generate_value_serialization(foo, "x") == "serializeFoo(x);"
    assert gen.generate_value_serialization(foo, "x", "    ") == "    serializeFoo(x);\n"


def test_value_serialization_no_throw():
    gen = make(no_throw=True)
    foo = FakeType("Foo")
    assert gen.generate_value_serialization(foo, "x") == "if (Error error = serializeFoo(x)) return error;"
    indented = gen.generate_value_serialization(foo, "x", "  ")
    assert indented == "  if (Error error = serializeFoo(x))\n      return error;\n"


def test_header_declares_entry_points():
    gen = make("ns::Ser")
    gen.add_type_include('"foo.h"')
    gen.generate_serializer_function(FakeType("Foo"))
    header = gen.generate_header()
    assert "#include \"foo.h\"\n" in header
    assert "namespace ns {\n\nclass Ser {\n" in header
    assert "static Error serialize(std::string &jsonString, const Foo &input);\n" in header
    assert "void serializeFoo(const Foo &value);\n" in header
    assert "UNREPRESENTABLE_FLOAT_VALUE" in header
    assert header.endswith("\n};\n\n}\n")
    assert "private:" not in header


def test_header_private_section_for_integer_writers():
    gen = make()
    gen.add_feature(SerializerGenerator.FEATURE_WRITE_SIGNED)
    header = gen.generate_header()
    assert "void writeSigned(T value);\n" in header
    assert "writeUnsigned" not in header


def test_source_default_header_address():
    source = make("Ser").generate_source()
    assert '#include "Ser.h"\n' in source
    assert '#include "dir/x.h"\n' in make().generate_source("dir/x.h")


def test_source_write_escaped():
    source = make().generate_source()
    assert "case '\\n': json += \"\\\\n\"; break;\n" in source
    assert "case '\\x01': json += \"\\\\u0001\"; break;\n" in source
    assert source.count("; break;\n") == 32 + 2
    assert "case '/'" not in source
    assert "json.clear();\n" in source


def test_source_escape_forward_slash():
    source = make(escape_forward_slash=True).generate_source()
    assert "case '/'" in source
    assert source.count("; break;\n") == 32 + 3


def test_source_float_macros_follow_features():
    gen = make()
    assert "JSON_CPP_SERIALIZE_FLOAT" not in gen.generate_source()
    gen.add_feature(SerializerGenerator.FEATURE_SERIALIZE_FLOAT)
    gen.add_feature(SerializerGenerator.FEATURE_WRITE_UNSIGNED)
    source = gen.generate_source()
    assert '#define JSON_CPP_SERIALIZE_FLOAT(outBuffer, x) sprintf(outBuffer, "%.9g", x)\n' in source
    assert "JSON_CPP_SERIALIZE_DOUBLE" not in source
    assert "void Ser::writeUnsigned(T value) {\n" in source


def test_source_function_bodies_no_throw():
    gen = make(no_throw=True)
    gen.generate_serializer_function(FakeType("Foo"))
    gen.generate_serializer_function_call(FakeType("Bar", "    return Error::OK;"), "")
    source = gen.generate_source()
    assert "    return Ser(jsonString).serializeFoo(input);\n" in source
    assert "Ser::Error Ser::serializeFoo(const Foo &value) {\n    json += value;\n    return Error::OK;\n}\n" in source
    assert "Ser::Error Ser::serializeBar(const Bar &value) {\n    return Error::OK;\n}\n" in source


def test_source_throwing_entry_point():
    gen = make()
    gen.generate_serializer_function(FakeType("Foo"))
    source = gen.generate_source()
    assert "} catch (const Error &error) {\n" in source
    assert "void Ser::serializeFoo(const Foo &value) {\n    json += value;\n}\n" in source