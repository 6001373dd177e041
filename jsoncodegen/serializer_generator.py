"""Generator of C++ classes that serialize structures into JSON."""

from __future__ import annotations

from .generator import INDENT, SIGNATURE, GeneratedFunction, Generator, Settings

I2 = INDENT * 2
I3 = INDENT * 3

#: Error types that the generated serializer can report, besides OK.
SERIALIZER_ERRORS = ("UNREPRESENTABLE_FLOAT_VALUE", "UNKNOWN_ENUM_VALUE")

_ESCAPE_ALIASES = {0x08: "b", 0x0C: "f", 0x0A: "n", 0x0D: "r", 0x09: "t"}


class SerializerGenerator(Generator):
    """Generates the header and source of a JSON serializer class.

    Types passed in have a ``name`` and a method
    ``generate_serializer_function_body(generator, indent)``.
    """

    OUTPUT_STRING = "json"
    ERRORS = SERIALIZER_ERRORS

    FEATURE_WRITE_SIGNED = 0x0100
    FEATURE_WRITE_UNSIGNED = 0x0200
    FEATURE_SERIALIZE_FLOAT = 0x1000
    FEATURE_SERIALIZE_DOUBLE = 0x2000
    FEATURE_SERIALIZE_LONG_DOUBLE = 0x4000

    def __init__(self, class_name: str, string_type, settings: Settings | None = None) -> None:
        super().__init__(class_name, string_type, settings)

    def generate_serializer_function(self, type_) -> None:
        """Add a public ``serialize`` entry point for ``type_``."""
        if type_ is not None:
            self.generate_serializer_function_call(type_, "")
            self._state.entry_types.append(type_)

    def generate_serializer_function_call(self, type_, input_arg: str) -> str:
        """Call of the function serializing ``type_``, generating it if new."""
        if type_ is None:
            return ""
        key = type_.name.full_name()
        function_name = self._state.function_names.get(key)
        if not function_name:
            function_name = self._generate_function_name("serialize", type_)
            self._state.function_names[key] = function_name
            body = type_.generate_serializer_function_body(self, INDENT)
            self._state.functions.append(GeneratedFunction(type_, function_name, body))
        return function_name + "(" + input_arg + ")"

    def generate_value_serialization(self, type_, input_arg: str, indent: str = "") -> str:
        """Statement serializing ``input_arg``; one line when ``indent`` is empty."""
        call = self.generate_serializer_function_call(type_, input_arg)
        if self.settings.no_throw:
            if indent:
                return indent + "if (Error error = " + call + ")\n" + indent + INDENT + "return error;\n"
            return "if (Error error = " + call + ") return error;"
        return indent + call + (";\n" if indent else ";")

    def generate_error_statement(self, error_name: str) -> str:
        """Statement reporting ``error_name`` about the current value."""
        keyword = "return" if self.settings.no_throw else "throw"
        return f"{keyword} Error(Error::{error_name}, &value)"

    def _error_struct(self) -> str:
        parts = [INDENT + "struct Error {\n", I2 + "enum Type {\n", I3 + "OK"]
        parts.extend(",\n" + I3 + error for error in self.ERRORS)
        parts += [
            "\n" + I2 + "} type;\n",
            I2 + "const void *datapoint;\n\n",
            I2 + "inline Error(Type type = Error::OK) : type(type), datapoint() { }\n",
            I2 + "inline Error(Type type, const void *datapoint) : type(type), datapoint(datapoint) { }\n",
            I2 + "operator Type() const;\n",
            I2 + "operator bool() const;\n",
            I2 + "const char *typeString() const;\n",
            INDENT + "};\n\n",
        ]
        return "".join(parts)

    def _entry_points(self):
        for type_ in self._state.entry_types:
            function_name = self._state.function_names.get(type_.name.full_name())
            if function_name:
                yield type_, function_name

    def generate_header(self) -> str:
        """The header file declaring the serializer class."""
        string_name = self.string_type.name
        out = self.OUTPUT_STRING
        no_throw = self.settings.no_throw
        parts = ["\n", SIGNATURE, "#pragma once\n\n"]
        parts.extend("#include " + include + "\n" for include in self.type_includes)
        if self.type_includes:
            parts.append("\n")
        parts.append(self._begin_namespace())
        parts.append("class " + self.class_name + " {\n")
        parts.append("\npublic:\n")
        parts.append(self._error_struct())
        for type_, _ in self._entry_points():
            parts.append(
                INDENT + "static Error serialize(" + string_name.ref_arg_declaration("jsonString")
                + ", " + type_.name.const_ref_arg_declaration("input") + ");\n"
            )
        parts.append("\nprotected:\n")
        parts.append(self._generate_virtual_typedefs(INDENT))
        parts.append(INDENT + string_name.ref_arg_declaration(out) + ";\n\n")
        parts.append(INDENT + self.class_name + "(" + string_name.ref_arg_declaration(out) + ");\n")
        parts.append(INDENT + "void writeEscaped(char c);\n")
        parts.append("\n")
        for function in self._state.functions:
            parts.append(
                INDENT + ("Error " if no_throw else "void ") + function.name + "("
                + function.type.name.const_ref_arg_declaration("value") + ");\n"
            )
        if self.feature_bits & (self.FEATURE_WRITE_SIGNED | self.FEATURE_WRITE_UNSIGNED):
            parts.append("\nprivate:\n")
            if self.feature_bits & self.FEATURE_WRITE_SIGNED:
                parts.append(INDENT + "template <typename U, typename T>\n")
                parts.append(INDENT + "void writeSigned(T value);\n")
            if self.feature_bits & self.FEATURE_WRITE_UNSIGNED:
                parts.append(INDENT + "template <typename T>\n")
                parts.append(INDENT + "void writeUnsigned(T value);\n")
        parts.append("\n};\n")
        parts.append(self._end_namespace())
        return "".join(parts)

    def _float_macros(self) -> str:
        macros = (
            (self.FEATURE_SERIALIZE_FLOAT, "JSON_CPP_SERIALIZE_FLOAT", '"%.9g"'),
            (self.FEATURE_SERIALIZE_DOUBLE, "JSON_CPP_SERIALIZE_DOUBLE", '"%.17g"'),
            (self.FEATURE_SERIALIZE_LONG_DOUBLE, "JSON_CPP_SERIALIZE_LONG_DOUBLE", '"%.33Lg"'),
        )
        parts = []
        for bit, macro, fmt in macros:
            if self.feature_bits & bit:
                parts.append("#ifndef " + macro + "\n")
                parts.append("#include <cstdio>\n")
                parts.append("#define " + macro + "(outBuffer, x) sprintf(outBuffer, " + fmt + ", x)\n")
                parts.append("#endif\n\n")
        return "".join(parts)

    def _error_methods(self) -> str:
        cls = self.class_name
        parts = [
            cls + "::Error::operator " + cls + "::Error::Type() const {\n" + INDENT + "return type;\n}\n\n",
            cls + "::Error::operator bool() const {\n" + INDENT + "return type != Error::OK;\n}\n\n",
            "const char *" + cls + "::Error::typeString() const {\n",
            INDENT + "switch (type) {\n",
        ]
        for error in ("OK", *self.ERRORS):
            parts.append(I2 + "case Error::" + error + ":\n" + I3 + 'return "' + error + '";\n')
        parts += [INDENT + "}\n", INDENT + 'return "";\n', "}\n\n"]
        return "".join(parts)

    def _write_escaped(self) -> str:
        st = self.string_type
        out = self.OUTPUT_STRING
        parts = ["void " + self.class_name + "::writeEscaped(char c) {\n", INDENT + "switch (c) {\n"]
        for i in range(0x20):
            alias = _ESCAPE_ALIASES.get(i)
            if alias:
                literal = '"\\\\' + alias + '"'
                parts.append(I2 + "case '\\" + alias + "': "
                             + st.generate_append_string_literal(out, literal) + "; break;\n")
            else:
                hex_char = f"{i:02x}"
                literal = '"\\\\u00' + hex_char + '"'
                parts.append(I2 + "case '\\x" + hex_char + "': "
                             + st.generate_append_string_literal(out, literal) + "; break;\n")
        parts.append(I2 + "case '\"': " + st.generate_append_string_literal(out, '"\\\\\\""') + "; break;\n")
        if self.settings.escape_forward_slash:
            parts.append(I2 + "case '/': " + st.generate_append_string_literal(out, '"\\\\/"') + "; break;\n")
        parts.append(I2 + "case '\\\\': " + st.generate_append_string_literal(out, '"\\\\\\\\"') + "; break;\n")
        parts.append(I2 + "default:\n")
        parts.append(I3 + st.generate_append_char(out, "c") + ";\n")
        parts.append(INDENT + "}\n")
        parts.append("}\n")
        return "".join(parts)

    def _write_integer_functions(self) -> str:
        st = self.string_type
        out = self.OUTPUT_STRING
        cls = self.class_name
        parts = []
        if self.feature_bits & self.FEATURE_WRITE_SIGNED:
            parts += [
                "\n",
                "template <typename U, typename T>\n",
                "void " + cls + "::writeSigned(T value) {\n",
                INDENT + "if (value < 0) {\n",
                I2 + st.generate_append_char(out, "'-'") + ";\n",
                I2 + "value = -value;\n",
                INDENT + "}\n",
                INDENT + "U unsignedValue = static_cast<U>(value);\n",
                INDENT + "char buffer[4*(sizeof(U)+1)], *cur = &(buffer[4*(sizeof(U)+1)-1] = '\\0');\n",
                INDENT + "do *--cur = '0'+unsignedValue%10; while (unsignedValue /= 10);\n",
                INDENT + st.generate_append_c_str(out, "cur") + ";\n",
                "}\n",
            ]
        if self.feature_bits & self.FEATURE_WRITE_UNSIGNED:
            parts += [
                "\n",
                "template <typename T>\n",
                "void " + cls + "::writeUnsigned(T value) {\n",
                INDENT + "char buffer[4*(sizeof(T)+1)], *cur = &(buffer[4*(sizeof(T)+1)-1] = '\\0');\n",
                INDENT + "do *--cur = '0'+value%10; while (value /= 10);\n",
                INDENT + st.generate_append_c_str(out, "cur") + ";\n",
                "}\n",
            ]
        return "".join(parts)

    def generate_source(self, relative_header_address: str | None = None) -> str:
        """The source file implementing the serializer class."""
        if relative_header_address is None:
            relative_header_address = self.class_name + ".h"
        st = self.string_type
        out = self.OUTPUT_STRING
        cls = self.class_name
        no_throw = self.settings.no_throw
        parts = ["\n", SIGNATURE, '#include "' + relative_header_address + '"\n\n']
        parts.append(self._float_macros())
        parts.append(self._begin_namespace())
        parts.append(self._error_methods())
        parts.append(
            cls + "::" + cls + "(" + st.name.ref_arg_declaration(out) + ") : " + out + "(" + out + ") {\n"
        )
        parts.append(INDENT + st.generate_clear(out) + ";\n")
        parts.append("}\n\n")
        parts.append(self._write_escaped())
        parts.append(self._write_integer_functions())

        for type_, function_name in self._entry_points():
            parts.append("\n")
            parts.append(
                cls + "::Error " + cls + "::serialize(" + st.name.ref_arg_declaration("jsonString")
                + ", " + type_.name.const_ref_arg_declaration("input") + ") {\n"
            )
            if no_throw:
                parts.append(INDENT + "return " + cls + "(jsonString)." + function_name + "(input);\n")
            else:
                parts += [
                    INDENT + "try {\n",
                    I2 + cls + "(jsonString)." + function_name + "(input);\n",
                    INDENT + "} catch (const Error &error) {\n",
                    I2 + "return error;\n",
                    INDENT + "}\n",
                    INDENT + "return Error::OK;\n",
                ]
            parts.append("}\n")

        for function in self._state.functions:
            text = (
                "\n" + (cls + "::Error " if no_throw else "void ") + cls + "::" + function.name
                + "(" + function.type.name.const_ref_arg_declaration("value") + ") {\n" + function.body
            )
            # A body without a final newline has already returned.
            if not text.endswith("\n"):
                text += "\n"
            elif no_throw:
                text += INDENT + "return Error::OK;\n"
            parts.append(text + "}\n")
        parts.append(self._end_namespace())
        return "".join(parts)