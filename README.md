# jsoncodegen

Building blocks for generating C++ JSON serializer classes from type
descriptions. The package has no dependencies outside the standard library.

## Installation

    pip install jsoncodegen

## What it contains

- `jsoncodegen.name_format`: the `NameFormat` enum and `format_name(name, fmt)`.
  They convert identifiers to camel case (`CAMELCASE`, `CAMELCASE_CAPITAL`) or
  to upper or lower case separated by dashes or underscores. `ANY` leaves the
  name as it is. Any character that is not an ASCII letter or digit separates
  words.
- `jsoncodegen.type_name`: `TypeName` is a frozen dataclass with `body`,
  `suffix` and `substance`, where `substance` is `Substance.ACTUAL` or
  `Substance.VIRTUAL`. For `int x[4]` the body is `int` and the suffix is
  `[4]`. Its methods `full_name()`, `variable_declaration(name)`,
  `ref_arg_declaration(name)` and `const_ref_arg_declaration(name)` return
  C++ declaration text.
- `jsoncodegen.abs_path`: `AbsPath(path)` normalizes a path to an absolute
  one. It unifies separators, drops repeated separators and resolves `.` and
  `..`. A relative path is resolved against the working directory. A directory
  is written with a trailing `/`.
  - `abs_path + "rel/file"` resolves a path against the directory of
    `abs_path`.
  - `a - b` returns `a` relative to the directory of `b` as a string.
  - `working_directory()` returns the working directory at first use.
- `jsoncodegen.template_instance_cache`: `TemplateInstanceCache.get(template,
  element_type, *args)` calls `template.instantiate(cache, element_type,
  *args)` once for each distinct set of arguments. After that it returns the
  cached instance.
- `jsoncodegen.generator`: contains the following.
  - `Settings`, with the options `no_throw`, `escape_forward_slash` and
    `check_integer_overflow`.
  - The `Generator` base class. It splits a `ns::Name` class name into
    namespaces and a class name, collects includes and feature bits, and names
    the generated functions without collisions.
  - `safe_name(name)`: prefixes `::` to names that could clash with names used
    inside generated classes (`Error`, `NonRef`, `Unnamed<digit>...`).
  - `char_literal(c)`: writes a C++ character literal for one byte.
- `jsoncodegen.serializer_generator`: `SerializerGenerator` writes the header
  (`generate_header()`) and the source (`generate_source(header_address)`) of
  a JSON serializer class.
  - `header_address` defaults to `<ClassName>.h`.
  - With `Settings(no_throw=True)` the generated functions return an `Error`
    instead of throwing one.

## Example

`SerializerGenerator` needs two kinds of object:

- A string type: an object with a `name` (a `TypeName`) and methods that
  return C++ code for manipulating that string.
- For every type to serialize, an object with a `name` and a
  `generate_serializer_function_body(generator, indent)` method.

```python
from jsoncodegen.serializer_generator import SerializerGenerator
from jsoncodegen.type_name import TypeName


class StdString:
    name = TypeName("std::string")

    def generate_clear(self, s):
        return f"{s}.clear()"

    def generate_append_char(self, s, c):
        return f"{s}.push_back({c})"

    def generate_append_c_str(self, s, cstr):
        return f"{s} += {cstr}"

    def generate_append_string_literal(self, s, literal):
        return f"{s} += {literal}"


class Point:
    name = TypeName("Point")

    def generate_serializer_function_body(self, generator, indent):
        return indent + 'json += "{}";\n'


gen = SerializerGenerator("geo::PointSerializer", StdString())
gen.add_type_include('"Point.h"')
gen.generate_serializer_function(Point())
header = gen.generate_header()   # declares geo::PointSerializer
source = gen.generate_source()   # includes "PointSerializer.h"
```

## What it does not do

- It does not generate JSON parser classes.
- It does not read C++ headers to discover types. The caller supplies the
  type objects and the code for each type's function body.
- It has no command-line tool and writes no files. The generated code is
  returned as strings.

## Running the tests

    pip install -e ".[test]"
    pytest