# rgengine

Utilities for a small rendering engine, plus `shadergen`. `shadergen` reads
reflection declarations from shader files and writes C++ headers for them.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## shadergen

`shadergen` takes its files in pairs. Each `-i` names a shader source file and
each `-o` names the header to write for it. Inputs and outputs are matched in
the order they appear, so there must be as many of one as of the other.

```
shadergen -i shaders/gbuffer.fx -o auto/auto_gbuffer.h -i shaders/post.fx -o auto/auto_post.h
```

The command exits with status -1 and writes nothing in these cases:

- no arguments are given
- a flag is unknown
- a flag has no value after it
- the counts of inputs and outputs differ

If an input file is missing or empty, the tool skips it and writes no header for it.

The tool first removes `//` and `/* */` comments. It then turns the following
declarations into header content, in this order:

- `REFLECT_INCLUDE(name)` → `#include "auto_name.h"`
- `DECLARE_CONSTANT(type, NAME, value)` → `inline constexpr <type> NAME = value;`
- `DECLARE_SRV_VARIABLE(type, NAME, location, extra)` → a struct whose `_BINDING` has that location. The type must be `bool`, `int`, `uint`, `float` or `double`.
- `DECLARE_SRV_TEXTURE(sampler2D, NAME, binding, format, sampler)` → a struct holding `_BINDING`, `_SAMPLER_IDX` and `_FORMAT`
- `DECLARE_CBV(NAME, binding) { members; }` → a constant-buffer struct that lists its members, array suffixes included

Constant and member types can be GLSL scalars, vectors or matrices. They are
mapped to `int32_t`, `uint32_t`, `glm::vec3`, `glm::mat4` and so on. A
declaration whose type is unknown is logged as an error and skipped.

The generator can also be called from Python:

```python
from rgengine.shadergen import ShaderGen, generate_header

print(generate_header("DECLARE_CONSTANT(uint, MAX_LIGHTS, 16)"))

gen = ShaderGen()
gen.parse_args(["-i", "in.fx", "-o", "out.h"])  # raises ShaderGenError on bad input
gen.run()
```

`ShaderGen.generate(input_path, output_path)` handles a single file. It returns
the text it wrote, or `None` if the input was missing or empty.

## Library modules

- `rgengine.hashing`
  - `hash_value`: a stable unsigned 64-bit hash. Integers hash to themselves, text and bytes use FNV-1a, and objects with a `hash()` method are hashed by that method.
  - `hash_memory`: hashes raw bytes.
  - `HashBuilder`: combines several hashes into one.
- `rgengine.base_id`
  - `BaseID`: an identifier whose largest value means "invalid".
  - `BaseIDPool`: hands out identifiers counting up from 0 and reuses released ones first.
- `rgengine.strid`
  - `StrID`: a comparable handle to an interned string.
  - `StrIDStorage`: stores each distinct string once, keyed by its hash.
- `rgengine.timer`
  - `Timer`: gives elapsed time and the time between ticks, in whole milliseconds or in seconds.
- `rgengine.logs`
  - `init_log_system`, `terminate_log_system` and `get_logger` manage one logger per `LoggerTag`.
  - `engine_assert` logs a critical message that includes the caller's location, then raises `EngineAssertionError`.
  - `colored` wraps text in ANSI colour codes.
- `rgengine.file_utils`
  - Reads and writes whole files. A file that cannot be read comes back empty, and empty data is not written.
  - `count_files` and `count_directories` count the direct entries of a directory.
  - `for_each_directory`, `for_each_file` and `find_first_file_if` walk a tree, optionally limited to a given depth.
- `rgengine.resource_bind`
  - `ShaderResourceType`: the kinds of shader resource.
  - `ShaderResourceBinding`: a resource's location or binding slot, with -1 meaning unused.
- `rgengine.shader_preprocess`
  - `preprocess_shader_source` takes a `ShaderStageSource` and returns new text. It puts the `#version N core` line first, then the defines, then the code with every `#include` expanded from the include directory.
  - Problems raise `ShaderPreprocessError`. These include a missing version line and includes nested 128 levels or more deep.

## What it does not do

The package works only on text, files and plain Python objects. It does not:

- compile or link shaders
- create textures, framebuffers or samplers
- open a window or render anything