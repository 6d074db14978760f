"""Generation of engine header files from reflected shader declarations.

Usage: ``shadergen -i input0.fx -o output0.h [-i input1.fx -o output1.h ...]``
"""

from __future__ import annotations

import enum
import logging
import os
import re
import sys
from pathlib import Path
from typing import Iterator, Sequence

from .file_utils import read_text_file, write_text_file
from .logs import LoggerTag, init_log_system, terminate_log_system
from .resource_bind import ShaderResourceType

_log = logging.getLogger(LoggerTag.SHADERGEN.value)

INPUT_FILE_FLAG = "-i"
OUTPUT_FILE_FLAG = "-o"

HEADER = (
    "#pragma once"
    "\n// ----------- This is auto file, don't modify! -----------"
    "\n"
    "\n#include \"render/shader_manager/resource_bind.h\""
    "\n#include \"utils/math/common_math.h\""
    "\n"
    "\n"
)

_CONSTANT_TYPES = {
    "bool": "bool",
    "int": "int32_t",
    "uint": "uint32_t",
    "float": "float",
    "double": "double",
    **{name: f"glm::{name}" for name in (
        "vec2", "vec3", "vec4",
        "ivec2", "ivec3", "ivec4",
        "bvec2", "bvec3", "bvec4",
        "mat2", "mat3", "mat4",
        "mat2x3", "mat2x4", "mat3x2", "mat3x4", "mat4x2", "mat4x3",
        "dmat2", "dmat3", "dmat4",
        "dmat2x3", "dmat2x4", "dmat3x2", "dmat3x4", "dmat4x2", "dmat4x3",
    )},
}


def _resource_type_name(resource_type: ShaderResourceType) -> str:
    return f"ShaderResourceType::{resource_type.name}"


_PRIMITIVE_RESOURCE_TYPES = {
    "bool": _resource_type_name(ShaderResourceType.TYPE_BOOL),
    "int": _resource_type_name(ShaderResourceType.TYPE_INT),
    "uint": _resource_type_name(ShaderResourceType.TYPE_UINT),
    "float": _resource_type_name(ShaderResourceType.TYPE_FLOAT),
    "double": _resource_type_name(ShaderResourceType.TYPE_DOUBLE),
}

_NON_PRIMITIVE_RESOURCE_TYPES = {
    "sampler2D": _resource_type_name(ShaderResourceType.TYPE_SAMPLER_2D),
}

_CONST_BUFFER_TYPE = _resource_type_name(ShaderResourceType.TYPE_CONST_BUFFER)

_COMMENTS_PATTERN = re.compile(r"//.*?$|/\*.*?\*/", re.MULTILINE | re.DOTALL)
_INCLUDE_PATTERN = re.compile(r"REFLECT_INCLUDE\(([^,]+)\)")
_CONSTANT_PATTERN = re.compile(r"DECLARE_CONSTANT\(([^,]+), ([^,]+), ([^,]+)\)")
_SRV_VAR_PATTERN = re.compile(r"DECLARE_SRV_VARIABLE\(([^,]+), ([^,]+), ([^,]+), ([^,]+)\)")
_SRV_TEXTURE_PATTERN = re.compile(
    r"DECLARE_SRV_TEXTURE\(([^,]+), ([^,]+), ([^,]+), ([^,]+), ([^,]+)\)")
_CBV_PATTERN = re.compile(r"DECLARE_CBV\(([^,]+), ([^,]+)\)\s*\{\s*([^{}]+)\s*\}")
_CBV_MEMBER_PATTERN = re.compile(
    r"\b([a-zA-Z0-9]+)\s+([a-zA-Z0-9_]+)(\[[^\]]*\])?(?=\s*;)")


class InputFlag(enum.Enum):
    """Command-line flags understood by the generator."""

    INVALID = 0
    INPUT_FILE = 1
    OUTPUT_FILE = 2

    @classmethod
    def from_arg(cls, arg: str) -> InputFlag:
        if arg == INPUT_FILE_FLAG:
            return cls.INPUT_FILE
        if arg == OUTPUT_FILE_FLAG:
            return cls.OUTPUT_FILE
        return cls.INVALID


class ShaderGenError(ValueError):
    """Raised for an invalid generator command line."""


def translate_constant_type(glsl_type: str) -> str | None:
    """Return the engine type for a GLSL constant type, or ``None`` if unknown."""
    return _CONSTANT_TYPES.get(glsl_type)


def translate_primitive_resource_type(glsl_type: str) -> str | None:
    """Return the resource type name for a GLSL scalar type, or ``None`` if unknown."""
    return _PRIMITIVE_RESOURCE_TYPES.get(glsl_type)


def translate_non_primitive_resource_type(glsl_type: str) -> str | None:
    """Return the resource type name for a GLSL opaque type, or ``None`` if unknown."""
    return _NON_PRIMITIVE_RESOURCE_TYPES.get(glsl_type)


def remove_comments(text: str) -> str:
    """Strip ``//`` line comments and ``/* */`` block comments."""
    return _COMMENTS_PATTERN.sub("", text)


def _includes(text: str) -> Iterator[str]:
    matches = list(_INCLUDE_PATTERN.finditer(text))
    for match in matches:
        yield f"#include \"auto_{match.group(1)}.h\"\n"
    if matches:
        yield "\n"


def _constants(text: str) -> Iterator[str]:
    matches = list(_CONSTANT_PATTERN.finditer(text))
    for match in matches:
        glsl_type, name, value = match.groups()
        engine_type = translate_constant_type(glsl_type)
        if engine_type is None:
            _log.error("Unknown constant variable %s type: %s", name, glsl_type)
            continue
        yield f"inline constexpr {engine_type} {name} = {value};\n"
    if matches:
        yield "\n"


def _srv_variables(text: str) -> Iterator[str]:
    matches = list(_SRV_VAR_PATTERN.finditer(text))
    for match in matches:
        glsl_type, name, location = match.group(1), match.group(2), match.group(3)
        resource_type = translate_primitive_resource_type(glsl_type)
        if resource_type is None:
            _log.error("Unknown shader resource view (SRV) variable %s type: %s", name, glsl_type)
            continue
        yield (
            f"struct {name} {{\n"
            f"    inline static constexpr ShaderResourceBindStruct<{resource_type}> "
            f"_BINDING = {{ {location}, -1 }};\n"
            "};\n"
            "\n"
        )
    if matches:
        yield "\n"


def _srv_textures(text: str) -> Iterator[str]:
    matches = list(_SRV_TEXTURE_PATTERN.finditer(text))
    for match in matches:
        glsl_type, name, binding, texture_format, sampler_idx = match.groups()
        resource_type = translate_non_primitive_resource_type(glsl_type)
        if resource_type is None:
            _log.error("Unknown texture variable %s type: %s", name, glsl_type)
            continue
        yield (
            f"struct {name} {{\n"
            f"    inline static constexpr ShaderResourceBindStruct<{resource_type}> "
            f"_BINDING = {{ -1, {binding} }};\n"
            f"    inline static constexpr uint32_t _SAMPLER_IDX = {sampler_idx};\n"
            f"    inline static constexpr uint32_t _FORMAT = {texture_format};\n"
            "};\n"
            "\n"
        )
    if matches:
        yield "\n"


def _const_buffers(text: str) -> Iterator[str]:
    matches = list(_CBV_PATTERN.finditer(text))
    for match in matches:
        buffer_name, binding, content = match.groups()
        members = list(_CBV_MEMBER_PATTERN.finditer(content))
        yield (
            f"struct {buffer_name} {{\n"
            f"    inline static constexpr ShaderResourceBindStruct<{_CONST_BUFFER_TYPE}>"
            f"_BINDING = {{ -1, {binding} }};\n"
        )
        if members:
            yield "\n"
        for member in members:
            glsl_type, var_name, array_suffix = member.groups()
            engine_type = translate_constant_type(glsl_type)
            if engine_type is None:
                _log.error("Unknown const buffer %s variable %s type: %s",
                           buffer_name, var_name, glsl_type)
                continue
            yield f"    {engine_type} {var_name}{array_suffix or ''};\n"
        yield "};\n\n"
    if matches:
        yield "\n"


def generate_header(text: str) -> str:
    """Return the header generated from the declarations in shader ``text``."""
    text = remove_comments(text)
    parts = [HEADER]
    for section in (_includes, _constants, _srv_variables, _srv_textures, _const_buffers):
        parts.extend(section(text))
    parts.append("\n")
    return "".join(parts)


class ShaderGen:
    """Pairs input shader files with output headers and generates them."""

    def __init__(self) -> None:
        self.input_paths: list[Path] = []
        self.output_paths: list[Path] = []

    def parse_args(self, args: Sequence[str]) -> None:
        """Collect ``-i``/``-o`` pairs from ``args`` (program name excluded)."""
        if not args:
            raise ShaderGenError(
                "shadergen must accept at least one input file path and one output file path")
        for position in range(0, len(args), 2):
            flag_arg = args[position]
            if position + 2 > len(args):
                raise ShaderGenError(f"missing argument for {flag_arg} flag")
            flag = InputFlag.from_arg(flag_arg)
            if flag is InputFlag.INVALID:
                raise ShaderGenError(f"undefined command-line flag: {flag_arg}")
            value = Path(args[position + 1])
            if flag is InputFlag.INPUT_FILE:
                self.input_paths.append(value)
            else:
                self.output_paths.append(value)
        if len(self.input_paths) != len(self.output_paths):
            raise ShaderGenError("input and output files count are not equal")

    def run(self) -> None:
        """Generate every collected output header from its input file."""
        for input_path, output_path in zip(self.input_paths, self.output_paths):
            self.generate(input_path, output_path)

    def generate(self, input_path: str | os.PathLike,
                 output_path: str | os.PathLike) -> str | None:
        """Write the header for ``input_path`` to ``output_path`` and return it.

        Returns ``None`` and writes nothing when the input is missing or empty.
        """
        _log.info("Processing %s file", input_path)
        text = read_text_file(input_path)
        if not text:
            return None
        output = generate_header(text)
        write_text_file(output_path, output)
        return output


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator on ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    init_log_system()
    try:
        generator = ShaderGen()
        try:
            generator.parse_args(args)
        except ShaderGenError as error:
            _log.critical("%s", error)
            return -1
        generator.run()
        return 0
    finally:
        terminate_log_system()


if __name__ == "__main__":
    sys.exit(main())