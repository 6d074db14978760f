import pytest

from rgengine.shadergen import (
    HEADER,
    InputFlag,
    ShaderGen,
    ShaderGenError,
    generate_header,
    main,
    remove_comments,
    translate_constant_type,
    translate_non_primitive_resource_type,
    translate_primitive_resource_type,
)

SHADER = (
    "// DECLARE_CONSTANT(float, HIDDEN, 1.0)\n"
    "/* DECLARE_CONSTANT(float, ALSO_HIDDEN, 2.0) */\n"
    "REFLECT_INCLUDE(common)\n"
    "DECLARE_CONSTANT(int, MAX_LIGHTS, 16)\n"
    "DECLARE_SRV_VARIABLE(float, u_scale, 3, 0)\n"
    "DECLARE_SRV_TEXTURE(sampler2D, albedo_tex, 0, TEXTURE_FORMAT_RGBA8, 1)\n"
    "DECLARE_CBV(cb_frame, 2) {\n"
    "    mat4 view;\n"
    "    vec4 lights[4];\n"
    "}\n"
)


def test_translate_constant_type():
    assert translate_constant_type("int") == "int32_t"
    assert translate_constant_type("mat4x3") == "glm::mat4x3"
    assert translate_constant_type("sampler2D") is None


def test_translate_resource_types():
    assert translate_primitive_resource_type("bool") == "ShaderResourceType::TYPE_BOOL"
    assert translate_primitive_resource_type("vec3") is None
    assert translate_non_primitive_resource_type("sampler2D") == "ShaderResourceType::TYPE_SAMPLER_2D"
    assert translate_non_primitive_resource_type("float") is None


def test_remove_comments():
    assert remove_comments("a // c\nb") == "a \nb"
    assert remove_comments("x /* y\nz */ w") == "x  w"


def test_input_flag_from_arg():
    assert InputFlag.from_arg("-i") is InputFlag.INPUT_FILE
    assert InputFlag.from_arg("-o") is InputFlag.OUTPUT_FILE
    assert InputFlag.from_arg("-s") is InputFlag.INVALID


def test_empty_input_yields_only_header():
    assert generate_header("") == HEADER + "\n"
    assert HEADER.startswith("#pragma once")


def test_generate_header_sections():
    output = generate_header(SHADER)
    assert output.startswith(HEADER)
    assert '#include "auto_common.h"\n' in output
    assert "inline constexpr int32_t MAX_LIGHTS = 16;\n" in output
    assert (
        "struct u_scale {\n"
        "    inline static constexpr ShaderResourceBindStruct<ShaderResourceType::TYPE_FLOAT> "
        "_BINDING = { 3, -1 };\n};\n"
    ) in output
    assert (
        "struct albedo_tex {\n"
        "    inline static constexpr ShaderResourceBindStruct<ShaderResourceType::TYPE_SAMPLER_2D> "
        "_BINDING = { -1, 0 };\n"
        "    inline static constexpr uint32_t _SAMPLER_IDX = 1;\n"
        "    inline static constexpr uint32_t _FORMAT = TEXTURE_FORMAT_RGBA8;\n"
        "};\n"
    ) in output
    assert (
        "struct cb_frame {\n"
        "    inline static constexpr ShaderResourceBindStruct<ShaderResourceType::TYPE_CONST_BUFFER>"
        "_BINDING = { -1, 2 };\n\n"
        "    glm::mat4 view;\n"
        "    glm::vec4 lights[4];\n"
        "};\n"
    ) in output


def test_generate_header_order_and_comments():
    output = generate_header(SHADER)
    positions = [output.index(marker) for marker in
                 ("auto_common", "MAX_LIGHTS", "struct u_scale", "struct albedo_tex", "struct cb_frame")]
    assert positions == sorted(positions)
    assert "HIDDEN" not in output


def test_unknown_types_are_skipped():
    output = generate_header("DECLARE_CONSTANT(foo, BAD_CONST, 1)\n")
    assert "BAD_CONST" not in output
    texture = generate_header("DECLARE_SRV_TEXTURE(float, bad_tex, 0, FMT, 0)\n")
    assert "bad_tex" not in texture


@pytest.mark.parametrize("args", [[], ["-i"], ["-x", "a"], ["-i", "a"], ["-i", "a", "-o"]])
def test_parse_args_errors(args):
    with pytest.raises(ShaderGenError):
        ShaderGen().parse_args(args)


def test_parse_args_collects_pairs(tmp_path):
    gen = ShaderGen()
    gen.parse_args(["-i", "a.fx", "-o", "a.h", "-i", "b.fx", "-o", "b.h"])
    assert [p.name for p in gen.input_paths] == ["a.fx", "b.fx"]
    assert [p.name for p in gen.output_paths] == ["a.h", "b.h"]


def test_generate_writes_file(tmp_path):
    source = tmp_path / "shader.fx"
    source.write_text(SHADER)
    target = tmp_path / "shader.h"
    result = ShaderGen().generate(source, target)
    assert result == generate_header(SHADER)
    assert target.read_text() == result


def test_generate_missing_input(tmp_path):
    target = tmp_path / "out.h"
    assert ShaderGen().generate(tmp_path / "missing.fx", target) is None
    assert not target.exists()


def test_run_generates_all(tmp_path):
    gen = ShaderGen()
    args = []
    sources = {}
    for name in ("one", "two"):
        text = f"DECLARE_CONSTANT(float, {name.upper()}, 1.0)\n"
        sources[name] = text
        (tmp_path / f"{name}.fx").write_text(text)
        args += ["-i", str(tmp_path / f"{name}.fx"), "-o", str(tmp_path / f"{name}.h")]
    gen.parse_args(args)
    gen.run()
    one = (tmp_path / "one.h").read_text()
    two = (tmp_path / "two.h").read_text()
    assert one == generate_header(sources["one"])
    assert two == generate_header(sources["two"])
    assert "inline constexpr float ONE = 1.0;" in one
    assert "inline constexpr float TWO = 1.0;" in two


def test_main(tmp_path):
    source = tmp_path / "s.fx"
    source.write_text(SHADER)
    target = tmp_path / "s.h"
    assert main(["-i", str(source), "-o", str(target)]) == 0
    assert target.read_text() == generate_header(SHADER)
    assert main([]) == -1
    assert main(["-q", "x"]) == -1