import pytest

from lone_sentry.shader_source import ShaderProgramSource, parse_shader, parse_shader_text

VERTEX_LINES = ["#version 330 core", "layout(location = 0) in vec4 position;", "void main() { gl_Position = position; }"]
FRAGMENT_LINES = ["#version 330 core", "out vec4 color;", "void main() { color = vec4(1.0); }"]


def _combined(first, first_lines, second, second_lines):
    return "\n".join([f"#shader {first}", *first_lines, f"#shader {second}", *second_lines]) + "\n"


def _joined(lines):
    return "".join(line + "\n" for line in lines)


def test_splits_vertex_and_fragment():
    result = parse_shader_text(_combined("vertex", VERTEX_LINES, "fragment", FRAGMENT_LINES))
    assert result == ShaderProgramSource(_joined(VERTEX_LINES), _joined(FRAGMENT_LINES))


def test_order_of_stages_does_not_matter():
    result = parse_shader_text(_combined("fragment", FRAGMENT_LINES, "vertex", VERTEX_LINES))
    assert result.vertex == _joined(VERTEX_LINES)
    assert result.fragment == _joined(FRAGMENT_LINES)


def test_missing_trailing_newline_still_ends_lines():
    result = parse_shader_text("#shader vertex\nvoid main() {}")
    assert result.vertex == "void main() {}\n"
    assert result.fragment == ""


def test_blank_lines_are_kept():
    result = parse_shader_text("#shader vertex\na\n\nb\n")
    assert result.vertex == "a\n\nb\n"


def test_unknown_directive_keeps_current_stage():
    result = parse_shader_text("#shader vertex\na\n#shader geometry\nb\n")
    assert result.vertex == "a\nb\n"
    assert result.fragment == ""


def test_empty_text_gives_empty_stages():
    assert parse_shader_text("") == ShaderProgramSource("", "")


def test_source_before_directive_rejected():
    with pytest.raises(ValueError):
        parse_shader_text("stray line\n#shader vertex\na\n")


def test_parse_shader_reads_file(tmp_path):
    path = tmp_path / "PlayerTexture.shader"
    text = _combined("vertex", VERTEX_LINES, "fragment", FRAGMENT_LINES)
    path.write_text(text)
    assert parse_shader(path) == parse_shader_text(text)
    assert parse_shader(str(path)).fragment == _joined(FRAGMENT_LINES)


def test_parse_shader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_shader(tmp_path / "absent.shader")