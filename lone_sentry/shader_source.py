"""Splitting a combined shader file into its vertex and fragment stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path

_DIRECTIVE = "#shader"


class _Stage(Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


@dataclass(frozen=True)
class ShaderProgramSource:
    """Source text of the two stages of a shader program."""

    vertex: str
    fragment: str


def parse_shader_text(text: str) -> ShaderProgramSource:
    """Split text whose stages start with ``#shader vertex`` / ``#shader fragment`` lines.

    A ``#shader`` line naming neither stage leaves the current stage as it was.
    Raises ValueError for a source line before any stage is chosen.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    parts: dict[_Stage, list[str]] = {_Stage.VERTEX: [], _Stage.FRAGMENT: []}
    stage: _Stage | None = None
    for number, line in enumerate(lines, start=1):
        if _DIRECTIVE in line:
            if _Stage.VERTEX.value in line:
                stage = _Stage.VERTEX
            elif _Stage.FRAGMENT.value in line:
                stage = _Stage.FRAGMENT
        elif stage is None:
            raise ValueError(f"line {number}: source before any #shader directive")
        else:
            parts[stage].append(line + "\n")

    return ShaderProgramSource(
        vertex="".join(parts[_Stage.VERTEX]),
        fragment="".join(parts[_Stage.FRAGMENT]),
    )


def parse_shader(filepath: str | PathLike[str]) -> ShaderProgramSource:
    """Read and split the shader file at ``filepath``."""
    return parse_shader_text(Path(filepath).read_text())