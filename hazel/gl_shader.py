"""OpenGL shader programs built from source text or '#type' sectioned files."""

from __future__ import annotations

from typing import Any, Dict, Sequence

import numpy as np

from .log import HazelError, core_assert, core_logger
from .shader import Shader

GL_VERTEX_SHADER = 0x8B31
GL_FRAGMENT_SHADER = 0x8B30

_TYPE_TOKEN = "#type"
_STAGE_NAMES = {GL_VERTEX_SHADER: "vertex", GL_FRAGMENT_SHADER: "fragment"}


def _backend() -> Any:
    from pyglet.graphics import shader as pyglet_shader

    return pyglet_shader


def shader_type_from_string(type_name: str) -> int:
    """Map a '#type' name to an OpenGL shader stage."""
    if type_name == "vertex":
        return GL_VERTEX_SHADER
    if type_name in ("fragment", "pixel"):
        return GL_FRAGMENT_SHADER
    core_assert(False, f"Not appropirate shader type - '{type_name}'!")
    return 0


def read_file(filepath: str) -> str:
    """Return the file's text, or an empty string (with a warning) if unreadable."""
    try:
        with open(filepath, "rb") as handle:
            return handle.read().decode("utf-8")
    except OSError:
        core_logger().warning("Shader File '%s' could not be opended!", filepath)
        return ""


def preprocess(source: str) -> Dict[int, str]:
    """Split a file into stage sources at each '#type <stage>' line."""
    sources: Dict[int, str] = {}
    pos = source.find(_TYPE_TOKEN)
    while pos != -1:
        eols = [i for i in (source.find("\r", pos), source.find("\n", pos)) if i != -1]
        core_assert(bool(eols), "Syntax error!")
        eol = min(eols)
        type_name = source[pos + len(_TYPE_TOKEN) + 1:eol].strip()
        stage = shader_type_from_string(type_name)
        start = eol
        while start < len(source) and source[start] in "\r\n":
            start += 1
        pos = source.find(_TYPE_TOKEN, start)
        sources[stage] = source[start:] if pos == -1 else source[start:pos]
    return sources


def extract_name(filepath: str) -> str:
    """The file name without directory and extension."""
    slash = filepath.rfind("\\")
    if slash == -1:
        slash = filepath.rfind("/")
    core_assert(slash != -1, "Invalid filepath!")
    dot = filepath.rfind(".")
    return filepath[slash + 1:dot] if dot > slash else filepath[slash + 1:]


def _link_program(sources: Dict[int, str]) -> Any:
    """Compile every stage and link them into one program."""
    core_assert(len(sources) <= 2, "Only support for 2 shader type!")
    backend = _backend()
    stages = []
    for stage, text in sources.items():
        try:
            stages.append(backend.Shader(text, _STAGE_NAMES[stage]))
        except backend.ShaderException as exc:
            core_logger().error("%s", exc)
            raise HazelError(f"Shader Compilation failure! {exc}".rstrip()) from exc
    try:
        return backend.ShaderProgram(*stages)
    except backend.ShaderException as exc:
        core_logger().error("%s", exc)
        raise HazelError(f"Shader Link failure! {exc}".rstrip()) from exc


class OpenGLShader(Shader):
    """A linked vertex and fragment program."""

    def __init__(self, name: str, vertex_src: str, fragment_src: str) -> None:
        self._name = name
        self._program = _link_program(
            {GL_VERTEX_SHADER: vertex_src, GL_FRAGMENT_SHADER: fragment_src}
        )

    @classmethod
    def from_file(cls, filepath: str) -> "OpenGLShader":  # type: ignore[override]
        """Build a shader from a '#type' sectioned file, named after the file."""
        program = _link_program(preprocess(read_file(filepath)))
        shader = cls.__new__(cls)
        shader._program = program
        shader._name = extract_name(filepath)
        return shader

    @property
    def renderer_id(self) -> int:
        return int(self._program.id)

    def bind(self) -> None:
        self._program.use()

    def unbind(self) -> None:
        self._program.stop()

    @property
    def name(self) -> str:
        return self._name

    def delete(self) -> None:
        """Release the program."""
        self._program.delete()

    def _set_uniform(self, name: str, value: Any) -> None:
        backend = _backend()
        try:
            self._program[name] = value
        except (backend.ShaderException, KeyError):
            # An unknown or optimised-out uniform is ignored, as location -1 is.
            pass

    def upload_uniform_int(self, name: str, value: int) -> None:
        self._set_uniform(name, int(value))

    def upload_uniform_float(self, name: str, value: float) -> None:
        self._set_uniform(name, float(value))

    def upload_uniform_float2(self, name: str, value: Sequence[float]) -> None:
        x, y = (float(v) for v in value)
        self._set_uniform(name, (x, y))

    def upload_uniform_float3(self, name: str, value: Sequence[float]) -> None:
        x, y, z = (float(v) for v in value)
        self._set_uniform(name, (x, y, z))

    def upload_uniform_float4(self, name: str, value: Sequence[float]) -> None:
        x, y, z, w = (float(v) for v in value)
        self._set_uniform(name, (x, y, z, w))

    def _upload_matrix(self, name: str, matrix: Any, size: int) -> None:
        values = np.asarray(matrix, dtype=np.float32).reshape(size, size).flatten(order="F")
        self._set_uniform(name, tuple(float(v) for v in values))

    def upload_uniform_mat3(self, name: str, matrix: Any) -> None:
        self._upload_matrix(name, matrix, 3)

    def upload_uniform_mat4(self, name: str, matrix: Any) -> None:
        self._upload_matrix(name, matrix, 4)