"""Shader and texture interfaces and a name-keyed shader library."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from .log import core_assert
from .renderer import GraphicsAPI, Renderer

_NO_API = "RendererAPI NONE is not supported"


class Shader(ABC):
    """A compiled GPU program."""

    @abstractmethod
    def bind(self) -> None:
        """Make this program current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any program."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name the shader is known by."""

    @staticmethod
    def from_file(filepath: str) -> "Shader":
        """Build a shader from a file holding '#type' sections."""
        core_assert(Renderer.get_api() is not GraphicsAPI.NONE, _NO_API)
        from .gl_shader import OpenGLShader

        return OpenGLShader.from_file(filepath)

    @staticmethod
    def from_sources(name: str, vertex_src: str, fragment_src: str) -> "Shader":
        """Build a named shader from vertex and fragment source text."""
        core_assert(Renderer.get_api() is not GraphicsAPI.NONE, _NO_API)
        from .gl_shader import OpenGLShader

        return OpenGLShader(name, vertex_src, fragment_src)


class ShaderLibrary:
    """Shaders stored under unique names."""

    def __init__(self) -> None:
        self._shaders: Dict[str, Shader] = {}

    def add(self, shader: Shader, name: Optional[str] = None) -> None:
        """Store shader under name, or under its own name when none is given."""
        key = shader.name if name is None else name
        core_assert(not self.exists(key), "Shader already exists!")
        self._shaders[key] = shader

    def load(self, filepath: str, name: Optional[str] = None) -> Shader:
        """Build a shader from a file, store it and return it."""
        shader = Shader.from_file(filepath)
        self.add(shader, name)
        return shader

    def get(self, name: str) -> Shader:
        core_assert(self.exists(name), "Shader not found!")
        return self._shaders[name]

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders


class Texture(ABC):
    """An image held on the GPU."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height in pixels."""

    @abstractmethod
    def bind(self, slot: int = 0) -> None:
        """Bind the texture to a texture unit."""


class Texture2D(Texture):
    """A two-dimensional texture."""

    @staticmethod
    def create(path: str) -> "Texture2D":
        """Load an image file into a texture for the active graphics API."""
        core_assert(Renderer.get_api() is not GraphicsAPI.NONE, _NO_API)
        from .gl_texture import OpenGLTexture2D

        return OpenGLTexture2D(path)