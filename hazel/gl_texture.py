"""OpenGL 2D textures loaded from image files."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from PIL import Image

from .log import HazelError, core_assert
from .shader import Texture2D

GL_TEXTURE_2D = 0x0DE1
GL_RGB8 = 0x8051
GL_RGBA8 = 0x8058
GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_TEXTURE_MIN_FILTER = 0x2801
GL_TEXTURE_MAG_FILTER = 0x2800
GL_LINEAR = 0x2601
GL_UNSIGNED_BYTE = 0x1401


def _resolve_gl(gl: Optional[Any]) -> Any:
    if gl is not None:
        return gl
    from pyglet import gl as pyglet_gl

    return pyglet_gl


def load_image(path: str) -> Tuple[int, int, int, bytes]:
    """Read an image flipped vertically; return width, height, channels and pixels."""
    try:
        with Image.open(path) as image:
            image.load()
            flipped = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    except (OSError, ValueError) as exc:
        raise HazelError("Failed to load image!") from exc
    channels = len(flipped.getbands())
    return flipped.width, flipped.height, channels, flipped.tobytes()


def texture_formats(channels: int) -> Tuple[int, int]:
    """Internal and pixel data formats for an image with the given channel count."""
    formats = {3: (GL_RGB8, GL_RGB), 4: (GL_RGBA8, GL_RGBA)}.get(channels)
    core_assert(formats is not None, "There is no support for this data image format!")
    return formats  # type: ignore[return-value]


class OpenGLTexture2D(Texture2D):
    """An image file uploaded into immutable OpenGL texture storage."""

    def __init__(self, path: str, gl: Optional[Any] = None) -> None:
        self._gl = _resolve_gl(gl)
        self.path = path
        width, height, channels, pixels = load_image(path)
        internal_format, data_format = texture_formats(channels)
        self._width = width
        self._height = height

        name = self._gl.GLuint(0)
        self._gl.glCreateTextures(GL_TEXTURE_2D, 1, name)
        self.renderer_id = int(name.value)
        self._gl.glTextureStorage2D(self.renderer_id, 1, internal_format, width, height)
        self._gl.glTextureParameteri(self.renderer_id, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        self._gl.glTextureParameteri(self.renderer_id, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        self._gl.glTextureSubImage2D(
            self.renderer_id, 0, 0, 0, width, height, data_format, GL_UNSIGNED_BYTE, pixels
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def bind(self, slot: int = 0) -> None:
        self._gl.glBindTextureUnit(slot, self.renderer_id)

    def delete(self) -> None:
        """Release the texture."""
        self._gl.glDeleteTextures(1, self._gl.GLuint(self.renderer_id))