"""Projecting map points to screen pixels and drawing them into a frame buffer."""

from __future__ import annotations

from dataclasses import dataclass

from fdfview.heightmap import HeightMap

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "fdf"
DEFAULT_SCALE = 20
BITS_PER_PIXEL = 32

_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
_UINT32 = 2**32


@dataclass
class Pixel:
    """A screen position and the colour drawn there."""

    x: int
    y: int
    color: int = 0


@dataclass(frozen=True)
class RenderSettings:
    """Scale and offsets that place the map in the window."""

    scale: int
    offset_x: int
    offset_y: int


def rgb_to_color(r: int, g: int, b: int) -> int:
    """Pack red, green and blue components into a 0xRRGGBB colour value."""
    return (r << 16) | (g << 8) | b


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def compute_render(
    heightmap: HeightMap, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
) -> RenderSettings:
    """Centre the map grid in a window of the given size."""
    scale = DEFAULT_SCALE
    return RenderSettings(
        scale=scale,
        offset_x=_trunc_div(width - heightmap.cols * scale, 2),
        offset_y=_trunc_div(height - heightmap.rows * scale, 2),
    )


def points_to_pixels(heightmap: HeightMap, render: RenderSettings) -> list[list[Pixel]]:
    """Map every point of the grid to its pixel position."""
    return [
        [
            Pixel(
                x=point.x * render.scale + render.offset_x,
                y=point.y * render.scale + render.offset_y,
            )
            for point in row
        ]
        for row in heightmap.points
    ]


class FrameBuffer:
    """An image of 32-bit little-endian pixels, rows laid out one after another."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self.bits_per_pixel = BITS_PER_PIXEL
        self.line_length = width * _BYTES_PER_PIXEL
        self.data = bytearray(self.line_length * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside the {self.width}x{self.height} image"
            )
        return y * self.line_length + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at position (x, y)."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (color % _UINT32).to_bytes(
            _BYTES_PER_PIXEL, "little"
        )

    def pixel_at(self, x: int, y: int) -> int:
        """Return the colour stored at position (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], "little")


def draw_map(pixels: list[list[Pixel]], framebuffer: FrameBuffer, color: int) -> None:
    """Give every pixel ``color`` and draw it into ``framebuffer``."""
    for row in pixels:
        for pixel in row:
            pixel.color = color
            framebuffer.put_pixel(pixel.x, pixel.y, color)