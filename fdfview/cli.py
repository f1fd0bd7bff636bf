"""Command that loads a height map and shows it in a window."""

from __future__ import annotations

import sys

import pygame

from fdfview.errors import ErrorCode, FdfError
from fdfview.heightmap import load_map
from fdfview.render import (
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    FrameBuffer,
    compute_render,
    draw_map,
    points_to_pixels,
    rgb_to_color,
)


def _rgb_bytes(framebuffer: FrameBuffer) -> bytes:
    """Convert the 32-bit little-endian 0xRRGGBB pixels to packed RGB."""
    data = framebuffer.data
    rgb = bytearray(framebuffer.width * framebuffer.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def _show(framebuffer: FrameBuffer) -> None:
    """Display the image until Escape is pressed or the window is closed."""
    size = (framebuffer.width, framebuffer.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        image = pygame.image.frombuffer(_rgb_bytes(framebuffer), size, "RGB")
        screen.blit(image, (0, 0))
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                break
    finally:
        pygame.quit()


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line, print it and show it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail(str(FdfError(ErrorCode.INVALID_NUMBER_OF_ARGUMENTS)))
    try:
        heightmap = load_map(args[0])
    except FdfError as exc:
        return _fail(str(exc))
    except ValueError as exc:
        return _fail(f"Error : invalid map file: {exc}")

    sys.stdout.write(heightmap.format_raw())
    sys.stdout.flush()

    render = compute_render(heightmap, WINDOW_WIDTH, WINDOW_HEIGHT)
    pixels = points_to_pixels(heightmap, render)
    framebuffer = FrameBuffer(WINDOW_WIDTH, WINDOW_HEIGHT)
    try:
        draw_map(pixels, framebuffer, rgb_to_color(0, 255, 0))
    except IndexError:
        return _fail("Error : map does not fit in the window")

    _show(framebuffer)
    return 0


if __name__ == "__main__":
    sys.exit(main())