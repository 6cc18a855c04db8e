"""Window that shows I420 frames."""

from __future__ import annotations

import itertools

import pygame

from ringvideo.image import RawImage


def _clamp(value: float) -> int:
    return max(0, min(255, int(round(value))))


# BT.601 limited-range coefficients
_LUMA = [1.164 * (y - 16) for y in range(256)]
_R_FROM_V = [1.596 * (v - 128) for v in range(256)]
_G_FROM_U = [-0.391 * (u - 128) for u in range(256)]
_G_FROM_V = [-0.813 * (v - 128) for v in range(256)]
_B_FROM_U = [2.018 * (u - 128) for u in range(256)]


def _upsample(row: bytes, width: int) -> bytes:
    return bytes(itertools.chain.from_iterable(zip(row, row)))[:width]


def _i420_to_rgb(img: RawImage) -> bytes:
    width = img.display_width
    chroma_width = (width + 1) // 2
    out = bytearray()
    for row in range(img.display_height):
        y_start = row * img.y_stride
        u_start = (row // 2) * img.u_stride
        v_start = (row // 2) * img.v_stride
        y_row = img.y_plane[y_start : y_start + width]
        u_row = _upsample(img.u_plane[u_start : u_start + chroma_width], width)
        v_row = _upsample(img.v_plane[v_start : v_start + chroma_width], width)
        for y, u, v in zip(y_row, u_row, v_row):
            luma = _LUMA[y]
            out.append(_clamp(luma + _R_FROM_V[v]))
            out.append(_clamp(luma + _G_FROM_U[u] + _G_FROM_V[v]))
            out.append(_clamp(luma + _B_FROM_U[u]))
    return bytes(out)


class VideoDisplay:
    """A resizable window showing frames of one fixed size."""

    def __init__(self, display_width: int, display_height: int) -> None:
        self._width = display_width
        self._height = display_height
        pygame.display.init()
        pygame.display.set_caption("Video Display")
        self._window = pygame.display.set_mode(
            (display_width, display_height), pygame.RESIZABLE
        )

    def show_frame(self, raw_img: RawImage) -> None:
        """Draw raw_img scaled to the window and present it."""
        if (
            raw_img.display_width != self._width
            or raw_img.display_height != self._height
        ):
            raise ValueError("VideoDisplay: image dimensions don't match")

        frame = pygame.image.frombuffer(
            _i420_to_rgb(raw_img), (self._width, self._height), "RGB"
        )
        window = pygame.display.get_surface()
        if window.get_size() != frame.get_size():
            frame = pygame.transform.scale(frame, window.get_size())
        window.fill((0, 0, 0))
        window.blit(frame, (0, 0))
        pygame.display.flip()

    def signal_quit(self) -> bool:
        """Drain pending events; True as soon as a quit request is seen."""
        while True:
            event = pygame.event.poll()
            if event.type == pygame.NOEVENT:
                return False
            if event.type == pygame.QUIT:
                return True

    def close(self) -> None:
        pygame.quit()

    def __enter__(self) -> VideoDisplay:
        return self

    def __exit__(self, *args) -> None:
        self.close()