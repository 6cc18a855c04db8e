"""Abstract source of raw video frames."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ringvideo.image import RawImage


class VideoInput(ABC):
    """A source that fills RawImage objects with frames of a fixed size."""

    @property
    @abstractmethod
    def display_width(self) -> int:
        """Frame width in pixels."""

    @property
    @abstractmethod
    def display_height(self) -> int:
        """Frame height in pixels."""

    @abstractmethod
    def read_frame(self, raw_img: RawImage) -> bool:
        """Read the next frame into raw_img; return False if none is available."""