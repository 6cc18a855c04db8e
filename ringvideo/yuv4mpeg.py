"""Reader for YUV4MPEG2 (.y4m) video files with 4:2:0 chroma."""

from __future__ import annotations

import re

from ringvideo.image import RawImage
from ringvideo.video_input import VideoInput

_SIGNATURE = b"YUV4MPEG2"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _strict_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


class YUV4MPEG(VideoInput):
    """Frames read one after another from a YUV4MPEG2 file."""

    def __init__(
        self,
        video_file_path,
        display_width: int,
        display_height: int,
        loop: bool = False,
    ) -> None:
        self._width = display_width
        self._height = display_height
        self._loop = loop
        self._file = open(video_file_path, "rb")
        try:
            self._check_header()
        except BaseException:
            self._file.close()
            raise

    def _getline(self) -> tuple[str, bool]:
        raw = self._file.readline()
        at_eof = not raw.endswith(b"\n")
        return raw.rstrip(b"\n").decode("latin-1"), at_eof

    def _check_header(self) -> None:
        if self._file.read(len(_SIGNATURE)) != _SIGNATURE:
            raise ValueError("invalid YUV4MPEG2 file signature")

        header, _ = self._getline()
        for token in header.split(" "):
            if not token:
                continue
            tag = token[0]
            if tag == "W":
                if _strict_int(token[1:]) != self._width:
                    raise ValueError("wrong YUV4MPEG2 frame width")
            elif tag == "H":
                if _strict_int(token[1:]) != self._height:
                    raise ValueError("wrong YUV4MPEG2 frame height")
            elif tag == "C":
                if token[:4] != "C420":
                    raise ValueError("only YUV420 color space is supported")

    @property
    def display_width(self) -> int:
        return self._width

    @property
    def display_height(self) -> int:
        return self._height

    def frame_size(self) -> int:
        return self._width * self._height * 3 // 2

    def y_size(self) -> int:
        return self._width * self._height

    def uv_size(self) -> int:
        return self._width * self._height // 4

    def read_frame(self, raw_img: RawImage) -> bool:
        """Read the next frame into raw_img; False at the end of a non-looping file."""
        if (
            raw_img.display_width != self._width
            or raw_img.display_height != self._height
        ):
            raise ValueError("YUV4MPEG: image dimensions don't match")

        frame_header, at_eof = self._getline()
        if at_eof and not frame_header:
            if not self._loop:
                return False
            # rewind and skip the stream header
            self._file.seek(0)
            self._getline()
            frame_header, _ = self._getline()

        if frame_header[:5] != "FRAME":
            raise ValueError("invalid YUV4MPEG2 input format")

        raw_img.copy_y_from(self._file.read(self.y_size()))
        raw_img.copy_u_from(self._file.read(self.uv_size()))
        raw_img.copy_v_from(self._file.read(self.uv_size()))
        return True

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> YUV4MPEG:
        return self

    def __exit__(self, *args) -> None:
        self.close()