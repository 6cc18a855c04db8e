"""Raw I420 (YUV 4:2:0 planar) images."""

from __future__ import annotations

_MAX_DIMENSION = 0xFFFF


def _as_bytes(src) -> bytes:
    return bytes(memoryview(src))


class RawImage:
    """An I420 frame held as three byte planes with row strides.

    Planes are packed without padding: the Y stride equals the width and
    the chroma strides equal half the width, rounded up.
    """

    def __init__(self, display_width: int, display_height: int) -> None:
        for name, value in (("width", display_width), ("height", display_height)):
            if not 0 < value <= _MAX_DIMENSION:
                raise ValueError(f"RawImage: invalid {name} {value}")

        self._width = display_width
        self._height = display_height

        self.y_stride = display_width
        self.u_stride = (display_width + 1) // 2
        self.v_stride = self.u_stride

        chroma_rows = (display_height + 1) // 2
        self.y_plane = bytearray(self.y_stride * display_height)
        self.u_plane = bytearray(self.u_stride * chroma_rows)
        self.v_plane = bytearray(self.v_stride * chroma_rows)

    @property
    def display_width(self) -> int:
        return self._width

    @property
    def display_height(self) -> int:
        return self._height

    def y_size(self) -> int:
        """Number of bytes in a tightly packed Y plane."""
        return self._width * self._height

    def uv_size(self) -> int:
        """Number of bytes in a tightly packed U or V plane."""
        return self._width * self._height // 4

    def copy_from_yuyv(self, src) -> None:
        """Fill the image from a packed YUYV buffer of 2 * width * height bytes."""
        data = _as_bytes(src)
        if len(data) != self.y_size() * 2:
            raise ValueError("RawImage: invalid YUYV size")

        luma = data[0::2]
        self.y_plane[: len(luma)] = luma

        # chroma is taken from every other row of the packed frame
        row_len = 2 * self._width
        half = self._width // 2
        u_data = bytearray()
        v_data = bytearray()
        for start in range(0, (self._height // 2) * 2 * row_len, 2 * row_len):
            row = data[start : start + row_len]
            u_data += row[1::4][:half]
            v_data += row[3::4][:half]

        self.u_plane[: len(u_data)] = u_data
        self.v_plane[: len(v_data)] = v_data

    def copy_from_ringbuffer(self, src) -> None:
        """Fill the image from contiguous Y, U and V planes."""
        data = _as_bytes(src)
        if len(data) != self.y_size() + 2 * self.uv_size():
            raise ValueError("RawImage::copy_from_ringbuffer: invalid frame size")

        width = self._width
        half = width // 2
        src_u = data[self.y_size() :]
        src_v = src_u[self.uv_size() :]

        for row in range(self._height):
            dst = row * self.y_stride
            self.y_plane[dst : dst + width] = data[row * width : (row + 1) * width]

        for row in range(self._height // 2):
            offset = row * width // 2
            dst_u = row * self.u_stride
            dst_v = row * self.v_stride
            self.u_plane[dst_u : dst_u + half] = src_u[offset : offset + half]
            self.v_plane[dst_v : dst_v + half] = src_v[offset : offset + half]

    def copy_y_from(self, src) -> None:
        """Copy a packed Y plane into the image."""
        data = _as_bytes(src)
        if len(data) != self.y_size():
            raise ValueError("RawImage: invalid size for Y plane")
        self.y_plane[: len(data)] = data

    def copy_u_from(self, src) -> None:
        """Copy a packed U plane into the image."""
        data = _as_bytes(src)
        if len(data) != self.uv_size():
            raise ValueError("RawImage: invalid size for U plane")
        self.u_plane[: len(data)] = data

    def copy_v_from(self, src) -> None:
        """Copy a packed V plane into the image."""
        data = _as_bytes(src)
        if len(data) != self.uv_size():
            raise ValueError("RawImage: invalid size for V plane")
        self.v_plane[: len(data)] = data