import pytest

from ringvideo.image import RawImage
from ringvideo.yuv4mpeg import YUV4MPEG

HEADER = b"YUV4MPEG2 W4 H2 F30:1 Ip A1:1 C420jpeg\n"
Y1 = bytes(range(8))
U1 = bytes([100, 101])
V1 = bytes([200, 201])
Y2 = bytes(range(50, 58))
U2 = bytes([110, 111])
V2 = bytes([210, 211])


def _frame(y, u, v):
    return b"FRAME\n" + y + u + v


@pytest.fixture
def two_frames(tmp_path):
    path = tmp_path / "clip.y4m"
    path.write_bytes(HEADER + _frame(Y1, U1, V1) + _frame(Y2, U2, V2))
    return path


def _planes(img):
    return bytes(img.y_plane), bytes(img.u_plane), bytes(img.v_plane)


def test_sizes(two_frames):
    with YUV4MPEG(two_frames, 4, 2) as video:
        assert video.y_size() == len(Y1)
        assert video.uv_size() == len(U1)
        assert video.frame_size() == len(Y1) + len(U1) + len(V1)
        assert (video.display_width, video.display_height) == (4, 2)


def test_reads_frames_in_order_then_stops(two_frames):
    img = RawImage(4, 2)
    with YUV4MPEG(two_frames, 4, 2) as video:
        assert video.read_frame(img) is True
        assert _planes(img) == (Y1, U1, V1)
        assert video.read_frame(img) is True
        assert _planes(img) == (Y2, U2, V2)
        assert video.read_frame(img) is False


def test_loop_restarts_from_first_frame(two_frames):
    img = RawImage(4, 2)
    with YUV4MPEG(two_frames, 4, 2, loop=True) as video:
        assert video.read_frame(img)
        assert video.read_frame(img)
        assert video.read_frame(img) is True
        assert _planes(img) == (Y1, U1, V1)


def test_mismatched_image(two_frames):
    with YUV4MPEG(two_frames, 4, 2) as video:
        with pytest.raises(ValueError):
            video.read_frame(RawImage(2, 2))


def test_bad_signature(tmp_path):
    path = tmp_path / "bad.y4m"
    path.write_bytes(b"NOTAVIDEO W4 H2\n")
    with pytest.raises(ValueError, match="signature"):
        YUV4MPEG(path, 4, 2)


@pytest.mark.parametrize(
    "header,message",
    [
        (b"YUV4MPEG2 W8 H2 C420\n", "width"),
        (b"YUV4MPEG2 W4 H4 C420\n", "height"),
        (b"YUV4MPEG2 W4 H2 C444\n", "color space"),
    ],
)
def test_header_mismatch(tmp_path, header, message):
    path = tmp_path / "clip.y4m"
    path.write_bytes(header)
    with pytest.raises(ValueError, match=message):
        YUV4MPEG(path, 4, 2)


def test_non_numeric_width(tmp_path):
    path = tmp_path / "clip.y4m"
    path.write_bytes(b"YUV4MPEG2 Wabc H2\n")
    with pytest.raises(ValueError):
        YUV4MPEG(path, 4, 2)


def test_invalid_frame_header(tmp_path):
    path = tmp_path / "clip.y4m"
    path.write_bytes(HEADER + b"FRAMX\n" + Y1 + U1 + V1)
    with YUV4MPEG(path, 4, 2) as video:
        with pytest.raises(ValueError, match="input format"):
            video.read_frame(RawImage(4, 2))


def test_truncated_frame(tmp_path):
    path = tmp_path / "clip.y4m"
    path.write_bytes(HEADER + b"FRAME\n" + Y1[:5])
    with YUV4MPEG(path, 4, 2) as video:
        with pytest.raises(ValueError):
            video.read_frame(RawImage(4, 2))