# ringvideo

Raw video frames in I420 (planar YUV 4:2:0) layout, a reader for
YUV4MPEG2 (`.y4m`) files and a pygame window that shows frames on screen.

## Installation

```
pip install ringvideo
```

Run the test suite with the `test` extra installed:

```
pip install "ringvideo[test]"
pytest
```

## Frames

`ringvideo.image.RawImage` holds one I420 frame: a full-size Y plane and
quarter-size U and V planes, each a `bytearray` (`y_plane`, `u_plane`,
`v_plane`) with its row stride (`y_stride`, `u_stride`, `v_stride`).
Planes are packed without padding. Width and height must each be between
1 and 65535; anything else raises `ValueError`.

```python
from ringvideo.image import RawImage

img = RawImage(640, 480)
img.display_width   # 640
img.display_height  # 480
img.y_size()        # 307200
img.uv_size()       # 76800
```

A frame can be filled in several ways; each accepts any bytes-like object:

- `copy_y_from`, `copy_u_from` and `copy_v_from` take the bytes of one
  plane (`y_size()` or `uv_size()` bytes).
- `copy_from_ringbuffer` takes the Y, U and V planes back to back.
- `copy_from_yuyv` takes packed YUYV 4:2:2 data of `2 * width * height`
  bytes. Chroma is taken from the even rows.

Input of the wrong size raises `ValueError`.

## Reading YUV4MPEG2 files

`ringvideo.yuv4mpeg.YUV4MPEG` implements the abstract
`ringvideo.video_input.VideoInput` interface (`display_width`,
`display_height`, `read_frame`). The width and height you pass must match
the `W` and `H` entries of the file header, and if the header names a
colour space it must be `C420` or one of its variants. A bad signature or
header raises `ValueError`.

```python
from ringvideo.image import RawImage
from ringvideo.yuv4mpeg import YUV4MPEG

with YUV4MPEG("clip.y4m", 640, 480, loop=False) as video:
    frame = RawImage(640, 480)
    while video.read_frame(frame):
        ...  # use frame
```

`read_frame` returns `False` at the end of the file. With `loop=True`
it starts again from the first frame instead. A frame that does not begin
with `FRAME`, or an image of a different size than the file, raises
`ValueError`. `frame_size()`, `y_size()` and `uv_size()` give the byte
counts of a frame and its planes.

## Display

`ringvideo.display.VideoDisplay` opens a resizable pygame window titled
"Video Display" and shows frames of a fixed size, converted to RGB with
BT.601 coefficients and scaled to the window.

```python
from ringvideo.display import VideoDisplay
from ringvideo.image import RawImage
from ringvideo.yuv4mpeg import YUV4MPEG

with YUV4MPEG("clip.y4m", 640, 480) as video, VideoDisplay(640, 480) as display:
    frame = RawImage(640, 480)
    while not display.signal_quit():
        if not video.read_frame(frame):
            break
        display.show_frame(frame)
```

`signal_quit` drains pending events and returns `True` once the user has
asked to close the window. `show_frame` raises `ValueError` for a frame of
another size. Colour conversion is done in pure Python, so large frames
display slowly.

## What it does not do

The package is a library only: it installs no command-line program, does
not capture from cameras or other devices, and does not encode or decode
compressed video. Frames come from YUV4MPEG2 files or from bytes you
supply yourself.