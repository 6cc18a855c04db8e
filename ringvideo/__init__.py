"""I420 video frames, YUV4MPEG2 file input and a pygame frame display."""

__version__ = "1.0"
__all__ = ["display", "image", "video_input", "yuv4mpeg"]