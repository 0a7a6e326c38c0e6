"""Fixed multi-bitrate encoding profile applied by the VOD transform."""

from datetime import timedelta

from pydantic import BaseModel


class AudioCodec(BaseModel, frozen=True):
    """AAC audio track settings."""

    channels: int
    sampling_rate: int
    bitrate: int
    profile: str = "AacLc"


class VideoLayer(BaseModel, frozen=True):
    """One H.264 rendition of the bitrate ladder."""

    width: int
    height: int
    bitrate: int
    label: str


class VideoCodec(BaseModel, frozen=True):
    """H.264 video settings with its bitrate ladder."""

    key_frame_interval: timedelta
    layers: tuple[VideoLayer, ...]


class ThumbnailCodec(BaseModel, frozen=True):
    """JPG thumbnails sampled across the source duration."""

    start: str
    step: str
    range: str
    width: str
    height: str


class OutputFormat(BaseModel, frozen=True):
    """Container format and file naming pattern of encoder outputs."""

    container: str
    filename_pattern: str


class EncodingProfile(BaseModel, frozen=True):
    """Complete encoder preset of a transform output."""

    description: str
    audio: AudioCodec
    video: VideoCodec
    thumbnails: ThumbnailCodec
    formats: tuple[OutputFormat, ...]
    stop_job_on_error: bool = True
    relative_priority: str = "Normal"


DEFAULT_ENCODING_PROFILE = EncodingProfile(
    description="A simple custom encoding transform with 3 MP4 bitrates",
    audio=AudioCodec(channels=2, sampling_rate=48000, bitrate=128000),
    video=VideoCodec(
        key_frame_interval=timedelta(seconds=2),
        layers=(
            VideoLayer(width=1280, height=720, bitrate=3600000, label="HD-3600kbps"),
            VideoLayer(width=960, height=540, bitrate=1600000, label="SD-1600kbps"),
            VideoLayer(width=640, height=360, bitrate=600000, label="SD-600kbps"),
        ),
    ),
    thumbnails=ThumbnailCodec(
        start="25%", step="25%", range="80%", width="50%", height="50%"
    ),
    formats=(
        OutputFormat(
            container="mp4",
            filename_pattern="Video-{Basename}-{Label}-{Bitrate}{Extension}",
        ),
        OutputFormat(
            container="jpg",
            filename_pattern="Thumbnail-{Basename}-{Index}{Extension}",
        ),
    ),
)
