from pathlib import Path

import pytest

from vconvert.domain.job import ConversionJob
from vconvert.services.argument_translator import (
    get_ffmpeg_args,
    is_valid_target_size,
    target_size_to_bitrate,
)


def make_job(**options) -> ConversionJob:
    return ConversionJob(input_file=Path("in/clip.mov"), output_file=Path("out/clip.mp4"), **options)


def flag_values(args, flag):
    return [args[i + 1] for i, arg in enumerate(args) if arg == flag]


def test_default_quality_only():
    args = get_ffmpeg_args(make_job(quality="medium"))
    assert args == ["-i", "in/clip.mov", "-crf", "23", "-y", "out/clip.mp4"]


@pytest.mark.parametrize(
    "level, crf, audio_bitrate",
    [("light", "23", "128k"), ("medium", "28", "96k"), ("heavy", "32", "64k")],
)
def test_compression_preset_overrides_quality(level, crf, audio_bitrate):
    args = get_ffmpeg_args(make_job(quality="high", compression_level=level))
    assert args == [
        "-i", "in/clip.mov",
        "-c:v", "libx264", "-crf", crf, "-preset", "medium",
        "-c:a", "aac", "-b:a", audio_bitrate,
        "-y", "out/clip.mp4",
    ]
    assert flag_values(args, "-crf") == [crf]


@pytest.mark.parametrize(
    "quality, crf",
    [("low", "28"), ("high", "18"), ("medium", "23"), ("", "23"), ("ultra", "23")],
)
def test_quality_preset_without_compression(quality, crf):
    args = get_ffmpeg_args(make_job(quality=quality))
    assert flag_values(args, "-crf") == [crf]
    assert "-c:v" not in args
    assert "-b:a" not in args


def test_unknown_compression_level_applies_no_preset():
    args = get_ffmpeg_args(make_job(quality="high", compression_level="extreme"))
    assert args == ["-i", "in/clip.mov", "-y", "out/clip.mp4"]


@pytest.mark.parametrize("compression_level", ["", "light", "heavy"])
def test_explicit_video_bitrate_is_kept_alongside_presets(compression_level):
    args = get_ffmpeg_args(make_job(quality="low", compression_level=compression_level, video_bitrate="2M"))
    assert flag_values(args, "-b:v") == ["2M"]
    assert "-crf" in args
    assert args.index("-b:v") > args.index("-crf")


def test_explicit_audio_bitrate_follows_preset_audio_bitrate():
    args = get_ffmpeg_args(make_job(compression_level="medium", audio_bitrate="192k"))
    assert flag_values(args, "-b:a") == ["96k", "192k"]


def test_target_size_adds_rate_cap():
    args = get_ffmpeg_args(make_job(quality="medium", target_size="100M"))
    expected = 100 * 8 * 1024 * 1024 // 600
    assert flag_values(args, "-maxrate") == [f"{expected // 1000}k"]
    assert flag_values(args, "-bufsize") == [f"{expected // 2000}k"]
    assert flag_values(args, "-maxrate") == ["1398k"]
    assert flag_values(args, "-bufsize") == ["699k"]
    # The cap is layered on top of the quality settings, not instead of them.
    assert flag_values(args, "-crf") == ["23"]


def test_non_numeric_target_size_yields_zero_cap():
    args = get_ffmpeg_args(make_job(target_size="largeM"))
    assert flag_values(args, "-maxrate") == ["0k"]
    assert flag_values(args, "-bufsize") == ["0k"]


def test_resolution_is_passed_verbatim():
    args = get_ffmpeg_args(make_job(resolution="1280x720"))
    assert flag_values(args, "-vf") == ["scale=1280x720"]
    args = get_ffmpeg_args(make_job(resolution="not-a-size"))
    assert flag_values(args, "-vf") == ["scale=not-a-size"]


def test_full_argument_order():
    args = get_ffmpeg_args(
        make_job(
            quality="high",
            compression_level="light",
            video_bitrate="1M",
            audio_bitrate="160k",
            target_size="50M",
            resolution="640x360",
        )
    )
    assert args == [
        "-i", "in/clip.mov",
        "-c:v", "libx264", "-crf", "23", "-preset", "medium",
        "-c:a", "aac", "-b:a", "128k",
        "-b:v", "1M",
        "-b:a", "160k",
        "-maxrate", "699k", "-bufsize", "349k",
        "-vf", "scale=640x360",
        "-y", "out/clip.mp4",
    ]


def test_translation_is_deterministic():
    job = make_job(compression_level="heavy", target_size="10M", resolution="320x240")
    assert get_ffmpeg_args(job) == get_ffmpeg_args(job)


@pytest.mark.parametrize(
    "target_size, expected",
    [
        ("100M", 1398101),
        ("100", 1398101),
        ("0M", 0),
        ("1.5M", 0),
        ("M", 0),
        ("abc", 0),
        ("100MB", 0),
    ],
)
def test_target_size_to_bitrate(target_size, expected):
    assert target_size_to_bitrate(target_size) == expected


def test_is_valid_target_size():
    assert is_valid_target_size("700M")
    assert is_valid_target_size("700")
    assert not is_valid_target_size("700G")
    assert not is_valid_target_size("")
