from pathlib import Path

import pytest

from vconvert.domain.exceptions import OutputDirectoryException
from vconvert.domain.options import ConvertOptions
from vconvert.services.job_builder import build_jobs, ensure_output_dir, resolve_output_file


def test_resolve_output_file():
    assert resolve_output_file(Path("videos/holiday.mov"), "out", "mkv") == Path("out/holiday.mkv")
    assert resolve_output_file(Path("videos/a.b.avi"), "out", "mp4") == Path("out/a.b.mp4")


def test_resolve_output_file_defaults_to_current_directory():
    assert resolve_output_file(Path("/data/videos/holiday.mov"), "", "mp4") == Path("holiday.mp4")


def test_build_jobs_copies_options_and_keeps_order(make_input, tmp_path):
    first = make_input("b.mov")
    second = make_input("a.avi")
    options = ConvertOptions(
        input_files=(str(first), str(second)),
        output_format="webm",
        quality="high",
        resolution="1920x1080",
        output_dir=str(tmp_path / "out"),
        compression_level="light",
        target_size="100M",
        video_bitrate="2M",
        audio_bitrate="128k",
    )

    jobs = build_jobs(options)

    assert [job.input_file for job in jobs] == [first, second]
    assert [job.output_file for job in jobs] == [tmp_path / "out" / "b.webm", tmp_path / "out" / "a.webm"]
    job = jobs[0]
    assert job.quality == "high"
    assert job.resolution == "1920x1080"
    assert job.compression_level == "light"
    assert job.target_size == "100M"
    assert job.video_bitrate == "2M"
    assert job.audio_bitrate == "128k"


def test_build_jobs_skips_missing_inputs(make_input, tmp_path):
    existing = make_input("clip.mov")
    options = ConvertOptions(input_files=(str(tmp_path / "missing.mov"), str(existing)))

    jobs = build_jobs(options)

    assert [job.input_file for job in jobs] == [existing]


def test_build_jobs_with_no_existing_inputs(tmp_path):
    options = ConvertOptions(input_files=(str(tmp_path / "x.mov"), str(tmp_path / "y.mov")))
    assert build_jobs(options) == []


def test_build_jobs_keeps_colliding_outputs(make_input, tmp_path):
    mov = make_input("clip.mov")
    avi = make_input("clip.avi")
    options = ConvertOptions(input_files=(str(mov), str(avi)), output_dir=str(tmp_path))

    jobs = build_jobs(options)

    assert len(jobs) == 2
    assert jobs[0].output_file == jobs[1].output_file == tmp_path / "clip.mp4"


def test_jobs_are_immutable(make_input):
    job = build_jobs(ConvertOptions(input_files=(str(make_input("clip.mov")),)))[0]
    with pytest.raises(AttributeError):
        job.output_file = Path("elsewhere.mp4")


def test_ensure_output_dir_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    ensure_output_dir(str(target))
    assert target.is_dir()
    # Calling it again on an existing directory is fine.
    ensure_output_dir(str(target))


def test_ensure_output_dir_failure(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with pytest.raises(OutputDirectoryException):
        ensure_output_dir(str(blocker / "sub"))


def test_ensure_output_dir_empty_is_noop():
    ensure_output_dir("")
