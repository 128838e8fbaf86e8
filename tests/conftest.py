import subprocess
import threading
from pathlib import Path

import pytest

from vconvert.utils import ffmpeg_utils


class FakeFFmpeg:
    """Stands in for `subprocess.run` and records every command it receives."""

    def __init__(self):
        self.calls = []
        self.returncode = 0
        self.output = "frame=  100 fps=0.0 q=-1.0 Lsize=     256kB"
        self.write_output = True
        self.on_run = None
        self._lock = threading.Lock()

    @property
    def conversions(self):
        return [cmd for cmd in self.calls if cmd[1:] != ["-version"]]

    def __call__(self, cmd, **kwargs):
        assert kwargs["stderr"] is subprocess.STDOUT
        with self._lock:
            self.calls.append(list(cmd))
        if cmd[1:] == ["-version"]:
            return subprocess.CompletedProcess(cmd, 0, stdout="ffmpeg version 6.1 Copyright (c) 2000-2023\n")
        if self.on_run is not None:
            self.on_run(cmd)
        if self.write_output:
            Path(cmd[-1]).write_text(f"converted from {cmd[2]}")
        return subprocess.CompletedProcess(cmd, self.returncode, stdout=self.output)


@pytest.fixture
def fake_ffmpeg(monkeypatch):
    fake = FakeFFmpeg()
    monkeypatch.setattr(ffmpeg_utils.subprocess, "run", fake)
    monkeypatch.setattr(ffmpeg_utils, "MODULE_PATH", None)
    return fake


@pytest.fixture
def make_input(tmp_path):
    def _make(name: str) -> Path:
        path = tmp_path / "in" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
        return path

    return _make
