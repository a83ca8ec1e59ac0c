import pathlib

import pytest

from winsw_build.config import ServiceConfig

RUNTIME = "C:\\Program Files\\nodejs\\node.exe"
CWD = "C:\\install"


@pytest.fixture
def minimal_config() -> ServiceConfig:
    return ServiceConfig(id="svc1", name="My Service", script="C:\\app\\run.js")


@pytest.fixture
def bin_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Creates fake WinSW binaries for both architectures."""
    root = tmp_path / "bin"
    for arch in ("x64", "x86"):
        (root / "winsw" / arch).mkdir(parents=True)
        (root / "winsw" / arch / "winsw.exe").write_bytes(
            b"MZ\x90\x00" + arch.encode() + b"\x00\xff"
        )
    return root


@pytest.fixture
def windows_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Makes text files opened via aiofiles without an explicit encoding use
    cp1252, the locale encoding of a western Windows host.

    """

    def _open(file, mode="r", *args, encoding=None, **kwargs):
        if "b" not in mode and encoding is None:
            encoding = "cp1252"
        return open(file, mode, *args, encoding=encoding, **kwargs)

    monkeypatch.setattr("aiofiles.threadpool.sync_open", _open)
