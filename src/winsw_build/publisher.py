"""Publishing of the WinSW wrapper executable.

WinSW ships one executable per processor architecture. The matching one is
copied unmodified next to the service descriptor under the sanitized name of
the service, which is how WinSW locates its xml configuration.

The binaries are looked up below ``bin_dir`` as
:file:`winsw/x64/winsw.exe` or :file:`winsw/x86/winsw.exe`. ``bin_dir``
defaults to the environment variable ``WINSW_BIN_DIR`` and falls back to the
:file:`bin` folder inside this package.

"""

import asyncio
import enum
import os
import platform
from collections.abc import Awaitable
from collections.abc import Callable
from pathlib import Path

import aiofiles.os

from winsw_build.logger import LOGGER
from winsw_build.util import read_binary
from winsw_build.util import sanitize_name
from winsw_build.util import write_to_file

#: environment variable overriding the folder containing the WinSW binaries
BIN_DIR_ENV_VAR = "WINSW_BIN_DIR"


@enum.unique
class Arch(enum.StrEnum):
    """Processor word sizes for which a WinSW binary exists."""

    X64 = "x64"
    X86 = "x86"

    @staticmethod
    def host() -> "Arch":
        return Arch.X64 if "64" in platform.machine() else Arch.X86


def default_bin_dir() -> Path:
    if env_dir := os.getenv(BIN_DIR_ENV_VAR):
        return Path(env_dir)
    return Path(__file__).parent / "bin"


def select_binary(bin_dir: str | Path | None = None, arch: Arch | None = None) -> Path:
    """Returns the path to the WinSW executable for ``arch`` (defaults to the
    architecture of the host).

    """
    return (
        Path(bin_dir or default_bin_dir())
        / "winsw"
        / str(arch or Arch.host())
        / "winsw.exe"
    )


async def create_exe(
    name: str,
    dest: str | Path | None = None,
    callback: Callable[[], None | Awaitable[None]] | None = None,
    bin_dir: str | Path | None = None,
    arch: Arch | None = None,
) -> Path:
    """Copies the WinSW executable to :file:`{dest}/{sanitized_name}.exe` and
    returns the path of the copy.

    ``name`` is stripped of all non-alphanumeric characters and lower-cased,
    so that ``My App`` results in :file:`myapp.exe`. ``dest`` defaults to the
    current working directory. ``callback`` is invoked (and awaited if it
    returns an awaitable) once the executable has been written.

    Raises:
        :py:class:`FileNotFoundError`: if the WinSW binary does not exist

    """
    origin = select_binary(bin_dir, arch)
    if not await aiofiles.os.path.isfile(origin):
        raise FileNotFoundError(f"WinSW executable {origin} does not exist")

    destination = Path(dest or os.getcwd()) / f"{sanitize_name(name)}.exe"

    LOGGER.info("Copying %s to %s", origin, destination)
    await write_to_file(str(destination), await read_binary(str(origin)))

    if callback is not None:
        res = callback()
        if asyncio.iscoroutine(res):
            await res

    return destination
