import asyncio
import os
import sys
from dataclasses import dataclass
from dataclasses import field

import aiofiles.os

from winsw_build.config import ServiceConfig
from winsw_build.document import build_document
from winsw_build.document import render_document
from winsw_build.publisher import create_exe
from winsw_build.publisher import select_binary
from winsw_build.util import sanitize_name
from winsw_build.util import write_to_file


@dataclass
class ServicePackage:
    """The files that WinSW needs to run a service: the wrapper executable and
    its xml descriptor, both named after the sanitized service name.

    """

    config: ServiceConfig

    #: runtime that executes the service's script, defaults to the running
    #: interpreter
    runtime_executable_path: str = field(default_factory=lambda: sys.executable)

    #: working directory used when the configuration does not define one
    current_working_directory: str = field(default_factory=os.getcwd)

    #: folder containing the WinSW binaries, see
    #: :py:func:`~winsw_build.publisher.default_bin_dir`
    bin_dir: str | None = None

    @property
    def basename(self) -> str:
        return sanitize_name(self.config.name or "")

    @property
    def xml_file_name(self) -> str:
        return f"{self.basename}.xml"

    @property
    def exe_file_name(self) -> str:
        return f"{self.basename}.exe"

    def render(self) -> str:
        return render_document(
            build_document(
                self.config,
                self.runtime_executable_path,
                self.current_working_directory,
            )
        )

    async def write_files_to_folder(self, dest: str, with_exe: bool = True) -> list[str]:
        """Writes the descriptor and (if ``with_exe`` is ``True``) the WinSW
        executable into the destination folder and returns the filenames (not
        full paths) that were written to the disk.

        The descriptor is rendered and the WinSW binary is looked up before
        anything is written, so that an invalid configuration or a missing
        binary leaves the destination untouched.

        Raises:
            :py:class:`FileNotFoundError`: if ``with_exe`` is set and the WinSW
            binary does not exist

        """
        descriptor = self.render()

        if with_exe and not await aiofiles.os.path.isfile(
            origin := select_binary(self.bin_dir)
        ):
            raise FileNotFoundError(f"WinSW executable {origin} does not exist")

        files = [self.xml_file_name]
        tasks = [write_to_file(os.path.join(dest, self.xml_file_name), descriptor)]

        if with_exe:
            files.append(self.exe_file_name)
            tasks.append(create_exe(self.config.name, dest, bin_dir=self.bin_dir))

        await asyncio.gather(*tasks)

        return files
