import argparse
import asyncio
import json
import os
import sys

from winsw_build.config import InvalidConfigError
from winsw_build.config import ServiceConfig
from winsw_build.logger import LOGGER
from winsw_build.package import ServicePackage


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "winsw-build",
        description="Create the WinSW service descriptor and wrapper executable from a json service configuration",
    )

    parser.add_argument(
        "config",
        type=str,
        nargs=1,
        help="json file with the service configuration (id, name, script, ...)",
    )
    parser.add_argument(
        "--destination",
        "-d",
        type=str,
        nargs=1,
        default=[None],
        help="destination folder to which the files should be written, defaults to the current working directory",
    )
    parser.add_argument(
        "--executable",
        type=str,
        nargs=1,
        default=[sys.executable],
        help="runtime that executes the service's script, defaults to the current interpreter",
    )
    parser.add_argument(
        "--bin-dir",
        type=str,
        nargs=1,
        default=[None],
        help="folder containing winsw/x64/winsw.exe and winsw/x86/winsw.exe, defaults to $WINSW_BIN_DIR",
    )
    parser.add_argument(
        "--no-exe",
        action="store_true",
        help="Only write the xml descriptor, don't copy the WinSW executable",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the xml descriptor to stdout instead of writing any files",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Set the verbosity of the logger to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    if args.verbose > 0:
        LOGGER.setLevel((3 - min(args.verbose, 2)) * 10)
    else:
        LOGGER.setLevel("ERROR")

    try:
        with open(args.config[0], "r") as cfg_file:
            config = ServiceConfig.from_dict(json.load(cfg_file))

        pkg = ServicePackage(
            config=config,
            runtime_executable_path=args.executable[0],
            current_working_directory=os.getcwd(),
            bin_dir=args.bin_dir[0],
        )

        if args.stdout:
            print(pkg.render())
            return 0

        dest = args.destination[0] or os.getcwd()
        files = asyncio.run(pkg.write_files_to_folder(dest, with_exe=not args.no_exe))
    except (InvalidConfigError, FileNotFoundError, json.JSONDecodeError) as err:
        LOGGER.error("%s", err)
        return 1

    LOGGER.info("Wrote %s to %s", ", ".join(files), dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
