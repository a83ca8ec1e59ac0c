import re

import aiofiles


def sanitize_name(name: str) -> str:
    """Strips every non-word character from ``name`` and lower-cases it, e.g.
    ``My App`` becomes ``myapp``.

    """
    return re.sub(r"[^\w]", "", name, flags=re.ASCII).lower()


async def write_to_file(fname: str, contents: str | bytes) -> None:
    if isinstance(contents, str):
        async with aiofiles.open(fname, "w", encoding="utf-8") as f:
            await f.write(contents)
    elif isinstance(contents, bytes):
        async with aiofiles.open(fname, "bw") as f:
            await f.write(contents)
    else:
        raise TypeError(
            f"Invalid type of contents: {type(contents)}, expected string or bytes"
        )


async def read_binary(fname: str) -> bytes:
    async with aiofiles.open(fname, "rb") as f:
        return await f.read()
