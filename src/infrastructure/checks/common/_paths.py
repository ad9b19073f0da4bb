from pathlib import Path

import aiofiles
import aiofiles.os


class PathEscapeError(ValueError):
    """Raised when a relative path resolves outside its root."""


def safe_join(root: Path, relative: str) -> Path:
    """Join relative onto root, refusing results outside root."""
    if Path(relative).is_absolute():
        raise PathEscapeError(f"absolute paths not allowed: {relative}")

    base = root.resolve()
    joined = (base / relative).resolve()
    if not joined.is_relative_to(base):
        raise PathEscapeError(f"path escapes root directory: {relative}")
    return joined


async def exists(root: Path, relative: str) -> bool:
    try:
        path = safe_join(root, relative)
    except PathEscapeError:
        return False
    return await aiofiles.os.path.exists(path)


async def first_existing(root: Path, names: tuple[str, ...]) -> str | None:
    for name in names:
        if await exists(root, name):
            return name
    return None


async def read_text(root: Path, relative: str) -> str | None:
    try:
        path = safe_join(root, relative)
        async with aiofiles.open(path, encoding="utf-8", errors="replace") as f:
            return await f.read()
    except (PathEscapeError, OSError):
        return None
