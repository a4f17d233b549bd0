"""Project path resolution across Windows, WSL, and POSIX hosts."""

from __future__ import annotations

import ntpath
import os
import platform
import posixpath
import re

HOST_WSL = "wsl"
HOST_WINDOWS = "windows"
HOST_POSIX = "posix"

_WSL_MARKERS = ("microsoft", "wsl")
_DRIVE_PATH = re.compile(r"^([A-Za-z]):[\\/](.*)$", re.DOTALL)
_MOUNT_PATH = re.compile(r"^/mnt/([a-z])(?:/(.*))?$", re.DOTALL)

_GUIDANCE = {
    HOST_WSL: (
        "If you're trying to access a Windows path from WSL, use the format "
        "/mnt/c/path/to/project instead of C:\\path\\to\\project."
    ),
    HOST_WINDOWS: (
        "If you copied a WSL path, use the format C:\\path\\to\\project "
        "instead of /mnt/c/path/to/project."
    ),
    HOST_POSIX: (
        "Make sure the path exists and you have permission to access it. "
        "Windows drives mounted on this host use the format /mnt/c/path/to/project."
    ),
}


class PathNotFoundError(FileNotFoundError):
    """Raised when the project path does not resolve to an existing directory."""

    def __init__(self, path: str, guidance: str) -> None:
        self.path = path
        self.guidance = guidance
        super().__init__(f"Cannot access directory: {path}. The directory does not exist.\n\n{guidance}")

    def __str__(self) -> str:
        return self.args[0]


def detect_host(release: str | None = None, system: str | None = None) -> str:
    """Return the host path convention: ``wsl``, ``windows``, or ``posix``."""
    release = platform.release() if release is None else release
    system = platform.system() if system is None else system
    lowered = release.lower()
    if any(marker in lowered for marker in _WSL_MARKERS):
        return HOST_WSL
    if system.lower() == "windows":
        return HOST_WINDOWS
    return HOST_POSIX


def convert_path(path: str, host: str) -> str:
    """Translate ``path`` into the convention used by ``host`` and normalize it."""
    if host == HOST_WSL:
        match = _DRIVE_PATH.match(path)
        if match:
            drive, rest = match.groups()
            converted = f"/mnt/{drive.lower()}/{rest.replace(chr(92), '/')}"
            return posixpath.normpath(converted)
    elif host == HOST_WINDOWS:
        match = _MOUNT_PATH.match(path)
        if match:
            drive, rest = match.groups()
            converted = f"{drive.upper()}:\\{(rest or '').replace('/', chr(92))}"
            return ntpath.normpath(converted)
        return ntpath.normpath(os.path.expanduser(path))
    return posixpath.normpath(os.path.expanduser(path))


def resolve_project_path(
    path: str, *, release: str | None = None, system: str | None = None
) -> str:
    """Return a usable directory path for ``path`` or raise ``PathNotFoundError``."""
    host = detect_host(release, system)
    resolved = convert_path(path, host)
    if not os.path.isdir(resolved):
        raise PathNotFoundError(resolved, _GUIDANCE[host])
    return resolved


__all__ = [
    "HOST_POSIX",
    "HOST_WINDOWS",
    "HOST_WSL",
    "PathNotFoundError",
    "convert_path",
    "detect_host",
    "resolve_project_path",
]
