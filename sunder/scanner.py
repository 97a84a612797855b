from __future__ import annotations
import os
import stat as statmod
import time
from typing import Callable, List, Optional

from .categories import classify_folder
from .log import get_logger
from .models import CategorizedFolder, ChildFolder, ScanProgress, ScanResult

SCAN_PROGRESS_EVENT = "scan-progress"
UNKNOWN_FOLDER_NAME = "(unknown)"
PROGRESS_DONE_PERCENT = 100.0

EmitCb = Callable[[str, ScanProgress], None]  # (event name, payload)
CancelCb = Callable[[], bool]

log = get_logger("scanner")

class ScanError(Exception):
    """A scan could not produce a result."""

class ScanCancelled(ScanError):
    pass

def dir_size(path: str, follow_symlinks: bool = False) -> int:
    """Sum the sizes of all regular files below ``path``.

    Anything that cannot be listed or stat'ed counts as 0. A symlinked
    ``path`` is sized through its target; symlinks below it are not followed
    unless asked for, and then without any loop protection.
    """
    total = 0
    stack = [path]
    while stack:
        dir_path = stack.pop()
        try:
            with os.scandir(dir_path) as it:
                for entry in it:
                    try:
                        if entry.is_symlink() and not follow_symlinks:
                            continue
                        st = entry.stat(follow_symlinks=follow_symlinks)
                    except OSError as e:
                        log.debug("skipping %s: %s", entry.path, e)
                        continue

                    mode = st.st_mode
                    if statmod.S_ISDIR(mode):
                        stack.append(entry.path)
                    elif statmod.S_ISREG(mode):
                        total += st.st_size
        except OSError as e:
            log.debug("cannot list %s: %s", dir_path, e)
    return total

def folder_name(raw: str) -> str:
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        # undecodable bytes come through as lone surrogates
        return UNKNOWN_FOLDER_NAME
    return raw

def list_child_folders(root: str) -> List[ChildFolder]:
    """Immediate subdirectories of ``root`` in listing order.

    Symlinks to directories count as folders; their targets get sized.
    Raises ScanError when ``root`` itself cannot be listed.
    """
    children: List[ChildFolder] = []
    try:
        with os.scandir(root) as it:
            for entry in it:
                try:
                    if not entry.is_dir():
                        continue
                except OSError as e:
                    log.debug("skipping %s: %s", entry.path, e)
                    continue
                children.append(ChildFolder(name=folder_name(entry.name), path=entry.path))
    except OSError as e:
        raise ScanError(f"Could not list {root}: {e.strerror or e}") from e
    return children

def _emit_safe(emit: Optional[EmitCb], payload: ScanProgress):
    if not emit:
        return
    try:
        emit(SCAN_PROGRESS_EVENT, payload)
    except Exception as e:
        log.debug("progress event dropped: %s", e)

def run_smart_scan(root: str,
                   emit: Optional[EmitCb] = None,
                   cancel_flag: Optional[CancelCb] = None,
                   follow_symlinks: bool = False) -> ScanResult:
    t0 = time.time()
    children = list_child_folders(root)
    total_folders = len(children)
    log.info("scanning %d folders in %s", total_folders, root)

    folders: List[CategorizedFolder] = []
    total_size_bytes = 0
    for i, child in enumerate(children):
        if cancel_flag and cancel_flag():
            raise ScanCancelled(f"Scan cancelled after {i} of {total_folders} folders")

        _emit_safe(emit, ScanProgress(
            scanned_folders=i,
            total_folders=total_folders,
            percent=i / total_folders * 100.0,
            current_folder=child.name,
        ))

        size_bytes = dir_size(child.path, follow_symlinks=follow_symlinks)
        total_size_bytes += size_bytes
        folders.append(CategorizedFolder(
            name=child.name,
            path=child.path,
            size_bytes=size_bytes,
            category=classify_folder(child.name),
        ))

    _emit_safe(emit, ScanProgress(
        scanned_folders=total_folders,
        total_folders=total_folders,
        percent=PROGRESS_DONE_PERCENT,
        current_folder="",
    ))

    # stable: equal sizes keep listing order
    folders.sort(key=lambda f: f.size_bytes, reverse=True)
    elapsed = time.time() - t0
    log.info("scanned %s: %d bytes in %.2fs", root, total_size_bytes, elapsed)
    return ScanResult(
        total_size_bytes=total_size_bytes,
        folders=folders,
        root=root,
        elapsed_sec=elapsed,
    )

def get_home_dir() -> str:
    home = os.path.expanduser("~")
    if not home or home == "~":
        raise ScanError("Could not resolve home directory")
    return os.path.abspath(home)

def smart_scan(emit: Optional[EmitCb] = None,
               cancel_flag: Optional[CancelCb] = None) -> ScanResult:
    return run_smart_scan(get_home_dir(), emit=emit, cancel_flag=cancel_flag)
