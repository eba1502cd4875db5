from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List

from . import config as CFG

log = logging.getLogger(__name__)


class SourceUnavailable(OSError):
    """A corpus path does not exist or cannot be opened."""


def _iter_corpus_files(root: str) -> Iterator[str]:
    """Yield matching files under a directory, recursively, in a stable order."""
    exts = tuple(e.lower() for e in CFG.INCLUDE_EXTS)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in CFG.EXCLUDE_DIRS)
        for fn in sorted(filenames):
            if fn.lower().endswith(exts):
                yield os.path.join(dirpath, fn)


def resolve_paths(paths: Iterable[str]) -> List[str]:
    """
    Expand corpus arguments into a list of files.
    Directories are scanned for INCLUDE_EXTS; a missing path raises SourceUnavailable.
    """
    files: List[str] = []
    for p in paths:
        p = os.path.abspath(p)
        if os.path.isdir(p):
            files.extend(_iter_corpus_files(p))
        elif os.path.isfile(p):
            files.append(p)
        else:
            raise SourceUnavailable(f"{p} is not a valid file")
    return files


def _read_lines(path: str) -> Iterator[str]:
    try:
        f = open(path, "r", encoding=CFG.CORPUS_ENCODING, errors="ignore")
    except OSError as e:
        log.warning("Skipping unreadable file %s: %s", path, e)
        return
    with f:
        try:
            for ln in f:
                yield ln.rstrip("\r\n")
        except OSError as e:
            # keep what was read so far, move on to the next file
            log.warning("Error in I/O while reading %s: %s", path, e)


def iter_corpus_lines(paths: Iterable[str], *, verbose: bool | None = None) -> Iterator[str]:
    """
    Stream raw corpus lines from files and/or directories.
    All paths are resolved before the first line is yielded, so SourceUnavailable
    always surfaces before anything has been read.
    """
    if verbose is None:
        verbose = CFG.VERBOSE
    files = resolve_paths(paths)
    n_lines = 0
    for path in files:
        log.info("Parsing file %s", path)
        for line in _read_lines(path):
            yield line
            n_lines += 1
            if verbose and n_lines % CFG.PROGRESS_EVERY_LINES == 0:
                print(f"[read] lines={n_lines:,}")

    if verbose:
        print(f"[done] files={len(files):,} lines={n_lines:,}")
