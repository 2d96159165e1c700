"""Copy a template tree and clean an existing destination."""
import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Set

from modprep.core.layout import BUILD_OUTPUT_DIRS, IDE_CACHE_DIR, VCS_DIR
from modprep.core.logger import get_logger

logger = get_logger(__name__)


def running_executable() -> Optional[Path]:
    """Path of the program currently running, if it is a file on disk."""
    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0 or not os.path.isfile(argv0):
        return None
    return Path(argv0).resolve()


def _path_key(path) -> str:
    return os.path.normcase(os.path.realpath(path))


def excluded_dir_names(include_git: bool) -> List[str]:
    """Directory names skipped while copying, in display order."""
    names = [] if include_git else [VCS_DIR]
    names.append(IDE_CACHE_DIR)
    names.extend(BUILD_OUTPUT_DIRS)
    return names


def make_ignore(include_git: bool, excluded_paths: Iterable[Path] = ()):
    """Build a ``shutil.copytree`` ignore callback.

    Directory names are compared case-insensitively at every depth.
    ``excluded_paths`` are specific files, matched by their resolved path.
    """
    dir_names = {name.lower() for name in excluded_dir_names(include_git)}
    file_keys = {_path_key(path) for path in excluded_paths if path}

    def ignore(directory: str, names: List[str]) -> Set[str]:
        skipped = set()
        for name in names:
            candidate = os.path.join(directory, name)
            if name.lower() in dir_names and os.path.isdir(candidate):
                skipped.add(name)
            elif file_keys and _path_key(candidate) in file_keys:
                skipped.add(name)
        if skipped:
            logger.debug(f"Skipping {sorted(skipped)} in {directory}")
        return skipped

    return ignore


def copy_template(
    source: Path,
    destination: Path,
    include_git: bool = False,
    excluded_paths: Optional[Iterable[Path]] = None,
) -> Path:
    """Recursively copy ``source`` into ``destination``.

    Existing files are overwritten. The running executable is always left
    out, along with VCS, IDE cache and build output directories.
    """
    if excluded_paths is None:
        excluded_paths = [running_executable()]
    shutil.copytree(
        source,
        destination,
        ignore=make_ignore(include_git, excluded_paths),
        dirs_exist_ok=True,
    )
    return destination


def _make_writable(path: str) -> None:
    # chmod follows links; never touch what a link points at
    if os.path.islink(path):
        return
    try:
        os.chmod(path, stat.S_IWRITE | stat.S_IREAD | (stat.S_IEXEC if os.path.isdir(path) else 0))
    except OSError:
        pass


def force_remove(path: Path) -> bool:
    """Delete a file or directory tree, clearing read-only bits first.

    Returns:
        True if the entry is gone afterwards. Failures are not raised.
    """
    try:
        if path.is_dir() and not path.is_symlink():
            for current, dirs, files in os.walk(path):
                _make_writable(current)
                for name in dirs + files:
                    _make_writable(os.path.join(current, name))
            shutil.rmtree(path)
        else:
            _make_writable(str(path))
            path.unlink()
    except OSError as e:
        logger.debug(f"Could not remove {path}: {e}")
        return False
    return True


def clear_directory(directory: Path) -> List[Path]:
    """Best-effort removal of every immediate child of ``directory``.

    Returns:
        Entries that could not be removed
    """
    leftovers = []
    for child in sorted(directory.iterdir()):
        if not force_remove(child):
            leftovers.append(child)
    return leftovers
