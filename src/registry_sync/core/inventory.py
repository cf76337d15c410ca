"""Local inventory scanning.

Component names are inferred from file names in a few well-known directories.
No file contents are read.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

THEME_SENTINEL = "theme"
INDEX_NAME = "index"


@dataclass(frozen=True)
class ScanDirectory:
    """A directory to scan and the file extensions recognised in it.

    Extensions are tried in order; the first one a file name ends with is stripped.
    """

    path: Path
    extensions: tuple[str, ...]


DEFAULT_SCAN_DIRECTORIES = (
    ScanDirectory(Path("src/components"), (".tsx", ".json")),
    ScanDirectory(Path("src/icons"), (".tsx",)),
    ScanDirectory(Path("src/hooks"), (".ts", ".tsx")),
)
DEFAULT_STYLESHEET = Path("src/globals.css")


def _strip_extension(file_name: str, extensions: tuple[str, ...]) -> str | None:
    for extension in extensions:
        if file_name.endswith(extension):
            return file_name[: -len(extension)]
    return None


def scan_local_components(
    project_root: Path,
    directories: tuple[ScanDirectory, ...] = DEFAULT_SCAN_DIRECTORIES,
    stylesheet: Path = DEFAULT_STYLESHEET,
) -> frozenset[str]:
    """Infer the names of locally installed components.

    Args:
        project_root: Directory relative scan paths are resolved against
        directories: Directories to scan, each with its recognised extensions
        stylesheet: Global stylesheet whose presence adds the ``theme`` name

    Returns:
        Set of component names. Absent or unreadable directories contribute
        nothing.
    """
    names: set[str] = set()
    for directory in directories:
        root = project_root / directory.path
        if not root.is_dir():
            logger.debug("Skipping missing scan directory %s", root)
            continue
        try:
            entries = sorted(root.iterdir())
        except OSError as e:
            logger.debug("Skipping unreadable scan directory %s: %s", root, e)
            continue
        for entry in entries:
            if not entry.is_file():
                continue
            name = _strip_extension(entry.name, directory.extensions)
            if name is None or name == INDEX_NAME:
                continue
            names.add(name)

    if (project_root / stylesheet).is_file():
        names.add(THEME_SENTINEL)

    logger.debug("Found %d local components under %s", len(names), project_root)
    return frozenset(names)
