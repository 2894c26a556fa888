import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSystemTemplateLocator:
    """
    Finds template files under an ordered list of base directories.

    For each candidate, every base directory is checked before moving to the
    next candidate, so a more specific template in a parent directory beats a
    less specific one in a child directory. A candidate that resolves outside
    its base directory never exists.
    """

    def __init__(self, base_dirs: Sequence[str | Path]):
        self.base_dirs = [Path(d).resolve() for d in base_dirs]

    def _safe_path(self, base: Path, path: str) -> Path | None:
        # Prevent traversal
        target = (base / path).resolve()
        if not target.is_relative_to(base):
            logger.debug("Ignoring template candidate outside %s: %s", base, path)
            return None
        return target

    def locate(self, candidates: Sequence[str]) -> str | None:
        """Return the absolute path of the first existing candidate."""
        for candidate in candidates:
            if not candidate:
                continue
            for base in self.base_dirs:
                target = self._safe_path(base, candidate)
                if target is not None and target.is_file():
                    return str(target)
        return None
