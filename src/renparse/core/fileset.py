import logging
from pathlib import Path

from .config import ProjectConfig

logger = logging.getLogger(__name__)


def discover_script_files(root: Path, config: ProjectConfig) -> list[Path]:
    files: list[Path] = []
    for rel in config.paths:
        base = (root / rel).resolve()
        if not base.exists():
            continue
        if base.is_file():
            files.append(base)
            continue
        for ext in config.extensions:
            for p in base.rglob(f"*{ext}"):
                files.append(p)
    logger.debug("Discovered %d script files under %s", len(files), root)
    return sorted(set(files))
