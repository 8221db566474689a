"""Static asset replication into the output tree"""

import logging
import shutil
from pathlib import Path


logger = logging.getLogger(__name__)


def copy_assets(asset_dir: Path, dest_dir: Path) -> list[Path]:
    """Copy every file under asset_dir into dest_dir, preserving layout and always overwriting.

    Returns the destination paths. A missing asset_dir copies nothing.
    """
    if not asset_dir.is_dir():
        logger.debug("No asset directory at %s; skipping", asset_dir)
        return []
    copied = []
    for src in sorted(p for p in asset_dir.rglob('*') if p.is_file()):
        dest = dest_dir / src.relative_to(asset_dir)
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)
        copied.append(dest)
    logger.info("Copied %d asset(s) to %s", len(copied), dest_dir)
    return copied


def copy_background(asset_dir: Path, name: str, site_root: Path) -> Path | None:
    """Copy the named background asset to site_root if it exists."""
    src = asset_dir / name
    if not src.is_file():
        return None
    dest = site_root / name
    shutil.copyfile(src, dest)
    logger.info("Copied %s to %s", name, site_root)
    return dest
