"""
Golden image helpers for tests.

A rendered file <name>.png is checked against <name>_golden.png next to it.
"""

import logging
from pathlib import Path
from typing import Optional

from matplotlib.testing.compare import compare_images

logger = logging.getLogger(__name__)


def files_equal(path1, path2) -> bool:
    """Byte-for-byte comparison of two files."""
    return Path(path1).read_bytes() == Path(path2).read_bytes()


def golden_path(path) -> Path:
    """Path of the golden file for path: foo.png -> foo_golden.png"""
    path = Path(path)
    return path.with_name(f"{path.stem}_golden{path.suffix}")


def compare_with_golden(path, tol: float = 0) -> Optional[str]:
    """
    Compare an image file with its golden image.

    Args:
        path: Rendered image
        tol: RMS tolerance passed to matplotlib's compare_images

    Returns:
        None if the images match, otherwise a description of the mismatch

    Raises:
        FileNotFoundError: If either image is missing
    """
    path = Path(path)
    golden = golden_path(path)
    for p in (path, golden):
        if not p.exists():
            raise FileNotFoundError(f"No such image: {p}")

    if files_equal(path, golden):
        return None

    result = compare_images(str(golden), str(path), tol)
    if result is not None:
        logger.warning(f"Image mismatch for {path}: {result}")
    return result
