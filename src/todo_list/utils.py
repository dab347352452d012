"""Utility helpers."""
from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Union


def atomic_write(path: Union[str, Path], data: str) -> None:
    """Write data to path atomically.

    The temporary file is created next to ``path`` so the final rename never
    crosses a filesystem, and it is removed again if anything fails.
    """
    dir_path = os.path.dirname(path) or "."
    tf = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", delete=False, dir=dir_path, suffix=".tmp"
    )
    try:
        with tf:
            tf.write(data)
        if os.path.exists(path):
            # keep the permissions of the file being replaced
            os.chmod(tf.name, stat.S_IMODE(os.stat(path).st_mode))
        os.replace(tf.name, path)
    except BaseException:
        os.unlink(tf.name)
        raise
