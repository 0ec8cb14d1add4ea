import os
import stat
import tempfile
from contextlib import contextmanager
from pathlib import Path


def is_buffer(obj, mode):
    return ("r" in mode and hasattr(obj, "read")) or (
        "w" in mode and hasattr(obj, "write")
    )


def _target_mode(path):
    # same permissions a plain open() would leave behind
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@contextmanager
def open_file(path_or_buf, mode="wb"):
    """Yields a writable file. Paths are written to a temporary sibling which only
    replaces the target once the block completes, so a failed export never leaves
    a truncated file behind. Buffers are passed through and left open.
    """
    if is_buffer(path_or_buf, mode):
        yield path_or_buf
        return

    path = Path(path_or_buf)
    fd, tmp = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent.as_posix()
    )
    try:
        with os.fdopen(fd, mode) as f:
            yield f
        os.chmod(tmp, _target_mode(path))
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
