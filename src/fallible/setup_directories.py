"""
Log file location for the comparison runner.

The error log sits next to the working directory rather than inside it,
so repeated runs from a build directory share one ``log.txt``.
"""

from pathlib import Path


def get_log_path(log_dir=None, filename="log.txt"):
    """
    Resolve the error log path, creating its directory if needed.

    Parameters
    ----------
    log_dir : str or Path, optional
        Directory for the log. If None, the parent of the current working
        directory.
    filename : str, optional
        Log file name.

    Returns
    -------
    Path
        Absolute path of the log file (not created).

    Example
    -------
    >>> get_log_path()   # run from /work/build
    PosixPath('/work/log.txt')
    """
    if log_dir is None:
        log_dir = Path.cwd().parent

    log_dir = Path(log_dir).expanduser().resolve()
    log_dir.mkdir(parents=True, exist_ok=True)

    return log_dir / filename
