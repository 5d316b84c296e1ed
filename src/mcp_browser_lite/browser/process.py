"""Process cleanup for browsers that did not quit cleanly."""

import psutil

import logging
logger = logging.getLogger(__name__)


def kill_process_tree(pid: int) -> list[int]:
    """
    Kill a process and all of its descendants (chromedriver -> chrome -> renderers).

    Returns the PIDs that were killed. Processes that already exited or that
    we may not touch are skipped.
    """
    killed = []
    try:
        root = psutil.Process(pid)
    except psutil.NoSuchProcess:
        return killed

    try:
        children = root.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        children = []

    for p in children + [root]:
        try:
            p.kill()
            killed.append(p.pid)
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.debug(f"Could not kill process {p.pid}: {e}")

    psutil.wait_procs(children + [root], timeout=3)
    return killed


__all__ = ["kill_process_tree"]
