from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence


def is_windows() -> bool:
    return sys.platform == "win32"


def run_foreground(argv: Sequence[str]) -> int:
    """Run argv without a shell and block until it exits.

    Returns the exit status. Failing to start the process raises OSError.
    """
    completed = subprocess.run(list(argv), check=False)
    return completed.returncode
