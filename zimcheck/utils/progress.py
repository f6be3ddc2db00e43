#!/usr/bin/env python3
"""Progress display for the article traversal."""

import sys
from typing import Optional

from tqdm import tqdm


class ProgressBar:
    """Single progress bar over archive entries.

    A disabled bar accepts every call and draws nothing, so callers never
    need to branch on whether progress was requested.
    """

    def __init__(self, enabled: bool = False, desc: str = "Checking entries"):
        self.enabled = enabled
        self.desc = desc
        self._pbar: Optional[tqdm] = None

    def reset(self, total: int, desc: Optional[str] = None):
        if not self.enabled:
            return
        if desc:
            self.desc = desc
        if self._pbar is None:
            self._pbar = tqdm(
                total=total,
                desc=self.desc,
                bar_format='{desc}: |{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]',
                file=sys.stderr,
                leave=False,
                miniters=max(1, total // 50),
                mininterval=0.5,
                ncols=100
            )
        else:
            self._pbar.reset(total=total)
            self._pbar.set_description(self.desc)

    def update(self, increment: int = 1):
        if self._pbar is not None:
            self._pbar.update(increment)

    def close(self):
        if self._pbar is not None:
            self._pbar.close()
            self._pbar = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
