from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display service with tqdm (TTY only).

- Single tqdm instance, disabled in non-TTY environments
- TTY detection using sys.stdout.isatty()

The progress display shows converted data rows against the total row count.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Check if TTY output is enabled.
    
    Returns:
        True if stdout is a TTY and progress should be displayed, False otherwise
    """
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker using tqdm for row conversion.
    
    In non-TTY environments (CI, redirected output), the progress bar is
    disabled to avoid ANSI control sequence spam in logs.
    """
    
    def __init__(self, total_rows: int, *, description: str = "Converting rows") -> None:
        """Initialize progress tracker.
        
        Args:
            total_rows: Total number of data rows to convert
            description: Description for the progress bar
        """
        self.total_rows = total_rows
        self.description = description
        self.current_row = 0
        
        # Create tqdm instance only if TTY is enabled
        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                disable=False,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None
    
    def advance(self, n: int = 1) -> None:
        """Mark ``n`` more rows as converted."""
        self.current_row += n
        if self.enabled and self.pbar is not None:
            self.pbar.update(n)
    
    def set_postfix(self, **kwargs: Any) -> None:
        """Set postfix information (stats) on the progress bar."""
        if self.enabled and self.pbar is not None:
            self.pbar.set_postfix(**kwargs)
    
    def close(self) -> None:
        """Close the progress bar."""
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None
    
    def __enter__(self) -> ProgressTracker:
        return self
    
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
