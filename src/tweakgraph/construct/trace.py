"""Captured call stacks for diagnosing where a node or value came from."""
from __future__ import annotations

import traceback
from dataclasses import dataclass


@dataclass(frozen=True)
class CreationTrace:
    """A snapshot of the caller's stack, innermost frame last.

    Parameters
    ----------
    frames:
        ``"file:line in function"`` strings, outermost first.
    """

    frames: tuple[str, ...]

    @classmethod
    def capture(cls, skip: int = 1) -> "CreationTrace":
        """Capture the current stack, dropping ``skip`` innermost frames
        in addition to this method's own frame.
        """
        stack = traceback.extract_stack()[: -(skip + 1)]
        return cls(
            frames=tuple(f"{f.filename}:{f.lineno} in {f.name}" for f in stack)
        )

    @property
    def origin(self) -> str | None:
        """Return the innermost captured frame, if any."""
        return self.frames[-1] if self.frames else None

    def __str__(self) -> str:
        return "\n".join(self.frames)
