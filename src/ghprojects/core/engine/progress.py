"""Progress reporting protocol for project operations.

The engine and ops emit phase lifecycle events ("Link", "Add", "Remove",
"Clone"); consumers such as the CLI's Rich spinner implement
``EditProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class EditProgress(ABC):
    """Observer interface for phase-level progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None, *, label: str | None = None) -> None:
        """*phase* is starting. *total* is ``None`` for indeterminate phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None:
        """One item within *phase* has completed."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """*phase* has finished successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """*phase* was interrupted by *error*."""
        ...  # pragma: no cover


class NullEditProgress(EditProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None, *, label: str | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
