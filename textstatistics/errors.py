"""Domain exceptions for CLI and configuration diagnostics.

The scoring core is total over all strings and never raises; these errors are
only used where files, configuration and command options are involved.
"""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
