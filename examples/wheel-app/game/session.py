"""Session state shared by the input handlers and the renderer."""
from __future__ import annotations

import logging

from spin_wheel import (
    Option,
    OptionsLoader,
    SpinInProgressError,
    WheelEngine,
    WheelError,
)

from ui.constants import TPS
from ui.wheel import WheelView

logger = logging.getLogger(__name__)


class WheelSession:
    """Owns the engine and the UI-facing status.

    Spinning is only allowed once a load has succeeded and while no result
    is on screen.
    """

    def __init__(self, loader: OptionsLoader, seed: int | None = None) -> None:
        self.engine = WheelEngine(tps=TPS, seed=seed)
        self.loader = loader
        self.view = WheelView()
        self.status = "Loading options..."
        self.status_kind = "info"
        self.winner: Option | None = None

        self.engine.on_load(self.view.update)
        self.engine.on_redraw(self.view.update)
        self.engine.on_result(self._on_result)

    @property
    def can_spin(self) -> bool:
        return self.engine.can_spin and self.winner is None

    def load(self) -> None:
        """Load from the session's loader, reporting the outcome in the status bar."""
        try:
            options = self.engine.load(self.loader)
        except SpinInProgressError:
            self.status = "Wait for the wheel to stop before reloading"
            self.status_kind = "error"
            return
        except WheelError as exc:
            logger.error("Options load failed: %s", exc)
            self.status = f"Error: {exc}"
            self.status_kind = "error"
            return
        self.status = f"{len(options)} options loaded"
        self.status_kind = "ok"

    def request_spin(self) -> None:
        if not self.can_spin:
            return
        self.engine.spin()

    def close_result(self) -> None:
        self.winner = None

    def _on_result(self, winner: Option) -> None:
        self.winner = winner
