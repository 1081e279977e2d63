"""State machine for timed transitions between two themes."""

from dataclasses import dataclass
import logging
from typing import Callable

from PySide6.QtCore import QEasingCurve

from codefade.code_theme import CodeTheme


EasingFunction = Callable[[float], float]


def linear(fraction: float) -> float:
    """Identity timing curve."""
    return fraction


def easing_curve(name: str) -> EasingFunction:
    """
    Get a timing curve by its Qt easing curve name.

    Args:
        name: A QEasingCurve.Type name such as "InOutCubic"

    Returns:
        A function mapping elapsed fraction to progress

    Raises:
        KeyError: If Qt has no easing curve with that name
    """
    curve = QEasingCurve(QEasingCurve.Type[name])
    return curve.valueForProgress


@dataclass(frozen=True)
class IdleState:
    """No transition is running."""


@dataclass(frozen=True)
class TransitioningState:
    """
    A transition is running.

    Attributes:
        old_theme: The theme being transitioned away from
        progress: Eased progress, 0 at the start and 1 at the end
    """
    old_theme: CodeTheme
    progress: float


TransitionState = IdleState | TransitioningState


class StyleTransition:
    """
    Tracks a theme transition from start to finish.

    The transition is advanced by an external scheduler calling tick() once per frame.
    Starting a new transition while one is running replaces it; the old theme of the
    interrupted transition is discarded.
    """

    def __init__(self) -> None:
        self._state: TransitionState = IdleState()
        self._duration_ms = 0.0
        self._elapsed_ms = 0.0
        self._easing: EasingFunction = linear
        self._logger = logging.getLogger("StyleTransition")

    @property
    def state(self) -> TransitionState:
        """The current state."""
        return self._state

    @property
    def is_active(self) -> bool:
        """True while a transition is running."""
        return isinstance(self._state, TransitioningState)

    @property
    def old_theme(self) -> CodeTheme | None:
        """The theme being transitioned away from, or None when idle."""
        if isinstance(self._state, TransitioningState):
            return self._state.old_theme

        return None

    @property
    def progress(self) -> float | None:
        """Eased progress of the running transition, or None when idle."""
        if isinstance(self._state, TransitioningState):
            return self._state.progress

        return None

    def start(self, old_theme: CodeTheme, duration_ms: float, easing: EasingFunction = linear) -> None:
        """
        Start a transition away from old_theme.

        Args:
            old_theme: The theme that was active before the change
            duration_ms: Length of the transition; zero or less completes immediately
            easing: Maps elapsed fraction in [0, 1] to progress
        """
        if self.is_active:
            self._logger.debug("Replacing running transition from '%s'", self.old_theme.name if self.old_theme else "")

        if duration_ms <= 0:
            self._state = IdleState()
            return

        self._duration_ms = float(duration_ms)
        self._elapsed_ms = 0.0
        self._easing = easing
        self._state = TransitioningState(old_theme=old_theme, progress=0.0)

    def tick(self, delta_ms: float) -> bool:
        """
        Advance the transition.

        Args:
            delta_ms: Time since the previous tick

        Returns:
            True if the transition is still running after this tick
        """
        if not isinstance(self._state, TransitioningState):
            return False

        self._elapsed_ms += delta_ms
        fraction = min(1.0, self._elapsed_ms / self._duration_ms)
        if fraction >= 1.0:
            self._state = IdleState()
            return False

        self._state = TransitioningState(old_theme=self._state.old_theme, progress=self._easing(fraction))
        return True

    def stop(self) -> None:
        """Abandon any running transition."""
        self._state = IdleState()
