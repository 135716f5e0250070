"""Animation driver: owns the masking grid and its refresh timer.

State machine (see :class:`glyph_mask.types.DriverPhase`):

1. ``IDLE`` -> ``ACTIVE`` when the display text becomes non-empty: generate
   both layers with the selected algorithm and arm a recurring timer.
2. ``ACTIVE`` -> ``ACTIVE`` when the text or algorithm changes: cancel the
   timer, regenerate *both* layers from scratch and arm a new timer. The
   static layer is intentionally not carried over, even for append-only edits.
3. ``ACTIVE`` -> ``IDLE`` when the text becomes empty: cancel the timer and
   reset to an empty grid.
4. Timer tick: replace the dynamic layer only.
5. Any phase -> ``TERMINATED`` on :meth:`AnimationDriver.shutdown`.

Every transition cancels the previous timer synchronously before computing
new state, so at most one timer is armed and a tick never observes stale text
or a stale algorithm.
"""

import logging
from typing import Optional, Union

from glyph_mask.algorithms import DEFAULT_ALGORITHM, MaskingAlgorithm, get_algorithm
from glyph_mask.config import DisplayConfig
from glyph_mask.grid import EMPTY_GRID, MaskingGrid
from glyph_mask.scheduler import Scheduler, wall_clock_ms
from glyph_mask.types import CancelFn, Clock, DriverPhase


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 20

AlgorithmRef = Union[MaskingAlgorithm, str]


def _resolve_algorithm(algorithm: AlgorithmRef) -> MaskingAlgorithm:
    if isinstance(algorithm, MaskingAlgorithm):
        return algorithm
    return get_algorithm(algorithm)


class AnimationDriver:
    """Single writer of the display session's :class:`MaskingGrid`.

    Readers (the renderer) take :attr:`grid`, an immutable snapshot that is
    always dimensionally consistent.

    Args:
        scheduler: Host timer facility; see :mod:`glyph_mask.scheduler`.
        clock: Wall-clock milliseconds, passed to ``update_dynamic_masking``.
        algorithm: Initial algorithm (instance or registered name).
    """

    def __init__(
        self,
        scheduler: Scheduler,
        clock: Clock = wall_clock_ms,
        algorithm: AlgorithmRef = DEFAULT_ALGORITHM,
    ):
        self._scheduler = scheduler
        self._clock = clock
        self._algorithm = _resolve_algorithm(algorithm)
        self._text = ""
        self._grid = EMPTY_GRID
        self._cancel_timer: Optional[CancelFn] = None
        self._phase = DriverPhase.IDLE

    @property
    def phase(self) -> DriverPhase:
        return self._phase

    @property
    def text(self) -> str:
        return self._text

    @property
    def algorithm(self) -> MaskingAlgorithm:
        return self._algorithm

    @property
    def grid(self) -> MaskingGrid:
        """Current grid snapshot."""
        return self._grid

    @property
    def is_running(self) -> bool:
        """True while a refresh timer is armed."""
        return self._cancel_timer is not None

    def set_text(self, text: str) -> None:
        """Change the display text; no-op if unchanged."""
        self._reconfigure(text, self._algorithm)

    def set_algorithm(self, algorithm: AlgorithmRef) -> None:
        """Change the algorithm; no-op if unchanged."""
        self._reconfigure(self._text, _resolve_algorithm(algorithm))

    def apply(self, config: DisplayConfig) -> None:
        """Apply text and algorithm together as a single transition."""
        self._reconfigure(config.display_text, get_algorithm(config.algorithm_name))

    def shutdown(self) -> None:
        """Cancel any running timer and release the grid. Idempotent."""
        if self._phase == DriverPhase.TERMINATED:
            return
        self._stop_timer()
        self._grid = EMPTY_GRID
        self._phase = DriverPhase.TERMINATED
        logger.debug("shutdown")

    def __enter__(self) -> "AnimationDriver":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _reconfigure(self, text: str, algorithm: MaskingAlgorithm) -> None:
        if self._phase == DriverPhase.TERMINATED:
            raise RuntimeError("AnimationDriver has been shut down")
        if text == self._text and algorithm == self._algorithm:
            return

        was_active = self._phase == DriverPhase.ACTIVE
        self._stop_timer()

        if not text:
            self._text = text
            self._algorithm = algorithm
            self._grid = EMPTY_GRID
            self._phase = DriverPhase.IDLE
            logger.debug("stop: display text cleared")
            return

        try:
            grid = algorithm.generate_masking(text)
            cancel_timer = self._scheduler.call_repeatedly(TICK_INTERVAL_MS, self._tick)
        except Exception:
            # The previous timer is already gone; fall back to a clean IDLE.
            self._text = ""
            self._algorithm = algorithm
            self._grid = EMPTY_GRID
            self._phase = DriverPhase.IDLE
            raise

        self._text = text
        self._algorithm = algorithm
        self._grid = grid
        self._cancel_timer = cancel_timer
        self._phase = DriverPhase.ACTIVE
        logger.debug(
            "%s: algorithm=%s text=%r shape=%s",
            "regenerate" if was_active else "start",
            algorithm.name,
            text,
            self._grid.shape,
        )

    def _stop_timer(self) -> None:
        if self._cancel_timer is not None:
            self._cancel_timer()
            self._cancel_timer = None

    def _tick(self) -> None:
        if self._phase != DriverPhase.ACTIVE or not self._text:
            return
        dynamic = self._algorithm.update_dynamic_masking(
            self._text, self._grid, self._clock()
        )
        self._grid = self._grid.with_dynamic(dynamic)
