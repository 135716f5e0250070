from dataclasses import dataclass, field, replace
from typing import List, Tuple

from glyph_mask.algorithms import MaskingAlgorithm, get_algorithm
from glyph_mask.driver import AnimationDriver
from glyph_mask.grid import MaskingGrid
from glyph_mask.palette import MASKING_SYMBOLS
from glyph_mask.scheduler import PollingScheduler
from glyph_mask.types import Layer


@dataclass
class FakeClock:
    """Manually advanced millisecond clock."""

    now_ms: float = 1_000_000.0

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@dataclass
class UpdateLog:
    calls: List[Tuple[str, float]] = field(default_factory=list)


def spy_algorithm(name: str) -> Tuple[MaskingAlgorithm, UpdateLog]:
    """Wrap a registered algorithm so update calls are recorded."""
    base = get_algorithm(name)
    log = UpdateLog()

    def update(text: str, current_grid: MaskingGrid, now_ms: float = 0.0) -> Layer:
        log.calls.append((text, now_ms))
        return base.update_dynamic_masking(text, current_grid, now_ms)

    return replace(base, update_dynamic_masking=update), log


def make_driver(
    algorithm: str = "Random",
) -> Tuple[AnimationDriver, PollingScheduler, FakeClock]:
    clock = FakeClock()
    scheduler = PollingScheduler(clock)
    driver = AnimationDriver(scheduler, clock=clock, algorithm=algorithm)
    return driver, scheduler, clock


def run_ticks(scheduler: PollingScheduler, clock: FakeClock, n: int, step_ms: float = 20) -> int:
    """Advance the clock ``n`` times by ``step_ms`` polling after each step."""
    fired = 0
    for _ in range(n):
        clock.advance(step_ms)
        fired += scheduler.poll()
    return fired


def all_symbols(layer: Layer) -> List[str]:
    return [symbol for row in layer for symbol in row]


def in_palette(layer: Layer) -> bool:
    return all(symbol in MASKING_SYMBOLS for symbol in all_symbols(layer))
