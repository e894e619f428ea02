"""StepRunner - Paced, interactive driver for a generation run.

Wraps a model and feeds it randomness from a clock-seeded generator so a
front end can single-step, auto-step on a timer, pause, change speed, and
drop in manual placements between steps. The runner only paces the
worklist; it never reorders it.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Callable, Iterator

from wavetile.core.constants import DEFAULT_STEP_INTERVAL
from wavetile.core.types import Position
from .model import (
    GenerationStatus,
    Model,
    NeedsRandom,
    advance,
    manual_place,
    resume_with_random,
    status,
)
from .randomness import time_seeded_pairs
from .selector import RandomPair

logger = logging.getLogger(__name__)


class StepRunner:
    """Drives a Model one step at a time.

    Usage:
        runner = StepRunner(init(definition))
        runner.on_step(redraw)

        runner.step_once()           # Single step
        await runner.run()           # Auto-step until finished or paused
        runner.pause()               # Stop auto-stepping after the current step
        runner.place((3, 4), 2)      # Manual placement, applied next
    """

    def __init__(
        self,
        model: Model,
        interval: float = DEFAULT_STEP_INTERVAL,
        rng: random.Random | None = None,
    ):
        """Initialize StepRunner.

        Args:
            model: Model to drive (usually fresh from init())
            interval: Seconds to wait between auto-steps
            rng: Source of random pairs (default: clock-seeded)
        """
        self._model = model
        self._interval = interval
        self._pairs: Iterator[RandomPair] = time_seeded_pairs(rng)
        self._running = False
        self._paused = False

        # Called with the new model after every step
        self._step_callbacks: list[Callable[[Model], None]] = []

    @property
    def model(self) -> Model:
        return self._model

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        """Check if auto-stepping is in progress."""
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_finished(self) -> bool:
        """True once further steps cannot change the grid."""
        return not self._model.worklist and status(self._model) is not GenerationStatus.RUNNING

    def on_step(self, callback: Callable[[Model], None]) -> None:
        """Register a callback to run after each step."""
        self._step_callbacks.append(callback)

    def set_interval(self, seconds: float) -> None:
        """Change the auto-step pace. Takes effect on the next wait."""
        if seconds < 0:
            raise ValueError(f"interval must be non-negative, got {seconds}")
        self._interval = seconds

    def place(self, position: Position | tuple[int, int], tile_index: int) -> None:
        """Queue a manual placement ahead of pending work."""
        self._model = manual_place(self._model, Position(*position), tile_index)
        logger.debug(f"Manual placement queued at {tuple(position)} -> {tile_index}")

    def step_once(self) -> Model:
        """Perform one step, supplying a random pair if the step asks for one."""
        result = advance(self._model)
        if isinstance(result, NeedsRandom):
            self._model = resume_with_random(self._model, result.request, next(self._pairs))
        else:
            self._model = result.model

        for callback in self._step_callbacks:
            callback(self._model)
        return self._model

    def pause(self) -> None:
        """Pause auto-stepping. Takes effect after the current step."""
        self._paused = True

    async def run(self, max_steps: int | None = None) -> int:
        """Auto-step until finished, paused, or max_steps is reached.

        Args:
            max_steps: Step limit for this call, or None for no limit

        Returns:
            Number of steps taken
        """
        if self._running:
            logger.warning("StepRunner already running")
            return 0

        self._running = True
        self._paused = False
        steps_taken = 0

        try:
            while not self._paused and not self.is_finished:
                if max_steps is not None and steps_taken >= max_steps:
                    break
                self.step_once()
                steps_taken += 1
                await asyncio.sleep(self._interval)
        finally:
            self._running = False

        logger.info(
            f"StepRunner stopped after {steps_taken} steps ({status(self._model).name.lower()})"
        )
        return steps_taken
