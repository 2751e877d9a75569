"""Time-stepped reactor simulation: feeding, activation, energy withdrawal."""

from __future__ import annotations

import enum
import random
import time
from typing import Callable

from .atoms import Reactor, Statistics, random_atomic_number
from .config import Config

_BANNER = "\n\n!-!-!-!-\t{title}\t!-!-!-!-!"
_SHUTDOWN = "Termino tutti i programmi"


class Outcome(enum.Enum):
    """How a simulation ended."""

    TIMEOUT = "TIMEOUT"
    MELTDOWN = "MELTDOWN"
    EXPLODE = "EXPLODE"
    BLACKOUT = "BLACKOUT"

    @property
    def exit_code(self) -> int:
        """Process exit status for this outcome."""
        return 0 if self in (Outcome.TIMEOUT, Outcome.MELTDOWN) else 1

    def describe(self) -> str:
        """Return the termination banner for this outcome."""
        lines = [_BANNER.format(title=self.value)]
        if self is Outcome.EXPLODE:
            lines.append(
                "Explode: energia libera maggiore rispetto a soglia indicata "
                "in ENERGY_EXPLODE_TRESHOLD."
            )
        elif self is Outcome.BLACKOUT:
            lines.append(
                "Blackout: prelievo energia maggiore rispetto a quella disponibile."
            )
        lines.append(_SHUTDOWN)
        return "\n".join(lines)


class Simulation:
    """A reactor advanced one second per :meth:`tick` until an outcome is reached."""

    def __init__(
        self,
        config: Config,
        rng: random.Random | None = None,
        report: Callable[[str], None] | None = None,
        interval: float = 0.0,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.stats = Statistics()
        self.reactor = Reactor(config, self.stats)
        self.report = report
        self.interval = interval
        self.elapsed = 0
        self.outcome: Outcome | None = None
        self._spawn(config.initial_atoms)

    def _spawn(self, count: int) -> list[int]:
        created = []
        try:
            for _ in range(count):
                number = random_atomic_number(self.config, self.rng)
                created.append(self.reactor.register(None, number))
        except OverflowError:
            self.outcome = Outcome.MELTDOWN
        return created

    def feed(self) -> list[int]:
        """Add the configured number of new atoms; returns their ids."""
        return self._spawn(self.config.new_atoms)

    def activate(self) -> int | None:
        """Pick an atom and split it; returns the new atom's id, if any.

        The first atom in the table is never chosen, so nothing happens
        while fewer than two atoms are live.
        """
        ids = self.reactor.atom_ids()
        if len(ids) < 2:
            return None
        target = ids[self.rng.randrange(1, len(ids))]
        self.stats.activations += 1
        self.stats.activations_rel += 1
        try:
            return self.reactor.split(target, self.rng)
        except OverflowError:
            self.outcome = Outcome.MELTDOWN
            return None

    def withdraw_energy(self) -> int:
        """Start a new period and consume between 1 and 100 units of energy."""
        self.stats.reset_relative()
        amount = self.rng.randint(1, 100)
        self.stats.energy_consumed += amount
        self.stats.energy_rel_con = amount
        return amount

    def daily_report(self) -> str:
        """Return the periodic statistics listing."""
        s = self.stats
        lines = [
            _BANNER.format(title="PRINT DAILY"),
            f"1. Attivazioni totali: {s.activations}, relative: {s.activations_rel}",
            f"2. Scissioni totali: {s.splits}, relative: {s.splits_rel}",
            f"3. Energia prodotta totale: {s.energy_produced:f}, "
            f"relativa: {s.energy_rel_prod:f}",
            f"4. Energia consumata totale: {s.energy_consumed:f}, "
            f"relativa: {s.energy_rel_con:f}",
            f"5. Scorie: {s.waste}",
            "",
        ]
        return "\n".join(lines)

    def check_energy(self) -> Outcome | None:
        """Return EXPLODE or BLACKOUT if the free energy left its bounds."""
        free = int(self.stats.energy_produced) - int(self.stats.energy_consumed)
        if free > self.config.explode_threshold:
            return Outcome.EXPLODE
        if free < 0:
            return Outcome.BLACKOUT
        return None

    def tick(self) -> Outcome | None:
        """Advance one second; returns the outcome once the simulation ends."""
        if self.outcome is not None:
            return self.outcome
        self.elapsed += 1
        step = self.config.step
        if step > 0 and self.elapsed % step == 0:
            self.feed()
            if self.outcome is not None:
                return self.outcome
        outcome = self.check_energy()
        if outcome is not None:
            self.outcome = outcome
            return outcome
        self.reactor.clean()
        if self.report is not None:
            self.report(self.daily_report())
        self.activate()
        if self.outcome is not None:
            return self.outcome
        self.withdraw_energy()
        duration = self.config.sim_duration
        if duration > 0 and self.elapsed >= duration:
            self.outcome = Outcome.TIMEOUT
        return self.outcome

    def run(self) -> Outcome:
        """Tick until the simulation ends and return how it ended."""
        while True:
            outcome = self.tick()
            if outcome is not None:
                return outcome
            if self.interval > 0:
                time.sleep(self.interval)