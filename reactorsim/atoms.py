"""Atoms of the reactor, their fission and the shared statistics."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Iterator

from .config import Config

MAX_ATOMS = 1000


def energy_freed(n1: int, n2: int) -> int:
    """Energy released when an atom splits into atomic numbers n1 and n2."""
    return n1 * n2 - max(n1, n2)


def split_number(number: int, rng: random.Random) -> tuple[int, int]:
    """Split an atomic number into ``(remaining, delta)`` with delta in [1, number-1]."""
    if number < 2:
        raise ValueError(f"atomic number {number} cannot be split")
    delta = rng.randrange(1, number)
    return number - delta, delta


def random_atomic_number(config: Config, rng: random.Random) -> int:
    """Draw an atomic number uniformly between the configured bounds."""
    low, high = config.min_atomic_number, config.max_atomic_number
    if high < low:
        raise ValueError(f"empty atomic number range [{low}, {high}]")
    return rng.randint(low, high)


@dataclass
class Statistics:
    """Running totals of the simulation; ``*_rel`` fields cover the last period."""

    activations: int = 0
    activations_rel: int = 0
    splits: int = 0
    splits_rel: int = 0
    energy_produced: float = 100.0
    energy_consumed: float = 0.0
    energy_rel_prod: float = 0.0
    energy_rel_con: float = 0.0
    waste: int = 0

    def reset_relative(self) -> None:
        """Zero the per-period counters."""
        self.activations_rel = 0
        self.splits_rel = 0
        self.energy_rel_prod = 0.0
        self.energy_rel_con = 0.0


@dataclass
class _Slot:
    atom_id: int
    number: int


class Reactor:
    """The table of live atoms, with removed atoms kept as gaps until cleaned."""

    def __init__(self, config: Config, stats: Statistics | None = None) -> None:
        self.config = config
        self.stats = stats if stats is not None else Statistics()
        self._slots: list[_Slot | None] = []
        self._ids = itertools.count(1)
        self._next = 1

    def _allocate(self) -> int:
        self._next = max(self._next, next(self._ids))
        value = self._next
        self._next += 1
        return value

    def _find(self, atom_id: int) -> int:
        for index, slot in enumerate(self._slots):
            if slot is not None and slot.atom_id == atom_id:
                return index
        raise KeyError(atom_id)

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    def __contains__(self, atom_id: object) -> bool:
        return any(slot is not None and slot.atom_id == atom_id for slot in self._slots)

    def __getitem__(self, atom_id: int) -> int:
        slot = self._slots[self._find(atom_id)]
        assert slot is not None
        return slot.number

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return ((s.atom_id, s.number) for s in self._slots if s is not None)

    def register(self, atom_id: int | None, number: int) -> int:
        """Record an atom's atomic number, adding it if new; returns its id.

        With ``atom_id`` of None a fresh id is allocated.
        """
        if atom_id is not None:
            for slot in self._slots:
                if slot is not None and slot.atom_id == atom_id:
                    slot.number = number
                    return atom_id
        if len(self._slots) >= MAX_ATOMS:
            raise OverflowError(f"reactor holds at most {MAX_ATOMS} atoms")
        if atom_id is None:
            atom_id = self._allocate()
        else:
            self._next = max(self._next, atom_id + 1)
        self._slots.append(_Slot(atom_id, number))
        return atom_id

    def remove(self, atom_id: int) -> None:
        """Turn an atom into waste, leaving a gap until :meth:`clean`."""
        self._slots[self._find(atom_id)] = None
        self.stats.waste += 1

    def clean(self) -> int:
        """Drop the gaps left by waste; returns how many were dropped."""
        before = len(self._slots)
        self._slots = [slot for slot in self._slots if slot is not None]
        return before - len(self._slots)

    def split(self, atom_id: int, rng: random.Random) -> int | None:
        """Activate an atom: split it, or turn it into waste if too light.

        Returns the id of the new atom, or None if the atom became waste.
        """
        number = self[atom_id]
        if number <= self.config.min_atomic_number:
            self.remove(atom_id)
            return None
        remaining, delta = split_number(number, rng)
        energy = energy_freed(remaining, delta)
        self.stats.energy_produced += energy
        self.stats.energy_rel_prod += energy
        self.stats.splits += 1
        self.stats.splits_rel += 1
        child = self.register(None, delta)
        self.register(atom_id, remaining)
        return child

    def atom_ids(self) -> list[int]:
        """Ids of the live atoms in table order."""
        return [slot.atom_id for slot in self._slots if slot is not None]