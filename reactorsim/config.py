"""Simulation parameters and the parser for the configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path

_ENTRY = re.compile(
    r"([A-Za-z_][A-Za-z0-9_]*)\s*[^\sA-Za-z0-9_.+-]\s*"
    r"([-+]?\d+(?:\.\d*)?(?:[eE][-+]?\d+)?)"
)

# Configuration key -> Config attribute.
_KEYS = {
    "MIN_N_ATOMICO": "min_atomic_number",
    "MAX_N_ATOMICO": "max_atomic_number",
    "STEP": "step",
    "SIM_DURATION": "sim_duration",
    "N_ATOM_AT_ONCE": "atoms_at_once",
    "N_ATOMI_INIT": "initial_atoms",
    "N_NUOVI_ATOMI": "new_atoms",
    "ENERGY_EXPLODE_THRESHOLD": "explode_threshold",
}


@dataclass(frozen=True)
class Config:
    """Parameters of one reactor simulation; unset values are zero."""

    min_atomic_number: int = 0
    max_atomic_number: int = 0
    step: int = 0
    sim_duration: int = 0
    atoms_at_once: int = 0
    initial_atoms: int = 0
    new_atoms: int = 0
    explode_threshold: float = 0.0

    def describe(self) -> str:
        """Return the human-readable listing of the configuration."""
        lines = [
            f"MIN_N_ATOMICO = {self.min_atomic_number};",
            f"MAX_N_ATOMICO = {self.max_atomic_number};",
            f"STEP = {self.step};",
            f"SIM_DURATION = {self.sim_duration};",
            f"N_ATOM_AT_ONCE = {self.atoms_at_once};",
            f"N_ATOMI_INIT = {self.initial_atoms};",
            f"ENERGY_EXPLODE_THRESHOLD = {self.explode_threshold:f};",
        ]
        return "\n".join(lines)


def _convert(attr: str, raw: str) -> int | float:
    if attr == "explode_threshold":
        return float(raw)
    return int(float(raw))


def parse_config(text: str) -> Config:
    """Parse entries of the form ``NAME = VALUE;`` into a :class:`Config`.

    Unknown names are ignored; a later entry overrides an earlier one.
    """
    values: dict[str, int | float] = {}
    for match in _ENTRY.finditer(text):
        attr = _KEYS.get(match.group(1))
        if attr is not None:
            values[attr] = _convert(attr, match.group(2))
    known = {f.name for f in fields(Config)}
    return Config(**{k: v for k, v in values.items() if k in known})


def load_config(path: str | Path) -> Config:
    """Read and parse the configuration file at ``path``."""
    return parse_config(Path(path).read_text(encoding="utf-8"))