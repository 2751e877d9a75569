# reactorsim

A small simulation of a fission reactor. A pool of atoms, each with an atomic
number, is kept in a reactor that starts with 100 units of energy. The
simulation advances in simulated seconds. On each second it:

1. adds new atoms, if the feeding interval (`STEP`) has come round,
2. checks the free energy (produced minus consumed) and stops if it is above
   the explosion threshold or below zero,
3. drops the atoms that have become waste,
4. reports the daily statistics: activations, splits, energy produced and
   consumed (total and for the last period), and waste,
5. activates one atom picked at random (never the first atom in the table, so
   nothing is activated while fewer than two atoms are live),
6. starts a new period and withdraws a random amount of energy, 1 to 100 units,
7. stops with a timeout once `SIM_DURATION` seconds have passed.

An activated atom whose atomic number is at or below `MIN_N_ATOMICO` becomes
waste. Any other atom splits: a random part `delta` (from 1 to `n - 1`) of its
atomic number `n` goes to a new atom, and the atom keeps `n - delta`. Splitting
into `n1` and `n2` frees `n1 * n2 - max(n1, n2)` units of energy.

The run ends in one of four ways:

- **TIMEOUT**: the configured duration has elapsed,
- **EXPLODE**: free energy rose above `ENERGY_EXPLODE_THRESHOLD`,
- **BLACKOUT**: more energy was withdrawn than was available,
- **MELTDOWN**: the reactor could not take any more atoms (it holds at most
  1000).

## Installation

```
pip install .
```

## Configuration

The simulation reads a plain text file of entries of the form
`NAME = VALUE;`. The separator between name and value may be any single
punctuation character such as `=` or `:`.

```
MIN_N_ATOMICO = 10;
MAX_N_ATOMICO = 100;
STEP = 2;
SIM_DURATION = 20;
N_ATOM_AT_ONCE = 1;
N_ATOMI_INIT = 5;
N_NUOVI_ATOMI = 3;
ENERGY_EXPLODE_THRESHOLD = 5000;
```

| Name | Meaning |
| --- | --- |
| `MIN_N_ATOMICO` | lowest atomic number of new atoms; atoms at or below it become waste when activated |
| `MAX_N_ATOMICO` | highest atomic number of new atoms |
| `STEP` | every this many seconds new atoms are added (0 turns feeding off) |
| `SIM_DURATION` | seconds until the run times out (0 means no timeout) |
| `N_ATOM_AT_ONCE` | read and stored, not used by the simulation |
| `N_ATOMI_INIT` | atoms present at the start |
| `N_NUOVI_ATOMI` | atoms added each feeding |
| `ENERGY_EXPLODE_THRESHOLD` | highest free energy before the reactor explodes |

Unknown names are ignored, a later entry overrides an earlier one, and missing
names take the value zero. Integer parameters given with a fractional part are
truncated.

## Running

```
reactorsim config.txt
```

Options:

- `config`: the configuration file, `config.txt` if not given,
- `--seed N`: seed for the random number generator, for repeatable runs,
- `--delay SECONDS`: real time to wait between simulated seconds (default 1.0;
  0 runs as fast as possible).

The command prints the configuration, then a daily report every simulated
second, and finally the reason the simulation ended. The exit status is 0 for a
timeout or meltdown and 1 for an explosion or a blackout. If the configuration
file cannot be read, an error is printed and the exit status is 1.

## Using the library

```python
import random

from reactorsim.config import load_config
from reactorsim.simulation import Simulation

config = load_config("config.txt")
simulation = Simulation(config, rng=random.Random(42), report=print)
outcome = simulation.run()
print(outcome.describe())
```

- `reactorsim.config`: `Config`, `parse_config(text)` for configuration text in
  a string, `load_config(path)` for a file, and `Config.describe()` for the
  listing shown at startup.
- `reactorsim.atoms`: `energy_freed`, `split_number`, `random_atomic_number`,
  the running `Statistics`, and `Reactor`, which holds the atoms and can be used
  on its own to `register`, `split`, `remove` and `clean` atoms.
- `reactorsim.simulation`: `Simulation`, stepped with `tick()` or run to the end
  with `run()`, and `Outcome`, whose `exit_code` and `describe()` give the exit
  status and the closing banner.

## What it does not do

The whole simulation runs in a single process on simulated seconds; atoms,
activation and feeding are not separate processes, and the reactor cannot be
observed or driven from outside while it runs. Results are only printed, not
saved.

## Tests

```
pip install .[test]
pytest
```