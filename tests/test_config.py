import pytest

from reactorsim.config import Config, load_config, parse_config

SAMPLE = """\
MIN_N_ATOMICO = 5;
MAX_N_ATOMICO = 90;
STEP = 2;
SIM_DURATION = 30;
N_ATOM_AT_ONCE = 4;
N_ATOMI_INIT = 10;
ENERGY_EXPLODE_THRESHOLD = 500;
"""


def test_parse_all_keys():
    cfg = parse_config(SAMPLE)
    assert cfg.min_atomic_number == 5
    assert cfg.max_atomic_number == 90
    assert cfg.step == 2
    assert cfg.sim_duration == 30
    assert cfg.atoms_at_once == 4
    assert cfg.initial_atoms == 10
    assert cfg.explode_threshold == 500.0


def test_missing_keys_default_to_zero():
    cfg = parse_config("STEP = 3;")
    assert cfg == Config(step=3)
    assert cfg.min_atomic_number == 0
    assert cfg.explode_threshold == 0.0


def test_unknown_keys_are_ignored():
    cfg = parse_config("FOO = 7;\nSTEP = 1;\nBAR = 9;")
    assert cfg == Config(step=1)


def test_later_entry_overrides():
    assert parse_config("STEP = 1;\nSTEP = 4;").step == 4


def test_float_threshold_and_int_truncation():
    cfg = parse_config("ENERGY_EXPLODE_THRESHOLD = 12.5;\nSTEP = 3.9;")
    assert cfg.explode_threshold == 12.5
    assert cfg.step == 3


def test_new_atoms_key():
    assert parse_config("N_NUOVI_ATOMI = 6;").new_atoms == 6


def test_describe_lists_values():
    text = parse_config(SAMPLE).describe()
    lines = text.splitlines()
    assert lines[0] == "MIN_N_ATOMICO = 5;"
    assert "N_ATOMI_INIT = 10;" in lines
    assert lines[-1] == "ENERGY_EXPLODE_THRESHOLD = 500.000000;"
    assert len(lines) == 7


def test_load_config_roundtrip(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_config(path) == parse_config(SAMPLE)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.txt")