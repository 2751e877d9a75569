from reactorsim.cli import main


def write_config(tmp_path, threshold, duration=1):
    path = tmp_path / "config.txt"
    path.write_text(
        "MIN_N_ATOMICO = 2;\n"
        "MAX_N_ATOMICO = 40;\n"
        "STEP = 0;\n"
        f"SIM_DURATION = {duration};\n"
        "N_ATOM_AT_ONCE = 1;\n"
        "N_ATOMI_INIT = 5;\n"
        f"ENERGY_EXPLODE_THRESHOLD = {threshold};\n",
        encoding="utf-8",
    )
    return path


def test_timeout_run(tmp_path, capsys):
    path = write_config(tmp_path, 1000000)
    code = main([str(path), "--seed", "3", "--delay", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "INIZIO SIMULAZIONE" in out
    assert "N_ATOMI_INIT = 5;" in out
    assert "PRINT DAILY" in out
    assert "TIMEOUT" in out


def test_explode_run(tmp_path, capsys):
    path = write_config(tmp_path, 10)
    code = main([str(path), "--seed", "3", "--delay", "0"])
    out = capsys.readouterr().out
    assert code == 1
    assert "EXPLODE" in out
    assert "PRINT DAILY" not in out


def test_missing_config(tmp_path, capsys):
    code = main([str(tmp_path / "absent.txt"), "--delay", "0"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Errore nell'apertura del file." in captured.err