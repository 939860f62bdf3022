# tests/test_run.py
import pandas as pd
from plateau.run import main

def test_main_default_sample(capsys):
    assert main(["--threshold", "500000", "--interventions", "poverty"]) == 0
    out = capsys.readouterr().out
    assert "[Scenario BASE]" in out
    assert "Eradicate poverty" in out
    assert "plateau=500000&interventions=poverty" in out

def test_main_query_and_sweep(tmp_path, capsys):
    scen = tmp_path / "SMALL.yaml"
    scen.write_text(
        "run:\n  scenario: SMALL\n"
        "dataset:\n  source: values\n  values: [0, 100, 1000, 10000, 100000]\n"
        "sweep:\n  step: 25000\n"
    )
    out_csv = tmp_path / "out" / "sweep.csv"
    rc = main(["--config", str(scen), "--query", "plateau=50000&interventions=education", "--out", str(out_csv)])
    assert rc == 0
    df = pd.read_csv(out_csv)
    assert df["threshold"].tolist() == [0.0, 25000.0, 50000.0, 75000.0, 100000.0]
    out = capsys.readouterr().out
    assert "Education" in out
    assert "swept 5 thresholds" in out
