from run_log import log_run, read_runs


def test_log_run_appends_json_lines(tmp_path):
    log = tmp_path / "logs" / "runs.log"
    log_run("example.txt", 3, 6, 112, 0.123456, log_file=log)
    log_run("example.txt", 4, 6, 848, 1.5, rule="B36/S23", log_file=log)

    records = read_runs(log)
    assert [r["count"] for r in records] == [112, 848]
    assert records[0]["dim"] == 3
    assert records[0]["seconds"] == 0.1235
    assert records[1]["rule"] == "B36/S23"
    assert records[0]["ts"].endswith("Z")


def test_read_runs_missing_file(tmp_path):
    assert read_runs(tmp_path / "nope.log") == []
