import pytest
from run_log import read_runs
from solve import layer_label, main as solve_cli


@pytest.fixture
def example(tmp_path):
    path = tmp_path / "example.txt"
    path.write_text(".#.\n..#\n###\n")
    return path


def test_solve_prints_count_and_logs(example, tmp_path, capsys):
    log = tmp_path / "runs.log"
    solve_cli([str(example), "--dims", "2", "3", "--generations", "1", "--log-file", str(log)])

    out = capsys.readouterr().out
    assert "Active 2D cubes after cycle 1: 5" in out
    assert "Active 3D cubes after cycle 1: 11" in out
    assert [(r["dim"], r["count"]) for r in read_runs(log)] == [(2, 5), (3, 11)]


def test_solve_no_log(example, tmp_path):
    log = tmp_path / "runs.log"
    solve_cli([str(example), "--dims", "3", "--generations", "1", "--log-file", str(log), "--no-log"])
    assert not log.exists()


def test_solve_show_history(example, capsys):
    solve_cli([str(example), "--dims", "3", "--generations", "1", "--show", "--no-log"])
    out = capsys.readouterr().out
    assert "Before any cycles:" in out
    assert "After 1 cycle:" in out
    assert "z=-1\n#..\n..#\n.#." in out


def test_solve_rejects_bad_character(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("#?\n")
    with pytest.raises(SystemExit) as exc:
        solve_cli([str(bad), "--no-log"])
    assert "'?'" in str(exc.value.code)


@pytest.mark.parametrize(
    "extra_args",
    [["--generations", "0"], ["--dims", "1"], ["--rule", "nonsense"], ["--rule", "B0/S23"]],
)
def test_solve_rejects_bad_options(example, extra_args):
    with pytest.raises(SystemExit) as exc:
        solve_cli([str(example), "--no-log", *extra_args])
    assert exc.value.code != 0


def test_solve_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        solve_cli([str(tmp_path / "missing.txt"), "--no-log"])
    assert "cannot read" in str(exc.value.code)


def test_layer_label():
    assert layer_label((0,)) == "z=0"
    assert layer_label((1, -2)) == "z=1, w=-2"


def test_solve_default_dimensions(example, capsys):
    solve_cli([str(example), "--generations", "1", "--no-log"])
    out = capsys.readouterr().out
    for dim in (3, 4, 5):
        assert f"Active {dim}D cubes after cycle 1:" in out
    assert "Active 3D cubes after cycle 1: 11" in out
