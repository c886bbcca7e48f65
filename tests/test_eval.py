import json

import pytest
from eval import _parse_prediction, count_accuracy, main as eval_cli


def test_metric():
    assert count_accuracy(112, 112) == 1.0
    assert count_accuracy(100, 50) == 0.5
    assert count_accuracy(50, 100) == 0.5
    assert count_accuracy(0, 10) == 0.0
    assert count_accuracy(0, 0) == 1.0


def test_parse_prediction_forms():
    assert _parse_prediction('{"3": 112, "4": 848}', [3, 4]) == {3: 112, 4: 848}
    assert _parse_prediction("112 848", [3, 4]) == {3: 112, 4: 848}
    assert _parse_prediction("112,848\n", [3, 4]) == {3: 112, 4: 848}


@pytest.mark.parametrize("bad", ["", "112", "abc 1", "-1 2", '{"3": 1.5}', "[1, 2]", '{"3": true}'])
def test_parse_prediction_invalid(bad):
    with pytest.raises(ValueError):
        _parse_prediction(bad, [3, 4])


def _write(tmp_path, gold_rows, pred_lines):
    gold = tmp_path / "gold.jsonl"
    preds = tmp_path / "preds.txt"
    gold.write_text("\n".join(json.dumps(r) for r in gold_rows))
    preds.write_text("\n".join(pred_lines))
    return gold, preds


def test_eval_cli_gold_equals_pred(tmp_path, capsys):
    rows = [
        {"dims": [3, 4], "target": {"3": 112, "4": 848}},
        {"dims": [3, 4], "target": {"3": 5, "4": 0}},
    ]
    gold, preds = _write(tmp_path, rows, ["112 848", '{"3": 5, "4": 0}'])

    with pytest.raises(SystemExit) as exc:
        eval_cli(["--gold", str(gold), "--pred", str(preds)])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "Exact-match accuracy: 4/4" in out
    assert "Count accuracy: 1.0000" in out


def test_eval_cli_invalid_line_counts_as_wrong(tmp_path, capsys):
    rows = [{"dims": [3], "target": {"3": 10}}, {"dims": [3], "target": {"3": 20}}]
    gold, preds = _write(tmp_path, rows, ["10", "twenty"])

    with pytest.raises(SystemExit) as exc:
        eval_cli(["--gold", str(gold), "--pred", str(preds)])
    assert exc.value.code == 0
    captured = capsys.readouterr()
    assert "1 invalid prediction" in captured.err
    assert "Exact-match accuracy: 1/2" in captured.out


def test_eval_cli_length_mismatch(tmp_path):
    rows = [{"dims": [3], "target": {"3": 1}} for _ in range(2)]
    gold, preds = _write(tmp_path, rows, ["1"])

    with pytest.raises(SystemExit) as exc:
        eval_cli(["--gold", str(gold), "--pred", str(preds)])
    assert exc.value.code == 1
