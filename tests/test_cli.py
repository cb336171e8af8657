import json

from pydilemma.cli import main


ALICE = "a1" * 32
BOB = "b0" * 32


def _run(capsys, state, *args):
    code = main(["--state", str(state), *args])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_cli_full_flow(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("PYDILEMMA_INITIAL_THRESHOLD", "10000")
    monkeypatch.setenv("PYDILEMMA_THRESHOLD_CEILING", "none")
    state = tmp_path / "state.json"

    code, out, _ = _run(capsys, state, "init")
    assert code == 0
    assert state.exists()

    code, out, _ = _run(capsys, state, "play", "--sender", ALICE, "--tx", "01", "--amount", "400", "1")
    assert code == 0
    assert json.loads(out.splitlines()[-1]) == {"match_id": "1"}

    code, out, _ = _run(capsys, state, "play", "--sender", BOB, "--tx", "02", "--amount", "100", "1")
    assert code == 0
    assert json.loads(out.splitlines()[-1])["player_1"]["payout"] == 400

    code, out, _ = _run(capsys, state, "result", "--sender", BOB, "1")
    assert json.loads(out.splitlines()[-1])["player_2"]["payout"] == 100

    code, out, _ = _run(capsys, state, "balance", "--sender", ALICE)
    assert out.splitlines()[-1] == "400"

    code, out, _ = _run(capsys, state, "cash-out", "--sender", ALICE)
    assert code == 0
    assert json.loads(out.splitlines()[-1]) == {"transfer": {"destination": ALICE, "amount": 400}}

    code, _, err = _run(capsys, state, "cash-out", "--sender", ALICE)
    assert code == 1
    assert "zero_balance" in err


def test_cli_reports_invalid_vote(tmp_path, capsys):
    state = tmp_path / "state.json"
    code, _, err = _run(capsys, state, "play", "--sender", ALICE, "--amount", "5", "7")

    assert code == 1
    assert "invalid_vote" in err
    assert not state.exists()


def test_cli_rejects_non_ascii_digit_vote(tmp_path, capsys):
    state = tmp_path / "state.json"
    code, _, err = _run(capsys, state, "play", "--sender", ALICE, "--amount", "5", "²")

    assert code == 1
    assert "invalid_vote" in err


def test_cli_rejects_negative_amount(tmp_path, capsys):
    state = tmp_path / "state.json"
    code, _, err = _run(capsys, state, "play", "--sender", ALICE, "--amount", "-5", "1")

    assert code == 1
    assert "invalid_parameters" in err
    assert "amount" in err
    assert not state.exists()
