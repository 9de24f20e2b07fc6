#!/usr/bin/env python3
"""Tests for the command line interface."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory

from conftest import create_heads_up_hand, create_three_handed_hand
from main import main


def test_single_hand_prints_one_report(capsys):
    with TemporaryDirectory() as tmp:
        path = Path(tmp) / "hand.json"
        path.write_text(json.dumps(create_heads_up_hand()), encoding="utf-8")
        assert main([str(path)]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["info"]["players"] == 2
    assert report["players"][0]["name"] == "bob"


def test_multiple_files_write_list_to_output():
    with TemporaryDirectory() as tmp:
        first = Path(tmp) / "a.json"
        second = Path(tmp) / "b.json"
        out = Path(tmp) / "reports.json"
        first.write_text(json.dumps(create_heads_up_hand()), encoding="utf-8")
        second.write_text(json.dumps({"hands": [create_three_handed_hand()]}), encoding="utf-8")

        assert main([str(first), str(second), "--output", str(out), "--indent", "0"]) == 0
        reports = json.loads(out.read_text())

    assert [r["info"]["players"] for r in reports] == [2, 3]


def test_bad_files_are_skipped(capsys):
    with TemporaryDirectory() as tmp:
        broken = Path(tmp) / "broken.json"
        broken.write_text("{", encoding="utf-8")
        invalid = Path(tmp) / "invalid.json"
        hand = create_heads_up_hand()
        hand["flop"].append({"player": "mallory", "type": "check"})
        invalid.write_text(json.dumps(hand), encoding="utf-8")

        code = main([str(broken), str(invalid), str(Path(tmp) / "missing.json")])

    err = capsys.readouterr().err
    assert code == 1
    assert "Invalid JSON" in err
    assert "mallory" in err
    assert "File not found" in err


def test_hand_with_string_amount_does_not_stop_other_files(capsys):
    with TemporaryDirectory() as tmp:
        bad = Path(tmp) / "bad.json"
        hand = create_heads_up_hand()
        hand["preflop"][0]["amount"] = "1"
        bad.write_text(json.dumps(hand), encoding="utf-8")
        good = Path(tmp) / "good.json"
        good.write_text(json.dumps(create_three_handed_hand()), encoding="utf-8")

        assert main([str(bad), str(good)]) == 0

    captured = capsys.readouterr()
    report = json.loads(captured.out)
    assert report["info"]["players"] == 3
    assert "bad.json" in captured.err
    assert "must be a number" in captured.err
