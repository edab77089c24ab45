from __future__ import annotations

import pytest

from atomic_change.ui import cli as cli_module


def test_cli_rejects_batch_with_empty_name(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--name", "", "--age", "22", "--position", "Best Developer"])

    assert excinfo.value.code == 1
    assert capsys.readouterr().out.splitlines() == [
        "success = False",
        "name= age=0 position=",
    ]


def test_cli_commits_valid_batch(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["--name", "Ada", "--age", "22", "--position", "Best Developer"])

    assert capsys.readouterr().out.splitlines() == [
        "success = True",
        "name=Ada age=22 position=Best Developer",
    ]


def test_cli_keeps_seeded_record_on_failure(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--initial-name", "Grace", "--name", "Ada", "--age", "-5"])

    assert excinfo.value.code == 1
    assert capsys.readouterr().out.splitlines()[-1] == "name=Grace age=0 position="


def test_cli_without_changes_is_a_no_op(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["--initial-position", "Intern"])

    assert capsys.readouterr().out.splitlines() == ["success = True", "name= age=0 position=Intern"]


def test_cli_invalid_initial_record_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--initial-age", "-1"])

    assert excinfo.value.code == 2


def test_cli_argument_type_errors_exit_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--age", "old"])

    assert excinfo.value.code == 2
