import dataclasses
from typing import Dict, List, Optional

import pytest

import hammer


@dataclasses.dataclass
class Args:
    """Count some things."""

    count: int
    verbose: bool
    label: Optional[str]


def test_cli() -> None:
    assert hammer.cli(Args, args=["--count", "3", "--verbose"]) == Args(
        count=3, verbose=True, label=None
    )


def test_cli_with_registry() -> None:
    registry = hammer.ConfigRegistry()
    registry.register(Args, lambda c: c.short("count", "n").short("label", "l"))
    assert hammer.cli(Args, args=["-n", "3", "-l", "x"], registry=registry) == Args(
        count=3, verbose=False, label="x"
    )


def test_cli_missing_required(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        hammer.cli(Args, args=["--verbose"], prog="count.py")
    assert excinfo.value.code == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: count.py [options]" in captured.err
    assert "Count some things." in captured.err
    assert "--count\n[--verbose]\n[--label]\n" in captured.err
    assert "--count is required" in captured.err


def test_cli_conversion_failure(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        hammer.cli(Args, args=["--count", "many"])
    assert "could not convert many to an integer" in capsys.readouterr().err


def test_cli_unrecognized_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        hammer.cli(Args, args=["--count", "3", "extra", "--other"])
    assert "unrecognized arguments: extra --other" in capsys.readouterr().err


def test_cli_rest_field_accepts_leftovers() -> None:
    @dataclasses.dataclass
    class A:
        count: int
        rest: List[str]

    assert hammer.cli(A, args=["a", "--count", "3", "b"]) == A(3, ["a", "b"])


def test_cli_unsupported_shape_propagates() -> None:
    @dataclasses.dataclass
    class A:
        env: Dict[str, str]

    with pytest.raises(hammer.UnsupportedShapeError):
        hammer.cli(A, args=[])


def test_cli_reads_sys_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["count.py", "--count", "5"])
    assert hammer.cli(Args) == Args(count=5, verbose=False, label=None)
