import random

import pytest
from rich.console import Console

from correlation.config import CorrelationConfig, config_from_args
from correlation.engine import Correlation
from main import build_parser, run
from simulate_tui import SampleGenerator


def _console() -> Console:
    return Console(record=True, width=100, color_system=None)


def _args(*argv: str):
    return build_parser().parse_args(list(argv))


def test_config_from_args_defaults() -> None:
    assert config_from_args(_args("data.csv")) == CorrelationConfig()


def test_config_from_args_flags() -> None:
    cfg = config_from_args(_args("data.csv", "--capacity", "5", "--running", "--no-r2", "--no-e2"))

    assert cfg == CorrelationConfig(capacity=5, running=True, r2=False, e2=False)


def test_run_prints_fit(tmp_path) -> None:
    path = tmp_path / "line.csv"
    path.write_text("x,y\n1,2\n2,4\n3,6\n")
    console = _console()

    assert run(_args(str(path), "--show-samples"), console) == 0

    text = console.export_text()
    assert "STRONG" in text
    assert "Y = 0 + 2 · X" in text
    assert "Residual" in text


def test_run_reports_rejected_samples(tmp_path) -> None:
    path = tmp_path / "many.csv"
    path.write_text("\n".join(f"{i},{i}" for i in range(6)))
    console = _console()

    assert run(_args(str(path), "--capacity", "4"), console) == 0
    assert "2 samples rejected" in console.export_text()

    console = _console()
    assert run(_args(str(path), "--capacity", "4", "--running"), console) == 0
    assert "rejected" not in console.export_text()


def test_run_missing_file(tmp_path) -> None:
    console = _console()

    assert run(_args(str(tmp_path / "nope.csv")), console) == 1
    assert "Cannot read" in console.export_text()


def test_run_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("x,y\n")
    console = _console()

    assert run(_args(str(path)), console) == 1
    assert "No samples" in console.export_text()


def test_run_invalid_capacity(tmp_path) -> None:
    path = tmp_path / "line.csv"
    path.write_text("1,2\n")
    console = _console()

    assert run(_args(str(path), "--capacity", "0"), console) == 1


def test_generator_without_noise_is_exact() -> None:
    random.seed(1)
    gen = SampleGenerator(slope=1.5, intercept=-4.0, noise=0.0)
    corr = Correlation(10)
    corr.set_running_correlation(True)
    for _ in range(25):
        corr.add(*gen.next_sample())

    assert corr.calculate()
    assert corr.get_b() == pytest.approx(1.5)
    assert corr.get_a() == pytest.approx(-4.0)
    assert corr.get_r() == pytest.approx(1.0)
