#!/usr/bin/env python3
"""
Simulation script for watching a running correlation live.

A background thread generates noisy samples around a known line and feeds
them into a running-mode Correlation. The terminal shows the current fit,
which should settle near the configured slope and intercept.

Usage:
    ./venv/bin/python simulate_tui.py --capacity 30 --slope 2.5 --noise 4
"""

import time
import random
import logging
import argparse
import threading

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from correlation.engine import Correlation
from correlation.report import build_status_panel, build_samples_table


class SampleGenerator:
    """Generates y = intercept + slope * x + gaussian noise at a fixed rate."""

    def __init__(self, slope: float = 2.0, intercept: float = 10.0, noise: float = 3.0, rate_hz: float = 4.0):
        self.slope = slope
        self.intercept = intercept
        self.noise = noise
        self.period = 1.0 / rate_hz if rate_hz > 0 else 0.25
        self._x = 0.0

    def next_sample(self) -> tuple[float, float]:
        self._x += 0.5 + random.random()
        y = self.intercept + self.slope * self._x + random.gauss(0, self.noise)
        return self._x, y


class CorrelationSimulator:
    def __init__(self, capacity: int, generator: SampleGenerator):
        self.console = Console()
        self.generator = generator
        self.corr = Correlation(capacity)
        self.corr.set_running_correlation(True)

        # Correlation has no internal locking
        self.data_lock = threading.Lock()
        self.running = False
        self.sample_count = 0
        self._thread = None

    def start(self) -> None:
        self.running = True
        self._thread = threading.Thread(target=self._generate_data, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self.running = False
        if self._thread:
            self._thread.join(timeout=1.0)

    def _generate_data(self) -> None:
        while self.running:
            time.sleep(self.generator.period)
            x, y = self.generator.next_sample()
            with self.data_lock:
                self.corr.add(x, y)
                self.corr.calculate()
                self.sample_count += 1

    def build_layout(self) -> Layout:
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="main"),
            Layout(name="footer", size=3)
        )
        layout["main"].split_row(
            Layout(name="samples", ratio=3),
            Layout(name="stats", ratio=2)
        )

        header = Text()
        header.append("Open Correlation ", style="bold cyan")
        header.append(f"- target Y = {self.generator.intercept:g} + {self.generator.slope:g} · X", style="dim")
        layout["header"].update(Panel(header, border_style="cyan"))

        with self.data_lock:
            layout["samples"].update(Panel(
                build_samples_table(self.corr),
                title="[bold]Window[/bold]",
                border_style="blue"
            ))
            layout["stats"].update(build_status_panel(self.corr, title="Running Fit"))
            generated = self.sample_count

        footer = Text()
        footer.append("  Press ", style="dim")
        footer.append("Ctrl+C", style="bold cyan")
        footer.append(f" to stop ({generated} samples generated)", style="dim")
        layout["footer"].update(Panel(footer, border_style="dim"))

        return layout

    def run(self) -> None:
        self.start()
        try:
            with Live(self.build_layout(), console=self.console, refresh_per_second=4) as live:
                while True:
                    time.sleep(0.25)
                    live.update(self.build_layout())
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()

        with self.data_lock:
            res = self.corr.result()
        self.console.print(f"\n[cyan]Final fit: Y = {res.a:.4g} + {res.b:.4g} · X  (R² = {res.r_squared:.4f})[/cyan]")


def main():
    parser = argparse.ArgumentParser(description="Open Correlation - live running-mode simulation")
    parser.add_argument("--capacity", type=int, default=20, help="Sliding window size")
    parser.add_argument("--slope", type=float, default=2.0)
    parser.add_argument("--intercept", type=float, default=10.0)
    parser.add_argument("--noise", type=float, default=3.0, help="Gaussian noise sigma")
    parser.add_argument("--rate", type=float, default=4.0, help="Samples per second")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    generator = SampleGenerator(args.slope, args.intercept, args.noise, args.rate)
    CorrelationSimulator(args.capacity, generator).run()


if __name__ == "__main__":
    main()
