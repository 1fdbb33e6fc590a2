import math
import logging
from dataclasses import dataclass

from correlation.config import CorrelationConfig
from correlation.store import SampleStore


@dataclass(frozen=True)
class CorrelationResult:
    a: float                # Intercept (Y = A + B*X)
    b: float                # Slope
    r: float                # Pearson correlation coefficient
    r_squared: float
    e_squared: float        # Residual sum of squares
    avg_x: float
    avg_y: float
    count: int
    size: int
    stale: bool             # True if samples changed since the last calculate()


def _divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _sqrt(value: float) -> float:
    if value < 0 or math.isnan(value):
        return math.nan
    return math.sqrt(value)


class Correlation:
    """
    Linear regression and correlation over a bounded sample set.

    Samples live in a fixed-capacity SampleStore. Aggregates are only
    recomputed by calculate(), and only when the samples changed since
    the last run (or when forced). All getters return cached values.
    """

    def __init__(self, capacity: int = 20):
        self.store = SampleStore(capacity)
        self.store.on_change = self._invalidate

        self._stale = True
        self._do_r2 = True
        self._do_e2 = True

        self._avg_x = 0.0
        self._avg_y = 0.0
        self._a = 0.0
        self._b = 0.0
        self._r = 0.0
        self._sum_error_square = 0.0
        self._sum_xi_yi = 0.0
        self._sum_xi2 = 0.0
        self._sum_yi2 = 0.0

    @classmethod
    def from_config(cls, config: CorrelationConfig) -> "Correlation":
        """Build an engine from a CorrelationConfig."""
        corr = cls(config.capacity)
        corr.set_running_correlation(config.running)
        corr.set_r2_calculation(config.r2)
        corr.set_e2_calculation(config.e2)
        return corr

    def _invalidate(self) -> None:
        self._stale = True

    @property
    def stale(self) -> bool:
        return self._stale

    # --- Sample management (delegated to the store) ---

    def add(self, x: float, y: float) -> bool:
        """Add a pair. Returns False if the store is full and not running."""
        return self.store.add(x, y)

    def clear(self) -> None:
        self.store.clear()

    def count(self) -> int:
        return self.store.count()

    def size(self) -> int:
        return self.store.size()

    def set_xy(self, idx: int, x: float, y: float) -> bool:
        return self.store.set_xy(idx, x, y)

    def set_x(self, idx: int, x: float) -> bool:
        return self.store.set_x(idx, x)

    def set_y(self, idx: int, y: float) -> bool:
        return self.store.set_y(idx, y)

    def get_x(self, idx: int) -> float:
        return self.store.get_x(idx)

    def get_y(self, idx: int) -> float:
        return self.store.get_y(idx)

    # --- Configuration ---

    def set_running_correlation(self, running: bool) -> None:
        self.store.running = running

    def get_running_correlation(self) -> bool:
        return self.store.running

    def set_r2_calculation(self, do_r2: bool) -> None:
        # Takes effect on the next recomputation; does not mark stale.
        self._do_r2 = do_r2

    def get_r2_calculation(self) -> bool:
        return self._do_r2

    def set_e2_calculation(self, do_e2: bool) -> None:
        self._do_e2 = do_e2

    def get_e2_calculation(self) -> bool:
        return self._do_e2

    # --- Computation ---

    def calculate(self, forced: bool = False) -> bool:
        """
        Recompute the regression over the stored samples.

        Args:
            forced: Recompute even if no sample changed since the last run.

        Returns:
            False if the store is empty (cached values are left untouched),
            True otherwise.
        """
        n = self.store.count()
        if n == 0:
            logging.debug("Correlation: calculate() on empty store")
            return False

        if not (self._stale or forced):
            return True

        xs = self.store.xs
        ys = self.store.ys
        need_y2 = self._do_r2 or self._do_e2

        # 1. Raw sums
        sum_x = 0.0
        sum_y = 0.0
        sum_xy = 0.0
        sum_xx = 0.0
        sum_yy = 0.0
        same_x = True
        same_y = True
        for i in range(n):
            x = xs[i]
            y = ys[i]
            if x != xs[0]:
                same_x = False
            if y != ys[0]:
                same_y = False
            sum_x += x
            sum_y += y
            sum_xy += x * y
            sum_xx += x * x
            if need_y2:
                sum_yy += y * y

        avg_x = sum_x / n
        avg_y = sum_y / n

        # 2. Centered moments. Same ratio as (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
        # without the cancellation of subtracting two large raw sums.
        s_xy = 0.0
        s_xx = 0.0
        s_yy = 0.0
        for i in range(n):
            dx = xs[i] - avg_x
            dy = ys[i] - avg_y
            s_xy += dx * dy
            s_xx += dx * dx
            if self._do_r2:
                s_yy += dy * dy

        # sum/n doesn't reproduce a repeated value exactly (0.1 * 3 / 3 != 0.1),
        # which would leave rounding noise instead of a zero spread.
        if same_x:
            s_xx = 0.0
            s_xy = 0.0
        if same_y:
            s_yy = 0.0
            s_xy = 0.0

        b = _divide(s_xy, s_xx)
        a = avg_y - b * avg_x

        self._sum_xi_yi = sum_xy
        self._sum_xi2 = sum_xx
        if need_y2:
            self._sum_yi2 = sum_yy
        self._avg_x = avg_x
        self._avg_y = avg_y
        self._a = a
        self._b = b

        if self._do_r2:
            self._r = _divide(s_xy, _sqrt(s_xx * s_yy))

        if self._do_e2:
            sum_err = 0.0
            for i in range(n):
                err = ys[i] - (a + b * xs[i])
                sum_err += err * err
            self._sum_error_square = sum_err

        if same_x:
            logging.warning(f"Correlation: degenerate fit, all {n} samples have X={xs[0]}, slope={b}")

        self._stale = False
        logging.debug(f"Correlation: recalculated n={n} a={a:.6g} b={b:.6g}")
        return True

    # --- Cached results ---

    def get_a(self) -> float:
        return self._a

    def get_b(self) -> float:
        return self._b

    def get_r(self) -> float:
        return self._r

    def get_r_square(self) -> float:
        return self._r * self._r

    def get_e_square(self) -> float:
        return self._sum_error_square

    def get_avg_x(self) -> float:
        return self._avg_x

    def get_avg_y(self) -> float:
        return self._avg_y

    def get_sum_xi_yi(self) -> float:
        return self._sum_xi_yi

    def get_sum_xi2(self) -> float:
        return self._sum_xi2

    def get_sum_yi2(self) -> float:
        return self._sum_yi2

    def get_estimate_y(self, x: float) -> float:
        """Y on the last calculated line. Call calculate() first."""
        return self._a + self._b * x

    def get_estimate_x(self, y: float) -> float:
        """X on the last calculated line. Horizontal fit (B == 0) gives +/-inf or NaN."""
        return _divide(y - self._a, self._b)

    def get_min_x(self) -> float:
        return self.store.min_x()

    def get_max_x(self) -> float:
        return self.store.max_x()

    def get_min_y(self) -> float:
        return self.store.min_y()

    def get_max_y(self) -> float:
        return self.store.max_y()

    def result(self) -> CorrelationResult:
        """Snapshot of the cached values. Does not recalculate."""
        return CorrelationResult(
            a=self._a,
            b=self._b,
            r=self._r,
            r_squared=self.get_r_square(),
            e_squared=self._sum_error_square,
            avg_x=self._avg_x,
            avg_y=self._avg_y,
            count=self.store.count(),
            size=self.store.size(),
            stale=self._stale,
        )
