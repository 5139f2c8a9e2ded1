# tests/conftest.py
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest


def simulate_garch(n, omega, alpha, beta, seed):
    """Zero-mean GARCH(1,1) path with normal innovations, started at the long-run variance."""
    rng = np.random.default_rng(seed)
    z = rng.standard_normal(n)
    u = np.zeros(n)
    v = omega / (1.0 - alpha - beta)
    for i in range(n):
        u[i] = np.sqrt(v) * z[i]
        v = omega + alpha * u[i] ** 2 + beta * v
    return u


@pytest.fixture
def garch_returns():
    # log returns in percent: omega=0.05, alpha=0.10, beta=0.85 -> unit long-run variance
    dates = pd.bdate_range("2015-01-02", periods=2000)
    returns = simulate_garch(2000, omega=0.05, alpha=0.10, beta=0.85, seed=2025)
    return pd.Series(returns, index=dates, name="DGS20")


@pytest.fixture
def yields_frame(garch_returns):
    # yield levels whose log returns are exactly garch_returns
    dates = pd.bdate_range("2015-01-01", periods=len(garch_returns) + 1)
    log_path = np.concatenate(([0.0], np.cumsum(garch_returns.to_numpy()) / 100.0))
    dgs20 = 3.0 * np.exp(log_path)
    frame = pd.DataFrame(
        {"DGS2": 0.6 * dgs20, "DGS10": 0.9 * dgs20, "DGS20": dgs20},
        index=dates,
    )
    frame.index.name = "observation_date"
    return frame
