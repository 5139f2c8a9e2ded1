# tests/test_yield_statistics.py
import warnings

import numpy as np
import pandas as pd

from yield_statistics import (
    archeffecttest,
    describeseries,
    halfsplittest,
    largestjumps,
    normalitytests,
    stationaritytest,
)


def test_describeseries_basic():
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])

    summary = describeseries(x)

    std = np.sqrt(2.5)
    sem = std / np.sqrt(5)
    assert summary["n"] == 5
    assert np.isclose(summary["mean"], 3.0)
    assert np.isclose(summary["std"], std)
    assert np.allclose(summary["mean_ci"], (3.0 - 1.645 * sem, 3.0 + 1.645 * sem))
    assert np.allclose(summary["std_ci"], (std - 1.645 * std / np.sqrt(10), std + 1.645 * std / np.sqrt(10)))
    assert np.isclose(summary["skewness"], 0.0)
    assert summary["min"] == 1.0 and summary["max"] == 5.0


def test_describeseries_ignores_missing():
    summary = describeseries(pd.Series([1.0, np.nan, 3.0]))

    assert summary["n"] == 2
    assert np.isclose(summary["mean"], 2.0)


def test_stationaritytest_white_noise_is_stationary():
    rng = np.random.default_rng(7)
    x = rng.normal(size=1000)

    result = stationaritytest(x)

    assert result["stationary"]
    assert result["adf_pvalue"] < 0.01
    assert result["adf_nobs"] + result["adf_lags"] + 1 == len(x)


def test_stationaritytest_random_walk_is_not_stationary():
    rng = np.random.default_rng(11)
    walk = np.cumsum(rng.normal(size=2000))

    result = stationaritytest(walk)

    assert result["kpss_pvalue"] <= 0.05
    assert result["adf_pvalue"] > 0.05
    assert not result["stationary"]


def test_archeffecttest_detects_volatility_clustering(garch_returns):
    result = archeffecttest(garch_returns, lags=10)

    assert result["archeffect"]
    assert result["ljungbox_squared_pvalue"] < 0.01
    assert result["arch_lm_pvalue"] < 0.01
    assert 0.0 <= result["ljungbox_pvalue"] <= 1.0


def test_normalitytests_reject_fat_tails():
    rng = np.random.default_rng(3)
    x = rng.standard_t(df=3, size=2000)

    result = normalitytests(x)

    assert result["jarque_bera_pvalue"] < 0.01
    assert result["lilliefors_pvalue"] < 0.05
    assert result["shapiro_pvalue"] < 0.01
    assert result["anderson_statistic"] > 0.0
    assert result["anderson_pvalue"] < 0.01


def test_halfsplittest_detects_shift():
    rng = np.random.default_rng(5)
    x = np.concatenate([rng.normal(0.0, 1.0, 500), rng.normal(3.0, 1.0, 501)])

    result = halfsplittest(x)

    assert result["n_first"] == 500
    assert result["n_second"] == 501
    assert result["pvalue"] < 1e-6


def test_largestjumps_zscores():
    dates = pd.bdate_range("2024-01-01", periods=8)
    x = pd.Series([0.0, 1.0, -1.0, 5.0, -4.0, 0.5, -0.5, 2.0], index=dates)

    jumps = largestjumps(x, n=2)

    assert list(jumps.columns) == ["change", "z_score"]
    assert len(jumps) == 4
    assert list(jumps["change"]) == [5.0, 2.0, -4.0, -1.0]
    assert np.isclose(jumps["z_score"].iloc[0], (5.0 - x.mean()) / x.std())
    assert jumps.index[0] == dates[3]


def test_tests_run_without_future_warnings(garch_returns):
    with warnings.catch_warnings():
        warnings.simplefilter("error", FutureWarning)

        stationaritytest(garch_returns)
        normalitytests(garch_returns)
        archeffecttest(garch_returns, lags=10)
