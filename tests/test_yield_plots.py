# tests/test_yield_plots.py
import os

import numpy as np
import pandas as pd

from report_config import MATURITY_YEARS
from yield_data import yieldcurveapprox
from yield_garch import fitgarch, fitteddistribution, garchforecast, holdoutextrapolation, volatilitytermstructure
from yield_plots import (
    plotconditionalvolatility,
    plotforecast,
    plothistogram,
    plotholdout,
    plotpacf,
    plotqq,
    plottermstructure,
    plottimeseries,
    plotyieldcurve,
)


def test_series_plots_are_written(tmp_path, garch_returns):
    plotsdir = str(tmp_path / "plots")

    paths = [
        plottimeseries(garch_returns, "log return", "Log return (%)", "ts.jpg", plotsdir=plotsdir),
        plotpacf(garch_returns.to_numpy() ** 2, "PACF", "pacf.jpg", plotsdir=plotsdir),
        plothistogram(garch_returns, "hist", "x", "hist.jpg", plotsdir=plotsdir),
    ]

    for path in paths:
        assert os.path.dirname(path) == plotsdir
        assert os.path.getsize(path) > 0


def test_fit_plots_are_written(tmp_path, garch_returns):
    plotsdir = str(tmp_path)
    res = fitgarch(garch_returns, 1, 0, 1, "t", "Constant")
    distribution, dist_params = fitteddistribution(res)
    forecast_df = garchforecast(res, 10)
    dates = pd.bdate_range(garch_returns.index[-1] + pd.offsets.BDay(1), periods=10)
    holdout = holdoutextrapolation(garch_returns, 0.75, 1, 0, 1, "t", "Constant")
    x = np.linspace(0.0001, 2, 50)
    curve = volatilitytermstructure(holdout["vlong"], holdout["persistence"], holdout["vzero"], 252 * x)

    paths = [
        plotqq(res.std_resid, distribution, dist_params, "qq", "qq.jpg", plotsdir=plotsdir),
        plotconditionalvolatility(garch_returns, res.conditional_volatility, "vol", "vol.jpg", longrun=1.0, plotsdir=plotsdir),
        plotforecast(res.conditional_volatility, forecast_df, dates, "forecast", "forecast.jpg", plotsdir=plotsdir),
        plotholdout(res.conditional_volatility, {"75%": holdout}, 1.0, "holdout", "holdout.jpg", plotsdir=plotsdir),
        plottermstructure(x, {"term": curve}, "term", "term.jpg", plotsdir=plotsdir),
    ]

    for path in paths:
        assert os.path.getsize(path) > 0


def test_yieldcurve_plot_is_written(tmp_path):
    row = np.array([5.3, 5.4, 5.3, 4.9, 4.4, 4.2, 4.0, 4.05, 4.1, 4.4, 4.3])
    curves = {"2024-01-02": (row, yieldcurveapprox(row, MATURITY_YEARS))}

    path = plotyieldcurve(curves, "curve.jpg", plotsdir=str(tmp_path))

    assert os.path.getsize(path) > 0
