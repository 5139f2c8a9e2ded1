import os

import matplotlib.dates as mdates
import matplotlib.pyplot as plt
import numpy as np
from scipy.stats import norm
from statsmodels.graphics.tsaplots import plot_pacf

from report_config import MATURITY_YEARS, PLOTS_DIR

plt.rcParams.update({'font.size': 12})


def savefigure(filename, plotsdir=PLOTS_DIR):
	os.makedirs(plotsdir, exist_ok=True)
	path = os.path.join(plotsdir, filename)
	plt.savefig(path)
	plt.close('all')
	return(path)


def _dateaxis():
	plt.xticks(rotation=45, ha='right')
	ax = plt.gca()
	ax.xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m-%d'))
	plt.tight_layout()
	plt.grid(True)


def plottimeseries(series, title, ylabel, filename, plotsdir=PLOTS_DIR):
	plt.figure(figsize=(8, 6))
	plt.plot(series.index, series.to_numpy(), linestyle='-', label=series.name)
	plt.legend()
	plt.title(title)
	plt.xlabel('Date')
	plt.ylabel(ylabel)
	_dateaxis()
	return(savefigure(filename, plotsdir))


################## Partial Autocorrelation Function (PACF) ################################

def plotpacf(x, title, filename, lags=10, plotsdir=PLOTS_DIR):
	fig, ax = plt.subplots(figsize=(10, 5))
	plot_pacf(np.asarray(x, dtype=float), lags=lags, ax=ax)
	plt.title(title)
	plt.xlabel('Lag')
	plt.ylabel('Partial Autocorrelation Coefficient')
	return(savefigure(filename, plotsdir))


# histogram of the data against the normal pdf with the sample mean and std

def plothistogram(x, title, xlabel, filename, plotsdir=PLOTS_DIR):
	fig, ax = plt.subplots(figsize=(8, 5))
	x_values = np.sort(np.asarray(x, dtype=float))
	pdf = norm.pdf(x_values, x_values.mean(), x_values.std(ddof=1))

	ax.hist(x_values, bins=60, density=True, alpha=0.6, color='blue')
	ax.plot(x_values, pdf, color='red', linewidth=2, label='Normal Distribution Fit')
	plt.title(title)
	plt.xlabel(xlabel)
	plt.ylabel('Normalized Frequency')
	plt.legend()
	return(savefigure(filename, plotsdir))


#### Q-Q plot of standardized residuals against the fitted innovation distribution

def plotqq(std_resid, distribution, dist_params, title, filename, plotsdir=PLOTS_DIR):
	observed = np.sort(np.asarray(std_resid, dtype=float))
	n = len(observed)
	pits = (np.arange(1, n + 1) - 0.5)/n
	theoretical = distribution.ppf(pits, dist_params)

	plt.figure(figsize=(8, 6))
	plt.plot(theoretical, observed, 'o', markersize=3, color='tab:blue')
	plt.plot(theoretical, theoretical, color='r', linestyle='-', label='45 degree line')
	plt.title(title)
	plt.xlabel('Theoretical Quantiles')
	plt.ylabel('Standardized Residual Quantiles')
	plt.grid(True)
	plt.legend()
	return(savefigure(filename, plotsdir))


def plotconditionalvolatility(returns, volatility, title, filename, longrun=None, ownvolatility=None, plotsdir=PLOTS_DIR):
	plt.figure(figsize=(12, 6))
	plt.plot(returns.index, returns.to_numpy(), color='grey', alpha=0.5, label='Returns')
	plt.plot(volatility.index, volatility.to_numpy(), color='red', label=r'$\sigma(t)$ arch package')
	if ownvolatility is not None:
		plt.plot(volatility.index, ownvolatility, color='blue', linestyle='-', label=r'$\sigma(t)$ own code')
	if longrun is not None:
		plt.axhline(y=longrun, color='r', linestyle='--', label=r'Long term $\sigma$')
	plt.title(title)
	plt.legend()
	return(savefigure(filename, plotsdir))


##### last stretch of the fitted volatility followed by the h-step forecast

def plotforecast(volatility, forecast_df, dates, title, filename, history=120, plotsdir=PLOTS_DIR):
	recent = volatility.iloc[-history:]

	plt.figure(figsize=(8, 6))
	plt.plot(recent.index, recent.to_numpy(), linestyle='-', color='tab:blue', label=r'$\sigma(t)$ fitted')
	plt.plot(dates, forecast_df['volatility'].to_numpy(), 'o-', color='red', label=r'$\sigma(t)$ forecast')
	plt.legend()
	plt.title(title)
	plt.ylabel(r'Volatility $\sigma$ (%)')
	_dateaxis()
	return(savefigure(filename, plotsdir))


##### fitted volatility together with the extrapolations from the first parts of the data

def plotholdout(volatility, holdouts, longrun, title, filename, plotsdir=PLOTS_DIR):
	colors = ['green', 'red', 'purple', 'orange']

	plt.figure(figsize=(8, 6))
	plt.plot(volatility.index, volatility.to_numpy(), linestyle='-', color='tab:blue', label=r'$\sigma(t)$ (%)')
	for (label, holdout), color in zip(holdouts.items(), colors):
		extrapolated = holdout['extrapolated']
		plt.plot(extrapolated.index, extrapolated.to_numpy(), linestyle='-', linewidth=2, color=color, label=rf'$\sigma(t)$ (%) extrapolated from first {label} of data')
		plt.axhline(y=np.sqrt(holdout['vlong']), color=color, linestyle='--', label=rf'Long term $\sigma$ (%) from first {label} of data')
	plt.axhline(y=longrun, color='tab:blue', linestyle='--', label=r'Long term $\sigma$ (%)')
	plt.legend()
	plt.title(title)
	plt.xlabel('Date')
	plt.ylabel(r'Volatility $\sigma$ (%)')
	_dateaxis()
	return(savefigure(filename, plotsdir))


def plottermstructure(x, curves, title, filename, plotsdir=PLOTS_DIR):
	plt.figure(figsize=(8, 6))
	for label, y in curves.items():
		plt.plot(x, y, label=label)
	plt.title(title)
	plt.xlabel('T - t  (years)')
	plt.ylabel(r'$\overline{\sigma} (T-t)$ (%)')
	plt.grid(True)
	plt.legend()
	plt.xlim(0, x[-1])
	return(savefigure(filename, plotsdir))


def plotyieldcurve(curves, filename, maturityyears=MATURITY_YEARS, plotsdir=PLOTS_DIR):
	x_new = np.linspace(maturityyears[0], maturityyears[-1], 1000)

	plt.figure(figsize=(8, 6))
	for label, (tempyields, interpolating_function) in curves.items():
		line, = plt.plot(x_new, interpolating_function(x_new), '-', label=f'Interpolated curve {label}')
		plt.plot(maturityyears, tempyields, 'o', color=line.get_color())
	plt.legend()
	plt.title('Treasury yield curve')
	plt.xlabel('Maturity (years)')
	plt.ylabel('Yield (%)')
	plt.grid(True)
	return(savefigure(filename, plotsdir))
