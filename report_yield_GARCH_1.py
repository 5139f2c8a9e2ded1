import warnings

import numpy as np
import pandas as pd
from arch.utility.exceptions import ConvergenceWarning
from statsmodels.tools.sm_exceptions import InterpolationWarning

from report_config import (CANDIDATE_DISTS, CANDIDATE_ORDERS, GOF_LAGS, HOLDOUT_FRACTIONS,
	HORIZON, MATURITY, MATURITY_CODES, MATURITY_YEARS, MEAN_MODEL, SELECTION_CRITERION, SIGNIFICANCE, TRADING_DAYS)
from yield_data import firstdifference, loadreportyields, logreturn, logyield, yieldcurveapprox
from yield_garch import (comparemodels, extrapolatevariance, fitgarch, fitteddistribution, garch11mle, garchforecast,
	garchpersistence, goodnessoffit, holdoutextrapolation, longrunvariance, selectmodel, volatilitytermstructure)
from yield_plots import (plotconditionalvolatility, plotforecast, plotholdout, plotpacf, plotqq, plottermstructure,
	plottimeseries, plotyieldcurve)
from yield_statistics import archeffecttest, describeseries, stationaritytest

pd.set_option('display.width', 200)
pd.set_option('display.max_columns', 20)

###### Careful: runtimewarning disabled here - harmless issue in the own code optimizer ########
###### convergence warnings of single candidates are kept in the comparison table instead ########
warnings.filterwarnings("ignore", category=RuntimeWarning)
warnings.filterwarnings("ignore", category=ConvergenceWarning)
warnings.filterwarnings("ignore", category=InterpolationWarning)


#### read in the bond yields from the fed

yieldsfull = loadreportyields()

print('\nThe bond yield dataframe is:')
print(yieldsfull)

yields = yieldsfull[MATURITY]


###### yield curve on the first and last day of the sample ######

available = [code for code in MATURITY_CODES if code in yieldsfull.columns]
if len(available) == len(MATURITY_CODES):
	curves = {}
	for obsdate in [yieldsfull.index[0], yieldsfull.index[-1]]:
		tempyields = yieldsfull.loc[obsdate, MATURITY_CODES].to_numpy()
		curves[obsdate.strftime('%Y-%m-%d')] = (tempyields, yieldcurveapprox(tempyields, MATURITY_YEARS))
	plotyieldcurve(curves, 'Yield_curve_first_and_last_day.jpg')


############################ TRANSFORMED SERIES #############################

yields_change = firstdifference(yields)
log_yields = logyield(yields)
log_returns = logreturn(yields)

for label, series in [('yield (%)', yields), ('yield change (bps)', yields_change), ('log yield', log_yields), ('log return (%)', log_returns)]:
	stats_dict = describeseries(series)
	print(f'\nSummary of the {MATURITY} {label}:')
	print(f"n = {stats_dict['n']}")
	print('Estimate mean from sample is:', stats_dict['mean'], 'Range:', *stats_dict['mean_ci'])
	print('Sample standard deviation is:', stats_dict['std'], 'Range:', *stats_dict['std_ci'])
	print(f"skewness = {stats_dict['skewness']}, excess kurtosis = {stats_dict['excess_kurtosis']}")

plottimeseries(yields, f'Time series of the {MATURITY} yield', 'Yield (%)', f'{MATURITY}_timeseries.jpg')
plottimeseries(yields_change, f'Daily change of the {MATURITY} yield', 'Change (bps)', f'{MATURITY}_change_timeseries.jpg')
plottimeseries(log_yields, f'Log of the {MATURITY} yield', 'log yield', f'{MATURITY}_log_timeseries.jpg')
plottimeseries(log_returns, f'Log return of the {MATURITY} yield', 'Log return (%)', f'{MATURITY}_log_return_timeseries.jpg')


############################ STATIONARITY ##################################

print('\nStationarity tests (ADF H0: unit root, KPSS H0: stationary):')
for label, series in [('yield level', yields), ('log return', log_returns)]:
	result = stationaritytest(series, SIGNIFICANCE)
	print(f"{label}: ADF = {result['adf_statistic']:.4f} (p = {result['adf_pvalue']:.4g}, lags = {result['adf_lags']}), "
		f"KPSS = {result['kpss_statistic']:.4f} (p = {result['kpss_pvalue']:.4g}), stationary: {result['stationary']}")


############################ ARCH EFFECT ##################################

arch_effect = archeffecttest(log_returns, GOF_LAGS, SIGNIFICANCE)

print(f'\nARCH effect tests for the {MATURITY} log return ({GOF_LAGS} lags):')
print(f"Ljung-Box on returns: Q = {arch_effect['ljungbox_statistic']:.4f}, p = {arch_effect['ljungbox_pvalue']:.4g}")
print(f"Ljung-Box on squared returns: Q = {arch_effect['ljungbox_squared_statistic']:.4f}, p = {arch_effect['ljungbox_squared_pvalue']:.4g}")
print(f"Ljung-Box on absolute returns: Q = {arch_effect['ljungbox_absolute_statistic']:.4f}, p = {arch_effect['ljungbox_absolute_pvalue']:.4g}")
print(f"Engle ARCH-LM: LM = {arch_effect['arch_lm_statistic']:.4f}, p = {arch_effect['arch_lm_pvalue']:.4g}")
print(f"ARCH effect present: {arch_effect['archeffect']}")

ui_array = log_returns.to_numpy()
plotpacf(ui_array, r'Partial Autocorrelation Function (PACF) Plot for $\Delta \log y$', f'Partial_Autocorrelations_{MATURITY}_log_return.jpg')
plotpacf((ui_array - ui_array.mean())**2, r'Partial Autocorrelation Function (PACF) Plot for $(\Delta \log y)^2$', f'Partial_Autocorrelations_{MATURITY}_log_return_squared.jpg')


############################ CANDIDATE MODELS ##################################

print(f'\nFitting {len(CANDIDATE_ORDERS)*len(CANDIDATE_DISTS)} candidate models to the {MATURITY} log return (%)')

comparison, fits = comparemodels(log_returns, CANDIDATE_ORDERS, CANDIDATE_DISTS, MEAN_MODEL, GOF_LAGS)

print('\nCandidate models ranked by BIC:')
print(comparison[['loglikelihood', 'num_params', 'aic', 'bic', 'persistence', 'converged', 'ljungbox_squared_pvalue', 'ks_pvalue']])

print('\nCandidate models ranked by AIC:')
print(comparison.sort_values('aic')[['aic', 'bic']])

selected = selectmodel(comparison, SELECTION_CRITERION, SIGNIFICANCE)
res = fits[selected]

print(f'\nThe selected model is {selected}')
print(res.summary())


############################ DIAGNOSTICS OF THE SELECTED MODEL ##################################

persistence = garchpersistence(res)
vlong = longrunvariance(res)
sigmafit = np.sqrt(vlong)

print(f'\nThe fitted values for {selected} are:')
print(res.params)
print(f'persistence = {persistence}')
if 'alpha[1]' in res.params and 'beta[1]' in res.params:
	print(f"alpha[1] + beta[1] = {res.params['alpha[1]'] + res.params['beta[1]']}")
print(f'The long term average volatility is: {sigmafit} (%)')
print(f'Annualized: {sigmafit*np.sqrt(TRADING_DAYS)} (%)')

gof = goodnessoffit(res, GOF_LAGS)

print('\nGoodness-of-fit of the standardized residuals:')
print(f"Ljung-Box: Q = {gof['ljungbox_statistic']:.4f}, p = {gof['ljungbox_pvalue']:.4g}")
print(f"Ljung-Box on squares: Q = {gof['ljungbox_squared_statistic']:.4f}, p = {gof['ljungbox_squared_pvalue']:.4g}")
print(f"ARCH-LM: LM = {gof['arch_lm_statistic']:.4f}, p = {gof['arch_lm_pvalue']:.4g}")
print(f"Jarque-Bera: JB = {gof['jarque_bera_statistic']:.4f}, p = {gof['jarque_bera_pvalue']:.4g}")
print(f"KS against the fitted {res.model.distribution.name} distribution: D = {gof['ks_statistic']:.4f}, p = {gof['ks_pvalue']:.4g}")

std_resid = res.std_resid.dropna()
distribution, dist_params = fitteddistribution(res)

plotpacf(std_resid.to_numpy()**2, r'Partial Autocorrelation Function (PACF) Plot for $\epsilon_i^2/\sigma_i^2$', f'Partial_Autocorrelations_{MATURITY}_std_resid_squared.jpg')
plotqq(std_resid, distribution, dist_params, f'Q-Q Plot of standardized residuals vs {distribution.name}', f'QQ_{MATURITY}_std_resid.jpg')


######################### OWN CODE GARCH(1,1) AS A CHECK ON THE ARCH LIBRARY ########

own = garch11mle(ui_array)
check = fitgarch(log_returns, 1, 0, 1, 'normal', 'Zero')

print('\nThe fitted values for the GARCH(1,1) analysis of Delta Log y (own code) are:')
print(f"omega = {own['omega']}")
print(f"alpha = {own['alpha']}")
print(f"beta = {own['beta']}")
print(f"alpha + beta = {own['persistence']}")
print(f"The long term average volatility is: {own['longrun_volatility']} (%)")
print('\nThe same fit with the arch library:')
print(check.params)

plotconditionalvolatility(log_returns, check.conditional_volatility, f'GARCH(1,1) Conditional Volatility for the {MATURITY} log return',
	f'GARCH_volatility_{MATURITY}_own_code_vs_library.jpg', longrun=own['longrun_volatility'], ownvolatility=np.sqrt(own['variance']))
plotconditionalvolatility(log_returns, res.conditional_volatility, f'{selected} Conditional Volatility for the {MATURITY} log return',
	f'GARCH_volatility_{MATURITY}_selected.jpg', longrun=sigmafit)


############################ FORECAST ##################################

forecast_df = garchforecast(res, HORIZON)
forecast_dates = pd.bdate_range(log_returns.index[-1] + pd.offsets.BDay(1), periods=HORIZON)
forecast_df['date'] = forecast_dates

print(f'\nThe {HORIZON}-step-ahead forecast of the {MATURITY} log return (%) is:')
print(forecast_df)

if res.model.volatility.o == 0 and res.model.volatility.p == 1 and res.model.volatility.q == 1:
	analytic = np.concatenate(([forecast_df['variance'].iloc[0]], extrapolatevariance(vlong, persistence, forecast_df['variance'].iloc[0], HORIZON - 1)))
	print(f"Largest gap to the analytic GARCH(1,1) extrapolation: {np.max(np.abs(analytic - forecast_df['variance'].to_numpy()))}")

plotforecast(res.conditional_volatility, forecast_df, forecast_dates, f'{selected}: {HORIZON}-day volatility forecast for {MATURITY}', f'GARCH_forecast_{MATURITY}.jpg')


##### FIT ON THE FIRST PART OF THE DATASET AND THEN PROJECT VOLATILITY INTO THE FUTURE ######

best = comparison.loc[selected]
holdouts = {}
for fraction in HOLDOUT_FRACTIONS:
	label = f'{fraction:.0%}'
	holdouts[label] = holdoutextrapolation(log_returns, fraction, int(best['p']), int(best['o']), int(best['q']), best['dist'], MEAN_MODEL)
	print(f"\nFit on the first {label} of the data (up to {holdouts[label]['split_date']:%Y-%m-%d}): "
		f"persistence = {holdouts[label]['persistence']}, long term volatility = {np.sqrt(holdouts[label]['vlong'])} (%)")

plotholdout(res.conditional_volatility, holdouts, sigmafit, f'{MATURITY} log return {selected} volatility', f'GARCH_volatility_{MATURITY}_with_prediction.jpg')


##################### ESTIMATE VOLATILITY TERM STRUCTURE AND PLOT  ############

x = np.linspace(0.0001, 2, 1000)
termcurves = {}
for label, holdout in holdouts.items():
	if holdout['persistence'] < 1:
		termcurves[rf"$\overline{{\sigma}} (T-t)$ for t = {holdout['split_date']:%Y-%m-%d}"] = volatilitytermstructure(holdout['vlong'], holdout['persistence'], holdout['vzero'], TRADING_DAYS*x)
if persistence < 1:
	termcurves[rf'$\overline{{\sigma}} (T-t)$ for t = {forecast_dates[0]:%Y-%m-%d}'] = volatilitytermstructure(vlong, persistence, forecast_df['variance'].iloc[0], TRADING_DAYS*x)

plottermstructure(x, termcurves, rf'Annualized Volatility Term Structure For $\Delta \log$ {MATURITY}', f'Volatility_term_structure_{MATURITY}.jpg')
