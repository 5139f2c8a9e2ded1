import numpy as np
import pandas as pd
import scipy.stats as stats
from statsmodels.stats.diagnostic import acorr_ljungbox, het_arch, lilliefors, normal_ad
from statsmodels.tsa.stattools import adfuller, kpss


def _clean(x):
	return(pd.Series(x, dtype=float).dropna())


### calculate mean etc. with the 90% confidence ranges used throughout the reports

def describeseries(x):
	x = _clean(x)
	n = len(x)

	mean = x.mean()
	sem = x.sem()
	std = x.std()
	stdhalfwidth = 1.645*std/np.sqrt(2*n)

	return({
		'n': n,
		'mean': mean,
		'mean_ci': (mean - 1.645*sem, mean + 1.645*sem),
		'std': std,
		'std_ci': (std - stdhalfwidth, std + stdhalfwidth),
		'skewness': stats.skew(x),
		'excess_kurtosis': stats.kurtosis(x, fisher=True),
		'min': x.min(),
		'max': x.max(),
	})


### Now perform various statistical tests against the normal distribution

def normalitytests(x):
	x = _clean(x).to_numpy()

	ks_statistic, ks_pvalue = lilliefors(x, dist='norm', pvalmethod='approx')
	shapiro_statistic, shapiro_pvalue = stats.shapiro(x)
	jb_statistic, jb_pvalue = stats.jarque_bera(x)
	ad_statistic, ad_pvalue = normal_ad(x)

	return({
		'lilliefors_statistic': ks_statistic,
		'lilliefors_pvalue': ks_pvalue,
		'shapiro_statistic': shapiro_statistic,
		'shapiro_pvalue': shapiro_pvalue,
		'jarque_bera_statistic': jb_statistic,
		'jarque_bera_pvalue': jb_pvalue,
		'anderson_statistic': ad_statistic,
		'anderson_pvalue': ad_pvalue,
	})


############# SPLIT IN HALF - are the two halves described by the same distribution?

def halfsplittest(x):
	x = _clean(x).to_numpy()
	half_index = len(x) // 2

	ks_statistic, p_value = stats.ks_2samp(x[:half_index], x[half_index:])
	return({'ks_statistic': ks_statistic, 'pvalue': p_value, 'n_first': half_index, 'n_second': len(x) - half_index})


def stationaritytest(x, significance=0.05):
	"""
	Augmented Dickey-Fuller (H0: unit root) and KPSS (H0: level stationary).

	The series counts as stationary when ADF rejects the unit root.
	"""
	x = _clean(x)

	adf = adfuller(x, autolag='AIC', regression='c', result_object=True)
	kp = kpss(x, regression='c', nlags='auto', result_object=True)

	return({
		'adf_statistic': adf.statistic,
		'adf_pvalue': adf.pvalue,
		'adf_lags': adf.lags,
		'adf_nobs': adf.nobs,
		'adf_critical_values': adf.critical_values,
		'kpss_statistic': kp.statistic,
		'kpss_pvalue': kp.pvalue,
		'kpss_lags': kp.lags,
		'stationary': adf.pvalue < significance,
	})


'''
Note: A time series with small autocorrelation but large autocorrelation in its squared values exhibits
strong non-linear dependencies, specifically a characteristic known as volatility clustering.
'''

def archeffecttest(x, lags=10, significance=0.05):
	x = _clean(x).to_numpy()
	demeaned = x - x.mean()

	lb = acorr_ljungbox(demeaned, lags=[lags], return_df=True).iloc[0]
	lbsquared = acorr_ljungbox(demeaned**2, lags=[lags], return_df=True).iloc[0]
	lbabsolute = acorr_ljungbox(np.abs(demeaned), lags=[lags], return_df=True).iloc[0]
	archlm = het_arch(demeaned, nlags=lags, result_object=True)

	return({
		'ljungbox_statistic': lb['lb_stat'],
		'ljungbox_pvalue': lb['lb_pvalue'],
		'ljungbox_squared_statistic': lbsquared['lb_stat'],
		'ljungbox_squared_pvalue': lbsquared['lb_pvalue'],
		'ljungbox_absolute_statistic': lbabsolute['lb_stat'],
		'ljungbox_absolute_pvalue': lbabsolute['lb_pvalue'],
		'arch_lm_statistic': archlm.lm,
		'arch_lm_pvalue': archlm.lmpval,
		'archeffect': lbsquared['lb_pvalue'] < significance,
	})


#### the n largest positive and negative jumps with their z-scores

def largestjumps(x, n=5):
	x = _clean(x)
	jumps = pd.concat([x.nlargest(n), x.nsmallest(n)])
	return(pd.DataFrame({'change': jumps, 'z_score': (jumps - x.mean())/x.std()}))
