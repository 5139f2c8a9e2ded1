import numpy as np
import pandas as pd
import scipy.stats as stats
from arch import arch_model
from scipy.optimize import minimize
from statsmodels.stats.diagnostic import acorr_ljungbox, het_arch

from report_config import GOF_LAGS, HORIZON, MEAN_MODEL, SIGNIFICANCE, TRADING_DAYS


############################### GARCH FITS WITH THE ARCH LIBRARY #############################
#### p lagged squared residuals (alpha), o asymmetric terms (gamma), q lagged variances (beta)
#### returns should already be scaled (log returns in %), so no rescaling here

def fitgarch(returns, p=1, o=0, q=1, dist='normal', mean=MEAN_MODEL):
	model = arch_model(returns, mean=mean, vol='GARCH', p=p, o=o, q=q, dist=dist, rescale=False)
	return(model.fit(disp='off'))

def modelname(p, o, q, dist):
	if o > 0:
		return(f'GJR-GARCH({p},{o},{q}) {dist}')
	return(f'GARCH({p},{q}) {dist}')


#### alpha + beta, asymmetric terms count half since they only act on negative shocks

def garchpersistence(res):
	params = res.params
	alphas = params[params.index.str.startswith('alpha[')].sum()
	gammas = params[params.index.str.startswith('gamma[')].sum()
	betas = params[params.index.str.startswith('beta[')].sum()
	return(float(alphas + 0.5*gammas + betas))

def longrunvariance(res):
	persistence = garchpersistence(res)
	if persistence >= 1:
		return(np.nan)
	return(float(res.params['omega']/(1 - persistence)))


#### the innovation distribution of a fit, together with its shape parameters (empty for the normal)

def fitteddistribution(res):
	distribution = res.model.distribution
	params = np.asarray(res.params, dtype=float)
	return(distribution, params[len(params) - distribution.num_params:])


def goodnessoffit(res, lags=GOF_LAGS):
	"""
	Post-estimation checks on the standardized residuals of a fit.

	If the model is correctly specified the standardized residuals carry no
	autocorrelation, their squares carry no remaining ARCH effect, and they
	follow the fitted innovation distribution (one-sample KS test).
	"""
	std_resid = res.std_resid.dropna().to_numpy()
	distribution, dist_params = fitteddistribution(res)

	lb = acorr_ljungbox(std_resid, lags=[lags], return_df=True).iloc[0]
	lbsquared = acorr_ljungbox(std_resid**2, lags=[lags], return_df=True).iloc[0]
	archlm = het_arch(std_resid, nlags=lags, result_object=True)
	jb_statistic, jb_pvalue = stats.jarque_bera(std_resid)
	ks_statistic, ks_pvalue = stats.kstest(std_resid, lambda x: distribution.cdf(x, dist_params))

	return({
		'ljungbox_statistic': lb['lb_stat'],
		'ljungbox_pvalue': lb['lb_pvalue'],
		'ljungbox_squared_statistic': lbsquared['lb_stat'],
		'ljungbox_squared_pvalue': lbsquared['lb_pvalue'],
		'arch_lm_statistic': archlm.lm,
		'arch_lm_pvalue': archlm.lmpval,
		'jarque_bera_statistic': jb_statistic,
		'jarque_bera_pvalue': jb_pvalue,
		'ks_statistic': ks_statistic,
		'ks_pvalue': ks_pvalue,
	})


##### fit every candidate and put the information criteria side by side

def comparemodels(returns, orders, dists, mean=MEAN_MODEL, lags=GOF_LAGS):
	rows = []
	fits = {}

	for p, o, q in orders:
		for dist in dists:
			name = modelname(p, o, q, dist)
			res = fitgarch(returns, p, o, q, dist, mean)
			gof = goodnessoffit(res, lags)

			rows.append({
				'model': name,
				'p': p,
				'o': o,
				'q': q,
				'dist': dist,
				'loglikelihood': res.loglikelihood,
				'num_params': res.num_params,
				'aic': res.aic,
				'bic': res.bic,
				'persistence': garchpersistence(res),
				'converged': res.convergence_flag == 0,
				'ljungbox_pvalue': gof['ljungbox_pvalue'],
				'ljungbox_squared_pvalue': gof['ljungbox_squared_pvalue'],
				'arch_lm_pvalue': gof['arch_lm_pvalue'],
				'ks_pvalue': gof['ks_pvalue'],
			})
			fits[name] = res

	table = pd.DataFrame(rows).set_index('model').sort_values('bic')
	return(table, fits)


def selectmodel(table, criterion='bic', alpha=SIGNIFICANCE):
	'''
	Among converged, covariance stationary candidates with no autocorrelation left in the squared
	standardized residuals take the one with the smallest criterion. If none passes the checks,
	fall back to the smallest criterion among the converged fits.
	'''
	converged = table[table['converged']]
	if len(converged) == 0:
		raise ValueError('no candidate model in the comparison table converged')

	passing = converged[(converged['persistence'] < 1) & (converged['ljungbox_squared_pvalue'] > alpha)]

	if len(passing) == 0:
		passing = converged
	return(passing[criterion].idxmin())


################## FORECASTS #####################################

def garchforecast(res, horizon=HORIZON):
	forecasts = res.forecast(horizon=horizon, reindex=False)
	variance = forecasts.variance.iloc[-1].to_numpy()
	mean = forecasts.mean.iloc[-1].to_numpy()

	forecast_df = pd.DataFrame({'h': np.arange(1, horizon + 1), 'mean': mean, 'variance': variance, 'volatility': np.sqrt(variance)})
	return(forecast_df.set_index('h'))


#### extrapolation step: V(k) = VL + (alpha+beta)^k (V(0) - VL)

def extrapolatevariance(vlong, persistence, vstart, steps):
	k = np.arange(1, steps + 1)
	return(vlong + persistence**k*(vstart - vlong))


############# VOLATILITY TERM STRUCTURE - average variance over the next T days, annualized

def volatilitytermstructure(vlong, persistence, vzero, T, periods=TRADING_DAYS):
	aparameter = -np.log(persistence)
	T = np.asarray(T, dtype=float)

	sigmaestimate2 = periods*(vlong + (1 - np.exp(-aparameter*T))/(aparameter*T)*(vzero - vlong))
	return(np.sqrt(sigmaestimate2))


############################# OWN CODE GARCH(1,1), used as a check on the library ##################

def garchvariancepath(u, omega, alpha, beta):
	ui_array = np.asarray(u, dtype=float)
	vi_array = np.zeros(len(ui_array))

	vi_array[0] = omega/(1-alpha-beta)
	for i in range(1,len(vi_array)):
		vi_array[i] =  omega + alpha*ui_array[i-1]**2 + beta*vi_array[i-1]
	return(vi_array)


def garch11mle(returns):
	ui_array = np.asarray(returns, dtype=float)

	def objectivefunc(q):
		vitemp = garchvariancepath(ui_array, q[0], q[1], q[2])
		terms = np.log(vitemp) + ui_array**2/vitemp
		return(np.sum(terms))

	#### initial guess ####
	q0 = [0.01,0.01,0.9]

	##### constraints ########
	cons = [{'type':'ineq', 'fun': lambda q: q - 0.000001},
		{'type':'ineq', 'fun': lambda q: 0.9999 - q[1] - q[2] }]

	res1 = minimize(objectivefunc, q0, method='SLSQP', constraints=cons, bounds=None, tol=1e-10)

	omegafit = res1.x[0]
	alphafit = res1.x[1]
	betafit = res1.x[2]

	return({
		'omega': omegafit,
		'alpha': alphafit,
		'beta': betafit,
		'persistence': alphafit + betafit,
		'longrun_volatility': np.sqrt(omegafit/(1-alphafit-betafit)),
		'variance': garchvariancepath(ui_array, omegafit, alphafit, betafit),
		'success': res1.success,
	})


##### FIT ON THE FIRST PART OF THE SAMPLE AND PROJECT VOLATILITY OVER THE REST ######

def holdoutextrapolation(returns, fraction, p=1, o=0, q=1, dist='normal', mean=MEAN_MODEL):
	returns = pd.Series(returns).dropna()
	nshort = int(len(returns)*fraction)

	res = fitgarch(returns.iloc[:nshort], p, o, q, dist, mean)
	forecasts = res.forecast(horizon=len(returns) - nshort, reindex=False)
	variance = forecasts.variance.iloc[-1].to_numpy()

	return({
		'fit': res,
		'split_date': returns.index[nshort],
		'insample': res.conditional_volatility,
		'extrapolated': pd.Series(np.sqrt(variance), index=returns.index[nshort:]),
		'persistence': garchpersistence(res),
		'vlong': longrunvariance(res),
		'vzero': variance[0],
	})


###### GARCH volatility using only the data up to the present day  --- if under minwindow days of data: use data up to the minwindow-th day.
### parameters are re-estimated once per block of refitevery days and held fixed inside the block
### after the first minwindow days a block is fitted on the days before it, never on the block itself

def runninggarch(returns, minwindow=1000, refitevery=21, p=1, o=0, q=1, dist='normal', mean=MEAN_MODEL, verbose=False):
	returns = pd.Series(returns).dropna()
	n = len(returns)
	model = arch_model(returns, mean=mean, vol='GARCH', p=p, o=o, q=q, dist=dist, rescale=False)

	runningvol = pd.Series(np.nan, index=returns.index)
	start = 0
	while start < n:
		end = min(n, minwindow if start == 0 else start + refitevery)
		window = max(start, minwindow)

		res = fitgarch(returns.iloc[:window], p, o, q, dist, mean)
		fixed = model.fix(res.params)
		runningvol.iloc[start:end] = fixed.conditional_volatility.iloc[start:end].to_numpy()

		if verbose:
			print(f'{end/n*100:.2f} % complete')
		start = end

	return(runningvol)
