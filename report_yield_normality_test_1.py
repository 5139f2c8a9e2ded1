import matplotlib.pyplot as plt
import numpy as np
import scipy.stats as stats
import statsmodels.api as sm

from report_config import MATURITY
from yield_data import consecutivedays, firstdifference, fullweekchanges, loadreportyields, logreturn, logyield
from yield_plots import plothistogram, savefigure
from yield_statistics import describeseries, halfsplittest, largestjumps, normalitytests

plt.rcParams.update({'font.size': 12})


def printsummary(label, x):
	stats_dict = describeseries(x)
	print(f'\nEstimate mean from sample is ({label}):', stats_dict['mean'], 'Range:', *stats_dict['mean_ci'])
	print(f'Sample standard deviation is ({label}):', stats_dict['std'], 'Range:', *stats_dict['std_ci'])
	return(stats_dict)

def printnormality(label, x):
	result = normalitytests(x)
	print(f'\nNormality tests for {label}')
	print(f"Lilliefors KS Statistic: {result['lilliefors_statistic']}, P-value: {result['lilliefors_pvalue']}")
	print(f"Shapiro-Wilk Statistic: {result['shapiro_statistic']}, P-value: {result['shapiro_pvalue']}")
	print(f"Jarque-Bera Statistic: {result['jarque_bera_statistic']}, P-value: {result['jarque_bera_pvalue']}")
	print(f"Anderson-Darling Statistic: {result['anderson_statistic']}, P-value: {result['anderson_pvalue']}")
	return(result)


#### read in the bond yields from the fed

yieldsfull = loadreportyields()
yields = yieldsfull[MATURITY]

##### keep only data from consecutive trading days (daydelta == 1)

yields_change = consecutivedays(firstdifference(yields), yields)
log_returns = consecutivedays(logreturn(yields), yields)

print(f'\nKeeping only changes between consecutive calendar days leaves {len(yields_change)} of {len(yields) - 1} daily changes')


######### TEST THE NORMAL HYPOTHESIS FOR THE YIELD CHANGE (bps) AND THE LOG RETURN #################

samples = [('yield change (bps)', yields_change, r'$\Delta y$ (bps)', 'change'),
	('log return (%)', log_returns, r'$\Delta \log y$ (%)', 'log_return')]

dailyranges = {}
for label, series, xlabel, tag in samples:
	stats_dict = printsummary(label, series)
	dailyranges[label] = stats_dict['std_ci']

	printnormality(label, series)

	plothistogram(series, f'Histogram of the {MATURITY} {label}', xlabel, f'PDF_{MATURITY}_{tag}.jpg')

	stats.probplot(series.to_numpy(), dist='norm', plot=plt)
	plt.title(f'Q-Q Plot of the {MATURITY} {label} vs Normal Distribution')
	plt.xlabel('Theoretical Quantiles')
	plt.ylabel(f'Observed Data Quantiles {xlabel}')
	plt.grid(True)
	savefigure(f'QQ_{MATURITY}_{tag}.jpg')

	print(f'\nLargest jumps for the {label}:')
	print(largestjumps(series))


############# SPLIT IN HALF AND TEST WHETHER THE TWO HALVES ARE DESCRIBED BY THE SAME DISTRIBUTION #################

for label, series, xlabel, tag in samples:
	half_index = len(series) // 2
	first_half = series.iloc[:half_index]
	second_half = series.iloc[half_index:]

	printsummary(f'first half, {label}', first_half)
	printsummary(f'second half, {label}', second_half)
	printnormality(f'first half, {label}', first_half)
	printnormality(f'second half, {label}', second_half)

	result = halfsplittest(series)
	print(f'\nTwo sample Kolmogorov-Smirnov test. First half vs Second half of the data ({label}):')
	print(f"KS Statistic: {result['ks_statistic']}")
	print(f"P-value: {result['pvalue']}")

	sm.qqplot_2samples(first_half.to_numpy(), second_half.to_numpy(), line='45')
	plt.title(f'Q-Q Plot of 1st Half vs 2nd Half, {label}')
	plt.xlabel(f'Quantiles of 1st Half {xlabel}')
	plt.ylabel(f'Quantiles of 2nd Half {xlabel}')
	plt.grid(True)
	savefigure(f'QQ2sample_{MATURITY}_{tag}.jpg')


##############################################  WEEKLY CHANGE ANALYSIS ##############################################
#### weekly changes use all the days again, a full week is five consecutive calendar days

weekly_samples = [('yield change (bps)', fullweekchanges(yields)*100),
	('log return (%)', fullweekchanges(logyield(yields))*100)]

for label, weekly in weekly_samples:
	print(f'\nWeekly {label} from {len(weekly)} full trading weeks')
	stats_dict = printsummary(f'weekly {label}', weekly)
	printnormality(f'weekly {label}', weekly)

	minrange, maxrange = dailyranges[label]
	print(f'\nThe volatility 90% CI range for the weekly {label} is:', *stats_dict['std_ci'])
	print(f'The volatility 90% CI range for the daily {label} times sqrt(4) is:', minrange*np.sqrt(4), maxrange*np.sqrt(4))

	print(f'\nLargest jumps for the weekly {label}:')
	print(largestjumps(weekly))
