import os

import numpy as np
import pandas as pd
from scipy.interpolate import interp1d

from report_config import DATA_DIR, DATA_FILE, DATE_COLUMN, MATURITY_CODES, MATURITY_YEARS


#### read in the bond yields from the fed
#### FRED writes a missing observation as '.', so treat that as NaN and drop the row

def loadyields(path, datecolumn=DATE_COLUMN, maturities=None):
	yieldsfull = pd.read_csv(path, na_values=['.'])
	yieldsfull[datecolumn] = pd.to_datetime(yieldsfull[datecolumn])
	yieldsfull = yieldsfull.set_index(datecolumn).sort_index()

	if maturities is not None:
		yieldsfull = yieldsfull[list(maturities)]

	yieldsfull = yieldsfull.apply(pd.to_numeric, errors='coerce')
	return(yieldsfull.dropna())


#### same thing when every maturity sits in its own file, e.g. ./data/DGS20.csv

def loadfredyields(datadir=DATA_DIR, maturities=MATURITY_CODES, datecolumn=DATE_COLUMN):
	columns = []
	for code in maturities:
		tempyields = pd.read_csv(os.path.join(datadir, f'{code}.csv'), na_values=['.'])
		tempyields[datecolumn] = pd.to_datetime(tempyields[datecolumn])
		columns.append(tempyields.set_index(datecolumn)[code])

	yieldsfull = pd.concat(columns, axis=1).sort_index()
	yieldsfull.index.name = datecolumn
	yieldsfull = yieldsfull.apply(pd.to_numeric, errors='coerce')
	return(yieldsfull.dropna())


#### the reports read DATA_FILE, or the per-maturity FRED files in DATA_DIR when DATA_FILE is None

def loadreportyields(datafile=DATA_FILE, datadir=DATA_DIR, datecolumn=DATE_COLUMN, maturities=MATURITY_CODES):
	if datafile is None:
		return(loadfredyields(datadir, maturities, datecolumn))
	return(loadyields(datafile, datecolumn))


##### derived series. Yields are quoted in percent so one unit of yield is 100 bps

def firstdifference(series):
	return((series.diff()*100).dropna())

def logyield(series):
	return(np.log(series.where(series > 0)).dropna())

def logreturn(series):
	'''
	Change of the log yield in percent. Non-positive yields have no log, and the
	changes touching them are dropped.
	'''
	logs = np.log(series.where(series > 0))
	return((logs.diff()*100).dropna())


######## calendar gap to the previous entry (in days)

def daydelta(series):
	dates = series.index.to_series()
	return(dates.diff().dt.days)

##### Only keep changes with a calendar gap equal to one, gaps measured on the levels the changes came from

def consecutivedays(changes, levels):
	gap = daydelta(levels).reindex(changes.index)
	return(changes[gap == 1])

#### the trick is to find places in the data where four days in a row have a calendar gap equal to 1
#### those rows close a full Monday to Friday trading week

def fullweekchanges(series):
	gap = daydelta(series)
	endoffullweek = (gap == 1).astype(int).rolling(4).sum() == 4
	return(series.diff(4)[endoffullweek])


### cubic interpolation of one day's yield curve, maturities in years

def yieldcurveapprox(row, maturityyears=MATURITY_YEARS):
	maturities = np.array(maturityyears, dtype=float)
	tempyields = np.asarray(row, dtype=float)

	interpolating_function = interp1d(maturities, tempyields, kind='cubic')
	return(interpolating_function)
