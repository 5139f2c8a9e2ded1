import os
import warnings

from arch.utility.exceptions import ConvergenceWarning

from report_config import (MATURITY, MEAN_MODEL, RUNNING_MIN_WINDOW, RUNNING_OUTPUT,
	RUNNING_REFIT_EVERY)
from yield_data import loadreportyields, logreturn
from yield_garch import runninggarch
from yield_plots import plotconditionalvolatility

warnings.filterwarnings("ignore", category=ConvergenceWarning)


#### read in the bond yields from the fed

yieldsfull = loadreportyields()
log_returns = logreturn(yieldsfull[MATURITY])


##### Do the running GARCH computation
### could be made more efficient by refitting less often. One refit every RUNNING_REFIT_EVERY days keeps it to a few minutes.

print('\nStarting the running GARCH computation')

running_vol = runninggarch(log_returns, RUNNING_MIN_WINDOW, RUNNING_REFIT_EVERY, mean=MEAN_MODEL, verbose=True)
running_vol.name = f'GARCH_volatility_{MATURITY}_log_return (%)'

print('\nThe running GARCH(1,1) volatility is:')
print(running_vol)

sigmafit = running_vol.mean()


##### make a plot of the running GARCH

plotconditionalvolatility(log_returns, running_vol, f'Running {MATURITY} log return GARCH(1,1) volatility',
	f'Running_GARCH_volatility_{MATURITY}_log_return.jpg', longrun=sigmafit)


################# WRITE OUT RUNNING GARCH(1,1) VOLATILITY #############################

os.makedirs(os.path.dirname(RUNNING_OUTPUT), exist_ok=True)
running_vol.to_csv(RUNNING_OUTPUT, index=True, header=True)
