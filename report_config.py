#### settings shared by the report scripts

DATA_DIR = './data'
PLOTS_DIR = './plots'

#### one csv, date column plus one column per maturity (FRED names)
#### set DATA_FILE = None to read one FRED file per maturity from DATA_DIR instead, e.g. ./data/DGS20.csv
DATA_FILE = './data/yields.csv'
DATE_COLUMN = 'observation_date'

MATURITY_CODES = ['DGS1MO', 'DGS3MO', 'DGS6MO', 'DGS1', 'DGS2', 'DGS3', 'DGS5', 'DGS7', 'DGS10', 'DGS20', 'DGS30']
MATURITY_YEARS = [1/12, 1/4, 1/2, 1, 2, 3, 5, 7, 10, 20, 30]

#### the series we study
MATURITY = 'DGS20'

#### days to look into the future
HORIZON = 10

#### candidate models: (p, o, q) with p ARCH lags, o asymmetric lags, q GARCH lags
CANDIDATE_ORDERS = [(1, 0, 1), (1, 0, 2), (2, 0, 1), (2, 0, 2), (1, 1, 1)]
CANDIDATE_DISTS = ['normal', 't', 'skewt', 'ged']
MEAN_MODEL = 'Constant'

SELECTION_CRITERION = 'bic'
SIGNIFICANCE = 0.05
GOF_LAGS = 10

#### fit on these fractions of the sample and extrapolate over the rest
HOLDOUT_FRACTIONS = [1/2, 3/4]

#### trading days per year for annualizing
TRADING_DAYS = 252

#### running GARCH: use data up to the 1000th day for the early part, refit once a month
RUNNING_MIN_WINDOW = 1000
RUNNING_REFIT_EVERY = 21
RUNNING_OUTPUT = './data/Running_Garch_Vol.csv'
