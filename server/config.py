"""
Agri GDP Live — Configuration
Edit this file to point the charts at a different sheet or year window.
"""

# ═══════════════════════════════════════
# GOOGLE SHEET SOURCE
# ═══════════════════════════════════════

# Published sheet (CSV export). The tab is selected by GID.
SHEET_ID = "1n7oWCkQZM9bsEzBRhqRe6Ky3J7VfGa-gjhee-K1B7bk"
SHEET_GID = "1161513038"
SHEET_FETCH_TIMEOUT_SECONDS = 15

# Header names exactly as they appear in row 1 of the sheet
YEAR_COLUMN = "Year"
VALUE_COLUMN = "Value added in the agricultural sector as percent of GDP"


# ═══════════════════════════════════════
# CHARTS
# ═══════════════════════════════════════

COUNTRY_ADJECTIVE = "Omani"          # used in chart titles

RECENT_START_YEAR = 2011             # recent-years chart, inclusive
RECENT_END_YEAR = 2024

FULL_Y_TICK_STEP = 5                 # y tick spacing, full-range chart
RECENT_Y_TICK_STEP = 0.5             # y tick spacing, recent-years chart

Y_PAD_LOW = 0.9                      # y range = [min * low, max * high]
Y_PAD_HIGH = 1.1


# ═══════════════════════════════════════
# SERVER
# ═══════════════════════════════════════

SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
DEBUG = True
