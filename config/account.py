# Gold account configuration
# Credentials come from the environment; nothing secret lives here.

import os

MT5_LOGIN = int(os.getenv("MT5_LOGIN", "0")) or None
MT5_PASSWORD = os.getenv("MT5_PASSWORD")
MT5_SERVER = os.getenv("MT5_SERVER")
MT5_PATH = os.getenv("MT5_PATH", r"C:\Program Files\MetaTrader 5\terminal64.exe")
ACCOUNT_NAME = os.getenv("ACCOUNT_NAME", "XAUUSD_MAIN")

SYMBOL = os.getenv("MT5_SYMBOL", "XAUUSDm")

# Seconds between account refreshes in the status loop
POLL_INTERVAL = 5

# Money management profile (None = reference table)
MM_PROFILE = os.getenv("MM_PROFILE") or None
