"""
Constants for the Dodo Coin ledger.
Storage keys, bonus rules and the default task catalog.
"""

# Storage keys (string-keyed store)
BALANCE_KEY = "dodoCoins"
HISTORY_KEY = "dodoHistory"
DAILY_BONUS_KEY = "lastFreeDay"
END_OF_DAY_BONUS_KEY = "lastEndOfDayBonusDay"

# Bonuses
DAILY_BONUS_AMOUNT = 2
DAILY_BONUS_LABEL = "Daily Bonus"
END_OF_DAY_BONUS_AMOUNT = 10
END_OF_DAY_BONUS_LABEL = "End of Day Bonus"

# Weekly summary window; also the divisor for the daily average
WEEK_DAYS = 7

# Balance chart
CHART_WIDTH = 300
CHART_HEIGHT = 120
CHART_MIN_SCALE = 10

# Default task catalog: (label, coins)
EARN_TASKS = [
    ("Workout", 15),
    ("5 min edit", 3),
    ("1 hour edit", 20),
    ("Cleaning the house", 2),
    ("24h fasting", 20),
    ("Complete to-do list", 10),
]

SPEND_TASKS = [
    ("Watch TV (1h)", -20),
    ("Eating out", -15),
    ("Delivery food", -25),
    ("Ice cream / snack", -10),
    ("Baseball", -30),
    ("늦잠", -25),
]

# Logging
DEFAULT_LOG_DIRECTORY_PROD = "/var/log/dodocoin"
DEFAULT_LOG_DIRECTORY_DEV = "./logs"

# Database
DEFAULT_DATABASE_URL = "sqlite:///./dodocoin.db"

# CORS
CORS_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
