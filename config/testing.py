SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Fixed figures so tests do not depend on the environment
PAYROLL_DEFAULT_HOURLY_RATE_COST = 15.0
PAYROLL_SELL_MARGIN = 1.667
PAYROLL_MEAL_ALLOWANCE = 10.0
PAYROLL_MEAL_ALLOWANCE_THRESHOLD_HOURS = 5.0
PAYROLL_DEFAULT_TRAVEL_ALLOWANCE = 15.0
