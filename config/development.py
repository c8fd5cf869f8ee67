import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Fallback business figures used when an assignment leaves a field unset
PAYROLL_DEFAULT_HOURLY_RATE_COST = float(os.getenv("PAYROLL_DEFAULT_HOURLY_RATE_COST", "15"))
PAYROLL_SELL_MARGIN = float(os.getenv("PAYROLL_SELL_MARGIN", "1.667"))
PAYROLL_MEAL_ALLOWANCE = float(os.getenv("PAYROLL_MEAL_ALLOWANCE", "10"))
PAYROLL_MEAL_ALLOWANCE_THRESHOLD_HOURS = float(os.getenv("PAYROLL_MEAL_ALLOWANCE_THRESHOLD_HOURS", "5"))
PAYROLL_DEFAULT_TRAVEL_ALLOWANCE = float(os.getenv("PAYROLL_DEFAULT_TRAVEL_ALLOWANCE", "15"))
