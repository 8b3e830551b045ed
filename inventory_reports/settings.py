import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Report Tuning ---
REPORT_TOP_N = int(os.getenv("REPORT_TOP_N", "5"))

# Seasonal swing and noise ceiling, both as a fraction of the baseline.
TREND_AMPLITUDE = float(os.getenv("TREND_AMPLITUDE", "0.15"))
TREND_NOISE = float(os.getenv("TREND_NOISE", "0.05"))

# Unset means every render draws a fresh curve.
_trend_seed = os.getenv("TREND_SEED")
TREND_SEED = int(_trend_seed) if _trend_seed else None

DEFAULT_TIME_RANGE = os.getenv("DEFAULT_TIME_RANGE", "monthly")

# --- Default Selection ---
DEFAULT_REPORT_CATEGORY = "financial"
DEFAULT_REPORT_TYPE = "overview"

# --- Shared Business Logic ---
# (label, inclusive min, exclusive max); the last bucket has no upper bound.
PRICE_RANGES = [
    ("$0-$25", 0, 25),
    ("$25-$50", 25, 50),
    ("$50-$100", 50, 100),
    ("$100-$200", 100, 200),
    ("$200+", 200, None),
]

ORDER_VALUE_RANGES = [
    ("$0-$100", 0, 100),
    ("$100-$500", 100, 500),
    ("$500-$1000", 500, 1000),
    ("$1000+", 1000, None),
]

INVENTORY_STATUS_ORDER = [
    "In Stock",
    "Low Stock",
    "Out of Stock",
]

ORDER_STATUS_ORDER = [
    "Completed",
    "Processing",
    "Pending",
]

# Placeholder key for records that carry no value for a grouping field.
UNKNOWN_KEY = "Unknown"

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_LABELS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]
MONTHLY_PERIODS = 30

# Warehouse utilisation percentages strictly above these are flagged.
UTILIZATION_HIGH = 80
UTILIZATION_MEDIUM = 60

CHART_COLORS = [
    "#8B5CF6",
    "#D946EF",
    "#F97316",
    "#0EA5E9",
    "#10B981",
    "#F59E0B",
]
CHART_HEIGHT = 220
