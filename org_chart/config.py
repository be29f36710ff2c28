# -------------------------------------------
# CONFIG
# -------------------------------------------
INPUT_FILE = "employees.xlsx"
SHEET_NAME = 0              # first sheet; change if needed
OUTPUT_FILE = "org_chart"   # will create org_chart.png (or .pdf / .html)
RANKDIR = "TB"              # "TB" = top-bottom, "LR" = left-right
FONT = "Helvetica"

# Columns (adjust if your file uses different names)
COL_ID = "Id"
COL_MANAGER_ID = "ManagerId"
COL_COMPANY = "Company"
COL_NAME = "Name"
COL_POSITION = "Position"
COL_DEPARTMENT = "Department"
COL_MOBILE = "Mobile"
COL_EMAIL = "Email"
COL_LOCATION = "Location"
COL_PHOTO = "Photo"

# -------------------------------------------
# COMPANY COLORS
# -------------------------------------------
COMPANY_COLORS = {
    "УК": "#e0f2ff",  # light blue
    "ДК": "#e6fce6",  # light green
    "РТ": "#fff9db",  # light yellow
}
NO_COMPANY_COLOR = "#ffffff"
UNKNOWN_COMPANY_COLOR = "#cccccc"
GRADIENT_ANGLE = 135  # degrees, CSS convention

# "no filter" sentinel for the company selector
ALL_COMPANIES = "Все"
ALL_COMPANIES_LABEL = "Все компании"

# -------------------------------------------
# LEGEND / CARD STYLE
# -------------------------------------------
LEGEND_TITLE = "Легенда:"
MANAGER_LABEL = "Руководитель"
EXPAND_LABEL = "Развернуть"
COLLAPSE_LABEL = "Свернуть"

MANAGER_OUTLINE_COLOR = "#60a5fa"
BORDER_COLOR = "#555555"
LINE_COLOR = "#bbbbbb"
PLACEHOLDER_PHOTO = "https://via.placeholder.com/40"

# -------------------------------------------
# ZOOM
# -------------------------------------------
MIN_SCALE = 0.3
MAX_SCALE = 2.0
SCALE_STEP = 0.1
DEFAULT_SCALE = 0.75
