"""
Beruang — Configuration: paths, column names, categories, sheet names.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with BERUANG_DATA_DIR env var
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("BERUANG_DATA_DIR", str(Path.home() / "Documents" / "Beruang")))
DATA_DIR = _data_dir
TRANSACTIONS_FILE = Path(os.environ.get("BERUANG_TRANSACTIONS_FILE", str(DATA_DIR / "transactions.csv")))

# ---------------------------------------------------------------------------
# Column names in the workbook (source locale)
# ---------------------------------------------------------------------------
DATE_COLUMN = "Tarikh"
DETAILS_COLUMN = "Keterangan"
CATEGORY_COLUMN = "Kategori"
ACCOUNT_COLUMN = "Akaun"
CURRENCY_COLUMN = "Wang"
COST_COLUMN = "Jumlah"

# Header names whose cells are typed as dates / fixed-point money.
# Every other column is text.
DATE_COLUMNS = {DATE_COLUMN}
COST_COLUMNS = {COST_COLUMN}

# ---------------------------------------------------------------------------
# Categories (closed enumeration)
# ---------------------------------------------------------------------------
CATEGORIES = [
    "Makan",          # food
    "Kebersihan",     # hygiene
    "Keluarga",       # family
    "Kesihatan",      # health
    "Khidmat",        # services
    "Pelaburan",      # investment
    "Pengangkutan",   # transport
    "Rencam",         # miscellaneous
    "Pendapatan",     # income
    "Upah",           # wages
    "Hadiah",         # gift
    "Perbelanjaan",   # spending
    "Hutang",         # debt
    "Hiburan",        # entertainment
    "Alat Kerja",     # tools
    "Pendidikan",     # education
    "Simpanan",       # savings
    "Pertukaran",     # currency exchange / transfer between own accounts
]

# Transfers move money between the owner's own accounts, so they are
# left out of net-flow reports.
TRANSFER_CATEGORY = os.environ.get("BERUANG_TRANSFER_CATEGORY", "Pertukaran")

# ---------------------------------------------------------------------------
# Workbook layout: one sheet per month
# ---------------------------------------------------------------------------
MONTH_SHEETS = ["Jan", "Feb", "Mac", "Apr", "Mei", "Jun", "Jul", "Ogo", "Sep", "Okt", "Nov", "Dis"]

# ---------------------------------------------------------------------------
# Append utility defaults
# ---------------------------------------------------------------------------
DEFAULT_ACCOUNT = "MAYB"
DEFAULT_CURRENCY = "MYR"
