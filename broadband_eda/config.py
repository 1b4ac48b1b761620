from pathlib import Path

# -----------------------------
# FILE PATHS (override on the command line)
# -----------------------------
THIS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = THIS_DIR.parent
DATA_DIR = PROJECT_ROOT / "data"

PATH_COVERAGE = DATA_DIR / "fbd_ky_dec2017.csv"
PATH_BLOCKS = DATA_DIR / "tl_2010_21_tabblock10" / "tl_2010_21_tabblock10.shp"

# key field of the census block boundary file (TIGER 2010 tabulation blocks)
GEOMETRY_KEY = "GEOID10"

# state kept from the coverage file; None keeps every row
STATE_ABBR = "KY"

# -----------------------------
# FORM 477 SCHEMA (raw header -> semantic name)
# -----------------------------
COLUMN_MAP = {
    "LogRecNo": "log_rec_no",
    "Provider_Id": "provider_id",
    "FRN": "frn",
    "ProviderName": "provider_name",
    "DBAName": "brand_name",
    "HoldingCompanyName": "holding_company_name",
    "HocoNum": "hoco_num",
    "HocoFinal": "hoco_final",
    "StateAbbr": "state_abbr",
    "BlockCode": "block_geoid",
    "TechCode": "technology",
    "Consumer": "consumer",
    "MaxAdDown": "max_advertised_download_speed",
    "MaxAdUp": "max_advertised_upload_speed",
    "Business": "business",
}
EXPECTED_COLUMNS = len(COLUMN_MAP)

BLOCK_GEOID_WIDTH = 15
COUNTY_FIPS_WIDTH = 5

# -----------------------------
# TECHNOLOGY CODES (Form 477)
# -----------------------------
TECH_MAP = {
    "10": "Copper",
    "11": "Copper",
    "12": "Copper",
    "20": "Copper",
    "30": "Copper",
    "40": "Cable",
    "41": "Cable",
    "42": "Cable",
    "43": "Cable",
    "50": "Fiber",
    "60": "Satellite",
    "70": "Fixed wireless",
    "90": "Power line",
    "0": "Other",
}
TECH_UNKNOWN = "Other / Unknown"

# -----------------------------
# SERVICE THRESHOLDS (Mbps, download / upload)
# -----------------------------
UNSERVED_DOWN, UNSERVED_UP = 25, 3
UNDERSERVED_DOWN, UNDERSERVED_UP = 100, 20

# -----------------------------
# PLOTS
# -----------------------------
SPEED_METRICS = ["max_down", "max_up"]
MAP_METRICS = {
    "provider_count": "Providers per block",
    "max_down": "Max advertised download (Mbps)",
    "max_up": "Max advertised upload (Mbps)",
}
HISTOGRAM_BIN_WIDTH = 1
COLOR_SCALE = "Viridis"
