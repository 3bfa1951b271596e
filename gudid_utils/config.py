"""
GUDID Chronicles — Configuration

Single source of truth for column names, limits, and service settings.
Used by: parser, aggregation, graph builder, dashboard, chat.

Version: 1.0.0
"""

# =============================================================================
# Input Columns (case-sensitive header names)
# =============================================================================
COL_SUPPLIER = "Suppliername"
COL_DELIVER_DATE = "deliverdate"
COL_CUSTOMER = "customer"
COL_DEVICE = "DeviceName"
COL_QUANTITY = "Numbers"
COL_MODEL = "ModelNum"

# Header name -> Record field
COLUMN_FIELD_MAP = {
    COL_SUPPLIER: "supplier_name",
    COL_DELIVER_DATE: "deliver_date",
    COL_CUSTOMER: "customer",
    COL_DEVICE: "device_name",
    COL_QUANTITY: "quantity",
    COL_MODEL: "model_number",
}

RECOGNIZED_COLUMNS = list(COLUMN_FIELD_MAP.keys())

DEFAULT_DELIMITER = ","

# =============================================================================
# Pipeline Limits
# =============================================================================
TOP_N_DEVICES = 10        # devices shown in the ranking chart
GRAPH_RECORD_CAP = 100    # records fed to the relationship graph (prefix)
PREVIEW_ROW_LIMIT = 50    # rows shown in the data preview table

# =============================================================================
# Graph Canvas
# =============================================================================
GRAPH_HEIGHT_PX = 500
GRAPH_LABEL_MAX_CHARS = 10

# =============================================================================
# Generative Text Service
# =============================================================================
MODEL_OPTIONS = [
    "gemini-3-flash-preview",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-3-pro-preview",
]
DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_TEMPERATURE = 0.7
GEMINI_ENDPOINT = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
REQUEST_TIMEOUT_SECONDS = 60

# =============================================================================
# App Metadata
# =============================================================================
APP_VERSION = "1.0.0"
APP_NAME = "GUDID Chronicles"
