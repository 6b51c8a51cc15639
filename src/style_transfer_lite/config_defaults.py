"""Shared default values for user-facing configuration settings."""

# Models
DEFAULT_ASSET_DIR = "assets/models"
DEFAULT_STYLE_PREDICT_MODEL = "style_predict.pt"
DEFAULT_STYLE_TRANSFER_MODEL = "style_transfer.pt"

# Hardware
DEFAULT_DEVICE = "cpu"
DEFAULT_NUM_THREADS = 2

# Style catalog
DEFAULT_STYLES_DIR = "assets/thumbnails"

# Output
DEFAULT_OUTPUT_DIR = "out"
