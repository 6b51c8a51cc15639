"""
Constants used internally by style-transfer-lite.

These are implementation-level values tied to the bundled models and
should not be overridden via config files or CLI arguments.
"""

# Style prediction model contract (NHWC)
PREDICT_INPUT_HEIGHT = 256
PREDICT_INPUT_WIDTH = 256
STYLE_BOTTLENECK_SIZE = 100
PREDICT_INPUT_SHAPE = (1, PREDICT_INPUT_HEIGHT, PREDICT_INPUT_WIDTH, 3)
PREDICT_OUTPUT_SHAPE = (1, 1, 1, STYLE_BOTTLENECK_SIZE)

# Style transfer model contract (NHWC)
TRANSFER_INPUT_HEIGHT = 384
TRANSFER_INPUT_WIDTH = 384
TRANSFER_INPUT_SHAPE = (1, TRANSFER_INPUT_HEIGHT, TRANSFER_INPUT_WIDTH, 3)
TRANSFER_OUTPUT_SHAPE = TRANSFER_INPUT_SHAPE

# Pixel range used for normalize / denormalize
PIXEL_MAX = 255.0

# Internal color constants
COLOR_MODE_RGB = "RGB"
SUPPORTED_IMAGE_MODES = frozenset({"RGB", "RGBA", "RGBX", "L", "LA", "P"})

# Style thumbnails recognised by the catalog
STYLE_IMAGE_SUFFIXES = (".bmp", ".jpeg", ".jpg", ".png", ".webp")

# Number of models loaded side by side at engine construction
MODEL_LOAD_WORKERS = 2
