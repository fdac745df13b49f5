"""
Application constants.

Limits and defaults shared by the picker domain, the definition cache and
the HTTP layer.
"""

# Definitions kept per dictionary record
MAX_DEFINITIONS = 3
# Definitions taken from each meaning group before truncating to MAX_DEFINITIONS
DEFINITIONS_PER_MEANING = 2
# Definitions shown per word card in the floating panel
PANEL_DEFINITIONS_SHOWN = 2

LOOKUP_ERROR_MESSAGE = "No definition found"

DEFAULT_PANEL_X = 20
DEFAULT_PANEL_Y = 20
PANEL_WIDTH = 320
PANEL_MINIMIZED_WIDTH = 200

EXPORT_FILENAME_PREFIX = "selected-words"
