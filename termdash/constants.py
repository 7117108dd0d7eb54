"""Constants used across termdash.

This module defines shared constants to ensure consistency.
"""

APP_TITLE = "Terminal Dashboard"

# Fixed layout policy (character cells)
HEADER_HEIGHT = 3
SIDEBAR_WIDTH = 20
STATUS_BAR_HEIGHT = 1
# Rows taken by header + status bar around the sidebar/content band
CHROME_ROWS = HEADER_HEIGHT + STATUS_BAR_HEIGHT

# Terminal size assumed before the backend reports one
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

# Timing (milliseconds)
NOTIFICATION_DURATION_MS = 3000
QUIT_GRACE_MS = 1000
POLL_INTERVAL_MS = 100

# Quit banner
QUIT_BOX_WIDTH = 40
QUIT_BOX_HEIGHT = 5

# Process exit codes
EXIT_OK = 0
EXIT_FAULT = 1

# Default log file; "-" means stderr
DEFAULT_LOG_PATH = "~/.local/state/termdash/termdash.log"
