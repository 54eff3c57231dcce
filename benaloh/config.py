"""
Runtime configuration, read once from the environment at import time.
"""

import os

# ── Configuration ──────────────────────────────────
KEY_BITS = int(os.getenv("BENALOH_KEY_BITS", "16"))  # r gets half of these bits
MAX_ATTEMPTS = int(os.getenv("BENALOH_MAX_ATTEMPTS", "100000"))
KEY_ID = os.getenv("BENALOH_KEY_ID", "key-v1")
LOG_LEVEL = os.getenv("BENALOH_LOG_LEVEL", "INFO").upper()
