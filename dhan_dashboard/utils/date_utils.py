"""
Dhan Dashboard - Date/Time Utilities
"""

from datetime import datetime
import time
import pytz

# Indian Standard Time
IST = pytz.timezone('Asia/Kolkata')


def now_ms() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


def ms_to_ist(ms: int) -> datetime:
    """Convert epoch milliseconds to an IST-aware datetime."""
    return datetime.fromtimestamp(ms / 1000, tz=pytz.utc).astimezone(IST)


def format_ms_ist(ms: int) -> str:
    """Format epoch milliseconds as an ISO string in IST (for logs)."""
    return ms_to_ist(ms).isoformat(timespec='seconds')
