import time
from datetime import datetime, timezone

def utc_now_iso():
	"""Return current UTC time as ISO8601 string (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

def local_today_str():
	"""Return local date as YYYY-MM-DD string."""
	return datetime.now().date().isoformat()

def wall_now() -> float:
	"""Return wall-clock time in seconds since the epoch."""
	return time.time()

def fmt_hms(seconds: int) -> str:
	"""Format seconds as HH:MM:SS. Hours grow past two digits rather than wrap."""
	h = seconds // 3600
	m = (seconds % 3600) // 60
	s = seconds % 60
	return f"{h:02}:{m:02}:{s:02}"
