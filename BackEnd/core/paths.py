import os
from pathlib import Path

APP_NAME = "HSCStudyTracker"

def user_data_dir(app_name=APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux), honouring STUDY_TRACKER_HOME."""
	override = os.environ.get("STUDY_TRACKER_HOME")
	if override:
		path = Path(override).expanduser()
		path.mkdir(parents=True, exist_ok=True)
		return path
	if os.name == "nt":
		base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
	elif os.name == "posix":
		base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
	else:
		base = os.path.expanduser("~")
	path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def db_path():
	"""Return Path to tracker.db inside user data dir."""
	return user_data_dir() / "tracker.db"
