import json
import logging
import sqlite3

from BackEnd.core.paths import db_path
from BackEnd.core.clock import utc_now_iso, local_today_str
from BackEnd.core.models import TrackerStore
from BackEnd.core.subjects import SUBJECTS

logger = logging.getLogger(__name__)

STORAGE_KEY = "hscStudyTrackerData"

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
	key TEXT PRIMARY KEY,
	value TEXT NOT NULL,
	updated_at TEXT NOT NULL
);
"""


class CorruptStateError(ValueError):
	"""Stored tracker state could not be parsed."""


def connect(path=None):
	"""Open SQLite connection and ensure schema is applied."""
	conn = sqlite3.connect(path or db_path())
	conn.row_factory = sqlite3.Row
	conn.executescript(SCHEMA)
	return conn


def serialize(store):
	return json.dumps(store.to_dict())


def _is_count(value):
	# JSON true/false would otherwise pass as ints
	return type(value) is int and value >= 0


def _check_store(store):
	if not isinstance(store.last_access_date, str):
		raise CorruptStateError(f"bad lastAccessDate: {store.last_access_date!r}")
	for name, record in store.subjects.items():
		if not isinstance(record.color, str):
			raise CorruptStateError(f"bad color for {name!r}: {record.color!r}")
		if not _is_count(record.total_sec):
			raise CorruptStateError(f"bad total for {name!r}: {record.total_sec!r}")
		seen = set()
		for session in record.sessions:
			if not isinstance(session.date, str):
				raise CorruptStateError(f"bad session date for {name!r}: {session.date!r}")
			if not _is_count(session.duration_sec):
				raise CorruptStateError(f"bad duration for {name!r} on {session.date!r}")
			if session.date in seen:
				raise CorruptStateError(f"duplicate session for {name!r} on {session.date!r}")
			seen.add(session.date)


def deserialize(text):
	"""Parse stored JSON into a TrackerStore, raising CorruptStateError on any mismatch."""
	try:
		store = TrackerStore.from_dict(json.loads(text))
	except (ValueError, KeyError, TypeError, AttributeError) as e:
		raise CorruptStateError(f"unreadable tracker state: {e}") from e
	_check_store(store)
	return store


def load(path=None, catalog=SUBJECTS, today=None):
	"""Return the stored TrackerStore, or a fresh one if nothing is stored yet."""
	today = today or local_today_str()
	conn = connect(path)
	try:
		row = conn.execute("SELECT value FROM kv_store WHERE key=?", (STORAGE_KEY,)).fetchone()
	finally:
		conn.close()

	if row is None:
		logger.info("No stored state, initialising %d subjects", len(catalog))
		return TrackerStore.fresh(today, catalog)

	try:
		store = deserialize(row["value"])
	except CorruptStateError:
		logger.exception("Stored tracker state is corrupt; run reset_stats.py to start over")
		raise

	# Day rollover only moves the marker; old sessions are kept
	if store.last_access_date != today:
		logger.debug("Day changed from %s to %s", store.last_access_date, today)
		store.last_access_date = today
	return store


def save(store, path=None):
	"""Overwrite the stored aggregate with store."""
	conn = connect(path)
	try:
		with conn:
			conn.execute(
				"INSERT OR REPLACE INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)",
				(STORAGE_KEY, serialize(store), utc_now_iso())
			)
	finally:
		conn.close()
	logger.debug("Saved tracker state (%d subjects)", len(store.subjects))


def open_store(path=None, catalog=SUBJECTS, today=None):
	"""Load state at startup and write it back so a fresh store is persisted."""
	store = load(path, catalog, today)
	save(store, path)
	return store
