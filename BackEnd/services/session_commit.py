import logging
from dataclasses import dataclass
from typing import Optional

from BackEnd.core.clock import fmt_hms
from BackEnd.core.models import DailySession, SubjectRecord
from BackEnd.core.subjects import SUBJECTS, MIN_SESSION_SECONDS

logger = logging.getLogger(__name__)

TOO_SHORT = "too_short"
UNKNOWN_SUBJECT = "unknown_subject"


@dataclass(frozen=True)
class CommitResult:
	saved: bool
	subject: str
	duration_sec: int
	reason: Optional[str] = None

	@property
	def message(self):
		if self.saved:
			return f"Saved {fmt_hms(self.duration_sec)} for {self.subject}!"
		if self.reason == TOO_SHORT:
			return f"Session too short to save (min {MIN_SESSION_SECONDS} seconds)."
		return f"Unknown subject: {self.subject}"


def commit(store, subject, duration_sec, today, save, catalog=SUBJECTS):
	"""Fold a finished interval into subject's total and today's session, then save.

	`save` is called with the store only when something was written.
	"""
	if duration_sec < MIN_SESSION_SECONDS:
		logger.info("Discarded %ss session for %s (too short)", duration_sec, subject)
		return CommitResult(False, subject, duration_sec, TOO_SHORT)

	record = store.subjects.get(subject)
	new_record = record is None
	if new_record:
		if subject not in catalog:
			logger.warning("Refusing to record time for unknown subject %r", subject)
			return CommitResult(False, subject, duration_sec, UNKNOWN_SUBJECT)
		record = store.subjects[subject] = SubjectRecord(color=catalog[subject]["color"])

	session = record.session_on(today)
	new_session = session is None
	if new_session:
		session = DailySession(date=today)
		record.sessions.append(session)
	session.duration_sec += duration_sec
	record.total_sec += duration_sec

	try:
		save(store)
	except Exception:
		# memory must match what is on disk
		session.duration_sec -= duration_sec
		record.total_sec -= duration_sec
		if new_session:
			record.sessions.remove(session)
		if new_record:
			del store.subjects[subject]
		logger.exception("Could not save %s for %s", fmt_hms(duration_sec), subject)
		raise
	logger.info("Saved %s for %s", fmt_hms(duration_sec), subject)
	return CommitResult(True, subject, duration_sec)
