"""In-memory tracker state: subjects, lifetime totals and per-day sessions."""

from dataclasses import dataclass, field

from BackEnd.core.subjects import SUBJECTS


@dataclass
class DailySession:
	date: str
	duration_sec: int = 0

	def to_dict(self):
		return {"date": self.date, "durationSeconds": self.duration_sec}

	@classmethod
	def from_dict(cls, data):
		return cls(date=data["date"], duration_sec=data["durationSeconds"])


@dataclass
class SubjectRecord:
	color: str
	total_sec: int = 0
	sessions: list = field(default_factory=list)

	def to_dict(self):
		return {
			"color": self.color,
			"totalTimeSeconds": self.total_sec,
			"sessions": [s.to_dict() for s in self.sessions],
		}

	@classmethod
	def from_dict(cls, data):
		return cls(
			color=data["color"],
			total_sec=data["totalTimeSeconds"],
			sessions=[DailySession.from_dict(s) for s in data["sessions"]],
		)

	def session_on(self, date):
		"""Return the DailySession for date, or None."""
		for session in self.sessions:
			if session.date == date:
				return session
		return None


@dataclass
class TrackerStore:
	subjects: dict = field(default_factory=dict)
	last_access_date: str = ""

	@classmethod
	def fresh(cls, today, catalog=SUBJECTS):
		"""Zero totals and empty session lists for every catalog subject."""
		subjects = {name: SubjectRecord(color=info["color"]) for name, info in catalog.items()}
		return cls(subjects=subjects, last_access_date=today)

	def to_dict(self):
		return {
			"subjects": {name: rec.to_dict() for name, rec in self.subjects.items()},
			"lastAccessDate": self.last_access_date,
		}

	@classmethod
	def from_dict(cls, data):
		subjects = {name: SubjectRecord.from_dict(rec) for name, rec in data["subjects"].items()}
		return cls(subjects=subjects, last_access_date=data["lastAccessDate"])

	def total_for(self, subject) -> int:
		"""Lifetime seconds for subject; 0 if the store has never seen it."""
		record = self.subjects.get(subject)
		return record.total_sec if record else 0

	def today_session_for(self, subject, today):
		record = self.subjects.get(subject)
		if record is None:
			return None
		return record.session_on(today)

	def today_total(self, today, catalog=SUBJECTS) -> int:
		"""Sum of today's seconds over catalog subjects present in the store."""
		total = 0
		for name in catalog:
			session = self.today_session_for(name, today)
			if session:
				total += session.duration_sec
		return total

	def today_log(self, today):
		"""Entries for subjects with time logged today, in store order."""
		log = []
		for name, record in self.subjects.items():
			session = record.session_on(today)
			if session and session.duration_sec > 0:
				log.append({"name": name, "color": record.color, "duration_sec": session.duration_sec})
		return log
