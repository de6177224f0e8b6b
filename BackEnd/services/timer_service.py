import logging

from PySide6.QtCore import QObject, Signal, QTimer

from BackEnd.core.clock import wall_now, local_today_str
from BackEnd.core.subjects import SUBJECTS, TICK_INTERVAL_MS
from BackEnd.repos import tracker_repo
from BackEnd.services import session_commit

logger = logging.getLogger(__name__)


class TimerService(QObject):
	tick = Signal(int)  # emits elapsed seconds
	state_changed = Signal(str)  # emits 'idle', 'selected', 'running', 'paused'
	session_finished = Signal(object)  # emits CommitResult after every stop

	def __init__(self, store=None, db_file=None, catalog=SUBJECTS, clock=wall_now, today=local_today_str):
		super().__init__()
		self.catalog = catalog
		self.db_file = db_file
		self._clock = clock
		self._today = today
		self.store = store if store is not None else tracker_repo.open_store(db_file, catalog, today())
		self.active_subject = None
		self.elapsed_sec = 0
		self.running = False
		self.paused = False
		self.start_epoch = None
		self._timer = QTimer(self)
		self._timer.setInterval(TICK_INTERVAL_MS)
		self._timer.timeout.connect(self._on_tick)

	@property
	def state(self):
		if self.active_subject is None:
			return 'idle'
		if self.running:
			return 'running'
		return 'paused' if self.paused else 'selected'

	def select_subject(self, name):
		if self.running:
			logger.debug("Ignoring select_subject(%r) while running", name)
			return
		if name not in self.catalog and name not in self.store.subjects:
			logger.warning("Ignoring unknown subject %r", name)
			return
		self.active_subject = name
		self.state_changed.emit(self.state)

	def start(self):
		if self.running or self.active_subject is None:
			return
		# shift the zero-point back so a resumed interval continues from elapsed_sec
		self.start_epoch = self._clock() - self.elapsed_sec
		self.running = True
		self.paused = False
		self._timer.start()
		self.state_changed.emit('running')

	def pause(self):
		if not self.running:
			return
		self._timer.stop()
		self._recompute()
		self.running = False
		self.paused = True
		self.state_changed.emit('paused')

	def start_pause(self):
		"""Single-button behaviour: pause when running, otherwise start."""
		if self.running:
			self.pause()
		else:
			self.start()

	def stop_and_commit(self):
		"""Stop the timer, record the interval and return to idle.

		Returns the CommitResult, or None when no subject was selected.
		A failed save propagates, but the timer is still back at idle.
		"""
		if self.active_subject is None:
			return None
		self.pause()
		try:
			result = session_commit.commit(
				self.store, self.active_subject, self.elapsed_sec, self._today(),
				save=self._save, catalog=self.catalog
			)
		finally:
			self.active_subject = None
			self.elapsed_sec = 0
			self.running = False
			self.paused = False
			self.start_epoch = None
			self.tick.emit(0)
			self.state_changed.emit('idle')
		self.session_finished.emit(result)
		return result

	def display_state(self):
		return {
			'active_subject': self.active_subject,
			'elapsed_sec': self.elapsed_sec,
			'running': self.running,
		}

	def subject_summaries(self):
		"""One row per catalog subject, in catalog order."""
		today = self._today()
		rows = []
		for name, info in self.catalog.items():
			session = self.store.today_session_for(name, today)
			rows.append({
				'name': name,
				'color': info['color'],
				'total_sec': self.store.total_for(name),
				'today_sec': session.duration_sec if session else 0,
			})
		return rows

	def today_total(self):
		return self.store.today_total(self._today(), self.catalog)

	def today_log(self):
		return self.store.today_log(self._today())

	def _save(self, store):
		tracker_repo.save(store, self.db_file)

	def _recompute(self):
		self.elapsed_sec = max(0, int(self._clock() - self.start_epoch))

	def _on_tick(self):
		self._recompute()
		self.tick.emit(self.elapsed_sec)
