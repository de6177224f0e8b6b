# Subject catalog and tracking policy

SUBJECTS = {
	'Physics': {'icon': 'fas fa-atom', 'color': 'var(--color-physics)'},
	'Chemistry': {'icon': 'fas fa-flask', 'color': 'var(--color-chemistry)'},
	'Math': {'icon': 'fas fa-calculator', 'color': 'var(--color-math)'},
	'Biology': {'icon': 'fas fa-leaf', 'color': 'var(--color-biology)'},
	'Bangla': {'icon': 'fas fa-language', 'color': 'var(--color-bangla)'},
	'English': {'icon': 'fas fa-pencil-alt', 'color': 'var(--color-english)'},
	'GK': {'icon': 'fas fa-globe-asia', 'color': 'var(--color-gk)'},
}

# Sessions shorter than this are not saved
MIN_SESSION_SECONDS = 60

TICK_INTERVAL_MS = 1000
