"""
Reset all study tracker stats by clearing the stored state.
This deletes every subject total and daily session. It is also the way out
when the app refuses to start because the stored state is corrupt.
"""

import logging

from BackEnd.core.paths import db_path

logger = logging.getLogger(__name__)


def reset_all_stats(ask=input):
    """Delete the database file to reset all stats. Returns True if it was deleted."""
    db_file = db_path()

    if not db_file.exists():
        print("No saved data found. Stats are already at 0.")
        return False

    print(f"Found saved data at: {db_file}")
    confirm = ask("Are you sure you want to reset all stats? This cannot be undone. (yes/no): ")
    if confirm.strip().lower() not in ['yes', 'y']:
        print("Reset cancelled.")
        return False

    try:
        db_file.unlink()
    except OSError:
        logger.exception("Could not delete %s", db_file)
        raise
    print("✓ All stats have been reset to 0")
    print("\nNext time you open the app, fresh data will be created.")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("=" * 50)
    print("Study Tracker - Reset All Stats")
    print("=" * 50)
    reset_all_stats()
