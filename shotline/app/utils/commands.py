from shotline.app import app
from shotline.app.services import episodes_service, statuses_service
from shotline.app.utils import cache


def init_data():
    """
    Put the minimum required data into the database to start with it.
    """
    with app.app_context():
        statuses = statuses_service.init_default_statuses()
        print(f"Statuses initialized ({len(statuses)} created).")


def recompute_durations():
    """
    Recompute the duration of every episode from its sequences.
    """
    with app.app_context():
        nb_updated = episodes_service.recompute_all_durations()
        print(f"Episode durations recomputed ({nb_updated} updated).")
        return nb_updated


def clear_memory_cache():
    with app.app_context():
        cache.clear()
