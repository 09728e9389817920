import sys

from shotline.app.blueprints.assets import blueprint as assets_blueprint
from shotline.app.blueprints.auth import blueprint as auth_blueprint
from shotline.app.blueprints.index import blueprint as index_blueprint
from shotline.app.blueprints.notes import blueprint as notes_blueprint
from shotline.app.blueprints.persons import blueprint as persons_blueprint
from shotline.app.blueprints.playlists import blueprint as playlists_blueprint
from shotline.app.blueprints.projects import blueprint as projects_blueprint
from shotline.app.blueprints.shots import blueprint as shots_blueprint
from shotline.app.blueprints.statuses import blueprint as statuses_blueprint
from shotline.app.blueprints.user import blueprint as user_blueprint
from shotline.app.blueprints.versions import blueprint as versions_blueprint

from shotline.app.utils import events


def configure(app):
    """
    Turn Flask app into a REST API. It configures routes and events system.
    """
    app.url_map.strict_slashes = False
    configure_api_routes(app)
    register_event_handlers(app)
    return app


def configure_api_routes(app):
    """
    Register blueprints (modules). Each blueprint describe routes and
    associated resources (controllers).
    """
    app.register_blueprint(assets_blueprint)
    app.register_blueprint(auth_blueprint)
    app.register_blueprint(index_blueprint)
    app.register_blueprint(notes_blueprint)
    app.register_blueprint(persons_blueprint)
    app.register_blueprint(playlists_blueprint)
    app.register_blueprint(projects_blueprint)
    app.register_blueprint(shots_blueprint)
    app.register_blueprint(statuses_blueprint)
    app.register_blueprint(user_blueprint)
    app.register_blueprint(versions_blueprint)
    return app


def register_event_handlers(app):
    """
    Load code from event handlers folder. Then it registers in the event manager
    each event handler listed in the __init_.py.
    """
    sys.path.insert(0, app.config["EVENT_HANDLERS_FOLDER"])
    try:
        import event_handlers

        events.register_all(event_handlers.event_map, app)
    except ImportError:
        # Handlers are optional.
        app.logger.info("No event handlers folder is configured.")
    return app
