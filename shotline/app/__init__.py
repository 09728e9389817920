import traceback

from flask import Flask, jsonify, current_app
from flasgger import Swagger
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy

from jwt import ExpiredSignatureError

from shotline.app import config, swagger
from shotline.app.services.exception import (
    PersonNotFoundException,
    WrongIdFormatException,
    WrongParameterException,
)

from shotline.app.utils import cache, logs
from shotline.app.utils.flask import ORJSONProvider

app = Flask(__name__)
app.json = ORJSONProvider(app)
app.config.from_object(config)

logs.configure_logs(app)

db = SQLAlchemy(app)
app.extensions["sqlalchemy"].db = db

app.secret_key = app.config["SECRET_KEY"]
jwt = JWTManager(app)  # JWT auth tokens
cache.cache.init_app(app)  # Function caching
swagger = Swagger(
    app, template=swagger.swagger_template, config=swagger.swagger_config
)


@app.teardown_appcontext
def shutdown_session(exception=None):
    db.session.remove()


@app.errorhandler(404)
def page_not_found(error):
    return jsonify(error=True, message=str(error)), 404


@app.errorhandler(WrongIdFormatException)
def id_parameter_format_error(error):
    return (
        jsonify(
            error=True,
            message="One of the ID sent in parameter is not properly formatted.",
        ),
        400,
    )


@app.errorhandler(WrongParameterException)
def wrong_parameter(error):
    return (
        jsonify(error=True, message=error.description, data=error.dict),
        400,
    )


@app.errorhandler(ExpiredSignatureError)
def wrong_token_signature(error):
    return jsonify(error=True, message=str(error)), 401


if not config.DEBUG:

    @app.errorhandler(Exception)
    def server_error(error):
        stacktrace = traceback.format_exc()
        current_app.logger.error(stacktrace)
        return (
            jsonify(error=True, message=str(error), stacktrace=stacktrace),
            500,
        )


def configure_auth():
    from shotline.app.services import persons_service

    @jwt.user_lookup_loader
    def user_lookup_callback(_, payload):
        if payload.get("identity_type") != "person":
            return None
        try:
            person = persons_service.get_person_raw(payload["sub"])
        except PersonNotFoundException:
            return None
        if not person.active:
            current_app.logger.error(
                f"Identity {person.id} is not active anymore"
            )
            return None
        return person


def load_api(app):
    from shotline.app import api

    api.configure(app)
    configure_auth()


load_api(app)
