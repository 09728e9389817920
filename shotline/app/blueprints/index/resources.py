from flask import current_app
from flask_restful import Resource
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from shotline import __version__
from shotline.app import config, db


class IndexResource(Resource):
    def get(self):
        """
        Get API name and version
        ---
        tags:
          - Index
        responses:
          '200':
            description: API name and version
            content:
              application/json:
                schema:
                  type: object
                  properties:
                    api:
                      type: string
                      example: "Shotline"
                    version:
                      type: string
                      example: "0.1.0"
        """
        return {"api": config.APP_NAME, "version": __version__}


class StatusResource(Resource):
    def get(self):
        """
        Get API status
        ---
        tags:
          - Index
        description: Returns API name, version and database availability.
        responses:
          '200':
            description: API status
            content:
              application/json:
                schema:
                  type: object
                  properties:
                    name:
                      type: string
                      example: "Shotline"
                    version:
                      type: string
                      example: "0.1.0"
                    database-up:
                      type: boolean
                      example: true
        """
        return {
            "name": config.APP_NAME,
            "version": __version__,
            "database-up": self._check_database(),
        }

    def _check_database(self):
        try:
            db.session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            current_app.logger.error("Database is not reachable", exc_info=1)
            return False
