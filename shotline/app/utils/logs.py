import logging

from shotline.app import config


def configure_logs(app):
    """
    Set application log level from configuration. When logs mode is set to
    gelf, records are also sent to a Graylog compatible server.
    """
    level = getattr(logging, config.LOGS_LEVEL.upper(), logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger("shotline").setLevel(level)

    if config.LOGS_MODE == "gelf":
        from pygelf import GelfTcpHandler

        graylog_handler = GelfTcpHandler(
            host=app.config["LOGS_HOST"],
            port=app.config["LOGS_PORT"],
            include_extra_fields=True,
        )
        graylog_handler.setLevel(logging.ERROR)
        app.logger.addHandler(graylog_handler)
        logging.getLogger("shotline").addHandler(graylog_handler)
