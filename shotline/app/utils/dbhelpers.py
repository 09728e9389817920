from sqlalchemy import create_engine
from sqlalchemy_utils import database_exists, create_database
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.orm import close_all_sessions


def get_db_uri(database):
    return URL.create(**database).render_as_string(hide_password=False)


def is_postgresql(db_uri):
    return make_url(db_uri).get_backend_name() == "postgresql"


def reset_all():
    """
    Drop all tables then create them again.
    """
    drop_all()
    return create_all()


def create_all():
    """
    Create all database tables. The database itself is created if it does not
    exist yet.
    """
    from shotline.app import db, config

    engine = create_engine(config.SQLALCHEMY_DATABASE_URI)
    if not database_exists(engine.url):
        create_database(engine.url)
    engine.dispose()
    return db.create_all()


def drop_all():
    """
    Drop all database tables.
    """
    from shotline.app import db

    db.session.flush()
    close_all_sessions()
    return db.drop_all()


def truncate_all():
    """
    Delete every row of every table, children first.
    """
    from shotline.app import db

    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()


def is_init():
    """
    Return True if the tables required by the application exist.
    """
    from shotline.app import db
    from sqlalchemy import inspect

    return inspect(db.engine).has_table("person")
