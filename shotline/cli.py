#!/usr/bin/env python
import sys

import click

from shotline.app.utils import dbhelpers, auth, commands
from shotline.app.services import persons_service

from shotline.app import app


@click.group()
def cli():
    pass


@cli.command()
def version():
    """
    Return current installation version.
    """
    from shotline import __version__

    print(f"Shotline version: {__version__}")


@cli.command()
def init_db():
    "Create database and tables."

    print("Creating database and tables...")
    with app.app_context():
        dbhelpers.create_all()
    print("Database and tables created.")


@cli.command()
def is_db_ready():
    """
    Return a message telling whether the database is initialized or not.
    """
    with app.app_context():
        if dbhelpers.is_init():
            print("Database is initialized.")
        else:
            print(
                "Database is not initialized. "
                "Run 'shotline init-db' and 'shotline init-data'."
            )


@cli.command()
def clear_db():
    "Drop all tables from database"

    with app.app_context():
        print("Deleting database and tables...")
        dbhelpers.drop_all()
        print("Database and tables deleted.")


@cli.command()
def reset_db():
    "Drop all tables, then recreate them."
    with app.app_context():
        print("Resetting database and tables...")
        dbhelpers.reset_all()
        print("Database and tables created.")


@cli.command()
def init_data():
    "Generate minimal data set required to run Shotline."
    commands.init_data()


@cli.command()
@click.argument("email")
@click.option("--password", default=None)
def create_admin(email, password):
    """
    Create an admin user to allow usage of the API when database is empty.
    An existing person is promoted to admin.
    """
    if password is None:
        raise click.MissingParameter(
            param_type="option", param_hint="--password"
        )
    with app.app_context():
        try:
            persons_service.create_admin(email, password)
            print("Admin successfully created.")
        except auth.PasswordTooShortException:
            print("Password is too short.")
            sys.exit(1)
        except auth.EmailNotValidException:
            print("Email is not valid.")
            sys.exit(1)


@cli.command()
def recompute_durations():
    """
    Recompute the stored duration of every episode from its sequences. Useful
    after manual database edits.
    """
    commands.recompute_durations()


@cli.command()
def clear_memory_cache():
    "Clear memory cache."
    commands.clear_memory_cache()


@cli.command()
@click.option("--port", default=None, type=int)
def run(port):
    "Run the development server."
    app.run(port=port or app.config["DEBUG_PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    cli()
