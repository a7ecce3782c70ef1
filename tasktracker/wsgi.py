"""WSGI entry point, e.g. ``gunicorn tasktracker.wsgi:app``."""

from tasktracker import create_app


app = create_app()
