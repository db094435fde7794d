"""WSGI entrypoint for Passenger-style hosts expecting ``application``."""

from lockeys.backend.app import create_app

application = create_app()
