"""WSGI entrypoint for serving the langswitch backend."""

from langswitch.backend.app import create_app

# WSGI servers look up a module-level variable named ``application``.
application = create_app()
