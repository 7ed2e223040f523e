"""
Management command to run the location tracker HTTP server.
Creates the schema, opens the shared store and shuts down cleanly on SIGINT/SIGTERM.
"""
import logging
import signal
import threading
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.core.wsgi import get_wsgi_application

from apps.locations.store import get_store
from apps.locations.views.api.base import available_endpoints

logger = logging.getLogger('apps.locations.server')


class AccessLogRequestHandler(WSGIRequestHandler):
    # One access line per request, routed through the app loggers
    def log_message(self, format, *args):
        logger.info(f"[HTTP] {self.address_string()} {format % args}")


class Command(BaseCommand):
    help = 'Run the location tracker API server'

    def add_arguments(self, parser):
        parser.add_argument(
            '--host',
            type=str,
            default=settings.LOCATION_TRACKER_HOST,
            help='Address to listen on',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=settings.LOCATION_TRACKER_PORT,
            help='Port to listen on',
        )

    def handle(self, *args, **options):
        host = options['host']
        port = options['port']

        # Create the locations table and indexes if missing
        call_command('migrate', interactive=False, verbosity=0)

        store = get_store()
        store.open()

        try:
            # Single-threaded: every request runs on the one shared connection
            server = make_server(host, port, get_wsgi_application(),
                                 server_class=WSGIServer, handler_class=AccessLogRequestHandler)
        except OSError as e:
            store.close()
            raise CommandError(f'Cannot listen on {host}:{port}: {e}')

        def request_shutdown(signum, frame):
            logger.info(f"Signal {signal.Signals(signum).name} received, stopping server...")
            # shutdown() blocks until serve_forever() returns, so it can't run on this thread
            threading.Thread(target=server.shutdown, daemon=True).start()

        signal.signal(signal.SIGINT, request_shutdown)
        signal.signal(signal.SIGTERM, request_shutdown)

        self.log_banner(host, port)

        try:
            # Returns only after the in-flight request has completed
            server.serve_forever()
        finally:
            server.server_close()
            logger.info("Closing database...")
            store.close()
            logger.info("Server stopped")

    def log_banner(self, host, port):
        base = f"http://{'localhost' if host in ('0.0.0.0', '') else host}:{port}"
        logger.info('=' * 50)
        logger.info("Location Tracker API started")
        logger.info(f"Listening on {base}")
        logger.info(f"Database: {get_store().path}")
        logger.info(f"Logs: {settings.LOG_DIR}")
        logger.info(f"API key required: {'yes' if settings.LOCATION_TRACKER_API_KEY else 'no'}")
        logger.info('')
        logger.info('Available endpoints:')
        for endpoint in available_endpoints():
            method, path = endpoint.split(' ', 1)
            logger.info(f"  {method:<6} {base}{path}")
        logger.info('')
        logger.info('Press Ctrl+C to stop the server')
        logger.info('=' * 50)
