import asyncio
from django.conf import settings
from django.core.management.base import BaseCommand

from apps.core.server import serve


class Command(BaseCommand):
    help = 'Waits until the database is reachable, then serves the API with uvicorn.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--host',
            default=settings.HOST,
            help=f'Address to bind (default: {settings.HOST})',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=settings.PORT,
            help=f'Port to bind (default: {settings.PORT})',
        )
        parser.add_argument(
            '--retry-delay',
            type=float,
            default=settings.STARTUP_RETRY_DELAY,
            help='Seconds between database probes while starting',
        )

    def handle(self, *args, **options):
        self.stdout.write(
            f"Starting on {options['host']}:{options['port']} "
            f"(database probe every {options['retry_delay']:g}s until ready)"
        )
        try:
            asyncio.run(serve(
                host=options['host'],
                port=options['port'],
                retry_delay=options['retry_delay'],
            ))
        except KeyboardInterrupt:
            self.stdout.write('Shutting down')
