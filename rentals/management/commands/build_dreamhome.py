"""
One-shot DreamHome build: migrate, seed, verify.

Every step depends on the one before it; the first failure aborts the build.
"""

from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from rentals.exceptions import SeedError
from rentals.services import client_status_counts, verify_seed_load


class Command(BaseCommand):
    help = 'Build the DreamHome schema from scratch and load the seed rows'

    def add_arguments(self, parser):
        parser.add_argument(
            '--skip-seed',
            action='store_true',
            help='Stop after applying the migrations',
        )
        parser.add_argument(
            '--database',
            default=DEFAULT_DB_ALIAS,
            help='Database alias to build',
        )

    def handle(self, *args, **options):
        using = options['database']
        verbosity = options['verbosity']

        self.stdout.write(self.style.SUCCESS('=== APPLYING MIGRATIONS ==='))
        call_command(
            'migrate', 'rentals',
            database=using, interactive=False, verbosity=verbosity, stdout=self.stdout,
        )
        if options['skip_seed']:
            self.stdout.write(self.style.SUCCESS('Schema built; seed skipped.'))
            return

        self.stdout.write(self.style.SUCCESS('\n=== LOADING SEED DATA ==='))
        call_command('seed_dreamhome', database=using, verbosity=verbosity, stdout=self.stdout)

        self.stdout.write(self.style.SUCCESS('\n=== VERIFYING ==='))
        try:
            counts = verify_seed_load(using=using)
        except SeedError as e:
            raise CommandError(f'Build verification failed: {e}') from e

        for table, count in counts.items():
            self.stdout.write(f'  {table}: {count}')
        statuses = client_status_counts(using=using)
        self.stdout.write(f"  Client status: {statuses['Open']} Open, {statuses['Closed']} Closed")
        self.stdout.write(self.style.SUCCESS('\nDreamHome build completed successfully!'))
