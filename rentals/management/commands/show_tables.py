"""
Print the DreamHome tables for verification: a full scan of each, or just
the row counts.
"""

from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS

from rentals.models import BUILD_ORDER
from rentals.services import table_counts

TABLES = {model._meta.db_table: model for model in BUILD_ORDER}


class Command(BaseCommand):
    help = 'Show the rows (or row counts) of the DreamHome tables'

    def add_arguments(self, parser):
        parser.add_argument(
            '--table',
            action='append',
            choices=list(TABLES),
            help='Only show this table (repeatable)',
        )
        parser.add_argument(
            '--counts',
            action='store_true',
            help='Print row counts instead of rows',
        )
        parser.add_argument(
            '--database',
            default=DEFAULT_DB_ALIAS,
            help='Database alias to read',
        )

    def handle(self, *args, **options):
        using = options['database']
        selected = options['table'] or list(TABLES)

        if options['counts']:
            counts = table_counts(using)
            for table in selected:
                self.stdout.write(f'{table}: {counts[table]}')
            return

        for table in selected:
            self.show_table(TABLES[table], using)

    def show_table(self, model, using):
        columns = list(model._meta.concrete_fields)
        rows = list(model.objects.using(using).all())

        self.stdout.write(self.style.SUCCESS(f'\n=== {model._meta.db_table} ({len(rows)} rows) ==='))
        self.stdout.write(' | '.join(field.column for field in columns))
        for row in rows:
            values = [getattr(row, field.attname) for field in columns]
            self.stdout.write(' | '.join('NULL' if value is None else str(value) for value in values))
