"""
Seed an empty DreamHome schema with the illustrative rows.

Rows go in dependency order inside one transaction: a failing row rolls back
the whole load. The lease is recorded through services.record_lease, so its
client is closed by the lease-created handler like any other lease.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction

from rentals import seed_data
from rentals.models import Branch, Client, NewspaperAd, PrivateOwner, PropertyForRent, Staff
from rentals.services import record_lease, table_counts

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Seeds an empty DreamHome schema with the illustrative rows'

    def add_arguments(self, parser):
        parser.add_argument(
            '--database',
            default=DEFAULT_DB_ALIAS,
            help='Database alias to seed',
        )

    def handle(self, *args, **options):
        using = options['database']

        if Branch.objects.using(using).exists():
            raise CommandError('DreamHome data is already loaded; seed an empty schema only.')

        self.stdout.write(self.style.WARNING('Starting DreamHome seed...'))
        try:
            with transaction.atomic(using=using):
                self.insert_rows('Branches', Branch, seed_data.BRANCH_FIELDS, seed_data.BRANCHES, using)
                self.insert_rows('Staff', Staff, seed_data.STAFF_FIELDS, seed_data.STAFF, using)
                self.insert_rows('Private owners', PrivateOwner, seed_data.OWNER_FIELDS, seed_data.OWNERS, using)
                self.insert_rows('Properties', PropertyForRent, seed_data.PROPERTY_FIELDS, seed_data.PROPERTIES, using)
                self.insert_rows('Clients', Client, seed_data.CLIENT_FIELDS, seed_data.CLIENTS, using)

                self.stdout.write('Recording leases...')
                for lease in seed_data.LEASES:
                    record_lease(using=using, **lease)

                self.insert_rows('Newspaper adverts', NewspaperAd, seed_data.ADVERT_FIELDS, seed_data.ADVERTS, using)
        except (IntegrityError, ValidationError, ObjectDoesNotExist) as e:
            logger.error(f"DreamHome seed rolled back: {e}")
            raise CommandError(f'Seeding failed, nothing was written: {e}') from e

        for table, count in table_counts(using).items():
            self.stdout.write(f'  {table}: {count}')
        self.stdout.write(self.style.SUCCESS('DreamHome seed complete!'))

    def insert_rows(self, label, model, fields, rows, using):
        self.stdout.write(f'Creating {label}...')
        for row in rows:
            model.objects.using(using).create(**dict(zip(fields, row)))
        logger.info(f"Seeded {len(rows)} {model._meta.db_table} row(s)")
