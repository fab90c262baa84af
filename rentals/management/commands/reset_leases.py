from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS

from rentals.models import Lease
from rentals.services import reset_leases


class Command(BaseCommand):
    help = 'Delete every lease and restart leaseNo at 1 (client status is left as is)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--confirm',
            action='store_true',
            help='Confirm that you want to delete all leases',
        )
        parser.add_argument(
            '--database',
            default=DEFAULT_DB_ALIAS,
            help='Database alias to reset',
        )

    def handle(self, *args, **options):
        using = options['database']
        if not options['confirm']:
            self.stdout.write(
                self.style.WARNING(
                    f'This command will delete {Lease.objects.using(using).count()} lease(s)! '
                    f'Use --confirm to proceed.'
                )
            )
            return

        deleted = reset_leases(using=using)
        self.stdout.write(self.style.SUCCESS(f'Deleted {deleted} lease(s); leaseNo restarts at 1'))
