from decimal import Decimal
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, TransactionTestCase

from rentals import seed_data
from rentals.models import Branch, Client, Lease, Staff
from rentals.services import table_counts


def run(command, *args, **options):
    out = StringIO()
    call_command(command, *args, stdout=out, **options)
    return out.getvalue()


class SeedCommandTests(TestCase):

    def test_full_seed_row_counts(self):
        run('seed_dreamhome')

        self.assertEqual(table_counts(), {
            'Branch': 8,
            'Staff': 17,
            'PrivateOwner': 5,
            'PropertyForRent': 7,
            'Client': 5,
            'Lease': 1,
            'Newspapers': 3,
        })

    def test_seed_lease_closes_only_c001(self):
        run('seed_dreamhome')

        self.assertEqual(list(Client.objects.filter(status='Closed').values_list('pk', flat=True)), ['C001'])
        self.assertEqual(Client.objects.filter(status='Open').count(), 4)

        lease = Lease.objects.get()
        self.assertEqual(lease.client_id, 'C001')
        self.assertEqual(lease.property_for_rent_id, 'PFR01')
        self.assertEqual(lease.rent_amount, Decimal('450.00'))

    def test_seeded_staff_are_paid_in_aud(self):
        run('seed_dreamhome')
        self.assertEqual(set(Staff.objects.values_list('currency', flat=True)), {'AUD'})

    def test_seed_refuses_a_populated_database(self):
        run('seed_dreamhome')
        with self.assertRaises(CommandError):
            run('seed_dreamhome')
        self.assertEqual(Branch.objects.count(), 8)

    def test_failed_seed_writes_nothing(self):
        bad_advert = seed_data.ADVERTS[0][:-1] + (Decimal('-1.00'),)
        with mock.patch.object(seed_data, 'ADVERTS', [bad_advert]):
            with self.assertRaises(CommandError):
                run('seed_dreamhome')

        self.assertEqual(set(table_counts().values()), {0})


class ShowTablesCommandTests(TestCase):

    def setUp(self):
        run('seed_dreamhome')

    def test_counts(self):
        output = run('show_tables', counts=True)
        self.assertIn('Branch: 8', output)
        self.assertIn('Staff: 17', output)
        self.assertIn('Newspapers: 3', output)

    def test_full_scan_of_one_table(self):
        output = run('show_tables', table=['Lease'])

        self.assertIn('=== Lease (1 rows) ===', output)
        self.assertIn('leaseNo | clientNo | propertyNo | rentStart | rentEnd | rentAmount | paymentMethod', output)
        self.assertIn('C001 | PFR01 | 2024-07-01 | 2025-06-30 | 450.00 | Direct Debit', output)
        self.assertNotIn('=== Branch', output)

    def test_full_scan_of_every_table(self):
        output = run('show_tables')
        for table in ['Branch', 'Staff', 'PrivateOwner', 'PropertyForRent', 'Client', 'Lease', 'Newspapers']:
            self.assertIn(f'=== {table} (', output)
        # Unassigned property staff print as NULL
        self.assertIn('PFR05 | 16 Holhead St | Brisbane | 4000 | House | 6 | 650.00 | CO87 | NULL | B003', output)


class ResetLeasesCommandTests(TestCase):

    def setUp(self):
        run('seed_dreamhome')

    def test_reset_needs_confirmation(self):
        output = run('reset_leases')
        self.assertIn('Use --confirm to proceed', output)
        self.assertEqual(Lease.objects.count(), 1)

    def test_confirmed_reset(self):
        output = run('reset_leases', confirm=True)
        self.assertIn('Deleted 1 lease(s)', output)
        self.assertEqual(Lease.objects.count(), 0)
        self.assertEqual(Client.objects.get(pk='C001').status, 'Closed')


class BuildCommandTests(TransactionTestCase):

    def test_build_migrates_seeds_and_verifies(self):
        output = run('build_dreamhome')

        self.assertIn('Client status: 4 Open, 1 Closed', output)
        self.assertIn('DreamHome build completed successfully!', output)
        self.assertEqual(table_counts()['Lease'], 1)

    def test_skip_seed_leaves_tables_empty(self):
        output = run('build_dreamhome', skip_seed=True)
        self.assertIn('seed skipped', output)
        self.assertEqual(set(table_counts().values()), {0})

    def test_verification_mismatch_fails_the_build(self):
        expected = dict(seed_data.EXPECTED_COUNTS, Branch=9)
        with mock.patch.object(seed_data, 'EXPECTED_COUNTS', expected):
            with self.assertRaisesMessage(CommandError, 'Branch: expected 9 row(s), found 8'):
                run('build_dreamhome')
