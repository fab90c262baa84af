"""
Schema evolution replayed against rows that existed before each step.

Each test starts from an earlier migration, writes rows through the historical
models, then migrates forward and checks what the evolution did to them.
"""

from decimal import Decimal

from django.db import connection
from django.db.migrations.executor import MigrationExecutor
from django.test import TransactionTestCase

from rentals.exceptions import EvolutionOrderingError


class MigrationTestCase(TransactionTestCase):
    app = 'rentals'
    migrate_from = None
    migrate_to = None

    def setUp(self):
        super().setUp()
        self.old_apps = self.migrate(self.migrate_from)

    def tearDown(self):
        executor = MigrationExecutor(connection)
        executor.migrate(executor.loader.graph.leaf_nodes())
        super().tearDown()

    def migrate(self, name):
        """Migrate the app to `name` and return the historical apps at that point."""
        executor = MigrationExecutor(connection)
        executor.migrate([(self.app, name)])
        return MigrationExecutor(connection).loader.project_state([(self.app, name)]).apps


class BackfillDefaultsTests(MigrationTestCase):
    migrate_from = '0001_initial'
    migrate_to = '0004_client_status'

    def setUp(self):
        super().setUp()
        Branch = self.old_apps.get_model('rentals', 'Branch')
        Staff = self.old_apps.get_model('rentals', 'Staff')
        Client = self.old_apps.get_model('rentals', 'Client')

        branch = Branch.objects.create(branch_no='B001', street='16 George St', city='Sydney', postcode='2000')
        Staff.objects.create(
            staff_no='SL21', first_name='John', last_name='White', position='Manager',
            sex='M', salary=Decimal('30000.00'), branch=branch,
        )
        Staff.objects.create(
            staff_no='SG37', first_name='Ann', last_name='Beech', position='Assistant',
            sex='F', salary=Decimal('12000.00'), branch=branch,
        )
        Client.objects.create(
            client_no='C001', first_name='Aline', last_name='Stewart', tel_no='0400 111 222',
            pref_type='Flat', max_rent=Decimal('500.00'), branch=branch,
        )

    def test_existing_staff_get_default_currency(self):
        new_apps = self.migrate(self.migrate_to)
        Staff = new_apps.get_model('rentals', 'Staff')
        self.assertEqual(dict(Staff.objects.values_list('staff_no', 'currency')), {'SL21': 'AUD', 'SG37': 'AUD'})
        self.assertEqual(Staff.objects.count(), 2)

    def test_existing_clients_start_open(self):
        new_apps = self.migrate(self.migrate_to)
        Client = new_apps.get_model('rentals', 'Client')
        self.assertEqual(Client.objects.get(pk='C001').status, 'Open')


class OwnerAddressGuardTests(MigrationTestCase):
    migrate_from = '0002_staff_currency'
    migrate_to = '0003_privateowner_structured_address'

    def test_empty_owner_table_is_restructured(self):
        new_apps = self.migrate(self.migrate_to)
        PrivateOwner = new_apps.get_model('rentals', 'PrivateOwner')
        field_names = {field.name for field in PrivateOwner._meta.get_fields()}

        self.assertIn('street', field_names)
        self.assertIn('postcode', field_names)
        self.assertNotIn('address', field_names)

    def test_populated_owner_table_is_refused(self):
        PrivateOwner = self.old_apps.get_model('rentals', 'PrivateOwner')
        PrivateOwner.objects.create(
            owner_no='CO40', first_name='Tina', last_name='Murphy',
            address='63 Well St, Sydney 2000', tel_no='0412 345 678',
        )

        with self.assertRaises(EvolutionOrderingError) as raised:
            self.migrate(self.migrate_to)

        self.assertEqual(raised.exception.table, 'PrivateOwner')
        self.assertEqual(raised.exception.row_count, 1)
        # Still at 0002 with the old address column intact
        self.assertEqual(PrivateOwner.objects.get().address, '63 Well St, Sydney 2000')
        PrivateOwner.objects.all().delete()

    def test_unapplying_with_owners_present_is_refused(self):
        new_apps = self.migrate(self.migrate_to)
        PrivateOwner = new_apps.get_model('rentals', 'PrivateOwner')
        PrivateOwner.objects.create(
            owner_no='CO40', first_name='Tina', last_name='Murphy', tel_no='0412 345 678',
            street='63 Well St', city='Sydney', postcode='2000',
        )

        with self.assertRaises(EvolutionOrderingError):
            self.migrate(self.migrate_from)

        self.assertEqual(PrivateOwner.objects.get().street, '63 Well St')
