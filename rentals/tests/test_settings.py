from pathlib import Path

from decouple import RepositoryEnv
from django.conf import settings
from django.test import SimpleTestCase

ENV_EXAMPLE = Path(settings.BASE_DIR) / '.env.example'


class EnvExampleTests(SimpleTestCase):

    def test_example_keeps_the_sqlite_default(self):
        # Copying the example to .env must not switch the database away from SQLite
        entries = RepositoryEnv(str(ENV_EXAMPLE)).data
        self.assertNotIn('DATABASE_URL', entries)
        self.assertEqual(entries['LOG_LEVEL'], 'INFO')

    def test_example_documents_the_postgres_form(self):
        self.assertIn('# DATABASE_URL=postgres://', ENV_EXAMPLE.read_text())
