# Replace PrivateOwner's free-text address with structured street/city/postcode.
#
# The new columns are NOT NULL without a default and nothing here can split an
# old address into its parts, so the step refuses to run (in either direction)
# while PrivateOwner holds rows.

from django.db import migrations, models

from rentals.exceptions import EvolutionOrderingError


def refuse_populated_owners(apps, schema_editor):
    PrivateOwner = apps.get_model('rentals', 'PrivateOwner')
    row_count = PrivateOwner.objects.using(schema_editor.connection.alias).count()
    if row_count:
        raise EvolutionOrderingError('PrivateOwner', row_count, '0003_privateowner_structured_address')


class Migration(migrations.Migration):

    dependencies = [
        ('rentals', '0002_staff_currency'),
    ]

    operations = [
        migrations.RunPython(refuse_populated_owners, migrations.RunPython.noop),
        migrations.RemoveField(
            model_name='privateowner',
            name='address',
        ),
        migrations.AddField(
            model_name='privateowner',
            name='street',
            field=models.CharField(max_length=50),
        ),
        migrations.AddField(
            model_name='privateowner',
            name='city',
            field=models.CharField(max_length=30),
        ),
        migrations.AddField(
            model_name='privateowner',
            name='postcode',
            field=models.CharField(max_length=10),
        ),
        # Runs first when unapplying
        migrations.RunPython(migrations.RunPython.noop, refuse_populated_owners),
    ]
