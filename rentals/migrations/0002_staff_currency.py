# Staff gains a salary currency; the default back-fills existing rows

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('rentals', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='staff',
            name='currency',
            field=models.CharField(default='AUD', max_length=3),
        ),
    ]
