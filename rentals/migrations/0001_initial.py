# Initial DreamHome tables, created in foreign-key dependency order

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Branch',
            fields=[
                ('branch_no', models.CharField(db_column='branchNo', max_length=4, primary_key=True, serialize=False)),
                ('street', models.CharField(max_length=50)),
                ('city', models.CharField(max_length=30)),
                ('postcode', models.CharField(max_length=10)),
            ],
            options={
                'db_table': 'Branch',
                'ordering': ['branch_no'],
            },
        ),
        migrations.CreateModel(
            name='Staff',
            fields=[
                ('staff_no', models.CharField(db_column='staffNo', max_length=5, primary_key=True, serialize=False)),
                ('first_name', models.CharField(db_column='fName', max_length=30)),
                ('last_name', models.CharField(db_column='lName', max_length=30)),
                ('position', models.CharField(max_length=20)),
                ('sex', models.CharField(choices=[('M', 'Male'), ('F', 'Female')], max_length=1)),
                ('salary', models.DecimalField(decimal_places=2, max_digits=9)),
                ('branch', models.ForeignKey(db_column='branchNo', on_delete=django.db.models.deletion.PROTECT, related_name='staff', to='rentals.branch')),
            ],
            options={
                'db_table': 'Staff',
                'ordering': ['staff_no'],
                'verbose_name_plural': 'staff',
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('salary__gte', 0)), name='staff_salary_non_negative'),
                    models.CheckConstraint(condition=models.Q(('sex__in', ['M', 'F'])), name='staff_sex_valid'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PrivateOwner',
            fields=[
                ('owner_no', models.CharField(db_column='ownerNo', max_length=5, primary_key=True, serialize=False)),
                ('first_name', models.CharField(db_column='fName', max_length=30)),
                ('last_name', models.CharField(db_column='lName', max_length=30)),
                ('address', models.CharField(max_length=100)),
                ('tel_no', models.CharField(db_column='telNo', max_length=15)),
            ],
            options={
                'db_table': 'PrivateOwner',
                'ordering': ['owner_no'],
            },
        ),
        migrations.CreateModel(
            name='PropertyForRent',
            fields=[
                ('property_no', models.CharField(db_column='propertyNo', max_length=5, primary_key=True, serialize=False)),
                ('street', models.CharField(max_length=50)),
                ('city', models.CharField(max_length=30)),
                ('postcode', models.CharField(max_length=10)),
                ('property_type', models.CharField(choices=[('House', 'House'), ('Flat', 'Flat'), ('Apartment', 'Apartment'), ('Bungalow', 'Bungalow')], db_column='type', max_length=10)),
                ('rooms', models.SmallIntegerField()),
                ('rent', models.DecimalField(decimal_places=2, max_digits=8)),
                ('owner', models.ForeignKey(db_column='ownerNo', on_delete=django.db.models.deletion.PROTECT, related_name='properties', to='rentals.privateowner')),
                ('staff', models.ForeignKey(blank=True, db_column='staffNo', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='properties', to='rentals.staff')),
                ('branch', models.ForeignKey(db_column='branchNo', on_delete=django.db.models.deletion.PROTECT, related_name='properties', to='rentals.branch')),
            ],
            options={
                'db_table': 'PropertyForRent',
                'ordering': ['property_no'],
                'verbose_name_plural': 'properties for rent',
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('property_type__in', ['House', 'Flat', 'Apartment', 'Bungalow'])), name='property_type_valid'),
                    models.CheckConstraint(condition=models.Q(('rooms__gt', 0)), name='property_rooms_positive'),
                    models.CheckConstraint(condition=models.Q(('rent__gt', 0)), name='property_rent_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Client',
            fields=[
                ('client_no', models.CharField(db_column='clientNo', max_length=5, primary_key=True, serialize=False)),
                ('first_name', models.CharField(db_column='fName', max_length=30)),
                ('last_name', models.CharField(db_column='lName', max_length=30)),
                ('tel_no', models.CharField(db_column='telNo', max_length=15)),
                ('pref_type', models.CharField(choices=[('House', 'House'), ('Flat', 'Flat'), ('Apartment', 'Apartment'), ('Bungalow', 'Bungalow')], db_column='prefType', max_length=10)),
                ('max_rent', models.DecimalField(db_column='maxRent', decimal_places=2, max_digits=8)),
                ('branch', models.ForeignKey(db_column='branchNo', on_delete=django.db.models.deletion.PROTECT, related_name='clients', to='rentals.branch')),
            ],
            options={
                'db_table': 'Client',
                'ordering': ['client_no'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('pref_type__in', ['House', 'Flat', 'Apartment', 'Bungalow'])), name='client_pref_type_valid'),
                    models.CheckConstraint(condition=models.Q(('max_rent__gte', 0)), name='client_max_rent_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Lease',
            fields=[
                ('lease_no', models.AutoField(db_column='leaseNo', primary_key=True, serialize=False)),
                ('client', models.ForeignKey(db_column='clientNo', on_delete=django.db.models.deletion.PROTECT, related_name='leases', to='rentals.client')),
                ('property_for_rent', models.ForeignKey(db_column='propertyNo', on_delete=django.db.models.deletion.PROTECT, related_name='leases', to='rentals.propertyforrent')),
                ('rent_start', models.DateField(db_column='rentStart')),
                ('rent_end', models.DateField(db_column='rentEnd')),
                ('rent_amount', models.DecimalField(db_column='rentAmount', decimal_places=2, max_digits=8)),
                ('payment_method', models.CharField(db_column='paymentMethod', max_length=20)),
            ],
            options={
                'db_table': 'Lease',
                'ordering': ['lease_no'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('rent_end__gt', models.F('rent_start'))), name='lease_rent_period_valid'),
                    models.CheckConstraint(condition=models.Q(('rent_amount__gt', 0)), name='lease_rent_amount_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='NewspaperAd',
            fields=[
                ('newspaper_ad_no', models.AutoField(db_column='newspaperAdNo', primary_key=True, serialize=False)),
                ('newspaper_name', models.CharField(db_column='newspaperName', max_length=50)),
                ('street', models.CharField(max_length=50)),
                ('city', models.CharField(max_length=30)),
                ('postcode', models.CharField(max_length=10)),
                ('tel_no', models.CharField(db_column='telNo', max_length=15)),
                ('contact_name', models.CharField(db_column='contactName', max_length=50)),
                ('property_for_rent', models.ForeignKey(db_column='propertyNo', on_delete=django.db.models.deletion.PROTECT, related_name='adverts', to='rentals.propertyforrent')),
                ('date_advertised', models.DateField(db_column='dateAdvertised')),
                ('cost_to_advertise', models.DecimalField(db_column='costToAdvertise', decimal_places=2, max_digits=8)),
            ],
            options={
                'db_table': 'Newspapers',
                'ordering': ['newspaper_ad_no'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('cost_to_advertise__gte', 0)), name='newspaper_cost_non_negative'),
                ],
            },
        ),
    ]
