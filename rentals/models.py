from django.db import models, router, transaction
from django.db.models import F, Q

# Shared by PropertyForRent.type and Client.prefType
PROPERTY_TYPE_CHOICES = [
    ('House', 'House'),
    ('Flat', 'Flat'),
    ('Apartment', 'Apartment'),
    ('Bungalow', 'Bungalow'),
]
PROPERTY_TYPES = [value for value, _ in PROPERTY_TYPE_CHOICES]


class Branch(models.Model):
    """A physical office of the rental business."""
    branch_no = models.CharField(db_column='branchNo', max_length=4, primary_key=True)
    street = models.CharField(max_length=50)
    city = models.CharField(max_length=30)
    postcode = models.CharField(max_length=10)

    class Meta:
        db_table = 'Branch'
        ordering = ['branch_no']

    def __str__(self):
        return f"{self.branch_no} ({self.city})"


class Staff(models.Model):
    """An employee attached to exactly one branch."""
    SEX_CHOICES = [
        ('M', 'Male'),
        ('F', 'Female'),
    ]

    staff_no = models.CharField(db_column='staffNo', max_length=5, primary_key=True)
    first_name = models.CharField(db_column='fName', max_length=30)
    last_name = models.CharField(db_column='lName', max_length=30)
    position = models.CharField(max_length=20)
    sex = models.CharField(max_length=1, choices=SEX_CHOICES)
    salary = models.DecimalField(max_digits=9, decimal_places=2)
    branch = models.ForeignKey(
        Branch, on_delete=models.PROTECT, db_column='branchNo', related_name='staff'
    )
    # Added by 0002_staff_currency; back-filled for existing rows
    currency = models.CharField(max_length=3, default='AUD')

    class Meta:
        db_table = 'Staff'
        ordering = ['staff_no']
        verbose_name_plural = 'staff'
        constraints = [
            models.CheckConstraint(condition=Q(salary__gte=0), name='staff_salary_non_negative'),
            models.CheckConstraint(condition=Q(sex__in=['M', 'F']), name='staff_sex_valid'),
        ]

    def __str__(self):
        return f"{self.staff_no} - {self.first_name} {self.last_name} ({self.position})"


class PrivateOwner(models.Model):
    """An individual owning one or more rentable properties."""
    owner_no = models.CharField(db_column='ownerNo', max_length=5, primary_key=True)
    first_name = models.CharField(db_column='fName', max_length=30)
    last_name = models.CharField(db_column='lName', max_length=30)
    tel_no = models.CharField(db_column='telNo', max_length=15)

    # Structured address, replacing the free-text `address` column (0003)
    street = models.CharField(max_length=50)
    city = models.CharField(max_length=30)
    postcode = models.CharField(max_length=10)

    class Meta:
        db_table = 'PrivateOwner'
        ordering = ['owner_no']

    def __str__(self):
        return f"{self.owner_no} - {self.first_name} {self.last_name}"


class PropertyForRent(models.Model):
    """A rentable unit owned by one owner and managed by one branch."""
    property_no = models.CharField(db_column='propertyNo', max_length=5, primary_key=True)
    street = models.CharField(max_length=50)
    city = models.CharField(max_length=30)
    postcode = models.CharField(max_length=10)
    property_type = models.CharField(db_column='type', max_length=10, choices=PROPERTY_TYPE_CHOICES)
    rooms = models.SmallIntegerField()
    rent = models.DecimalField(max_digits=8, decimal_places=2)
    owner = models.ForeignKey(
        PrivateOwner, on_delete=models.PROTECT, db_column='ownerNo', related_name='properties'
    )
    # Staff assignment is optional
    staff = models.ForeignKey(
        Staff, on_delete=models.PROTECT, db_column='staffNo', related_name='properties',
        blank=True, null=True,
    )
    branch = models.ForeignKey(
        Branch, on_delete=models.PROTECT, db_column='branchNo', related_name='properties'
    )

    class Meta:
        db_table = 'PropertyForRent'
        ordering = ['property_no']
        verbose_name_plural = 'properties for rent'
        constraints = [
            models.CheckConstraint(condition=Q(property_type__in=PROPERTY_TYPES), name='property_type_valid'),
            models.CheckConstraint(condition=Q(rooms__gt=0), name='property_rooms_positive'),
            models.CheckConstraint(condition=Q(rent__gt=0), name='property_rent_positive'),
        ]

    def __str__(self):
        return f"{self.property_no} - {self.street}, {self.city}"


class Client(models.Model):
    """A prospective renter registered at a branch."""
    OPEN = 'Open'
    CLOSED = 'Closed'
    STATUS_CHOICES = [
        (OPEN, 'Open'),
        (CLOSED, 'Closed'),
    ]

    client_no = models.CharField(db_column='clientNo', max_length=5, primary_key=True)
    first_name = models.CharField(db_column='fName', max_length=30)
    last_name = models.CharField(db_column='lName', max_length=30)
    tel_no = models.CharField(db_column='telNo', max_length=15)
    pref_type = models.CharField(db_column='prefType', max_length=10, choices=PROPERTY_TYPE_CHOICES)
    max_rent = models.DecimalField(db_column='maxRent', max_digits=8, decimal_places=2)
    branch = models.ForeignKey(
        Branch, on_delete=models.PROTECT, db_column='branchNo', related_name='clients'
    )
    # Added by 0004_client_status. Only ever moves Open -> Closed, see signals.py
    status = models.CharField(max_length=6, choices=STATUS_CHOICES, default=OPEN)

    class Meta:
        db_table = 'Client'
        ordering = ['client_no']
        constraints = [
            models.CheckConstraint(condition=Q(pref_type__in=PROPERTY_TYPES), name='client_pref_type_valid'),
            models.CheckConstraint(condition=Q(max_rent__gte=0), name='client_max_rent_non_negative'),
            models.CheckConstraint(condition=Q(status__in=['Open', 'Closed']), name='client_status_valid'),
        ]

    def __str__(self):
        return f"{self.client_no} - {self.first_name} {self.last_name} [{self.status}]"


class Lease(models.Model):
    """A time-bounded rental agreement between one client and one property."""
    lease_no = models.AutoField(db_column='leaseNo', primary_key=True)
    client = models.ForeignKey(
        Client, on_delete=models.PROTECT, db_column='clientNo', related_name='leases'
    )
    property_for_rent = models.ForeignKey(
        PropertyForRent, on_delete=models.PROTECT, db_column='propertyNo', related_name='leases'
    )
    rent_start = models.DateField(db_column='rentStart')
    rent_end = models.DateField(db_column='rentEnd')
    rent_amount = models.DecimalField(db_column='rentAmount', max_digits=8, decimal_places=2)
    payment_method = models.CharField(db_column='paymentMethod', max_length=20)

    class Meta:
        db_table = 'Lease'
        ordering = ['lease_no']
        constraints = [
            models.CheckConstraint(condition=Q(rent_end__gt=F('rent_start')), name='lease_rent_period_valid'),
            models.CheckConstraint(condition=Q(rent_amount__gt=0), name='lease_rent_amount_positive'),
        ]

    def save(self, *args, **kwargs):
        # post_save handlers (client status sync) commit or roll back with the insert
        using = kwargs.get('using') or router.db_for_write(type(self), instance=self)
        with transaction.atomic(using=using):
            super().save(*args, **kwargs)

    def __str__(self):
        return f"Lease {self.lease_no}: {self.client_id} @ {self.property_for_rent_id}"


class NewspaperAd(models.Model):
    """An advertisement for a property placed in an external publication."""
    newspaper_ad_no = models.AutoField(db_column='newspaperAdNo', primary_key=True)
    newspaper_name = models.CharField(db_column='newspaperName', max_length=50)
    street = models.CharField(max_length=50)
    city = models.CharField(max_length=30)
    postcode = models.CharField(max_length=10)
    tel_no = models.CharField(db_column='telNo', max_length=15)
    contact_name = models.CharField(db_column='contactName', max_length=50)
    property_for_rent = models.ForeignKey(
        PropertyForRent, on_delete=models.PROTECT, db_column='propertyNo', related_name='adverts'
    )
    date_advertised = models.DateField(db_column='dateAdvertised')
    cost_to_advertise = models.DecimalField(db_column='costToAdvertise', max_digits=8, decimal_places=2)

    class Meta:
        db_table = 'Newspapers'
        ordering = ['newspaper_ad_no']
        constraints = [
            models.CheckConstraint(condition=Q(cost_to_advertise__gte=0), name='newspaper_cost_non_negative'),
        ]

    def __str__(self):
        return f"{self.newspaper_name} ad for {self.property_for_rent_id} on {self.date_advertised}"


# Creation order; every table only references tables before it
BUILD_ORDER = [Branch, Staff, PrivateOwner, PropertyForRent, Client, Lease, NewspaperAd]
