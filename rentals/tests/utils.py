"""Row builders for the rentals tests. Anything not passed in is made up by Faker."""

from decimal import Decimal

from faker import Faker

from rentals.models import PROPERTY_TYPES, Branch, Client, PrivateOwner, PropertyForRent, Staff

fake = Faker('en_AU')
Faker.seed(1972)


def make_branch(branch_no='B001', **overrides):
    fields = {
        'branch_no': branch_no,
        'street': fake.street_address()[:50],
        'city': fake.city()[:30],
        'postcode': fake.postcode()[:10],
    }
    fields.update(overrides)
    return Branch.objects.create(**fields)


def make_staff(staff_no, branch, **overrides):
    fields = {
        'staff_no': staff_no,
        'first_name': fake.first_name()[:30],
        'last_name': fake.last_name()[:30],
        'position': fake.random_element(['Manager', 'Supervisor', 'Assistant']),
        'sex': fake.random_element(['M', 'F']),
        'salary': Decimal(fake.random_int(min=9000, max=40000)),
        'branch': branch,
    }
    fields.update(overrides)
    return Staff.objects.create(**fields)


def make_owner(owner_no, **overrides):
    fields = {
        'owner_no': owner_no,
        'first_name': fake.first_name()[:30],
        'last_name': fake.last_name()[:30],
        'tel_no': fake.phone_number()[:15],
        'street': fake.street_address()[:50],
        'city': fake.city()[:30],
        'postcode': fake.postcode()[:10],
    }
    fields.update(overrides)
    return PrivateOwner.objects.create(**fields)


def make_property(property_no, owner, branch, staff=None, **overrides):
    fields = {
        'property_no': property_no,
        'street': fake.street_address()[:50],
        'city': fake.city()[:30],
        'postcode': fake.postcode()[:10],
        'property_type': fake.random_element(PROPERTY_TYPES),
        'rooms': fake.random_int(min=1, max=6),
        'rent': Decimal(fake.random_int(min=200, max=900)),
        'owner': owner,
        'staff': staff,
        'branch': branch,
    }
    fields.update(overrides)
    return PropertyForRent.objects.create(**fields)


def make_client(client_no, branch, **overrides):
    fields = {
        'client_no': client_no,
        'first_name': fake.first_name()[:30],
        'last_name': fake.last_name()[:30],
        'tel_no': fake.phone_number()[:15],
        'pref_type': fake.random_element(PROPERTY_TYPES),
        'max_rent': Decimal(fake.random_int(min=200, max=900)),
        'branch': branch,
    }
    fields.update(overrides)
    return Client.objects.create(**fields)
