"""
Illustrative DreamHome rows, listed in dependency order.

Each table is a tuple of model field names plus the literal rows for it.
Salaries, rents and costs are AUD.
"""

from datetime import date
from decimal import Decimal

BRANCH_FIELDS = ('branch_no', 'street', 'city', 'postcode')
BRANCHES = [
    ('B001', '16 George St', 'Sydney', '2000'),
    ('B002', '22 Collins St', 'Melbourne', '3000'),
    ('B003', '163 Queen St', 'Brisbane', '4000'),
    ('B004', '32 King William St', 'Adelaide', '5000'),
    ('B005', '8 Hay St', 'Perth', '6000'),
    ('B006', '5 Elizabeth St', 'Hobart', '7000'),
    ('B007', '19 London Cct', 'Canberra', '2601'),
    ('B008', '40 Smith St', 'Darwin', '0800'),
]

STAFF_FIELDS = ('staff_no', 'first_name', 'last_name', 'position', 'sex', 'salary', 'branch_id')
STAFF = [
    ('SL21', 'John', 'White', 'Manager', 'M', Decimal('30000.00'), 'B005'),
    ('SG37', 'Ann', 'Beech', 'Assistant', 'F', Decimal('12000.00'), 'B003'),
    ('SG14', 'David', 'Ford', 'Supervisor', 'M', Decimal('18000.00'), 'B003'),
    ('SA9', 'Mary', 'Howe', 'Assistant', 'F', Decimal('9000.00'), 'B007'),
    ('SG5', 'Susan', 'Brand', 'Manager', 'F', Decimal('24000.00'), 'B003'),
    ('SL41', 'Julie', 'Lee', 'Assistant', 'F', Decimal('9000.00'), 'B005'),
    ('SB10', 'Liam', 'Nguyen', 'Manager', 'M', Decimal('28000.00'), 'B001'),
    ('SB11', 'Chloe', 'Tran', 'Supervisor', 'F', Decimal('19500.00'), 'B001'),
    ('SB12', 'Oliver', 'Smith', 'Assistant', 'M', Decimal('11000.00'), 'B001'),
    ('SC20', 'Grace', 'Kelly', 'Manager', 'F', Decimal('27500.00'), 'B002'),
    ('SC21', 'Noah', 'Brown', 'Assistant', 'M', Decimal('10500.00'), 'B002'),
    ('SD30', 'Isla', 'Wilson', 'Manager', 'F', Decimal('26000.00'), 'B004'),
    ('SD31', 'Jack', 'Taylor', 'Assistant', 'M', Decimal('9500.00'), 'B004'),
    ('SE40', 'Ava', 'Martin', 'Manager', 'F', Decimal('25500.00'), 'B006'),
    ('SF50', 'Lucas', 'Walker', 'Supervisor', 'M', Decimal('17500.00'), 'B007'),
    ('SH60', 'Mia', 'Harris', 'Manager', 'F', Decimal('25000.00'), 'B008'),
    ('SH61', 'Ethan', 'Clarke', 'Assistant', 'M', Decimal('9800.00'), 'B008'),
]

OWNER_FIELDS = ('owner_no', 'first_name', 'last_name', 'tel_no', 'street', 'city', 'postcode')
OWNERS = [
    ('CO40', 'Tina', 'Murphy', '0412 345 678', '63 Well St', 'Sydney', '2000'),
    ('CO46', 'Joe', 'Keogh', '0413 225 101', '2 Fergus Dr', 'Melbourne', '3000'),
    ('CO87', 'Carol', 'Farrel', '0414 778 320', '6 Achray St', 'Brisbane', '4000'),
    ('CO93', 'Tony', 'Shaw', '0415 902 416', '12 Park Pl', 'Sydney', '2000'),
    ('CO55', 'Priya', 'Patel', '0416 330 982', '7 Grote St', 'Adelaide', '5000'),
]

PROPERTY_FIELDS = (
    'property_no', 'street', 'city', 'postcode', 'property_type', 'rooms', 'rent',
    'owner_id', 'staff_id', 'branch_id',
)
PROPERTIES = [
    ('PFR01', '5 Novar Dr', 'Sydney', '2000', 'Flat', 3, Decimal('450.00'), 'CO40', 'SB12', 'B001'),
    ('PFR02', '18 Dale Rd', 'Sydney', '2010', 'House', 5, Decimal('720.00'), 'CO40', 'SB11', 'B001'),
    ('PFR03', '2 Manor Rd', 'Melbourne', '3000', 'Flat', 3, Decimal('380.00'), 'CO46', 'SC21', 'B002'),
    ('PFR04', '6 Lawrence St', 'Brisbane', '4000', 'Apartment', 2, Decimal('350.00'), 'CO87', 'SG14', 'B003'),
    ('PFR05', '16 Holhead St', 'Brisbane', '4000', 'House', 6, Decimal('650.00'), 'CO87', None, 'B003'),
    ('PFR06', '10 Argyll St', 'Adelaide', '5000', 'Bungalow', 4, Decimal('500.00'), 'CO55', 'SD31', 'B004'),
    ('PFR07', '45 Pitt St', 'Sydney', '2000', 'Apartment', 1, Decimal('300.00'), 'CO93', None, 'B001'),
]

CLIENT_FIELDS = ('client_no', 'first_name', 'last_name', 'tel_no', 'pref_type', 'max_rent', 'branch_id')
CLIENTS = [
    ('C001', 'Aline', 'Stewart', '0400 111 222', 'Flat', Decimal('500.00'), 'B001'),
    ('C002', 'Mike', 'Ritchie', '0400 333 444', 'House', Decimal('750.00'), 'B001'),
    ('C003', 'Mary', 'Tregear', '0400 555 666', 'Flat', Decimal('400.00'), 'B002'),
    ('C004', 'John', 'Kay', '0400 777 888', 'Apartment', Decimal('380.00'), 'B003'),
    ('C005', 'Ruth', 'Morgan', '0400 999 000', 'Bungalow', Decimal('550.00'), 'B004'),
]

# Keyword arguments for services.record_lease
LEASES = [
    {
        'client_no': 'C001',
        'property_no': 'PFR01',
        'rent_start': date(2024, 7, 1),
        'rent_end': date(2025, 6, 30),
        'rent_amount': Decimal('450.00'),
        'payment_method': 'Direct Debit',
    },
]

ADVERT_FIELDS = (
    'newspaper_name', 'street', 'city', 'postcode', 'tel_no', 'contact_name',
    'property_for_rent_id', 'date_advertised', 'cost_to_advertise',
)
ADVERTS = [
    ('Sydney Morning Herald', '1 Darling Island Rd', 'Pyrmont', '2009', '02 9282 2833',
     'Classifieds Desk', 'PFR02', date(2024, 6, 15), Decimal('120.00')),
    ('The Age', '717 Bourke St', 'Docklands', '3008', '03 8667 2000',
     'Property Team', 'PFR03', date(2024, 6, 20), Decimal('95.00')),
    ('The Courier-Mail', '41 Campbell St', 'Bowen Hills', '4006', '07 3666 8000',
     'Real Estate Ads', 'PFR05', date(2024, 7, 2), Decimal('110.00')),
]

# Row counts a complete seed load leaves behind, keyed by table name
EXPECTED_COUNTS = {
    'Branch': len(BRANCHES),
    'Staff': len(STAFF),
    'PrivateOwner': len(OWNERS),
    'PropertyForRent': len(PROPERTIES),
    'Client': len(CLIENTS),
    'Lease': len(LEASES),
    'Newspapers': len(ADVERTS),
}
