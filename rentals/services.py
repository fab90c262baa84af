import logging

from django.core.management.color import no_style
from django.db import connections, router, transaction
from django.db.models import Count

from . import seed_data
from .exceptions import SeedError
from .models import BUILD_ORDER, Client, Lease

logger = logging.getLogger(__name__)


def close_client_for_lease(lease, using=None):
    """
    Move the lease's client from Open to Closed.

    A single conditional UPDATE scoped to that client; a client that is
    already Closed matches nothing and is left alone.
    Returns True when a row changed.
    """
    using = using or router.db_for_write(Client)
    updated = (
        Client.objects.using(using)
        .filter(pk=lease.client_id, status=Client.OPEN)
        .update(status=Client.CLOSED)
    )
    if not updated:
        return False

    logger.info(f"Client {lease.client_id} closed by lease {lease.lease_no}")
    if Lease.client.is_cached(lease):
        lease.client.status = Client.CLOSED
    return True


def record_lease(client_no, property_no, rent_start, rent_end, rent_amount, payment_method, using=None):
    """
    Create a lease for an existing client and property.

    The client row is locked for the duration so concurrent leases for the
    same client serialise on it. The lease is validated against the model's
    constraints before it is written; the returned lease carries its client
    with the status left by the lease-created handler.
    """
    using = using or router.db_for_write(Lease)
    with transaction.atomic(using=using):
        client = Client.objects.using(using).select_for_update().get(pk=client_no)
        lease = Lease(
            client=client,
            property_for_rent_id=property_no,
            rent_start=rent_start,
            rent_end=rent_end,
            rent_amount=rent_amount,
            payment_method=payment_method,
        )
        lease.full_clean()
        lease.save(using=using)
    return lease


def reset_leases(using=None):
    """Delete every lease and restart the leaseNo identity at 1.

    Client status is not touched; there is no Closed -> Open transition.
    """
    using = using or router.db_for_write(Lease)
    connection = connections[using]
    sequences = [{'table': Lease._meta.db_table, 'column': Lease._meta.pk.column}]

    with transaction.atomic(using=using):
        deleted, _ = Lease.objects.using(using).all().delete()
        with connection.cursor() as cursor:
            for sql in connection.ops.sequence_reset_by_name_sql(no_style(), sequences):
                cursor.execute(sql)

    logger.warning(f"Lease table reset: {deleted} row(s) deleted, leaseNo restarts at 1")
    return deleted


def table_counts(using=None):
    """Row count per table, in build order, keyed by table name."""
    return {
        model._meta.db_table: model.objects.using(using or router.db_for_read(model)).count()
        for model in BUILD_ORDER
    }


def client_status_counts(using=None):
    using = using or router.db_for_read(Client)
    counts = {value: 0 for value, _ in Client.STATUS_CHOICES}
    rows = Client.objects.using(using).values('status').annotate(total=Count('pk')).order_by()
    for row in rows:
        counts[row['status']] = row['total']
    return counts


def verify_seed_load(using=None):
    """
    Check that the database holds exactly the seed rows and that only the
    leased clients were closed. Raises SeedError listing every mismatch.
    """
    problems = []
    counts = table_counts(using)
    for table, expected in seed_data.EXPECTED_COUNTS.items():
        if counts[table] != expected:
            problems.append(f"{table}: expected {expected} row(s), found {counts[table]}")

    leased = {lease['client_no'] for lease in seed_data.LEASES}
    closed = set(
        Client.objects.using(using or router.db_for_read(Client))
        .filter(status=Client.CLOSED)
        .values_list('pk', flat=True)
    )
    if closed != leased:
        problems.append(f"closed clients: expected {sorted(leased)}, found {sorted(closed)}")

    if problems:
        raise SeedError('; '.join(problems))
    return counts
