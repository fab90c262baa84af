"""
Client status synchronisation.

A newly created Lease closes its client's search: Open -> Closed, once.
Runs inside the lease's own transaction (see Lease.save), so the status
change and the insert are durable together.
"""

import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Lease
from .services import close_client_for_lease

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Lease, dispatch_uid='rentals.close_client_on_lease')
def close_client_on_lease(sender, instance, created, **kwargs):
    """Apply the Open -> Closed transition for the client named on a new lease."""
    if not created:
        return

    closed = close_client_for_lease(instance, using=kwargs.get('using'))
    if not closed:
        logger.debug(f"Lease {instance.lease_no}: client {instance.client_id} already closed")
