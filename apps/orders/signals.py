"""
Signals carrying order domain events to notification collaborators.
"""
import logging
from typing import Iterable

from django.db import transaction
from django.dispatch import Signal

from shared.domain import DomainEvent

logger = logging.getLogger(__name__)

# Sent once per domain event after the surrounding transaction commits.
# Receivers get ``event`` (a DomainEvent) as a keyword argument.
order_domain_event = Signal()


def publish_domain_events(events: Iterable[DomainEvent]) -> None:
    """Send each event on commit; a failing receiver never undoes the write."""
    for event in events:
        transaction.on_commit(lambda event=event: _send(event))


def _send(event: DomainEvent) -> None:
    logger.info(f"Publishing {event.event_type}: {event.payload()}")
    for receiver, response in order_domain_event.send_robust(sender=event.__class__, event=event):
        if isinstance(response, Exception):
            logger.error(
                f"Receiver {receiver!r} failed handling {event.event_type}: {response}",
                exc_info=response,
            )
