"""Callback-to-sequence bridge and its queue policies."""

from .bridge import EventController, event_to_generator
from .queues import (
    Queue,
    QueueFactory,
    Signal,
    UniquePolicy,
    queue_1,
    queue_fifo,
    queue_newest,
    queue_oldest,
    queue_sticky,
    queue_unique,
    queue_update_shallow,
)

__all__ = (
    "EventController",
    "event_to_generator",
    # Queues
    "Queue",
    "QueueFactory",
    "Signal",
    "UniquePolicy",
    "queue_1",
    "queue_fifo",
    "queue_newest",
    "queue_oldest",
    "queue_sticky",
    "queue_unique",
    "queue_update_shallow",
)
