"""
Services Package

One service per group of ChatWork API endpoints. Every service shares the
client's Transport; services that need another group's endpoints are
given that service explicitly.
"""

from .base import BaseService
from .rooms import RoomsService
from .messages import MessagesService
from .tasks import TasksService, MyTasksService
from .me import MeService
from .contacts import ContactsService, IncomingRequestsService

__all__ = [
    "BaseService",
    "RoomsService",
    "MessagesService",
    "TasksService",
    "MyTasksService",
    "MeService",
    "ContactsService",
    "IncomingRequestsService",
]
