"""
Notification factories (Factory Method pattern).

Each factory decides which notification to create; `send()` is the shared
workflow (create, then notify) and takes any factory as an argument, so the
concrete factories carry no inherited state.

`get_factory()` is the factory provider: it centralizes selection of the
concrete factory behind the static `NOTIFICATION_FACTORIES` registry.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Protocol

from rich.console import Console

from creational_patterns.dispatch import Selection, select
from creational_patterns.domain.models import NotificationChannel
from creational_patterns.factory_method.notifications import (
    EmailNotification,
    Notification,
    SMSNotification,
    WhatsAppNotification,
)

logger = logging.getLogger(__name__)


class NotificationFactory(Protocol):
    channel: NotificationChannel

    def create_notification(self) -> Notification: ...


class EmailNotificationFactory:
    channel = NotificationChannel.EMAIL

    def create_notification(self) -> Notification:
        return EmailNotification()


class SMSNotificationFactory:
    channel = NotificationChannel.SMS

    def create_notification(self) -> Notification:
        return SMSNotification()


class WhatsAppNotificationFactory:
    channel = NotificationChannel.WHATSAPP

    def create_notification(self) -> Notification:
        return WhatsAppNotification()


# The factory provider's lookup table: one entry per NotificationChannel.
NOTIFICATION_FACTORIES: Mapping[NotificationChannel, Callable[[], NotificationFactory]] = {
    NotificationChannel.EMAIL: EmailNotificationFactory,
    NotificationChannel.SMS: SMSNotificationFactory,
    NotificationChannel.WHATSAPP: WhatsAppNotificationFactory,
}


def get_factory(channel: str | None) -> Selection[NotificationFactory]:
    return select(channel, NOTIFICATION_FACTORIES, "Notification type")


def send(factory: NotificationFactory, message: str, console: Console) -> None:
    """Create a notification through `factory` and deliver `message` with it."""
    notification = factory.create_notification()
    logger.info("Sending %s notification", factory.channel.value)
    notification.notify_user(message, console)
