"""
Notification products.

In production these would integrate with SendGrid, Twilio, the WhatsApp
Business API, etc. Here each one prints a single channel-tagged line.
"""

from typing import Protocol

from rich.console import Console

from creational_patterns.console import emit


class Notification(Protocol):
    """Interface all notification channels share."""

    def notify_user(self, message: str, console: Console) -> None: ...


class EmailNotification:
    def notify_user(self, message: str, console: Console) -> None:
        emit(console, f"📧 Email Notification → {message}")


class SMSNotification:
    def notify_user(self, message: str, console: Console) -> None:
        emit(console, f"📱 SMS Notification → {message}")


class WhatsAppNotification:
    def notify_user(self, message: str, console: Console) -> None:
        emit(console, f"💬 WhatsApp Notification → {message}")
