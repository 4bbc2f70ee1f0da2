"""Tests for the Factory Method (notification) demo."""

import io

import pytest
from rich.errors import MissingStyle

from creational_patterns.domain.models import NotificationChannel
from creational_patterns.factory_method import cli
from creational_patterns.factory_method.factories import (
    NOTIFICATION_FACTORIES,
    EmailNotificationFactory,
    get_factory,
    send,
)
from creational_patterns.factory_method.notifications import (
    EmailNotification,
    SMSNotification,
    WhatsAppNotification,
)


EXPECTED_TAGS = {
    NotificationChannel.EMAIL: "📧 Email Notification → ",
    NotificationChannel.SMS: "📱 SMS Notification → ",
    NotificationChannel.WHATSAPP: "💬 WhatsApp Notification → ",
}


@pytest.mark.parametrize("channel", list(NotificationChannel))
def test_send_prints_one_tagged_line(channel, out, printed):
    factory = get_factory(channel.value).unwrap()

    send(factory, "hello there", out)

    assert factory.channel == channel
    assert printed() == f"{EXPECTED_TAGS[channel]}hello there\n"


def test_factories_create_matching_notification():
    assert isinstance(NOTIFICATION_FACTORIES[NotificationChannel.EMAIL]().create_notification(), EmailNotification)
    assert isinstance(NOTIFICATION_FACTORIES[NotificationChannel.SMS]().create_notification(), SMSNotification)
    assert isinstance(
        NOTIFICATION_FACTORIES[NotificationChannel.WHATSAPP]().create_notification(), WhatsAppNotification
    )


def test_lookup_ignores_case():
    assert isinstance(get_factory(" EMAIL ").unwrap(), EmailNotificationFactory)


def test_run_email(out, printed):
    assert cli.run("email", out) is True

    text = printed()
    assert f"📧 Email Notification → {cli.MESSAGE}" in text
    assert "✅ Operation successful." in text


def test_run_bogus_reports_error_without_notifying(out, printed):
    assert cli.run("bogus", out) is False

    text = printed()
    assert "❌ Error: Notification type 'bogus' is not supported." in text
    assert "Notification →" not in text
    assert "Operation successful" not in text


def test_run_bogus_restores_display_style(out):
    cli.run("bogus", out)

    with pytest.raises(MissingStyle):
        out.get_style("error")


def test_run_prompts_when_no_type_given(out, printed, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda *args: "sms")

    assert cli.run(out=out) is True
    assert "📱 SMS Notification → " in printed()


def test_closed_stdin_is_reported_as_unsupported(out, printed, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert cli.run(out=out) is False

    text = printed()
    assert "❌ Error: Notification type '' is not supported." in text
    assert "Notification →" not in text


def test_main_reports_bogus_and_returns_normally(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["factory-method-demo", "bogus"])

    cli.main()

    captured = capsys.readouterr()
    assert "❌ Error: Notification type 'bogus' is not supported." in captured.out
    assert "Notification →" not in captured.out


def test_main_rejects_unknown_log_level(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["factory-method-demo", "email", "--log-level", "verbose"])

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
