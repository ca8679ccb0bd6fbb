"""Tests for the ready-made notification helpers."""

from datetime import datetime

import pytest

from smsgate import SimulatedSMSProvider, SMSDispatcher
from smsgate.notifications import (
    send_car_registration_sms,
    send_detection_alert,
    send_welcome_sms,
)


@pytest.fixture
def dispatcher(empty_config, simulated: SimulatedSMSProvider) -> SMSDispatcher:
    return SMSDispatcher(empty_config, simulated=simulated, pacing_seconds=0)


class TestNotifications:
    def test_car_registration(self, dispatcher: SMSDispatcher, simulated: SimulatedSMSProvider):
        result = send_car_registration_sms(dispatcher, "Ama", "0241234567", "GR-1234-24", "Toyota", "Corolla")

        assert result.success
        sent = simulated.sent[0].message
        assert sent.to == "+233241234567"
        assert "Ama" in sent.body
        assert "Toyota Corolla (GR-1234-24)" in sent.body

    def test_welcome(self, dispatcher: SMSDispatcher, simulated: SimulatedSMSProvider):
        result = send_welcome_sms(dispatcher, "Kofi", "0201234567")

        assert result.success
        assert simulated.sent[0].message.body.startswith("👋 Welcome Kofi!")

    def test_detection_alert(self, dispatcher: SMSDispatcher, simulated: SimulatedSMSProvider):
        detected_at = datetime(2026, 10, 19, 14, 30, 5)

        result = send_detection_alert(
            dispatcher, "0241234567", "GR-1234-24", "Gate A", 87.5, detected_at=detected_at
        )

        assert result.success
        body = simulated.sent[0].message.body
        assert "Vehicle GR-1234-24 detected at Gate A with 87.5% confidence" in body
        assert body.endswith("Time: 2026-10-19 14:30:05")

    def test_invalid_phone_is_reported(self, dispatcher: SMSDispatcher, simulated: SimulatedSMSProvider):
        result = send_welcome_sms(dispatcher, "Kofi", "not a number")

        assert not result.success
        assert result.error == "Invalid phone number format"
        assert simulated.sent == []
