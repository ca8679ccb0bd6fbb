"""Shared test fixtures for the smsgate library."""

import pytest

from smsgate import ArkeselConfig, ProviderConfig, SimulatedSMSProvider, TwilioSMSConfig


@pytest.fixture
def arkesel_config() -> ArkeselConfig:
    return ArkeselConfig(api_key="ark_test_key", sender_id="CyberWatch", sandbox=True)


@pytest.fixture
def twilio_sms_config() -> TwilioSMSConfig:
    return TwilioSMSConfig(
        account_sid="ACtest123",
        auth_token="test_token_456",
        from_number="+14155238886",
        status_callback="https://example.com/webhook/sms-status",
    )


@pytest.fixture
def empty_config() -> ProviderConfig:
    return ProviderConfig()


@pytest.fixture
def simulated() -> SimulatedSMSProvider:
    return SimulatedSMSProvider(delay_seconds=0, record=True)
