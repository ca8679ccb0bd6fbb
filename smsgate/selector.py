"""Provider selection.

Priority is fixed: Arkesel, then Twilio, then the simulated provider,
which is always available. Selection only looks at which credentials are
present; it never touches the network.
"""

from __future__ import annotations

from .types import ProviderConfig, ProviderName


def available_providers(config: ProviderConfig) -> list[ProviderName]:
    """List usable providers in priority order, ending with the simulated one."""
    providers: list[ProviderName] = []
    if config.arkesel is not None:
        providers.append(ProviderName.ARKESEL)
    if config.twilio is not None:
        providers.append(ProviderName.TWILIO)
    providers.append(ProviderName.SIMULATED)
    return providers


def select_provider(config: ProviderConfig) -> ProviderName:
    """Return the highest-priority provider the config can use."""
    return available_providers(config)[0]
