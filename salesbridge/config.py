"""Runtime configuration for the CTM to GA4 bridge."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CTM_ACCOUNT_ID = "540774"


@dataclass(frozen=True)
class BridgeConfig:
    """Credentials and account settings shared by the outbound clients.

    Credentials are opaque strings. Missing values are not validated: an
    empty secret simply makes the corresponding outbound call fail.
    """

    ga4_measurement_id: str
    ga4_api_secret: str
    ctm_auth_string: str
    ctm_account_id: str = DEFAULT_CTM_ACCOUNT_ID

    @classmethod
    def from_env(cls) -> BridgeConfig:
        """Create BridgeConfig from environment variables."""
        return cls(
            ga4_measurement_id=os.environ.get("GA4_MEASUREMENT_ID", ""),
            ga4_api_secret=os.environ.get("GA4_API_SECRET", ""),
            ctm_auth_string=os.environ.get("CTM_AUTH_STRING", ""),
            ctm_account_id=os.environ.get("CTM_ACCOUNT_ID", DEFAULT_CTM_ACCOUNT_ID),
        )
