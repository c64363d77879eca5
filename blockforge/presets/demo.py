# blockforge/presets/demo.py
"""
Demo data for the technical-details section.

Pass a seeded random.Random to get reproducible output.
"""

from __future__ import annotations

from typing import Optional
import random

from blockforge.config.models import TechnicalDetails
from blockforge.utils.identifiers import (
    generate_policy_id,
    generate_random_ip,
    generate_serial_number,
    generate_session_id,
    generate_threat_id,
)


def generate_technical_details(category: str, rng: Optional[random.Random] = None) -> TechnicalDetails:
    """
    Fresh identifiers (policy, serial, threat, session, IPs) for ``category``.

    Profile names, protocol and user agent keep their defaults.
    """
    return TechnicalDetails(
        policy_id=generate_policy_id(category, rng),
        firewall_serial=generate_serial_number(rng),
        threat_id=generate_threat_id(category, rng),
        source_ip=generate_random_ip(rng),
        destination_ip=generate_random_ip(rng),
        session_id=generate_session_id(rng),
    )
