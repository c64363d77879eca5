# tests/unit/test_identifiers.py
from __future__ import annotations

import random
import re

from blockforge.utils import (
    generate_policy_id,
    generate_random_ip,
    generate_serial_number,
    generate_session_id,
    generate_threat_id,
    generate_ticket_id,
    is_valid_ip,
)
from blockforge.utils.identifiers import to_base36


def test_session_id_pattern():
    assert re.fullmatch(r"sess_[0-9A-Z]{9}", generate_session_id())


def test_ticket_id_uses_given_timestamp():
    ticket = generate_ticket_id(timestamp_ms=36 ** 3, rng=random.Random(1))
    assert re.fullmatch(r"TKT-1000-[0-9A-Z]{4}", ticket)


def test_serial_number_pattern():
    assert re.fullmatch(r"FGT[1-9][0-9]{2}FTK[0-9]{10}", generate_serial_number())


def test_policy_id_prefix():
    assert re.fullmatch(r"malware-block-[0-9]{3}", generate_policy_id("malware"))
    assert re.fullmatch(r"policy-[0-9]{3}", generate_policy_id("unknown"))


def test_threat_id_prefix():
    assert re.fullmatch(r"PHISH/[0-9A-Z]{6}", generate_threat_id("phishing"))
    assert generate_threat_id("custom").startswith("THREAT/")


def test_random_ip_is_valid():
    for _ in range(20):
        assert is_valid_ip(generate_random_ip())


def test_seeded_rng_is_deterministic():
    first = [generate_session_id(random.Random(42)), generate_serial_number(random.Random(42))]
    second = [generate_session_id(random.Random(42)), generate_serial_number(random.Random(42))]
    assert first == second


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "Z"
    assert to_base36(36) == "10"
