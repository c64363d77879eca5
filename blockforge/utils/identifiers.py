# blockforge/utils/identifiers.py
"""
Identifier generators for demo data.

Not cryptographic. Every generator takes an optional ``rng``
(``random.Random``) so callers and tests can seed it; without one the
module-level generator is used.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional
import random
import string
import time


_BASE36 = string.digits + string.ascii_uppercase
_DEFAULT_RNG = random.Random()

POLICY_PREFIXES: Mapping[str, str] = MappingProxyType({
    "malware": "malware-block",
    "phishing": "phishing-block",
    "adult-content": "aup-violation",
    "games": "gaming-restriction",
    "social-media": "social-media-block",
    "streaming": "streaming-block",
    "gambling": "gambling-block",
    "proxy": "proxy-block",
    "hacking": "hacking-block",
    "warez": "piracy-block",
    "weapons": "weapons-block",
    "drugs": "drugs-block",
    "violence": "hate-speech-block",
})
DEFAULT_POLICY_PREFIX = "policy"

THREAT_PREFIXES: Mapping[str, str] = MappingProxyType({
    "malware": "W32/",
    "phishing": "PHISH/",
    "adult-content": "CAT/",
    "games": "APP/",
    "social-media": "APP/",
    "streaming": "APP/",
    "gambling": "APP/",
    "proxy": "PROXY/",
    "hacking": "HACK/",
    "warez": "WAREZ/",
    "weapons": "WEAP/",
    "drugs": "DRUGS/",
    "violence": "HATE/",
})
DEFAULT_THREAT_PREFIX = "THREAT/"


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else _DEFAULT_RNG


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _random_base36(length: int, rng: random.Random) -> str:
    return "".join(rng.choice(_BASE36) for _ in range(length))


def _random_digits(length: int, rng: random.Random) -> str:
    return "".join(rng.choice(string.digits) for _ in range(length))


def generate_session_id(rng: Optional[random.Random] = None) -> str:
    """sess_<9 upper-case base36 chars>"""
    return "sess_" + _random_base36(9, _rng(rng))


def generate_ticket_id(
    timestamp_ms: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """TKT-<base36 ms timestamp>-<4 base36 chars>, all upper case."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"TKT-{to_base36(timestamp_ms)}-{_random_base36(4, _rng(rng))}"


def generate_serial_number(rng: Optional[random.Random] = None) -> str:
    """FGT<3 digits>FTK<10 digits>"""
    r = _rng(rng)
    return f"FGT{r.randint(100, 999)}FTK{_random_digits(10, r)}"


def generate_policy_id(category: str, rng: Optional[random.Random] = None) -> str:
    prefix = POLICY_PREFIXES.get(category, DEFAULT_POLICY_PREFIX)
    return f"{prefix}-{_rng(rng).randint(100, 999)}"


def generate_threat_id(category: str, rng: Optional[random.Random] = None) -> str:
    prefix = THREAT_PREFIXES.get(category, DEFAULT_THREAT_PREFIX)
    return prefix + _random_base36(6, _rng(rng))


def generate_random_ip(rng: Optional[random.Random] = None) -> str:
    r = _rng(rng)
    return ".".join(str(r.randint(0, 255)) for _ in range(4))
