# blockforge/utils/__init__.py
"""
Pure helpers: formatting, identifier generation, input checks.
"""

from .formatting import (
    TIMESTAMP_FALLBACK,
    format_timestamp,
    parse_timestamp,
    timestamp_year,
    truncate_text,
)
from .identifiers import (
    generate_session_id,
    generate_ticket_id,
    generate_serial_number,
    generate_policy_id,
    generate_threat_id,
    generate_random_ip,
)
from .validators import is_valid_url, is_valid_email, is_valid_ip

__all__ = [
    # Formatting
    "TIMESTAMP_FALLBACK",
    "format_timestamp",
    "parse_timestamp",
    "timestamp_year",
    "truncate_text",

    # Identifiers
    "generate_session_id",
    "generate_ticket_id",
    "generate_serial_number",
    "generate_policy_id",
    "generate_threat_id",
    "generate_random_ip",

    # Validators
    "is_valid_url",
    "is_valid_email",
    "is_valid_ip",
]
