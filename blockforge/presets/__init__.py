# blockforge/presets/__init__.py
"""
Presets - Turn common training exercises into one call

- Scenarios (malware, phishing, adult-content, gaming, geo-block,
  social-media, streaming)
- Demo technical details (seedable)
"""

from .scenarios import (
    ScenarioPreset,
    SCENARIO_PRESETS,
    get_preset,
    list_presets,
    apply_preset,
)
from .demo import generate_technical_details

__all__ = [
    # Scenarios
    "ScenarioPreset",
    "SCENARIO_PRESETS",
    "get_preset",
    "list_presets",
    "apply_preset",

    # Demo data
    "generate_technical_details",
]
