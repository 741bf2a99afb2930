# engine/signal/combined.py
"""
Signal combiné Vibe + Way of Work — ZÉRO accès DB.

    vibe et wow   → vibe × 0.6 + wow × 0.4
    un seul       → ce score, source indiquée
    aucun         → None (jamais 0 : "collecter des données")

needs_attention est un AND/OR booléen sur le seuil 2.5, indépendant des zones.
"""
from dataclasses import dataclass
from typing import Optional

from teamsignal.engine.vibe.metrics import calculate_zone
from teamsignal.shared.enums import SignalSource, Zone


# --- SEUILS ---
VIBE_WEIGHT = 0.6
WOW_WEIGHT = 0.4
ATTENTION_THRESHOLD = 2.5


@dataclass
class CombinedSignal:
    value: Optional[float]
    source: Optional[SignalSource]
    needs_attention: bool
    zone: Optional[Zone] = None

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "source": self.source.value if self.source else None,
            "needs_attention": self.needs_attention,
            "zone": self.zone.value if self.zone else None,
        }


def combine_signal(vibe: Optional[float], wow: Optional[float]) -> CombinedSignal:
    if vibe is not None and wow is not None:
        value = round(vibe * VIBE_WEIGHT + wow * WOW_WEIGHT, 2)
        return CombinedSignal(
            value=value,
            source=SignalSource.COMBINED,
            needs_attention=vibe < ATTENTION_THRESHOLD and wow < ATTENTION_THRESHOLD,
            zone=calculate_zone(value),
        )

    if vibe is not None:
        return CombinedSignal(vibe, SignalSource.VIBE, vibe < ATTENTION_THRESHOLD, calculate_zone(vibe))

    if wow is not None:
        return CombinedSignal(wow, SignalSource.WOW, wow < ATTENTION_THRESHOLD, calculate_zone(wow))

    return CombinedSignal(value=None, source=None, needs_attention=False)
