"""
Bots module - Automated players.

Provides:
- BotPolicy: Interface for bot decision-making
- RandomPolicy, FirstLegalPolicy: Baselines
- CautiousPolicy: Cooperative heuristic bot driven by hint tables
"""

from .policy import BotPolicy, BotDecision, RandomPolicy, FirstLegalPolicy, known_playable
from .cautious import CautiousPolicy

POLICIES = {
    "random": RandomPolicy,
    "first": FirstLegalPolicy,
    "cautious": CautiousPolicy,
}

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
    "CautiousPolicy",
    "known_playable",
    "POLICIES",
]
