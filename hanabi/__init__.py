"""
Hanabi - Cooperative Card Game Rules Engine

A deterministic, pure engine for Hanabi-style games. The engine provides:
- Seeded game setup
- Action validation and application (play, discard, hint)
- Per-card hint tracking
- End-of-game detection
- Legal action generation and bot policies
"""

__version__ = "0.1.0"
