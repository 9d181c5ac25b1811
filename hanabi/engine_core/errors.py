"""
Rule violations raised by the engine.

Every violation is a caller error (illegal or stale request), never a
broken engine. They carry a machine-readable code so a host can reject
the request and keep the game going.
"""


class RuleViolation(Exception):
    """Base class for rejected actions and configurations."""

    code = "RULE_VIOLATION"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TurnViolation(RuleViolation):
    """Action submitted by a player whose turn it is not."""

    code = "NOT_YOUR_TURN"


class HandConsistencyViolation(RuleViolation):
    """Card index out of range, or the card there is not the declared one."""

    code = "HAND_MISMATCH"


class HintResourceViolation(RuleViolation):
    """Hint attempted with no hint token left."""

    code = "NO_HINT_TOKENS"


class SelfHintViolation(RuleViolation):
    """Hint aimed at the acting player."""

    code = "SELF_HINT"


class InvalidHintViolation(RuleViolation):
    """Hint target or value outside the game."""

    code = "INVALID_HINT"


class UnknownActionViolation(RuleViolation):
    """Action of a kind the rules do not define."""

    code = "INVALID_ACTION"


class ConfigViolation(RuleViolation):
    """Game options outside what the rules support."""

    code = "INVALID_CONFIG"


ConfigError = ConfigViolation
