"""Exception types raised by the Wahoo engine."""


class WahooError(Exception):
    """Base class for engine errors."""


class ConfigurationError(WahooError, ValueError):
    """Board or game parameters that would produce nonsensical geometry."""


class InvariantViolation(WahooError, RuntimeError):
    """The board or a chosen move broke a rule the engine guarantees.

    Fatal for the running game: either the engine has a bug or the decision
    function returned something it was never offered.
    """


class UnreachableMove(InvariantViolation):
    """A chosen destination cannot be reached from its start with the roll."""
