"""Exceptions raised by the regimen tracker."""


class RegimenError(Exception):
    """Base class for regimen tracker errors."""


class ItemNotFoundError(RegimenError, KeyError):
    """An item id does not belong to the day log it was looked up in."""


class DayLogNotFoundError(RegimenError, LookupError):
    """No day log is stored for the requested date."""


class NoActiveCycleError(RegimenError, LookupError):
    """No cycle is currently active."""
