# apps/plans/domain/errors.py


class AllocationError(ValueError):
    """Bazowy błąd walidacji żądania alokacji (nie nadaje się do ponowienia)."""


class InvalidAmountError(AllocationError):
    pass


class InvalidRangeError(AllocationError):
    pass


class RangeTooLargeError(AllocationError):
    pass


class UnknownStrategyError(AllocationError):
    pass


class UnknownIntensityError(AllocationError):
    pass


class UnknownWeekendRuleError(AllocationError):
    pass
