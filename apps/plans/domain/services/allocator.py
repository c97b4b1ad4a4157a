# apps/plans/domain/services/allocator.py
import logging
import math
import random
from datetime import date, datetime, time
from fractions import Fraction
from itertools import accumulate
from typing import List, Optional

from dateutil.rrule import rrule, DAILY

from apps.plans.domain.entities import (
    AllocationRequest, DailyTarget, DateLike, Intensity, Strategy, WeekendRule,
)
from apps.plans.domain.errors import (
    InvalidAmountError, InvalidRangeError, RangeTooLargeError,
    UnknownIntensityError, UnknownStrategyError, UnknownWeekendRuleError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DAYS = 3660  # ~10 lat
OSCILLATION_PERIOD_DAYS = 7

STRATEGY_ALIASES = {
    'steadily': Strategy.STEADY,
}

# Amplituda odchylenia od średniej wagi dnia
INTENSITY_AMPLITUDE = {
    Intensity.GENTLE: 0.25,
    Intensity.AVERAGE: 0.5,
    Intensity.INTENSE: 0.75,
    Intensity.EXTREME: 1.0,
}

WEEKEND_FACTOR = {
    WeekendRule.NONE: 1.0,
    WeekendRule.HALF: 0.5,
    WeekendRule.OFF: 0.0,
}


def _parse_choice(value, enum_cls, error_cls, label, aliases=None):
    if isinstance(value, enum_cls):
        return value
    key = value.strip().lower() if isinstance(value, str) else value
    if aliases and isinstance(key, str) and key in aliases:
        return aliases[key]
    try:
        return enum_cls(key)
    except ValueError:
        raise error_cls(f"Unknown {label}: {value!r}") from None


def _parse_amount(value) -> int:
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid total amount: {value!r}")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise InvalidAmountError(f"Invalid total amount: {value!r}") from None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise InvalidAmountError(f"Invalid total amount: {value!r}")
    if value < 0:
        raise InvalidAmountError("Total amount cannot be negative")
    return value


def _parse_date(value: DateLike, label: str) -> date:
    # Tylko dni kalendarzowe, bez godzin i stref czasowych
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), '%Y-%m-%d').date()
        except ValueError:
            pass
    raise InvalidRangeError(f"Invalid {label}: {value!r} (expected YYYY-MM-DD)")


class DailyTargetAllocator:
    """
    Rozkłada cel (np. 50 000 słów) na kolejne dni zakresu dat.

    Kształt krzywej wyznacza strategia, jej "ostrość" intensywność,
    a reguła weekendowa zmniejsza wagę sobót i niedziel.
    Suma dziennych celów zawsze równa się dokładnie celowi całkowitemu.
    """

    def __init__(self, max_days: int = DEFAULT_MAX_DAYS, rng: Optional[random.Random] = None):
        self.max_days = max_days
        # Strategia 'random' celowo nie jest powtarzalna (chyba że wstrzykniemy rng)
        self.rng = rng or random.Random()

    def allocate(self, request: AllocationRequest) -> List[DailyTarget]:
        # 1. Walidacja (całość przed obliczeniami - nigdy częściowy wynik)
        total = _parse_amount(request.total_amount)
        strategy = _parse_choice(request.strategy, Strategy, UnknownStrategyError, 'strategy', STRATEGY_ALIASES)
        intensity = _parse_choice(request.intensity, Intensity, UnknownIntensityError, 'intensity')
        weekend_rule = _parse_choice(request.weekend_rule, WeekendRule, UnknownWeekendRuleError, 'weekend rule')
        start = _parse_date(request.start_date, 'start date')
        end = _parse_date(request.end_date, 'end date')

        if end < start:
            raise InvalidRangeError("End date must not be before start date")

        n_days = (end - start).days + 1
        if n_days > self.max_days:
            raise RangeTooLargeError(f"Plan spans {n_days} days (limit: {self.max_days})")

        # 2. Krzywa wag -> weekend -> normalizacja
        days = self.calendar_days(start, end)
        amplitude = INTENSITY_AMPLITUDE[intensity]
        weights = [
            max(0.0, 1.0 + amplitude * self._deviation(strategy, i, n_days))
            for i in range(n_days)
        ]
        weights = self._apply_weekend_rule(days, weights, weekend_rule)
        targets = self.normalize(total, weights)

        logger.debug(
            "Allocated %s over %s days (%s/%s/%s)",
            total, n_days, strategy.value, intensity.value, weekend_rule.value,
        )
        return [DailyTarget(date=d, target=t) for d, t in zip(days, targets)]

    @staticmethod
    def calendar_days(start: date, end: date) -> List[date]:
        rule = rrule(DAILY, dtstart=datetime.combine(start, time.min), until=datetime.combine(end, time.min))
        return [dt.date() for dt in rule]

    def _deviation(self, strategy: Strategy, index: int, n_days: int) -> float:
        """Odchylenie od średniej wagi w przedziale [-1, 1]."""
        t = index / (n_days - 1) if n_days > 1 else 0.5

        if strategy == Strategy.STEADY:
            return 0.0
        if strategy == Strategy.RISING:
            return 2 * t - 1
        if strategy == Strategy.BITING:
            return 1 - 2 * t
        if strategy == Strategy.MOUNTAIN:
            return 1 - 2 * abs(2 * t - 1)
        if strategy == Strategy.VALLEY:
            return 2 * abs(2 * t - 1) - 1
        if strategy == Strategy.OSCILLATING:
            return math.sin(2 * math.pi * index / OSCILLATION_PERIOD_DAYS)
        return self.rng.uniform(-1.0, 1.0)

    @staticmethod
    def _apply_weekend_rule(days: List[date], weights: List[float], rule: WeekendRule) -> List[float]:
        factor = WEEKEND_FACTOR[rule]
        if factor == 1.0:
            return weights
        # Sobota=5, Niedziela=6
        return [w * factor if d.weekday() >= 5 else w for d, w in zip(days, weights)]

    @staticmethod
    def normalize(total: int, weights: List[float]) -> List[int]:
        """
        Zamienia wagi na liczby całkowite o sumie dokładnie `total`.

        Liczymy skumulowany (ułamkowy) cel i zaokrąglamy go w dół;
        dzień dostaje różnicę kolejnych wartości, ostatni dzień resztę.
        Arytmetyka na Fraction: dowolnie duży `total` bez konwersji do float.
        """
        n_days = len(weights)
        if total == 0:
            return [0] * n_days

        prefixes = list(accumulate(Fraction(w) for w in weights))
        weight_sum = prefixes[-1]

        if weight_sum <= 0:
            # Przypadek zdegenerowany: równy podział, reszta na ostatni dzień
            base, remainder = divmod(total, n_days)
            targets = [base] * n_days
            targets[-1] += remainder
            return targets

        targets = []
        allocated = 0
        for prefix in prefixes[:-1]:
            cumulative = total * prefix // weight_sum
            targets.append(cumulative - allocated)
            allocated = cumulative
        targets.append(total - allocated)
        return targets


def allocate(total_amount, start_date, end_date, strategy=Strategy.STEADY.value,
             intensity=Intensity.AVERAGE.value, weekend_rule=WeekendRule.NONE.value,
             max_days=DEFAULT_MAX_DAYS, rng=None) -> List[DailyTarget]:
    request = AllocationRequest(
        total_amount=total_amount,
        start_date=start_date,
        end_date=end_date,
        strategy=strategy,
        intensity=intensity,
        weekend_rule=weekend_rule,
    )
    return DailyTargetAllocator(max_days=max_days, rng=rng).allocate(request)


def canonical_options(strategy, intensity, weekend_rule):
    """Zamienia identyfikatory z payloadu (np. 'Steadily') na wartości enumów."""
    return (
        _parse_choice(strategy, Strategy, UnknownStrategyError, 'strategy', STRATEGY_ALIASES),
        _parse_choice(intensity, Intensity, UnknownIntensityError, 'intensity'),
        _parse_choice(weekend_rule, WeekendRule, UnknownWeekendRuleError, 'weekend rule'),
    )
