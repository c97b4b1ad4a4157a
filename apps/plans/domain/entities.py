# apps/plans/domain/entities.py
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Union


class Strategy(str, Enum):
    STEADY = 'steady'
    RISING = 'rising'
    BITING = 'biting'
    MOUNTAIN = 'mountain'
    VALLEY = 'valley'
    OSCILLATING = 'oscillating'
    RANDOM = 'random'


class Intensity(str, Enum):
    GENTLE = 'gentle'
    AVERAGE = 'average'
    INTENSE = 'intense'
    EXTREME = 'extreme'


class WeekendRule(str, Enum):
    NONE = 'none'
    HALF = 'half'  # weekend liczy się za pół dnia
    OFF = 'off'    # weekend wolny


DateLike = Union[date, str]


@dataclass
class AllocationRequest:
    total_amount: int
    start_date: DateLike
    end_date: DateLike
    strategy: str = Strategy.STEADY.value
    intensity: str = Intensity.AVERAGE.value
    weekend_rule: str = WeekendRule.NONE.value

    @classmethod
    def from_payload(cls, payload: dict) -> 'AllocationRequest':
        """
        Buduje żądanie z payloadu podglądu planu
        (nazwy pól takie, jakie wysyła kalendarz w edytorze).
        """
        return cls(
            total_amount=payload.get('total_word_count'),
            start_date=payload.get('start_date'),
            end_date=payload.get('end_date'),
            strategy=payload.get('algorithm_type') or Strategy.STEADY.value,
            intensity=payload.get('strategy_intensity') or Intensity.AVERAGE.value,
            weekend_rule=payload.get('weekend_rule') or WeekendRule.NONE.value,
        )


@dataclass(frozen=True)
class DailyTarget:
    date: date
    target: int

    def to_dict(self) -> dict:
        return {'date': self.date.isoformat(), 'target': self.target}


@dataclass
class PlanDayEntity:
    date: date
    target: int = 0
    logged: int = 0

    @property
    def is_met(self) -> bool:
        return self.target > 0 and self.logged >= self.target

    def to_dict(self) -> dict:
        return {'date': self.date.isoformat(), 'target': self.target, 'logged': self.logged}


@dataclass
class PlanEntity:
    id: Optional[int]  # None przed zapisem
    name: str
    start_date: date
    end_date: date
    goal_amount: int
    strategy: str = Strategy.STEADY.value
    intensity: str = Intensity.AVERAGE.value
    weekend_rule: str = WeekendRule.NONE.value

    # Tagi kategorii
    content_type: str = ""
    activity_type: str = ""

    display_settings: dict = field(default_factory=dict)
    user_id: Optional[int] = None

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'content_type': self.content_type,
            'activity_type': self.activity_type,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'goal_amount': self.goal_amount,
            'strategy': self.strategy,
            'intensity': self.intensity,
            'weekend_rule': self.weekend_rule,
            'display_settings': self.display_settings,
        }
