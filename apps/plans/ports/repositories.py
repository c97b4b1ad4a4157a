# apps/plans/ports/repositories.py
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from apps.plans.domain.entities import DailyTarget, PlanDayEntity, PlanEntity


class IPlanRepository(ABC):
    @abstractmethod
    def get_by_id(self, plan_id: int) -> Optional[PlanEntity]:
        pass

    @abstractmethod
    def save(self, plan: PlanEntity, user_id: int = None) -> PlanEntity:
        """Zapisuje (tworzy lub aktualizuje) plan i zwraca encję z ID."""
        pass

    @abstractmethod
    def get_days(self, plan_id: int) -> List[PlanDayEntity]:
        """Dni planu posortowane rosnąco po dacie."""
        pass

    @abstractmethod
    def replace_days(self, plan_id: int, targets: List[DailyTarget]) -> List[PlanDayEntity]:
        """
        Podmienia harmonogram planu. Zalogowany postęp zostaje dla dat,
        które nadal są w zakresie; pozostałe dni są usuwane.
        """
        pass

    @abstractmethod
    def save_with_days(self, plan: PlanEntity, targets: List[DailyTarget], user_id: int = None) -> PlanEntity:
        """Zapis planu i podmiana harmonogramu w jednej transakcji."""
        pass

    @abstractmethod
    def set_logged(self, plan_id: int, day: date, amount: int) -> PlanDayEntity:
        pass

    @abstractmethod
    def list_for_user(self, user_id: int) -> List[PlanEntity]:
        pass
