# apps/plans/application/use_cases.py
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
from apps.plans.domain.entities import (
    AllocationRequest, DailyTarget, DateLike, Intensity, PlanDayEntity, PlanEntity,
    Strategy, WeekendRule,
)
from apps.plans.domain.services.allocator import DailyTargetAllocator, canonical_options
from apps.plans.ports.repositories import IPlanRepository

logger = logging.getLogger(__name__)


@dataclass
class CreatePlanInput:
    name: str
    user_id: int
    goal_amount: int
    start_date: DateLike
    end_date: DateLike
    strategy: str = Strategy.STEADY.value
    intensity: str = Intensity.AVERAGE.value
    weekend_rule: str = WeekendRule.NONE.value
    content_type: str = ""
    activity_type: str = ""
    display_settings: dict = field(default_factory=dict)

    def to_allocation_request(self) -> AllocationRequest:
        return AllocationRequest(
            total_amount=self.goal_amount,
            start_date=self.start_date,
            end_date=self.end_date,
            strategy=self.strategy,
            intensity=self.intensity,
            weekend_rule=self.weekend_rule,
        )


@dataclass
class UpdatePlanInput(CreatePlanInput):
    plan_id: Optional[int] = None


def _build_plan(plan_id: Optional[int], input_dto: CreatePlanInput, schedule: List[DailyTarget]) -> PlanEntity:
    # Wartości bierzemy już po walidacji alokatora (kanoniczne enumy, daty z harmonogramu)
    strategy, intensity, weekend_rule = canonical_options(
        input_dto.strategy, input_dto.intensity, input_dto.weekend_rule
    )
    return PlanEntity(
        id=plan_id,
        name=input_dto.name.strip(),
        start_date=schedule[0].date,
        end_date=schedule[-1].date,
        goal_amount=sum(d.target for d in schedule),
        strategy=strategy.value,
        intensity=intensity.value,
        weekend_rule=weekend_rule.value,
        content_type=input_dto.content_type or "",
        activity_type=input_dto.activity_type or "",
        display_settings=input_dto.display_settings or {},
        user_id=input_dto.user_id,
    )


def _require_name(name: str):
    if not name or not name.strip():
        raise ValueError("Plan name cannot be empty")


class PreviewPlanUseCase:
    """Sam harmonogram, bez zapisu (podgląd w kalendarzu)."""

    def __init__(self, allocator: DailyTargetAllocator):
        self.allocator = allocator

    def execute(self, request: AllocationRequest) -> List[DailyTarget]:
        return self.allocator.allocate(request)


class CreatePlanUseCase:
    def __init__(self, repository: IPlanRepository, allocator: DailyTargetAllocator):
        self.repository = repository
        self.allocator = allocator

    def execute(self, input_dto: CreatePlanInput) -> PlanEntity:
        _require_name(input_dto.name)

        # Najpierw alokacja - błąd walidacji nie zostawi w bazie pustego planu
        schedule = self.allocator.allocate(input_dto.to_allocation_request())
        plan = _build_plan(None, input_dto, schedule)

        saved = self.repository.save_with_days(plan, schedule, user_id=input_dto.user_id)

        logger.info("Plan %s created (%s days, goal %s)", saved.id, len(schedule), saved.goal_amount)
        return saved


class UpdatePlanUseCase:
    """
    Przelicza harmonogram po zmianie planu.
    Zalogowany postęp zostaje dla dni, które nadal mieszczą się w zakresie.
    """

    def __init__(self, repository: IPlanRepository, allocator: DailyTargetAllocator):
        self.repository = repository
        self.allocator = allocator

    def execute(self, input_dto: UpdatePlanInput) -> PlanEntity:
        existing = self.repository.get_by_id(input_dto.plan_id)
        if existing is None:
            raise LookupError(f"Plan {input_dto.plan_id} not found")
        _require_name(input_dto.name)

        schedule = self.allocator.allocate(input_dto.to_allocation_request())
        plan = _build_plan(existing.id, input_dto, schedule)
        plan.user_id = existing.user_id

        saved = self.repository.save_with_days(plan, schedule)

        logger.info("Plan %s re-planned (%s days)", saved.id, len(schedule))
        return saved


class LogProgressUseCase:
    def __init__(self, repository: IPlanRepository):
        self.repository = repository

    def execute(self, plan_id: int, day: date, count: int) -> PlanDayEntity:
        plan = self.repository.get_by_id(plan_id)
        if plan is None:
            raise LookupError(f"Plan {plan_id} not found")
        if count is None or count < 0:
            raise ValueError("Logged amount cannot be negative")
        if not plan.contains(day):
            raise ValueError(f"{day.isoformat()} is outside the plan range")

        return self.repository.set_logged(plan_id, day, count)
