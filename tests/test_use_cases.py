"""Tests for plan use cases backed by the Django ORM repository."""

from datetime import date

import pytest

from apps.plans.adapters.orm_repositories import DjangoPlanRepository
from apps.plans.application.use_cases import (
    CreatePlanInput,
    CreatePlanUseCase,
    LogProgressUseCase,
    PreviewPlanUseCase,
    UpdatePlanInput,
    UpdatePlanUseCase,
)
from apps.plans.domain.entities import AllocationRequest
from apps.plans.domain.errors import InvalidRangeError, UnknownStrategyError
from apps.plans.models import Plan, PlanDay
from apps.reports.models import ActivityLog


def test_preview_does_not_persist(db, allocator):
    schedule = PreviewPlanUseCase(allocator).execute(
        AllocationRequest(100, "2024-01-01", "2024-01-05")
    )

    assert [d.target for d in schedule] == [20] * 5
    assert not PlanDay.objects.exists()


def test_create_plan_persists_one_row_per_day(plan, repo):
    days = repo.get_days(plan.id)

    assert plan.id is not None
    assert plan.goal_amount == 7000
    assert [d.date for d in days] == [date(2024, 1, d) for d in range(1, 8)]
    assert [d.target for d in days] == [1000] * 7
    assert all(d.logged == 0 for d in days)


def test_create_plan_stores_canonical_options(repo, allocator, user):
    saved = CreatePlanUseCase(repo, allocator).execute(CreatePlanInput(
        name="  Thesis  ",
        user_id=user.id,
        goal_amount=3000,
        start_date="2024-02-01",
        end_date="2024-02-29",
        strategy="Steadily",
        intensity="INTENSE",
        weekend_rule="Off",
        display_settings={"color": "#3b82f6"},
    ))

    model = Plan.objects.get(id=saved.id)
    assert model.name == "Thesis"
    assert (model.strategy, model.intensity, model.weekend_rule) == ("steady", "intense", "off")
    assert model.display_settings == {"color": "#3b82f6"}
    assert sum(d.target for d in model.days.all()) == 3000
    assert model.days.count() == 29


def test_create_plan_rejects_empty_name(repo, allocator, user):
    with pytest.raises(ValueError):
        CreatePlanUseCase(repo, allocator).execute(CreatePlanInput(
            name="   ", user_id=user.id, goal_amount=100,
            start_date="2024-01-01", end_date="2024-01-02",
        ))


def test_failed_allocation_leaves_nothing_behind(repo, allocator, user):
    use_case = CreatePlanUseCase(repo, allocator)

    with pytest.raises(UnknownStrategyError):
        use_case.execute(CreatePlanInput(
            name="Bad", user_id=user.id, goal_amount=100,
            start_date="2024-01-01", end_date="2024-01-02", strategy="zigzag",
        ))
    with pytest.raises(InvalidRangeError):
        use_case.execute(CreatePlanInput(
            name="Bad", user_id=user.id, goal_amount=100,
            start_date="2024-01-05", end_date="2024-01-02",
        ))

    assert not Plan.objects.exists()
    assert not PlanDay.objects.exists()


def _failing_replace_days(self, plan_id, targets):
    raise RuntimeError("disk full")


def test_failed_schedule_write_rolls_back_new_plan(repo, allocator, user, monkeypatch):
    monkeypatch.setattr(DjangoPlanRepository, "replace_days", _failing_replace_days)

    with pytest.raises(RuntimeError):
        CreatePlanUseCase(repo, allocator).execute(CreatePlanInput(
            name="Half-saved", user_id=user.id, goal_amount=100,
            start_date="2024-01-01", end_date="2024-01-05",
        ))

    assert not Plan.objects.exists()
    assert not ActivityLog.objects.exists()


def test_failed_schedule_write_keeps_previous_plan(plan, repo, allocator, user, monkeypatch):
    monkeypatch.setattr(DjangoPlanRepository, "replace_days", _failing_replace_days)

    with pytest.raises(RuntimeError):
        UpdatePlanUseCase(repo, allocator).execute(UpdatePlanInput(
            plan_id=plan.id, name="Moved", user_id=user.id, goal_amount=500,
            start_date="2024-02-01", end_date="2024-02-05",
        ))

    model = Plan.objects.get(id=plan.id)
    assert (model.name, model.start_date, model.goal_amount) == ("January sprint", date(2024, 1, 1), 7000)
    assert [d.target for d in repo.get_days(plan.id)] == [1000] * 7


def test_creating_a_plan_is_recorded_in_activity_log(plan, user):
    entry = ActivityLog.objects.get(object_id=plan.id, action_type=ActivityLog.ActionType.CREATED)

    assert entry.user == user
    assert entry.details == {
        "plan": "January sprint",
        "goal_amount": 7000,
        "start_date": "2024-01-01",
        "end_date": "2024-01-07",
        "strategy": "steady",
    }


def test_progress_log_entry_carries_plan_and_day(plan, repo):
    LogProgressUseCase(repo).execute(plan.id, date(2024, 1, 4), 640)

    entry = ActivityLog.objects.get(action_type=ActivityLog.ActionType.PROGRESS_LOGGED)

    assert entry.object_id == plan.id
    assert entry.details["plan"] == "January sprint"
    assert (entry.details["date"], entry.details["logged"], entry.details["target"]) == ("2024-01-04", 640, 1000)


def test_log_progress_sets_logged_amount(plan, repo):
    use_case = LogProgressUseCase(repo)

    use_case.execute(plan.id, date(2024, 1, 2), 800)
    day = use_case.execute(plan.id, date(2024, 1, 2), 1200)

    assert day.logged == 1200
    assert day.target == 1000
    assert PlanDay.objects.get(plan_id=plan.id, date=date(2024, 1, 2)).logged == 1200
    assert ActivityLog.objects.filter(action_type=ActivityLog.ActionType.PROGRESS_LOGGED).count() == 2


def test_log_progress_outside_range_is_rejected(plan, repo):
    with pytest.raises(ValueError):
        LogProgressUseCase(repo).execute(plan.id, date(2024, 1, 8), 100)

    with pytest.raises(ValueError):
        LogProgressUseCase(repo).execute(plan.id, date(2024, 1, 3), -1)


def test_log_progress_for_missing_plan(db, repo):
    with pytest.raises(LookupError):
        LogProgressUseCase(repo).execute(999, date(2024, 1, 1), 10)


def test_update_replans_and_keeps_logged_progress(plan, repo, allocator, user):
    LogProgressUseCase(repo).execute(plan.id, date(2024, 1, 1), 500)
    LogProgressUseCase(repo).execute(plan.id, date(2024, 1, 3), 1500)

    # Przesuwamy start o dwa dni i wydłużamy plan
    updated = UpdatePlanUseCase(repo, allocator).execute(UpdatePlanInput(
        plan_id=plan.id,
        name="January sprint (extended)",
        user_id=user.id,
        goal_amount=9000,
        start_date="2024-01-03",
        end_date="2024-01-11",
    ))

    days = {d.date: d for d in repo.get_days(plan.id)}

    assert updated.id == plan.id
    assert updated.goal_amount == 9000
    assert min(days) == date(2024, 1, 3)
    assert max(days) == date(2024, 1, 11)
    assert date(2024, 1, 1) not in days
    assert days[date(2024, 1, 3)].logged == 1500
    assert sum(d.target for d in days.values()) == 9000
    assert PlanDay.objects.filter(plan_id=plan.id).count() == 9


def test_update_missing_plan(db, repo, allocator, user):
    with pytest.raises(LookupError):
        UpdatePlanUseCase(repo, allocator).execute(UpdatePlanInput(
            plan_id=12345, name="Ghost", user_id=user.id, goal_amount=1,
            start_date="2024-01-01", end_date="2024-01-01",
        ))


def test_repository_requires_owner_for_new_plan(repo):
    from apps.plans.domain.entities import PlanEntity

    with pytest.raises(ValueError):
        repo.save(PlanEntity(id=None, name="Orphan", start_date=date(2024, 1, 1),
                             end_date=date(2024, 1, 2), goal_amount=10))


def test_list_for_user_only_returns_own_plans(plan, repo, allocator, other_user):
    CreatePlanUseCase(repo, allocator).execute(CreatePlanInput(
        name="Not mine", user_id=other_user.id, goal_amount=10,
        start_date="2024-01-01", end_date="2024-01-02",
    ))

    assert [p.name for p in repo.list_for_user(plan.user_id)] == ["January sprint"]
