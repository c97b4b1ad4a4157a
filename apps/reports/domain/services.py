# apps/reports/domain/services.py
import math
from datetime import date
from typing import List
from apps.plans.domain.entities import PlanDayEntity, PlanEntity
from apps.plans.ports.repositories import IPlanRepository


class ReportService:
    def __init__(self, repository: IPlanRepository):
        self.repository = repository

    def get_plan_stats(self, plan: PlanEntity, days: List[PlanDayEntity], today: date) -> dict:
        """Porównanie zalogowanego postępu z dziennymi celami planu."""
        goal = plan.goal_amount
        total_logged = sum(d.logged for d in days)
        remaining = max(0, goal - total_logged)

        # Dni "minione" to te do dzisiaj włącznie
        elapsed = [d for d in days if d.date <= today]
        expected_to_date = sum(d.target for d in elapsed)
        days_remaining = len(days) - len(elapsed)

        if days_remaining:
            required_daily = math.ceil(remaining / days_remaining)
        else:
            required_daily = remaining

        best = max(days, key=lambda d: d.logged, default=None)

        return {
            'goal_amount': goal,
            'total_logged': total_logged,
            'remaining': remaining,
            'percent_complete': round(total_logged / goal * 100, 1) if goal else 100.0,
            'expected_to_date': expected_to_date,
            'difference': total_logged - expected_to_date,
            'on_track': total_logged >= expected_to_date,
            'days_total': len(days),
            'days_elapsed': len(elapsed),
            'days_remaining': days_remaining,
            'days_met': sum(1 for d in days if d.is_met),
            'daily_average': round(total_logged / len(elapsed), 1) if elapsed else 0.0,
            'required_daily': required_daily,
            'best_day': {'date': best.date.isoformat(), 'logged': best.logged} if best and best.logged else None,
            'current_streak': self._current_streak(elapsed, today),
        }

    @staticmethod
    def _current_streak(elapsed: List[PlanDayEntity], today: date) -> int:
        """Liczba kolejnych dni z postępem, licząc wstecz od dziś."""
        streak = 0
        for day in reversed(elapsed):
            if day.logged > 0:
                streak += 1
            elif day.date == today:
                continue  # dzień jeszcze trwa
            elif day.target == 0:
                continue  # dzień wolny (np. weekend) nie przerywa serii
            else:
                break
        return streak

    def get_global_stats(self, user_id: int, today: date) -> dict:
        """Zbiorcze statystyki ze wszystkich planów użytkownika."""
        plans = self.repository.list_for_user(user_id)

        per_date = {}
        total_logged = 0
        total_goal = 0
        completed = 0
        active = 0

        for plan in plans:
            days = self.repository.get_days(plan.id)
            plan_logged = sum(d.logged for d in days)

            total_logged += plan_logged
            total_goal += plan.goal_amount
            if plan.goal_amount and plan_logged >= plan.goal_amount:
                completed += 1
            if plan.contains(today):
                active += 1

            for d in days:
                bucket = per_date.setdefault(d.date, {'target': 0, 'logged': 0})
                bucket['target'] += d.target
                bucket['logged'] += d.logged

        daily_data = [
            {'date': day.isoformat(), 'target': v['target'], 'logged': v['logged']}
            for day, v in sorted(per_date.items())
        ]

        return {
            'stats': {
                'plans_count': len(plans),
                'active_plans': active,
                'completed_plans': completed,
                'total_goal': total_goal,
                'total_logged': total_logged,
                'percent_complete': round(total_logged / total_goal * 100, 1) if total_goal else 0.0,
            },
            'daily_data': daily_data,
        }
