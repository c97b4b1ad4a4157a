# apps/plans/adapters/orm_repositories.py
from datetime import date
from typing import List, Optional
from django.db import DEFAULT_DB_ALIAS, transaction
from apps.plans.domain.entities import DailyTarget, PlanDayEntity, PlanEntity
from apps.plans.ports.repositories import IPlanRepository
from apps.plans.models import Plan as PlanModel, PlanDay as PlanDayModel


class DjangoPlanRepository(IPlanRepository):
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        # Alias bazy przekazujemy jawnie (zamiast globalnej puli połączeń)
        self.using = using

    def to_entity(self, model: PlanModel) -> PlanEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return PlanEntity(
            id=model.id,
            name=model.name,
            start_date=model.start_date,
            end_date=model.end_date,
            goal_amount=model.goal_amount,
            strategy=model.strategy,
            intensity=model.intensity,
            weekend_rule=model.weekend_rule,
            content_type=model.content_type,
            activity_type=model.activity_type,
            display_settings=model.display_settings or {},
            user_id=model.user_id,
        )

    @staticmethod
    def day_to_entity(model: PlanDayModel) -> PlanDayEntity:
        return PlanDayEntity(date=model.date, target=model.target, logged=model.logged)

    def _plans(self):
        return PlanModel.objects.using(self.using)

    def _days(self):
        return PlanDayModel.objects.using(self.using)

    def get_by_id(self, plan_id: int) -> Optional[PlanEntity]:
        try:
            return self.to_entity(self._plans().get(id=plan_id))
        except PlanModel.DoesNotExist:
            return None

    def save(self, plan: PlanEntity, user_id: int = None) -> PlanEntity:
        data = {
            'name': plan.name,
            'start_date': plan.start_date,
            'end_date': plan.end_date,
            'goal_amount': plan.goal_amount,
            'strategy': plan.strategy,
            'intensity': plan.intensity,
            'weekend_rule': plan.weekend_rule,
            'content_type': plan.content_type,
            'activity_type': plan.activity_type,
            'display_settings': plan.display_settings,
        }

        if plan.id:
            # Aktualizacja (save() zamiast update(), żeby updated_at i sygnały zadziałały)
            obj = self._plans().get(id=plan.id)
            for field_name, value in data.items():
                setattr(obj, field_name, value)
            obj.save(using=self.using)
        else:
            owner_id = user_id or plan.user_id
            if owner_id is None:
                raise ValueError("user_id is required for creating a new plan")
            obj = PlanModel(user_id=owner_id, **data)
            obj.save(using=self.using)

        return self.to_entity(obj)

    def get_days(self, plan_id: int) -> List[PlanDayEntity]:
        qs = self._days().filter(plan_id=plan_id).order_by('date')
        return [self.day_to_entity(d) for d in qs]

    def replace_days(self, plan_id: int, targets: List[DailyTarget]) -> List[PlanDayEntity]:
        with transaction.atomic(using=self.using):
            existing = {d.date: d for d in self._days().filter(plan_id=plan_id)}
            new_dates = {t.date for t in targets}

            # 1. Dni spoza nowego zakresu
            stale_ids = [d.id for day, d in existing.items() if day not in new_dates]
            if stale_ids:
                self._days().filter(id__in=stale_ids).delete()

            # 2. Aktualizacja istniejących / tworzenie brakujących
            to_update = []
            to_create = []
            for t in targets:
                row = existing.get(t.date)
                if row is not None:
                    row.target = t.target
                    to_update.append(row)
                else:
                    to_create.append(PlanDayModel(plan_id=plan_id, date=t.date, target=t.target))

            if to_update:
                self._days().bulk_update(to_update, ['target'])
            if to_create:
                self._days().bulk_create(to_create)

        return self.get_days(plan_id)

    def save_with_days(self, plan: PlanEntity, targets: List[DailyTarget], user_id: int = None) -> PlanEntity:
        # Błąd harmonogramu cofa też wiersz planu (i wpis w ActivityLog z sygnału)
        with transaction.atomic(using=self.using):
            saved = self.save(plan, user_id=user_id)
            self.replace_days(saved.id, targets)
        return saved

    def set_logged(self, plan_id: int, day: date, amount: int) -> PlanDayEntity:
        with transaction.atomic(using=self.using):
            # Dzień może nie istnieć (np. stary plan bez harmonogramu)
            row, _ = self._days().get_or_create(plan_id=plan_id, date=day)
            row.logged = amount
            row.save(using=self.using, update_fields=['logged'])
        return self.day_to_entity(row)

    def list_for_user(self, user_id: int) -> List[PlanEntity]:
        qs = self._plans().filter(user_id=user_id).order_by('start_date', 'id')
        return [self.to_entity(p) for p in qs]
