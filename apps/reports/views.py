from datetime import date
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.contrib.auth.decorators import login_required
from django.views.decorators.http import require_GET
from apps.plans.adapters.orm_repositories import DjangoPlanRepository
from apps.plans.models import Plan
from .domain.services import ReportService


@login_required
@require_GET
def plan_stats_api_view(request, pk):
    """
    Statystyki jednego planu: cel vs postęp + dane dzienne do wykresu.
    """
    plan_model = get_object_or_404(Plan, pk=pk, user=request.user)

    repo = DjangoPlanRepository()
    service = ReportService(repo)

    plan = repo.to_entity(plan_model)
    days = repo.get_days(plan.id)

    return JsonResponse({
        'success': True,
        'plan': plan.to_dict(),
        'stats': service.get_plan_stats(plan, days, date.today()),
        'daily_data': [d.to_dict() for d in days],
    })


@login_required
@require_GET
def global_stats_api_view(request):
    """Statystyki ze wszystkich planów zalogowanego użytkownika."""
    service = ReportService(DjangoPlanRepository())
    data = service.get_global_stats(request.user.id, date.today())

    return JsonResponse({'success': True, **data})
