import json
import logging
from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.contrib.auth.decorators import login_required
from django.views.decorators.http import require_GET, require_POST, require_http_methods
from .adapters.orm_repositories import DjangoPlanRepository
from .application.use_cases import (
    CreatePlanInput, CreatePlanUseCase, LogProgressUseCase, PreviewPlanUseCase,
    UpdatePlanInput, UpdatePlanUseCase,
)
from .domain.entities import AllocationRequest
from .domain.services.allocator import DailyTargetAllocator
from .forms import PlanForm, ProgressForm
from .models import Plan

logger = logging.getLogger(__name__)


def _allocator():
    return DailyTargetAllocator(max_days=settings.PLAN_MAX_DAYS)


def _json_body(request) -> dict:
    try:
        payload = json.loads(request.body or b'{}')
    except (TypeError, ValueError):
        raise ValueError("Request body must be valid JSON")
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def _error(message, status=400, **extra):
    return JsonResponse({'success': False, 'message': str(message), **extra}, status=status)


def _form_error(form):
    # Pierwszy błąd jako komunikat dla UI, reszta w 'errors'
    field, errors = next(iter(form.errors.items()))
    return _error(f"{field}: {errors[0]}", errors=form.errors.get_json_data())


def _plan_input(form, user_id, input_cls=CreatePlanInput, **extra):
    data = form.cleaned_data
    return input_cls(
        name=data['name'],
        user_id=user_id,
        goal_amount=data['goal_amount'],
        start_date=data['start_date'],
        end_date=data['end_date'],
        strategy=data['strategy'] or 'steady',
        intensity=data['intensity'] or 'average',
        weekend_rule=data['weekend_rule'] or 'none',
        content_type=data['content_type'],
        activity_type=data['activity_type'],
        display_settings=data['display_settings'],
        **extra
    )


@require_POST
def plan_preview_view(request):
    """Podgląd harmonogramu dla kalendarza - nic nie zapisuje."""
    try:
        request_dto = AllocationRequest.from_payload(_json_body(request))
        schedule = PreviewPlanUseCase(_allocator()).execute(request_dto)
    except ValueError as e:
        return _error(e)

    return JsonResponse({'success': True, 'data': [d.to_dict() for d in schedule]})


@login_required
@require_GET
def plan_list_view(request):
    repo = DjangoPlanRepository()
    plans = repo.list_for_user(request.user.id)
    return JsonResponse({'success': True, 'records': [p.to_dict() for p in plans]})


@login_required
@require_POST
def plan_create_view(request):
    try:
        form = PlanForm(_json_body(request))
    except ValueError as e:
        return _error(e)
    if not form.is_valid():
        return _form_error(form)

    # Złożenie Use Case (Manual Dependency Injection)
    repo = DjangoPlanRepository()
    use_case = CreatePlanUseCase(repository=repo, allocator=_allocator())

    try:
        plan = use_case.execute(_plan_input(form, request.user.id))
    except ValueError as e:
        logger.info("Plan rejected for user %s: %s", request.user.id, e)
        return _error(e)

    return JsonResponse({
        'success': True,
        'message': 'Plan created successfully',
        'plan': plan.to_dict(),
        'days': [d.to_dict() for d in repo.get_days(plan.id)],
    }, status=201)


@login_required
@require_GET
def plan_detail_view(request, pk):
    plan_model = get_object_or_404(Plan, pk=pk, user=request.user)
    repo = DjangoPlanRepository()

    return JsonResponse({
        'success': True,
        'plan': repo.to_entity(plan_model).to_dict(),
        'days': [d.to_dict() for d in repo.get_days(plan_model.id)],
    })


@login_required
@require_http_methods(["POST"])
def plan_edit_view(request, pk):
    plan_model = get_object_or_404(Plan, pk=pk, user=request.user)

    try:
        form = PlanForm(_json_body(request))
    except ValueError as e:
        return _error(e)
    if not form.is_valid():
        return _form_error(form)

    repo = DjangoPlanRepository()
    use_case = UpdatePlanUseCase(repository=repo, allocator=_allocator())

    try:
        plan = use_case.execute(_plan_input(form, request.user.id, UpdatePlanInput, plan_id=plan_model.id))
    except ValueError as e:
        return _error(e)

    return JsonResponse({
        'success': True,
        'message': 'Plan updated successfully',
        'plan': plan.to_dict(),
        'days': [d.to_dict() for d in repo.get_days(plan.id)],
    })


@login_required
@require_POST
def plan_progress_view(request, pk):
    """Zapisuje postęp dla dnia (nadpisuje, nie dodaje)."""
    plan_model = get_object_or_404(Plan, pk=pk, user=request.user)

    try:
        form = ProgressForm(_json_body(request))
    except ValueError as e:
        return _error(e)
    if not form.is_valid():
        return _form_error(form)

    use_case = LogProgressUseCase(DjangoPlanRepository())
    try:
        day = use_case.execute(plan_model.id, form.cleaned_data['date'], form.cleaned_data['count'])
    except ValueError as e:
        return _error(e)

    return JsonResponse({'success': True, 'day': day.to_dict()})
