"""Pytest configuration and fixtures."""

import random

import pytest

from apps.plans.adapters.orm_repositories import DjangoPlanRepository
from apps.plans.application.use_cases import CreatePlanInput, CreatePlanUseCase
from apps.plans.domain.services.allocator import DailyTargetAllocator


@pytest.fixture
def allocator():
    """Allocator with a seeded RNG so 'random' plans are repeatable in tests."""
    return DailyTargetAllocator(max_days=366, rng=random.Random(42))


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="writer", password="secret")


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username="someone-else", password="secret")


@pytest.fixture
def repo(db):
    return DjangoPlanRepository()


@pytest.fixture
def plan(repo, allocator, user):
    """A week-long 7000 word plan (Mon 2024-01-01 .. Sun 2024-01-07)."""
    use_case = CreatePlanUseCase(repository=repo, allocator=allocator)
    return use_case.execute(CreatePlanInput(
        name="January sprint",
        user_id=user.id,
        goal_amount=7000,
        start_date="2024-01-01",
        end_date="2024-01-07",
        content_type="Novel",
        activity_type="Writing",
    ))


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client
