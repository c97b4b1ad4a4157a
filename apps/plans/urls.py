# apps/plans/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.plan_list_view, name='plan_list'),
    path('preview/', views.plan_preview_view, name='plan_preview'),
    path('new/', views.plan_create_view, name='plan_create'),
    path('<int:pk>/', views.plan_detail_view, name='plan_detail'),
    path('<int:pk>/edit/', views.plan_edit_view, name='plan_edit'),
    path('<int:pk>/progress/', views.plan_progress_view, name='plan_progress'),
]
