"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("api/fields/", views.fields_api, name="fields_api"),
    path("api/charts/", views.chart_api, name="chart_api"),
]
