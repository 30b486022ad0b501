from django.urls import include, path

from ifc_calendar import views as calendar_views

urlpatterns = [
    path("ifc/", include("ifc_calendar.urls")),
    path("api/ifc/", include("ifc_calendar.api.urls")),
    path(
        "api/ifc_calendar/year/<int:y>/meta",
        calendar_views.year_meta,
        name="ifc-calendar-year-meta",
    ),
]
