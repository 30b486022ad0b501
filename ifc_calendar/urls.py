from django.urls import path

from . import views

app_name = "ifc_calendar"

urlpatterns = [
    path("date/set/", views.set_ifc_date, name="set_ifc_date"),
    path("year/<int:y>/meta/", views.year_meta, name="year_meta"),
]
