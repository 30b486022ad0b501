from django.apps import AppConfig


class IfcCalendarConfig(AppConfig):
    name = "ifc_calendar"
    verbose_name = "International Fixed Calendar"
