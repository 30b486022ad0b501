"""Context processors for the IFC calendar."""

from django.utils import timezone

from . import conf, core
from .utils import format_ifc_date


def ifc_date(request):
    """Expose the session IFC date and today's IFC date to templates."""
    session = getattr(request, "session", {})
    today = core.ordinary(core.to_ifc(timezone.localdate()))
    return {
        "IFC_CURRENT_DATE": session.get(conf.SESSION_KEY, ""),
        "IFC_TODAY": format_ifc_date(today),
        "IFC_TODAY_WEEKDAY": today.weekday().label,
        "IFC_TODAY_MONTH": core.month_name(today.month),
    }
