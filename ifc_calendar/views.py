"""Views for IFC calendar utilities."""

import logging

from django.core.exceptions import ValidationError
from django.http import (
    HttpResponseBadRequest,
    HttpResponseRedirect,
    JsonResponse,
)
from django.views.decorators.http import require_GET, require_POST

from . import conf, core
from .forms import IfcDateForm
from .utils import format_ifc_date

logger = logging.getLogger(__name__)


@require_POST
def set_ifc_date(request):
    """Store current IFC date in session."""
    form = IfcDateForm(request.POST)
    if not form.is_valid():
        message = "; ".join(form.errors["ifc_date"])
        logger.info("Rejected IFC date %r: %s", request.POST.get("ifc_date"), message)
        if request.headers.get("x-requested-with") == "XMLHttpRequest":
            return JsonResponse({"error": message}, status=400)
        return HttpResponseBadRequest(message)
    formatted = format_ifc_date(form.cleaned_data["ifc_date"])
    request.session[conf.SESSION_KEY] = formatted
    if request.headers.get("x-requested-with") == "XMLHttpRequest":
        return JsonResponse({"ok": True, "value": formatted})
    return HttpResponseRedirect(request.META.get("HTTP_REFERER", "/"))


@require_GET
def year_meta(request, y: int) -> JsonResponse:
    """Return calendar metadata for year ``y``."""

    data = {
        "year": y,
        "leap": core.is_leap_year(y),
        "month_lengths": [core.days_in_month(y, m) for m in range(1, core.MONTHS_IN_YEAR + 1)],
        "year_length": core.year_length(y),
        "month_names": core.MONTH_NAMES,
        "weekday_names": core.WEEKDAY_NAMES,
    }
    return JsonResponse(data)
