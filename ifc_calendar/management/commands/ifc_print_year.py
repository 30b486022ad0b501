from __future__ import annotations

import logging

from django.core.management.base import BaseCommand
from django.utils import timezone

from ifc_calendar import core
from ifc_calendar.render import render_year

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Print the IFC month grid for a year (defaults to the current year)"

    def add_arguments(self, parser):
        parser.add_argument("year", nargs="?", type=int)

    def handle(self, *args, **opts):
        year = opts["year"]
        if year is None:
            year = core.to_ifc(timezone.localdate()).year
        logger.debug("Rendering IFC grid for %s", year)
        self.stdout.write(render_year(year))
