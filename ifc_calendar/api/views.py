from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from ifc_calendar import core

from .serializers import (
    IfcDateSerializer,
    StepQuerySerializer,
    ToIfcQuerySerializer,
    ToIsoQuerySerializer,
)

logger = logging.getLogger(__name__)


class _QueryView(APIView):
    query_serializer_class = None

    def get(self, request):
        query = self.query_serializer_class(data=request.query_params)
        if not query.is_valid():
            logger.info(
                "Rejected %s query %s: %s",
                self.__class__.__name__,
                request.query_params.dict(),
                query.errors,
            )
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)
        value = self.resolve(**query.validated_data)
        return Response(IfcDateSerializer(value).data)

    def resolve(self, **params) -> core.IfcDate:
        raise NotImplementedError


class ToIfcView(_QueryView):
    """Gregorian ``date`` -> IFC."""

    query_serializer_class = ToIfcQuerySerializer

    def resolve(self, date):
        return core.ordinary(core.to_ifc(date))


class ToIsoView(_QueryView):
    """IFC ``date`` -> Gregorian."""

    query_serializer_class = ToIsoQuerySerializer

    def resolve(self, date):
        return date


class StepView(_QueryView):
    """Move an IFC ``date`` by ``days``."""

    query_serializer_class = StepQuerySerializer

    def resolve(self, date, days):
        if days == 1:
            return core.next_day(date)
        if days == -1:
            return core.prev_day(date)
        return core.add_days(date, days)
