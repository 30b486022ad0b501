from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from ifc_calendar import core
from ifc_calendar.utils import format_ifc_date, parse_ifc_date


class IfcDateField(serializers.Field):
    default_error_messages = {"required": "This field is required."}

    def to_internal_value(self, data):
        try:
            value = parse_ifc_date(data)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages) from exc
        if value is None:
            self.fail("required")
        return value

    def to_representation(self, value):
        return format_ifc_date(value)


class ToIfcQuerySerializer(serializers.Serializer):
    date = serializers.DateField(input_formats=["iso-8601"])


class ToIsoQuerySerializer(serializers.Serializer):
    date = IfcDateField()


class StepQuerySerializer(serializers.Serializer):
    date = IfcDateField()
    days = serializers.IntegerField(default=1, min_value=-36600, max_value=36600)


class IfcDateSerializer(serializers.Serializer):
    ifc = serializers.SerializerMethodField()
    iso = serializers.SerializerMethodField()
    year = serializers.IntegerField(read_only=True)
    month = serializers.IntegerField(read_only=True)
    day = serializers.IntegerField(read_only=True)
    month_name = serializers.SerializerMethodField()
    kind = serializers.SerializerMethodField()
    weekday = serializers.SerializerMethodField()
    day_of_year = serializers.SerializerMethodField()

    def get_ifc(self, obj: core.IfcDate) -> str:
        return format_ifc_date(obj)

    def get_iso(self, obj: core.IfcDate) -> str | None:
        try:
            return core.to_iso(obj).isoformat()
        except core.InvalidDateError:
            return None

    def get_month_name(self, obj: core.IfcDate) -> str:
        return core.month_name(obj.month)

    def get_kind(self, obj: core.IfcDate) -> str:
        if obj.is_year_day:
            return "year_day"
        if obj.is_leap_day:
            return "leap_day"
        return "ordinary"

    def get_weekday(self, obj: core.IfcDate) -> str:
        return obj.weekday().label

    def get_day_of_year(self, obj: core.IfcDate) -> int:
        return core.day_of_year(obj)
