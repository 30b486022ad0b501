"""IFC calendar helper utilities."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from django.core.exceptions import ValidationError

from . import conf, core
from .validators import validate_ifc_date_parts

ERR_FORMAT = "Date must be in YYYY-MM-DD or DD-MM-YYYY format"

_ISO_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")
_DMY_RE = re.compile(r"(\d{1,2})-(\d{1,2})-(\d{4})")


def _build(year: int, month: int, day: int) -> core.IfcDate:
    validate_ifc_date_parts(year, month, day)
    try:
        return core.make(year, month, day)
    except core.InvalidDateError as exc:  # pragma: no cover - validated above
        raise ValidationError(str(exc)) from exc


def parse_ifc_date(value: Any, *, accept_dmy: bool | None = None) -> core.IfcDate | None:
    """Tolerant parser for IFC dates.

    Accepts multiple input types:

    * ``None``/``""``/``b""`` → ``None``
    * ``IfcDate``/``YearDay``/``LeapDay`` → the matching ``IfcDate``
    * ``date``/``datetime`` → converted from the Gregorian calendar
    * ``tuple``/``list`` of three items → components (strings allowed)
    * ``bytes`` → decoded as UTF-8
    * ``str`` in ``YYYY-MM-DD`` or, when ``accept_dmy``, ``DD-MM-YYYY``

    Raises :class:`django.core.exceptions.ValidationError` on invalid input.
    """

    if accept_dmy is None:
        accept_dmy = conf.ACCEPT_DMY

    # Empty values ------------------------------------------------------
    if value in (None, "", b""):
        return None

    # Engine values -----------------------------------------------------
    if isinstance(value, core.IfcDate | core.YearDay | core.LeapDay):
        try:
            return core.ordinary(value)
        except core.InvalidDateError as exc:
            raise ValidationError(str(exc)) from exc

    # Gregorian ``date`` / ``datetime`` instances ----------------------
    if isinstance(value, date | datetime):
        return core.ordinary(core.to_ifc(value))

    # Tuple/list of components -----------------------------------------
    if isinstance(value, list | tuple) and len(value) == 3:
        try:
            y, m, d = [int(v) for v in value]
        except (TypeError, ValueError) as exc:
            raise ValidationError(ERR_FORMAT) from exc
        return _build(y, m, d)

    # Bytes -------------------------------------------------------------
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(ERR_FORMAT) from exc

    # Strings -----------------------------------------------------------
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

        iso = _ISO_RE.fullmatch(value)
        if iso:
            y, m, d = map(int, iso.groups())
        else:
            dmy = _DMY_RE.fullmatch(value) if accept_dmy else None
            if not dmy:
                raise ValidationError(ERR_FORMAT)
            d, m, y = map(int, dmy.groups())
        return _build(y, m, d)

    # Fallback ----------------------------------------------------------
    raise ValidationError(ERR_FORMAT)


def format_ifc_date(value: core.IfcValue) -> str:
    """Return canonical ``YYYY-MM-DD`` string for an IFC value."""

    return str(core.ordinary(value))

