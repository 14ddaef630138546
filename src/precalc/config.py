from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict

DEFAULT_UNITS: tuple[str, ...] = ("px", "vh", "vw", "em", "rem", "%")


class ReduceOptions(BaseModel):
    """Options for a reduction.

    ``units`` is the allow-list of unit strings, or False to accept any unit.
    ``throws`` re-raises errors when True, otherwise a failed reduction gives None.
    """

    model_config = ConfigDict(frozen=True)

    units: Union[tuple[str, ...], Literal[False]] = DEFAULT_UNITS
    throws: bool = True


def get_default_opts() -> ReduceOptions:
    return ReduceOptions(units=DEFAULT_UNITS, throws=True)


def get_opts(raw: ReduceOptions | Mapping[str, Any] | None = None) -> ReduceOptions:
    if raw is None:
        return get_default_opts()
    if isinstance(raw, ReduceOptions):
        return raw
    units_opt = raw.get("units")
    units: Union[tuple[str, ...], Literal[False]]
    if isinstance(units_opt, (list, tuple)):
        units = tuple(str(u) for u in units_opt)
    elif units_opt is True:
        units = DEFAULT_UNITS
    else:
        units = False
    throws_opt = raw.get("throws")
    throws = True if throws_opt is None else bool(throws_opt)
    return ReduceOptions(units=units, throws=throws)


def load_options_file(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Options file must hold a mapping: {path}")
    return data


def merge_options(cfg: Mapping[str, Any] | None, overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(cfg or {})
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged
