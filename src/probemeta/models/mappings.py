"""Read-only mapping fields for ``tags`` and ``disposition``."""

from types import MappingProxyType
from typing import Annotated, Any, Mapping

from pydantic import AfterValidator, PlainSerializer


def _as_dict(value: Mapping[str, Any]) -> dict[str, Any]:
    return dict(value)


TagMap = Annotated[Mapping[str, str], AfterValidator(MappingProxyType), PlainSerializer(_as_dict)]
DispositionMap = Annotated[Mapping[str, int], AfterValidator(MappingProxyType), PlainSerializer(_as_dict)]
