from __future__ import annotations

from functools import cache

import msgspec
from msgspec.structs import force_setattr


@cache
def _zero_values(cls: type[msgspec.Struct]) -> tuple[tuple[str, object], ...]:
    """Fields of ``cls`` whose default is something other than None"""
    fields: tuple[str, ...] = cls.__struct_fields__
    defaults: tuple[object, ...] = cls.__struct_defaults__
    with_defaults = fields[len(fields) - len(defaults) :]
    return tuple(
        (field, default)
        for field, default in zip(with_defaults, defaults)
        if default is not None and default is not msgspec.NODEFAULT
    )


class FrozenBase(
    msgspec.Struct,
    frozen=True,
    omit_defaults=True,
    rename="kebab",
):
    """Base for hashable Structs

    Unknown keys are ignored, the service adds fields without notice.
    Fields typed ``X | None`` with a non-None default accept JSON null,
    which is replaced by that default.
    """

    def __post_init__(self) -> None:
        for field, default in _zero_values(type(self)):
            if getattr(self, field) is None:
                force_setattr(self, field, default)


__all__: list[str] = ["FrozenBase"]
