from abc import ABC
from dataclasses import dataclass, asdict
from enum import Enum


@dataclass
class Model(ABC):
    def to_dict(
        self, exclude: list[str] | None = None, include_none: bool = True
    ) -> dict:
        exclude = exclude or []
        data = asdict(self)
        return {
            k: (v.value if isinstance(v, Enum) else v)
            for k, v in data.items()
            if k not in exclude and (include_none or v is not None)
        }

