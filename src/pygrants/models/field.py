from dataclasses import dataclass
from . import Model


@dataclass
class EntityField(Model):
    name: str
    display_name: str | None = None
