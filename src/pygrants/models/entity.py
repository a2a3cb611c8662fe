from dataclasses import dataclass, field
from typing import List
from . import Model
from .field import EntityField
from .permission import EntityPermission


@dataclass
class Entity(Model):
    """A protected resource type together with its permission declarations"""

    name: str
    permissions: List[EntityPermission] = field(default_factory=list)
    # informational only, grants are computed from the permission fields
    fields: List[EntityField] = field(default_factory=list)
