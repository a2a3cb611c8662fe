from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from . import Model
from .field import EntityField
from .role import AppRole


class EntityPermissionType(str, Enum):
    """
    Decides which roles receive a permission.
        1. Disabled -> nobody
        2. AllRoles -> every role, on every attribute
        3. Granular -> only the listed permission roles, optionally narrowed per field
    """

    DISABLED = "Disabled"
    ALL_ROLES = "AllRoles"
    GRANULAR = "Granular"


class EntityAction(str, Enum):
    CREATE = "Create"
    DELETE = "Delete"
    SEARCH = "Search"
    UPDATE = "Update"
    VIEW = "View"


@dataclass
class PermissionRole(Model):
    app_role: AppRole


@dataclass
class PermissionFieldRole(Model):
    app_role: AppRole


@dataclass
class PermissionField(Model):
    """Role exceptions declared for a single entity field"""

    # the entity field, only its name is used
    field: EntityField
    # None is kept as is so the compiler can reject it
    permission_field_roles: Optional[List[PermissionFieldRole]] = None


@dataclass
class EntityPermission(Model):
    # a raw string is kept for values outside of EntityPermissionType
    type: EntityPermissionType | str
    action: EntityAction
    permission_roles: Optional[List[PermissionRole]] = None
    permission_fields: Optional[List[PermissionField]] = None
