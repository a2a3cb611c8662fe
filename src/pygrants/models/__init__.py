from .model import Model
from .field import EntityField
from .role import AppRole
from .permission import (
    EntityPermissionType,
    EntityAction,
    EntityPermission,
    PermissionRole,
    PermissionField,
    PermissionFieldRole,
)
from .entity import Entity
from .grant import Grant, ACLAction

__all__ = [
    "Model",
    "AppRole",
    "Entity",
    "EntityField",
    "EntityPermissionType",
    "EntityAction",
    "EntityPermission",
    "PermissionRole",
    "PermissionField",
    "PermissionFieldRole",
    "Grant",
    "ACLAction",
]
