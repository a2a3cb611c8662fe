"""
Builds the compiler input models from a JSON schema document.

Only the structure is checked here. Unknown permission types and malformed
permissionFieldRoles are passed through untouched, the compiler reports them
with the entity and action they belong to.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from .models import (
    AppRole,
    Entity,
    EntityAction,
    EntityField,
    EntityPermission,
    EntityPermissionType,
    PermissionField,
    PermissionFieldRole,
    PermissionRole,
)


class SchemaError(ValueError):
    def __init__(self, msg: str = None, location: str = None, *args):
        self.location = location
        message = f"Invalid grant schema: {msg}" if msg else "Invalid grant schema"
        if location:
            message += f" at {location}"
        super().__init__(message, *args)


@dataclass
class Schema:
    entities: List[Entity] = field(default_factory=list)
    roles: List[AppRole] = field(default_factory=list)


def load_schema(path: str | Path) -> Schema:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SchemaError(f"not a JSON document ({e.msg})", str(path)) from e
    except UnicodeDecodeError as e:
        raise SchemaError(f"not UTF-8 encoded ({e.reason})", str(path)) from e
    except OSError as e:
        raise SchemaError(f"cannot read file ({e.strerror})", str(path)) from e
    return parse_schema(data)


def parse_schema(data: Any) -> Schema:
    _expect(data, dict, "an object", "$")
    entities = _expect(data.get("entities", []), list, "an array", "$.entities")
    roles = _expect(data.get("roles", []), list, "an array", "$.roles")
    return Schema(
        entities=[
            parse_entity(entity, f"$.entities[{i}]") for i, entity in enumerate(entities)
        ],
        roles=[parse_role(role, f"$.roles[{i}]") for i, role in enumerate(roles)],
    )


def parse_role(data: Any, location: str = "$") -> AppRole:
    _expect(data, dict, "an object", location)
    return AppRole(
        name=_name(data, location),
        display_name=data.get("displayName"),
        description=data.get("description"),
    )


def parse_entity(data: Any, location: str = "$") -> Entity:
    _expect(data, dict, "an object", location)
    fields = _expect(data.get("fields", []), list, "an array", f"{location}.fields")
    permissions = _expect(
        data.get("permissions", []), list, "an array", f"{location}.permissions"
    )
    return Entity(
        name=_name(data, location),
        permissions=[
            _parse_permission(permission, f"{location}.permissions[{i}]")
            for i, permission in enumerate(permissions)
        ],
        fields=[
            _parse_field(entity_field, f"{location}.fields[{i}]")
            for i, entity_field in enumerate(fields)
        ],
    )


def _parse_permission(data: Any, location: str) -> EntityPermission:
    _expect(data, dict, "an object", location)
    action = data.get("action")
    if action not in EntityAction.__members__.values():
        raise SchemaError(f"unknown action {action!r}", f"{location}.action")
    permission_type = data.get("type")
    if permission_type in EntityPermissionType.__members__.values():
        permission_type = EntityPermissionType(permission_type)

    permission_roles = data.get("permissionRoles")
    if permission_roles is not None:
        _expect(permission_roles, list, "an array", f"{location}.permissionRoles")
        permission_roles = [
            PermissionRole(
                app_role=_app_role(role, f"{location}.permissionRoles[{i}]")
            )
            for i, role in enumerate(permission_roles)
        ]

    permission_fields = data.get("permissionFields")
    if permission_fields is not None:
        _expect(permission_fields, list, "an array", f"{location}.permissionFields")
        permission_fields = [
            _parse_permission_field(permission_field, f"{location}.permissionFields[{i}]")
            for i, permission_field in enumerate(permission_fields)
        ]

    return EntityPermission(
        type=permission_type,
        action=EntityAction(action),
        permission_roles=permission_roles,
        permission_fields=permission_fields,
    )


def _parse_permission_field(data: Any, location: str) -> PermissionField:
    _expect(data, dict, "an object", location)
    field_roles = data.get("permissionFieldRoles")
    # anything but an array is left for the compiler to reject
    if isinstance(field_roles, list):
        field_roles = [
            PermissionFieldRole(
                app_role=_app_role(role, f"{location}.permissionFieldRoles[{i}]")
            )
            for i, role in enumerate(field_roles)
        ]
    return PermissionField(
        field=_parse_field(data.get("field"), f"{location}.field"),
        permission_field_roles=field_roles,
    )


def _parse_field(data: Any, location: str) -> EntityField:
    _expect(data, dict, "an object", location)
    return EntityField(name=_name(data, location), display_name=data.get("displayName"))


def _app_role(data: Any, location: str) -> AppRole:
    _expect(data, dict, "an object", location)
    return parse_role(data.get("appRole"), f"{location}.appRole")


def _name(data: dict, location: str) -> str:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaError("name must be a non-empty string", f"{location}.name")
    return name


def _expect(value: Any, kind: type, description: str, location: str) -> Any:
    if not isinstance(value, kind):
        raise SchemaError(f"expected {description}", location)
    return value
