import json
import pytest

from src.pygrants.models import (
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


def granular(action: EntityAction, roles: list[str], fields: dict = None):
    """Granular permission, fields maps a field name to the roles allowed on it"""
    return EntityPermission(
        type=EntityPermissionType.GRANULAR,
        action=action,
        permission_roles=[PermissionRole(app_role=AppRole(name=r)) for r in roles],
        permission_fields=[
            PermissionField(
                field=EntityField(name=name),
                permission_field_roles=[
                    PermissionFieldRole(app_role=AppRole(name=r)) for r in field_roles
                ],
            )
            for name, field_roles in (fields or {}).items()
        ],
    )


@pytest.fixture()
def roles():
    return [AppRole(name="Admin"), AppRole(name="User")]


@pytest.fixture()
def widget():
    return Entity(
        name="Widget",
        permissions=[
            EntityPermission(
                type=EntityPermissionType.ALL_ROLES, action=EntityAction.CREATE
            ),
            EntityPermission(
                type=EntityPermissionType.DISABLED, action=EntityAction.DELETE
            ),
            granular(
                EntityAction.UPDATE, ["Admin", "User"], {"secret": ["Admin"]}
            ),
        ],
    )


@pytest.fixture()
def schema_document():
    return {
        "roles": [{"name": "Admin"}, {"name": "User"}],
        "entities": [
            {
                "name": "Customer",
                "fields": [{"name": "email"}, {"name": "notes"}],
                "permissions": [
                    {"type": "AllRoles", "action": "View"},
                    {"type": "Disabled", "action": "Delete"},
                    {
                        "type": "Granular",
                        "action": "Update",
                        "permissionRoles": [
                            {"appRole": {"name": "Admin"}},
                            {"appRole": {"name": "User"}},
                        ],
                        "permissionFields": [
                            {
                                "field": {"name": "notes"},
                                "permissionFieldRoles": [
                                    {"appRole": {"name": "Admin"}}
                                ],
                            }
                        ],
                    },
                ],
            }
        ],
    }


@pytest.fixture()
def schema_path(tmp_path, schema_document):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(schema_document), encoding="utf-8")
    return path


@pytest.fixture()
def make_granular():
    return granular
