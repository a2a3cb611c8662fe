from .models import (
    AppRole,
    Entity,
    EntityField,
    EntityAction,
    EntityPermission,
    EntityPermissionType,
    PermissionRole,
    PermissionField,
    PermissionFieldRole,
    Grant,
    ACLAction,
)
from .grants import (
    create_grants,
    GrantCompilationError,
    MalformedPermissionField,
    MissingGranularRoles,
    UnrecognizedPermissionType,
)
from .module import (
    Module,
    InvalidModulePath,
    create_grants_module,
    write_module,
    GRANTS_MODULE_PATH,
)
from .loader import Schema, SchemaError, load_schema, parse_schema

__all__ = [
    "AppRole",
    "Entity",
    "EntityField",
    "EntityAction",
    "EntityPermission",
    "EntityPermissionType",
    "PermissionRole",
    "PermissionField",
    "PermissionFieldRole",
    "Grant",
    "ACLAction",
    "create_grants",
    "GrantCompilationError",
    "MalformedPermissionField",
    "MissingGranularRoles",
    "UnrecognizedPermissionType",
    "Module",
    "create_grants_module",
    "write_module",
    "InvalidModulePath",
    "GRANTS_MODULE_PATH",
    "Schema",
    "SchemaError",
    "load_schema",
    "parse_schema",
]
