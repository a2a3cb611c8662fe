from enum import Enum


class GrantCompilationError(Exception):
    """Base error of the grant compiler, aborts the whole compilation"""

    kind: str = "GrantCompilationError"

    def __init__(self, msg: str = None, entity: str = None, action: str = None, *args):
        self.entity = entity
        self.action = action
        message = f"Cannot compile grants: {msg}" if msg else "Cannot compile grants"
        if entity is not None:
            if isinstance(action, Enum):
                action = action.value
            message += f" (entity: {entity}, action: {action})"
        super().__init__(message, *args)


class MalformedPermissionField(GrantCompilationError):
    kind = "MalformedPermissionField"

    def __init__(self, field: str, entity: str = None, action: str = None):
        self.field = field
        super().__init__(
            f"permissionFieldRoles of field {field!r} must be an array", entity, action
        )


class MissingGranularRoles(GrantCompilationError):
    kind = "MissingGranularRoles"

    def __init__(self, entity: str = None, action: str = None):
        super().__init__(
            "For granular permissions, permissionRoles must be defined", entity, action
        )


class UnrecognizedPermissionType(GrantCompilationError):
    kind = "UnrecognizedPermissionType"

    def __init__(self, permission_type, entity: str = None, action: str = None):
        self.type = permission_type
        super().__init__(f"Unexpected type: {permission_type}", entity, action)
