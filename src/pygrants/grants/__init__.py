from .grants import (
    create_grants,
    create_attributes,
    create_negative_attribute_matcher,
    ACTION_TO_ACL_ACTION,
    ALL_ATTRIBUTES_MATCHER,
    CREATE_ANY,
    DELETE_ANY,
    READ_ANY,
    UPDATE_ANY,
    READ_OWN,
)
from .errors import (
    GrantCompilationError,
    MalformedPermissionField,
    MissingGranularRoles,
    UnrecognizedPermissionType,
)

__all__ = [
    "create_grants",
    "create_attributes",
    "create_negative_attribute_matcher",
    "ACTION_TO_ACL_ACTION",
    "ALL_ATTRIBUTES_MATCHER",
    "CREATE_ANY",
    "DELETE_ANY",
    "READ_ANY",
    "UPDATE_ANY",
    "READ_OWN",
    "GrantCompilationError",
    "MalformedPermissionField",
    "MissingGranularRoles",
    "UnrecognizedPermissionType",
]
