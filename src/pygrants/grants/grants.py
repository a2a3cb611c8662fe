from ..log import get_logger
from ..models import (
    ACLAction,
    AppRole,
    Entity,
    EntityAction,
    EntityPermission,
    EntityPermissionType,
    Grant,
)
from .errors import (
    MalformedPermissionField,
    MissingGranularRoles,
    UnrecognizedPermissionType,
)

logger = get_logger(__name__)

# Matches all resource attributes (glob notation)
ALL_ATTRIBUTES_MATCHER = "*"

# ACL actions
CREATE_ANY = ACLAction.CREATE_ANY
DELETE_ANY = ACLAction.DELETE_ANY
READ_ANY = ACLAction.READ_ANY
UPDATE_ANY = ACLAction.UPDATE_ANY
READ_OWN = ACLAction.READ_OWN

ACTION_TO_ACL_ACTION: dict[EntityAction, ACLAction] = {
    EntityAction.CREATE: CREATE_ANY,
    EntityAction.DELETE: DELETE_ANY,
    EntityAction.SEARCH: READ_ANY,
    EntityAction.UPDATE: UPDATE_ANY,
    EntityAction.VIEW: READ_OWN,
}


def create_grants(entities: list[Entity], roles: list[AppRole]) -> list[Grant]:
    """
    Compile the permissions of the given entities into accesscontrol grants.
    entities: entities to create grants according to
    roles: all the existing roles, used by AllRoles permissions
    Grants are ordered entity -> permission -> role. Any malformed permission
    raises and no grants are returned.
    """
    grants: list[Grant] = []
    for entity in entities:
        for permission in entity.permissions:
            if permission.type == EntityPermissionType.DISABLED:
                logger.debug(
                    "skipping disabled permission",
                    extra={"entity": entity.name, "action": permission.action},
                )
                continue
            grants.extend(_create_permission_grants(entity, permission, roles))
    logger.debug("compiled %d grants for %d entities", len(grants), len(entities))
    return grants


def _create_permission_grants(
    entity: Entity, permission: EntityPermission, roles: list[AppRole]
) -> list[Grant]:
    # raw strings such as "View" hash differently from the enum members
    action = ACTION_TO_ACL_ACTION[EntityAction(permission.action)]
    # dicts with None values are used as insertion ordered sets
    role_to_fields: dict[str, dict[str, None]] = {}
    fields_with_roles: dict[str, None] = {}
    for permission_field in permission.permission_fields or []:
        field_name = permission_field.field.name
        field_roles = permission_field.permission_field_roles
        if not isinstance(field_roles, (list, tuple)):
            raise MalformedPermissionField(field_name, entity.name, permission.action)
        for permission_field_role in field_roles:
            role = permission_field_role.app_role.name
            role_to_fields.setdefault(role, {})[field_name] = None
            fields_with_roles[field_name] = None

    if permission.type == EntityPermissionType.ALL_ROLES:
        return [
            Grant(
                role=role.name,
                resource=entity.name,
                action=action,
                attributes=ALL_ATTRIBUTES_MATCHER,
            )
            for role in roles
        ]

    if permission.type == EntityPermissionType.GRANULAR:
        if not permission.permission_roles:
            raise MissingGranularRoles(entity.name, permission.action)
        grants = []
        for permission_role in permission.permission_roles:
            role = permission_role.app_role.name
            allowed_fields = role_to_fields.get(role, {})
            # fields restricted to other roles, in declaration order
            forbidden_fields = [
                field for field in fields_with_roles if field not in allowed_fields
            ]
            attributes = create_attributes(
                [
                    ALL_ATTRIBUTES_MATCHER,
                    *map(create_negative_attribute_matcher, forbidden_fields),
                ]
            )
            grants.append(
                Grant(
                    role=role,
                    resource=entity.name,
                    action=action,
                    attributes=attributes,
                )
            )
        return grants

    raise UnrecognizedPermissionType(permission.type, entity.name, permission.action)


def create_attributes(matchers: list[str]) -> str:
    """Combines attribute matchers to an attributes expression (glob notation)"""
    return ",".join(matchers)


def create_negative_attribute_matcher(attribute: str) -> str:
    """Matcher which unmatches a specific attribute (glob notation)"""
    return f"!{attribute}"
