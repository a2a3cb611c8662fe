from dataclasses import dataclass
from enum import Enum
from . import Model


class ACLAction(str, Enum):
    """
    Action vocabulary of the accesscontrol library, <verb>:<possession>.
    Only the any-possession actions and read:own are produced by the compiler.
    """

    CREATE_ANY = "create:any"
    READ_ANY = "read:any"
    UPDATE_ANY = "update:any"
    DELETE_ANY = "delete:any"
    CREATE_OWN = "create:own"
    READ_OWN = "read:own"
    UPDATE_OWN = "update:own"
    DELETE_OWN = "delete:own"


@dataclass
class Grant(Model):
    """
    Defines grant for a role to apply an action for a resource with attributes
    see https://github.com/onury/accesscontrol#defining-all-grants-at-once
    """

    role: str
    resource: str
    action: ACLAction
    attributes: str
