import json
from dataclasses import dataclass
from pathlib import Path

from .grants import create_grants
from .log import get_logger
from .models import AppRole, Entity

logger = get_logger(__name__)

GRANTS_MODULE_PATH = "grants.json"


class InvalidModulePath(ValueError):
    def __init__(self, msg: str = None, *args):
        message = f"Invalid module path: {msg}" if msg else "Invalid module path"
        super().__init__(message, *args)


@dataclass
class Module:
    """A generated file, path is relative to the output directory"""

    path: str
    code: str


def create_grants_module(
    entities: list[Entity], roles: list[AppRole], path: str = GRANTS_MODULE_PATH
) -> Module:
    """
    Creates a grants module from given entities and roles.
    The code is the JSON array of grants with 2 spaces indentation, every grant
    keeps the role, resource, action, attributes key order.
    """
    grants = create_grants(entities, roles)
    code = json.dumps(
        [grant.to_dict() for grant in grants], indent=2, ensure_ascii=False
    )
    return Module(path=path, code=code)


def write_module(module: Module, directory: str | Path = ".") -> Path:
    """Write the module under directory, its path may not leave the directory"""
    root = Path(directory).resolve()
    target = (root / module.path).resolve()
    if not target.is_relative_to(root):
        raise InvalidModulePath(f"{module.path} is outside of {directory}")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(module.code, encoding="utf-8")
    logger.info("wrote %s", target)
    return target
