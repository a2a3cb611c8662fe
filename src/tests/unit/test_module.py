import json

import pytest

from src.pygrants.module import (
    GRANTS_MODULE_PATH,
    InvalidModulePath,
    Module,
    create_grants_module,
    write_module,
)
from src.pygrants.models import Entity, EntityAction


def test_grants_module_code(widget, roles):
    module = create_grants_module([widget], roles)
    assert module.path == GRANTS_MODULE_PATH == "grants.json"
    grants = json.loads(module.code)
    assert grants[0] == {
        "role": "Admin",
        "resource": "Widget",
        "action": "create:any",
        "attributes": "*",
    }
    assert grants[-1] == {
        "role": "User",
        "resource": "Widget",
        "action": "update:any",
        "attributes": "*,!secret",
    }
    assert list(grants[0]) == ["role", "resource", "action", "attributes"]


def test_empty_grants_module():
    assert create_grants_module([], []).code == "[]"


def test_grants_module_is_pretty_printed(widget, roles):
    code = create_grants_module([widget], roles).code
    assert code.startswith('[\n  {\n    "role": "Admin",\n    "resource": "Widget",')
    assert code.endswith("  }\n]")


def test_grants_module_keeps_unicode(make_granular, roles):
    entity = Entity(
        name="Café",
        permissions=[make_granular(EntityAction.VIEW, ["User"], {"prénom": ["Admin"]})],
    )
    code = create_grants_module([entity], roles).code
    assert '"resource": "Café"' in code
    assert '"attributes": "*,!prénom"' in code


def test_write_module(tmp_path):
    module = Module(path="generated/grants.json", code="[]")
    target = write_module(module, tmp_path)
    assert target == (tmp_path / "generated" / "grants.json").resolve()
    assert target.read_text(encoding="utf-8") == "[]"


@pytest.mark.parametrize("path", ["../grants.json", "acl/../../grants.json"])
def test_write_module_outside_directory_raises(tmp_path, path):
    out = tmp_path / "out"
    with pytest.raises(InvalidModulePath):
        write_module(Module(path=path, code="[]"), out)
    assert not (tmp_path / "grants.json").exists()


def test_write_module_absolute_path_raises(tmp_path):
    module = Module(path=str(tmp_path / "elsewhere" / "grants.json"), code="[]")
    with pytest.raises(InvalidModulePath):
        write_module(module, tmp_path / "out")
    assert not (tmp_path / "elsewhere").exists()
