#!/usr/bin/env python3
"""
Flask example serving the grants compiled by pygrants
The schema is compiled once at start-up, an accesscontrol based middleware
can fetch the grants from /grants
"""

import os
from flask import Flask, jsonify, abort
from src.pygrants import (
    create_grants,
    load_schema,
    GrantCompilationError,
    SchemaError,
)

app = Flask(__name__)

SCHEMA_PATH = os.environ.get("PYGRANTS_SCHEMA", "schema.json")

try:
    schema = load_schema(SCHEMA_PATH)
    grants = create_grants(schema.entities, schema.roles)
except (SchemaError, GrantCompilationError) as e:
    raise SystemExit(f"Cannot start: {e}")


@app.route("/grants")
def list_grants():
    return jsonify([grant.to_dict() for grant in grants])


@app.route("/grants/<role>")
def role_grants(role):
    matching = [grant.to_dict() for grant in grants if grant.role == role]
    if not matching:
        abort(404, description=f"No grants for role {role}")
    return jsonify(matching)


@app.route("/roles")
def list_roles():
    return jsonify([role.to_dict(include_none=False) for role in schema.roles])


if __name__ == "__main__":
    app.run(debug=True, port=5000)
