"""
Smoke test - the application module imports and wires its routes without a database.
Run: pytest tests/test_smoke.py -v
"""


def test_app_exposes_graphql_and_health_routes():
    from userhub.main import app
    from userhub.core.config import get_settings

    paths = {route.path for route in app.routes}
    assert get_settings().graphql_path in paths
    assert "/health" in paths
    assert "/" in paths


def test_schema_exposes_user_operations():
    from userhub.api.graphql import schema

    sdl = schema.as_str()
    for operation in ("getUsers", "addUser", "updateUser", "deleteUser"):
        assert operation in sdl
    assert "password: String" not in sdl.split("type User")[1].split("}")[0]
