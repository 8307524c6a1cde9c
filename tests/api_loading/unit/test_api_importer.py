"""API definition import tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from api_schema_kit.api_loading import ApiLoadError, load_api_definition
from api_schema_kit.configuration import ApiSourceConfig
from api_schema_kit.http_operations import HttpMethod

API_SOURCE = """
from api_schema_kit import HTTP, Parameter, Schema

USER = Schema.Object({"id": Schema.String()})
RESPONSES = {"User": USER, "Ack": {"success": Schema.Boolean()}}
OPERATIONS = [
    HTTP.GET("getUser", "/user/{id}", {"id": Parameter.Path(Schema.String())}, USER),
    HTTP.PUT("replaceUser", "/user/{id}", {"id": Parameter.Path(Schema.String())}, USER),
]
"""


def _write_api(tmp_path: Path, contents: str = API_SOURCE, name: str = "api.py") -> Path:
    path = tmp_path / name
    path.write_text(contents, encoding="utf-8")
    return path


def _source(
    *,
    module: str | None = None,
    path: Path | None = None,
    operations: str = "OPERATIONS",
    responses: str | None = None,
) -> ApiSourceConfig:
    return ApiSourceConfig(
        module=module,
        path=path,
        operations_attribute=operations,
        responses_attribute=responses,
    )


def test_loads_operations_and_responses_from_file(tmp_path: Path) -> None:
    definition = load_api_definition(
        _source(path=_write_api(tmp_path), responses="RESPONSES")
    )

    assert [operation.operation_id for operation in definition.operations] == [
        "getUser",
        "replaceUser",
    ]
    assert definition.operations[1].method == HttpMethod.PUT
    assert [name for name, _ in definition.responses] == ["User", "Ack"]


def test_named_responses_keep_object_identity(tmp_path: Path) -> None:
    definition = load_api_definition(
        _source(path=_write_api(tmp_path), responses="RESPONSES")
    )

    named = dict(definition.responses)
    assert definition.operations[0].response is named["User"]


def test_responses_are_optional(tmp_path: Path) -> None:
    definition = load_api_definition(_source(path=_write_api(tmp_path)))

    assert definition.responses == ()


def test_loads_from_importable_module(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_api(tmp_path, name="importable_user_api.py")
    monkeypatch.syspath_prepend(str(tmp_path))

    definition = load_api_definition(_source(module="importable_user_api"))

    assert definition.find_operation("getUser") is definition.operations[0]
    assert definition.find_operation("unknown") is None


def test_find_operation_returns_last_duplicate(tmp_path: Path) -> None:
    contents = API_SOURCE.replace('"replaceUser"', '"getUser"')
    definition = load_api_definition(_source(path=_write_api(tmp_path, contents)))

    assert definition.find_operation("getUser") is definition.operations[1]


def test_unknown_module_raises() -> None:
    with pytest.raises(ApiLoadError, match="Cannot import API module"):
        load_api_definition(_source(module="api_schema_kit_missing_module_for_tests"))


def test_syntax_error_in_file_raises(tmp_path: Path) -> None:
    path = _write_api(tmp_path, "OPERATIONS = [\n", name="broken_api.py")

    with pytest.raises(ApiLoadError, match="Cannot load API definition file"):
        load_api_definition(_source(path=path))


def test_missing_attribute_raises(tmp_path: Path) -> None:
    with pytest.raises(ApiLoadError, match="has no attribute 'ROUTES'"):
        load_api_definition(_source(path=_write_api(tmp_path), operations="ROUTES"))


@pytest.mark.parametrize(
    ("contents", "responses", "message"),
    [
        ("OPERATIONS = 'getUser'\n", None, "must be a list of operations"),
        ("OPERATIONS = [{'path': '/user'}]\n", None, "must be declared with HTTP"),
        ("OPERATIONS = []\nRESPONSES = ['User']\n", "RESPONSES", "must be a mapping"),
        ("OPERATIONS = []\nRESPONSES = {1: {}}\n", "RESPONSES", "keys must be strings"),
        (
            "OPERATIONS = []\nRESPONSES = {'User': {'id': 'string'}}\n",
            "RESPONSES",
            "Response 'User' must be a schema",
        ),
    ],
)
def test_wrong_shapes_are_rejected(
    tmp_path: Path, contents: str, responses: str | None, message: str
) -> None:
    path = _write_api(tmp_path, contents, name="shaped_api.py")

    with pytest.raises(ApiLoadError, match=message):
        load_api_definition(_source(path=path, responses=responses))


def test_runtime_error_in_file_raises_and_unregisters_module(tmp_path: Path) -> None:
    path = _write_api(tmp_path, "OPERATIONS = [undefined_name]\n", name="failing_api.py")

    with pytest.raises(ApiLoadError, match="name 'undefined_name' is not defined"):
        load_api_definition(_source(path=path))

    assert "_api_schema_kit_source_failing_api" not in sys.modules


def test_runtime_error_in_module_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_api(tmp_path, "raise RuntimeError('boom')\n", name="exploding_user_api.py")
    monkeypatch.syspath_prepend(str(tmp_path))

    with pytest.raises(ApiLoadError, match="Cannot import API module 'exploding_user_api': boom"):
        load_api_definition(_source(module="exploding_user_api"))
