"""OpenAPI document builder tests."""

from __future__ import annotations

import logging

import pytest
from api_schema_kit.http_operations import HTTP, Parameter
from api_schema_kit.openapi_projection import OASBuilder
from api_schema_kit.schema_model import Schema

INFO = {"title": "api-v1", "version": "1.0.0"}


def _user_responses():
    return {
        "User": Schema.Object(
            {
                "id": Schema.String(),
                "name": Schema.String(),
                "gender": Schema.Nullable(Schema.Enum(["men", "women"])),
                "email": Schema.Optional(Schema.String()),
            }
        )
    }


def _success(schema: dict) -> dict:
    return {
        "200": {
            "description": "success",
            "content": {"application/json": {"schema": schema}},
        }
    }


def test_builds_full_document_with_refs_and_components() -> None:
    responses = _user_responses()
    operations = [
        HTTP.GET(
            "getUser",
            "/user/{id}",
            {"id": Parameter.Path(Schema.String())},
            responses["User"],
        ),
        HTTP.POST(
            "createUser",
            "/user",
            {"name": Parameter.Body(Schema.String())},
            responses["User"],
        ),
        HTTP.PATCH(
            "updateUser",
            "/user/{id}",
            {"id": Parameter.Path(Schema.String()), "name": Parameter.Body(Schema.String())},
            responses["User"],
        ),
    ]

    document = OASBuilder(INFO, operations, responses).build()

    user_ref = {"$ref": "#/components/schemas/User"}
    path_id = [{"required": True, "name": "id", "in": "path", "schema": {"type": "string"}}]
    name_body = {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {"name": {"type": "string"}},
                    "required": ["name"],
                }
            }
        },
    }
    assert document == {
        "openapi": "3.0.1",
        "info": {"title": "api-v1", "version": "1.0.0"},
        "paths": {
            "/user/{id}": {
                "get": {
                    "operationId": "getUser",
                    "parameters": path_id,
                    "responses": _success(user_ref),
                },
                "patch": {
                    "operationId": "updateUser",
                    "parameters": path_id,
                    "requestBody": name_body,
                    "responses": _success(user_ref),
                },
            },
            "/user": {
                "post": {
                    "operationId": "createUser",
                    "requestBody": name_body,
                    "responses": _success(user_ref),
                }
            },
        },
        "components": {
            "schemas": {
                "User": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "string"},
                        "name": {"type": "string"},
                        "gender": {"type": "string", "enum": ["men", "women"], "nullable": True},
                        "email": {"type": "string"},
                    },
                    "required": ["id", "name", "gender"],
                }
            }
        },
    }


def test_path_parameter_and_ref_projection() -> None:
    user = Schema.Object({"id": Schema.String()})
    operation = HTTP.GET("getUser", "/user/{id}", {"id": Parameter.Path(Schema.String())}, user)

    document = OASBuilder(INFO, [operation], {"User": user}).build()
    get = document["paths"]["/user/{id}"]["get"]

    assert get["responses"]["200"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/User"
    }
    assert get["parameters"] == [
        {"required": True, "name": "id", "in": "path", "schema": {"type": "string"}}
    ]
    assert "requestBody" not in get


def test_body_parameters_merge_into_one_object() -> None:
    operation = HTTP.POST(
        "create",
        "/things",
        {"a": Parameter.Body(Schema.Number()), "b": Parameter.Body(Schema.String())},
        Schema.Boolean(),
    )

    post = OASBuilder(INFO, [operation]).build()["paths"]["/things"]["post"]

    assert "parameters" not in post
    assert post["requestBody"]["required"] is True
    assert post["requestBody"]["content"]["application/json"]["schema"] == {
        "type": "object",
        "properties": {"a": {"type": "number"}, "b": {"type": "string"}},
        "required": ["a", "b"],
    }


def test_query_requiredness_follows_optional_flag() -> None:
    operation = HTTP.GET(
        "search",
        "/search",
        {
            "q": Parameter.Query(Schema.String()),
            "limit": Parameter.Query(Schema.Optional(Schema.Number())),
        },
        Schema.Array(Schema.String()),
    )

    parameters = OASBuilder(INFO, [operation]).build()["paths"]["/search"]["get"]["parameters"]

    assert [(item["name"], item["in"], item["required"]) for item in parameters] == [
        ("q", "query", True),
        ("limit", "query", False),
    ]


def test_structurally_equal_response_is_inlined_not_referenced() -> None:
    named = Schema.Object({"id": Schema.String()})
    lookalike = Schema.Object({"id": Schema.String()})
    operation = HTTP.GET("getThing", "/thing", {}, lookalike)

    document = OASBuilder(INFO, [operation], {"Thing": named}).build()
    schema = document["paths"]["/thing"]["get"]["responses"]["200"]["content"][
        "application/json"
    ]["schema"]

    assert schema == {
        "type": "object",
        "properties": {"id": {"type": "string"}},
        "required": ["id"],
    }


def test_scalar_response_outside_named_table_is_inlined() -> None:
    operation = HTTP.DELETE(
        "deleteThing", "/thing/{id}", {"id": Parameter.Path(Schema.String())}, Schema.Boolean()
    )

    delete = OASBuilder(INFO, [operation]).build()["paths"]["/thing/{id}"]["delete"]

    assert delete["responses"]["200"]["content"]["application/json"]["schema"] == {
        "type": "boolean"
    }


def test_response_field_mapping_is_rendered_as_object_and_referenced_by_identity() -> None:
    user_fields = {"id": Schema.String(), "nickname": Schema.Optional(Schema.String())}
    operation = HTTP.GET("me", "/me", {}, user_fields)
    other = HTTP.GET("other", "/other", {}, {"ok": Schema.Boolean()})

    document = OASBuilder(INFO, [operation, other], [("Me", user_fields)]).build()

    assert document["components"]["schemas"]["Me"] == {
        "type": "object",
        "properties": {"id": {"type": "string"}, "nickname": {"type": "string"}},
        "required": ["id"],
    }
    assert document["paths"]["/me"]["get"]["responses"]["200"]["content"]["application/json"][
        "schema"
    ] == {"$ref": "#/components/schemas/Me"}
    assert document["paths"]["/other"]["get"]["responses"]["200"]["content"][
        "application/json"
    ]["schema"] == {
        "type": "object",
        "properties": {"ok": {"type": "boolean"}},
        "required": ["ok"],
    }


def test_duplicate_path_and_method_keeps_last_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    first = HTTP.GET("first", "/dup", {}, Schema.String())
    second = HTTP.GET("second", "/dup", {}, Schema.Number())

    with caplog.at_level(logging.WARNING, logger="api_schema_kit"):
        document = OASBuilder(INFO, [first, second]).build()

    assert document["paths"]["/dup"]["get"]["operationId"] == "second"
    assert any("second replaces first" in record.getMessage() for record in caplog.records)


def test_build_is_idempotent_and_without_operations_yields_empty_paths() -> None:
    builder = OASBuilder(INFO, [], {})

    assert builder.build() == builder.build()
    assert builder.build() == {
        "openapi": "3.0.1",
        "info": INFO,
        "paths": {},
        "components": {"schemas": {}},
    }
