"""Sample API definition used by the documentation and the test suite."""

from api_schema_kit import HTTP, Parameter, Schema

RESPONSES = {
    "User": Schema.Object(
        {
            "id": Schema.String(),
            "name": Schema.String(),
            "gender": Schema.Nullable(Schema.Enum(["men", "women"])),
            "email": Schema.Optional(Schema.String()),
        }
    ),
    "UserList": Schema.Object(
        {
            "users": Schema.Array(Schema.String()),
            "total": Schema.Number(),
        }
    ),
}

OPERATIONS = [
    HTTP.GET(
        "listUsers",
        "/user",
        {
            "limit": Parameter.Query(Schema.Optional(Schema.Number())),
            "tag": Parameter.Query(Schema.String()),
        },
        RESPONSES["UserList"],
    ),
    HTTP.GET(
        "getUser",
        "/user/{id}",
        {"id": Parameter.Path(Schema.String())},
        RESPONSES["User"],
    ),
    HTTP.POST(
        "createUser",
        "/user",
        {"name": Parameter.Body(Schema.String())},
        RESPONSES["User"],
    ),
    HTTP.PATCH(
        "updateUser",
        "/user/{id}",
        {
            "id": Parameter.Path(Schema.String()),
            "name": Parameter.Body(Schema.String()),
        },
        RESPONSES["User"],
    ),
    HTTP.DELETE(
        "deleteUser",
        "/user/{id}",
        {"id": Parameter.Path(Schema.String())},
        {"success": Schema.Boolean()},
    ),
]
