"""User-related Marshmallow schemas."""

from marshmallow import EXCLUDE, Schema, fields, validate


class UserSchema(Schema):
    """Schema for user serialization. The password is never dumped."""

    id = fields.Int(dump_only=True)
    username = fields.Str(dump_only=True)
    created_at = fields.DateTime(dump_only=True, format="iso")


class UserCreateSchema(Schema):
    """Schema for user creation validation."""

    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=1, max=255))
