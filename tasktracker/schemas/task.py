"""Task-related Marshmallow schemas."""

from marshmallow import EXCLUDE, Schema, fields, validate


class TaskSchema(Schema):
    """Schema for task serialization."""

    id = fields.Int(dump_only=True)
    user_id = fields.Int(dump_only=True)
    title = fields.Str(dump_only=True)
    description = fields.Str(dump_only=True)
    status = fields.Str(dump_only=True)
    created_at = fields.DateTime(dump_only=True, format="iso")
    updated_at = fields.DateTime(dump_only=True, format="iso")


class TaskCreateSchema(Schema):
    """Schema for task creation validation."""

    class Meta:
        unknown = EXCLUDE

    user_id = fields.Int(
        required=True, strict=True, validate=validate.Range(min=-(2**31), max=2**31 - 1)
    )
    title = fields.Str(required=True, validate=validate.Length(min=1))
    description = fields.Str(load_default="", allow_none=True)
    status = fields.Str(required=True, validate=validate.Length(min=1))


class TaskUpdateSchema(Schema):
    """Schema for task update decoding.

    Emptiness of ``title`` and ``status`` is checked by the service so the
    client gets a single message for both.
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.Str(load_default="", allow_none=True)
    description = fields.Str(load_default="", allow_none=True)
    status = fields.Str(load_default="", allow_none=True)
