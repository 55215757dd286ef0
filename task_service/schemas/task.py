"""Task-related Marshmallow schemas."""

from marshmallow import EXCLUDE, fields

from task_service.extensions import ma


class StrictBool(fields.Boolean):
    """Boolean field that only accepts JSON ``true`` and ``false``."""

    def _deserialize(self, value, attr, data, **kwargs):
        # 1 == True, so truthy/falsy sets cannot exclude integers
        if not isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return value


class TaskSchema(ma.Schema):
    """Schema for task serialization."""

    id = fields.Str(dump_only=True)
    name = fields.Str(required=True)
    done = fields.Bool(required=True)


class NewTaskSchema(ma.Schema):
    """Schema for task creation. Both fields must be present."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True)
    done = StrictBool(required=True)
