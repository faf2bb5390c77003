import enum

from pydantic import ValidationError

from reahl.wheelhouse.mcp.errors import InvalidArguments


CORE_CAPABILITY = 'core'


class ToolType(enum.Enum):
    READ_ONLY = 'readOnly'
    DESTRUCTIVE = 'destructive'
    OTHER = 'other'


class ToolSchema:
    def __init__(self, name, title, description, input_schema, type):
        self.name = name
        self.title = title
        self.description = description
        self.input_schema = input_schema
        self.type = ToolType(type)

    def validated_arguments(self, arguments):
        try:
            return self.input_schema.model_validate(arguments or {})
        except ValidationError as error:
            raise InvalidArguments(self.name, str(error)) from error

    def json_schema(self):
        return self.input_schema.model_json_schema()

    def annotations(self):
        return {
            'title': self.title,
            'readOnlyHint': self.type is ToolType.READ_ONLY,
            'destructiveHint': self.type is ToolType.DESTRUCTIVE,
            'openWorldHint': True,
        }


class ToolResult:
    """What a tool handler hands back to the executor.

    ``code`` is the trace of what the tool does, produced without touching
    the page. ``action`` is a coroutine function performing the actual side
    effect; it may return a list of extra content items (such as an image).
    A ``result_override`` is returned to the caller verbatim and skips the
    action entirely.
    """

    def __init__(
        self,
        code,
        action=None,
        capture_snapshot=False,
        wait_for_network=False,
        result_override=None,
    ):
        self.code = list(code)
        self.action = action
        self.capture_snapshot = capture_snapshot
        self.wait_for_network = wait_for_network
        self.result_override = result_override


class ToolDefinition:
    def __init__(self, schema, capability, handle, clears_modal_state=None):
        self.schema = schema
        self.capability = capability
        self.handle = handle
        self.clears_modal_state = clears_modal_state

    @property
    def name(self):
        return self.schema.name

    def is_enabled_by(self, capabilities):
        return (
            self.capability == CORE_CAPABILITY
            or self.capability in capabilities
        )

    def __repr__(self):
        return '<ToolDefinition %s (%s)>' % (self.name, self.capability)


def define_tool(
    capability,
    name,
    title,
    description,
    input_schema,
    type,
    handle,
    clears_modal_state=None,
):
    return ToolDefinition(
        ToolSchema(name, title, description, input_schema, type),
        capability,
        handle,
        clears_modal_state=clears_modal_state,
    )
