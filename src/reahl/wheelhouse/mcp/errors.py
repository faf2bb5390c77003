class ToolCallError(Exception):
    pass


class ToolNotFound(ToolCallError):
    def __init__(self, tool_name):
        super().__init__('Tool "%s" not found' % tool_name)
        self.tool_name = tool_name


class ModalStateViolation(ToolCallError):
    pass


class InvalidArguments(ToolCallError):
    def __init__(self, tool_name, violation):
        super().__init__(
            'Invalid arguments for tool "%s": %s' % (tool_name, violation)
        )
        self.tool_name = tool_name
        self.violation = violation


class ActionError(ToolCallError):
    pass


class ConcurrentToolCall(ToolCallError):
    pass
