import logging

from reahl.wheelhouse.mcp.errors import ActionError
from reahl.wheelhouse.mcp.operation_state import OperationState


class Context:
    """Per-connection state that tools run against.

    Holds the active tool set, the configuration and the browser session,
    and runs one tool at a time through its trace/action phases.
    """

    def __init__(self, tools, config, browser_session):
        self.tools = tuple(tools)
        self.config = config
        self.session = browser_session
        self.operation_state = OperationState()
        self.client_version = None

    def modal_states(self):
        return self.session.modal_states()

    def modal_states_markdown(self):
        return self.session.modal_states_markdown(self.tools)

    def record_client_version(self, client_version):
        self.client_version = client_version
        self.session.record_client_version(client_version)

    async def run(self, tool, arguments):
        self.operation_state.begin_operation(tool.name)
        try:
            return await self.run_tool(tool, arguments)
        finally:
            self.operation_state.end_operation()

    async def run_tool(self, tool, arguments):
        params = tool.schema.validated_arguments(arguments)
        tool_result = await tool.handle(self, params)
        if tool_result.result_override is not None:
            return tool_result.result_override

        action_content = await self.perform_action(tool, tool_result)
        if tool_result.wait_for_network:
            await self.session.wait_for_network_idle()
        if tool_result.capture_snapshot:
            await self.session.capture_snapshot()
        return await self.success_response(tool_result, action_content)

    async def perform_action(self, tool, tool_result):
        if tool_result.action is None:
            return []
        try:
            action_content = await tool_result.action()
        except Exception as error:
            logging.getLogger(__name__).warning(
                'Action of tool %s failed: %s', tool.name, error
            )
            raise ActionError(str(error)) from error
        return list(action_content or [])

    async def success_response(self, tool_result, action_content):
        lines = ['- Ran code:', '```python']
        lines.extend(tool_result.code)
        lines.extend(['```', ''])
        if self.modal_states():
            lines.extend(self.modal_states_markdown())
        elif tool_result.capture_snapshot:
            lines.extend(await self.session.page_state_markdown())
        return {
            'content': action_content + [
                {
                    'type': 'text',
                    'text': '\n'.join(lines),
                }
            ],
        }
