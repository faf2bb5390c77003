import asyncio
import logging

from reahl.wheelhouse.mcp.config import validate_config
from reahl.wheelhouse.mcp.context import Context
from reahl.wheelhouse.mcp.errors import ModalStateViolation
from reahl.wheelhouse.mcp.errors import ToolNotFound
from reahl.wheelhouse.mcp.modal_gate import check_modal_state
from reahl.wheelhouse.mcp.registry import known_capabilities
from reahl.wheelhouse.mcp.registry import select_tools


def create_connection(config, browser_session):
    validate_config(config, known_capabilities())
    tools = select_tools(config.vision, config.capabilities)
    context = Context(tools, config, browser_session)
    return Connection(context)


def error_result(*messages):
    return {
        'content': [
            {
                'type': 'text',
                'text': '\n'.join(messages),
            }
        ],
        'isError': True,
    }


class Connection:
    def __init__(self, context):
        self.context = context
        self.tools_by_name = {tool.name: tool for tool in context.tools}
        self.tool_listing = [
            {
                'name': tool.schema.name,
                'description': tool.schema.description,
                'inputSchema': tool.schema.json_schema(),
                'annotations': tool.schema.annotations(),
            }
            for tool in context.tools
        ]
        self.call_lock = asyncio.Lock()
        self.transport_streams = []
        self.is_initialized = False

    def list_tools(self):
        return {
            'tools': [
                dict(tool_description)
                for tool_description in self.tool_listing
            ],
        }

    def initialized(self, client_version):
        self.is_initialized = True
        self.context.record_client_version(client_version)
        logging.getLogger(__name__).debug(
            'Client initialized: %s', client_version
        )

    def attach_transport(self, *streams):
        self.transport_streams.extend(streams)

    async def call_tool(self, tool_name, arguments=None):
        async with self.call_lock:
            return await self.call_tool_exclusively(tool_name, arguments)

    async def call_tool_exclusively(self, tool_name, arguments):
        tool = self.tools_by_name.get(tool_name)
        if tool is None:
            logging.getLogger(__name__).warning(
                'Call to unknown tool %s', tool_name
            )
            return error_result(str(ToolNotFound(tool_name)))

        try:
            check_modal_state(tool, self.context.modal_states())
        except ModalStateViolation as violation:
            logging.getLogger(__name__).warning(
                'Rejected %s: %s', tool_name, violation
            )
            return error_result(
                str(violation),
                *self.context.modal_states_markdown(),
            )

        logging.getLogger(__name__).debug('Calling tool %s', tool_name)
        try:
            result = await self.context.run(tool, arguments)
            envelope = {
                'content': result['content'],
                'isError': result.get('isError', False),
            }
        except Exception as error:
            logging.getLogger(__name__).warning(
                'Tool %s failed: %s', tool_name, error
            )
            return error_result(str(error))
        logging.getLogger(__name__).debug('Tool %s completed', tool_name)
        return envelope

    async def close(self):
        for stream in self.transport_streams:
            await stream.aclose()
        self.transport_streams = []
        if not self.context.config.keep_browser_open:
            logging.getLogger(__name__).debug('Closing browser session')
            await self.context.session.close()
