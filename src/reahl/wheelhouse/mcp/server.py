import logging

from reahl.wheelhouse import __version__


SERVER_NAME = 'Wheelhouse'


class McpDependencyNotInstalled(Exception):
    pass


def import_low_level_server():
    try:
        from mcp.server.lowlevel import Server
    except ModuleNotFoundError as module_not_found_error:
        raise McpDependencyNotInstalled(
            'wheelhouse-mcp requires the mcp package. '
            'Install with: pip install reahl-wheelhouse'
        ) from module_not_found_error
    return Server


def import_mcp_types():
    try:
        from mcp import types
    except ModuleNotFoundError as module_not_found_error:
        raise McpDependencyNotInstalled(
            'wheelhouse-mcp requires the mcp package. '
            'Install with: pip install reahl-wheelhouse'
        ) from module_not_found_error
    return types


def client_version_from(client_params):
    if client_params is None or client_params.clientInfo is None:
        return None
    return {
        'name': client_params.clientInfo.name,
        'version': client_params.clientInfo.version,
    }


def is_initialized_notification(types, message):
    return isinstance(message, types.ClientNotification) and isinstance(
        message.root, types.InitializedNotification
    )


def record_client_version(session, connection):
    client_version = client_version_from(session.client_params)
    if client_version is not None:
        connection.initialized(client_version)


def create_server(connection):
    server_class = import_low_level_server()
    types = import_mcp_types()

    # Notification handlers run without a request context; the negotiated
    # client parameters are only reachable through the session seen here.
    class WheelhouseServer(server_class):
        async def _handle_message(self, message, session, *args, **kwargs):
            if is_initialized_notification(types, message):
                record_client_version(session, connection)
            await super()._handle_message(message, session, *args, **kwargs)

    mcp_server = WheelhouseServer(SERVER_NAME, version=__version__)

    async def handle_list_tools(request):
        return types.ServerResult(
            types.ListToolsResult.model_validate(connection.list_tools())
        )

    async def handle_call_tool(request):
        tool_result = await connection.call_tool(
            request.params.name,
            request.params.arguments,
        )
        return types.ServerResult(
            types.CallToolResult.model_validate(tool_result)
        )

    mcp_server.request_handlers[types.ListToolsRequest] = handle_list_tools
    mcp_server.request_handlers[types.CallToolRequest] = handle_call_tool
    return mcp_server


async def serve_stdio(connection):
    from mcp.server.stdio import stdio_server

    mcp_server = create_server(connection)
    async with stdio_server() as (read_stream, write_stream):
        connection.attach_transport(read_stream, write_stream)
        logging.getLogger(__name__).debug(
            'Serving %s %s over stdio', SERVER_NAME, __version__
        )
        try:
            await mcp_server.run(
                read_stream,
                write_stream,
                mcp_server.create_initialization_options(),
            )
        finally:
            await connection.close()
