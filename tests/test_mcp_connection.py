import asyncio

from reahl.tofu import Fixture
from reahl.tofu import NoException
from reahl.tofu import expected
from reahl.tofu import with_fixtures

from reahl.wheelhouse.mcp.config import ServerConfig
from reahl.wheelhouse.mcp.connection import Connection
from reahl.wheelhouse.mcp.connection import create_connection
from reahl.wheelhouse.mcp.context import Context
from reahl.wheelhouse.mcp.tool import ToolType

from browser_stubs import BrowserSessionStub
from browser_stubs import TransportStreamStub
from browser_stubs import recording_tool


class ConnectionFixture(Fixture):
    def new_browser_session(self):
        return BrowserSessionStub()

    def new_events(self):
        return self.browser_session.events

    def new_config(self):
        return ServerConfig()

    def new_tools(self):
        return [
            recording_tool(
                'ordinary_tool',
                self.events,
                capture_snapshot=True,
                type=ToolType.READ_ONLY,
            ),
            recording_tool(
                'dialog_tool',
                self.events,
                clears_modal_state='dialog',
                type=ToolType.DESTRUCTIVE,
            ),
            recording_tool(
                'exploding_tool',
                self.events,
                action_error=ValueError('Target page has been closed'),
            ),
        ]

    def new_connection(self):
        return Connection(Context(self.tools, self.config, self.browser_session))

    def call_tool(self, tool_name, arguments=None):
        return asyncio.run(self.connection.call_tool(tool_name, arguments))


@with_fixtures(ConnectionFixture)
def test_list_tools_describes_every_active_tool(connection_fixture):
    listing = connection_fixture.connection.list_tools()

    assert [tool['name'] for tool in listing['tools']] == [
        'ordinary_tool',
        'dialog_tool',
        'exploding_tool',
    ]
    ordinary_tool, dialog_tool, exploding_tool = listing['tools']
    assert ordinary_tool['description'] == 'Records that ordinary_tool ran'
    assert ordinary_tool['inputSchema']['type'] == 'object'
    assert ordinary_tool['inputSchema']['required'] == ['message']
    assert ordinary_tool['annotations'] == {
        'title': 'Ordinary Tool',
        'readOnlyHint': True,
        'destructiveHint': False,
        'openWorldHint': True,
    }
    assert dialog_tool['annotations']['destructiveHint']
    assert not dialog_tool['annotations']['readOnlyHint']
    assert not exploding_tool['annotations']['readOnlyHint']
    assert not exploding_tool['annotations']['destructiveHint']


@with_fixtures(ConnectionFixture)
def test_list_tools_is_idempotent(connection_fixture):
    first_listing = connection_fixture.connection.list_tools()
    second_listing = connection_fixture.connection.list_tools()
    assert first_listing == second_listing


@with_fixtures(ConnectionFixture)
def test_unknown_tool_is_an_error_result(connection_fixture):
    result = connection_fixture.call_tool('nonexistent', {})
    assert result == {
        'isError': True,
        'content': [
            {
                'type': 'text',
                'text': 'Tool "nonexistent" not found',
            }
        ],
    }


@with_fixtures(ConnectionFixture)
def test_tool_not_handling_modal_state_is_rejected(connection_fixture):
    connection_fixture.browser_session.push_dialog()
    result = connection_fixture.call_tool(
        'ordinary_tool',
        {'message': 'hello'},
    )

    assert result['isError']
    result_text = result['content'][0]['text']
    assert 'does not handle' in result_text
    assert (
        '- ["Are you sure?" confirm dialog]: can be handled by the '
        '"dialog_tool" tool'
    ) in result_text
    assert connection_fixture.events == []


@with_fixtures(ConnectionFixture)
def test_clearing_tool_runs_when_its_modal_state_is_present(
    connection_fixture,
):
    connection_fixture.browser_session.push_dialog()
    result = connection_fixture.call_tool('dialog_tool', {'message': 'ok'})

    assert not result['isError']
    assert connection_fixture.events == [
        ('handle', 'dialog_tool', 'ok'),
        ('action', 'dialog_tool'),
    ]


@with_fixtures(ConnectionFixture)
def test_clearing_tool_without_its_modal_state_is_rejected(
    connection_fixture,
):
    result = connection_fixture.call_tool('dialog_tool', {'message': 'ok'})

    assert result['isError']
    result_text = result['content'][0]['text']
    assert 'can only be used when there is related modal state present' in (
        result_text
    )
    assert '- There is no modal state present' in result_text
    assert connection_fixture.events == []


@with_fixtures(ConnectionFixture)
def test_failing_action_becomes_an_error_result(connection_fixture):
    result = connection_fixture.call_tool(
        'exploding_tool',
        {'message': 'hello'},
    )
    assert result == {
        'isError': True,
        'content': [
            {
                'type': 'text',
                'text': 'Target page has been closed',
            }
        ],
    }


@with_fixtures(ConnectionFixture)
def test_invalid_arguments_become_an_error_result(connection_fixture):
    result = connection_fixture.call_tool('ordinary_tool', {'message': 42})

    assert result['isError']
    assert result['content'][0]['text'].startswith(
        'Invalid arguments for tool "ordinary_tool"'
    )
    assert connection_fixture.events == []


@with_fixtures(ConnectionFixture)
def test_successful_call_captures_snapshot_before_responding(
    connection_fixture,
):
    result = connection_fixture.call_tool(
        'ordinary_tool',
        {'message': 'hello'},
    )

    assert not result['isError']
    assert connection_fixture.events.count('capture_snapshot') == 1
    assert connection_fixture.events[-1] == 'capture_snapshot'
    assert 'Page Title: Example' in result['content'][-1]['text']


@with_fixtures(ConnectionFixture)
def test_result_override_is_returned_verbatim(connection_fixture):
    override_content = [{'type': 'text', 'text': 'Screenshot saved'}]
    connection = Connection(
        Context(
            [
                recording_tool(
                    'override_tool',
                    connection_fixture.events,
                    result_override={'content': override_content},
                )
            ],
            connection_fixture.config,
            connection_fixture.browser_session,
        )
    )
    result = asyncio.run(
        connection.call_tool('override_tool', {'message': 'hello'})
    )
    assert result == {'content': override_content, 'isError': False}


@with_fixtures(ConnectionFixture)
def test_malformed_result_override_becomes_an_error_result(
    connection_fixture,
):
    connection = Connection(
        Context(
            [
                recording_tool(
                    'malformed_tool',
                    connection_fixture.events,
                    result_override={'text': 'no content list'},
                )
            ],
            connection_fixture.config,
            connection_fixture.browser_session,
        )
    )
    with expected(NoException):
        result = asyncio.run(
            connection.call_tool('malformed_tool', {'message': 'hello'})
        )
    assert result == {
        'content': [{'type': 'text', 'text': "'content'"}],
        'isError': True,
    }


@with_fixtures(ConnectionFixture)
def test_initialized_records_client_version(connection_fixture):
    client_version = {'name': 'agent', 'version': '1.2.3'}
    connection_fixture.connection.initialized(client_version)

    assert connection_fixture.connection.is_initialized
    assert connection_fixture.connection.context.client_version == client_version
    assert connection_fixture.browser_session.client_version == client_version


@with_fixtures(ConnectionFixture)
def test_close_shuts_transport_before_session(connection_fixture):
    connection = connection_fixture.connection
    connection.attach_transport(
        TransportStreamStub(connection_fixture.events, 'read_stream'),
        TransportStreamStub(connection_fixture.events, 'write_stream'),
    )
    asyncio.run(connection.close())

    assert connection_fixture.events == [
        'close_read_stream',
        'close_write_stream',
        'close_session',
    ]


@with_fixtures(ConnectionFixture)
def test_close_keeps_browser_open_when_configured(connection_fixture):
    connection_fixture.config.keep_browser_open = True
    connection = connection_fixture.connection
    connection.attach_transport(
        TransportStreamStub(connection_fixture.events, 'write_stream'),
    )
    asyncio.run(connection.close())

    assert connection_fixture.events == ['close_write_stream']
    assert not connection_fixture.browser_session.is_closed


@with_fixtures(ConnectionFixture)
def test_close_failures_propagate(connection_fixture):
    async def failing_close():
        raise RuntimeError('Browser already gone')

    connection_fixture.browser_session.close = failing_close
    with expected(RuntimeError):
        asyncio.run(connection_fixture.connection.close())


@with_fixtures(ConnectionFixture)
def test_create_connection_selects_tools_from_config(connection_fixture):
    connection = create_connection(
        ServerConfig(vision=True, capabilities=['tabs']),
        connection_fixture.browser_session,
    )
    tool_names = [
        tool['name'] for tool in connection.list_tools()['tools']
    ]
    assert 'browser_screen_click' in tool_names
    assert 'browser_tab_list' in tool_names
    assert 'browser_pdf_save' not in tool_names
    assert 'browser_snapshot' not in tool_names


@with_fixtures(ConnectionFixture)
def test_create_connection_rejects_unknown_capabilities(connection_fixture):
    with expected(ValueError):
        create_connection(
            ServerConfig(capabilities=['teleport']),
            connection_fixture.browser_session,
        )


@with_fixtures(ConnectionFixture)
def test_calls_are_serialized(connection_fixture):
    async def call_twice():
        return await asyncio.gather(
            connection_fixture.connection.call_tool(
                'ordinary_tool',
                {'message': 'first'},
            ),
            connection_fixture.connection.call_tool(
                'ordinary_tool',
                {'message': 'second'},
            ),
        )

    first_result, second_result = asyncio.run(call_twice())
    assert not first_result['isError']
    assert not second_result['isError']
    assert connection_fixture.events == [
        ('handle', 'ordinary_tool', 'first'),
        ('action', 'ordinary_tool'),
        'capture_snapshot',
        ('handle', 'ordinary_tool', 'second'),
        ('action', 'ordinary_tool'),
        'capture_snapshot',
    ]
