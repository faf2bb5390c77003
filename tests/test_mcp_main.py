from unittest.mock import Mock
from unittest.mock import patch

from reahl.tofu import expected

from reahl.wheelhouse.mcp.main import capabilities_from
from reahl.wheelhouse.mcp.main import load_session_factory
from reahl.wheelhouse.mcp.main import run_application

from browser_stubs import create_session_stub


def test_capabilities_are_split_on_commas():
    assert capabilities_from('tabs, pdf,,history ') == ['tabs', 'pdf', 'history']
    assert capabilities_from('') == []


def test_session_factory_is_loaded_from_dotted_name():
    session_factory = load_session_factory('browser_stubs:create_session_stub')
    assert session_factory is create_session_stub


def test_session_factory_needs_module_and_callable():
    with expected(ValueError):
        load_session_factory('browser_stubs')


def test_run_application_passes_config_to_server():
    with patch('reahl.wheelhouse.mcp.main.run_server', new=Mock()) as run_server:
        with patch('reahl.wheelhouse.mcp.main.asyncio.run') as asyncio_run:
            run_application(
                [
                    '--session-factory',
                    'browser_stubs:create_session_stub',
                    '--vision',
                    '--caps',
                    'tabs,pdf',
                    '--keep-browser-open',
                ]
            )

    asyncio_run.assert_called_once_with(run_server.return_value)
    config, session_factory = run_server.call_args.args
    assert config.vision
    assert config.capabilities == ['tabs', 'pdf']
    assert config.keep_browser_open
    assert session_factory is create_session_stub


def test_run_application_rejects_unknown_capabilities():
    with patch('reahl.wheelhouse.mcp.main.asyncio.run') as asyncio_run:
        with expected(SystemExit):
            run_application(
                [
                    '--session-factory',
                    'browser_stubs:create_session_stub',
                    '--caps',
                    'teleport',
                ]
            )
    asyncio_run.assert_not_called()


def test_run_application_rejects_unloadable_session_factory():
    with expected(SystemExit):
        run_application(['--session-factory', 'no_such_module:create'])
