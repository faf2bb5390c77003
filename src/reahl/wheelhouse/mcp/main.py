import argparse
import asyncio
import importlib
import logging
import sys

from reahl.wheelhouse.mcp.config import ServerConfig
from reahl.wheelhouse.mcp.config import validate_config
from reahl.wheelhouse.mcp.connection import create_connection
from reahl.wheelhouse.mcp.registry import known_capabilities
from reahl.wheelhouse.mcp.server import serve_stdio


def load_session_factory(dotted_name):
    module_name, separator, attribute_name = dotted_name.partition(':')
    if not separator or not module_name or not attribute_name:
        raise ValueError(
            'Invalid session factory %r. Expected module:callable.'
            % dotted_name
        )
    module = importlib.import_module(module_name)
    return getattr(module, attribute_name)


def capabilities_from(comma_separated_names):
    if not comma_separated_names:
        return []
    return [
        name.strip()
        for name in comma_separated_names.split(',')
        if name.strip()
    ]


def create_argument_parser():
    parser = argparse.ArgumentParser(
        description='Run the Wheelhouse browser automation MCP server.'
    )
    parser.add_argument(
        '--session-factory',
        required=True,
        help=(
            'module:callable that creates the browser session, for '
            'example mypackage.browser:create_session.'
        ),
    )
    parser.add_argument(
        '--vision',
        action='store_true',
        help=(
            'Offer coordinate based tools working on screenshots instead '
            'of accessibility snapshots.'
        ),
    )
    parser.add_argument(
        '--caps',
        default='',
        help=(
            'Comma separated list of capabilities to enable. '
            'All tools are enabled when omitted.'
        ),
    )
    parser.add_argument(
        '--keep-browser-open',
        action='store_true',
        help='Leave the browser session running when the client disconnects.',
    )
    parser.add_argument(
        '--output-dir',
        default=None,
        help='Directory for screenshots and other output files.',
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level for messages written to stderr.',
    )
    return parser


def config_from(arguments):
    return ServerConfig(
        vision=arguments.vision,
        capabilities=capabilities_from(arguments.caps),
        keep_browser_open=arguments.keep_browser_open,
        output_dir=arguments.output_dir,
    )


async def run_server(config, session_factory):
    connection = create_connection(config, session_factory(config))
    await serve_stdio(connection)


def run_application(argv=None):
    parser = create_argument_parser()
    arguments = parser.parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=arguments.log_level)
    try:
        session_factory = load_session_factory(arguments.session_factory)
    except (ValueError, ImportError, AttributeError) as error:
        parser.error(str(error))
    config = config_from(arguments)
    try:
        validate_config(config, known_capabilities())
    except ValueError as error:
        parser.error(str(error))
    asyncio.run(run_server(config, session_factory))


if __name__ == '__main__':
    run_application()
