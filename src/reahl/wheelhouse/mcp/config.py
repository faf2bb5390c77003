import datetime
import os
import re
import tempfile
import urllib.parse


DEFAULT_OUTPUT_DIRECTORY_NAME = 'wheelhouse-mcp-output'


class ServerConfig:
    """Settings fixed for the lifetime of one connection.

    An empty or missing ``capabilities`` list enables every tool of the
    selected catalog, destructive ones included.
    """

    def __init__(
        self,
        vision=False,
        capabilities=None,
        keep_browser_open=False,
        output_dir=None,
    ):
        self.vision = vision
        self.capabilities = list(capabilities) if capabilities else []
        self.keep_browser_open = keep_browser_open
        self.output_dir = output_dir


def validate_config(config, known_capabilities):
    unknown_capabilities = sorted(
        set(config.capabilities) - set(known_capabilities)
    )
    if unknown_capabilities:
        raise ValueError(
            'Unknown capabilities: %s. Expected any of: %s.'
            % (
                ', '.join(unknown_capabilities),
                ', '.join(sorted(known_capabilities)),
            )
        )
    if config.output_dir and os.path.exists(config.output_dir):
        if not os.path.isdir(config.output_dir):
            raise ValueError(
                'output_dir %s exists and is not a directory.'
                % config.output_dir
            )


def output_directory(config):
    if config.output_dir:
        return config.output_dir
    return os.path.join(tempfile.gettempdir(), DEFAULT_OUTPUT_DIRECTORY_NAME)


def sanitized_file_name(file_name):
    base_name = os.path.basename(file_name.strip())
    return re.sub('[^A-Za-z0-9._-]+', '-', base_name).strip('-') or 'output'


def output_file(config, file_name):
    return os.path.join(
        output_directory(config), sanitized_file_name(file_name)
    )


def file_name_timestamp():
    return datetime.datetime.now().strftime('%Y-%m-%dT%H-%M-%S')


def standardized_output_file(config, url, file_type):
    parsed_url = urllib.parse.urlparse(url)
    page_name = sanitized_file_name(
        (parsed_url.netloc + parsed_url.path).replace('/', '-')
    )
    if page_name == 'output':
        page_name = 'page'
    return output_file(
        config,
        '%s-%s.%s' % (page_name, file_name_timestamp(), file_type),
    )


def create_directory_of(file_name):
    os.makedirs(os.path.dirname(file_name), exist_ok=True)
