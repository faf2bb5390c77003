import logging

from reahl.wheelhouse.tools import snapshot_tools
from reahl.wheelhouse.tools import vision_tools


def catalog_for(vision):
    return vision_tools if vision else snapshot_tools


def select_tools(vision, capabilities=None):
    catalog = catalog_for(vision)
    if not capabilities:
        selected_tools = tuple(catalog)
    else:
        selected_tools = tuple(
            tool for tool in catalog if tool.is_enabled_by(capabilities)
        )
    logging.getLogger(__name__).debug(
        'Selected %d of %d %s tools for capabilities %s',
        len(selected_tools),
        len(catalog),
        'vision' if vision else 'snapshot',
        ', '.join(capabilities) if capabilities else '(all)',
    )
    return selected_tools


def known_capabilities():
    return {tool.capability for tool in snapshot_tools + vision_tools}
