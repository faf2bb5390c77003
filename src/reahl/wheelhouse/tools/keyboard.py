from pydantic import BaseModel
from pydantic import Field

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool


class PressKeyArguments(BaseModel):
    key: str = Field(
        description=(
            'Name of the key to press or a character to generate, '
            'such as `ArrowLeft` or `a`'
        ),
    )


def press_key(capture_snapshot):
    async def handle(context, params):
        page = context.session.current_page_or_die()

        async def action():
            await page.keyboard.press(params.key)

        return ToolResult(
            [
                comment_code('Press %s' % params.key),
                call_code('page.keyboard', 'press', params.key),
            ],
            action=action,
            capture_snapshot=capture_snapshot,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_press_key',
        'Press a key',
        'Press a key on the keyboard',
        PressKeyArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def tools(capture_snapshot):
    return [
        press_key(capture_snapshot),
    ]
