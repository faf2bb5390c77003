import base64

from pydantic import BaseModel
from pydantic import Field

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool
from reahl.wheelhouse.tools.arguments import NoArguments


class ElementDescription(BaseModel):
    element: str = Field(
        description=(
            'Human-readable element description used to obtain permission '
            'to interact with the element'
        ),
    )


class CoordinateArguments(ElementDescription):
    x: float = Field(description='X coordinate')
    y: float = Field(description='Y coordinate')


class DragArguments(ElementDescription):
    start_x: float = Field(alias='startX', description='Start X coordinate')
    start_y: float = Field(alias='startY', description='Start Y coordinate')
    end_x: float = Field(alias='endX', description='End X coordinate')
    end_y: float = Field(alias='endY', description='End Y coordinate')


class ScreenTypeArguments(BaseModel):
    text: str = Field(description='Text to type into the element')
    submit: bool = Field(
        default=False,
        description='Whether to submit entered text (press Enter after)',
    )


def screen_capture():
    async def handle(context, params):
        async def action():
            page = await context.session.ensure_page()
            image_bytes = await page.screenshot(
                type='jpeg',
                quality=50,
                scale='css',
            )
            return [
                {
                    'type': 'image',
                    'data': base64.b64encode(image_bytes).decode('ascii'),
                    'mimeType': 'image/jpeg',
                }
            ]

        return ToolResult(
            [comment_code('Take a screenshot of the current page')],
            action=action,
        )

    return define_tool(
        'core',
        'browser_screen_capture',
        'Take a screenshot',
        'Take a screenshot of the current page',
        NoArguments,
        ToolType.READ_ONLY,
        handle,
    )


def screen_move_mouse():
    async def handle(context, params):
        page = context.session.current_page_or_die()

        async def action():
            await page.mouse.move(params.x, params.y)

        return ToolResult(
            [
                comment_code('Move mouse to (%s, %s)' % (params.x, params.y)),
                call_code('page.mouse', 'move', params.x, params.y),
            ],
            action=action,
        )

    return define_tool(
        'core',
        'browser_screen_move_mouse',
        'Move mouse',
        'Move mouse to a given position',
        CoordinateArguments,
        ToolType.READ_ONLY,
        handle,
    )


def screen_click():
    async def handle(context, params):
        page = context.session.current_page_or_die()

        async def action():
            await page.mouse.move(params.x, params.y)
            await page.mouse.down()
            await page.mouse.up()

        return ToolResult(
            [
                comment_code(
                    'Click mouse at coordinates (%s, %s)'
                    % (params.x, params.y)
                ),
                call_code('page.mouse', 'move', params.x, params.y),
                call_code('page.mouse', 'down'),
                call_code('page.mouse', 'up'),
            ],
            action=action,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_screen_click',
        'Click',
        'Click left mouse button',
        CoordinateArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def screen_drag():
    async def handle(context, params):
        page = context.session.current_page_or_die()

        async def action():
            await page.mouse.move(params.start_x, params.start_y)
            await page.mouse.down()
            await page.mouse.move(params.end_x, params.end_y)
            await page.mouse.up()

        return ToolResult(
            [
                comment_code(
                    'Drag mouse from (%s, %s) to (%s, %s)'
                    % (
                        params.start_x,
                        params.start_y,
                        params.end_x,
                        params.end_y,
                    )
                ),
                call_code(
                    'page.mouse',
                    'move',
                    params.start_x,
                    params.start_y,
                ),
                call_code('page.mouse', 'down'),
                call_code('page.mouse', 'move', params.end_x, params.end_y),
                call_code('page.mouse', 'up'),
            ],
            action=action,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_screen_drag',
        'Drag mouse',
        'Drag left mouse button',
        DragArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def screen_type():
    async def handle(context, params):
        page = context.session.current_page_or_die()
        code = [
            comment_code('Type %s' % params.text),
            call_code('page.keyboard', 'type', params.text),
        ]
        if params.submit:
            code.append(comment_code('Submit text'))
            code.append(call_code('page.keyboard', 'press', 'Enter'))

        async def action():
            await page.keyboard.type(params.text)
            if params.submit:
                await page.keyboard.press('Enter')

        return ToolResult(
            code,
            action=action,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_screen_type',
        'Type text',
        'Type text',
        ScreenTypeArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def tools():
    return [
        screen_capture(),
        screen_move_mouse(),
        screen_click(),
        screen_drag(),
        screen_type(),
    ]
