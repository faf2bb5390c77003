from pydantic import Field

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool
from reahl.wheelhouse.tools.arguments import ElementArguments
from reahl.wheelhouse.tools.arguments import NoArguments


class TypeArguments(ElementArguments):
    text: str = Field(description='Text to type into the element')
    submit: bool = Field(
        default=False,
        description='Whether to submit entered text (press Enter after)',
    )
    slowly: bool = Field(
        default=False,
        description=(
            'Whether to type one character at a time. Useful for triggering '
            'key handlers in the page. By default entire text is filled in '
            'at once.'
        ),
    )


class SelectOptionArguments(ElementArguments):
    values: list[str] = Field(
        description=(
            'Array of values to select in the dropdown. This can be a '
            'single value or multiple values.'
        ),
    )


async def located_element(context, params):
    snapshot = context.session.snapshot_or_die()
    locator = snapshot.ref_locator(params.element, params.ref)
    locator_code = await context.session.generate_locator(locator)
    return locator, 'page.%s' % locator_code


def snapshot():
    async def handle(context, params):
        async def action():
            await context.session.ensure_page()

        return ToolResult(
            [
                comment_code(
                    '<internal code to capture accessibility snapshot>'
                )
            ],
            action=action,
            capture_snapshot=True,
        )

    return define_tool(
        'core',
        'browser_snapshot',
        'Page snapshot',
        (
            'Capture accessibility snapshot of the current page, '
            'this is better than screenshot'
        ),
        NoArguments,
        ToolType.READ_ONLY,
        handle,
    )


def click():
    async def handle(context, params):
        locator, locator_code = await located_element(context, params)

        async def action():
            await locator.click()

        return ToolResult(
            [
                comment_code('Click %s' % params.element),
                call_code(locator_code, 'click'),
            ],
            action=action,
            capture_snapshot=True,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_click',
        'Click',
        'Perform click on a web page',
        ElementArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def hover():
    async def handle(context, params):
        locator, locator_code = await located_element(context, params)

        async def action():
            await locator.hover()

        return ToolResult(
            [
                comment_code('Hover over %s' % params.element),
                call_code(locator_code, 'hover'),
            ],
            action=action,
            capture_snapshot=True,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_hover',
        'Hover mouse',
        'Hover over element on page',
        ElementArguments,
        ToolType.READ_ONLY,
        handle,
    )


def type_text():
    async def handle(context, params):
        locator, locator_code = await located_element(context, params)
        code = []
        if params.slowly:
            code.append(
                comment_code(
                    'Press "%s" sequentially into "%s"'
                    % (params.text, params.element)
                )
            )
            code.append(
                call_code(locator_code, 'press_sequentially', params.text)
            )
        else:
            code.append(
                comment_code(
                    'Fill "%s" into "%s"' % (params.text, params.element)
                )
            )
            code.append(call_code(locator_code, 'fill', params.text))
        if params.submit:
            code.append(comment_code('Submit text'))
            code.append(call_code(locator_code, 'press', 'Enter'))

        async def action():
            if params.slowly:
                await locator.press_sequentially(params.text)
            else:
                await locator.fill(params.text)
            if params.submit:
                await locator.press('Enter')

        return ToolResult(
            code,
            action=action,
            capture_snapshot=True,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_type',
        'Type text',
        'Type text into editable element',
        TypeArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def select_option():
    async def handle(context, params):
        locator, locator_code = await located_element(context, params)

        async def action():
            await locator.select_option(params.values)

        return ToolResult(
            [
                comment_code(
                    'Select options [%s] in %s'
                    % (', '.join(params.values), params.element)
                ),
                call_code(locator_code, 'select_option', params.values),
            ],
            action=action,
            capture_snapshot=True,
            wait_for_network=True,
        )

    return define_tool(
        'core',
        'browser_select_option',
        'Select option',
        'Select an option in a dropdown',
        SelectOptionArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def tools():
    return [
        snapshot(),
        click(),
        hover(),
        type_text(),
        select_option(),
    ]
