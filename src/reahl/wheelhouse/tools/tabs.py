from pydantic import BaseModel
from pydantic import Field

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool
from reahl.wheelhouse.tools.arguments import NoArguments


class SelectTabArguments(BaseModel):
    index: int = Field(ge=1, description='The index of the tab to select')


class NewTabArguments(BaseModel):
    url: str | None = Field(
        default=None,
        description=(
            'The URL to navigate to in the new tab. '
            'If not provided, the new tab will be blank.'
        ),
    )


class CloseTabArguments(BaseModel):
    index: int | None = Field(
        default=None,
        ge=1,
        description=(
            'The index of the tab to close. '
            'Closes current tab if not provided.'
        ),
    )


def list_tabs():
    async def handle(context, params):
        await context.session.ensure_page()
        tabs_markdown = await context.session.tabs_markdown()
        return ToolResult(
            [comment_code('<internal code to list tabs>')],
            result_override={
                'content': [
                    {
                        'type': 'text',
                        'text': '\n'.join(tabs_markdown),
                    }
                ],
            },
        )

    return define_tool(
        'tabs',
        'browser_tab_list',
        'List tabs',
        'List browser tabs',
        NoArguments,
        ToolType.READ_ONLY,
        handle,
    )


def select_tab(capture_snapshot):
    async def handle(context, params):
        async def action():
            await context.session.select_tab(params.index)

        return ToolResult(
            [comment_code('<internal code to select tab %s>' % params.index)],
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'tabs',
        'browser_tab_select',
        'Select a tab',
        'Select a tab by index',
        SelectTabArguments,
        ToolType.READ_ONLY,
        handle,
    )


def new_tab(capture_snapshot):
    async def handle(context, params):
        code = [comment_code('<internal code to open a new tab>')]
        if params.url:
            code.append(call_code('page', 'goto', params.url))

        async def action():
            page = await context.session.new_tab()
            if params.url:
                await page.goto(params.url)

        return ToolResult(
            code,
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'tabs',
        'browser_tab_new',
        'Open a new tab',
        'Open a new tab',
        NewTabArguments,
        ToolType.READ_ONLY,
        handle,
    )


def close_tab(capture_snapshot):
    async def handle(context, params):
        async def action():
            await context.session.close_tab(params.index)

        return ToolResult(
            [
                comment_code(
                    '<internal code to close tab %s>'
                    % (params.index if params.index is not None else 'current')
                )
            ],
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'tabs',
        'browser_tab_close',
        'Close a tab',
        'Close a tab',
        CloseTabArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def tools(capture_snapshot):
    return [
        list_tabs(),
        new_tab(capture_snapshot),
        select_tab(capture_snapshot),
        close_tab(capture_snapshot),
    ]
