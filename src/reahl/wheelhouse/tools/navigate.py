from pydantic import BaseModel
from pydantic import Field

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool
from reahl.wheelhouse.tools.arguments import NoArguments


class NavigateArguments(BaseModel):
    url: str = Field(description='The URL to navigate to')


def navigate(capture_snapshot):
    async def handle(context, params):
        async def action():
            page = await context.session.ensure_page()
            await page.goto(params.url)

        return ToolResult(
            [
                comment_code('Navigate to %s' % params.url),
                call_code('page', 'goto', params.url),
            ],
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'core',
        'browser_navigate',
        'Navigate to a URL',
        'Navigate to a URL',
        NavigateArguments,
        ToolType.DESTRUCTIVE,
        handle,
    )


def history_tool(name, title, description, page_method_name, capture_snapshot):
    async def handle(context, params):
        page = context.session.current_page_or_die()

        async def action():
            await getattr(page, page_method_name)()

        return ToolResult(
            [
                comment_code(title),
                call_code('page', page_method_name),
            ],
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'history',
        name,
        title,
        description,
        NoArguments,
        ToolType.READ_ONLY,
        handle,
    )


def tools(capture_snapshot):
    return [
        navigate(capture_snapshot),
        history_tool(
            'browser_navigate_back',
            'Go back',
            'Go back to the previous page',
            'go_back',
            capture_snapshot,
        ),
        history_tool(
            'browser_navigate_forward',
            'Go forward',
            'Go forward to the next page',
            'go_forward',
            capture_snapshot,
        ),
    ]
