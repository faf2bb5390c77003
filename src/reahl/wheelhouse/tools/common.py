import asyncio

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool
from reahl.wheelhouse.tools.arguments import NoArguments


MAXIMUM_WAIT_SECONDS = 30


class WaitArguments(BaseModel):
    time: float | None = Field(
        default=None,
        description='The time to wait in seconds',
    )
    text: str | None = Field(
        default=None,
        description='The text to wait for',
    )
    text_gone: str | None = Field(
        default=None,
        alias='textGone',
        description='The text to wait for to disappear',
    )

    @model_validator(mode='after')
    def check_something_to_wait_for(self):
        if self.time is None and self.text is None and self.text_gone is None:
            raise ValueError('Either time, text or textGone must be provided')
        return self


def wait_for(capture_snapshot):
    async def handle(context, params):
        page = context.session.current_page_or_die()
        code = []
        if params.time is not None:
            wait_seconds = min(MAXIMUM_WAIT_SECONDS, params.time)
            code.append(call_code('asyncio', 'sleep', wait_seconds))
        if params.text_gone is not None:
            code.append(
                "await page.get_by_text(%r).first.wait_for(state='hidden')"
                % params.text_gone
            )
        if params.text is not None:
            code.append(
                "await page.get_by_text(%r).first.wait_for(state='visible')"
                % params.text
            )

        async def action():
            if params.time is not None:
                await asyncio.sleep(min(MAXIMUM_WAIT_SECONDS, params.time))
            if params.text_gone is not None:
                await page.get_by_text(params.text_gone).first.wait_for(
                    state='hidden'
                )
            if params.text is not None:
                await page.get_by_text(params.text).first.wait_for(
                    state='visible'
                )

        return ToolResult(
            code,
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'wait',
        'browser_wait_for',
        'Wait for',
        'Wait for text to appear or disappear or a specified time to pass',
        WaitArguments,
        ToolType.READ_ONLY,
        handle,
    )


def close():
    async def handle(context, params):
        async def action():
            await context.session.close()

        return ToolResult(
            [comment_code('Close the browser')],
            action=action,
        )

    return define_tool(
        'core',
        'browser_close',
        'Close browser',
        'Close the page',
        NoArguments,
        ToolType.READ_ONLY,
        handle,
    )


def tools(capture_snapshot):
    return [
        wait_for(capture_snapshot),
    ]
