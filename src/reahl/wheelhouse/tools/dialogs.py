from pydantic import BaseModel
from pydantic import Field

from reahl.wheelhouse.browser import BrowserError
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.browser import modal_state_of_type
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool


class HandleDialogArguments(BaseModel):
    accept: bool = Field(description='Whether to accept the dialog.')
    prompt_text: str | None = Field(
        default=None,
        alias='promptText',
        description='The text of the prompt in case of a prompt dialog.',
    )


def handle_dialog(capture_snapshot):
    async def handle(context, params):
        dialog_state = modal_state_of_type(context.session, 'dialog')
        if dialog_state is None:
            raise BrowserError('No dialog visible')
        dialog = dialog_state.dialog

        async def action():
            if params.accept:
                await dialog.accept(params.prompt_text)
            else:
                await dialog.dismiss()
            context.session.clear_modal_state(dialog_state)

        return ToolResult(
            [
                comment_code(
                    '<internal code to handle "%s" dialog>' % dialog.type
                )
            ],
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'core',
        'browser_handle_dialog',
        'Handle a dialog',
        'Handle a dialog',
        HandleDialogArguments,
        ToolType.DESTRUCTIVE,
        handle,
        clears_modal_state='dialog',
    )


def tools(capture_snapshot):
    return [
        handle_dialog(capture_snapshot),
    ]
