from pydantic import BaseModel
from pydantic import Field

from reahl.wheelhouse.browser import BrowserError
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.browser import modal_state_of_type
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool


class UploadFileArguments(BaseModel):
    paths: list[str] = Field(
        description=(
            'The absolute paths to the files to upload. '
            'Can be a single file or multiple files.'
        ),
    )


def upload_file(capture_snapshot):
    async def handle(context, params):
        file_chooser_state = modal_state_of_type(
            context.session,
            'fileChooser',
        )
        if file_chooser_state is None:
            raise BrowserError('No file chooser visible')
        file_chooser = file_chooser_state.file_chooser

        async def action():
            await file_chooser.set_files(params.paths)
            context.session.clear_modal_state(file_chooser_state)

        return ToolResult(
            [
                comment_code(
                    '<internal code to choose files %s>'
                    % ', '.join(params.paths)
                )
            ],
            action=action,
            capture_snapshot=capture_snapshot,
        )

    return define_tool(
        'files',
        'browser_file_upload',
        'Upload files',
        'Upload one or multiple files',
        UploadFileArguments,
        ToolType.DESTRUCTIVE,
        handle,
        clears_modal_state='fileChooser',
    )


def tools(capture_snapshot):
    return [
        upload_file(capture_snapshot),
    ]
