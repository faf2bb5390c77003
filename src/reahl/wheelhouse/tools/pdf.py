from pydantic import BaseModel
from pydantic import Field

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.config import create_directory_of
from reahl.wheelhouse.mcp.config import file_name_timestamp
from reahl.wheelhouse.mcp.config import output_file
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool


class PdfArguments(BaseModel):
    filename: str | None = Field(
        default=None,
        description=(
            'File name to save the pdf to. Defaults to '
            'page-{timestamp}.pdf if not specified.'
        ),
    )


def default_pdf_file_name():
    return 'page-%s.pdf' % file_name_timestamp()


def save_as_pdf():
    async def handle(context, params):
        page = context.session.current_page_or_die()
        file_name = output_file(
            context.config,
            params.filename or default_pdf_file_name(),
        )

        async def action():
            create_directory_of(file_name)
            await page.pdf(path=file_name)
            return [
                {
                    'type': 'text',
                    'text': 'Saved page as %s' % file_name,
                }
            ]

        return ToolResult(
            [
                comment_code('Save page as %s' % file_name),
                call_code('page', 'pdf', path=file_name),
            ],
            action=action,
        )

    return define_tool(
        'pdf',
        'browser_pdf_save',
        'Save as PDF',
        'Save page as PDF',
        PdfArguments,
        ToolType.READ_ONLY,
        handle,
    )


def tools():
    return [
        save_as_pdf(),
    ]
