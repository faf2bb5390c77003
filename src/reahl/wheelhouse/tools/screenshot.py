from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

from reahl.wheelhouse.browser import call_code
from reahl.wheelhouse.browser import comment_code
from reahl.wheelhouse.mcp.config import create_directory_of
from reahl.wheelhouse.mcp.config import output_file
from reahl.wheelhouse.mcp.config import standardized_output_file
from reahl.wheelhouse.mcp.tool import ToolResult
from reahl.wheelhouse.mcp.tool import ToolType
from reahl.wheelhouse.mcp.tool import define_tool


class ScreenshotArguments(BaseModel):
    raw: bool = Field(
        default=False,
        description=(
            'Whether to return without compression (in PNG format). '
            'Default is false, which returns a JPEG image.'
        ),
    )
    filename: str = Field(
        description='File name to save the screenshot to.',
    )
    full_page: bool = Field(
        default=False,
        alias='fullPage',
        description=(
            'Whether to capture the full scrollable page '
            '(default: false, captures only visible viewport).'
        ),
    )
    element: str | None = Field(
        default=None,
        description=(
            'Human-readable element description used to obtain permission '
            'to screenshot the element. If not provided, the screenshot '
            'will be taken of viewport. If element is provided, ref must '
            'be provided too.'
        ),
    )
    ref: str | None = Field(
        default=None,
        description=(
            'Exact target element reference from the page snapshot. If not '
            'provided, the screenshot will be taken of viewport. If ref is '
            'provided, element must be provided too.'
        ),
    )

    @model_validator(mode='after')
    def check_element_and_ref_given_together(self):
        if bool(self.element) != bool(self.ref):
            raise ValueError(
                'Both element and ref must be provided or neither.'
            )
        return self


def screenshot_options(file_type, file_name, full_page):
    options = {
        'type': file_type,
        'scale': 'css',
        'path': file_name,
        'full_page': full_page,
    }
    if file_type == 'jpeg':
        options['quality'] = 50
    return options


def described_target(params):
    if params.element:
        return params.element
    return 'full page' if params.full_page else 'viewport'


def uses_standardized_file_name(file_name):
    return 'screenshot' in file_name or 'capture' in file_name


def screenshot_file_name(config, page, file_name, file_type):
    if uses_standardized_file_name(file_name):
        return standardized_output_file(config, page.url, file_type)
    return output_file(config, file_name)


def take_screenshot():
    async def handle(context, params):
        page = context.session.current_page_or_die()
        file_type = 'png' if params.raw else 'jpeg'
        file_name = screenshot_file_name(
            context.config, page, params.filename, file_type
        )
        options = screenshot_options(file_type, file_name, params.full_page)
        code = [
            comment_code(
                'Screenshot %s and save it as %s'
                % (described_target(params), file_name)
            )
        ]
        create_directory_of(file_name)
        if params.ref:
            snapshot = context.session.snapshot_or_die()
            locator = snapshot.ref_locator(params.element, params.ref)
            locator_code = await context.session.generate_locator(locator)
            code.append(
                call_code('page.%s' % locator_code, 'screenshot', **options)
            )
            await locator.screenshot(**options)
        else:
            code.append(call_code('page', 'screenshot', **options))
            await page.screenshot(**options)

        return ToolResult(
            code,
            result_override={
                'content': [
                    {
                        'type': 'text',
                        'text': 'Screenshot saved to: %s' % file_name,
                    }
                ],
            },
        )

    return define_tool(
        'core',
        'browser_take_screenshot',
        'Take a screenshot',
        (
            "Take a screenshot of the current page. You can't perform "
            'actions based on the screenshot, use browser_snapshot for '
            'actions.'
        ),
        ScreenshotArguments,
        ToolType.READ_ONLY,
        handle,
    )


def tools():
    return [
        take_screenshot(),
    ]
