from reahl.wheelhouse.browser.codegen import call_code
from reahl.wheelhouse.browser.codegen import comment_code
from reahl.wheelhouse.browser.codegen import formatted_arguments
from reahl.wheelhouse.browser.codegen import python_literal
from reahl.wheelhouse.browser.session import BrowserError
from reahl.wheelhouse.browser.session import BrowserSession
from reahl.wheelhouse.browser.session import ModalState
from reahl.wheelhouse.browser.session import modal_state_of_type

__all__ = [
    'BrowserError',
    'BrowserSession',
    'ModalState',
    'call_code',
    'comment_code',
    'formatted_arguments',
    'modal_state_of_type',
    'python_literal',
]
