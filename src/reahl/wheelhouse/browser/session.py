from reahl.wheelhouse.mcp.modal_gate import modal_states_markdown


class BrowserError(Exception):
    pass


class ModalState:
    """An unresolved obstruction on the page, such as an open dialog.

    Modal states are pushed and popped by the browser session as the page
    raises and resolves them. Tools only read them, except for the tool
    registered to clear a given type, which asks the session to clear it.
    """

    def __init__(self, type, description, dialog=None, file_chooser=None):
        self.type = type
        self.description = description
        self.dialog = dialog
        self.file_chooser = file_chooser

    def __repr__(self):
        return '<ModalState %s: %s>' % (self.type, self.description)


class BrowserSession:
    """The automation driver as seen from the tool dispatch core.

    Concrete sessions wrap a real browser. Every method here is part of
    the contract that tools and the connection rely on.
    """

    def __init__(self):
        self.client_version = None

    def modal_states(self):
        raise NotImplementedError()

    def clear_modal_state(self, modal_state):
        raise NotImplementedError()

    def modal_states_markdown(self, tools):
        return modal_states_markdown(self.modal_states(), tools)

    def record_client_version(self, client_version):
        self.client_version = client_version

    async def close(self):
        raise NotImplementedError()

    def current_page_or_die(self):
        raise NotImplementedError()

    async def ensure_page(self):
        raise NotImplementedError()

    def snapshot_or_die(self):
        raise NotImplementedError()

    async def generate_locator(self, locator):
        raise NotImplementedError()

    async def capture_snapshot(self):
        raise NotImplementedError()

    async def wait_for_network_idle(self):
        raise NotImplementedError()

    async def page_state_markdown(self):
        raise NotImplementedError()

    async def tabs_markdown(self):
        raise NotImplementedError()

    async def new_tab(self):
        raise NotImplementedError()

    async def select_tab(self, index):
        raise NotImplementedError()

    async def close_tab(self, index):
        raise NotImplementedError()


def modal_state_of_type(browser_session, modal_state_type):
    for modal_state in browser_session.modal_states():
        if modal_state.type == modal_state_type:
            return modal_state
    return None
