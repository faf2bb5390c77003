from reahl.wheelhouse.mcp.errors import ModalStateViolation


def check_modal_state(tool, modal_states):
    modal_state_types = [modal_state.type for modal_state in modal_states]
    clears_modal_state = tool.clears_modal_state
    if clears_modal_state and clears_modal_state not in modal_state_types:
        raise ModalStateViolation(
            'The tool "%s" can only be used when there is related '
            'modal state present.' % tool.name
        )
    if not tool.clears_modal_state and modal_state_types:
        raise ModalStateViolation(
            'Tool "%s" does not handle the modal state.' % tool.name
        )


def tool_clearing(modal_state, tools):
    for tool in tools:
        if tool.clears_modal_state == modal_state.type:
            return tool
    return None


def modal_states_markdown(modal_states, tools):
    lines = ['### Modal state']
    if not modal_states:
        lines.append('- There is no modal state present')
    for modal_state in modal_states:
        clearing_tool = tool_clearing(modal_state, tools)
        if clearing_tool is None:
            lines.append(
                '- [%s]: no enabled tool can handle it'
                % modal_state.description
            )
        else:
            lines.append(
                '- [%s]: can be handled by the "%s" tool'
                % (modal_state.description, clearing_tool.name)
            )
    return lines
