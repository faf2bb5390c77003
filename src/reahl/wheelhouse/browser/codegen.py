def python_literal(value):
    if isinstance(value, dict):
        return '{%s}' % ', '.join(
            '%s: %s' % (python_literal(key), python_literal(item))
            for key, item in value.items()
        )
    if isinstance(value, (list, tuple)):
        return '[%s]' % ', '.join(python_literal(item) for item in value)
    return repr(value)


def formatted_arguments(*positional_arguments, **keyword_arguments):
    formatted = [python_literal(value) for value in positional_arguments]
    formatted.extend(
        '%s=%s' % (name, python_literal(value))
        for name, value in keyword_arguments.items()
        if value is not None
    )
    return ', '.join(formatted)


def call_code(
    receiver,
    method_name,
    *positional_arguments,
    **keyword_arguments
):
    return 'await %s.%s(%s)' % (
        receiver,
        method_name,
        formatted_arguments(*positional_arguments, **keyword_arguments),
    )


def comment_code(text):
    return '# %s' % text
