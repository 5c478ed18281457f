"""Positional message formatting for failure reports.

Templates use ``{}`` or ``%s`` placeholders, interchangeably. Each placeholder
takes the next argument in order; substituted text is never scanned again.
Formatting never raises, since it only runs while a failure is being reported.
"""

PLACEHOLDERS = ("{}", "%s")
PLACEHOLDER_LEN = 2
NONE_TEXT = "null"


def to_text(value) -> str:
    """Render a single argument the way messages show it."""
    if value is None:
        return NONE_TEXT
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def format_message(template, *args) -> str:
    """Substitute ``args`` into ``template`` left to right.

    Args:
        template: Message template containing ``{}`` / ``%s`` placeholders
        *args: Values for the placeholders, in order

    Returns:
        The formatted message. Placeholders without a matching argument stay
        literal and surplus arguments are ignored.

    Examples:
        >>> format_message("a {} c %s e", "b", "d")
        'a b c d e'
        >>> format_message("{}{}", "{}", "x")
        '{}x'
        >>> format_message("{}{}", "only-one")
        'only-one{}'
    """
    if template is None:
        return template
    if not isinstance(template, str):
        template = to_text(template)
    if not args or not template.strip():
        return template

    parts = []
    start = 0
    index = 0
    next_arg = 0
    end = len(template) - 1

    while index < end and next_arg < len(args):
        if template[index:index + PLACEHOLDER_LEN] in PLACEHOLDERS:
            parts.append(template[start:index])
            parts.append(to_text(args[next_arg]))
            next_arg += 1
            index += PLACEHOLDER_LEN
            start = index
        else:
            index += 1

    parts.append(template[start:])
    return "".join(parts)
