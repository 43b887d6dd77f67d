import html

from serialbook.config import DEFAULT_RULES, NavigationRules


def sanitizeStyle(style: str) -> str:
    """Keep an inline style only when it sets a font color."""
    if style.strip() and "color:" in style:
        return style
    return ""


def mapColorClass(className: str, rules: NavigationRules = DEFAULT_RULES) -> str:
    """
    Map a site color class onto one of the canonical palette names.

    The first marker in declared order wins. Class strings without a marker
    come back lower-cased and trimmed.
    """
    className = className.strip().lower()
    for marker, color in rules.colorClasses:
        if marker in className:
            return color
    return className


def buildAttributes(style: str, className: str, rules: NavigationRules = DEFAULT_RULES) -> str:
    """
    Render the surviving class and style attributes.

    Args:
        style: Raw inline style attribute value
        className: Raw class attribute value
        rules: Rule set holding the color class table

    Returns:
        A space-prefixed fragment such as ' class="red" style="color: red;"',
        class first, or an empty string when nothing survives
    """
    attrs = []

    if className:
        attrs.append(f'class="{html.escape(mapColorClass(className, rules))}"')

    if style:
        style = sanitizeStyle(style)
        if style:
            attrs.append(f'style="{html.escape(style)}"')

    if attrs:
        return " " + " ".join(attrs)
    return ""
