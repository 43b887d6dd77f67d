"""
Predicates that tell navigation chrome apart from chapter content.

Both functions are total: any string or node is accepted and a missing
class/id attribute reads as an empty string.
"""

import re

from bs4.element import PageElement

from serialbook.config import DEFAULT_RULES, NavigationRules
from serialbook.htmlTree import getAttribute, isElement


def isNavigationText(text: str, rules: NavigationRules = DEFAULT_RULES) -> bool:
    """
    Decide whether a text fragment is a navigation label.

    The checks are ORed: a configured phrase anywhere in the text, a
    configured short word standing on its own, a run made only of arrows,
    guillemets or pipes, or a short label such as "Next" or "← Back".

    Args:
        text: Raw text or rendered markup, any case and padding
        rules: Rule set to classify against

    Returns:
        True if the text should be dropped as navigation
    """
    text = text.strip().lower()
    if not text:
        return False

    for phrase in rules.navigationPhrases:
        if phrase in text:
            return True

    for word in rules.navigationWords:
        if containsWord(text, word):
            return True

    if rules.symbolPattern.match(text):
        return True

    if len(text) < rules.shortTextThreshold:
        if text in rules.shortNavigationLabels:
            return True
        if any(arrow in text for arrow in rules.shortNavigationArrows):
            return True

    return False


def containsWord(text: str, word: str) -> bool:
    """Match word where it is not part of a longer ASCII word."""
    return re.search(r"\b" + re.escape(word) + r"\b", text, re.IGNORECASE | re.ASCII) is not None


def isNavigationElement(node: PageElement, rules: NavigationRules = DEFAULT_RULES) -> bool:
    """True for elements whose class or id carries a navigation marker."""
    if not isElement(node):
        return False

    className = getAttribute(node, "class").lower()
    elementId = getAttribute(node, "id").lower()

    for marker in rules.navigationClasses:
        if marker in className or marker in elementId:
            return True

    return False
