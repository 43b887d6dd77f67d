"""
Chapter body extraction.

Finds the content container of a chapter page and rebuilds its body as a
small allow-listed HTML fragment (p, br, strong, em, span, h1-h6), dropping
navigation chrome on the way.
"""

import html
import logging
from typing import Callable, Dict, Optional

from bs4.element import PageElement, Tag

from serialbook.config import DEFAULT_RULES, NavigationRules
from serialbook.htmlSanitizer import buildAttributes
from serialbook.htmlTree import getAttribute, isElement, isText, iterElements
from serialbook.navigationClassifier import isNavigationElement, isNavigationText

logger = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class ChapterExtractor:
    """Renders chapter pages against a fixed navigation rule set."""

    def __init__(self, rules: NavigationRules = DEFAULT_RULES):
        self.rules = rules
        self._handlers: Dict[str, Callable[[Tag, str], str]] = {
            "p": self._renderParagraph,
            "br": self._renderLineBreak,
            "strong": self._renderStrong,
            "b": self._renderStrong,
            "em": self._renderEmphasis,
            "i": self._renderEmphasis,
            "span": self._renderSpan,
            "div": self._renderContent,
            "a": self._renderAnchor,
        }
        for tag in HEADING_TAGS:
            self._handlers[tag] = self._renderHeading

    def extractChapterHTML(self, root: PageElement, title: str) -> str:
        """
        Render the first content container found under root.

        The search is pre-order and stops at the first div/article whose class
        names a content container.

        Args:
            root: Parsed chapter page (or any subtree of it)
            title: Chapter title for the leading <h1>

        Returns:
            "<h1>title</h1>\\n" followed by the rendered body, or an empty
            string when the page has no content container
        """
        for element in iterElements(root):
            if self._isContentContainer(element):
                logger.debug(f"Content container for '{title}': <{element.name} class=\"{getAttribute(element, 'class')}\">")
                return f"<h1>{html.escape(title)}</h1>\n{self.renderBody(element)}"
        return ""

    def _isContentContainer(self, element: Tag) -> bool:
        if element.name not in self.rules.containerTags:
            return False
        className = getAttribute(element, "class")
        return any(marker in className for marker in self.rules.containerClasses)

    def renderBody(self, node: PageElement) -> str:
        """
        Render a node and its subtree as allow-listed HTML.

        The walk keeps its own stack of open elements, so nesting depth is
        bounded by memory rather than the interpreter's recursion limit.
        """
        rendered = self._renderLeaf(node)
        if rendered is not None:
            return rendered

        # each frame: element, its remaining children, rendered child output
        frames = [(node, iter(node.children), [])]
        while True:
            element, children, parts = frames[-1]
            child = next(children, None)
            if child is not None:
                rendered = self._renderLeaf(child)
                if rendered is None:
                    frames.append((child, iter(child.children), []))
                else:
                    parts.append(rendered)
                continue

            frames.pop()
            handler = self._handlers.get(element.name, self._renderContent)
            rendered = handler(element, "".join(parts))
            if not frames:
                return rendered
            frames[-1][2].append(rendered)

    def _renderLeaf(self, node: PageElement) -> Optional[str]:
        """Output for nodes rendered without visiting children, else None."""
        if isText(node):
            if isNavigationText(str(node), self.rules):
                return ""
            return html.escape(str(node))

        if not isElement(node):
            return ""

        if node.name in self.rules.prunedTags:
            return ""

        if isNavigationElement(node, self.rules):
            logger.debug(f"Pruned navigation element <{node.name}>")
            return ""

        return None

    def _renderContent(self, node: Tag, content: str) -> str:
        return content

    def _isNavigationMarkup(self, content: str) -> bool:
        return isNavigationText(html.unescape(content), self.rules)

    def _attributes(self, node: Tag) -> str:
        return buildAttributes(getAttribute(node, "style"), getAttribute(node, "class"), self.rules)

    def _renderParagraph(self, node: Tag, content: str) -> str:
        content = content.strip()
        if not content or self._isNavigationMarkup(content):
            return ""
        return f"<p{self._attributes(node)}>{content}</p>\n"

    def _renderLineBreak(self, node: Tag, content: str) -> str:
        return "<br/>\n"

    def _renderInline(self, node: Tag, tag: str, content: str) -> str:
        if self._isNavigationMarkup(content):
            return ""
        return f"<{tag}{self._attributes(node)}>{content}</{tag}>"

    def _renderStrong(self, node: Tag, content: str) -> str:
        return self._renderInline(node, "strong", content)

    def _renderEmphasis(self, node: Tag, content: str) -> str:
        return self._renderInline(node, "em", content)

    def _renderSpan(self, node: Tag, content: str) -> str:
        if self._isNavigationMarkup(content):
            return ""
        attrs = self._attributes(node)
        if attrs:
            return f"<span{attrs}>{content}</span>"
        # a span without color carries nothing worth keeping
        return content

    def _renderHeading(self, node: Tag, content: str) -> str:
        if self._isNavigationMarkup(content):
            return ""
        return f"<{node.name}>{content}</{node.name}>\n"

    def _renderAnchor(self, node: Tag, content: str) -> str:
        if self._isNavigationMarkup(content):
            logger.debug(f"Dropped navigation link to {getAttribute(node, 'href') or '(no href)'}")
            return ""
        return content


_defaultExtractor = ChapterExtractor()


def extractChapterHTML(root: PageElement, title: str, rules: NavigationRules = DEFAULT_RULES) -> str:
    extractor = _defaultExtractor if rules is DEFAULT_RULES else ChapterExtractor(rules)
    return extractor.extractChapterHTML(root, title)


def renderBody(node: PageElement, rules: NavigationRules = DEFAULT_RULES) -> str:
    extractor = _defaultExtractor if rules is DEFAULT_RULES else ChapterExtractor(rules)
    return extractor.renderBody(node)
