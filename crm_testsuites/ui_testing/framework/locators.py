"""
================================================================================
Locator Strategies
================================================================================

A ``By`` locator is a (strategy, value) pair describing how to find an
element: by id, name, CSS, XPath, link text and so on. Each strategy renders
to a Playwright selector string, so page code can keep the familiar
"By.id(...)" vocabulary while Playwright does the matching.

Usage:
    >>> By.id("dtlview_Organization Name").selector
    '[id="dtlview_Organization Name"]'
    >>> By.link_text("Sign Out").selector
    'css=a:text-is("Sign Out")'

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass


def _quote(value: str) -> str:
    """Quote a value for use inside a CSS attribute or text pseudo-class."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


# strategy -> selector template
_STRATEGIES = {
    "id": lambda v: f"[id={_quote(v)}]",
    "name": lambda v: f"[name={_quote(v)}]",
    "css": lambda v: f"css={v}",
    "xpath": lambda v: f"xpath={v}",
    "link_text": lambda v: f"css=a:text-is({_quote(v)})",
    "partial_link_text": lambda v: f"css=a:has-text({_quote(v)})",
    "tag_name": lambda v: f"css={v}",
    "class_name": lambda v: f"css=.{v}",
}


@dataclass(frozen=True)
class By:
    """
    Locator strategy plus selector value.

    Attributes:
        strategy: One of id, name, css, xpath, link_text, partial_link_text,
            tag_name, class_name
        value: Strategy-specific selector value
    """
    strategy: str
    value: str

    def __post_init__(self) -> None:
        if self.strategy not in _STRATEGIES:
            raise ValueError(
                f"Unknown locator strategy: {self.strategy}. "
                f"Expected one of: {', '.join(sorted(_STRATEGIES))}"
            )

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        return _STRATEGIES[self.strategy](self.value)

    def __str__(self) -> str:
        return f"By.{self.strategy}({self.value!r})"

    @classmethod
    def id(cls, value: str) -> "By":
        return cls("id", value)

    @classmethod
    def name(cls, value: str) -> "By":
        return cls("name", value)

    @classmethod
    def css(cls, value: str) -> "By":
        return cls("css", value)

    @classmethod
    def xpath(cls, value: str) -> "By":
        return cls("xpath", value)

    @classmethod
    def link_text(cls, value: str) -> "By":
        return cls("link_text", value)

    @classmethod
    def partial_link_text(cls, value: str) -> "By":
        return cls("partial_link_text", value)

    @classmethod
    def tag_name(cls, value: str) -> "By":
        return cls("tag_name", value)

    @classmethod
    def class_name(cls, value: str) -> "By":
        return cls("class_name", value)


__all__ = [
    "By",
]
