""" CSS Declarations
A single `property: value[ !bang];` statement along with the exact formatting it was
written with, so that it can be regenerated byte for byte.

<block>
    <whitespace/><property/><separator/><value/><gap/><bang/><tail/>
</block>

whitespace => Indent before the property,
separator => The colon and any whitespace around it,
gap => Whitespace between the value and the bang, if there is a bang,
tail => Anything after the bang (or value) followed by the terminator,
bang => `!important`, `!default`, `!global`, etc...,
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field, replace as _replace

__all__ = ["Template", "Declaration", "DECLARATION", "TERMINATOR"]

TERMINATOR = ";"
DECLARATION = re.compile(r"(\s+)?([^:]+):([^!;]+)([^;]+)?")


def _trimmed(match: re.Match, group: int) -> tuple[int, int]:
    """Span of a match group with surrounding whitespace removed."""
    start, end = match.span(group)
    text = match.group(group)
    if text.strip() == "":
        return start, start
    return (
        start + len(text) - len(text.lstrip()),
        end - len(text) + len(text.rstrip()),
    )


@dataclass(frozen=True)
class Template:
    """The literal text around the property, value, and bang of a declaration.

    `gap` is `None` when the source had no bang. A bang rendered into such a template
    is separated from the value by a single space.
    """

    lead: str = ""
    separator: str = ": "
    gap: str | None = None
    tail: str = TERMINATOR

    @staticmethod
    def default() -> Template:
        return Template()

    def fill(self, property: str, value: str, bang: str | None = None) -> str:
        if bang:
            gap = " " if self.gap is None else self.gap
            return f"{self.lead}{property}{self.separator}{value}{gap}{bang}{self.tail}"
        return f"{self.lead}{property}{self.separator}{value}{self.tail}"


@dataclass(frozen=True)
class Declaration:
    property: str
    value: str
    bang: str | None = None
    raw: str = ""
    template: Template = field(default_factory=Template.default)

    @staticmethod
    def parse(text: str) -> Declaration | None:
        """Parse a single line of css into a declaration.

        Returns
            The declaration or `None` if the text has no `property:value` structure.
        """
        line = text.strip("\r\n")
        if (match := DECLARATION.match(line)) is None:
            return None

        prop_start, prop_end = _trimmed(match, 2)
        if prop_start == prop_end:
            return None
        value_start, value_end = _trimmed(match, 3)

        bang = None
        if match.group(4) is not None and match.group(4).strip() != "":
            bang_start, bang_end = _trimmed(match, 4)
            bang = line[bang_start:bang_end]
            gap = line[value_end:bang_start]
            tail = line[bang_end:match.end()] + TERMINATOR
        else:
            gap = None
            tail = line[value_end:match.end()] + TERMINATOR

        return Declaration(
            line[prop_start:prop_end],
            line[value_start:value_end],
            bang,
            raw=line,
            template=Template(
                lead=line[:prop_start],
                separator=line[prop_end:value_start],
                gap=gap,
                tail=tail,
            ),
        )

    @property
    def whitespace(self) -> str:
        """The whitespace the declaration is indented with."""
        return self.template.lead

    @property
    def indent(self) -> int:
        return len(self.template.lead)

    def render(self) -> str:
        """Fill the template with the current property, value, and bang."""
        return self.template.fill(self.property, self.value, self.bang)

    def with_template(self, template: Template) -> Declaration:
        return _replace(self, template=template)

    def replace(self, **changes) -> Declaration:
        return _replace(self, **changes)

    def __repr__(self) -> str:
        bang = f", {self.bang!r}" if self.bang else ""
        return f"Declaration({self.property!r}, {self.value!r}{bang})"

    def __str__(self) -> str:
        return self.render()
