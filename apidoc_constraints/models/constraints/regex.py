from dataclasses import dataclass
from typing import ClassVar

from .base_constraint import Constraint


@dataclass(frozen=True, kw_only=True)
class Regex(Constraint):
    """
    The string value must (or must not) match a regular expression.

    ``html_pattern`` overrides the published pattern; HTML/OpenAPI patterns
    are implicitly anchored.
    """

    kind: ClassVar[str] = "Regex"

    pattern: str
    html_pattern: str | None = None
    # If False, the value must NOT match the pattern
    match: bool = True

    def get_html_pattern(self) -> str | None:
        """
        Returns the pattern in the implicitly-anchored HTML dialect.

        Explicit anchors are stripped; unanchored ends are widened with ``.*``.
        A negated pattern cannot be expressed and yields None.
        """
        if self.html_pattern is not None:
            return self.html_pattern
        if not self.match:
            return None

        pattern = self.pattern
        if pattern.startswith("^"):
            pattern = pattern[1:]
        else:
            pattern = ".*" + pattern
        if pattern.endswith("$") and not pattern.endswith("\\$"):
            pattern = pattern[:-1]
        else:
            pattern = pattern + ".*"
        return pattern
