import re
from typing import Optional

from markupsafe import Markup

_LINE_BREAK = re.compile(r"\r\n|\n")


def nl2br(text: Optional[str]) -> Markup:
    """Jinja filter: escape each line, then join the lines with <br> tags.

    Markup.join escapes the plain-string lines exactly once and leaves the
    <br> separators intact, so the result is not escaped again by autoescape.
    """
    if not text:
        return Markup("")
    return Markup("<br>").join(_LINE_BREAK.split(text))
