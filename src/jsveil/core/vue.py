# src/jsveil/core/vue.py
import re
from typing import Optional

from jsveil.config import COMPLEX_MARKERS, JSX_MARKERS
from jsveil.models import ScriptBlockMatch

# Whitespace right inside the tags belongs to the tags, so it survives untouched.
SCRIPT_BLOCK_RE = re.compile(r"(<script(?:\s[^>]*)?>\s*)(.*?)(\s*</script>)", re.IGNORECASE | re.DOTALL)


def extract_script(markup: str) -> Optional[ScriptBlockMatch]:
    """Returns the first <script> element of `markup`, or None. Later ones are ignored."""
    m = SCRIPT_BLOCK_RE.search(markup)
    if m is None:
        return None
    return ScriptBlockMatch(
        open_tag=m.group(1),
        content=m.group(2),
        close_tag=m.group(3),
        offset=m.start(),
        length=m.end() - m.start(),
    )


def is_complex_script(content: str) -> bool:
    """
    Textual guess for render functions and JSX-like syntax.
    Over- and under-triggers. Changing it changes which transform profile
    a file gets.
    """
    if any(marker in content for marker in COMPLEX_MARKERS):
        return True
    return all(marker in content for marker in JSX_MARKERS)


def replace_script(markup: str, match: ScriptBlockMatch, new_content: str) -> str:
    end = match.offset + match.length
    return markup[:match.offset] + match.open_tag + new_content + match.close_tag + markup[end:]
