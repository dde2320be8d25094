"""
Utility functions for the code quality checker.
"""

import re
from typing import Iterable, List, Optional

# Language tags the service advertises. Any other tag is accepted and simply
# disables language-gated rules.
KNOWN_LANGUAGES = ("javascript", "python", "java", "c", "cpp")

LINE_PREFIX_PATTERN = re.compile(r"Line\s+(\d+)\s*:", re.IGNORECASE)

# Characters removed by JavaScript String.prototype.trim(): ECMAScript
# WhiteSpace plus LineTerminator. Differs from str.strip(), which keeps
# U+FEFF and removes U+001C-U+001F and U+0085.
TRIM_CHARACTERS = (
    " \t\n\v\f\r\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def split_lines(code: str) -> List[str]:
    """Split on newline only. ``""`` yields one empty line; a trailing newline yields a trailing empty line."""
    return code.split("\n")


def trim_line(line: str) -> str:
    """Strip leading and trailing whitespace the way the rules compare lines."""
    return line.strip(TRIM_CHARACTERS)


def format_line_message(line_number: int, explanation: str) -> str:
    """Build an issue message in the ``Line <N>: <explanation>`` format."""
    return f"Line {line_number}: {explanation}"


def extract_line_number(message: str) -> Optional[int]:
    """Recover the line number embedded in an issue message, or None."""
    match = LINE_PREFIX_PATTERN.search(message or "")
    if not match:
        return None
    return int(match.group(1))


def extract_line_numbers(messages: Iterable[str]) -> List[int]:
    """Distinct line numbers referenced by the given messages, in first-seen order."""
    seen: List[int] = []
    for message in messages:
        n = extract_line_number(message)
        if n is not None and n not in seen:
            seen.append(n)
    return seen

