"""
Rule-based code review.

Stateless: the report depends only on the submitted text and the
author's email. Nothing is read from or written to storage.
"""

import re

LARGE_FILE_LINES = 200

DEBUG_PRINT_PATTERN = re.compile(
    r"console\.(?:log|debug)"
    r"|\bprint\("
    r"|System\.out\.println"
    r"|fmt\.Print(?:ln|f)?\("
    r"|println!"
    r"|var_dump\("
)

# No MULTILINE: only whitespace at the very end of the text counts,
# including a final newline.
TRAILING_WHITESPACE_PATTERN = re.compile(r"\s+$")

SUGGESTION_LARGE_FILE = f"File is large (>{LARGE_FILE_LINES} lines). Consider splitting into modules."
SUGGESTION_DEBUG_PRINTS = "Found debug print statements. Remove or guard them in production."
SUGGESTION_TRAILING_WHITESPACE = "There appear to be trailing spaces on the last line."
SUGGESTION_NO_ISSUES = "No obvious issues detected by the heuristic review."

TIPS = (
    "Run a linter (ESLint / flake8) for deeper checks.",
    "Add unit tests for critical logic.",
)


def count_lines(source: str) -> int:
    """Number of newline-separated lines; an empty string is one line."""
    return len(source.split("\n"))


def has_debug_prints(source: str) -> bool:
    return DEBUG_PRINT_PATTERN.search(source) is not None


def has_trailing_whitespace(source: str) -> bool:
    return TRAILING_WHITESPACE_PATTERN.search(source) is not None


def collect_suggestions(source: str) -> list[str]:
    """
    Run every rule over ``source``.

    Suggestions come back in a fixed order (size, debug prints, trailing
    whitespace) and can co-occur. When no rule fires the list holds the
    single no-issues message.
    """
    suggestions = []
    if count_lines(source) > LARGE_FILE_LINES:
        suggestions.append(SUGGESTION_LARGE_FILE)
    if has_debug_prints(source):
        suggestions.append(SUGGESTION_DEBUG_PRINTS)
    if has_trailing_whitespace(source):
        suggestions.append(SUGGESTION_TRAILING_WHITESPACE)
    if not suggestions:
        suggestions.append(SUGGESTION_NO_ISSUES)
    return suggestions


def review(source: str, author_email: str) -> str:
    """
    Build the markdown review report for ``source``.

    Args:
        source: Submitted code, any language
        author_email: Email of the requesting user, echoed in the report

    Returns:
        Markdown with line count, author, suggestions and static tips
    """
    lines = [
        "# Automated Review",
        f"**Lines:** {count_lines(source)}",
        f"**Author:** {author_email}",
        "",
        "## Suggestions",
        *(f"- {suggestion}" for suggestion in collect_suggestions(source)),
        "",
        "## Tips",
        *(f"- {tip}" for tip in TIPS),
    ]
    return "\n".join(lines)
