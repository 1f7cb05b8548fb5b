"""Glob pattern matching for selecting and excluding paths during a scan."""

import re
from typing import Iterable, List, Optional

from pathspec import PathSpec
from pathspec.patterns.gitignore.spec import GitIgnoreSpecPattern

# Regex group pathspec sets when a pattern only matched a parent directory of the path
DIRECTORY_MARK = "ps_d"


def anchor_pattern(pattern: str) -> str:
    """Anchor a glob pattern at the scan root.

    Wildmatch patterns without a slash match at any depth; glob patterns do not. A
    leading ``/`` pins such a pattern to the root, so ``*.txt`` only matches files
    directly in the root while ``**/*.txt`` keeps matching everywhere.

    Example:
        >>> anchor_pattern("*.txt")
        '/*.txt'
        >>> anchor_pattern("**/*.txt")
        '**/*.txt'
        >>> anchor_pattern("!*.log")
        '!/*.log'
    """
    negated = pattern.startswith("!")
    body = pattern[1:] if negated else pattern
    if body and not body.startswith(("/", "**")):
        body = "/" + body
    return ("!" if negated else "") + body


def matches_exactly(pattern: GitIgnoreSpecPattern, path: str) -> bool:
    """Check whether a compiled pattern matches ``path`` itself, not just one of its parents.

    Example:
        >>> pattern = GitIgnoreSpecPattern("/src/*")
        >>> matches_exactly(pattern, "src/main.py")
        True
        >>> matches_exactly(pattern, "src/utils/helpers.py")
        False
    """
    regex: Optional[re.Pattern] = pattern.regex
    if regex is None:
        return False
    if regex.fullmatch(path):
        return True
    match = regex.search(path)
    return match is not None and match.groupdict().get(DIRECTORY_MARK) is None


class GlobPatternRules:
    """A set of glob patterns matched against root-relative, slash-separated paths.

    Patterns use wildmatch syntax through the pathspec library: ``*`` and ``?`` stay
    within one path segment, ``**`` spans any number of directories, ``[abc]`` matches a
    character class and a leading ``!`` negates a pattern. When several patterns match,
    the last one decides. Matching is case-sensitive and hidden entries are matched like
    any other.

    By default the rules behave like glob expansion: ``src/*`` matches the entries
    directly inside ``src`` and nothing deeper. With ``match_descendants`` a pattern
    that matches a directory also matches everything below it, which is what exclusions
    need.

    Attributes:
        patterns (List[str]): The patterns in the order they were added, as written.
        match_descendants (bool): Whether a directory match extends to its contents.
        spec (PathSpec): Compiled matcher for the anchored patterns.

    Example:
        >>> rules = GlobPatternRules(["**/*.md", "docs/*"])
        >>> rules.matches("README.md")
        True
        >>> rules.matches("docs/guide.txt")
        True
        >>> rules.matches("docs/guides/install.txt")
        False
        >>> GlobPatternRules(["docs/*"], match_descendants=True).matches("docs/guides/install.txt")
        True
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None, match_descendants: bool = False):
        self.patterns: List[str] = []
        self.match_descendants = match_descendants
        self.spec = PathSpec.from_lines(GitIgnoreSpecPattern, [])
        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern."""
        self.patterns.append(rule)
        self.spec = PathSpec.from_lines(GitIgnoreSpecPattern, [self._compile_form(p) for p in self.patterns])

    def _compile_form(self, pattern: str) -> str:
        if not self.match_descendants:
            # A trailing slash would only match inside the directory
            pattern = pattern.rstrip("/") or pattern
        return anchor_pattern(pattern)

    def matches(self, path: str) -> bool:
        """Check whether a relative path matches the patterns."""
        if self.match_descendants:
            return self.spec.match_file(path)
        matched = False
        for pattern in self.spec.patterns:
            if pattern.include is not None and matches_exactly(pattern, path):
                matched = pattern.include
        return matched

    def matches_directory(self, path: str) -> bool:
        """Check whether a directory, or everything inside it, matches the patterns.

        Directory-only patterns such as ``**/node_modules/**`` match the directory's
        contents rather than the bare name, so the path is checked with a trailing slash too.
        """
        return self.matches(path) or self.matches(path.rstrip("/") + "/")
