"""Markdown-to-plain-text normalization as an ordered list of named stripping rules"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from mdprose.core.annotations import strip_annotations


@dataclass(frozen=True)
class Rule:
    """One named text -> text transformation in the normalization pipeline."""
    name: str
    apply: Callable[[str], str]


def _sub(name: str, pattern: str, repl: str = '', flags: int = 0) -> Rule:
    """Build a Rule replacing every match of pattern; compiled once at import."""
    regex = re.compile(pattern, flags)
    return Rule(name, lambda text: regex.sub(repl, text))


# Order is load-bearing: bold before italic so '**' pairs are consumed first, and
# image before link since '![alt](url)' ends with a complete link. Inline code
# stays on one line so fence backticks are left for code_fence. Line-start rules
# absorb a whole run of their own marker ('# # #', '- - -', '> > >') in one pass.
RULES: tuple[Rule, ...] = (
    _sub('heading',         r'^(?:#{1,6}[ \t]+)*#{1,6}\s+',  flags=re.MULTILINE),
    _sub('bold',            r'\*\*(.+?)\*\*|__(.+?)__',      r'\1\2'),
    _sub('italic',          r'\*([^*]+)\*|_([^_]+)_',        r'\1\2'),
    _sub('strikethrough',   r'~~(.+?)~~',                    r'\1'),
    _sub('inline_code',     r'`([^`\n]+)`',                  r'\1'),
    _sub('image',           r'!\[[^\]]*\]\([^)]+\)'),
    _sub('link',            r'\[([^\]]+)\]\([^)]+\)',        r'\1'),
    _sub('list_marker',     r'^[ \t]*(?:(?:[-*+]|\d+\.)[ \t]+)*(?:[-*+]|\d+\.)\s+', flags=re.MULTILINE),
    _sub('blockquote',      r'^>[> \t]*',                    flags=re.MULTILINE),
    _sub('section_break',   r'<!--\s*::break::\s*-->'),
    _sub('code_fence',      r'^```[a-zA-Z]*\s*$',            flags=re.MULTILINE),
    _sub('horizontal_rule', r'^[-*_]{3,}\s*$',               flags=re.MULTILINE),
    Rule('annotations', strip_annotations),
)

MAX_PASSES = 8


def rule_names(rules: Iterable[Rule] = RULES) -> list[str]:
    return [r.name for r in rules]


def normalize_once(text: str, rules: Iterable[Rule] = RULES) -> str:
    """Apply each rule once, in order."""
    for rule in rules:
        text = rule.apply(text)
    return text


def normalize(text: str, rules: Iterable[Rule] = RULES) -> str:
    """Return plain text with markdown syntax, break sentinels, and annotations removed.

    Passes repeat until the text stops changing, so normalize(normalize(x)) ==
    normalize(x). One pass can expose syntax an earlier rule already ran past
    ('> - item' leaves '- item'), so a second pass is common. Passes stop at
    MAX_PASSES to keep the cost linear in the input; only markup nested deeper
    than that (a link wrapped in several links) can keep literal leftovers.
    Unbalanced markers (a lone '*', an unclosed '[') are never matched and stay
    as literal text.
    """
    rules = tuple(rules)
    for _ in range(MAX_PASSES):
        result = normalize_once(text, rules)
        if result == text:
            break
        text = result
    return text
