"""Per-section word statistics split at headings and section-break sentinels"""

import re
from dataclasses import dataclass
from typing import Iterable

from mdprose.core.count import word_count
from mdprose.core.models import ParsedDoc, SectionStats
from mdprose.core.normalize import normalize


BREAK_RE = re.compile(r'<!--\s*::break::\s*-->')
BIBLIOGRAPHY_RE = re.compile(r'<!--\s*::auto-bibliography::\s*-->')
NEWLINE_RE = re.compile(r'\r\n?')
DEFAULT_BIBLIOGRAPHY_TITLES = ("Bibliography", "References")


@dataclass
class _Boundary:
    line: int
    title: str
    level: int
    pseudo: bool
    bibliography: bool


def _heading_level(token) -> int | None:
    """Return heading level (1-6) for heading_open tokens else None."""
    if token.type == 'heading_open' and len(token.tag) == 2 and token.tag[0] == 'h':
        return int(token.tag[1])
    return None


def _boundaries(
    tokens: list,
    lines: list[str],
    max_nesting: int,
    bibliography_titles: Iterable[str],
    ) -> list[_Boundary]:
    """Collect section starts from top-level heading and break-sentinel tokens."""
    titles = set(bibliography_titles)
    bounds: list[_Boundary] = []
    last_level = 1
    bib_level = None    # a heading at or above this level closes the bibliography; 0 never does

    for i, tok in enumerate(tokens):
        if tok.level != 0 or not tok.map:
            continue

        if tok.type == 'html_block':
            content = tok.content.strip()
            if BREAK_RE.fullmatch(content):
                bounds.append(_Boundary(tok.map[0], '', last_level, True, bib_level is not None))
            elif BIBLIOGRAPHY_RE.fullmatch(content):
                bib_level = 0
            continue

        level = _heading_level(tok)
        if level is None or level > max_nesting:
            continue

        title = normalize(tokens[i + 1].content).strip()
        source = '\n'.join(lines[tok.map[0]:tok.map[1]])
        if bib_level is not None and level <= bib_level:
            bib_level = None
        if bib_level is None and (title in titles or BIBLIOGRAPHY_RE.search(source)):
            bib_level = level

        last_level = level
        bounds.append(_Boundary(tok.map[0], title, level, False, bib_level is not None))

    return bounds


def section_stats(
    doc: ParsedDoc,
    max_nesting: int = 6,
    bibliography_titles: Iterable[str] = DEFAULT_BIBLIOGRAPHY_TITLES,
    ) -> list[SectionStats]:
    """Split doc into outline sections and count each one's words.

    Each heading up to max_nesting, and each standalone break sentinel, opens a
    section running to the next one. Text before the first boundary becomes a
    level-0 preamble section when it has words.
    """
    # markdown-it numbers lines after folding \r\n and \r into \n
    lines = NEWLINE_RE.sub('\n', doc.markdown).split('\n')
    bounds = _boundaries(doc.tokens, lines, max_nesting, bibliography_titles)
    sections: list[SectionStats] = []

    first = bounds[0].line if bounds else len(lines)
    preamble = word_count('\n'.join(lines[:first]))
    if preamble:
        sections.append(SectionStats(position=0, title='', level=0, word_count=preamble))

    for b, end in zip(bounds, [b.line for b in bounds[1:]] + [len(lines)]):
        sections.append(SectionStats(
            position=len(sections),
            title=b.title,
            level=b.level,
            word_count=word_count('\n'.join(lines[b.line:end])),
            pseudo=b.pseudo,
            bibliography=b.bibliography,
        ))
    return sections
