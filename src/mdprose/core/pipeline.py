"""Document statistics: load, count, section, and evaluate goals for files"""

import re
from collections import Counter
from pathlib import Path

import structlog

from mdprose.config import Settings
from mdprose.core.annotations import parse_annotations, strip_annotations
from mdprose.core.count import word_count
from mdprose.core.goals import goal_progress
from mdprose.core.models import DocumentStats, ParsedDoc
from mdprose.core.parse import discover_files, parse_file
from mdprose.core.sections import section_stats


log = structlog.get_logger()

ANNOTATION_OPEN_RE = re.compile(r'<!--\s*::[\w-]+::')


def document_stats(parsed: ParsedDoc, settings: Settings) -> DocumentStats:
    """Count a parsed document's body, per section and in total, and evaluate its goal."""
    path = str(parsed.path) if parsed.path else None
    leftover = ANNOTATION_OPEN_RE.search(strip_annotations(parsed.markdown))
    if leftover:
        # counted as prose until the writer closes the comment
        log.warning("unterminated_annotation", path=path, offset=leftover.start())

    total = word_count(parsed.markdown)
    sections = section_stats(parsed, settings.max_nesting, settings.bibliography_titles)
    prose = total
    if settings.exclude_bibliography:
        prose = sum(s.word_count for s in sections if not s.bibliography)

    counts = Counter(a.type.value for a in parse_annotations(parsed.markdown))
    stats = DocumentStats(
        path=path,
        word_count=total,
        prose_word_count=prose,
        sections=sections,
        annotations=dict(counts),
        goal=goal_progress(prose, settings.goal, settings.goal_type, settings.thresholds),
    )
    log.debug("document_counted", path=path, words=total, prose=prose, sections=len(sections))
    return stats


def run_stats(path: str, settings: Settings) -> list[DocumentStats]:
    """Compute DocumentStats for every markdown file under path."""
    results = []
    for p in discover_files(Path(path)):
        try:
            parsed = parse_file(p, settings.parser_config)
        except Exception as e:
            raise RuntimeError(f"Failed to read {p}: {e}") from e
        results.append(document_stats(parsed, settings))
    return results
