"""Annotation comments: stripping, parsing, and formatting of <!-- ::type:: payload --> blocks"""

import re

from mdprose.core.models import Annotation, AnnotationType


# Tag is open-ended so new annotation kinds stay strippable; payload is non-greedy
# so adjacent blocks are removed one at a time.
ANNOTATION_RE = re.compile(r'<!--\s*::([\w-]+)::(.*?)-->', re.DOTALL)
TASK_CHECKBOX_RE = re.compile(r'^\s*\[([ xX])\]\s*(.*)$', re.DOTALL)
HIGHLIGHT_RE = re.compile(r'==([^=]+)==\s*$')
SPACES_RE = re.compile(r' {2,}')
HIGHLIGHT_LOOKBACK = 500


def strip_annotations(text: str) -> str:
    """Remove every annotation block, tag and payload, leaving other markdown intact."""
    return ANNOTATION_RE.sub('', text)


def _preceding_highlight(text: str, offset: int) -> str | None:
    """Return the ==highlight== text ending directly before offset, else None.

    Only the last HIGHLIGHT_LOOKBACK characters are searched, so a highlight
    that starts further back is not attached.
    """
    m = HIGHLIGHT_RE.search(text, max(0, offset - HIGHLIGHT_LOOKBACK), offset)
    return m.group(1) if m else None


def parse_annotations(text: str) -> list[Annotation]:
    """Return task/comment/reference annotations in source order.

    Structural tags (break, auto-bibliography) and unknown tags are skipped.
    A task payload starting with [ ] or [x] sets `completed` and the checkbox
    is dropped from the text.
    """
    annotations = []
    for m in ANNOTATION_RE.finditer(text):
        try:
            kind = AnnotationType(m.group(1))
        except ValueError:
            continue

        body = m.group(2)
        completed = False
        if kind == AnnotationType.task:
            box = TASK_CHECKBOX_RE.match(body)
            if box:
                completed = box.group(1).lower() == 'x'
                body = box.group(2)

        annotations.append(Annotation(
            type=kind,
            text=body.strip(),
            completed=completed,
            offset=m.start(),
            highlight=_preceding_highlight(text, m.start()),
        ))
    return annotations


def normalize_annotation_text(text: str) -> str:
    """Flatten text to one line that is safe inside an HTML comment."""
    text = text.replace('\r\n', ' ').replace('\n', ' ').replace('\r', ' ')
    text = text.replace('-->', '–->')
    return SPACES_RE.sub(' ', text).strip()


def format_annotation(kind: AnnotationType, text: str, completed: bool = False) -> str:
    """Build the annotation sentinel for kind and text, e.g. '<!-- ::comment:: note -->'."""
    kind = AnnotationType(kind)
    body = normalize_annotation_text(text)
    if kind == AnnotationType.task:
        body = f"{'[x]' if completed else '[ ]'} {body}".rstrip()
    return f"<!-- ::{kind.value}:: {body} -->"
