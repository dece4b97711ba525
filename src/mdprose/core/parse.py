"""File discovery, frontmatter extraction, and markdown-it tokenization"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from mdprose.core.models import ParsedDoc


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx', '.markdown'}
BOM = '\ufeff'


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Return the shared MarkdownIt instance for a preset; parse() keeps no state between calls."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a leading YAML header (after an optional BOM) from the body.

    The body is everything after the closing fence; a header that is not a
    YAML mapping raises ValueError.
    """
    stripped = text.removeprefix(BOM)
    m = FRONTMATTER_RE.match(stripped)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, stripped[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single markdown file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def parse_text(text: str, parser_config: str = 'gfm-like', path: Path = None) -> ParsedDoc:
    """Split frontmatter from text and tokenize the body."""
    frontmatter, body = _strip_frontmatter(text)
    return ParsedDoc(
        path=path,
        raw_markdown=text,
        markdown=body,
        frontmatter=frontmatter,
        tokens=_make_parser(parser_config).parse(body),
    )


def parse_file(path: Path, parser_config: str = 'gfm-like') -> ParsedDoc:
    """Read and parse a single markdown file."""
    return parse_text(path.read_text(encoding='utf-8'), parser_config, path)
