"""Result models for annotations, goals, and section/document statistics"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class AnnotationType(str, Enum):
    task = "task"
    comment = "comment"
    reference = "reference"


class GoalType(str, Enum):
    minimum = "min"
    maximum = "max"
    approx = "approx"


class GoalStatus(str, Enum):
    met = "met"
    warning = "warning"
    not_met = "not_met"


class Annotation(BaseModel):
    """An annotation block found in markdown source."""
    type: AnnotationType
    text: str
    completed: bool = False         # tasks only
    offset: int                     # character offset of '<!--' in the source
    highlight: Optional[str] = None # ==highlight== text directly before the block


class GoalThresholds(BaseModel):
    """Percent thresholds separating met / warning / not_met goal states."""
    min_warning_percent:   float = Field(default=80,  ge=0)
    max_warning_percent:   float = Field(default=105, ge=100)
    approx_green_percent:  float = Field(default=5,   ge=0)
    approx_orange_percent: float = Field(default=8,   ge=0)


class GoalProgress(BaseModel):
    goal: int
    goal_type: GoalType
    word_count: int
    ratio: float
    status: GoalStatus


class SectionStats(BaseModel):
    """Word statistics for one outline section."""
    position: int
    title: str
    level: int                      # heading level 1-6; 0 for the preamble
    word_count: int
    pseudo: bool = False            # opened by a section-break sentinel
    bibliography: bool = False


class DocumentStats(BaseModel):
    path: Optional[str] = None
    word_count: int
    prose_word_count: int           # bibliography excluded when configured
    sections: list[SectionStats] = []
    annotations: dict[str, int] = {}
    goal: Optional[GoalProgress] = None


@dataclass
class ParsedDoc:
    """Internal load result carrying markdown-it tokens; not serialized."""
    path:         Optional[Path]
    raw_markdown: str          # full content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    frontmatter:  dict[str, Any]
    tokens:       list         # markdown-it Token objects
