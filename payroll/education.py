"""Academic background of a faculty member."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Education:
    """Degree, major and number of research projects."""

    degree: str = "NULL"
    major: str = "NULL"
    research_num: int = 0