"""
JSON report generation for merge runs.

A report lists every group found, its canonical color and the original
spelling of each member so palettes can be rewritten downstream.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..config import Settings
from ..merge.cluster import ColorGroup
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MergeReport:
    """Summary of a single merge run."""
    version: str                    # Report format version
    threshold: float                # CIEDE2000 threshold used
    total_colors: int               # Number of input colors
    group_count: int                # Number of groups, singletons included
    groups: List[Dict[str, Any]]    # One entry per reported group

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "version": self.version,
            "threshold": self.threshold,
            "total_colors": self.total_colors,
            "group_count": self.group_count,
            "groups": self.groups,
        }


def build_report(
    groups: Sequence[ColorGroup],
    threshold: float,
    total_colors: int,
    include_singletons: bool = True,
    settings: Optional[Settings] = None,
) -> MergeReport:
    """
    Build a report from merge results.

    Args:
        groups: Groups returned by merge_colors
        threshold: Threshold the groups were built with
        total_colors: Number of input colors
        include_singletons: Whether single-color groups are listed
        settings: Source of the report version

    Returns:
        MergeReport; ``group_count`` always counts every group
    """
    settings = settings or Settings()

    entries = [
        {
            "group_id": group.group_id,
            "canonical": group.canonical,
            "members": list(group.members),
            "indices": list(group.indices),
        }
        for group in groups
        if include_singletons or group.size > 1
    ]

    return MergeReport(
        version=settings.report_version,
        threshold=threshold,
        total_colors=total_colors,
        group_count=len(groups),
        groups=entries,
    )


def write_report_json(report: MergeReport, path: Path) -> Path:
    """
    Write a report to disk as indented JSON.

    Args:
        report: Report to write
        path: Destination file; parent directories are created

    Returns:
        Path that was written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Wrote report with {len(report.groups)} groups to {path}")
    return path
