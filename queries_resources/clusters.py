"""
Word cluster maps (e.g. Brown clusters).

Cluster tables are tab-separated ``word<TAB>cluster`` rows. Words are
kept exactly as written in the resource: no normalization, case matters.
"""

from __future__ import annotations

from typing import BinaryIO, Dict, Optional

from .records import TAB, iter_records


def parse_clusters(stream: BinaryIO, *, source: Optional[str] = None) -> Dict[str, str]:
    """Parse a cluster table into {word: cluster id}."""
    result: Dict[str, str] = {}
    for word, cluster in iter_records(stream, TAB, source=source):
        result[word] = cluster
    return result
