"""Pattern file loader (one pattern per line)"""

from __future__ import annotations
from pathlib    import Path
from typing     import List


def load_patterns(path: str) -> List[str]:
    """
    Load Patterns
    - newlines are normalized first, blank lines are skipped
    """
    text = Path(path).read_text(encoding="utf-8")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return [line for line in text.split("\n") if line.strip()]
