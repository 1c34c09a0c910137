from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from ..errors import Underfilled
from ..selector import TopKSelector


@dataclass
class MetricsRecorder:
    """按步记录选择器快照。

    每行以 ``step`` 为首列；同一步重复记录时覆盖旧行。
    """

    rows: List[Dict[str, Any]] = field(default_factory=list)

    def add(self, step: int, row: Dict[str, Any]) -> Dict[str, Any]:
        entry = {"step": int(step)}
        entry.update(row)
        if self.rows and self.rows[-1]["step"] == entry["step"]:
            self.rows[-1] = entry
        else:
            self.rows.append(entry)
        return entry

    def last(self) -> Optional[Dict[str, Any]]:
        return self.rows[-1] if self.rows else None

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows).set_index("step") if self.rows else pd.DataFrame()

    def to_csv(self, path: str) -> pd.DataFrame:
        df = self.to_dataframe()
        df.to_csv(path)
        return df


def record_snapshot(recorder: MetricsRecorder, step: int, selector: TopKSelector) -> Dict[str, Any]:
    snap = selector.snapshot()
    try:
        kth = selector.kth()
    except Underfilled:
        kth = None
    row: Dict[str, Any] = {"top": snap[0] if snap else None, "kth": kth}
    row.update(selector.stats())
    return recorder.add(step, row)
