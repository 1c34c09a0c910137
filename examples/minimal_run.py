"""最小可运行示例：按配置生成数据流，逐个喂给 TopKSelector 并记录快照。

运行方式：

    python examples/minimal_run.py [config.yaml]
"""

import os
import sys

import numpy as np

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from topk_stream import build_selector, load_config, merge_defaults
from topk_stream.stream import iter_stream, make_stream
from topk_stream.utils.metrics import MetricsRecorder, record_snapshot


def main() -> None:
    path = sys.argv[1] if len(sys.argv) > 1 else os.path.join(ROOT, "configs", "default.yaml")
    cfg = merge_defaults(load_config(path))

    values = make_stream(cfg)
    selector = build_selector(cfg)
    recorder = MetricsRecorder()
    interval = max(1, int(cfg["eval"]["snapshot_interval"]))
    verbose = bool(cfg["eval"]["verbose"])

    for step, v in enumerate(iter_stream(values), start=1):
        selector.feed(v)
        if step % interval == 0:
            row = record_snapshot(recorder, step, selector)
            if verbose:
                print(f"step {step}: top={row['top']:.4f}, kth={row['kth']}, evicted={row['evicted']}")

    # 最后一步总是记录
    record_snapshot(recorder, len(values), selector)
    final = recorder.last()
    print(f"seen={final['seen']}, kept={final['kept']}, discarded={final['discarded']}")

    # 与全量排序结果对照
    expected = np.sort(values)[::-1][: selector.capacity].tolist()
    print("Top-K:", selector.snapshot())
    print("Matches full sort:", selector.snapshot() == expected)

    if cfg["eval"]["save_csv"]:
        out_dir = cfg["eval"]["output_dir"]
        os.makedirs(out_dir, exist_ok=True)
        out = os.path.join(out_dir, "snapshots.csv")
        recorder.to_csv(out)
        print(f"Saved snapshots to {out}")


if __name__ == "__main__":
    main()
