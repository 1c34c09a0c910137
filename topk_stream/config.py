from __future__ import annotations

from typing import Any, Dict

import yaml

from .selector import TopKSelector


def load_config(path: str) -> Dict[str, Any]:
    """Load YAML configuration file into a Python dict.

    空文件返回空字典，缺省字段交给 ``merge_defaults`` 补齐。
    """
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return cfg or {}


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    # a bare `name:` key in YAML loads as None
    if cfg.get(name) is None:
        cfg[name] = {}
    return cfg[name]


def merge_defaults(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Merge safe defaults into a raw config dict, in place."""
    # 选择器
    _section(cfg, "selector")
    cfg["selector"].setdefault("capacity", 10)

    # 数据流：normal / uniform / integers
    _section(cfg, "stream")
    cfg["stream"].setdefault("length", 1000)
    cfg["stream"].setdefault("distribution", "normal")
    cfg["stream"].setdefault("seed", 42)
    cfg["stream"].setdefault("low", 0)
    cfg["stream"].setdefault("high", 100)

    # 评估与输出
    _section(cfg, "eval")
    cfg["eval"].setdefault("snapshot_interval", 100)
    cfg["eval"].setdefault("save_csv", False)
    cfg["eval"].setdefault("output_dir", "results")
    cfg["eval"].setdefault("verbose", True)

    return cfg


def build_selector(cfg: Dict[str, Any]) -> TopKSelector:
    return TopKSelector(cfg["selector"]["capacity"])
