"""
Console and JSON rendering of strategy results.
"""

from __future__ import annotations
import json
from typing import Iterable, Optional

from .codecs.sizes import encode_sizes
from .types.descriptors import SimulationConfig, StrategyResult

BOLD = "\033[1m"
RESET = "\033[0m"


def format_result(result: StrategyResult, color: bool = True) -> str:
    title = f"{BOLD}{result.name}{RESET}" if color else result.name
    return (
        f"{title}\n"
        f"Time taken: {result.duration_seconds:f}s\n"
        f"Fragmentation: {result.fragmentation_percent:.2f}%\n"
        f"Bytes failed: {result.failed_bytes} ({result.failed_percent:.2f}%)\n"
        f"\n"
    )


def format_free_list(sizes: Iterable[int]) -> str:
    return encode_sizes(sizes)


def format_results(results: Iterable[StrategyResult], color: bool = True,
                   dump_free_list: bool = False) -> str:
    parts = []
    for result in results:
        parts.append(format_result(result, color=color))
        if dump_free_list:
            parts.append(format_free_list(result.remaining_blocks))
            parts.append("\n")
    return ''.join(parts)


def format_json(results: Iterable[StrategyResult], config: Optional[SimulationConfig] = None,
                dump_free_list: bool = False) -> str:
    records = []
    for result in results:
        record = result.to_dict()
        if not dump_free_list:
            record.pop('remaining_blocks')
        records.append(record)

    document = {
        'config': config.to_dict() if config is not None else None,
        'results': records
    }
    return json.dumps(document, indent=2)
