"""Output-join policies applied to handler results."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from wsquery.domain.commands.value_objects import OutputJoin


def per_line(items: Iterable[str]) -> str:
    return "".join(f"{item}\n" for item in items)


def space_joined(items: Iterable[str]) -> str:
    return "".join(f"{item} " for item in items) + "\n"


def structured_pairs(pairs: Iterable[Sequence[str]]) -> str:
    return "".join(f"{first} {second}\n" for first, second in pairs)


def render(policy: OutputJoin, result: Any) -> str:
    if policy is OutputJoin.RAW:
        if not isinstance(result, str):
            raise TypeError(f"raw output requires a string, got {type(result).__name__}")
        return result
    if policy is OutputJoin.PER_LINE:
        return per_line(result)
    if policy is OutputJoin.SPACE_JOINED:
        return space_joined(result)
    if policy is OutputJoin.STRUCTURED_PAIR:
        return structured_pairs(result)
    raise ValueError(f"Unsupported output policy {policy}")


__all__ = ["per_line", "render", "space_joined", "structured_pairs"]
