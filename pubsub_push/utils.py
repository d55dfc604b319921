# pubsub_push/utils.py

from typing import Iterable, Union
from urllib.parse import quote


def extend_items(existing: Iterable[str], new_items: Union[str, Iterable[str]]) -> list[str]:
    """
    Dokleja nowe elementy do listy (suma zbiorów, bez duplikatów).
    String traktujemy jak listę rozdzieloną przecinkami, np. "a,b".
    """
    if isinstance(new_items, str):
        new_items = [p.strip() for p in new_items.split(",")]

    merged: list[str] = []
    for item in [*existing, *new_items]:
        if not item or item in merged:
            continue
        merged.append(item)
    return merged


def join_items(items: Iterable[str]) -> str:
    return ",".join(items)


def url_encode(value: str) -> str:
    return quote(str(value), safe="")
