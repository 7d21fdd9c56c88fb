from wiki.store import PageStore


__all__ = [
    "PageStore",
]
