from mapjoin.index import from_iterable


def declare(items):
    return from_iterable(items, lambda item, _index: item["id"])


def add_values(l, r, k):
    return {"id": k, "value": (l["value"] if l else 0) + (r["value"] if r else 0)}
