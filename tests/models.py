import msgspec


class Record(msgspec.Struct):
    a: int


class Nested(msgspec.Struct):
    name: str
    tags: list[str]
    scores: dict[str, float]
    parent: Record | None = None
