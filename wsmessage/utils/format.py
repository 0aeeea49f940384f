from __future__ import annotations


def format_size(data: bytes | str) -> str:
    unit = 'chars' if isinstance(data, str) else 'bytes'
    return f'{len(data)} {unit}'


def elide(value: str, width: int = 100) -> str:
    return value if len(value) <= width else f'{value[: width - 3]}...'
