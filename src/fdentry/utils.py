from .errors import InvalidEncoding


def split_param(key: str, /) -> tuple[str, str | None]:
    """Split `GenericName[es]` into `("GenericName", "es")`.

    Keys without a well-formed `[param]` suffix come back unchanged with a
    param of `None`.
    """
    if not key.endswith("]"):
        return key, None

    start = key.find("[")

    if start == -1:
        return key, None

    return key[:start], key[start + 1 : -1]


def decode(data: bytes, /) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line = data.count(b"\n", 0, exc.start) + 1
        start = data.rfind(b"\n", 0, exc.start) + 1
        end = data.find(b"\n", exc.start)
        raw = data[start:] if end == -1 else data[start:end]
        raise InvalidEncoding(
            line=line, text=raw.decode("utf-8", errors="replace")
        ) from exc
