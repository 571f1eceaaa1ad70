import collections.abc
import re
import typing

__all__: collections.abc.Sequence[str] = ("make_url", "sanitize_url")

# Repeated slashes, except the pair following a scheme such as "https:".
_REPEATED_SLASHES: typing.Final = re.compile(r"(?<!:)/{2,}")


def sanitize_url(url: str, trailing_slash: bool = False) -> str:
    url = _REPEATED_SLASHES.sub("/", url)
    url = url.removesuffix("/")

    if trailing_slash and url:
        url += "/"

    return url


def make_url(*segments: object) -> str:
    return sanitize_url(
        "/".join(str(segment) for segment in segments if segment is not None and segment != ""),
    )
