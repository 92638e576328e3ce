import pathlib
from typing import Union
from urllib.parse import quote, unquote, urlparse

__all__ = ["DocumentUri", "URI", "from_fs_path", "to_fs_path", "normalize"]


DocumentUri = str
URI = str


def from_fs_path(path: Union[str, pathlib.Path]) -> DocumentUri:
    return pathlib.Path(path).resolve().as_uri()


def to_fs_path(uri: DocumentUri) -> pathlib.Path:
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise ValueError(f"not a file URI: {uri}")
    path = unquote(parsed.path)
    if parsed.netloc:
        # UNC share
        return pathlib.Path(f"//{parsed.netloc}{path}")
    return pathlib.Path(path)


def normalize(uri: DocumentUri) -> DocumentUri:
    """
    Re-quote the path of a URI so that equal paths compare equal.
    """
    parsed = urlparse(uri)
    return parsed._replace(path=quote(unquote(parsed.path))).geturl()
