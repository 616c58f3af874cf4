"""
Common prefix stripping for stack frame file paths.

Frames from one program usually share a long leading directory (or URL
origin plus directory). Removing the segments every path has in common
keeps the rendered trace short while each path stays distinguishable:

    /srv/app/static/js/main.js      ->  main.js
    /srv/app/static/js/util.js      ->  util.js

Segments are removed in lock-step across all paths, never independently.

URLs are reduced to their path before splitting, so a query string or
fragment is dropped from a compacted name (https://h/js/app.js?v=3 becomes
app.js). Uncompacted results keep the original strings.
"""

from typing import List, Sequence, Tuple
from urllib.parse import urlsplit


def split_path(path: str) -> Tuple[str, str]:
    """Split a path into (dirname, basename) at the last '/'."""
    if '/' in path:
        idx = path.rindex('/')
        return path[:idx], path[idx + 1:]
    return '', path


def join_path(directory: str, filename: str) -> str:
    """Join a directory and a filename; an empty directory yields the filename."""
    if directory:
        return '/'.join((directory, filename))
    return filename


def _path_component(path: str) -> str:
    parts = urlsplit(path)
    # Single letters are drive letters (C:/x.py), not URL schemes
    if len(parts.scheme) > 1:
        return parts.path
    return path


def strip_common_prefix(paths: Sequence[str]) -> List[str]:
    """Remove the leading directory segments shared by every path.

    Returns the inputs unchanged when there are fewer than two, when no
    segment is shared, or when any of them cannot be parsed as a URL.
    """
    paths = list(paths)
    if len(paths) < 2:
        return paths

    pieces = []
    try:
        for path in paths:
            directory, filename = split_path(_path_component(path))
            segments = directory.split('/') if directory else []
            if segments and segments[0] == '':
                # Leading '/' is the root, not a shared directory
                segments = segments[1:]
            pieces.append([segments, filename])
    except ValueError:
        return paths

    reference = max((p[0] for p in pieces), key=len)
    reference = list(reference)

    stripped = 0
    for segment in reference:
        if all(p[0] and p[0][0] == segment for p in pieces):
            for piece in pieces:
                piece[0] = piece[0][1:]
            stripped += 1

    if not stripped:
        return paths
    return [join_path('/'.join(segments), filename)
            for segments, filename in pieces]
