"""
This module contains helpers for loading argument defaults from configuration
data, such as configuration files and environment variables.

Defaults are flat mappings from argument names to raw text values. They are
passed to `parse` or `options` and go through the same conversion as values
given on the command line.
"""

import os
import sys
import typing

Defaults = typing.Dict[str, str]


def to_text(value: typing.Any) -> str:
    """
    Convert a scalar configuration value to the text of a command-line token.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def flatten(data: typing.Mapping) -> Defaults:
    """
    Keep the scalar values of a configuration document, as text.
    """
    return {
        str(key): to_text(value)
        for key, value in data.items()
        if value is not None and not isinstance(value, (dict, list, tuple, set))
    }


def resolve_paths(files: typing.Iterable[str],
                  search_paths: typing.Iterable[str]) -> typing.List[str]:
    """
    Resolve relative filenames against the search paths. The first existing
    match is used; names with no match are kept as is.
    """
    result = []
    for filename in files:
        if not os.path.isabs(filename):
            for path in search_paths:
                pathname = os.path.join(path, filename)
                if os.path.isfile(pathname) or os.path.islink(pathname):
                    filename = pathname
                    break
        result.append(filename)
    return result


def load_defaults(*files: str, ignore_missing: bool = False,
                  node: typing.Union[str, typing.List[str]] = None,
                  search_paths: typing.List[str] = None) -> Defaults:
    """
    Load defaults from configuration files, later files overriding earlier ones.

    Any format supported by `anyconfig` can be used (JSON, YAML, INI, TOML...).

    If *ignore_missing* is enabled, configuration files that do not exist will not
    cause exceptions to be raised.

    The *node* argument is the path of the node to extract. If omitted, the root
    document is used.

    The *search_paths* argument is a list of paths to search into when a path is
    relative. It defaults to the current directory, then `sys.path`.
    """
    import anyconfig  # pylint: disable=import-outside-toplevel

    if search_paths is None:
        search_paths = [os.getcwd()] + sys.path

    data = anyconfig.load(resolve_paths(files, search_paths), ignore_missing=ignore_missing)
    data = data or {}

    if node:
        for item in [node] if isinstance(node, str) else node:
            data = data.get(item, {}) if isinstance(data, dict) else {}

    return flatten(data if isinstance(data, dict) else {})


def environ_defaults(prefix: str, *, environ: typing.Mapping[str, str] = None) -> Defaults:
    """
    Get defaults from environment variables.

    The *prefix* is a string argument that defines the prefix (case sensitive) to
    look for in environment variables. The rest of the variable name is lower
    cased, with underscores replaced by dashes: with a prefix of `APP_`, the
    variable `APP_LOG_LEVEL` sets the default of `log-level`.

    The *environ* argument defaults to `os.environ`.
    """
    environ = os.environ if environ is None else environ

    data = {}
    for key, value in environ.items():
        if not key.startswith(prefix) or key == prefix:
            continue
        data[key[len(prefix):].lower().replace('_', '-')] = value

    return data


def merge_defaults(*sources: typing.Optional[typing.Mapping[str, str]]) -> Defaults:
    """
    Merge default mappings, with values in later sources taking precedence.

    >>> merge_defaults({'name': 'a', 'age': '1'}, None, {'name': 'b'})
    {'name': 'b', 'age': '1'}
    """
    result = {}
    for item in sources:
        result.update(item or {})
    return result
