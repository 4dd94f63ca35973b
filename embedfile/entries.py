import os
from types import MappingProxyType

from tqdm import tqdm

from .errors import InputReadError
from .logger import logger

SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)

def display_name(path, preserve_paths=False):
    if preserve_paths:
        return path
    cut = max(path.rfind(sep) for sep in SEPARATORS)
    return path[cut + 1:]

class EmbeddedEntry:
    __slots__ = ("path", "name", "data")

    def __init__(self, path, name, data):
        self.path = path
        self.name = name
        self.data = bytes(data)

    @property
    def length(self):
        return len(self.data)

    def __repr__(self):
        return f"EmbeddedEntry(name={self.name!r}, length={self.length})"

def read_entry(path, preserve_paths=False):
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise InputReadError(f"Could not open file: '{path}' ({e.strerror})", path=path) from e
    return EmbeddedEntry(path, display_name(path, preserve_paths), data)

class EmbeddedBundle:
    """
    Ordered embedded entries plus a name -> entry mapping.

    The entry order is the order of the generated tables. Lookups follow the
    generated C function: the first entry carrying a name wins.
    """

    def __init__(self, entries):
        self.entries = tuple(entries)
        by_name = {}
        for entry in self.entries:
            if entry.name in by_name:
                logger.warning(
                    f"'{entry.path}' is embedded as '{entry.name}' which is already taken by "
                    f"'{by_name[entry.name].path}'; it will not be reachable by name")
                continue
            by_name[entry.name] = entry
        self.by_name = MappingProxyType(by_name)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def names(self):
        return [entry.name for entry in self.entries]

    def lookup(self, name):
        entry = self.by_name.get(name)
        if entry is None:
            return None
        return entry.data, entry.length

def read_bundle(input_files, preserve_paths=False):
    entries = []
    for path in tqdm(input_files, desc="Embedding files", unit="file", disable=None, leave=False):
        entry = read_entry(path, preserve_paths)
        logger.debug(f"Read {entry.length} bytes from {path}")
        entries.append(entry)
    return EmbeddedBundle(entries)
