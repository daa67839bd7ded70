"""Tables of per-item, per-level attributes loaded from CSV text."""

from __future__ import annotations

import re

_HASH_SEED = 131
_HASH_MASK = 0x7FFFFFFF
_UINT32 = 0xFFFFFFFF
_HIDDEN_NAMES = frozenset({"string", "int"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

GLOBALS_CONFIG = "Globals.csv"
GLOBALS_VALUE_KEY = "Value"


def string_hash(text: str) -> int:
    """31-bit multiplicative hash of the UTF-8 bytes of ``text``."""
    value = 0
    for byte in text.encode("utf-8"):
        value = (value * _HASH_SEED + byte) & _UINT32
    return value & _HASH_MASK


def _atoi(text: str) -> int:
    """Parse a leading integer the way C ``atoi`` does; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class KeyPairs:
    """Attribute values of one item level, looked up by hashed key."""

    def __init__(self) -> None:
        self._values: dict[int, str] = {}

    def get_value(self, key: str) -> str | None:
        return self._values.get(string_hash(key))

    def set_value(self, key: str, value: str) -> None:
        self._values[string_hash(key)] = value


class ItemTable:
    """Items by name, each with a list of levels (level 1 comes first)."""

    def __init__(self) -> None:
        self._table: dict[str, list[KeyPairs]] = {}

    def get_key_pairs_by_level(self, name: str, level: int) -> KeyPairs | None:
        """Return the attributes of ``name`` at 1-based ``level``, or None."""
        if level <= 0:
            raise ValueError("level must be 1 or greater")
        levels = self._table.get(name)
        if levels is None or level > len(levels):
            return None
        return levels[level - 1]

    def get_names(self) -> list[str]:
        """Sorted item names, leaving out the reserved ``string`` and ``int``."""
        return [name for name in sorted(self._table) if name not in _HIDDEN_NAMES]

    def get_table_count(self) -> int:
        return len(self._table)

    def get_item_level_count(self, name: str) -> int:
        return len(self._table.get(name, ()))

    def insert_key_pair(self, name: str, index: int, key: str, value: str) -> None:
        """Set ``key`` at 0-based ``index``; an index past the end adds a level."""
        levels = self._table.setdefault(name, [])
        if index >= len(levels):
            pairs = KeyPairs()
            pairs.set_value(key, value)
            levels.append(pairs)
        else:
            levels[index].set_value(key, value)


def _parse_table(text: str) -> ItemTable:
    """Build an item table from comma separated text.

    The first line names the columns. A row whose first cell holds a name
    starts a new item; a row whose first cell is empty adds the next level
    of the item above it.
    """
    table = ItemTable()
    headers: list[str] = []
    level = 0
    line_count = 0
    column = 0
    start = 0
    end = 0
    category = ""
    recording = False
    last = len(text) - 1

    for pos, letter in enumerate(text):
        line_end = False
        next_column = False
        if letter in "\r\n":
            line_end = True
            if recording:
                recording = False
                end = pos
        elif letter == ",":
            if recording:
                recording = False
                end = pos
            next_column = True
        else:
            if not recording:
                recording = True
                start = pos
            if pos == last:
                end = pos + 1

        if end > start:
            value = text[start:end]
            if column == 0:
                level = 0
                category = value
            if line_count == 0:
                headers.append(value)
            elif column > 0:
                if column >= len(headers):
                    raise ValueError(
                        f"line {line_count + 1} has more columns than the header"
                    )
                table.insert_key_pair(category, level, headers[column], value)
            start = end
        elif column == 0:
            level += 1

        if line_end:
            line_count += 1
            column = 0
        if next_column:
            column += 1
    return table


class ConfigRegistry:
    """Loaded configuration tables, keyed by the hash of their names."""

    def __init__(self) -> None:
        self._configs: dict[int, ItemTable] = {}

    def load_from_buffer(self, config_name: str, buffer: str | bytes) -> ItemTable:
        """Parse ``buffer`` as ``config_name``; a name already loaded is kept as is."""
        name_hash = string_hash(config_name)
        existing = self._configs.get(name_hash)
        if existing is not None:
            return existing
        text = buffer.decode("utf-8") if isinstance(buffer, (bytes, bytearray)) else buffer
        table = _parse_table(text)
        self._configs[name_hash] = table
        return table

    def get_item_table(self, config_name: str) -> ItemTable | None:
        return self._configs.get(string_hash(config_name))

    def get_key_pairs(self, config_name: str, item_id: str, level: int) -> KeyPairs | None:
        table = self.get_item_table(config_name)
        if table is None:
            return None
        return table.get_key_pairs_by_level(item_id, level)

    def get_value(
        self,
        config_name: str,
        item_id: str,
        level: int,
        key: str,
        use_level1_as_default: bool = True,
    ) -> str | None:
        """Look up an attribute, falling back to level 1 when it is missing."""
        pairs = self.get_key_pairs(config_name, item_id, level)
        if pairs is None:
            return None
        value = pairs.get_value(key)
        if value is not None:
            return value
        if use_level1_as_default:
            first = self.get_key_pairs(config_name, item_id, 1)
            if first is not None:
                return first.get_value(key)
        return None

    def get_item_level_count(self, config_name: str, item_id: str) -> int:
        table = self.get_item_table(config_name)
        return table.get_item_level_count(item_id) if table is not None else 0

    def get_item_names(self, config_name: str) -> list[str]:
        table = self.get_item_table(config_name)
        return table.get_names() if table is not None else []

    def get_global_value(self, name: str) -> int:
        """Integer ``Value`` of ``name`` in the ``Globals.csv`` table."""
        value = self.get_value(GLOBALS_CONFIG, name, 1, GLOBALS_VALUE_KEY)
        if value is None:
            raise KeyError(name)
        return _atoi(value)