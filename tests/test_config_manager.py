import pytest

from cubicat.config_manager import ConfigRegistry, ItemTable, KeyPairs, string_hash

WEAPONS = (
    "ID,Name,Atk\n"
    "sword,Blade,10\n"
    ",Blade+,12\n"
    ",,13\n"
    "shield,Guard,5"
)


@pytest.fixture
def registry():
    reg = ConfigRegistry()
    reg.load_from_buffer("weapons.csv", WEAPONS)
    return reg


def test_string_hash_fixed_values():
    assert string_hash("") == 0
    assert string_hash("a") == ord("a")


def test_string_hash_stays_within_31_bits():
    assert 0 <= string_hash("a fairly long key name " * 20) <= 0x7FFFFFFF


def test_key_pairs_round_trip():
    pairs = KeyPairs()
    pairs.set_value("hp", "100")
    pairs.set_value("hp", "120")
    assert pairs.get_value("hp") == "120"
    assert pairs.get_value("mp") is None


def test_item_table_insert_adds_levels():
    table = ItemTable()
    table.insert_key_pair("orc", 0, "hp", "10")
    table.insert_key_pair("orc", 0, "mp", "2")
    table.insert_key_pair("orc", 5, "hp", "20")
    assert table.get_item_level_count("orc") == 2
    assert table.get_key_pairs_by_level("orc", 1).get_value("mp") == "2"
    assert table.get_key_pairs_by_level("orc", 2).get_value("hp") == "20"
    assert table.get_key_pairs_by_level("orc", 3) is None
    assert table.get_key_pairs_by_level("elf", 1) is None


def test_item_table_rejects_level_zero():
    table = ItemTable()
    with pytest.raises(ValueError):
        table.get_key_pairs_by_level("orc", 0)


def test_levels_parsed(registry):
    assert registry.get_item_level_count("weapons.csv", "sword") == 3
    assert registry.get_item_level_count("weapons.csv", "shield") == 1
    assert registry.get_value("weapons.csv", "sword", 1, "Name") == "Blade"
    assert registry.get_value("weapons.csv", "sword", 2, "Name") == "Blade+"
    assert registry.get_value("weapons.csv", "sword", 3, "Atk") == "13"


def test_last_value_without_newline(registry):
    assert registry.get_value("weapons.csv", "shield", 1, "Atk") == "5"


def test_missing_value_falls_back_to_level_one(registry):
    assert registry.get_value("weapons.csv", "sword", 3, "Name") == "Blade"
    assert registry.get_value("weapons.csv", "sword", 3, "Name", False) is None


def test_missing_lookups_return_none(registry):
    assert registry.get_value("weapons.csv", "axe", 1, "Name") is None
    assert registry.get_value("other.csv", "sword", 1, "Name") is None
    assert registry.get_value("weapons.csv", "sword", 4, "Name") is None
    assert registry.get_item_level_count("other.csv", "sword") == 0
    assert registry.get_item_names("other.csv") == []
    assert registry.get_item_table("other.csv") is None


def test_names_sorted_and_reserved_hidden():
    reg = ConfigRegistry()
    reg.load_from_buffer("t.csv", "ID,V\nzeta,1\nint,2\nalpha,3\nstring,4\n")
    assert reg.get_item_names("t.csv") == ["alpha", "zeta"]
    assert reg.get_item_table("t.csv").get_table_count() == 4


def test_second_load_is_ignored(registry):
    registry.load_from_buffer("weapons.csv", "ID,Name\nsword,Other\n")
    assert registry.get_value("weapons.csv", "sword", 1, "Name") == "Blade"


def test_bytes_buffer_accepted():
    reg = ConfigRegistry()
    reg.load_from_buffer("b.csv", b"ID,Name\nhero,Ann\n")
    assert reg.get_value("b.csv", "hero", 1, "Name") == "Ann"


def test_too_many_columns_raises():
    reg = ConfigRegistry()
    with pytest.raises(ValueError):
        reg.load_from_buffer("bad.csv", "ID,A\nx,1,2\n")


def test_global_value():
    reg = ConfigRegistry()
    reg.load_from_buffer("Globals.csv", "Key,Value\nmax_hp,150\nspeed,7px\n")
    assert reg.get_global_value("max_hp") == 150
    assert reg.get_global_value("speed") == 7


def test_global_value_missing_raises():
    reg = ConfigRegistry()
    reg.load_from_buffer("Globals.csv", "Key,Value\nmax_hp,150\n")
    with pytest.raises(KeyError):
        reg.get_global_value("nothing")