import pytest

from cloudflare_ddns.zone_id import ZoneId
from cloudflare_ddns.exceptions import ConfigError, InvalidHexDigit, MalformedLength


# ==============================
# TEST GROUP: Parse / Render I/O
# ==============================
@pytest.mark.parametrize(
    "hex_string, expected",
    [
        # ✅ Canonical lowercase
        ("30ed3e88cd9a56e0eb2b326a63500f4e", "30ed3e88cd9a56e0eb2b326a63500f4e"),

        # ✅ Uppercase normalizes to lowercase
        ("0E3C65BFEC2453A4AE85A492C09DBE5C", "0e3c65bfec2453a4ae85a492c09dbe5c"),

        # ✅ All zeros / all ones
        ("0" * 32, "0" * 32),
        ("f" * 32, "f" * 32),
    ],
)
def test_render_parse_round_trip(hex_string, expected):
    zid = ZoneId.parse(hex_string)

    assert zid.render() == expected
    assert str(zid) == expected
    assert ZoneId.parse(zid.render()) == zid


def test_zone_id_is_immutable_value():
    a = ZoneId.parse("30ed3e88cd9a56e0eb2b326a63500f4e")
    b = ZoneId.parse("30ED3E88CD9A56E0EB2B326A63500F4E")

    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(AttributeError):
        a.raw = b"\x00" * 16


# =============================
# TEST GROUP: Malformed Input
# =============================
@pytest.mark.parametrize(
    "hex_string",
    [
        "30ed3e88cd9a56e0eb2b326a63500fe",     # 31 chars
        "30ed3e88cd9a56e0eb2b326a63500feee",   # 33 chars
        "",
    ],
)
def test_zone_id_wrong_length(hex_string):
    with pytest.raises(MalformedLength, match="Hex string must be 32 characters long"):
        ZoneId.parse(hex_string)


@pytest.mark.parametrize(
    "hex_string, position, value",
    [
        ("00zzzzzzzzzzzzzzzzzzzzzzzzzzzzzz", 1, "zz"),
        ("0000zzzzzzzzzzzzzzzzzzzzzzzzzzzz", 2, "zz"),
        ("zz" + "0" * 30, 0, "zz"),
        ("0" * 30 + "0g", 15, "0g"),

        # ❌ int() would accept these, a zone ID must not
        ("+f" + "0" * 30, 0, "+f"),
        (" f" + "0" * 30, 0, " f"),
    ],
)
def test_invalid_hex(hex_string, position, value):
    with pytest.raises(InvalidHexDigit) as excinfo:
        ZoneId.parse(hex_string)

    assert excinfo.value.position == position
    assert excinfo.value.value == value
    assert str(excinfo.value) == f"Invalid hex byte at position {position}: {value}"


def test_parse_errors_are_config_errors():
    with pytest.raises(ConfigError):
        ZoneId.parse("nope")


# ============================
# TEST GROUP: Helpers
# ============================
def test_from_bytes():
    zid = ZoneId.from_bytes(bytes(range(16)))

    assert zid.render() == "000102030405060708090a0b0c0d0e0f"

    with pytest.raises(MalformedLength):
        ZoneId.from_bytes(b"\x00" * 15)


def test_parse_many():
    zones = ZoneId.parse_many(
        " 0e3c65bfec2453a4ae85a492c09dbe5c, 191b0dc2fa5002fd4dfe517a430b78f2\n"
        "2407484328fca8298a86e6d80abf9b70,,"
    )

    assert [str(z) for z in zones] == [
        "0e3c65bfec2453a4ae85a492c09dbe5c",
        "191b0dc2fa5002fd4dfe517a430b78f2",
        "2407484328fca8298a86e6d80abf9b70",
    ]
    assert ZoneId.parse_many("   ") == []
