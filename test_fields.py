from __future__ import annotations

import struct
import unittest

from sunhex.countries import CountryTable, default_table, ISO_3166_ALPHA2
from sunhex.errors import EncodingOverflow, InvalidFormat, UnknownCountry, UnsupportedVersion
from sunhex.fields import FieldCodec, day_offset, date_from_offset
from sunhex.record import PersonalInfo


def _info(**overrides) -> PersonalInfo:
    values = dict(
        first_name="Abdelhakim",
        last_name="Sahifa",
        country_code="MA",
        birth_year=2000,
        birth_month=1,
        birth_day=1,
        gender="Male",
    )
    values.update(overrides)
    return PersonalInfo(**values)


class CountryTableTests(unittest.TestCase):
    def test_lookup_both_ways(self):
        table = default_table()
        idx = table.index_of("MA")
        self.assertIsNotNone(idx)
        self.assertEqual(table.code_at(idx), "MA")
        self.assertEqual(table.index_of("ma"), idx)
        self.assertIn("ma", table)

    def test_order_is_stable(self):
        table = default_table()
        self.assertEqual(table.code_at(0), "AD")
        self.assertEqual(table.index_of("MA"), 136)
        self.assertEqual(len(table), len(ISO_3166_ALPHA2))

    def test_out_of_range_index(self):
        table = default_table()
        self.assertEqual(table.code_at(len(table)), "??")
        self.assertEqual(table.code_at(-1), "??")
        self.assertIsNone(table.index_of("XX"))

    def test_rejects_duplicates(self):
        with self.assertRaises(ValueError):
            CountryTable(["MA", "FR", "ma"])


class DayOffsetTests(unittest.TestCase):
    def test_epoch_and_bounds(self):
        self.assertEqual(day_offset(1900, 1, 1), 0)
        self.assertEqual(day_offset(2000, 1, 1), 36524)
        self.assertEqual(day_offset(2079, 6, 6), 0xFFFF)
        self.assertEqual(date_from_offset(0xFFFF).isoformat(), "2079-06-06")

    def test_out_of_range(self):
        with self.assertRaises(EncodingOverflow):
            day_offset(1899, 12, 31)
        with self.assertRaises(EncodingOverflow):
            day_offset(2079, 6, 7)

    def test_invalid_calendar_date(self):
        with self.assertRaises(InvalidFormat):
            day_offset(2001, 2, 29)
        with self.assertRaises(InvalidFormat):
            day_offset(2000, 13, 1)

    def test_leap_day(self):
        self.assertEqual(date_from_offset(day_offset(2000, 2, 29)).isoformat(), "2000-02-29")


class FieldCodecPackTests(unittest.TestCase):
    def setUp(self):
        self.codec = FieldCodec()

    def test_layout(self):
        data = self.codec.pack(_info())
        name = "Abdelhakim Sahifa".encode("utf-8")
        self.assertEqual(data[:7], struct.pack(">BBHHB", 1, 1, 136, 36524, len(name)))
        self.assertEqual(data[7:], name)
        self.assertEqual(len(data), 7 + len(name))

    def test_gender_codes(self):
        for gender, code in (("Male", 1), ("Female", 2), ("Other", 3), ("unknown", 0), ("", 0)):
            self.assertEqual(self.codec.pack(_info(gender=gender))[1], code)

    def test_country_is_case_insensitive(self):
        self.assertEqual(self.codec.pack(_info(country_code="ma")), self.codec.pack(_info()))

    def test_unknown_country_falls_back_to_first_entry(self):
        data = self.codec.pack(_info(country_code="ZZ"))
        self.assertEqual(struct.unpack(">H", data[2:4])[0], 0)
        self.assertEqual(self.codec.unpack(data).country_code, "AD")

    def test_unknown_country_strict(self):
        codec = FieldCodec(strict_country=True)
        with self.assertRaises(UnknownCountry):
            codec.pack(_info(country_code="ZZ"))
        self.assertEqual(codec.unpack(codec.pack(_info())).country_code, "MA")

    def test_name_length_limit(self):
        # "A"*127 + " " + "B"*127 is exactly 255 bytes
        ok = _info(first_name="A" * 127, last_name="B" * 127)
        self.assertEqual(self.codec.pack(ok)[6], 255)
        with self.assertRaises(EncodingOverflow):
            self.codec.pack(_info(first_name="A" * 128, last_name="B" * 127))

    def test_name_limit_counts_utf8_bytes(self):
        # two bytes per character: 128 + 1 + 126 = 255 fits, 128 + 1 + 128 does not
        self.assertEqual(self.codec.pack(_info(first_name="é" * 64, last_name="é" * 63))[6], 255)
        with self.assertRaises(EncodingOverflow):
            self.codec.pack(_info(first_name="é" * 64, last_name="é" * 64))

    def test_date_out_of_range(self):
        with self.assertRaises(EncodingOverflow):
            self.codec.pack(_info(birth_year=1850))
        with self.assertRaises(EncodingOverflow):
            self.codec.pack(_info(birth_year=2100))


class FieldCodecUnpackTests(unittest.TestCase):
    def setUp(self):
        self.codec = FieldCodec()

    def test_roundtrip(self):
        for info in (
            _info(),
            _info(first_name="Ana", last_name="de la Cruz", country_code="ES", gender="Female"),
            _info(first_name="Jürgen", last_name="Müller", country_code="DE", birth_year=1900, birth_day=1),
            _info(first_name="", last_name="", gender="Other", birth_year=2079, birth_month=6, birth_day=6),
        ):
            self.assertEqual(self.codec.unpack(self.codec.pack(info)), info)

    def test_unknown_gender_decodes_as_other(self):
        out = self.codec.unpack(self.codec.pack(_info(gender="n/a")))
        self.assertEqual(out.gender, "Other")
        raw = bytearray(self.codec.pack(_info()))
        raw[1] = 0x7F
        self.assertEqual(self.codec.unpack(bytes(raw)).gender, "Other")

    def test_last_name_keeps_spaces(self):
        raw = struct.pack(">BBHHB", 1, 2, 0, 0, 11) + b"Mary Jo Ann"
        out = self.codec.unpack(raw)
        self.assertEqual(out.first_name, "Mary")
        self.assertEqual(out.last_name, "Jo Ann")

    def test_out_of_range_country_index(self):
        raw = struct.pack(">BBHHB", 1, 1, 0xFFFF, 0, 1) + b"X"
        self.assertEqual(self.codec.unpack(raw).country_code, "??")

    def test_rejects_other_versions(self):
        raw = bytearray(self.codec.pack(_info()))
        raw[0] = 2
        with self.assertRaises(UnsupportedVersion) as cm:
            self.codec.unpack(bytes(raw))
        self.assertEqual(cm.exception.version, 2)
        self.assertEqual(cm.exception.expected, 1)

    def test_rejects_bad_lengths(self):
        data = self.codec.pack(_info())
        for bad in (b"", data[:6], data[:-1], data + b"\x00"):
            with self.assertRaises(InvalidFormat):
                self.codec.unpack(bad)

    def test_rejects_invalid_utf8(self):
        raw = struct.pack(">BBHHB", 1, 1, 0, 0, 2) + b"\xff\xfe"
        with self.assertRaises(InvalidFormat):
            self.codec.unpack(raw)


if __name__ == "__main__":
    unittest.main()
