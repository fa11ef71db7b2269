import unittest

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import MAC_PER_MAGIC, MAC_SIZE, MAGIC_HEADER, MAGIC_PACKET_SIZE
from mojo.wakeonlan.exceptions import InvalidHexError, InvalidLengthError
from mojo.wakeonlan.hardwareaddress import HardwareAddress, parse_from_bytes, parse_from_string
from mojo.wakeonlan.magicpacket import MagicPacket, build


class TestMagicPacketBuild(unittest.TestCase):

    def test_build_layout(self):
        mac = b"\x00\x01\x02\x03\x04\x05"
        packet = build(HardwareAddress(mac))
        payload = bytes(packet)

        assert len(payload) == MAGIC_PACKET_SIZE == 102
        assert payload[:len(MAGIC_HEADER)] == b"\xff" * 6, "The packet must start with six 0xFF bytes."
        for offset in range(len(MAGIC_HEADER), MAGIC_PACKET_SIZE, MAC_SIZE):
            assert payload[offset:offset + MAC_SIZE] == mac, f"Unexpected mac copy at offset={offset}"
        return

    def test_build_from_parsed_bytes(self):
        packet = build(parse_from_bytes(b"\x01\x02\x03\x04\x05\x06"))
        expected = bytes.fromhex("FFFFFFFFFFFF" + "010203040506" * 16)
        assert packet.payload == expected
        assert packet.into_inner() == expected
        return

    def test_build_all_ff_address(self):
        packet = build(HardwareAddress(b"\xff" * 6))
        assert len(packet) == MAC_SIZE * MAC_PER_MAGIC + len(MAGIC_HEADER)
        assert all(bval == 0xff for bval in bytes(packet))
        return

    def test_build_is_deterministic(self):
        addr = parse_from_string("de:ad:be:ef:00:01")
        first = build(addr)
        second = build(addr)
        assert first == second
        assert bytes(first) == bytes(second)
        assert hash(first) == hash(second)
        assert first.address is addr
        return

    def test_build_rejects_raw_bytes(self):
        with self.assertRaises(SemanticError):
            build(b"\x01\x02\x03\x04\x05\x06")
        return


class TestMagicPacketConstructors(unittest.TestCase):

    def test_from_bytes(self):
        packet = MagicPacket.from_bytes([0x00, 0x01, 0x02, 0x03, 0x04, 0x05])
        assert packet.address == HardwareAddress(b"\x00\x01\x02\x03\x04\x05")
        assert len(packet) == 102
        return

    def test_from_string(self):
        packet = MagicPacket.from_string("00-01-02-03-04-05", "-")
        assert packet == MagicPacket.from_bytes(b"\x00\x01\x02\x03\x04\x05")
        assert repr(packet) == "MagicPacket(address='00:01:02:03:04:05')"
        return

    def test_from_string_errors(self):
        with self.assertRaises(InvalidLengthError):
            MagicPacket.from_string("01:02:03:04:05", ":")
        with self.assertRaises(InvalidHexError):
            MagicPacket.from_string("01:02:03:04:05:GG", ":")
        with self.assertRaises(InvalidLengthError):
            MagicPacket.from_bytes(b"\x01\x02\x03\x04\x05\x06\x07")
        return


if __name__ == '__main__':
    unittest.main()
