import datetime
import unittest

from smbcodec.exceptions import SMBCodecException
from smbcodec.protocol.smb.primitives import U64
from smbcodec.protocol.smb.structures.smbtime import SMB_DATE, SMB_TIME
from smbcodec.protocol.smb.structures.filetime import FILETIME
from smbcodec.protocol.smb.structures.directory import SMB_RESUME_KEY, SMB_DIRECTORY_INFORMATION
from smbcodec.utils.hexdump import hexdump, from_hexstring


class TestTimes(unittest.TestCase):
	def test_smb_date(self):
		d = SMB_DATE.from_date(datetime.date(2021, 12, 31))
		self.assertEqual(SMB_DATE.from_bytes(d.to_bytes()).to_date(), datetime.date(2021, 12, 31))
		self.assertIsNone(SMB_DATE().to_date())

	def test_smb_time_two_second_units(self):
		t = SMB_TIME(23, 59, 59)
		self.assertEqual(SMB_TIME.from_bytes(t.to_bytes()).Seconds, 58)

	def test_filetime(self):
		dt = datetime.datetime(2020, 1, 1, tzinfo = datetime.timezone.utc)
		ft = FILETIME.from_datetime(dt)
		self.assertEqual(ft.value, 132223104000000000)
		self.assertEqual(FILETIME.from_bytes(ft.to_bytes()).datetime, dt)

	def test_filetime_past_datetime_range(self):
		raw = U64.encode(0x7FFFFFFFFFFFFFFF)
		ft = FILETIME.from_bytes(raw)
		self.assertEqual(ft.value, 0x7FFFFFFFFFFFFFFF)
		self.assertEqual(ft.datetime.year, 9999)
		self.assertEqual(ft.to_bytes(), raw)
		self.assertEqual(FILETIME(0x7FFFFFFFFFFFFFFF), ft)

class TestDirectory(unittest.TestCase):
	def test_sizes(self):
		self.assertEqual(len(SMB_RESUME_KEY().to_bytes()), SMB_RESUME_KEY.size)
		entry = SMB_DIRECTORY_INFORMATION()
		entry.FileName = b'A.TXT'
		raw = entry.to_bytes()
		self.assertEqual(len(raw), SMB_DIRECTORY_INFORMATION.size)
		self.assertEqual(raw[-13:], b'A.TXT       \x00')
		self.assertEqual(SMB_DIRECTORY_INFORMATION.from_bytes(raw).FileName, b'A.TXT')

	def test_long_name_is_rejected(self):
		entry = SMB_DIRECTORY_INFORMATION()
		entry.FileName = b'LONGNAME.TEXT'
		with self.assertRaises(SMBCodecException):
			entry.to_bytes()

class TestHexdump(unittest.TestCase):
	def test_from_hexstring(self):
		self.assertEqual(from_hexstring('0x00 0a:FF\n'), b'\x00\x0a\xff')

	def test_hexdump(self):
		out = hexdump(b'AB\x00')
		self.assertTrue(out.startswith('00000000:  41 42 00'))
		self.assertTrue(out.endswith('|AB.|'))

if __name__ == '__main__':
	unittest.main()
