import unittest

from smbcodec.exceptions import SMBOddByteLength, SMBInternalInvariant, SMBTooShort
from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.envelope import SMBParameters, SMBData, SMBAndX


class TestParameters(unittest.TestCase):
	def test_words(self):
		params = SMBParameters()
		params.add_word(0x1234)
		params.add_words_from_bytes(b'\x01\x00\x02\x00')
		self.assertEqual(params.WordCount, 3)
		self.assertEqual(params.get_word(2), 2)
		self.assertEqual(params.to_bytes(), b'\x03\x34\x12\x01\x00\x02\x00')

	def test_odd_length(self):
		params = SMBParameters()
		with self.assertRaises(SMBOddByteLength):
			params.add_words_from_bytes(b'\x01')

	def test_count_mismatch(self):
		params = SMBParameters()
		params.WordCount = 2
		params.Words = b'\x00\x00'
		with self.assertRaises(SMBInternalInvariant):
			params.to_bytes()

	def test_too_many_words(self):
		params = SMBParameters()
		params.add_words_from_bytes(b'\x00' * 512)
		with self.assertRaises(SMBInternalInvariant):
			params.to_bytes()

	def test_truncated(self):
		with self.assertRaises(SMBTooShort):
			SMBParameters.from_bytes(b'\x02\x00\x00\x00')

class TestData(unittest.TestCase):
	def test_roundtrip(self):
		data = SMBData()
		data.add(b'abc')
		self.assertEqual(data.to_bytes(), b'\x03\x00abc')
		self.assertEqual(SMBData.from_bytes(b'\x03\x00abc').Bytes, b'abc')

	def test_count_mismatch(self):
		data = SMBData()
		data.ByteCount = 4
		data.Bytes = b'abc'
		with self.assertRaises(SMBInternalInvariant):
			data.to_bytes()

class TestAndX(unittest.TestCase):
	def test_default_terminates_chain(self):
		andx = SMBAndX()
		self.assertTrue(andx.is_last)
		self.assertEqual(andx.to_bytes(), b'\xff\x00\x00\x00')

	def test_known_command(self):
		andx = SMBAndX.from_bytes(b'\x75\x00\x48\x00')
		self.assertEqual(andx.AndXCommand, SMBCommand.SMB_COM_TREE_CONNECT_ANDX)
		self.assertEqual(andx.AndXOffset, 0x48)
		self.assertFalse(andx.is_last)

	def test_unknown_command_is_kept(self):
		andx = SMBAndX.from_bytes(b'\x99\x00\x10\x00')
		self.assertEqual(andx.AndXCommand, 0x99)
		self.assertEqual(andx.to_bytes(), b'\x99\x00\x10\x00')

if __name__ == '__main__':
	unittest.main()
