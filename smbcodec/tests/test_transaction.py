import unittest

from smbcodec.exceptions import SMBMissingFramingOffset, SMBInternalInvariant
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands import SMB_COM_TRANSACTION_REQ, SMB_COM_TRANSACTION2_REQ, SMB_COM_TRANSACTION2_REPLY, \
	SMB_COM_TRANSACTION2_SECONDARY_REQ, SMB_COM_NT_TRANSACT_REQ, SMB_COM_IOCTL_REQ


class TestTransaction2(unittest.TestCase):
	def build(self):
		cmd = SMB_COM_TRANSACTION2_REQ()
		cmd.MaxParameterCount = 2
		cmd.MaxDataCount = 0x1000
		cmd.Setup = [0x0007]
		cmd.Trans_Parameters = b'\x00\x40\x01'
		return cmd

	def test_offsets_are_aligned(self):
		cmd = self.build()
		data_offset = cmd.data_offset_for()
		self.assertEqual(data_offset, 65)
		raw = cmd.to_bytes(data_offset)
		self.assertEqual(raw[0], 15)
		self.assertEqual(cmd.SetupCount, 1)
		self.assertEqual(cmd.Pad1, b'\x00\x00')
		self.assertEqual(cmd.ParameterOffset, 68)
		self.assertEqual(cmd.ParameterCount, 3)
		self.assertEqual(cmd.TotalParameterCount, 3)
		# no data, no second pad
		self.assertEqual(cmd.Pad2, b'')
		self.assertEqual(cmd.DataOffset, 71)
		self.assertEqual(cmd.DataCount, 0)

		decoded = SMB_COM_TRANSACTION2_REQ.from_bytes(raw, data_offset)
		self.assertEqual(decoded, cmd)

	def test_data_region_pad(self):
		cmd = self.build()
		cmd.Trans_Data = b'xy'
		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		self.assertEqual(cmd.Pad2, b'\x00')
		self.assertEqual(cmd.DataOffset, 72)
		self.assertEqual(raw[-2:], b'xy')
		decoded = SMB_COM_TRANSACTION2_REQ.from_bytes(raw, data_offset)
		self.assertEqual(decoded.Trans_Data, b'xy')

	def test_encode_needs_data_offset(self):
		with self.assertRaises(SMBMissingFramingOffset):
			self.build().to_bytes()

	def test_offset_before_position(self):
		cmd = self.build()
		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		with self.assertRaises(SMBInternalInvariant):
			SMB_COM_TRANSACTION2_REQ.from_bytes(raw, data_offset + 8)

	def test_totals_are_kept(self):
		cmd = self.build()
		cmd.TotalDataCount = 0x2000
		cmd.Trans_Data = b'a' * 16
		cmd.to_bytes(cmd.data_offset_for())
		self.assertEqual(cmd.TotalDataCount, 0x2000)
		self.assertEqual(cmd.DataCount, 16)

	def test_reply(self):
		cmd = SMB_COM_TRANSACTION2_REPLY()
		cmd.Trans_Parameters = b'\x00\x00'
		cmd.Trans_Data = b'\x01' * 40
		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		self.assertEqual(raw[0], 10)
		self.assertEqual(cmd.ParameterOffset % 4, 0)
		self.assertEqual(cmd.DataOffset % 4, 0)
		self.assertEqual(SMB_COM_TRANSACTION2_REPLY.from_bytes(raw, data_offset), cmd)

	def test_secondary(self):
		cmd = SMB_COM_TRANSACTION2_SECONDARY_REQ()
		cmd.FID = 0x10
		cmd.ParameterDisplacement = 4
		cmd.Trans_Parameters = b'abcd'
		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		self.assertEqual(raw[0], 9)
		self.assertEqual(SMB_COM_TRANSACTION2_SECONDARY_REQ.from_bytes(raw, data_offset), cmd)

class TestTransaction(unittest.TestCase):
	def test_named_pipe_request(self):
		cmd = SMB_COM_TRANSACTION_REQ()
		cmd.Setup = [0x0026, 0x4000]
		cmd.Name = SMB_STRING.from_string('\\PIPE\\', BufferFormat.NULL_TERMINATED_OEM)
		cmd.Trans_Data = b'\x05\x00\x0b\x03'
		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		self.assertEqual(raw[0], 16)
		self.assertEqual(cmd.ParameterCount, 0)
		decoded = SMB_COM_TRANSACTION_REQ.from_bytes(raw, data_offset)
		self.assertEqual(str(decoded.Name), '\\PIPE\\')
		self.assertEqual(decoded, cmd)

	def test_unicode_name(self):
		cmd = SMB_COM_TRANSACTION_REQ()
		cmd.Name = SMB_STRING.from_string('\\PIPE\\', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.Trans_Parameters = b'\x01\x02'
		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		sink = SMB_COM_TRANSACTION_REQ()
		sink.Name = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)
		decoded = SMB_COM_TRANSACTION_REQ.from_bytes(raw, data_offset, sink)
		self.assertEqual(decoded, cmd)

class TestNTTransact(unittest.TestCase):
	def test_request(self):
		cmd = SMB_COM_NT_TRANSACT_REQ()
		cmd.Function = 6
		cmd.MaxParameterCount = 4
		cmd.Trans_Parameters = b'\x01\x40\x00\x00\x07\x00\x00\x00'
		data_offset = cmd.data_offset_for()
		self.assertEqual(data_offset, 73)
		raw = cmd.to_bytes(data_offset)
		self.assertEqual(raw[0], 19)
		self.assertEqual(cmd.ParameterOffset, 76)
		self.assertEqual(SMB_COM_NT_TRANSACT_REQ.from_bytes(raw, data_offset), cmd)

class TestIoctl(unittest.TestCase):
	def test_request(self):
		cmd = SMB_COM_IOCTL_REQ()
		cmd.FID = 1
		cmd.Category = 0x53
		cmd.Function = 0x60
		cmd.Trans_Data = b'\x00' * 3
		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		self.assertEqual(raw[0], 14)
		self.assertEqual(SMB_COM_IOCTL_REQ.from_bytes(raw, data_offset), cmd)

if __name__ == '__main__':
	unittest.main()
