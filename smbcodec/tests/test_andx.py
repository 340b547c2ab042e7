import unittest

from smbcodec.exceptions import SMBInternalInvariant, SMBUnknownCommandCode
from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commons import SMBCapabilities
from smbcodec.protocol.smb.strings import SMB_STRING, OEM_STRING, BufferFormat
from smbcodec.protocol.smb.andx import encode_andx_chain, decode_andx_chain, patch_andx_offset
from smbcodec.protocol.smb.commands import SMB_COM_SESSION_SETUP_ANDX_REQ, SMB_COM_TREE_CONNECT_ANDX_REQ, SMB_COM_ECHO_REQ, SMB_COM_READ_ANDX_REQ


def session_setup():
	cmd = SMB_COM_SESSION_SETUP_ANDX_REQ()
	cmd.MaxBufferSize = 0x1104
	cmd.MaxMpxCount = 2
	cmd.Capabilities = SMBCapabilities.CAP_EXTENDED_SECURITY
	cmd.SecurityBlob = b'\x60\x48\x06\x06\x2b\x06\x01\x05\x05\x02'
	cmd.NativeOS = SMB_STRING.from_string('Unix', BufferFormat.NULL_TERMINATED_OEM)
	cmd.NativeLanMan = SMB_STRING.from_string('smbcodec', BufferFormat.NULL_TERMINATED_OEM)
	return cmd

def tree_connect():
	cmd = SMB_COM_TREE_CONNECT_ANDX_REQ()
	cmd.Password = b'\x00'
	cmd.Path = SMB_STRING.from_string('\\\\SRV\\IPC$', BufferFormat.NULL_TERMINATED_OEM)
	cmd.Service = OEM_STRING.from_string('?????', BufferFormat.NULL_TERMINATED_OEM)
	return cmd

class TestAndXChain(unittest.TestCase):
	def test_roundtrip(self):
		first = session_setup()
		second = tree_connect()
		raw = encode_andx_chain([first, second])
		first_len = len(first.to_bytes(first.data_offset_for()))

		self.assertEqual(raw[1], SMBCommand.SMB_COM_TREE_CONNECT_ANDX.value)
		self.assertEqual(first.AndX.AndXOffset, 32 + first_len)
		self.assertEqual(int.from_bytes(raw[3:5], 'little'), 32 + first_len)
		self.assertTrue(second.AndX.is_last)

		decoded = decode_andx_chain(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, raw, False)
		self.assertEqual(len(decoded), 2)
		self.assertEqual(decoded[0], first)
		self.assertEqual(decoded[1], second)

	def test_single_command(self):
		cmd = SMB_COM_READ_ANDX_REQ()
		raw = encode_andx_chain([cmd])
		self.assertEqual(raw[1:5], b'\xff\x00\x00\x00')
		self.assertEqual(decode_andx_chain(SMBCommand.SMB_COM_READ_ANDX, raw, False), [cmd])

	def test_last_command_may_be_plain(self):
		raw = encode_andx_chain([SMB_COM_READ_ANDX_REQ(), SMB_COM_ECHO_REQ()])
		decoded = decode_andx_chain(SMBCommand.SMB_COM_READ_ANDX, raw, False)
		self.assertIsInstance(decoded[1], SMB_COM_ECHO_REQ)

	def test_plain_command_can_not_chain(self):
		with self.assertRaises(SMBInternalInvariant):
			encode_andx_chain([SMB_COM_ECHO_REQ(), SMB_COM_READ_ANDX_REQ()])

	def test_backward_link(self):
		raw = bytearray(encode_andx_chain([session_setup(), tree_connect()]))
		raw[3:5] = (32).to_bytes(2, 'little')
		with self.assertRaises(SMBInternalInvariant):
			decode_andx_chain(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, bytes(raw), False)

	def test_unknown_link(self):
		raw = bytearray(encode_andx_chain([session_setup(), tree_connect()]))
		raw[1] = 0x99
		with self.assertRaises(SMBUnknownCommandCode):
			decode_andx_chain(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, bytes(raw), False)

	def test_patch_outside_buffer(self):
		with self.assertRaises(SMBInternalInvariant):
			patch_andx_offset(bytearray(4), 1, SMBCommand.SMB_COM_CLOSE, 0x40)

	def test_patch(self):
		buffer = bytearray(b'\x02\xff\x00\x00\x00')
		patch_andx_offset(buffer, 1, SMBCommand.SMB_COM_CLOSE, 0x40)
		self.assertEqual(bytes(buffer), b'\x02\x04\x00\x40\x00')

if __name__ == '__main__':
	unittest.main()
