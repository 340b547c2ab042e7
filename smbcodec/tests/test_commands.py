import unittest

from smbcodec.exceptions import SMBTooShort, SMBInternalInvariant
from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.codec import decode_command, encode_command
from smbcodec.protocol.smb.commons import SMBCapabilities, SMBLockType, SMBSeekMode, SMBShareAccess, SMBCreateDisposition, SMBCreateOptions
from smbcodec.protocol.smb.strings import SMB_STRING, OEM_STRING, BufferFormat
from smbcodec.protocol.smb.structures.attributes import SMB_EXT_FILE_ATTR
from smbcodec.protocol.smb.structures.filetime import FILETIME
from smbcodec.protocol.smb.structures.locking import LOCKING_ANDX_RANGE64
from smbcodec.protocol.smb.structures.smbtime import SMB_DATE, SMB_TIME
from smbcodec.protocol.smb.structures.directory import SMB_DIRECTORY_INFORMATION
from smbcodec.protocol.smb.commands import *


def roundtrip(cmd, data_offset = None, sink = None):
	raw = cmd.to_bytes(data_offset)
	decoded = cmd.__class__.from_bytes(raw, data_offset, sink)
	return raw, decoded

class TestWireExamples(unittest.TestCase):
	def test_empty_negotiate_reply(self):
		cmd, consumed = decode_command(SMBCommand.SMB_COM_NEGOTIATE, b'\x00\x00\x00', True)
		self.assertEqual(consumed, 3)
		self.assertEqual(cmd, SMB_COM_NEGOTIATE_REPLY())
		self.assertEqual(encode_command(cmd), b'\x00\x00\x00')

	def test_tree_connect(self):
		cmd = SMB_COM_TREE_CONNECT_REQ()
		cmd.Path = OEM_STRING.from_string('\\\\srv\\IPC$', BufferFormat.ASCII_STRING)
		cmd.Password = OEM_STRING.from_string('', BufferFormat.ASCII_STRING)
		cmd.Service = OEM_STRING.from_string('IPC', BufferFormat.ASCII_STRING)
		raw = cmd.to_bytes()
		self.assertEqual(raw, b'\x00\x13\x00' + b'\x04\\\\srv\\IPC$\x00' + b'\x04\x00' + b'\x04IPC\x00')
		decoded, consumed = decode_command('TREE_CONNECT', raw)
		self.assertEqual(consumed, len(raw))
		self.assertEqual(decoded, cmd)

	def test_delete_directory(self):
		cmd = SMB_COM_DELETE_DIRECTORY_REQ()
		cmd.DirectoryName = SMB_STRING.from_string('tmp', BufferFormat.ASCII_STRING)
		raw = cmd.to_bytes()
		self.assertEqual(raw, b'\x00\x05\x00\x04tmp\x00')
		self.assertEqual(SMB_COM_DELETE_DIRECTORY_REQ.from_bytes(raw), cmd)

	def test_seek_reply(self):
		cmd = SMB_COM_SEEK_REPLY()
		cmd.Offset = 0x1234
		raw = cmd.to_bytes()
		self.assertEqual(raw, b'\x02\x34\x12\x00\x00\x00\x00')
		self.assertEqual(SMB_COM_SEEK_REPLY.from_bytes(raw), cmd)

	def test_read_andx_terminator(self):
		cmd = SMB_COM_READ_ANDX_REQ()
		cmd.FID = 1
		cmd.MaxCountOfBytesToReturn = 0x1000
		cmd.MinCountOfBytesToReturn = 0x1000
		raw = cmd.to_bytes()
		self.assertEqual(raw[0], 10)
		self.assertEqual(raw[1:5], b'\xff\x00\x00\x00')
		decoded = SMB_COM_READ_ANDX_REQ.from_bytes(raw)
		self.assertEqual(decoded, cmd)
		self.assertIsNone(decoded.OffsetHigh)

	def test_write_and_close_forms(self):
		cmd = SMB_COM_WRITE_AND_CLOSE_REQ()
		cmd.FID = 3
		cmd.Reserved = [0, 0, 0]
		cmd.Data = b'abc'
		raw = cmd.to_bytes()
		self.assertEqual(raw[0], 12)
		decoded = SMB_COM_WRITE_AND_CLOSE_REQ.from_bytes(raw)
		self.assertEqual(decoded.Reserved, [0, 0, 0])
		self.assertEqual(decoded.Data, b'abc')

		cmd.Reserved = None
		raw = cmd.to_bytes()
		self.assertEqual(raw[0], 6)
		decoded = SMB_COM_WRITE_AND_CLOSE_REQ.from_bytes(raw)
		self.assertIsNone(decoded.Reserved)
		self.assertEqual(decoded, cmd)

class TestNegotiate(unittest.TestCase):
	def test_request(self):
		cmd = SMB_COM_NEGOTIATE_REQ()
		cmd.Dialects = ['NT LM 0.12', 'SMB 2.002']
		raw = cmd.to_bytes()
		dialects = b'\x02NT LM 0.12\x00\x02SMB 2.002\x00'
		self.assertEqual(raw, b'\x00' + len(dialects).to_bytes(2, 'little') + dialects)
		self.assertEqual(SMB_COM_NEGOTIATE_REQ.from_bytes(raw).Dialects, cmd.Dialects)

	def test_core_reply_rejects_dialects(self):
		cmd = SMB_COM_NEGOTIATE_REPLY()
		cmd.Form = NegotiateReplyForm.CORE
		cmd.DialectIndex = 0xFFFF
		raw = cmd.to_bytes()
		self.assertEqual(raw, b'\x01\xff\xff\x00\x00')
		self.assertEqual(SMB_COM_NEGOTIATE_REPLY.from_bytes(raw), cmd)

	def test_nt_reply_challenge(self):
		cmd = SMB_COM_NEGOTIATE_REPLY()
		cmd.Form = NegotiateReplyForm.NT_LM_012
		cmd.MaxMpxCount = 50
		cmd.MaxBufferSize = 0x4104
		cmd.Capabilities = SMBCapabilities.CAP_UNICODE | SMBCapabilities.CAP_NT_SMBS
		cmd.Challenge = b'\x11' * 8
		cmd.DomainName = SMB_STRING.from_string('WORKGROUP', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.ServerName = None
		raw, decoded = roundtrip(cmd)
		self.assertEqual(raw[0], 17)
		self.assertEqual(decoded.ChallengeLength, 8)
		self.assertIsNone(decoded.ServerName)
		self.assertEqual(decoded, cmd)

	def test_nt_reply_extended_security(self):
		cmd = SMB_COM_NEGOTIATE_REPLY()
		cmd.Form = NegotiateReplyForm.NT_LM_012
		cmd.Capabilities = SMBCapabilities.CAP_EXTENDED_SECURITY | SMBCapabilities.CAP_UNICODE
		cmd.ServerGUID = b'G' * 16
		cmd.SecurityBlob = b'\x60\x28\x06\x06'
		raw, decoded = roundtrip(cmd)
		self.assertTrue(decoded.extended_security)
		self.assertEqual(decoded.ServerGUID, b'G' * 16)
		self.assertEqual(decoded.SecurityBlob, cmd.SecurityBlob)

class TestSessionSetup(unittest.TestCase):
	def test_extended_request_without_flag(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REQ()
		cmd.MaxBufferSize = 0x1104
		cmd.Capabilities = SMBCapabilities.CAP_EXTENDED_SECURITY
		cmd.SecurityBlob = b'NTLMSSP\x00'
		cmd.NativeOS = SMB_STRING.from_string('Unix', BufferFormat.NULL_TERMINATED_OEM)
		cmd.NativeLanMan = SMB_STRING.from_string('smbcodec', BufferFormat.NULL_TERMINATED_OEM)
		raw = bytearray(cmd.to_bytes())
		self.assertEqual(raw[0], 12)
		# clear Capabilities, the layout still follows the word count
		raw[21:25] = b'\x00\x00\x00\x00'
		decoded, _ = decode_command(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, bytes(raw))
		self.assertTrue(decoded.extended_security)
		self.assertEqual(decoded.SecurityBlob, b'NTLMSSP\x00')
		self.assertEqual(str(decoded.NativeLanMan), 'smbcodec')

	def test_password_request(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REQ()
		cmd.OEMPassword = b'pw'
		cmd.AccountName = SMB_STRING.from_string('user', BufferFormat.NULL_TERMINATED_OEM)
		cmd.PrimaryDomain = SMB_STRING.from_string('DOMAIN', BufferFormat.NULL_TERMINATED_OEM)
		raw, decoded = roundtrip(cmd, cmd.data_offset_for())
		self.assertEqual(raw[0], 13)
		self.assertEqual(decoded.OEMPasswordLen, 2)
		self.assertEqual(decoded, cmd)

	def test_reply_unicode_pad(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REPLY()
		cmd.NativeOS = SMB_STRING.from_string('Windows', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.NativeLanMan = SMB_STRING.from_string('LM', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.PrimaryDomain = SMB_STRING.from_string('DOM', BufferFormat.NULL_TERMINATED_UNICODE)
		data_offset = cmd.data_offset_for()
		self.assertEqual(data_offset, 41)
		raw, decoded = roundtrip(cmd, data_offset)
		self.assertEqual(raw[9:11], b'\x00W')
		self.assertEqual(decoded, cmd)

	def test_reply_extended_without_domain(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REPLY()
		cmd.ExtendedSecurity = True
		cmd.SecurityBlob = b'\x01\x02\x03'
		cmd.PrimaryDomain = None
		raw, decoded = roundtrip(cmd, cmd.data_offset_for())
		self.assertEqual(raw[0], 4)
		self.assertIsNone(decoded.PrimaryDomain)
		self.assertEqual(decoded, cmd)

	def test_unicode_capability_converts_strings(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REQ()
		cmd.Capabilities = SMBCapabilities.CAP_UNICODE
		cmd.AccountName = SMB_STRING.from_string('user', BufferFormat.NULL_TERMINATED_OEM)
		cmd.PrimaryDomain = SMB_STRING.from_string('DOM', BufferFormat.NULL_TERMINATED_OEM)
		cmd.NativeOS = SMB_STRING.from_string('Unix', BufferFormat.NULL_TERMINATED_OEM)
		cmd.NativeLanMan = SMB_STRING.from_string('Samba', BufferFormat.NULL_TERMINATED_OEM)
		raw = encode_command(cmd)
		decoded, consumed = decode_command(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, raw)
		self.assertEqual(consumed, len(raw))
		self.assertTrue(decoded.AccountName.is_unicode)
		self.assertEqual(str(decoded.AccountName), 'user')
		self.assertEqual(str(decoded.NativeLanMan), 'Samba')
		self.assertEqual(decoded, cmd)

	def test_oem_strings_without_unicode_capability(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REQ()
		cmd.AccountName = SMB_STRING.from_string('user', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.PrimaryDomain = SMB_STRING.from_string('DOM', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.NativeOS = SMB_STRING.from_string('Unix', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.NativeLanMan = SMB_STRING.from_string('Samba', BufferFormat.NULL_TERMINATED_UNICODE)
		raw = encode_command(cmd)
		self.assertIn(b'user\x00DOM\x00Unix\x00Samba\x00', raw)
		decoded, _ = decode_command(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, raw)
		self.assertFalse(decoded.AccountName.is_unicode)
		self.assertEqual(str(decoded.PrimaryDomain), 'DOM')
		self.assertEqual(decoded, cmd)

	def test_password_layout_with_extended_capability(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REQ()
		cmd.ExtendedSecurity = False
		cmd.Capabilities = SMBCapabilities.CAP_EXTENDED_SECURITY
		cmd.OEMPassword = b'pw'
		cmd.AccountName = SMB_STRING.from_string('user', BufferFormat.NULL_TERMINATED_OEM)
		raw = encode_command(cmd)
		self.assertEqual(raw[0], 13)
		decoded, _ = decode_command(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, raw)
		self.assertIs(decoded.ExtendedSecurity, False)
		self.assertEqual(decoded.OEMPassword, b'pw')
		self.assertEqual(str(decoded.AccountName), 'user')
		self.assertEqual(decoded, cmd)
		self.assertEqual(encode_command(decoded), raw)

	def test_reply_without_domain(self):
		cmd = SMB_COM_SESSION_SETUP_ANDX_REPLY()
		cmd.NativeOS = SMB_STRING.from_string('Windows', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.NativeLanMan = SMB_STRING.from_string('LM', BufferFormat.NULL_TERMINATED_UNICODE)
		cmd.PrimaryDomain = None
		raw = encode_command(cmd, cmd.data_offset_for())
		self.assertEqual(raw[0], 3)
		decoded, consumed = decode_command(SMBCommand.SMB_COM_SESSION_SETUP_ANDX, raw, True, cmd.data_offset_for())
		self.assertEqual(consumed, len(raw))
		self.assertIsNone(decoded.PrimaryDomain)
		self.assertEqual(str(decoded.NativeLanMan), 'LM')
		self.assertEqual(decoded, cmd)

class TestTreeConnectAndX(unittest.TestCase):
	def test_extended_reply(self):
		cmd = SMB_COM_TREE_CONNECT_ANDX_REPLY()
		cmd.MaximalShareAccessRights = 0x001F01FF
		cmd.GuestMaximalShareAccessRights = 0
		cmd.Service = OEM_STRING.from_string('IPC', BufferFormat.NULL_TERMINATED_OEM)
		raw, decoded = roundtrip(cmd, cmd.data_offset_for())
		self.assertEqual(raw[0], 7)
		self.assertEqual(decoded, cmd)

	def test_short_reply(self):
		cmd = SMB_COM_TREE_CONNECT_ANDX_REPLY()
		cmd.Service = OEM_STRING.from_string('A:', BufferFormat.NULL_TERMINATED_OEM)
		cmd.NativeFileSystem = SMB_STRING.from_string('NTFS', BufferFormat.NULL_TERMINATED_UNICODE)
		raw, decoded = roundtrip(cmd, cmd.data_offset_for())
		self.assertEqual(raw[0], 3)
		self.assertIsNone(decoded.MaximalShareAccessRights)
		self.assertEqual(str(decoded.NativeFileSystem), 'NTFS')

class TestNTCreate(unittest.TestCase):
	def test_unicode_request(self):
		cmd = SMB_COM_NT_CREATE_ANDX_REQ()
		cmd.DesiredAccess = 0x00120089
		cmd.ExtFileAttributes = SMB_EXT_FILE_ATTR.ATTR_NORMAL
		cmd.ShareAccess = SMBShareAccess.FILE_SHARE_READ | SMBShareAccess.FILE_SHARE_WRITE
		cmd.CreateDisposition = SMBCreateDisposition.FILE_OPEN
		cmd.CreateOptions = SMBCreateOptions.FILE_NON_DIRECTORY_FILE
		cmd.FileName = SMB_STRING.from_string('a.txt', BufferFormat.NULL_TERMINATED_UNICODE)
		data_offset = cmd.data_offset_for()
		self.assertEqual(data_offset, 83)

		sink = SMB_COM_NT_CREATE_ANDX_REQ()
		sink.FileName = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)
		raw, decoded = roundtrip(cmd, data_offset, sink)
		self.assertEqual(raw[0], 24)
		self.assertEqual(cmd.NameLength, 10)
		self.assertEqual(raw[51:53], b'\x00a')
		self.assertEqual(decoded, cmd)

	def test_reply(self):
		cmd = SMB_COM_NT_CREATE_ANDX_REPLY()
		cmd.FID = 0x4000
		cmd.CreateDisposition = SMBCreateDisposition.FILE_OPEN
		cmd.EndOfFile = 1234
		raw, decoded = roundtrip(cmd)
		self.assertEqual(raw[0], 34)
		self.assertEqual(decoded, cmd)

	def test_reply_far_future_time(self):
		cmd = SMB_COM_NT_CREATE_ANDX_REPLY()
		cmd.CreateTime = FILETIME(0x7FFFFFFFFFFFFFFF)
		raw = encode_command(cmd)
		decoded, _ = decode_command(SMBCommand.SMB_COM_NT_CREATE_ANDX, raw, True)
		self.assertEqual(decoded.CreateTime.value, 0x7FFFFFFFFFFFFFFF)
		self.assertEqual(decoded.CreateTime.datetime.year, 9999)
		self.assertEqual(encode_command(decoded), raw)

	def test_decode_into_unicode_sink(self):
		cmd = SMB_COM_NT_CREATE_ANDX_REQ()
		cmd.FileName = SMB_STRING.from_string('\\a.txt', BufferFormat.NULL_TERMINATED_UNICODE)
		raw = encode_command(cmd)
		sink = SMB_COM_NT_CREATE_ANDX_REQ()
		sink.FileName = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)
		decoded, consumed = decode_command(SMBCommand.SMB_COM_NT_CREATE_ANDX, raw, cmd = sink)
		self.assertIs(decoded, sink)
		self.assertEqual(consumed, len(raw))
		self.assertEqual(str(decoded.FileName), '\\a.txt')
		self.assertEqual(decoded, cmd)

	def test_sink_of_wrong_class(self):
		raw = encode_command(SMB_COM_NT_CREATE_ANDX_REQ())
		with self.assertRaises(SMBInternalInvariant):
			decode_command(SMBCommand.SMB_COM_NT_CREATE_ANDX, raw, cmd = SMB_COM_CLOSE_REQ())

class TestDataCommands(unittest.TestCase):
	def test_locking_large_files(self):
		cmd = SMB_COM_LOCKING_ANDX_REQ()
		cmd.FID = 7
		cmd.TypeOfLock = SMBLockType.LARGE_FILES
		cmd.Locks = [LOCKING_ANDX_RANGE64(1, 0x100000000, 10)]
		raw, decoded = roundtrip(cmd)
		self.assertEqual(decoded.NumberOfRequestedLocks, 1)
		self.assertEqual(decoded.Locks[0].ByteOffset, 0x100000000)
		self.assertEqual(decoded, cmd)

	def test_read_andx_reply(self):
		cmd = SMB_COM_READ_ANDX_REPLY()
		cmd.Pad = b'\x00'
		cmd.Data = b'hello'
		data_offset = cmd.data_offset_for()
		raw, decoded = roundtrip(cmd, data_offset)
		self.assertEqual(raw[0], 12)
		self.assertEqual(cmd.DataOffset, 60)
		self.assertEqual(decoded.Data, b'hello')
		self.assertEqual(decoded, cmd)

	def test_write_andx_forms(self):
		cmd = SMB_COM_WRITE_ANDX_REQ()
		cmd.FID = 1
		cmd.Pad = b'\x00'
		cmd.Data = b'data'
		raw, decoded = roundtrip(cmd, cmd.data_offset_for())
		self.assertEqual(raw[0], 12)
		self.assertEqual(decoded, cmd)

		cmd.OffsetHigh = 1
		raw, decoded = roundtrip(cmd, cmd.data_offset_for())
		self.assertEqual(raw[0], 14)
		self.assertEqual(decoded.OffsetHigh, 1)
		self.assertEqual(decoded, cmd)

	def test_echo(self):
		cmd = SMB_COM_ECHO_REQ()
		cmd.EchoCount = 1
		cmd.Data = b'ping'
		self.assertEqual(cmd.to_bytes(), b'\x01\x01\x00\x04\x00ping')

	def test_seek_request(self):
		cmd = SMB_COM_SEEK_REQ()
		cmd.FID = 1
		cmd.Mode = SMBSeekMode.FROM_END
		cmd.Offset = -10
		raw, decoded = roundtrip(cmd)
		self.assertEqual(raw[5:9], b'\xf6\xff\xff\xff')
		self.assertEqual(decoded.Mode, SMBSeekMode.FROM_END)
		self.assertEqual(decoded, cmd)

	def test_query_information2_reply(self):
		cmd = SMB_COM_QUERY_INFORMATION2_REPLY()
		cmd.CreateDate = SMB_DATE(2020, 5, 17)
		cmd.CreationTime = SMB_TIME(12, 30, 44)
		cmd.FileDataSize = 100
		raw, decoded = roundtrip(cmd)
		self.assertEqual(raw[0], 11)
		self.assertEqual(decoded.CreateDate.to_date().isoformat(), '2020-05-17')
		self.assertEqual(decoded, cmd)

	def test_search_reply(self):
		entry = SMB_DIRECTORY_INFORMATION()
		entry.FileName = b'FILE.TXT'
		entry.FileSize = 10
		cmd = SMB_COM_SEARCH_REPLY()
		cmd.DirectoryInformationData = [entry]
		raw, decoded = roundtrip(cmd)
		self.assertEqual(decoded.Count, 1)
		self.assertEqual(decoded.DirectoryInformationData[0].get_filename(), 'FILE.TXT')
		self.assertEqual(decoded, cmd)

	def test_search_request_without_resume_key(self):
		cmd = SMB_COM_SEARCH_REQ()
		cmd.MaxCount = 10
		cmd.FileName = SMB_STRING.from_string('\\*.*', BufferFormat.ASCII_STRING)
		raw, decoded = roundtrip(cmd)
		self.assertEqual(raw[-3:], b'\x05\x00\x00')
		self.assertIsNone(decoded.ResumeKey)
		self.assertEqual(decoded, cmd)

class TestDecodeErrors(unittest.TestCase):
	def test_error_reply_short_form(self):
		cmd, consumed = decode_command(SMBCommand.SMB_COM_READ_ANDX, b'\x00\x00\x00', True)
		self.assertEqual(consumed, 3)
		self.assertEqual(cmd, SMB_COM_READ_ANDX_REPLY())

	def test_trailing_bytes_are_not_consumed(self):
		raw = b'\x00\x05\x00\x04tmp\x00'
		_, consumed = decode_command(SMBCommand.SMB_COM_DELETE_DIRECTORY, raw + b'\xaa\xbb')
		self.assertEqual(consumed, len(raw))

	def test_every_prefix_is_too_short(self):
		cmds = []
		seek = SMB_COM_SEEK_REQ()
		seek.FID = 2
		cmds.append(seek)
		rename = SMB_COM_RENAME_REQ()
		rename.OldFileName = SMB_STRING.from_string('a', BufferFormat.ASCII_STRING)
		rename.NewFileName = SMB_STRING.from_string('b', BufferFormat.ASCII_STRING)
		cmds.append(rename)
		echo = SMB_COM_ECHO_REPLY()
		echo.Data = b'xyz'
		cmds.append(echo)

		for cmd in cmds:
			raw = cmd.to_bytes()
			for i in range(len(raw)):
				with self.assertRaises(SMBTooShort):
					cmd.__class__.from_bytes(raw[:i])

	def test_truncated_string_inside_data(self):
		# ByteCount covers the data, the string itself has no terminator
		with self.assertRaises(SMBTooShort):
			SMB_COM_DELETE_DIRECTORY_REQ.from_bytes(b'\x00\x04\x00\x04tmp')

if __name__ == '__main__':
	unittest.main()
