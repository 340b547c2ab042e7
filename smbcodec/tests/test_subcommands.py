import unittest

from winacl.dtyp.security_descriptor import SECURITY_DESCRIPTOR

from smbcodec.exceptions import SMBInternalInvariant
from smbcodec.protocol.smb.commands import SMB_COM_NT_TRANSACT_REQ, SMB_COM_NT_TRANSACT_REPLY, SMB_COM_TRANSACTION2_REQ
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.subcommands import *
from smbcodec.protocol.smb.subcommands.trans2 import subcommand_of

# self relative descriptor, owner only: BUILTIN\Administrators
SD_OWNER_ONLY = bytes.fromhex('01000080' + '14000000' + '00000000' * 3 + '0102000000000005' + '20000000' + '20020000')


class TestSecurityDescriptor(unittest.TestCase):
	def test_query_request(self):
		req = NT_TRANSACT_QUERY_SECURITY_DESC_REQ()
		req.FID = 0x4001
		cmd = req.to_nt_transact()
		self.assertEqual(cmd.Function, NTTransactSubcommand.NT_TRANSACT_QUERY_SECURITY_DESC.value)
		self.assertEqual(cmd.Trans_Parameters, b'\x01\x40\x00\x00\x07\x00\x00\x00')

		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		decoded = SMB_COM_NT_TRANSACT_REQ.from_bytes(raw, data_offset)
		req2 = NT_TRANSACT_QUERY_SECURITY_DESC_REQ.from_nt_transact(decoded)
		self.assertEqual(req2.FID, 0x4001)
		self.assertEqual(req2.SecurityInfoFields, req.SecurityInfoFields)

	def test_wrong_function(self):
		cmd = SMB_COM_NT_TRANSACT_REQ()
		cmd.Function = NTTransactSubcommand.NT_TRANSACT_IOCTL.value
		with self.assertRaises(SMBInternalInvariant):
			NT_TRANSACT_QUERY_SECURITY_DESC_REQ.from_nt_transact(cmd)

	def test_query_reply(self):
		cmd = SMB_COM_NT_TRANSACT_REPLY()
		cmd.Trans_Parameters = len(SD_OWNER_ONLY).to_bytes(4, 'little')
		cmd.Trans_Data = SD_OWNER_ONLY
		reply = NT_TRANSACT_QUERY_SECURITY_DESC_REPLY.from_nt_transact(cmd)
		self.assertEqual(reply.LengthNeeded, len(SD_OWNER_ONLY))
		self.assertEqual(str(reply.SecurityDescriptor.Owner), 'S-1-5-32-544')

	def test_buffer_too_small_reply(self):
		cmd = SMB_COM_NT_TRANSACT_REPLY()
		cmd.Trans_Parameters = (0x200).to_bytes(4, 'little')
		reply = NT_TRANSACT_QUERY_SECURITY_DESC_REPLY.from_nt_transact(cmd)
		self.assertEqual(reply.LengthNeeded, 0x200)
		self.assertIsNone(reply.SecurityDescriptor)

	def test_set_request(self):
		req = NT_TRANSACT_SET_SECURITY_DESC_REQ()
		req.FID = 3
		req.SecurityInformation = SecurityInfo.OWNER_SECURITY_INFORMATION
		req.SecurityDescriptor = SECURITY_DESCRIPTOR.from_bytes(SD_OWNER_ONLY)
		cmd = req.to_nt_transact()
		req2 = NT_TRANSACT_SET_SECURITY_DESC_REQ.from_nt_transact(cmd)
		self.assertEqual(req2.FID, 3)
		self.assertEqual(req2.SecurityInformation, SecurityInfo.OWNER_SECURITY_INFORMATION)
		self.assertEqual(str(req2.SecurityDescriptor.Owner), 'S-1-5-32-544')

	def test_set_request_needs_descriptor(self):
		with self.assertRaises(SMBInternalInvariant):
			NT_TRANSACT_SET_SECURITY_DESC_REQ().to_nt_transact()

class TestTrans2(unittest.TestCase):
	def test_query_file_information(self):
		req = TRANS2_QUERY_FILE_INFORMATION_REQ()
		req.FID = 0x10
		cmd = req.to_transaction2()
		self.assertEqual(cmd.Setup, [Transaction2Subcommand.TRANS2_QUERY_FILE_INFORMATION.value])
		self.assertEqual(subcommand_of(cmd), Transaction2Subcommand.TRANS2_QUERY_FILE_INFORMATION)

		data_offset = cmd.data_offset_for()
		raw = cmd.to_bytes(data_offset)
		decoded = SMB_COM_TRANSACTION2_REQ.from_bytes(raw, data_offset)
		req2 = TRANS2_QUERY_FILE_INFORMATION_REQ.from_transaction2(decoded)
		self.assertEqual(req2.FID, 0x10)
		self.assertEqual(req2.InformationLevel, QueryInformationLevel.SMB_QUERY_FILE_BASIC_INFO)

	def test_query_path_information(self):
		req = TRANS2_QUERY_PATH_INFORMATION_REQ()
		req.FileName = SMB_STRING.from_string('\\dir\\a.txt', BufferFormat.NULL_TERMINATED_OEM)
		cmd = req.to_transaction2()
		req2 = TRANS2_QUERY_PATH_INFORMATION_REQ.from_transaction2(cmd)
		self.assertEqual(str(req2.FileName), '\\dir\\a.txt')

	def test_subcommand_mismatch(self):
		cmd = TRANS2_QUERY_FILE_INFORMATION_REQ().to_transaction2()
		with self.assertRaises(SMBInternalInvariant):
			TRANS2_QUERY_PATH_INFORMATION_REQ.from_transaction2(cmd)

	def test_missing_setup(self):
		with self.assertRaises(SMBInternalInvariant):
			subcommand_of(SMB_COM_TRANSACTION2_REQ())

if __name__ == '__main__':
	unittest.main()
