import datetime
import unittest

from smbcodec.exceptions import SMBTooShort, SMBInternalInvariant, SMBUnknownInformationLevel
from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.codec import decode_command, encode_command
from smbcodec.protocol.smb.structures.attributes import SMB_EXT_FILE_ATTR
from smbcodec.protocol.smb.structures.filetime import FILETIME
from smbcodec.protocol.smb.structures.infolevels import *
from smbcodec.protocol.smb.subcommands import *


def both_entry(name, short):
	entry = SMB_FIND_FILE_BOTH_DIRECTORY_INFO()
	entry.FileName = name
	entry.ShortName = short
	entry.EndOfFile = 100
	entry.ExtFileAttributes = SMB_EXT_FILE_ATTR.ATTR_ARCHIVE
	return entry

class TestQueryStructures(unittest.TestCase):
	def test_basic_info(self):
		info = SMB_QUERY_FILE_BASIC_INFO()
		info.CreationTime = FILETIME.from_datetime(datetime.datetime(2020, 1, 1, tzinfo = datetime.timezone.utc))
		info.ExtFileAttributes = SMB_EXT_FILE_ATTR.ATTR_DIRECTORY
		raw = info.to_bytes()
		self.assertEqual(len(raw), 40)
		self.assertEqual(raw[:8], (132223104000000000).to_bytes(8, 'little'))
		decoded = SMB_QUERY_FILE_BASIC_INFO.from_bytes(raw)
		self.assertEqual(decoded.CreationTime.value, 132223104000000000)
		self.assertEqual(decoded, info)

	def test_standard_info(self):
		info = SMB_QUERY_FILE_STANDARD_INFO()
		info.EndOfFile = 0x100000000
		info.NumberOfLinks = 1
		info.Directory = 1
		raw = info.to_bytes()
		self.assertEqual(len(raw), 22)
		decoded = SMB_QUERY_FILE_STANDARD_INFO.from_bytes(raw)
		self.assertEqual(decoded.EndOfFile, 0x100000000)
		self.assertEqual(decoded.Directory, 1)

	def test_all_info(self):
		info = SMB_QUERY_FILE_ALL_INFO()
		info.EaSize = 4
		info.FileName = '\\dir\\a.txt'
		raw = info.to_bytes()
		self.assertEqual(info.FileNameLength, 20)
		self.assertEqual(len(raw), 72 + 20)
		decoded = SMB_QUERY_FILE_ALL_INFO.from_bytes(raw)
		self.assertEqual(decoded.FileName, '\\dir\\a.txt')
		self.assertEqual(decoded, info)

	def test_truncated_structure(self):
		raw = SMB_QUERY_FILE_BASIC_INFO().to_bytes()
		with self.assertRaises(SMBTooShort):
			SMB_QUERY_FILE_BASIC_INFO.from_bytes(raw[:-1])

	def test_fs_attribute_info(self):
		info = SMB_QUERY_FS_ATTRIBUTE_INFO()
		info.FileSystemAttributes = 0x0000002F
		info.MaxFileNameLengthInBytes = 255
		info.FileSystemName = 'NTFS'
		raw = info.to_bytes()
		self.assertEqual(raw[8:12], b'\x08\x00\x00\x00')
		self.assertEqual(raw[12:], 'NTFS'.encode('utf-16-le'))
		self.assertEqual(SMB_QUERY_FS_ATTRIBUTE_INFO.from_bytes(raw).FileSystemName, 'NTFS')

class TestExtendedAttributes(unittest.TestCase):
	def test_fea_list(self):
		feas = SMB_FEA_LIST()
		feas.FEAList.append(SMB_FEA(b'user.x', b'1'))
		feas.FEAList.append(SMB_FEA(b'a', b'xyz', 0x80))
		raw = feas.to_bytes()
		self.assertEqual(feas.SizeOfListInBytes, 4 + 12 + 9)
		self.assertEqual(len(raw), feas.SizeOfListInBytes)
		self.assertEqual(raw[4:8], b'\x00\x06\x01\x00')
		decoded = SMB_FEA_LIST.from_bytes(raw)
		self.assertEqual(len(decoded.FEAList), 2)
		self.assertEqual(decoded.FEAList[1].ExtendedAttributeFlag, 0x80)
		self.assertEqual(decoded, feas)

	def test_size_below_header(self):
		with self.assertRaises(SMBInternalInvariant):
			SMB_FEA_LIST.from_bytes(b'\x02\x00\x00\x00')

	def test_set_eas(self):
		info = SMB_INFO_SET_EAS()
		info.ExtendedAttributeList.FEAList.append(SMB_FEA(b'name', b'value'))
		raw = encode_information_level(info)
		decoded = decode_information_level(SetInformationLevel.SMB_INFO_SET_EAS, raw, 'set')
		self.assertEqual(decoded.ExtendedAttributeList.FEAList[0].AttributeValue, b'value')

class TestEntryChains(unittest.TestCase):
	def test_both_directory_chain(self):
		entries = [both_entry('ab.txt', 'AB.TXT'), both_entry('long file name.txt', 'LONGFI~1.TXT')]
		raw = encode_information_level(entries)
		self.assertEqual(entries[0].NextEntryOffset, 112)
		self.assertEqual(entries[0].NextEntryOffset % 8, 0)
		self.assertEqual(entries[1].NextEntryOffset, 0)
		self.assertEqual(len(raw), 112 + 94 + len('long file name.txt') * 2)

		decoded = decode_information_level(FindInformationLevel.SMB_FIND_FILE_BOTH_DIRECTORY_INFO, raw, 'find')
		self.assertEqual([e.FileName for e in decoded], ['ab.txt', 'long file name.txt'])
		self.assertEqual(decoded[1].ShortName, 'LONGFI~1.TXT')
		self.assertEqual(decoded, entries)

	def test_short_name_too_long(self):
		with self.assertRaises(SMBInternalInvariant):
			both_entry('a', 'MUCHTOOLONG.NAME').to_bytes()

	def test_empty_chain(self):
		self.assertEqual(decode_information_level(0x0109, b''), [])

class TestDispatch(unittest.TestCase):
	def test_level_classes(self):
		self.assertIs(information_level_class(0x0101), SMB_QUERY_FILE_BASIC_INFO)
		self.assertIs(information_level_class(QueryInformationLevel.SMB_QUERY_FILE_BASIC_INFO, 'set'), SMB_SET_FILE_BASIC_INFO)
		self.assertIs(information_level_class(0x0105, 'query_fs'), SMB_QUERY_FS_ATTRIBUTE_INFO)
		self.assertIs(information_level_class(0x0104, 'find'), SMB_FIND_FILE_BOTH_DIRECTORY_INFO)

	def test_unknown_level(self):
		with self.assertRaises(SMBUnknownInformationLevel) as ctx:
			decode_information_level(0x0999, b'')
		self.assertEqual(ctx.exception.level, 0x0999)
		with self.assertRaises(SMBUnknownInformationLevel):
			information_level_class(0x0101, 'nope')

class TestTransaction2Replies(unittest.TestCase):
	def test_query_information_reply(self):
		info = SMB_QUERY_FILE_STANDARD_INFO()
		info.AllocationSize = 4096
		info.EndOfFile = 10
		cmd = TRANS2_QUERY_INFORMATION_REPLY(info).to_transaction2()
		self.assertEqual(cmd.Trans_Parameters, b'\x00\x00')

		data_offset = cmd.data_offset_for()
		raw = encode_command(cmd, data_offset)
		decoded, _ = decode_command(SMBCommand.SMB_COM_TRANSACTION2, raw, True, data_offset)
		reply = TRANS2_QUERY_INFORMATION_REPLY.from_transaction2(decoded, QueryInformationLevel.SMB_QUERY_FILE_STANDARD_INFO)
		self.assertEqual(reply.EaErrorOffset, 0)
		self.assertEqual(reply.Information, info)

	def test_query_fs_information(self):
		req = TRANS2_QUERY_FS_INFORMATION_REQ()
		req.InformationLevel = QueryFSInformationLevel.SMB_QUERY_FS_ATTRIBUTE_INFO
		cmd = req.to_transaction2()
		self.assertEqual(cmd.Setup, [Transaction2Subcommand.TRANS2_QUERY_FS_INFORMATION.value])
		self.assertEqual(cmd.Trans_Parameters, b'\x05\x01')
		self.assertEqual(TRANS2_QUERY_FS_INFORMATION_REQ.from_transaction2(cmd).InformationLevel, req.InformationLevel)

		info = SMB_QUERY_FS_ATTRIBUTE_INFO()
		info.FileSystemName = 'FAT32'
		cmd = TRANS2_QUERY_FS_INFORMATION_REPLY(info).to_transaction2()
		self.assertEqual(cmd.Trans_Parameters, b'')
		reply = TRANS2_QUERY_FS_INFORMATION_REPLY.from_transaction2(cmd, req.InformationLevel)
		self.assertEqual(reply.Information.FileSystemName, 'FAT32')

	def test_reply_without_information(self):
		with self.assertRaises(SMBInternalInvariant):
			TRANS2_QUERY_INFORMATION_REPLY().to_transaction2()

if __name__ == '__main__':
	unittest.main()
