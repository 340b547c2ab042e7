import io

from smbcodec import logger
from smbcodec.exceptions import SMBUnknownInformationLevel
from smbcodec.protocol.smb.commons import to_enum
from smbcodec.protocol.smb.structures import infolevels as il
from smbcodec.protocol.smb.subcommands.codes import QueryInformationLevel, QueryFSInformationLevel, SetInformationLevel, FindInformationLevel

QUERY_INFORMATION_LEVELS = {
	QueryInformationLevel.SMB_INFO_STANDARD : il.SMB_INFO_STANDARD,
	QueryInformationLevel.SMB_INFO_QUERY_EA_SIZE : il.SMB_INFO_QUERY_EA_SIZE,
	QueryInformationLevel.SMB_INFO_QUERY_EAS_FROM_LIST : il.SMB_INFO_QUERY_EAS_FROM_LIST,
	QueryInformationLevel.SMB_INFO_QUERY_ALL_EAS : il.SMB_INFO_QUERY_ALL_EAS,
	QueryInformationLevel.SMB_INFO_IS_NAME_VALID : il.SMB_INFO_IS_NAME_VALID,
	QueryInformationLevel.SMB_QUERY_FILE_BASIC_INFO : il.SMB_QUERY_FILE_BASIC_INFO,
	QueryInformationLevel.SMB_QUERY_FILE_STANDARD_INFO : il.SMB_QUERY_FILE_STANDARD_INFO,
	QueryInformationLevel.SMB_QUERY_FILE_EA_INFO : il.SMB_QUERY_FILE_EA_INFO,
	QueryInformationLevel.SMB_QUERY_FILE_NAME_INFO : il.SMB_QUERY_FILE_NAME_INFO,
	QueryInformationLevel.SMB_QUERY_FILE_ALL_INFO : il.SMB_QUERY_FILE_ALL_INFO,
	QueryInformationLevel.SMB_QUERY_FILE_ALT_NAME_INFO : il.SMB_QUERY_FILE_ALT_NAME_INFO,
	QueryInformationLevel.SMB_QUERY_FILE_STREAM_INFO : il.SMB_QUERY_FILE_STREAM_INFO,
	QueryInformationLevel.SMB_QUERY_FILE_COMPRESSION_INFO : il.SMB_QUERY_FILE_COMPRESSION_INFO,
}

QUERY_FS_INFORMATION_LEVELS = {
	QueryFSInformationLevel.SMB_INFO_ALLOCATION : il.SMB_INFO_ALLOCATION,
	QueryFSInformationLevel.SMB_INFO_VOLUME : il.SMB_INFO_VOLUME,
	QueryFSInformationLevel.SMB_QUERY_FS_VOLUME_INFO : il.SMB_QUERY_FS_VOLUME_INFO,
	QueryFSInformationLevel.SMB_QUERY_FS_SIZE_INFO : il.SMB_QUERY_FS_SIZE_INFO,
	QueryFSInformationLevel.SMB_QUERY_FS_DEVICE_INFO : il.SMB_QUERY_FS_DEVICE_INFO,
	QueryFSInformationLevel.SMB_QUERY_FS_ATTRIBUTE_INFO : il.SMB_QUERY_FS_ATTRIBUTE_INFO,
}

SET_INFORMATION_LEVELS = {
	SetInformationLevel.SMB_INFO_STANDARD : il.SMB_SET_INFO_STANDARD,
	SetInformationLevel.SMB_INFO_SET_EAS : il.SMB_INFO_SET_EAS,
	SetInformationLevel.SMB_SET_FILE_BASIC_INFO : il.SMB_SET_FILE_BASIC_INFO,
	SetInformationLevel.SMB_SET_FILE_DISPOSITION_INFO : il.SMB_SET_FILE_DISPOSITION_INFO,
	SetInformationLevel.SMB_SET_FILE_ALLOCATION_INFO : il.SMB_SET_FILE_ALLOCATION_INFO,
	SetInformationLevel.SMB_SET_FILE_END_OF_FILE_INFO : il.SMB_SET_FILE_END_OF_FILE_INFO,
}

FIND_INFORMATION_LEVELS = {
	FindInformationLevel.SMB_FIND_FILE_DIRECTORY_INFO : il.SMB_FIND_FILE_DIRECTORY_INFO,
	FindInformationLevel.SMB_FIND_FILE_FULL_DIRECTORY_INFO : il.SMB_FIND_FILE_FULL_DIRECTORY_INFO,
	FindInformationLevel.SMB_FIND_FILE_NAMES_INFO : il.SMB_FIND_FILE_NAMES_INFO,
	FindInformationLevel.SMB_FIND_FILE_BOTH_DIRECTORY_INFO : il.SMB_FIND_FILE_BOTH_DIRECTORY_INFO,
}

# kind -> (level enum, table)
INFORMATION_LEVELS = {
	'query' : (QueryInformationLevel, QUERY_INFORMATION_LEVELS),
	'query_fs' : (QueryFSInformationLevel, QUERY_FS_INFORMATION_LEVELS),
	'set' : (SetInformationLevel, SET_INFORMATION_LEVELS),
	'find' : (FindInformationLevel, FIND_INFORMATION_LEVELS),
}

# levels whose data is a NextEntryOffset chain of entries
ENTRY_LISTS = [
	il.SMB_QUERY_FILE_STREAM_INFO,
	il.SMB_FIND_FILE_DIRECTORY_INFO,
	il.SMB_FIND_FILE_FULL_DIRECTORY_INFO,
	il.SMB_FIND_FILE_NAMES_INFO,
	il.SMB_FIND_FILE_BOTH_DIRECTORY_INFO,
]

def information_level_class(level, kind = 'query'):
	"""
	level is an enum member or its integer value, kind is one of
	query, query_fs, set or find
	"""
	if kind not in INFORMATION_LEVELS:
		raise SMBUnknownInformationLevel(level, kind)
	enumtype, table = INFORMATION_LEVELS[kind]
	code = level
	if not isinstance(level, enumtype):
		code = to_enum(enumtype, getattr(level, 'value', level))
	if code not in table:
		raise SMBUnknownInformationLevel(level, kind)
	return table[code]

def decode_information_level(level, data, kind = 'query'):
	"""
	Parses the Trans_Data of a reply (or a set request) for the level.
	Entry chains come back as a list.
	"""
	infotype = information_level_class(level, kind)
	logger.log(1, 'Decoding information level %s' % infotype.__name__)
	buff = io.BytesIO(data)
	if infotype in ENTRY_LISTS:
		if len(data) == 0:
			return []
		return il.entries_from_buffer(infotype, buff)
	return infotype.from_buffer(buff)

def encode_information_level(info):
	if isinstance(info, list):
		return il.entries_to_bytes(info)
	return info.to_bytes()
