import enum

# MS-CIFS SMB_FILE_ATTRIBUTES
class SMB_FILE_ATTRIBUTES(enum.IntFlag):
	SMB_FILE_ATTRIBUTE_NORMAL = 0x0000
	SMB_FILE_ATTRIBUTE_READONLY = 0x0001
	SMB_FILE_ATTRIBUTE_HIDDEN = 0x0002
	SMB_FILE_ATTRIBUTE_SYSTEM = 0x0004
	SMB_FILE_ATTRIBUTE_VOLUME = 0x0008
	SMB_FILE_ATTRIBUTE_DIRECTORY = 0x0010
	SMB_FILE_ATTRIBUTE_ARCHIVE = 0x0020
	SMB_SEARCH_ATTRIBUTE_READONLY = 0x0100
	SMB_SEARCH_ATTRIBUTE_HIDDEN = 0x0200
	SMB_SEARCH_ATTRIBUTE_SYSTEM = 0x0400
	SMB_SEARCH_ATTRIBUTE_DIRECTORY = 0x1000
	SMB_SEARCH_ATTRIBUTE_ARCHIVE = 0x2000

# MS-CIFS SMB_EXT_FILE_ATTR
class SMB_EXT_FILE_ATTR(enum.IntFlag):
	ATTR_READONLY = 0x00000001
	ATTR_HIDDEN = 0x00000002
	ATTR_SYSTEM = 0x00000004
	ATTR_DIRECTORY = 0x00000010
	ATTR_ARCHIVE = 0x00000020
	ATTR_NORMAL = 0x00000080
	ATTR_TEMPORARY = 0x00000100
	ATTR_COMPRESSED = 0x00000800
	POSIX_SEMANTICS = 0x01000000
	BACKUP_SEMANTICS = 0x02000000
	DELETE_ON_CLOSE = 0x04000000
	SEQUENTIAL_SCAN = 0x08000000
	RANDOM_ACCESS = 0x10000000
	NO_BUFFERING = 0x20000000
	WRITE_THROUGH = 0x80000000
