import enum

# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-cifs/a4229e1a-8a4e-489a-a2eb-11b7f360e60c
class SMBSecurityMode(enum.IntFlag):
	NEGOTIATE_USER_SECURITY = 0x01
	NEGOTIATE_ENCRYPT_PASSWORDS = 0x02
	NEGOTIATE_SECURITY_SIGNATURES_ENABLED = 0x04
	NEGOTIATE_SECURITY_SIGNATURES_REQUIRED = 0x08

class SMBCapabilities(enum.IntFlag):
	CAP_RAW_MODE = 0x00000001
	CAP_MPX_MODE = 0x00000002
	CAP_UNICODE = 0x00000004
	CAP_LARGE_FILES = 0x00000008
	CAP_NT_SMBS = 0x00000010
	CAP_RPC_REMOTE_APIS = 0x00000020
	CAP_STATUS32 = 0x00000040
	CAP_LEVEL_II_OPLOCKS = 0x00000080
	CAP_LOCK_AND_READ = 0x00000100
	CAP_NT_FIND = 0x00000200
	CAP_BULK_TRANSFER = 0x00000400 #not used
	CAP_COMPRESSED_DATA = 0x00000800 #not used
	CAP_DFS = 0x00001000
	CAP_INFOLEVEL_PASSTHROUGH = 0x00002000
	CAP_LARGE_READX = 0x00004000
	CAP_LARGE_WRITEX = 0x00008000
	CAP_LWIO = 0x00010000
	CAP_UNIX = 0x00800000
	CAP_COMPRESSED_BULK = 0x02000000 #not used
	CAP_DYNAMIC_REAUTH = 0x20000000
	CAP_PERSISTENT_HANDLES = 0x40000000 #not used
	CAP_EXTENDED_SECURITY = 0x80000000

# MS-CIFS SMB_COM_LOCKING_ANDX TypeOfLock
class SMBLockType(enum.IntFlag):
	READ_WRITE_LOCK = 0x00
	SHARED_LOCK = 0x01
	OPLOCK_RELEASE = 0x02
	CHANGE_LOCKTYPE = 0x04
	CANCEL_LOCK = 0x08
	LARGE_FILES = 0x10

class SMBTreeConnectAndXFlags(enum.IntFlag):
	TREE_CONNECT_ANDX_DISCONNECT_TID = 0x0001
	TREE_CONNECT_ANDX_EXTENDED_SIGNATURES = 0x0004
	TREE_CONNECT_ANDX_EXTENDED_RESPONSE = 0x0008

class SMBSeekMode(enum.Enum):
	FROM_START = 0x0000
	FROM_CURRENT = 0x0001
	FROM_END = 0x0002

class SMBOplockLevel(enum.Enum):
	NONE = 0x00
	EXCLUSIVE = 0x01
	BATCH = 0x02
	LEVEL_II = 0x03

class SMBImpersonationLevel(enum.Enum):
	SECURITY_ANONYMOUS = 0x00000000
	SECURITY_IDENTIFICATION = 0x00000001
	SECURITY_IMPERSONATION = 0x00000002
	SECURITY_DELEGATION = 0x00000003

class SMBShareAccess(enum.IntFlag):
	FILE_SHARE_NONE = 0x00000000
	FILE_SHARE_READ = 0x00000001
	FILE_SHARE_WRITE = 0x00000002
	FILE_SHARE_DELETE = 0x00000004

class SMBCreateDisposition(enum.Enum):
	FILE_SUPERSEDE = 0x00000000 #If the file already exists, supersede it. Otherwise, create the file.
	FILE_OPEN = 0x00000001 #If the file already exists, return success; otherwise, fail the operation.
	FILE_CREATE = 0x00000002 #If the file already exists, fail the operation; otherwise, create the file.
	FILE_OPEN_IF = 0x00000003 #Open the file if it already exists; otherwise, create the file.
	FILE_OVERWRITE = 0x00000004 #Overwrite the file if it already exists; otherwise, fail the operation.
	FILE_OVERWRITE_IF = 0x00000005 #Overwrite the file if it already exists; otherwise, create the file.

class SMBCreateOptions(enum.IntFlag):
	FILE_DIRECTORY_FILE = 0x00000001
	FILE_WRITE_THROUGH = 0x00000002
	FILE_SEQUENTIAL_ONLY = 0x00000004
	FILE_NO_INTERMEDIATE_BUFFERING = 0x00000008
	FILE_SYNCHRONOUS_IO_ALERT = 0x00000010
	FILE_SYNCHRONOUS_IO_NONALERT = 0x00000020
	FILE_NON_DIRECTORY_FILE = 0x00000040
	FILE_CREATE_TREE_CONNECTION = 0x00000080
	FILE_COMPLETE_IF_OPLOCKED = 0x00000100
	FILE_NO_EA_KNOWLEDGE = 0x00000200
	FILE_OPEN_FOR_RECOVERY = 0x00000400
	FILE_RANDOM_ACCESS = 0x00000800
	FILE_DELETE_ON_CLOSE = 0x00001000
	FILE_OPEN_BY_FILE_ID = 0x00002000
	FILE_OPEN_FOR_BACKUP_INTENT = 0x00004000
	FILE_NO_COMPRESSION = 0x00008000
	FILE_RESERVE_OPFILTER = 0x00100000
	FILE_OPEN_NO_RECALL = 0x00400000
	FILE_OPEN_FOR_FREE_SPACE_QUERY = 0x00800000

def to_enum(enumtype, value):
	"""
	Maps a wire value to enumtype, values the enum does not know are kept as int
	"""
	try:
		return enumtype(value)
	except ValueError:
		return value

def int_value(x):
	if isinstance(x, enum.Enum):
		return x.value
	return int(x)
