import enum

# MS-CIFS SMB_COM_TRANSACTION subcommand codes, Setup[0] of the request
class TransactionSubcommand(enum.Enum):
	TRANS_SET_NMPIPE_STATE = 0x0001
	TRANS_MAILSLOT_WRITE = 0x0001 #same code, sent to a mailslot instead of a pipe
	TRANS_RAW_READ_NMPIPE = 0x0011
	TRANS_QUERY_NMPIPE_STATE = 0x0021
	TRANS_QUERY_NMPIPE_INFO = 0x0022
	TRANS_PEEK_NMPIPE = 0x0023
	TRANS_TRANSACT_NMPIPE = 0x0026
	TRANS_RAW_WRITE_NMPIPE = 0x0031
	TRANS_READ_NMPIPE = 0x0036
	TRANS_WRITE_NMPIPE = 0x0037
	TRANS_WAIT_NMPIPE = 0x0053
	TRANS_CALL_NMPIPE = 0x0054

# MS-CIFS SMB_COM_TRANSACTION2 subcommand codes, Setup[0] of the request
class Transaction2Subcommand(enum.Enum):
	TRANS2_OPEN2 = 0x0000
	TRANS2_FIND_FIRST2 = 0x0001
	TRANS2_FIND_NEXT2 = 0x0002
	TRANS2_QUERY_FS_INFORMATION = 0x0003
	TRANS2_SET_FS_INFORMATION = 0x0004
	TRANS2_QUERY_PATH_INFORMATION = 0x0005
	TRANS2_SET_PATH_INFORMATION = 0x0006
	TRANS2_QUERY_FILE_INFORMATION = 0x0007
	TRANS2_SET_FILE_INFORMATION = 0x0008
	TRANS2_FSCTL = 0x0009
	TRANS2_IOCTL2 = 0x000A
	TRANS2_FIND_NOTIFY_FIRST = 0x000B
	TRANS2_FIND_NOTIFY_NEXT = 0x000C
	TRANS2_CREATE_DIRECTORY = 0x000D
	TRANS2_SESSION_SETUP = 0x000E
	TRANS2_GET_DFS_REFERRAL = 0x0010
	TRANS2_REPORT_DFS_INCONSISTENCY = 0x0011

# MS-CIFS SMB_COM_NT_TRANSACT subcommand codes, Function field of the request
class NTTransactSubcommand(enum.Enum):
	NT_TRANSACT_CREATE = 0x0001
	NT_TRANSACT_IOCTL = 0x0002
	NT_TRANSACT_SET_SECURITY_DESC = 0x0003
	NT_TRANSACT_NOTIFY_CHANGE = 0x0004
	NT_TRANSACT_RENAME = 0x0005
	NT_TRANSACT_QUERY_SECURITY_DESC = 0x0006
	NT_TRANSACT_QUERY_QUOTA = 0x0007
	NT_TRANSACT_SET_QUOTA = 0x0008

# MS-CIFS query information levels (TRANS2_QUERY_PATH/FILE_INFORMATION)
class QueryInformationLevel(enum.Enum):
	SMB_INFO_STANDARD = 0x0001
	SMB_INFO_QUERY_EA_SIZE = 0x0002
	SMB_INFO_QUERY_EAS_FROM_LIST = 0x0003
	SMB_INFO_QUERY_ALL_EAS = 0x0004
	SMB_INFO_IS_NAME_VALID = 0x0006
	SMB_QUERY_FILE_BASIC_INFO = 0x0101
	SMB_QUERY_FILE_STANDARD_INFO = 0x0102
	SMB_QUERY_FILE_EA_INFO = 0x0103
	SMB_QUERY_FILE_NAME_INFO = 0x0104
	SMB_QUERY_FILE_ALL_INFO = 0x0107
	SMB_QUERY_FILE_ALT_NAME_INFO = 0x0108
	SMB_QUERY_FILE_STREAM_INFO = 0x0109
	SMB_QUERY_FILE_COMPRESSION_INFO = 0x010B

class SecurityInfo(enum.IntFlag):
	OWNER_SECURITY_INFORMATION = 0x00000001
	GROUP_SECURITY_INFORMATION = 0x00000002
	DACL_SECURITY_INFORMATION = 0x00000004
	SACL_SECURITY_INFORMATION = 0x00000008

# MS-CIFS TRANS2_QUERY_FS_INFORMATION levels
class QueryFSInformationLevel(enum.Enum):
	SMB_INFO_ALLOCATION = 0x0001
	SMB_INFO_VOLUME = 0x0002
	SMB_QUERY_FS_VOLUME_INFO = 0x0102
	SMB_QUERY_FS_SIZE_INFO = 0x0103
	SMB_QUERY_FS_DEVICE_INFO = 0x0104
	SMB_QUERY_FS_ATTRIBUTE_INFO = 0x0105

# MS-CIFS TRANS2_SET_PATH/FILE_INFORMATION levels
class SetInformationLevel(enum.Enum):
	SMB_INFO_STANDARD = 0x0001
	SMB_INFO_SET_EAS = 0x0002
	SMB_SET_FILE_BASIC_INFO = 0x0101
	SMB_SET_FILE_DISPOSITION_INFO = 0x0102
	SMB_SET_FILE_ALLOCATION_INFO = 0x0103
	SMB_SET_FILE_END_OF_FILE_INFO = 0x0104

# MS-CIFS TRANS2_FIND_FIRST2 / TRANS2_FIND_NEXT2 levels
class FindInformationLevel(enum.Enum):
	SMB_INFO_STANDARD = 0x0001
	SMB_INFO_QUERY_EA_SIZE = 0x0002
	SMB_INFO_QUERY_EAS_FROM_LIST = 0x0003
	SMB_FIND_FILE_DIRECTORY_INFO = 0x0101
	SMB_FIND_FILE_FULL_DIRECTORY_INFO = 0x0102
	SMB_FIND_FILE_NAMES_INFO = 0x0103
	SMB_FIND_FILE_BOTH_DIRECTORY_INFO = 0x0104
