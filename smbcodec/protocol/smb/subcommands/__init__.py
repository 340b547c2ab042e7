from smbcodec.protocol.smb.subcommands.codes import TransactionSubcommand, Transaction2Subcommand, NTTransactSubcommand, QueryInformationLevel, QueryFSInformationLevel, SetInformationLevel, FindInformationLevel, SecurityInfo
from smbcodec.protocol.smb.subcommands.security import NT_TRANSACT_QUERY_SECURITY_DESC_REQ, NT_TRANSACT_QUERY_SECURITY_DESC_REPLY, NT_TRANSACT_SET_SECURITY_DESC_REQ
from smbcodec.protocol.smb.subcommands.trans2 import TRANS2_QUERY_FILE_INFORMATION_REQ, TRANS2_QUERY_PATH_INFORMATION_REQ, TRANS2_QUERY_FS_INFORMATION_REQ, TRANS2_QUERY_INFORMATION_REPLY, TRANS2_QUERY_FS_INFORMATION_REPLY
from smbcodec.protocol.smb.subcommands.infolevels import information_level_class, decode_information_level, encode_information_level

__all__ = ['TransactionSubcommand', 'Transaction2Subcommand', 'NTTransactSubcommand', 'QueryInformationLevel', 'QueryFSInformationLevel', 'SetInformationLevel', 'FindInformationLevel', 'SecurityInfo',
			'NT_TRANSACT_QUERY_SECURITY_DESC_REQ', 'NT_TRANSACT_QUERY_SECURITY_DESC_REPLY', 'NT_TRANSACT_SET_SECURITY_DESC_REQ',
			'TRANS2_QUERY_FILE_INFORMATION_REQ', 'TRANS2_QUERY_PATH_INFORMATION_REQ', 'TRANS2_QUERY_FS_INFORMATION_REQ',
			'TRANS2_QUERY_INFORMATION_REPLY', 'TRANS2_QUERY_FS_INFORMATION_REPLY',
			'information_level_class', 'decode_information_level', 'encode_information_level']
