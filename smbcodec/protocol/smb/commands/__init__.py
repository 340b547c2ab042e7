from smbcodec.protocol.smb.commands.negotiate import SMB_COM_NEGOTIATE_REQ, NegotiateReplyForm, SMB_COM_NEGOTIATE_REPLY
from smbcodec.protocol.smb.commands.session_setup import SMB_COM_SESSION_SETUP_ANDX_REQ, SMB_COM_SESSION_SETUP_ANDX_REPLY, SMB_COM_LOGOFF_ANDX_REQ, SMB_COM_LOGOFF_ANDX_REPLY
from smbcodec.protocol.smb.commands.tree_connect import SMB_COM_TREE_CONNECT_REQ, SMB_COM_TREE_CONNECT_REPLY, SMB_COM_TREE_CONNECT_ANDX_REQ, SMB_COM_TREE_CONNECT_ANDX_REPLY, SMB_COM_TREE_DISCONNECT_REQ, SMB_COM_TREE_DISCONNECT_REPLY
from smbcodec.protocol.smb.commands.directory import SMB_COM_CREATE_DIRECTORY_REQ, SMB_COM_CREATE_DIRECTORY_REPLY, SMB_COM_DELETE_DIRECTORY_REQ, SMB_COM_DELETE_DIRECTORY_REPLY, SMB_COM_CHECK_DIRECTORY_REQ, SMB_COM_CHECK_DIRECTORY_REPLY
from smbcodec.protocol.smb.commands.file import SMB_COM_OPEN_REQ, SMB_COM_OPEN_REPLY, SMB_COM_CREATE_REQ, SMB_COM_CREATE_REPLY, SMB_COM_CREATE_NEW_REQ, SMB_COM_CREATE_NEW_REPLY, SMB_COM_CREATE_TEMPORARY_REQ, SMB_COM_CREATE_TEMPORARY_REPLY, SMB_COM_CLOSE_REQ, SMB_COM_CLOSE_REPLY, SMB_COM_FLUSH_REQ, SMB_COM_FLUSH_REPLY, SMB_COM_DELETE_REQ, SMB_COM_DELETE_REPLY, SMB_COM_RENAME_REQ, SMB_COM_RENAME_REPLY, SMB_COM_NT_RENAME_REQ, SMB_COM_NT_RENAME_REPLY, SMB_COM_SEEK_REQ, SMB_COM_SEEK_REPLY, SMB_COM_PROCESS_EXIT_REQ, SMB_COM_PROCESS_EXIT_REPLY
from smbcodec.protocol.smb.commands.information import SMB_COM_QUERY_INFORMATION_REQ, SMB_COM_QUERY_INFORMATION_REPLY, SMB_COM_SET_INFORMATION_REQ, SMB_COM_SET_INFORMATION_REPLY, SMB_COM_QUERY_INFORMATION2_REQ, SMB_COM_QUERY_INFORMATION2_REPLY, SMB_COM_SET_INFORMATION2_REQ, SMB_COM_SET_INFORMATION2_REPLY, SMB_COM_QUERY_INFORMATION_DISK_REQ, SMB_COM_QUERY_INFORMATION_DISK_REPLY
from smbcodec.protocol.smb.commands.read import SMB_COM_READ_REQ, SMB_COM_READ_REPLY, SMB_COM_LOCK_AND_READ_REQ, SMB_COM_LOCK_AND_READ_REPLY, SMB_COM_READ_RAW_REQ, SMB_COM_READ_MPX_REQ, SMB_COM_READ_MPX_REPLY, SMB_COM_READ_ANDX_REQ, SMB_COM_READ_ANDX_REPLY
from smbcodec.protocol.smb.commands.write import SMB_COM_WRITE_REQ, SMB_COM_WRITE_REPLY, SMB_COM_WRITE_AND_UNLOCK_REQ, SMB_COM_WRITE_AND_UNLOCK_REPLY, SMB_COM_WRITE_RAW_REQ, SMB_COM_WRITE_RAW_REPLY, SMB_COM_WRITE_COMPLETE_REPLY, SMB_COM_WRITE_MPX_REQ, SMB_COM_WRITE_MPX_REPLY, SMB_COM_WRITE_AND_CLOSE_REQ, SMB_COM_WRITE_AND_CLOSE_REPLY, SMB_COM_WRITE_ANDX_REQ, SMB_COM_WRITE_ANDX_REPLY
from smbcodec.protocol.smb.commands.lock import SMB_COM_LOCK_BYTE_RANGE_REQ, SMB_COM_LOCK_BYTE_RANGE_REPLY, SMB_COM_UNLOCK_BYTE_RANGE_REQ, SMB_COM_UNLOCK_BYTE_RANGE_REPLY, SMB_COM_LOCKING_ANDX_REQ, SMB_COM_LOCKING_ANDX_REPLY
from smbcodec.protocol.smb.commands.open_andx import SMB_COM_OPEN_ANDX_REQ, SMB_COM_OPEN_ANDX_REPLY
from smbcodec.protocol.smb.commands.nt_create import SMB_COM_NT_CREATE_ANDX_REQ, SMB_COM_NT_CREATE_ANDX_REPLY
from smbcodec.protocol.smb.commands.transaction import SMB_COM_TRANSACTION_REQ, SMB_COM_TRANSACTION_REPLY, SMB_COM_TRANSACTION_SECONDARY_REQ, SMB_COM_TRANSACTION2_REQ, SMB_COM_TRANSACTION2_REPLY, SMB_COM_TRANSACTION2_SECONDARY_REQ
from smbcodec.protocol.smb.commands.nt_transact import SMB_COM_NT_TRANSACT_REQ, SMB_COM_NT_TRANSACT_REPLY, SMB_COM_NT_TRANSACT_SECONDARY_REQ
from smbcodec.protocol.smb.commands.ioctl import SMB_COM_IOCTL_REQ, SMB_COM_IOCTL_REPLY
from smbcodec.protocol.smb.commands.search import SMB_COM_SEARCH_REQ, SMB_COM_SEARCH_REPLY, SMB_COM_FIND_REQ, SMB_COM_FIND_REPLY, SMB_COM_FIND_UNIQUE_REQ, SMB_COM_FIND_UNIQUE_REPLY, SMB_COM_FIND_CLOSE_REQ, SMB_COM_FIND_CLOSE_REPLY, SMB_COM_FIND_CLOSE2_REQ, SMB_COM_FIND_CLOSE2_REPLY
from smbcodec.protocol.smb.commands.echo import SMB_COM_ECHO_REQ, SMB_COM_ECHO_REPLY
from smbcodec.protocol.smb.commands.printing import SMB_COM_OPEN_PRINT_FILE_REQ, SMB_COM_OPEN_PRINT_FILE_REPLY, SMB_COM_WRITE_PRINT_FILE_REQ, SMB_COM_WRITE_PRINT_FILE_REPLY, SMB_COM_CLOSE_PRINT_FILE_REQ, SMB_COM_CLOSE_PRINT_FILE_REPLY
from smbcodec.protocol.smb.commands.cancel import SMB_COM_NT_CANCEL_REQ


__all__ = ['SMB_COM_NEGOTIATE_REQ', 'NegotiateReplyForm', 'SMB_COM_NEGOTIATE_REPLY', 'SMB_COM_SESSION_SETUP_ANDX_REQ',
			'SMB_COM_SESSION_SETUP_ANDX_REPLY', 'SMB_COM_LOGOFF_ANDX_REQ', 'SMB_COM_LOGOFF_ANDX_REPLY',
			'SMB_COM_TREE_CONNECT_REQ', 'SMB_COM_TREE_CONNECT_REPLY', 'SMB_COM_TREE_CONNECT_ANDX_REQ',
			'SMB_COM_TREE_CONNECT_ANDX_REPLY', 'SMB_COM_TREE_DISCONNECT_REQ', 'SMB_COM_TREE_DISCONNECT_REPLY',
			'SMB_COM_CREATE_DIRECTORY_REQ', 'SMB_COM_CREATE_DIRECTORY_REPLY', 'SMB_COM_DELETE_DIRECTORY_REQ',
			'SMB_COM_DELETE_DIRECTORY_REPLY', 'SMB_COM_CHECK_DIRECTORY_REQ', 'SMB_COM_CHECK_DIRECTORY_REPLY',
			'SMB_COM_OPEN_REQ', 'SMB_COM_OPEN_REPLY', 'SMB_COM_CREATE_REQ', 'SMB_COM_CREATE_REPLY',
			'SMB_COM_CREATE_NEW_REQ', 'SMB_COM_CREATE_NEW_REPLY', 'SMB_COM_CREATE_TEMPORARY_REQ',
			'SMB_COM_CREATE_TEMPORARY_REPLY', 'SMB_COM_CLOSE_REQ', 'SMB_COM_CLOSE_REPLY', 'SMB_COM_FLUSH_REQ',
			'SMB_COM_FLUSH_REPLY', 'SMB_COM_DELETE_REQ', 'SMB_COM_DELETE_REPLY', 'SMB_COM_RENAME_REQ',
			'SMB_COM_RENAME_REPLY', 'SMB_COM_NT_RENAME_REQ', 'SMB_COM_NT_RENAME_REPLY', 'SMB_COM_SEEK_REQ',
			'SMB_COM_SEEK_REPLY', 'SMB_COM_PROCESS_EXIT_REQ', 'SMB_COM_PROCESS_EXIT_REPLY',
			'SMB_COM_QUERY_INFORMATION_REQ', 'SMB_COM_QUERY_INFORMATION_REPLY', 'SMB_COM_SET_INFORMATION_REQ',
			'SMB_COM_SET_INFORMATION_REPLY', 'SMB_COM_QUERY_INFORMATION2_REQ', 'SMB_COM_QUERY_INFORMATION2_REPLY',
			'SMB_COM_SET_INFORMATION2_REQ', 'SMB_COM_SET_INFORMATION2_REPLY', 'SMB_COM_QUERY_INFORMATION_DISK_REQ',
			'SMB_COM_QUERY_INFORMATION_DISK_REPLY', 'SMB_COM_READ_REQ', 'SMB_COM_READ_REPLY',
			'SMB_COM_LOCK_AND_READ_REQ', 'SMB_COM_LOCK_AND_READ_REPLY', 'SMB_COM_READ_RAW_REQ', 'SMB_COM_READ_MPX_REQ',
			'SMB_COM_READ_MPX_REPLY', 'SMB_COM_READ_ANDX_REQ', 'SMB_COM_READ_ANDX_REPLY', 'SMB_COM_WRITE_REQ',
			'SMB_COM_WRITE_REPLY', 'SMB_COM_WRITE_AND_UNLOCK_REQ', 'SMB_COM_WRITE_AND_UNLOCK_REPLY',
			'SMB_COM_WRITE_RAW_REQ', 'SMB_COM_WRITE_RAW_REPLY', 'SMB_COM_WRITE_COMPLETE_REPLY', 'SMB_COM_WRITE_MPX_REQ',
			'SMB_COM_WRITE_MPX_REPLY', 'SMB_COM_WRITE_AND_CLOSE_REQ', 'SMB_COM_WRITE_AND_CLOSE_REPLY',
			'SMB_COM_WRITE_ANDX_REQ', 'SMB_COM_WRITE_ANDX_REPLY', 'SMB_COM_LOCK_BYTE_RANGE_REQ',
			'SMB_COM_LOCK_BYTE_RANGE_REPLY', 'SMB_COM_UNLOCK_BYTE_RANGE_REQ', 'SMB_COM_UNLOCK_BYTE_RANGE_REPLY',
			'SMB_COM_LOCKING_ANDX_REQ', 'SMB_COM_LOCKING_ANDX_REPLY', 'SMB_COM_OPEN_ANDX_REQ', 'SMB_COM_OPEN_ANDX_REPLY',
			'SMB_COM_NT_CREATE_ANDX_REQ', 'SMB_COM_NT_CREATE_ANDX_REPLY', 'SMB_COM_TRANSACTION_REQ',
			'SMB_COM_TRANSACTION_REPLY', 'SMB_COM_TRANSACTION_SECONDARY_REQ', 'SMB_COM_TRANSACTION2_REQ',
			'SMB_COM_TRANSACTION2_REPLY', 'SMB_COM_TRANSACTION2_SECONDARY_REQ', 'SMB_COM_NT_TRANSACT_REQ',
			'SMB_COM_NT_TRANSACT_REPLY', 'SMB_COM_NT_TRANSACT_SECONDARY_REQ', 'SMB_COM_IOCTL_REQ', 'SMB_COM_IOCTL_REPLY',
			'SMB_COM_SEARCH_REQ', 'SMB_COM_SEARCH_REPLY', 'SMB_COM_FIND_REQ', 'SMB_COM_FIND_REPLY',
			'SMB_COM_FIND_UNIQUE_REQ', 'SMB_COM_FIND_UNIQUE_REPLY', 'SMB_COM_FIND_CLOSE_REQ', 'SMB_COM_FIND_CLOSE_REPLY',
			'SMB_COM_FIND_CLOSE2_REQ', 'SMB_COM_FIND_CLOSE2_REPLY', 'SMB_COM_ECHO_REQ', 'SMB_COM_ECHO_REPLY',
			'SMB_COM_OPEN_PRINT_FILE_REQ', 'SMB_COM_OPEN_PRINT_FILE_REPLY', 'SMB_COM_WRITE_PRINT_FILE_REQ',
			'SMB_COM_WRITE_PRINT_FILE_REPLY', 'SMB_COM_CLOSE_PRINT_FILE_REQ', 'SMB_COM_CLOSE_PRINT_FILE_REPLY',
			'SMB_COM_NT_CANCEL_REQ']
