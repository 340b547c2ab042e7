from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commons import SMBOplockLevel, SMBImpersonationLevel, SMBShareAccess, SMBCreateDisposition, SMBCreateOptions, to_enum, int_value
from smbcodec.protocol.smb.primitives import U8, U16, U32, U64
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.structures.attributes import SMB_EXT_FILE_ATTR
from smbcodec.protocol.smb.structures.filetime import FILETIME
from smbcodec.protocol.smb.structures.nmpipe import SMB_NMPIPE_STATUS
from smbcodec.protocol.smb.commands.base import SMBCommandBase, unicode_pad, read_unicode_pad

# MS-CIFS SMB_COM_NT_CREATE_ANDX
class SMB_COM_NT_CREATE_ANDX_REQ(SMBCommandBase):
	"""
	NameLength is the byte length of FileName without its terminator,
	it is recomputed on every encode.
	"""
	COMMAND = SMBCommand.SMB_COM_NT_CREATE_ANDX
	ANDX = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Reserved = 0
		self.NameLength = 0
		self.Flags = 0
		self.RootDirectoryFID = 0
		self.DesiredAccess = 0
		self.AllocationSize = 0
		self.ExtFileAttributes = SMB_EXT_FILE_ATTR(0)
		self.ShareAccess = SMBShareAccess.FILE_SHARE_NONE
		self.CreateDisposition = SMBCreateDisposition.FILE_SUPERSEDE
		self.CreateOptions = SMBCreateOptions(0)
		self.ImpersonationLevel = SMBImpersonationLevel.SECURITY_ANONYMOUS
		self.SecurityFlags = 0
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)

	def _params_from_buffer(self, buff, word_count):
		self.Reserved = U8.read(buff, field = 'Reserved')
		self.NameLength = U16.read(buff, field = 'NameLength')
		self.Flags = U32.read(buff, field = 'Flags')
		self.RootDirectoryFID = U32.read(buff, field = 'RootDirectoryFID')
		self.DesiredAccess = U32.read(buff, field = 'DesiredAccess')
		self.AllocationSize = U64.read(buff, field = 'AllocationSize')
		self.ExtFileAttributes = SMB_EXT_FILE_ATTR(U32.read(buff, field = 'ExtFileAttributes'))
		self.ShareAccess = SMBShareAccess(U32.read(buff, field = 'ShareAccess'))
		self.CreateDisposition = to_enum(SMBCreateDisposition, U32.read(buff, field = 'CreateDisposition'))
		self.CreateOptions = SMBCreateOptions(U32.read(buff, field = 'CreateOptions'))
		self.ImpersonationLevel = to_enum(SMBImpersonationLevel, U32.read(buff, field = 'ImpersonationLevel'))
		self.SecurityFlags = U8.read(buff, field = 'SecurityFlags')

	def _data_from_buffer(self, buff, data_offset):
		if self.FileName.is_unicode is True:
			read_unicode_pad(buff, data_offset)
		self.FileName = self.FileName.parse(buff)

	def _params_to_bytes(self):
		t  = U8.encode(self.Reserved)
		t += U16.encode(self.NameLength)
		t += U32.encode(self.Flags)
		t += U32.encode(self.RootDirectoryFID)
		t += U32.encode(self.DesiredAccess)
		t += U64.encode(self.AllocationSize)
		t += U32.encode(int(self.ExtFileAttributes))
		t += U32.encode(int_value(self.ShareAccess))
		t += U32.encode(int_value(self.CreateDisposition))
		t += U32.encode(int_value(self.CreateOptions))
		t += U32.encode(int_value(self.ImpersonationLevel))
		t += U8.encode(self.SecurityFlags)
		return t

	def _data_to_bytes(self, data_offset):
		self.NameLength = len(self.FileName.Buffer)
		t = b''
		if self.FileName.is_unicode is True:
			t += unicode_pad(self.default_data_offset(data_offset))
		t += self.FileName.to_bytes()
		return t

class SMB_COM_NT_CREATE_ANDX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_NT_CREATE_ANDX
	ANDX = True
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.OpLockLevel = SMBOplockLevel.NONE
		self.FID = 0
		self.CreateDisposition = SMBCreateDisposition.FILE_SUPERSEDE
		self.CreateTime = FILETIME()
		self.LastAccessTime = FILETIME()
		self.LastWriteTime = FILETIME()
		self.LastChangeTime = FILETIME()
		self.ExtFileAttributes = SMB_EXT_FILE_ATTR(0)
		self.AllocationSize = 0
		self.EndOfFile = 0
		self.ResourceType = 0
		self.NMPipeStatus = SMB_NMPIPE_STATUS()
		self.Directory = 0

	def _params_from_buffer(self, buff, word_count):
		self.OpLockLevel = to_enum(SMBOplockLevel, U8.read(buff, field = 'OpLockLevel'))
		self.FID = U16.read(buff, field = 'FID')
		self.CreateDisposition = to_enum(SMBCreateDisposition, U32.read(buff, field = 'CreateDisposition'))
		self.CreateTime = FILETIME.from_buffer(buff)
		self.LastAccessTime = FILETIME.from_buffer(buff)
		self.LastWriteTime = FILETIME.from_buffer(buff)
		self.LastChangeTime = FILETIME.from_buffer(buff)
		self.ExtFileAttributes = SMB_EXT_FILE_ATTR(U32.read(buff, field = 'ExtFileAttributes'))
		self.AllocationSize = U64.read(buff, field = 'AllocationSize')
		self.EndOfFile = U64.read(buff, field = 'EndOfFile')
		self.ResourceType = U16.read(buff, field = 'ResourceType')
		self.NMPipeStatus = SMB_NMPIPE_STATUS.from_buffer(buff)
		self.Directory = U8.read(buff, field = 'Directory')

	def _params_to_bytes(self):
		t  = U8.encode(int_value(self.OpLockLevel))
		t += U16.encode(self.FID)
		t += U32.encode(int_value(self.CreateDisposition))
		t += self.CreateTime.to_bytes()
		t += self.LastAccessTime.to_bytes()
		t += self.LastWriteTime.to_bytes()
		t += self.LastChangeTime.to_bytes()
		t += U32.encode(int(self.ExtFileAttributes))
		t += U64.encode(self.AllocationSize)
		t += U64.encode(self.EndOfFile)
		t += U16.encode(self.ResourceType)
		t += self.NMPipeStatus.to_bytes()
		t += U8.encode(self.Directory)
		return t
