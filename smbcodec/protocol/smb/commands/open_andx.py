from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16, U32, UTIME
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.structures.attributes import SMB_FILE_ATTRIBUTES
from smbcodec.protocol.smb.structures.nmpipe import SMB_NMPIPE_STATUS
from smbcodec.protocol.smb.commands.base import SMBCommandBase, unicode_pad, read_unicode_pad

# MS-CIFS SMB_COM_OPEN_ANDX
class SMB_COM_OPEN_ANDX_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_OPEN_ANDX
	ANDX = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Flags = 0
		self.AccessMode = 0
		self.SearchAttrs = SMB_FILE_ATTRIBUTES(0)
		self.FileAttrs = SMB_FILE_ATTRIBUTES(0)
		self.CreationTime = 0 #UTIME
		self.OpenMode = 0
		self.AllocationSize = 0
		self.Timeout = 0
		self.Reserved = [0, 0]
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)

	def _params_from_buffer(self, buff, word_count):
		self.Flags = U16.read(buff, field = 'Flags')
		self.AccessMode = U16.read(buff, field = 'AccessMode')
		self.SearchAttrs = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'SearchAttrs'))
		self.FileAttrs = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'FileAttrs'))
		self.CreationTime = UTIME.read(buff, field = 'CreationTime')
		self.OpenMode = U16.read(buff, field = 'OpenMode')
		self.AllocationSize = U32.read(buff, field = 'AllocationSize')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.Reserved = [U16.read(buff, field = 'Reserved') for _ in range(2)]

	def _data_from_buffer(self, buff, data_offset):
		if self.FileName.is_unicode is True:
			read_unicode_pad(buff, data_offset)
		self.FileName = self.FileName.parse(buff)

	def _params_to_bytes(self):
		t  = U16.encode(self.Flags)
		t += U16.encode(self.AccessMode)
		t += U16.encode(int(self.SearchAttrs))
		t += U16.encode(int(self.FileAttrs))
		t += UTIME.encode(self.CreationTime)
		t += U16.encode(self.OpenMode)
		t += U32.encode(self.AllocationSize)
		t += U32.encode(self.Timeout)
		for x in self.Reserved:
			t += U16.encode(x)
		return t

	def _data_to_bytes(self, data_offset):
		t = b''
		if self.FileName.is_unicode is True:
			t += unicode_pad(self.default_data_offset(data_offset))
		t += self.FileName.to_bytes()
		return t

class SMB_COM_OPEN_ANDX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_OPEN_ANDX
	ANDX = True
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.FileAttrs = SMB_FILE_ATTRIBUTES(0)
		self.LastWriteTime = 0 #UTIME
		self.FileDataSize = 0
		self.AccessRights = 0
		self.ResourceType = 0
		self.NMPipeStatus = SMB_NMPIPE_STATUS()
		self.OpenResults = 0
		self.Reserved = [0, 0, 0]

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.FileAttrs = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'FileAttrs'))
		self.LastWriteTime = UTIME.read(buff, field = 'LastWriteTime')
		self.FileDataSize = U32.read(buff, field = 'FileDataSize')
		self.AccessRights = U16.read(buff, field = 'AccessRights')
		self.ResourceType = U16.read(buff, field = 'ResourceType')
		self.NMPipeStatus = SMB_NMPIPE_STATUS.from_buffer(buff)
		self.OpenResults = U16.read(buff, field = 'OpenResults')
		self.Reserved = [U16.read(buff, field = 'Reserved') for _ in range(3)]

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(int(self.FileAttrs))
		t += UTIME.encode(self.LastWriteTime)
		t += U32.encode(self.FileDataSize)
		t += U16.encode(self.AccessRights)
		t += U16.encode(self.ResourceType)
		t += self.NMPipeStatus.to_bytes()
		t += U16.encode(self.OpenResults)
		for x in self.Reserved:
			t += U16.encode(x)
		return t
