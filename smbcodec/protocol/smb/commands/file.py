from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commons import SMBSeekMode, to_enum, int_value
from smbcodec.protocol.smb.primitives import U16, U32, I32, UTIME
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.structures.attributes import SMB_FILE_ATTRIBUTES
from smbcodec.protocol.smb.commands.base import SMBCommandBase

class FIDCommandBase(SMBCommandBase):
	"""
	Single FID parameter word
	"""
	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')

	def _params_to_bytes(self):
		return U16.encode(self.FID)

# MS-CIFS SMB_COM_OPEN
class SMB_COM_OPEN_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_OPEN

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.AccessMode = 0
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(0)
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _params_from_buffer(self, buff, word_count):
		self.AccessMode = U16.read(buff, field = 'AccessMode')
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'SearchAttributes'))

	def _data_from_buffer(self, buff, data_offset):
		self.FileName = self.FileName.parse(buff)

	def _params_to_bytes(self):
		return U16.encode(self.AccessMode) + U16.encode(int(self.SearchAttributes))

	def _data_to_bytes(self, data_offset):
		return self.FileName.to_bytes()

class SMB_COM_OPEN_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_OPEN
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.FileAttrs = SMB_FILE_ATTRIBUTES(0)
		self.LastModified = 0 #UTIME
		self.FileSize = 0
		self.AccessMode = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.FileAttrs = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'FileAttrs'))
		self.LastModified = UTIME.read(buff, field = 'LastModified')
		self.FileSize = U32.read(buff, field = 'FileSize')
		self.AccessMode = U16.read(buff, field = 'AccessMode')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(int(self.FileAttrs))
		t += UTIME.encode(self.LastModified)
		t += U32.encode(self.FileSize)
		t += U16.encode(self.AccessMode)
		return t

class CreateRequestBase(SMBCommandBase):
	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FileAttributes = SMB_FILE_ATTRIBUTES(0)
		self.CreationTime = 0 #UTIME
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _params_from_buffer(self, buff, word_count):
		self.FileAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'FileAttributes'))
		self.CreationTime = UTIME.read(buff, field = 'CreationTime')

	def _data_from_buffer(self, buff, data_offset):
		self.FileName = self.FileName.parse(buff)

	def _params_to_bytes(self):
		return U16.encode(int(self.FileAttributes)) + UTIME.encode(self.CreationTime)

	def _data_to_bytes(self, data_offset):
		return self.FileName.to_bytes()

# MS-CIFS SMB_COM_CREATE
class SMB_COM_CREATE_REQ(CreateRequestBase):
	COMMAND = SMBCommand.SMB_COM_CREATE

class SMB_COM_CREATE_REPLY(FIDCommandBase):
	COMMAND = SMBCommand.SMB_COM_CREATE
	IS_REPLY = True

# MS-CIFS SMB_COM_CREATE_NEW
class SMB_COM_CREATE_NEW_REQ(CreateRequestBase):
	COMMAND = SMBCommand.SMB_COM_CREATE_NEW

class SMB_COM_CREATE_NEW_REPLY(FIDCommandBase):
	COMMAND = SMBCommand.SMB_COM_CREATE_NEW
	IS_REPLY = True

# MS-CIFS SMB_COM_CREATE_TEMPORARY
class SMB_COM_CREATE_TEMPORARY_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_CREATE_TEMPORARY

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FileAttributes = SMB_FILE_ATTRIBUTES(0)
		self.CreationTime = 0 #UTIME
		##### SMB_Data ###
		self.DirectoryName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _params_from_buffer(self, buff, word_count):
		self.FileAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'FileAttributes'))
		self.CreationTime = UTIME.read(buff, field = 'CreationTime')

	def _data_from_buffer(self, buff, data_offset):
		self.DirectoryName = self.DirectoryName.parse(buff)

	def _params_to_bytes(self):
		return U16.encode(int(self.FileAttributes)) + UTIME.encode(self.CreationTime)

	def _data_to_bytes(self, data_offset):
		return self.DirectoryName.to_bytes()

class SMB_COM_CREATE_TEMPORARY_REPLY(FIDCommandBase):
	COMMAND = SMBCommand.SMB_COM_CREATE_TEMPORARY
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### SMB_Data ###
		self.TemporaryFileName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _data_from_buffer(self, buff, data_offset):
		self.TemporaryFileName = self.TemporaryFileName.parse(buff)

	def _data_to_bytes(self, data_offset):
		return self.TemporaryFileName.to_bytes()

# MS-CIFS SMB_COM_CLOSE
class SMB_COM_CLOSE_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_CLOSE

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.LastTimeModified = 0 #UTIME

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.LastTimeModified = UTIME.read(buff, field = 'LastTimeModified')

	def _params_to_bytes(self):
		return U16.encode(self.FID) + UTIME.encode(self.LastTimeModified)

class SMB_COM_CLOSE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_CLOSE
	IS_REPLY = True

# MS-CIFS SMB_COM_FLUSH
class SMB_COM_FLUSH_REQ(FIDCommandBase):
	COMMAND = SMBCommand.SMB_COM_FLUSH

class SMB_COM_FLUSH_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_FLUSH
	IS_REPLY = True

# MS-CIFS SMB_COM_DELETE
class SMB_COM_DELETE_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_DELETE

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(0)
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _params_from_buffer(self, buff, word_count):
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'SearchAttributes'))

	def _data_from_buffer(self, buff, data_offset):
		self.FileName = self.FileName.parse(buff)

	def _params_to_bytes(self):
		return U16.encode(int(self.SearchAttributes))

	def _data_to_bytes(self, data_offset):
		return self.FileName.to_bytes()

class SMB_COM_DELETE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_DELETE
	IS_REPLY = True

# MS-CIFS SMB_COM_RENAME
class SMB_COM_RENAME_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_RENAME

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(0)
		##### SMB_Data ###
		self.OldFileName = SMB_STRING(BufferFormat.ASCII_STRING)
		self.NewFileName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _params_from_buffer(self, buff, word_count):
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'SearchAttributes'))

	def _data_from_buffer(self, buff, data_offset):
		self.OldFileName = self.OldFileName.parse(buff)
		self.NewFileName = self.NewFileName.parse(buff)

	def _params_to_bytes(self):
		return U16.encode(int(self.SearchAttributes))

	def _data_to_bytes(self, data_offset):
		return self.OldFileName.to_bytes() + self.NewFileName.to_bytes()

class SMB_COM_RENAME_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_RENAME
	IS_REPLY = True

# MS-CIFS SMB_COM_NT_RENAME
class SMB_COM_NT_RENAME_REQ(SMB_COM_RENAME_REQ):
	COMMAND = SMBCommand.SMB_COM_NT_RENAME

	def __init__(self):
		super().__init__()
		self.InformationLevel = 0
		self.Reserved = 0

	def _params_from_buffer(self, buff, word_count):
		super()._params_from_buffer(buff, word_count)
		self.InformationLevel = U16.read(buff, field = 'InformationLevel')
		self.Reserved = U32.read(buff, field = 'Reserved')

	def _params_to_bytes(self):
		t  = super()._params_to_bytes()
		t += U16.encode(self.InformationLevel)
		t += U32.encode(self.Reserved)
		return t

class SMB_COM_NT_RENAME_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_NT_RENAME
	IS_REPLY = True

# MS-CIFS SMB_COM_SEEK
class SMB_COM_SEEK_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_SEEK

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.Mode = SMBSeekMode.FROM_START
		self.Offset = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.Mode = to_enum(SMBSeekMode, U16.read(buff, field = 'Mode'))
		self.Offset = I32.read(buff, field = 'Offset')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(int_value(self.Mode))
		t += I32.encode(self.Offset)
		return t

class SMB_COM_SEEK_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_SEEK
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Offset = 0

	def _params_from_buffer(self, buff, word_count):
		self.Offset = U32.read(buff, field = 'Offset')

	def _params_to_bytes(self):
		return U32.encode(self.Offset)

# MS-CIFS SMB_COM_PROCESS_EXIT
class SMB_COM_PROCESS_EXIT_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_PROCESS_EXIT

class SMB_COM_PROCESS_EXIT_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_PROCESS_EXIT
	IS_REPLY = True
