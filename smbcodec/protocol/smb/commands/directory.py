from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands.base import SMBCommandBase

class DirectoryRequestBase(SMBCommandBase):
	"""
	No parameters, one DirectoryName string in the data
	"""
	def __init__(self):
		super().__init__()
		##### SMB_Data ###
		self.DirectoryName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _data_from_buffer(self, buff, data_offset):
		self.DirectoryName = self.DirectoryName.parse(buff)

	def _data_to_bytes(self, data_offset):
		return self.DirectoryName.to_bytes()

# MS-CIFS SMB_COM_CREATE_DIRECTORY
class SMB_COM_CREATE_DIRECTORY_REQ(DirectoryRequestBase):
	COMMAND = SMBCommand.SMB_COM_CREATE_DIRECTORY

class SMB_COM_CREATE_DIRECTORY_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_CREATE_DIRECTORY
	IS_REPLY = True

# MS-CIFS SMB_COM_DELETE_DIRECTORY
class SMB_COM_DELETE_DIRECTORY_REQ(DirectoryRequestBase):
	COMMAND = SMBCommand.SMB_COM_DELETE_DIRECTORY

class SMB_COM_DELETE_DIRECTORY_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_DELETE_DIRECTORY
	IS_REPLY = True

# MS-CIFS SMB_COM_CHECK_DIRECTORY
class SMB_COM_CHECK_DIRECTORY_REQ(DirectoryRequestBase):
	COMMAND = SMBCommand.SMB_COM_CHECK_DIRECTORY

class SMB_COM_CHECK_DIRECTORY_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_CHECK_DIRECTORY
	IS_REPLY = True
