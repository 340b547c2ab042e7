from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands.base import SMBCommandBase
from smbcodec.protocol.smb.commands.file import FIDCommandBase

# MS-CIFS SMB_COM_OPEN_PRINT_FILE
class SMB_COM_OPEN_PRINT_FILE_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_OPEN_PRINT_FILE

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.SetupLength = 0
		self.Mode = 0 #0 text, 1 graphics
		##### SMB_Data ###
		self.Identifier = SMB_STRING(BufferFormat.ASCII_STRING)

	def _params_from_buffer(self, buff, word_count):
		self.SetupLength = U16.read(buff, field = 'SetupLength')
		self.Mode = U16.read(buff, field = 'Mode')

	def _data_from_buffer(self, buff, data_offset):
		self.Identifier = self.Identifier.parse(buff)

	def _params_to_bytes(self):
		return U16.encode(self.SetupLength) + U16.encode(self.Mode)

	def _data_to_bytes(self, data_offset):
		return self.Identifier.to_bytes()

class SMB_COM_OPEN_PRINT_FILE_REPLY(FIDCommandBase):
	COMMAND = SMBCommand.SMB_COM_OPEN_PRINT_FILE
	IS_REPLY = True

# MS-CIFS SMB_COM_WRITE_PRINT_FILE
class SMB_COM_WRITE_PRINT_FILE_REQ(FIDCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_PRINT_FILE

	def __init__(self):
		super().__init__()
		##### SMB_Data ###
		self.Data = b''

	def _data_from_buffer(self, buff, data_offset):
		self.Data = SMB_STRING.from_buffer(buff, BufferFormat.DATA_BLOCK).Buffer

	def _data_to_bytes(self, data_offset):
		return SMB_STRING(BufferFormat.DATA_BLOCK, self.Data).to_bytes()

class SMB_COM_WRITE_PRINT_FILE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_PRINT_FILE
	IS_REPLY = True

# MS-CIFS SMB_COM_CLOSE_PRINT_FILE
class SMB_COM_CLOSE_PRINT_FILE_REQ(FIDCommandBase):
	COMMAND = SMBCommand.SMB_COM_CLOSE_PRINT_FILE

class SMB_COM_CLOSE_PRINT_FILE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_CLOSE_PRINT_FILE
	IS_REPLY = True
