from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16, read_rest
from smbcodec.protocol.smb.commands.base import SMBCommandBase

# MS-CIFS SMB_COM_ECHO
class SMB_COM_ECHO_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_ECHO

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.EchoCount = 0
		##### SMB_Data ###
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.EchoCount = U16.read(buff, field = 'EchoCount')

	def _data_from_buffer(self, buff, data_offset):
		self.Data = read_rest(buff)

	def _params_to_bytes(self):
		return U16.encode(self.EchoCount)

	def _data_to_bytes(self, data_offset):
		return self.Data

class SMB_COM_ECHO_REPLY(SMBCommandBase):
	"""
	One reply per echo, SequenceNumber counts them from 1
	"""
	COMMAND = SMBCommand.SMB_COM_ECHO
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.SequenceNumber = 0
		##### SMB_Data ###
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.SequenceNumber = U16.read(buff, field = 'SequenceNumber')

	def _data_from_buffer(self, buff, data_offset):
		self.Data = read_rest(buff)

	def _params_to_bytes(self):
		return U16.encode(self.SequenceNumber)

	def _data_to_bytes(self, data_offset):
		return self.Data
