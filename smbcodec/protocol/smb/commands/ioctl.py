from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16, U32
from smbcodec.protocol.smb.commands.transaction import TransactionBase

# MS-CIFS SMB_COM_IOCTL
class SMB_COM_IOCTL_REQ(TransactionBase):
	COMMAND = SMBCommand.SMB_COM_IOCTL

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.Category = 0
		self.Function = 0
		self.MaxParameterCount = 0
		self.MaxDataCount = 0
		self.Timeout = 0
		self.Reserved = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.Category = U16.read(buff, field = 'Category')
		self.Function = U16.read(buff, field = 'Function')
		self.TotalParameterCount = U16.read(buff, field = 'TotalParameterCount')
		self.TotalDataCount = U16.read(buff, field = 'TotalDataCount')
		self.MaxParameterCount = U16.read(buff, field = 'MaxParameterCount')
		self.MaxDataCount = U16.read(buff, field = 'MaxDataCount')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.Reserved = U16.read(buff, field = 'Reserved')
		self.ParameterCount = U16.read(buff, field = 'ParameterCount')
		self.ParameterOffset = U16.read(buff, field = 'ParameterOffset')
		self.DataCount = U16.read(buff, field = 'DataCount')
		self.DataOffset = U16.read(buff, field = 'DataOffset')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(self.Category)
		t += U16.encode(self.Function)
		t += U16.encode(self.TotalParameterCount)
		t += U16.encode(self.TotalDataCount)
		t += U16.encode(self.MaxParameterCount)
		t += U16.encode(self.MaxDataCount)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.Reserved)
		t += U16.encode(self.ParameterCount)
		t += U16.encode(self.ParameterOffset)
		t += U16.encode(self.DataCount)
		t += U16.encode(self.DataOffset)
		return t

class SMB_COM_IOCTL_REPLY(TransactionBase):
	COMMAND = SMBCommand.SMB_COM_IOCTL
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.ParameterDisplacement = 0
		self.DataDisplacement = 0

	def _params_from_buffer(self, buff, word_count):
		self.TotalParameterCount = U16.read(buff, field = 'TotalParameterCount')
		self.TotalDataCount = U16.read(buff, field = 'TotalDataCount')
		self.ParameterCount = U16.read(buff, field = 'ParameterCount')
		self.ParameterOffset = U16.read(buff, field = 'ParameterOffset')
		self.ParameterDisplacement = U16.read(buff, field = 'ParameterDisplacement')
		self.DataCount = U16.read(buff, field = 'DataCount')
		self.DataOffset = U16.read(buff, field = 'DataOffset')
		self.DataDisplacement = U16.read(buff, field = 'DataDisplacement')

	def _params_to_bytes(self):
		t  = U16.encode(self.TotalParameterCount)
		t += U16.encode(self.TotalDataCount)
		t += U16.encode(self.ParameterCount)
		t += U16.encode(self.ParameterOffset)
		t += U16.encode(self.ParameterDisplacement)
		t += U16.encode(self.DataCount)
		t += U16.encode(self.DataOffset)
		t += U16.encode(self.DataDisplacement)
		return t
