from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U8, U16, U32, read_exact
from smbcodec.protocol.smb.commands.transaction import TransactionBase

# MS-CIFS SMB_COM_NT_TRANSACT
class SMB_COM_NT_TRANSACT_REQ(TransactionBase):
	"""
	19 words plus the setup words, counts and offsets are 32 bit wide.
	Function holds the NT_TRANSACT subcommand code.
	"""
	COMMAND = SMBCommand.SMB_COM_NT_TRANSACT

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.MaxSetupCount = 0
		self.Reserved1 = 0
		self.MaxParameterCount = 0
		self.MaxDataCount = 0
		self.SetupCount = 0
		self.Function = 0
		self.Setup = []

	def _params_from_buffer(self, buff, word_count):
		self.MaxSetupCount = U8.read(buff, field = 'MaxSetupCount')
		self.Reserved1 = U16.read(buff, field = 'Reserved1')
		self.TotalParameterCount = U32.read(buff, field = 'TotalParameterCount')
		self.TotalDataCount = U32.read(buff, field = 'TotalDataCount')
		self.MaxParameterCount = U32.read(buff, field = 'MaxParameterCount')
		self.MaxDataCount = U32.read(buff, field = 'MaxDataCount')
		self.ParameterCount = U32.read(buff, field = 'ParameterCount')
		self.ParameterOffset = U32.read(buff, field = 'ParameterOffset')
		self.DataCount = U32.read(buff, field = 'DataCount')
		self.DataOffset = U32.read(buff, field = 'DataOffset')
		self.SetupCount = U8.read(buff, field = 'SetupCount')
		self.Function = U16.read(buff, field = 'Function')
		self.Setup = self._read_setup(buff, self.SetupCount)

	def _params_to_bytes(self):
		self.SetupCount = len(self.Setup)
		t  = U8.encode(self.MaxSetupCount)
		t += U16.encode(self.Reserved1)
		t += U32.encode(self.TotalParameterCount)
		t += U32.encode(self.TotalDataCount)
		t += U32.encode(self.MaxParameterCount)
		t += U32.encode(self.MaxDataCount)
		t += U32.encode(self.ParameterCount)
		t += U32.encode(self.ParameterOffset)
		t += U32.encode(self.DataCount)
		t += U32.encode(self.DataOffset)
		t += U8.encode(self.SetupCount)
		t += U16.encode(int(self.Function))
		t += self._setup_to_bytes()
		return t

class SMB_COM_NT_TRANSACT_REPLY(TransactionBase):
	COMMAND = SMBCommand.SMB_COM_NT_TRANSACT
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Reserved1 = b'\x00' * 3
		self.ParameterDisplacement = 0
		self.DataDisplacement = 0
		self.SetupCount = 0
		self.Setup = []

	def _params_from_buffer(self, buff, word_count):
		self.Reserved1 = read_exact(buff, 3, 'Reserved1')
		self.TotalParameterCount = U32.read(buff, field = 'TotalParameterCount')
		self.TotalDataCount = U32.read(buff, field = 'TotalDataCount')
		self.ParameterCount = U32.read(buff, field = 'ParameterCount')
		self.ParameterOffset = U32.read(buff, field = 'ParameterOffset')
		self.ParameterDisplacement = U32.read(buff, field = 'ParameterDisplacement')
		self.DataCount = U32.read(buff, field = 'DataCount')
		self.DataOffset = U32.read(buff, field = 'DataOffset')
		self.DataDisplacement = U32.read(buff, field = 'DataDisplacement')
		self.SetupCount = U8.read(buff, field = 'SetupCount')
		self.Setup = self._read_setup(buff, self.SetupCount)

	def _params_to_bytes(self):
		self.SetupCount = len(self.Setup)
		t  = self.Reserved1
		t += U32.encode(self.TotalParameterCount)
		t += U32.encode(self.TotalDataCount)
		t += U32.encode(self.ParameterCount)
		t += U32.encode(self.ParameterOffset)
		t += U32.encode(self.ParameterDisplacement)
		t += U32.encode(self.DataCount)
		t += U32.encode(self.DataOffset)
		t += U32.encode(self.DataDisplacement)
		t += U8.encode(self.SetupCount)
		t += self._setup_to_bytes()
		return t

# MS-CIFS SMB_COM_NT_TRANSACT_SECONDARY
class SMB_COM_NT_TRANSACT_SECONDARY_REQ(TransactionBase):
	COMMAND = SMBCommand.SMB_COM_NT_TRANSACT_SECONDARY

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Reserved1 = b'\x00' * 3
		self.ParameterDisplacement = 0
		self.DataDisplacement = 0
		self.Reserved2 = 0

	def _params_from_buffer(self, buff, word_count):
		self.Reserved1 = read_exact(buff, 3, 'Reserved1')
		self.TotalParameterCount = U32.read(buff, field = 'TotalParameterCount')
		self.TotalDataCount = U32.read(buff, field = 'TotalDataCount')
		self.ParameterCount = U32.read(buff, field = 'ParameterCount')
		self.ParameterOffset = U32.read(buff, field = 'ParameterOffset')
		self.ParameterDisplacement = U32.read(buff, field = 'ParameterDisplacement')
		self.DataCount = U32.read(buff, field = 'DataCount')
		self.DataOffset = U32.read(buff, field = 'DataOffset')
		self.DataDisplacement = U32.read(buff, field = 'DataDisplacement')
		self.Reserved2 = U8.read(buff, field = 'Reserved2')

	def _params_to_bytes(self):
		t  = self.Reserved1
		t += U32.encode(self.TotalParameterCount)
		t += U32.encode(self.TotalDataCount)
		t += U32.encode(self.ParameterCount)
		t += U32.encode(self.ParameterOffset)
		t += U32.encode(self.ParameterDisplacement)
		t += U32.encode(self.DataCount)
		t += U32.encode(self.DataOffset)
		t += U32.encode(self.DataDisplacement)
		t += U8.encode(self.Reserved2)
		return t
