from smbcodec.exceptions import SMBMissingFramingOffset, SMBInternalInvariant
from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U8, U16, U32, read_exact
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands.base import SMBCommandBase, pad_to, unicode_pad, read_unicode_pad

TRANS_ALIGNMENT = 4

class TransactionBase(SMBCommandBase):
	"""
	Data block shared by every transaction message:
	Name, Pad1, Trans_Parameters, Pad2, Trans_Data

	ParameterOffset and DataOffset are absolute offsets from the start of
	the SMB header, so encoding needs the data_offset of the command.
	"""
	def __init__(self):
		super().__init__()
		self.TotalParameterCount = 0
		self.TotalDataCount = 0
		self.ParameterCount = 0
		self.ParameterOffset = 0
		self.DataCount = 0
		self.DataOffset = 0
		##### SMB_Data ###
		self.Pad1 = b''
		self.Trans_Parameters = b''
		self.Pad2 = b''
		self.Trans_Data = b''

	def _name_to_bytes(self, data_offset):
		return b''

	def _name_from_buffer(self, buff, data_offset):
		return

	def _data_to_bytes(self, data_offset):
		if data_offset is None:
			raise SMBMissingFramingOffset('%s can not be encoded without data offset' % self.__class__.__name__)

		t = self._name_to_bytes(data_offset)
		self.Pad1 = b''
		if len(self.Trans_Parameters) > 0:
			self.Pad1 = b'\x00' * pad_to(data_offset + len(t), TRANS_ALIGNMENT)
		t += self.Pad1
		self.ParameterOffset = data_offset + len(t)
		self.ParameterCount = len(self.Trans_Parameters)
		t += self.Trans_Parameters

		self.Pad2 = b''
		if len(self.Trans_Data) > 0:
			self.Pad2 = b'\x00' * pad_to(data_offset + len(t), TRANS_ALIGNMENT)
		t += self.Pad2
		self.DataOffset = data_offset + len(t)
		self.DataCount = len(self.Trans_Data)
		t += self.Trans_Data

		if self.TotalParameterCount == 0:
			self.TotalParameterCount = self.ParameterCount
		if self.TotalDataCount == 0:
			self.TotalDataCount = self.DataCount
		return t

	def _data_from_buffer(self, buff, data_offset):
		self._name_from_buffer(buff, data_offset)
		self.Pad1 = self._read_gap(buff, data_offset, self.ParameterOffset, self.ParameterCount, 'Pad1')
		self.Trans_Parameters = read_exact(buff, self.ParameterCount, 'Trans_Parameters')
		self.Pad2 = self._read_gap(buff, data_offset, self.DataOffset, self.DataCount, 'Pad2')
		self.Trans_Data = read_exact(buff, self.DataCount, 'Trans_Data')

	@staticmethod
	def _read_gap(buff, data_offset, region_offset, region_length, field):
		if region_length == 0:
			return b''
		gap = region_offset - (data_offset + buff.tell())
		if gap < 0:
			raise SMBInternalInvariant('%s offset %s points before the current position %s' % (field, region_offset, data_offset + buff.tell()))
		return read_exact(buff, gap, field)

	def _read_setup(self, buff, setup_count):
		return [U16.read(buff, field = 'Setup') for _ in range(setup_count)]

	def _setup_to_bytes(self):
		t = b''
		for x in self.Setup:
			t += U16.encode(x)
		return t

class TransactionRequestBase(TransactionBase):
	"""
	Primary request of TRANSACTION and TRANSACTION2, 14 words plus the setup words
	"""
	def __init__(self):
		super().__init__()
		##### parameters ####
		self.MaxParameterCount = 0
		self.MaxDataCount = 0
		self.MaxSetupCount = 0
		self.Reserved1 = 0
		self.Flags = 0
		self.Timeout = 0
		self.Reserved2 = 0
		self.SetupCount = 0
		self.Reserved3 = 0
		self.Setup = []

	def _params_from_buffer(self, buff, word_count):
		self.TotalParameterCount = U16.read(buff, field = 'TotalParameterCount')
		self.TotalDataCount = U16.read(buff, field = 'TotalDataCount')
		self.MaxParameterCount = U16.read(buff, field = 'MaxParameterCount')
		self.MaxDataCount = U16.read(buff, field = 'MaxDataCount')
		self.MaxSetupCount = U8.read(buff, field = 'MaxSetupCount')
		self.Reserved1 = U8.read(buff, field = 'Reserved1')
		self.Flags = U16.read(buff, field = 'Flags')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.Reserved2 = U16.read(buff, field = 'Reserved2')
		self.ParameterCount = U16.read(buff, field = 'ParameterCount')
		self.ParameterOffset = U16.read(buff, field = 'ParameterOffset')
		self.DataCount = U16.read(buff, field = 'DataCount')
		self.DataOffset = U16.read(buff, field = 'DataOffset')
		self.SetupCount = U8.read(buff, field = 'SetupCount')
		self.Reserved3 = U8.read(buff, field = 'Reserved3')
		self.Setup = self._read_setup(buff, self.SetupCount)

	def _params_to_bytes(self):
		self.SetupCount = len(self.Setup)
		t  = U16.encode(self.TotalParameterCount)
		t += U16.encode(self.TotalDataCount)
		t += U16.encode(self.MaxParameterCount)
		t += U16.encode(self.MaxDataCount)
		t += U8.encode(self.MaxSetupCount)
		t += U8.encode(self.Reserved1)
		t += U16.encode(self.Flags)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.Reserved2)
		t += U16.encode(self.ParameterCount)
		t += U16.encode(self.ParameterOffset)
		t += U16.encode(self.DataCount)
		t += U16.encode(self.DataOffset)
		t += U8.encode(self.SetupCount)
		t += U8.encode(self.Reserved3)
		t += self._setup_to_bytes()
		return t

class TransactionReplyBase(TransactionBase):
	"""
	Reply of TRANSACTION and TRANSACTION2, 10 words plus the setup words
	"""
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Reserved1 = 0
		self.ParameterDisplacement = 0
		self.DataDisplacement = 0
		self.SetupCount = 0
		self.Reserved2 = 0
		self.Setup = []

	def _params_from_buffer(self, buff, word_count):
		self.TotalParameterCount = U16.read(buff, field = 'TotalParameterCount')
		self.TotalDataCount = U16.read(buff, field = 'TotalDataCount')
		self.Reserved1 = U16.read(buff, field = 'Reserved1')
		self.ParameterCount = U16.read(buff, field = 'ParameterCount')
		self.ParameterOffset = U16.read(buff, field = 'ParameterOffset')
		self.ParameterDisplacement = U16.read(buff, field = 'ParameterDisplacement')
		self.DataCount = U16.read(buff, field = 'DataCount')
		self.DataOffset = U16.read(buff, field = 'DataOffset')
		self.DataDisplacement = U16.read(buff, field = 'DataDisplacement')
		self.SetupCount = U8.read(buff, field = 'SetupCount')
		self.Reserved2 = U8.read(buff, field = 'Reserved2')
		self.Setup = self._read_setup(buff, self.SetupCount)

	def _params_to_bytes(self):
		self.SetupCount = len(self.Setup)
		t  = U16.encode(self.TotalParameterCount)
		t += U16.encode(self.TotalDataCount)
		t += U16.encode(self.Reserved1)
		t += U16.encode(self.ParameterCount)
		t += U16.encode(self.ParameterOffset)
		t += U16.encode(self.ParameterDisplacement)
		t += U16.encode(self.DataCount)
		t += U16.encode(self.DataOffset)
		t += U16.encode(self.DataDisplacement)
		t += U8.encode(self.SetupCount)
		t += U8.encode(self.Reserved2)
		t += self._setup_to_bytes()
		return t

class TransactionSecondaryBase(TransactionBase):
	"""
	Follow-up fragments of a transaction, the codec does not reassemble them
	"""
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

# MS-CIFS SMB_COM_TRANSACTION
class SMB_COM_TRANSACTION_REQ(TransactionRequestBase):
	COMMAND = SMBCommand.SMB_COM_TRANSACTION

	def __init__(self):
		super().__init__()
		self.Name = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)

	def _name_to_bytes(self, data_offset):
		t = b''
		if self.Name.is_unicode is True:
			t += unicode_pad(data_offset)
		t += self.Name.to_bytes()
		return t

	def _name_from_buffer(self, buff, data_offset):
		if self.Name.is_unicode is True:
			read_unicode_pad(buff, data_offset)
		self.Name = self.Name.parse(buff)

class SMB_COM_TRANSACTION_REPLY(TransactionReplyBase):
	COMMAND = SMBCommand.SMB_COM_TRANSACTION

class SMB_COM_TRANSACTION_SECONDARY_REQ(TransactionSecondaryBase):
	COMMAND = SMBCommand.SMB_COM_TRANSACTION_SECONDARY

# MS-CIFS SMB_COM_TRANSACTION2
class SMB_COM_TRANSACTION2_REQ(TransactionRequestBase):
	"""
	The subcommand code travels in Setup[0], see smbcodec.protocol.smb.subcommands
	"""
	COMMAND = SMBCommand.SMB_COM_TRANSACTION2

	def __init__(self):
		super().__init__()
		self.Name = 0

	def _name_to_bytes(self, data_offset):
		return U8.encode(self.Name)

	def _name_from_buffer(self, buff, data_offset):
		self.Name = U8.read(buff, field = 'Name')

class SMB_COM_TRANSACTION2_REPLY(TransactionReplyBase):
	COMMAND = SMBCommand.SMB_COM_TRANSACTION2

class SMB_COM_TRANSACTION2_SECONDARY_REQ(TransactionSecondaryBase):
	COMMAND = SMBCommand.SMB_COM_TRANSACTION2_SECONDARY

	def __init__(self):
		super().__init__()
		self.FID = 0

	def _params_from_buffer(self, buff, word_count):
		super()._params_from_buffer(buff, word_count)
		self.FID = U16.read(buff, field = 'FID')

	def _params_to_bytes(self):
		return super()._params_to_bytes() + U16.encode(self.FID)
