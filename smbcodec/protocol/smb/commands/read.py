from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16, U32
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands.base import SMBCommandBase, read_padded_data

class ReadRequestBase(SMBCommandBase):
	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.CountOfBytesToRead = 0
		self.ReadOffsetInBytes = 0
		self.EstimateOfRemainingBytesToBeRead = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.CountOfBytesToRead = U16.read(buff, field = 'CountOfBytesToRead')
		self.ReadOffsetInBytes = U32.read(buff, field = 'ReadOffsetInBytes')
		self.EstimateOfRemainingBytesToBeRead = U16.read(buff, field = 'EstimateOfRemainingBytesToBeRead')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(self.CountOfBytesToRead)
		t += U32.encode(self.ReadOffsetInBytes)
		t += U16.encode(self.EstimateOfRemainingBytesToBeRead)
		return t

class ReadReplyBase(SMBCommandBase):
	"""
	CountOfBytesReturned, 4 reserved words and the read bytes in a data block
	"""
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.CountOfBytesReturned = 0
		self.Reserved = [0, 0, 0, 0]
		##### SMB_Data ###
		self.Bytes = b''

	def _params_from_buffer(self, buff, word_count):
		self.CountOfBytesReturned = U16.read(buff, field = 'CountOfBytesReturned')
		self.Reserved = [U16.read(buff, field = 'Reserved') for _ in range(4)]

	def _data_from_buffer(self, buff, data_offset):
		self.Bytes = SMB_STRING.from_buffer(buff, BufferFormat.DATA_BLOCK).Buffer

	def _params_to_bytes(self):
		t = U16.encode(self.CountOfBytesReturned)
		for x in self.Reserved:
			t += U16.encode(x)
		return t

	def _data_to_bytes(self, data_offset):
		self.CountOfBytesReturned = len(self.Bytes)
		return SMB_STRING(BufferFormat.DATA_BLOCK, self.Bytes).to_bytes()

# MS-CIFS SMB_COM_READ
class SMB_COM_READ_REQ(ReadRequestBase):
	COMMAND = SMBCommand.SMB_COM_READ

class SMB_COM_READ_REPLY(ReadReplyBase):
	COMMAND = SMBCommand.SMB_COM_READ

# MS-CIFS SMB_COM_LOCK_AND_READ
class SMB_COM_LOCK_AND_READ_REQ(ReadRequestBase):
	COMMAND = SMBCommand.SMB_COM_LOCK_AND_READ

class SMB_COM_LOCK_AND_READ_REPLY(ReadReplyBase):
	COMMAND = SMBCommand.SMB_COM_LOCK_AND_READ

# MS-CIFS SMB_COM_READ_RAW
# the reply is raw file data on the transport, there is no SMB message to decode
class SMB_COM_READ_RAW_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_READ_RAW

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.Offset = 0
		self.MaxCountOfBytesToReturn = 0
		self.MinCountOfBytesToReturn = 0
		self.Timeout = 0
		self.Reserved = 0
		self.OffsetHigh = None #only in the 10 word form

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.Offset = U32.read(buff, field = 'Offset')
		self.MaxCountOfBytesToReturn = U16.read(buff, field = 'MaxCountOfBytesToReturn')
		self.MinCountOfBytesToReturn = U16.read(buff, field = 'MinCountOfBytesToReturn')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.Reserved = U16.read(buff, field = 'Reserved')
		if word_count >= 10:
			self.OffsetHigh = U32.read(buff, field = 'OffsetHigh')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U32.encode(self.Offset)
		t += U16.encode(self.MaxCountOfBytesToReturn)
		t += U16.encode(self.MinCountOfBytesToReturn)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.Reserved)
		if self.OffsetHigh is not None:
			t += U32.encode(self.OffsetHigh)
		return t

# MS-CIFS SMB_COM_READ_MPX
class SMB_COM_READ_MPX_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_READ_MPX

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.Offset = 0
		self.MaxCountOfBytesToReturn = 0
		self.MinCountOfBytesToReturn = 0
		self.Timeout = 0
		self.Reserved = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.Offset = U32.read(buff, field = 'Offset')
		self.MaxCountOfBytesToReturn = U16.read(buff, field = 'MaxCountOfBytesToReturn')
		self.MinCountOfBytesToReturn = U16.read(buff, field = 'MinCountOfBytesToReturn')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.Reserved = U16.read(buff, field = 'Reserved')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U32.encode(self.Offset)
		t += U16.encode(self.MaxCountOfBytesToReturn)
		t += U16.encode(self.MinCountOfBytesToReturn)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.Reserved)
		return t

class SMB_COM_READ_MPX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_READ_MPX
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Offset = 0
		self.Count = 0
		self.Remaining = 0
		self.DataCompactionMode = 0
		self.Reserved = 0
		self.DataLength = 0
		self.DataOffset = 0
		##### SMB_Data ###
		self.Pad = b''
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.Offset = U32.read(buff, field = 'Offset')
		self.Count = U16.read(buff, field = 'Count')
		self.Remaining = U16.read(buff, field = 'Remaining')
		self.DataCompactionMode = U16.read(buff, field = 'DataCompactionMode')
		self.Reserved = U16.read(buff, field = 'Reserved')
		self.DataLength = U16.read(buff, field = 'DataLength')
		self.DataOffset = U16.read(buff, field = 'DataOffset')

	def _data_from_buffer(self, buff, data_offset):
		self.Pad, self.Data = read_padded_data(buff, self.DataLength)

	def _params_to_bytes(self):
		t  = U32.encode(self.Offset)
		t += U16.encode(self.Count)
		t += U16.encode(self.Remaining)
		t += U16.encode(self.DataCompactionMode)
		t += U16.encode(self.Reserved)
		t += U16.encode(self.DataLength)
		t += U16.encode(self.DataOffset)
		return t

	def _data_to_bytes(self, data_offset):
		self.DataLength = len(self.Data)
		if data_offset is not None:
			self.DataOffset = data_offset + len(self.Pad)
		return self.Pad + self.Data

# MS-CIFS SMB_COM_READ_ANDX
class SMB_COM_READ_ANDX_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_READ_ANDX
	ANDX = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.Offset = 0
		self.MaxCountOfBytesToReturn = 0
		self.MinCountOfBytesToReturn = 0
		self.Timeout = 0
		self.Remaining = 0
		self.OffsetHigh = None #only in the 12 word form

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.Offset = U32.read(buff, field = 'Offset')
		self.MaxCountOfBytesToReturn = U16.read(buff, field = 'MaxCountOfBytesToReturn')
		self.MinCountOfBytesToReturn = U16.read(buff, field = 'MinCountOfBytesToReturn')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.Remaining = U16.read(buff, field = 'Remaining')
		if word_count >= 12:
			self.OffsetHigh = U32.read(buff, field = 'OffsetHigh')

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U32.encode(self.Offset)
		t += U16.encode(self.MaxCountOfBytesToReturn)
		t += U16.encode(self.MinCountOfBytesToReturn)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.Remaining)
		if self.OffsetHigh is not None:
			t += U32.encode(self.OffsetHigh)
		return t

class SMB_COM_READ_ANDX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_READ_ANDX
	ANDX = True
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Available = 0
		self.DataCompactionMode = 0
		self.Reserved1 = 0
		self.DataLength = 0
		self.DataOffset = 0
		self.Reserved2 = [0, 0, 0, 0, 0]
		##### SMB_Data ###
		self.Pad = b''
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.Available = U16.read(buff, field = 'Available')
		self.DataCompactionMode = U16.read(buff, field = 'DataCompactionMode')
		self.Reserved1 = U16.read(buff, field = 'Reserved1')
		self.DataLength = U16.read(buff, field = 'DataLength')
		self.DataOffset = U16.read(buff, field = 'DataOffset')
		self.Reserved2 = [U16.read(buff, field = 'Reserved2') for _ in range(5)]

	def _data_from_buffer(self, buff, data_offset):
		self.Pad, self.Data = read_padded_data(buff, self.DataLength)

	def _params_to_bytes(self):
		t  = U16.encode(self.Available)
		t += U16.encode(self.DataCompactionMode)
		t += U16.encode(self.Reserved1)
		t += U16.encode(self.DataLength)
		t += U16.encode(self.DataOffset)
		for x in self.Reserved2:
			t += U16.encode(x)
		return t

	def _data_to_bytes(self, data_offset):
		self.DataLength = len(self.Data)
		if data_offset is not None:
			self.DataOffset = data_offset + len(self.Pad)
		return self.Pad + self.Data
