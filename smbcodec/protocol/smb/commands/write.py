from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16, U32, UTIME
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands.base import SMBCommandBase, read_padded_data

class WriteRequestBase(SMBCommandBase):
	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.CountOfBytesToWrite = 0
		self.WriteOffsetInBytes = 0
		self.EstimateOfRemainingBytesToBeWritten = 0
		##### SMB_Data ###
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.CountOfBytesToWrite = U16.read(buff, field = 'CountOfBytesToWrite')
		self.WriteOffsetInBytes = U32.read(buff, field = 'WriteOffsetInBytes')
		self.EstimateOfRemainingBytesToBeWritten = U16.read(buff, field = 'EstimateOfRemainingBytesToBeWritten')

	def _data_from_buffer(self, buff, data_offset):
		self.Data = SMB_STRING.from_buffer(buff, BufferFormat.DATA_BLOCK).Buffer

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(self.CountOfBytesToWrite)
		t += U32.encode(self.WriteOffsetInBytes)
		t += U16.encode(self.EstimateOfRemainingBytesToBeWritten)
		return t

	def _data_to_bytes(self, data_offset):
		self.CountOfBytesToWrite = len(self.Data)
		return SMB_STRING(BufferFormat.DATA_BLOCK, self.Data).to_bytes()

class CountReplyBase(SMBCommandBase):
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.CountOfBytesWritten = 0

	def _params_from_buffer(self, buff, word_count):
		self.CountOfBytesWritten = U16.read(buff, field = 'CountOfBytesWritten')

	def _params_to_bytes(self):
		return U16.encode(self.CountOfBytesWritten)

# MS-CIFS SMB_COM_WRITE
class SMB_COM_WRITE_REQ(WriteRequestBase):
	COMMAND = SMBCommand.SMB_COM_WRITE

class SMB_COM_WRITE_REPLY(CountReplyBase):
	COMMAND = SMBCommand.SMB_COM_WRITE

# MS-CIFS SMB_COM_WRITE_AND_UNLOCK
class SMB_COM_WRITE_AND_UNLOCK_REQ(WriteRequestBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_AND_UNLOCK

class SMB_COM_WRITE_AND_UNLOCK_REPLY(CountReplyBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_AND_UNLOCK

# MS-CIFS SMB_COM_WRITE_RAW
class SMB_COM_WRITE_RAW_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_RAW

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.CountOfBytes = 0
		self.Reserved1 = 0
		self.Offset = 0
		self.Timeout = 0
		self.WriteMode = 0
		self.Reserved2 = 0
		self.DataLength = 0
		self.DataOffset = 0
		self.OffsetHigh = None #only in the 14 word form
		##### SMB_Data ###
		self.Pad = b''
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.CountOfBytes = U16.read(buff, field = 'CountOfBytes')
		self.Reserved1 = U16.read(buff, field = 'Reserved1')
		self.Offset = U32.read(buff, field = 'Offset')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.WriteMode = U16.read(buff, field = 'WriteMode')
		self.Reserved2 = U32.read(buff, field = 'Reserved2')
		self.DataLength = U16.read(buff, field = 'DataLength')
		self.DataOffset = U16.read(buff, field = 'DataOffset')
		if word_count >= 14:
			self.OffsetHigh = U32.read(buff, field = 'OffsetHigh')

	def _data_from_buffer(self, buff, data_offset):
		self.Pad, self.Data = read_padded_data(buff, self.DataLength)

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(self.CountOfBytes)
		t += U16.encode(self.Reserved1)
		t += U32.encode(self.Offset)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.WriteMode)
		t += U32.encode(self.Reserved2)
		t += U16.encode(self.DataLength)
		t += U16.encode(self.DataOffset)
		if self.OffsetHigh is not None:
			t += U32.encode(self.OffsetHigh)
		return t

	def _data_to_bytes(self, data_offset):
		self.DataLength = len(self.Data)
		if data_offset is not None:
			self.DataOffset = data_offset + len(self.Pad)
		return self.Pad + self.Data

class SMB_COM_WRITE_RAW_REPLY(SMBCommandBase):
	"""
	Interim response, the final one is SMB_COM_WRITE_COMPLETE
	"""
	COMMAND = SMBCommand.SMB_COM_WRITE_RAW
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Available = 0

	def _params_from_buffer(self, buff, word_count):
		self.Available = U16.read(buff, field = 'Available')

	def _params_to_bytes(self):
		return U16.encode(self.Available)

# MS-CIFS SMB_COM_WRITE_COMPLETE
class SMB_COM_WRITE_COMPLETE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_COMPLETE
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Count = 0

	def _params_from_buffer(self, buff, word_count):
		self.Count = U16.read(buff, field = 'Count')

	def _params_to_bytes(self):
		return U16.encode(self.Count)

# MS-CIFS SMB_COM_WRITE_MPX
class SMB_COM_WRITE_MPX_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_MPX

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.TotalByteCount = 0
		self.Reserved = 0
		self.ByteOffsetToBeginWrite = 0
		self.Timeout = 0
		self.WriteMode = 0
		self.RequestMask = 0
		self.DataLength = 0
		self.DataOffset = 0
		##### SMB_Data ###
		self.Pad = b''
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.TotalByteCount = U16.read(buff, field = 'TotalByteCount')
		self.Reserved = U16.read(buff, field = 'Reserved')
		self.ByteOffsetToBeginWrite = U32.read(buff, field = 'ByteOffsetToBeginWrite')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.WriteMode = U16.read(buff, field = 'WriteMode')
		self.RequestMask = U32.read(buff, field = 'RequestMask')
		self.DataLength = U16.read(buff, field = 'DataLength')
		self.DataOffset = U16.read(buff, field = 'DataOffset')

	def _data_from_buffer(self, buff, data_offset):
		self.Pad, self.Data = read_padded_data(buff, self.DataLength)

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(self.TotalByteCount)
		t += U16.encode(self.Reserved)
		t += U32.encode(self.ByteOffsetToBeginWrite)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.WriteMode)
		t += U32.encode(self.RequestMask)
		t += U16.encode(self.DataLength)
		t += U16.encode(self.DataOffset)
		return t

	def _data_to_bytes(self, data_offset):
		self.DataLength = len(self.Data)
		if data_offset is not None:
			self.DataOffset = data_offset + len(self.Pad)
		return self.Pad + self.Data

class SMB_COM_WRITE_MPX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_MPX
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.ResponseMask = 0

	def _params_from_buffer(self, buff, word_count):
		self.ResponseMask = U32.read(buff, field = 'ResponseMask')

	def _params_to_bytes(self):
		return U32.encode(self.ResponseMask)

# MS-CIFS SMB_COM_WRITE_AND_CLOSE
class SMB_COM_WRITE_AND_CLOSE_REQ(SMBCommandBase):
	"""
	Reserved (three ULONGs) is optional, its presence selects the 12 word form
	"""
	COMMAND = SMBCommand.SMB_COM_WRITE_AND_CLOSE

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.CountOfBytesToWrite = 0
		self.WriteOffsetInBytes = 0
		self.LastWriteTime = 0 #UTIME
		self.Reserved = None
		##### SMB_Data ###
		self.Pad = b'\x00'
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.CountOfBytesToWrite = U16.read(buff, field = 'CountOfBytesToWrite')
		self.WriteOffsetInBytes = U32.read(buff, field = 'WriteOffsetInBytes')
		self.LastWriteTime = UTIME.read(buff, field = 'LastWriteTime')
		if word_count >= 12:
			self.Reserved = [U32.read(buff, field = 'Reserved') for _ in range(3)]

	def _data_from_buffer(self, buff, data_offset):
		self.Pad, self.Data = read_padded_data(buff, self.CountOfBytesToWrite)

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(self.CountOfBytesToWrite)
		t += U32.encode(self.WriteOffsetInBytes)
		t += UTIME.encode(self.LastWriteTime)
		if self.Reserved is not None:
			for x in self.Reserved:
				t += U32.encode(x)
		return t

	def _data_to_bytes(self, data_offset):
		self.CountOfBytesToWrite = len(self.Data)
		return self.Pad + self.Data

class SMB_COM_WRITE_AND_CLOSE_REPLY(CountReplyBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_AND_CLOSE

# MS-CIFS SMB_COM_WRITE_ANDX
class SMB_COM_WRITE_ANDX_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_ANDX
	ANDX = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.Offset = 0
		self.Timeout = 0
		self.WriteMode = 0
		self.Remaining = 0
		self.Reserved = 0
		self.DataLength = 0
		self.DataOffset = 0
		self.OffsetHigh = None #only in the 14 word form
		##### SMB_Data ###
		self.Pad = b''
		self.Data = b''

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.Offset = U32.read(buff, field = 'Offset')
		self.Timeout = U32.read(buff, field = 'Timeout')
		self.WriteMode = U16.read(buff, field = 'WriteMode')
		self.Remaining = U16.read(buff, field = 'Remaining')
		self.Reserved = U16.read(buff, field = 'Reserved')
		self.DataLength = U16.read(buff, field = 'DataLength')
		self.DataOffset = U16.read(buff, field = 'DataOffset')
		if word_count >= 14:
			self.OffsetHigh = U32.read(buff, field = 'OffsetHigh')

	def _data_from_buffer(self, buff, data_offset):
		self.Pad, self.Data = read_padded_data(buff, self.DataLength)

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += U32.encode(self.Offset)
		t += U32.encode(self.Timeout)
		t += U16.encode(self.WriteMode)
		t += U16.encode(self.Remaining)
		t += U16.encode(self.Reserved)
		t += U16.encode(self.DataLength)
		t += U16.encode(self.DataOffset)
		if self.OffsetHigh is not None:
			t += U32.encode(self.OffsetHigh)
		return t

	def _data_to_bytes(self, data_offset):
		self.DataLength = len(self.Data)
		if data_offset is not None:
			self.DataOffset = data_offset + len(self.Pad)
		return self.Pad + self.Data

class SMB_COM_WRITE_ANDX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_WRITE_ANDX
	ANDX = True
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Count = 0
		self.Available = 0
		self.Reserved = 0

	def _params_from_buffer(self, buff, word_count):
		self.Count = U16.read(buff, field = 'Count')
		self.Available = U16.read(buff, field = 'Available')
		self.Reserved = U32.read(buff, field = 'Reserved')

	def _params_to_bytes(self):
		t  = U16.encode(self.Count)
		t += U16.encode(self.Available)
		t += U32.encode(self.Reserved)
		return t
