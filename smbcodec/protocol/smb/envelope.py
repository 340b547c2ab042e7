import io

from smbcodec.exceptions import SMBOddByteLength, SMBInternalInvariant
from smbcodec.protocol.smb.primitives import U8, U16, read_exact
from smbcodec.protocol.smb.command_codes import SMBCommand

# MS-CIFS SMB_Parameters
class SMBParameters:
	"""
	WordCount followed by WordCount 16 bit words
	"""
	def __init__(self):
		self.WordCount = 0
		self.Words = b''

	def add_word(self, word):
		self.add_words_from_bytes(U16.encode(word))

	def add_words_from_bytes(self, data):
		if len(data) % 2 != 0:
			raise SMBOddByteLength(len(data))
		self.Words += data
		self.WordCount += len(data) // 2

	def get_word(self, index):
		return int.from_bytes(self.Words[index*2:index*2+2], byteorder = 'little', signed = False)

	@staticmethod
	def from_bytes(bbuff):
		return SMBParameters.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		params = SMBParameters()
		params.WordCount = U8.read(buff, field = 'WordCount')
		params.Words = read_exact(buff, params.WordCount * 2, 'Words')
		return params

	def to_bytes(self):
		if self.WordCount * 2 != len(self.Words):
			raise SMBInternalInvariant('WordCount %s does not match %s parameter bytes' % (self.WordCount, len(self.Words)))
		if self.WordCount > 0xFF:
			raise SMBInternalInvariant('Too many parameter words: %s' % self.WordCount)
		return U8.encode(self.WordCount) + self.Words

	def __len__(self):
		return 1 + len(self.Words)

	def __repr__(self):
		return 'SMBParameters(WordCount=%s, Words=%s)' % (self.WordCount, self.Words.hex())

class SMBData:
	"""
	ByteCount followed by ByteCount bytes
	"""
	def __init__(self):
		self.ByteCount = 0
		self.Bytes = b''

	def add(self, data):
		self.Bytes += data
		self.ByteCount += len(data)

	@staticmethod
	def from_bytes(bbuff):
		return SMBData.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		data = SMBData()
		data.ByteCount = U16.read(buff, field = 'ByteCount')
		data.Bytes = read_exact(buff, data.ByteCount, 'Bytes')
		return data

	def to_bytes(self):
		if self.ByteCount != len(self.Bytes):
			raise SMBInternalInvariant('ByteCount %s does not match %s data bytes' % (self.ByteCount, len(self.Bytes)))
		if self.ByteCount > 0xFFFF:
			raise SMBInternalInvariant('Too many data bytes: %s' % self.ByteCount)
		return U16.encode(self.ByteCount) + self.Bytes

	def __len__(self):
		return 2 + len(self.Bytes)

	def __repr__(self):
		return 'SMBData(ByteCount=%s, Bytes=%s)' % (self.ByteCount, self.Bytes.hex())

# MS-CIFS AndX chain link (AndXCommand, AndXReserved, AndXOffset)
class SMBAndX:
	"""
	Chain link at the start of the parameter block of AndX commands.
	AndXOffset points from the start of the SMB header to the WordCount
	of the next command in the chain.
	"""
	size = 4

	def __init__(self, command = SMBCommand.SMB_COM_NO_ANDX_COMMAND, offset = 0):
		self.AndXCommand = command
		self.AndXReserved = 0
		self.AndXOffset = offset

	@property
	def is_last(self):
		return self.AndXCommand == SMBCommand.SMB_COM_NO_ANDX_COMMAND

	@staticmethod
	def from_bytes(bbuff):
		return SMBAndX.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		andx = SMBAndX()
		code = U8.read(buff, field = 'AndXCommand')
		try:
			andx.AndXCommand = SMBCommand(code)
		except ValueError:
			andx.AndXCommand = code
		andx.AndXReserved = U8.read(buff, field = 'AndXReserved')
		andx.AndXOffset = U16.read(buff, field = 'AndXOffset')
		return andx

	def to_bytes(self):
		code = self.AndXCommand.value if isinstance(self.AndXCommand, SMBCommand) else self.AndXCommand
		t  = U8.encode(code)
		t += U8.encode(self.AndXReserved)
		t += U16.encode(self.AndXOffset)
		return t

	def __eq__(self, other):
		if not isinstance(other, SMBAndX):
			return NotImplemented
		return self.to_bytes() == other.to_bytes()

	def __repr__(self):
		return 'SMBAndX(%s, %s, %s)' % (self.AndXCommand, self.AndXReserved, self.AndXOffset)
