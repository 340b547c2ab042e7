import io

from smbcodec import logger
from smbcodec.protocol.smb.command_codes import SMB_HEADER_SIZE
from smbcodec.protocol.smb.envelope import SMBParameters, SMBData, SMBAndX
from smbcodec.exceptions import SMBTooShort
from smbcodec.protocol.smb.primitives import read_exact, remaining

def pad_to(offset, alignment):
	return (alignment - (offset % alignment)) % alignment

class SMBCommandBase:
	"""
	Common envelope handling for every SMBv1 command message.

	Subclasses describe their own fields through four hooks:
	_params_to_bytes / _params_from_buffer walk the words after the AndX link,
	_data_to_bytes / _data_from_buffer walk the SMB_Data bytes.

	data_offset is the absolute offset (from the start of the SMB header)
	of the first byte after ByteCount. It is only needed by commands that
	align or locate data relative to the header.
	"""
	COMMAND = None
	ANDX = False
	IS_REPLY = False

	def __init__(self):
		if self.ANDX is True:
			self.AndX = SMBAndX()

	@classmethod
	def from_bytes(cls, bbuff, data_offset = None, cmd = None):
		return cls.from_buffer(io.BytesIO(bbuff), data_offset, cmd)

	@classmethod
	def from_buffer(cls, buff, data_offset = None, cmd = None):
		"""
		cmd is an optional pre-built sink, the formats of its strings
		select how untagged strings are parsed.
		"""
		if cmd is None:
			cmd = cls()
		params = SMBParameters.from_buffer(buff)
		data = SMBData.from_buffer(buff)
		if params.WordCount == 0 and data.ByteCount == 0:
			# error responses carry no payload at all
			return cmd

		if data_offset is None:
			data_offset = SMB_HEADER_SIZE + len(params) + 2
			logger.debug('%s: no data offset given, assuming %s' % (cls.__name__, data_offset))

		pbuff = io.BytesIO(params.Words)
		if cls.ANDX is True:
			cmd.AndX = SMBAndX.from_buffer(pbuff)
		cmd._params_from_buffer(pbuff, params.WordCount)
		cmd._data_from_buffer(io.BytesIO(data.Bytes), data_offset)
		return cmd

	def to_bytes(self, data_offset = None):
		params = SMBParameters()
		data = SMBData()

		# data first, length and offset fields in the parameters depend on it
		data_bytes = self._data_to_bytes(data_offset)

		param_bytes = b''
		if self.ANDX is True:
			param_bytes += self.AndX.to_bytes()
		param_bytes += self._params_to_bytes()

		params.add_words_from_bytes(param_bytes)
		data.add(data_bytes)
		return params.to_bytes() + data.to_bytes()

	def parameter_size(self):
		t = len(self._params_to_bytes())
		if self.ANDX is True:
			t += SMBAndX.size
		return t

	def data_offset_for(self, command_offset = SMB_HEADER_SIZE):
		"""
		Absolute offset of the data bytes when this command's WordCount
		lands at command_offset.
		"""
		return command_offset + 1 + self.parameter_size() + 2

	def default_data_offset(self, data_offset):
		if data_offset is not None:
			return data_offset
		data_offset = self.data_offset_for(SMB_HEADER_SIZE)
		logger.debug('%s: no data offset given, assuming %s' % (self.__class__.__name__, data_offset))
		return data_offset

	def _params_to_bytes(self):
		return b''

	def _params_from_buffer(self, buff, word_count):
		return

	def _data_to_bytes(self, data_offset):
		return b''

	def _data_from_buffer(self, buff, data_offset):
		return

	def __eq__(self, other):
		if type(self) is not type(other):
			return NotImplemented
		return vars(self) == vars(other)

	def __repr__(self):
		t = '===%s===\r\n' % self.__class__.__name__
		for x in self.__dict__:
			t += '%s : %s \r\n' % (x, self.__dict__[x])
		return t

def unicode_pad(position):
	"""
	Pad bytes needed before a unicode string that would start at position
	(absolute, from the start of the SMB header)
	"""
	return b'\x00' * pad_to(position, 2)

def read_unicode_pad(buff, data_offset):
	n = pad_to(data_offset + buff.tell(), 2)
	return read_exact(buff, n, 'Pad')

def read_padded_data(buff, data_length):
	"""
	Data blocks laid out as Pad + Data where only the length of Data is known.
	Returns (pad, data)
	"""
	padlen = remaining(buff) - data_length
	if padlen < 0:
		raise SMBTooShort(buff.tell(), -padlen, 'Data')
	pad = read_exact(buff, padlen, 'Pad')
	data = read_exact(buff, data_length, 'Data')
	return pad, data
