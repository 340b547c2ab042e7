import io
import enum

from smbcodec.exceptions import SMBBadStringFormat, SMBTooShort, SMBInternalInvariant
from smbcodec.protocol.smb.primitives import U8, U16, read_exact

# MS-CIFS SMB_STRING / OEM_STRING buffer formats
class BufferFormat(enum.Enum):
	DATA_BLOCK = 0x01
	DIALECT = 0x02
	PATHNAME = 0x03
	ASCII_STRING = 0x04
	VARIABLE_BLOCK = 0x05
	# untagged forms, values are outside of the one byte tag space
	NULL_TERMINATED_OEM = 0x100
	NULL_TERMINATED_UNICODE = 0x101

TAGGED_FORMATS = [
	BufferFormat.DATA_BLOCK,
	BufferFormat.DIALECT,
	BufferFormat.PATHNAME,
	BufferFormat.ASCII_STRING,
	BufferFormat.VARIABLE_BLOCK,
]

LENGTH_PREFIXED_FORMATS = [
	BufferFormat.DATA_BLOCK,
	BufferFormat.VARIABLE_BLOCK,
]

class SMB_STRING:
	"""
	A string or byte block as it travels in the SMB_Data section.
	BufferFormat decides the wire form, Buffer holds the raw character
	bytes without tag, length prefix or terminator.
	"""
	default_format = BufferFormat.ASCII_STRING

	def __init__(self, buffer_format = None, data = b''):
		self.BufferFormat = buffer_format if buffer_format is not None else self.default_format
		self.Buffer = data

	@property
	def is_unicode(self):
		return self.BufferFormat == BufferFormat.NULL_TERMINATED_UNICODE

	@classmethod
	def from_string(cls, s, buffer_format = None):
		st = cls(buffer_format)
		st.set_string(s)
		return st

	def set_string(self, s):
		if isinstance(s, (bytes, bytearray)):
			self.Buffer = bytes(s)
		elif self.is_unicode is True:
			self.Buffer = s.encode('utf-16-le')
		else:
			self.Buffer = s.encode('ascii')

	def get_string(self):
		if self.is_unicode is True:
			return self.Buffer.decode('utf-16-le', errors = 'replace')
		return self.Buffer.decode('ascii', errors = 'replace')

	@classmethod
	def from_bytes(cls, bbuff, buffer_format = None):
		return cls.from_buffer(io.BytesIO(bbuff), buffer_format)

	@classmethod
	def from_buffer(cls, buff, buffer_format = None):
		"""
		Parses one string in the form given by buffer_format.
		Tagged forms must start with their tag byte.
		"""
		st = cls(buffer_format)
		if st.BufferFormat in TAGGED_FORMATS:
			pos = buff.tell()
			tag = U8.read(buff, field = 'BufferFormat')
			if tag != st.BufferFormat.value:
				buff.seek(pos)
				raise SMBBadStringFormat(st.BufferFormat.value, tag)

		if st.BufferFormat in LENGTH_PREFIXED_FORMATS:
			length = U16.read(buff, field = 'Length')
			st.Buffer = read_exact(buff, length, 'Buffer')
		elif st.is_unicode is True:
			st.Buffer = SMB_STRING.read_terminated(buff, 2)
		else:
			st.Buffer = SMB_STRING.read_terminated(buff, 1)
		return st

	def parse(self, buff):
		"""
		Parses the next string from buff in the form this value currently has
		"""
		return self.__class__.from_buffer(buff, self.BufferFormat)

	@staticmethod
	def read_terminated(buff, width):
		pos = buff.tell()
		rest = buff.read()
		terminator = b'\x00' * width
		for i in range(0, len(rest) - width + 1, width):
			if rest[i:i+width] == terminator:
				buff.seek(pos + i + width)
				return rest[:i]
		raise SMBTooShort(pos + len(rest), width, 'terminator')

	def to_bytes(self):
		if not isinstance(self.BufferFormat, BufferFormat):
			raise SMBInternalInvariant('Unknown string format %s' % self.BufferFormat)
		t = b''
		if self.BufferFormat in TAGGED_FORMATS:
			t += U8.encode(self.BufferFormat.value)
		if self.BufferFormat in LENGTH_PREFIXED_FORMATS:
			t += U16.encode(len(self.Buffer))
			t += self.Buffer
		elif self.is_unicode is True:
			t += self.Buffer + b'\x00\x00'
		else:
			t += self.Buffer + b'\x00'
		return t

	def __len__(self):
		return len(self.to_bytes())

	def __eq__(self, other):
		if not isinstance(other, SMB_STRING):
			return NotImplemented
		return self.BufferFormat == other.BufferFormat and self.Buffer == other.Buffer

	def __str__(self):
		return self.get_string()

	def __repr__(self):
		return '%s(%s, %r)' % (self.__class__.__name__, self.BufferFormat.name, self.Buffer)

class OEM_STRING(SMB_STRING):
	"""
	Same wire forms as SMB_STRING but always carried in the OEM character set.
	"""
	def set_string(self, s):
		if self.is_unicode is True:
			raise SMBInternalInvariant('OEM_STRING can not be carried as unicode')
		super().set_string(s)
