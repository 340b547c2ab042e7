from smbcodec.exceptions import SMBTooShort, SMBInternalInvariant

# Fixed width integers used by every field walker.
# Byte order is chosen at the call site, SMB itself is little-endian on the wire.

def read_exact(buff, length, field = None):
	"""
	Reads exactly length bytes from buff or raises SMBTooShort
	with the position reached inside the buffer.
	"""
	pos = buff.tell()
	data = buff.read(length)
	if len(data) != length:
		raise SMBTooShort(pos, length - len(data), field)
	return data

def read_uint(buff, size, byteorder = 'little', signed = False, field = None):
	return int.from_bytes(read_exact(buff, size, field), byteorder = byteorder, signed = signed)

def read_rest(buff):
	return buff.read()

class INTEGER:
	size = 0
	signed = False

	@classmethod
	def check(cls, value):
		if cls.signed is True:
			lo = -(1 << (cls.size * 8 - 1))
			hi = (1 << (cls.size * 8 - 1)) - 1
		else:
			lo = 0
			hi = (1 << (cls.size * 8)) - 1
		if not isinstance(value, int) or value < lo or value > hi:
			raise SMBInternalInvariant('%r does not fit into %s' % (value, cls.__name__))

	@classmethod
	def encode(cls, value, byteorder = 'little'):
		cls.check(value)
		return int(value).to_bytes(cls.size, byteorder = byteorder, signed = cls.signed)

	@classmethod
	def decode(cls, data, offset = 0, byteorder = 'little'):
		"""
		Returns (value, consumed)
		"""
		if offset < 0 or len(data) - offset < cls.size:
			raise SMBTooShort(offset, cls.size - max(len(data) - offset, 0))
		value = int.from_bytes(data[offset:offset+cls.size], byteorder = byteorder, signed = cls.signed)
		return value, cls.size

	@classmethod
	def read(cls, buff, byteorder = 'little', field = None):
		return read_uint(buff, cls.size, byteorder = byteorder, signed = cls.signed, field = field)

class U8(INTEGER):
	size = 1

class U16(INTEGER):
	size = 2

class U32(INTEGER):
	size = 4

class U64(INTEGER):
	size = 8

class I16(INTEGER):
	size = 2
	signed = True

class I32(INTEGER):
	size = 4
	signed = True

# UTIME: seconds since 1970-01-01 UTC
UTIME = U32
LARGE_INTEGER = U64

def remaining(buff):
	pos = buff.tell()
	end = buff.seek(0, 2)
	buff.seek(pos)
	return end - pos
