import io

from smbcodec.protocol.smb.primitives import U16, U32

# MS-CIFS LOCKING_ANDX_RANGE32 / LOCKING_ANDX_RANGE64
class LOCKING_ANDX_RANGE32:
	size = 10

	def __init__(self, pid = 0, offset = 0, length = 0):
		self.PID = pid
		self.ByteOffset = offset
		self.LengthInBytes = length

	@staticmethod
	def from_bytes(bbuff):
		return LOCKING_ANDX_RANGE32.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		r = LOCKING_ANDX_RANGE32()
		r.PID = U16.read(buff, field = 'PID')
		r.ByteOffset = U32.read(buff, field = 'ByteOffset')
		r.LengthInBytes = U32.read(buff, field = 'LengthInBytes')
		return r

	def to_bytes(self):
		t  = U16.encode(self.PID)
		t += U32.encode(self.ByteOffset)
		t += U32.encode(self.LengthInBytes)
		return t

	def __eq__(self, other):
		if not isinstance(other, LOCKING_ANDX_RANGE32):
			return NotImplemented
		return vars(self) == vars(other)

	def __repr__(self):
		return 'LOCKING_ANDX_RANGE32(PID=%s, ByteOffset=%s, LengthInBytes=%s)' % (self.PID, self.ByteOffset, self.LengthInBytes)

class LOCKING_ANDX_RANGE64:
	size = 20

	def __init__(self, pid = 0, offset = 0, length = 0):
		self.PID = pid
		self.Pad = 0
		self.ByteOffset = offset
		self.LengthInBytes = length

	@staticmethod
	def from_bytes(bbuff):
		return LOCKING_ANDX_RANGE64.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		r = LOCKING_ANDX_RANGE64()
		r.PID = U16.read(buff, field = 'PID')
		r.Pad = U16.read(buff, field = 'Pad')
		offset_high = U32.read(buff, field = 'ByteOffsetHigh')
		offset_low = U32.read(buff, field = 'ByteOffsetLow')
		length_high = U32.read(buff, field = 'LengthInBytesHigh')
		length_low = U32.read(buff, field = 'LengthInBytesLow')
		r.ByteOffset = (offset_high << 32) | offset_low
		r.LengthInBytes = (length_high << 32) | length_low
		return r

	def to_bytes(self):
		t  = U16.encode(self.PID)
		t += U16.encode(self.Pad)
		t += U32.encode(self.ByteOffset >> 32)
		t += U32.encode(self.ByteOffset & 0xFFFFFFFF)
		t += U32.encode(self.LengthInBytes >> 32)
		t += U32.encode(self.LengthInBytes & 0xFFFFFFFF)
		return t

	def __eq__(self, other):
		if not isinstance(other, LOCKING_ANDX_RANGE64):
			return NotImplemented
		return vars(self) == vars(other)

	def __repr__(self):
		return 'LOCKING_ANDX_RANGE64(PID=%s, ByteOffset=%s, LengthInBytes=%s)' % (self.PID, self.ByteOffset, self.LengthInBytes)
