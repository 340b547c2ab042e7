import io

from smbcodec.protocol.smb.primitives import U16

# MS-CIFS SMB_NMPIPE_STATUS
class SMB_NMPIPE_STATUS:
	def __init__(self):
		self.ICount = 0
		self.ReadMode = 0
		self.NamedPipeType = 0
		self.Reserved = 0
		self.Endpoint = 0
		self.Nonblocking = 0

	@staticmethod
	def from_int(x):
		st = SMB_NMPIPE_STATUS()
		st.ICount = x & 0xFF
		st.ReadMode = (x >> 8) & 0x03
		st.NamedPipeType = (x >> 10) & 0x03
		st.Reserved = (x >> 12) & 0x03
		st.Endpoint = (x >> 14) & 0x01
		st.Nonblocking = (x >> 15) & 0x01
		return st

	def to_int(self):
		x  = self.ICount & 0xFF
		x |= (self.ReadMode & 0x03) << 8
		x |= (self.NamedPipeType & 0x03) << 10
		x |= (self.Reserved & 0x03) << 12
		x |= (self.Endpoint & 0x01) << 14
		x |= (self.Nonblocking & 0x01) << 15
		return x

	@staticmethod
	def from_bytes(bbuff):
		return SMB_NMPIPE_STATUS.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		return SMB_NMPIPE_STATUS.from_int(U16.read(buff, field = 'SMB_NMPIPE_STATUS'))

	def to_bytes(self):
		return U16.encode(self.to_int())

	def __eq__(self, other):
		if not isinstance(other, SMB_NMPIPE_STATUS):
			return NotImplemented
		return self.to_int() == other.to_int()

	def __repr__(self):
		return 'SMB_NMPIPE_STATUS(ICount=%s, ReadMode=%s, NamedPipeType=%s, Endpoint=%s, Nonblocking=%s)' % (self.ICount, self.ReadMode, self.NamedPipeType, self.Endpoint, self.Nonblocking)
