import datetime
import io

from smbcodec.protocol.smb.primitives import U32

FILETIME_EPOCH_DIFF = 116444736000000000

# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/2c57429b-fdd4-488f-b5fc-9e4cf020fcdf
class FILETIME:
	def __init__(self, value = 0):
		self.dwLowDateTime = value & 0xFFFFFFFF
		self.dwHighDateTime = value >> 32

		self.datetime = None
		self.calc_dt()

	@property
	def value(self):
		return (self.dwHighDateTime << 32) + self.dwLowDateTime

	@staticmethod
	def from_bytes(data):
		return FILETIME.from_buffer(io.BytesIO(data))

	def calc_dt(self):
		if self.dwHighDateTime == 4294967295 and self.dwLowDateTime == 4294967295:
			self.datetime = datetime.datetime(3000, 1, 1, 0, 0, tzinfo = datetime.timezone.utc)
		else:
			ft = self.value
			if ft == 0:
				self.datetime = datetime.datetime(1970, 1, 1, 0, 0, tzinfo = datetime.timezone.utc)
			else:
				try:
					self.datetime = datetime.datetime(1601, 1, 1, tzinfo = datetime.timezone.utc) + datetime.timedelta(microseconds = ft // 10)
				except (OverflowError, ValueError):
					# past year 9999, value still holds the wire form
					self.datetime = datetime.datetime.max.replace(tzinfo = datetime.timezone.utc)

	@staticmethod
	def from_datetime(dt):
		if dt.tzinfo is None:
			dt = dt.replace(tzinfo = datetime.timezone.utc)
		delta = dt - datetime.datetime(1601, 1, 1, tzinfo = datetime.timezone.utc)
		ticks = (delta.days * 86400 + delta.seconds) * 10000000 + delta.microseconds * 10
		return FILETIME(ticks)

	@staticmethod
	def from_buffer(buff):
		t = FILETIME()
		t.dwLowDateTime = U32.read(buff, field = 'FILETIME')
		t.dwHighDateTime = U32.read(buff, field = 'FILETIME')
		t.calc_dt()
		return t

	def to_bytes(self):
		t  = U32.encode(self.dwLowDateTime)
		t += U32.encode(self.dwHighDateTime)
		return t

	def __eq__(self, other):
		if isinstance(other, int):
			return self.value == other
		if not isinstance(other, FILETIME):
			return NotImplemented
		return self.value == other.value

	def __repr__(self):
		return 'FILETIME(%s, %s)' % (hex(self.value), self.datetime.isoformat())
