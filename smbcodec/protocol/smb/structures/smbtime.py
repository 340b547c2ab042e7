import io
import datetime

from smbcodec.protocol.smb.primitives import U16

# MS-CIFS SMB_DATE
class SMB_DATE:
	"""
	16 bit packed date: bits 0-4 day, 5-8 month, 9-15 years since 1980
	"""
	def __init__(self, year = 1980, month = 0, day = 0):
		self.Year = year
		self.Month = month
		self.Day = day

	@staticmethod
	def from_int(x):
		return SMB_DATE(1980 + ((x >> 9) & 0x7F), (x >> 5) & 0x0F, x & 0x1F)

	def to_int(self):
		return (((self.Year - 1980) & 0x7F) << 9) | ((self.Month & 0x0F) << 5) | (self.Day & 0x1F)

	@staticmethod
	def from_date(d):
		return SMB_DATE(d.year, d.month, d.day)

	def to_date(self):
		"""
		Returns None when the packed value is not a calendar date (eg. all zeros)
		"""
		try:
			return datetime.date(self.Year, self.Month, self.Day)
		except ValueError:
			return None

	@staticmethod
	def from_bytes(bbuff):
		return SMB_DATE.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		return SMB_DATE.from_int(U16.read(buff, field = 'SMB_DATE'))

	def to_bytes(self):
		return U16.encode(self.to_int())

	def __eq__(self, other):
		if not isinstance(other, SMB_DATE):
			return NotImplemented
		return self.to_int() == other.to_int()

	def __repr__(self):
		return 'SMB_DATE(%04d-%02d-%02d)' % (self.Year, self.Month, self.Day)

# MS-CIFS SMB_TIME
class SMB_TIME:
	"""
	16 bit packed time: bits 0-4 two-second units, 5-10 minutes, 11-15 hours
	"""
	def __init__(self, hours = 0, minutes = 0, seconds = 0):
		self.Hours = hours
		self.Minutes = minutes
		self.Seconds = seconds

	@staticmethod
	def from_int(x):
		return SMB_TIME((x >> 11) & 0x1F, (x >> 5) & 0x3F, (x & 0x1F) * 2)

	def to_int(self):
		return ((self.Hours & 0x1F) << 11) | ((self.Minutes & 0x3F) << 5) | ((self.Seconds // 2) & 0x1F)

	@staticmethod
	def from_time(t):
		return SMB_TIME(t.hour, t.minute, t.second)

	def to_time(self):
		try:
			return datetime.time(self.Hours, self.Minutes, self.Seconds)
		except ValueError:
			return None

	@staticmethod
	def from_bytes(bbuff):
		return SMB_TIME.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		return SMB_TIME.from_int(U16.read(buff, field = 'SMB_TIME'))

	def to_bytes(self):
		return U16.encode(self.to_int())

	def __eq__(self, other):
		if not isinstance(other, SMB_TIME):
			return NotImplemented
		return self.to_int() == other.to_int()

	def __repr__(self):
		return 'SMB_TIME(%02d:%02d:%02d)' % (self.Hours, self.Minutes, self.Seconds)

def utime_to_datetime(x):
	return datetime.datetime.fromtimestamp(x, tz = datetime.timezone.utc)

def datetime_to_utime(dt):
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo = datetime.timezone.utc)
	return int(dt.timestamp())
