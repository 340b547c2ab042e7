import io

from smbcodec.exceptions import SMBCodecException
from smbcodec.protocol.smb.primitives import U8, U32, read_exact
from smbcodec.protocol.smb.structures.smbtime import SMB_DATE, SMB_TIME
from smbcodec.protocol.smb.structures.attributes import SMB_FILE_ATTRIBUTES

# MS-CIFS SMB_Resume_Key
class SMB_RESUME_KEY:
	size = 21

	def __init__(self):
		self.Reserved = 0
		self.ServerState = b'\x00' * 16
		self.ClientState = b'\x00' * 4

	@staticmethod
	def from_bytes(bbuff):
		return SMB_RESUME_KEY.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		key = SMB_RESUME_KEY()
		key.Reserved = U8.read(buff, field = 'ResumeKey.Reserved')
		key.ServerState = read_exact(buff, 16, 'ResumeKey.ServerState')
		key.ClientState = read_exact(buff, 4, 'ResumeKey.ClientState')
		return key

	def to_bytes(self):
		t  = U8.encode(self.Reserved)
		t += self.ServerState
		t += self.ClientState
		return t

	def __eq__(self, other):
		if not isinstance(other, SMB_RESUME_KEY):
			return NotImplemented
		return self.to_bytes() == other.to_bytes()

	def __repr__(self):
		return 'SMB_RESUME_KEY(%s)' % self.to_bytes().hex()

# MS-CIFS SMB_Directory_Information
class SMB_DIRECTORY_INFORMATION:
	size = 43

	def __init__(self):
		self.ResumeKey = SMB_RESUME_KEY()
		self.FileAttributes = SMB_FILE_ATTRIBUTES.SMB_FILE_ATTRIBUTE_NORMAL
		self.LastWriteTime = SMB_TIME()
		self.LastWriteDate = SMB_DATE()
		self.FileSize = 0
		self.FileName = b'' #8.3 name as it was on the wire, without padding

	@staticmethod
	def from_bytes(bbuff):
		return SMB_DIRECTORY_INFORMATION.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		entry = SMB_DIRECTORY_INFORMATION()
		entry.ResumeKey = SMB_RESUME_KEY.from_buffer(buff)
		entry.FileAttributes = SMB_FILE_ATTRIBUTES(U8.read(buff, field = 'FileAttributes'))
		entry.LastWriteTime = SMB_TIME.from_buffer(buff)
		entry.LastWriteDate = SMB_DATE.from_buffer(buff)
		entry.FileSize = U32.read(buff, field = 'FileSize')
		raw = read_exact(buff, 13, 'FileName')
		m = raw.find(b'\x00')
		if m != -1:
			raw = raw[:m]
		entry.FileName = raw.rstrip(b' ')
		return entry

	def to_bytes(self):
		if len(self.FileName) > 12:
			raise SMBCodecException('FileName %r does not fit into an 8.3 entry' % self.FileName)
		name = self.FileName
		t  = self.ResumeKey.to_bytes()
		t += U8.encode(int(self.FileAttributes) & 0xFF)
		t += self.LastWriteTime.to_bytes()
		t += self.LastWriteDate.to_bytes()
		t += U32.encode(self.FileSize)
		t += name.ljust(12, b' ') + b'\x00'
		return t

	def get_filename(self):
		return self.FileName.decode('ascii', errors = 'replace')

	def __eq__(self, other):
		if not isinstance(other, SMB_DIRECTORY_INFORMATION):
			return NotImplemented
		return self.to_bytes() == other.to_bytes()

	def __repr__(self):
		t = '===SMB_DIRECTORY_INFORMATION===\r\n'
		for x in self.__dict__:
			t += '%s : %s \r\n' % (x, self.__dict__[x])
		return t
