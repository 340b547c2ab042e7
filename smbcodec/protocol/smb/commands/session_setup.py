from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commons import SMBCapabilities
from smbcodec.protocol.smb.primitives import U16, U32, read_exact, remaining
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands.base import SMBCommandBase, unicode_pad, read_unicode_pad

def string_format(capabilities):
	if SMBCapabilities.CAP_UNICODE in SMBCapabilities(capabilities):
		return BufferFormat.NULL_TERMINATED_UNICODE
	return BufferFormat.NULL_TERMINATED_OEM

def in_format(s, fmt):
	if s.BufferFormat == fmt:
		return s
	return SMB_STRING.from_string(s.get_string(), fmt)

def strings_to_bytes(strings, position):
	t = b''
	for s in strings:
		if s.is_unicode is True and len(t) == 0:
			t += unicode_pad(position)
		t += s.to_bytes()
	return t

# MS-CIFS SMB_COM_SESSION_SETUP_ANDX request, MS-SMB extended security form
class SMB_COM_SESSION_SETUP_ANDX_REQ(SMBCommandBase):
	"""
	Two parameter layouts exist. When Capabilities carries
	CAP_EXTENDED_SECURITY the request holds a SecurityBlob (12 words),
	otherwise the OEM and unicode passwords (13 words).
	ExtendedSecurity overrides the flag when set, decoding sets it only
	when the word count and the flag disagree.

	CAP_UNICODE in Capabilities selects the string format. Encoding
	converts the strings into that format.
	"""
	COMMAND = SMBCommand.SMB_COM_SESSION_SETUP_ANDX
	ANDX = True

	def __init__(self):
		super().__init__()
		self.ExtendedSecurity = None
		##### parameters ####
		self.MaxBufferSize = 0
		self.MaxMpxCount = 0
		self.VcNumber = 0
		self.SessionKey = 0
		self.OEMPasswordLen = 0
		self.UnicodePasswordLen = 0
		self.SecurityBlobLength = 0
		self.Reserved = 0
		self.Capabilities = SMBCapabilities(0)
		##### SMB_Data ###
		self.OEMPassword = b''
		self.UnicodePassword = b''
		self.SecurityBlob = b''
		self.AccountName = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)
		self.PrimaryDomain = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)
		self.NativeOS = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)
		self.NativeLanMan = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)

	@property
	def extended_security(self):
		if self.ExtendedSecurity is not None:
			return self.ExtendedSecurity
		return SMBCapabilities.CAP_EXTENDED_SECURITY in SMBCapabilities(self.Capabilities)

	def _params_from_buffer(self, buff, word_count):
		self.MaxBufferSize = U16.read(buff, field = 'MaxBufferSize')
		self.MaxMpxCount = U16.read(buff, field = 'MaxMpxCount')
		self.VcNumber = U16.read(buff, field = 'VcNumber')
		self.SessionKey = U32.read(buff, field = 'SessionKey')
		if word_count == 12:
			self.SecurityBlobLength = U16.read(buff, field = 'SecurityBlobLength')
		else:
			self.OEMPasswordLen = U16.read(buff, field = 'OEMPasswordLen')
			self.UnicodePasswordLen = U16.read(buff, field = 'UnicodePasswordLen')
		self.Reserved = U32.read(buff, field = 'Reserved')
		self.Capabilities = SMBCapabilities(U32.read(buff, field = 'Capabilities'))
		self.ExtendedSecurity = None
		if self.extended_security != (word_count == 12):
			# layout follows the word count
			self.ExtendedSecurity = word_count == 12

	def _data_from_buffer(self, buff, data_offset):
		fmt = string_format(self.Capabilities)
		if self.extended_security is True:
			self.SecurityBlob = read_exact(buff, self.SecurityBlobLength, 'SecurityBlob')
		else:
			self.OEMPassword = read_exact(buff, self.OEMPasswordLen, 'OEMPassword')
			self.UnicodePassword = read_exact(buff, self.UnicodePasswordLen, 'UnicodePassword')
		if fmt == BufferFormat.NULL_TERMINATED_UNICODE:
			read_unicode_pad(buff, data_offset)
		if self.extended_security is False:
			self.AccountName = SMB_STRING.from_buffer(buff, fmt)
			self.PrimaryDomain = SMB_STRING.from_buffer(buff, fmt)
		self.NativeOS = SMB_STRING.from_buffer(buff, fmt)
		self.NativeLanMan = SMB_STRING.from_buffer(buff, fmt)

	def _data_to_bytes(self, data_offset):
		data_offset = self.default_data_offset(data_offset)
		fmt = string_format(self.Capabilities)
		self.NativeOS = in_format(self.NativeOS, fmt)
		self.NativeLanMan = in_format(self.NativeLanMan, fmt)
		if self.extended_security is True:
			self.SecurityBlobLength = len(self.SecurityBlob)
			t = self.SecurityBlob
			strings = [self.NativeOS, self.NativeLanMan]
		else:
			self.AccountName = in_format(self.AccountName, fmt)
			self.PrimaryDomain = in_format(self.PrimaryDomain, fmt)
			self.OEMPasswordLen = len(self.OEMPassword)
			self.UnicodePasswordLen = len(self.UnicodePassword)
			t = self.OEMPassword + self.UnicodePassword
			strings = [self.AccountName, self.PrimaryDomain, self.NativeOS, self.NativeLanMan]
		t += strings_to_bytes(strings, data_offset + len(t))
		return t

	def _params_to_bytes(self):
		t  = U16.encode(self.MaxBufferSize)
		t += U16.encode(self.MaxMpxCount)
		t += U16.encode(self.VcNumber)
		t += U32.encode(self.SessionKey)
		if self.extended_security is True:
			t += U16.encode(self.SecurityBlobLength)
		else:
			t += U16.encode(self.OEMPasswordLen)
			t += U16.encode(self.UnicodePasswordLen)
		t += U32.encode(self.Reserved)
		t += U32.encode(int(self.Capabilities))
		return t

# MS-CIFS SMB_COM_SESSION_SETUP_ANDX response
class SMB_COM_SESSION_SETUP_ANDX_REPLY(SMBCommandBase):
	"""
	Strings in the reply are NUL terminated unicode, aligned to 2 bytes
	from the start of the SMB header. PrimaryDomain is None when the
	server left it out.
	"""
	COMMAND = SMBCommand.SMB_COM_SESSION_SETUP_ANDX
	ANDX = True
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		self.ExtendedSecurity = False
		##### parameters ####
		self.Action = 0
		self.SecurityBlobLength = 0
		##### SMB_Data ###
		self.SecurityBlob = b''
		self.NativeOS = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)
		self.NativeLanMan = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)
		self.PrimaryDomain = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)

	def _params_from_buffer(self, buff, word_count):
		self.Action = U16.read(buff, field = 'Action')
		if word_count >= 4:
			self.ExtendedSecurity = True
			self.SecurityBlobLength = U16.read(buff, field = 'SecurityBlobLength')

	def _data_from_buffer(self, buff, data_offset):
		if self.ExtendedSecurity is True:
			self.SecurityBlob = read_exact(buff, self.SecurityBlobLength, 'SecurityBlob')
		read_unicode_pad(buff, data_offset)
		self.NativeOS = SMB_STRING.from_buffer(buff, BufferFormat.NULL_TERMINATED_UNICODE)
		self.NativeLanMan = SMB_STRING.from_buffer(buff, BufferFormat.NULL_TERMINATED_UNICODE)
		if remaining(buff) > 0:
			self.PrimaryDomain = SMB_STRING.from_buffer(buff, BufferFormat.NULL_TERMINATED_UNICODE)
		else:
			self.PrimaryDomain = None

	def _data_to_bytes(self, data_offset):
		data_offset = self.default_data_offset(data_offset)
		t = b''
		if self.ExtendedSecurity is True:
			self.SecurityBlobLength = len(self.SecurityBlob)
			t += self.SecurityBlob
		strings = [self.NativeOS, self.NativeLanMan]
		if self.PrimaryDomain is not None:
			strings.append(self.PrimaryDomain)
		t += strings_to_bytes(strings, data_offset + len(t))
		return t

	def _params_to_bytes(self):
		t = U16.encode(self.Action)
		if self.ExtendedSecurity is True:
			t += U16.encode(self.SecurityBlobLength)
		return t

# MS-CIFS SMB_COM_LOGOFF_ANDX
class SMB_COM_LOGOFF_ANDX_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_LOGOFF_ANDX
	ANDX = True

class SMB_COM_LOGOFF_ANDX_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_LOGOFF_ANDX
	ANDX = True
	IS_REPLY = True
