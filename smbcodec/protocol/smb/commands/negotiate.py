import enum

from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commons import SMBSecurityMode, SMBCapabilities
from smbcodec.protocol.smb.primitives import U8, U16, U32, I16, read_exact, read_rest, remaining
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.structures.filetime import FILETIME
from smbcodec.protocol.smb.commands.base import SMBCommandBase

# https://msdn.microsoft.com/en-us/library/ee441913.aspx
class SMB_COM_NEGOTIATE_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_NEGOTIATE

	def __init__(self):
		super().__init__()
		##### SMB_Data ###
		self.Dialects  = [] #list fo dialect strings

	def _data_from_buffer(self, buff, data_offset):
		self.Dialects = []
		while remaining(buff) > 0:
			dialect = SMB_STRING.from_buffer(buff, BufferFormat.DIALECT)
			self.Dialects.append(dialect.get_string())

	def _data_to_bytes(self, data_offset):
		dialect_buffer = b''
		for dialect in self.Dialects:
			dialect_buffer += SMB_STRING.from_string(dialect, BufferFormat.DIALECT).to_bytes()
		return dialect_buffer

class NegotiateReplyForm(enum.Enum):
	ERROR = 0 #no parameters at all, status is in the header
	CORE = 1 #DialectIndex only, also used to reject every dialect (0xFFFF)
	NT_LM_012 = 17

# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-cifs/a4229e1a-8a4e-489a-a2eb-11b7f360e60c
class SMB_COM_NEGOTIATE_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_NEGOTIATE
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		self.Form = NegotiateReplyForm.ERROR
		##### parameters ####
		self.DialectIndex = 0
		self.SecurityMode = SMBSecurityMode(0)
		self.MaxMpxCount = 0
		self.MaxNumberVcs = 0
		self.MaxBufferSize = 0
		self.MaxRawSize = 0
		self.SessionKey = 0
		self.Capabilities = SMBCapabilities(0)
		self.SystemTime = FILETIME()
		self.ServerTimeZone = 0
		self.ChallengeLength = 0
		##### SMB_Data ###
		self.Challenge = b''
		self.DomainName = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)
		self.ServerName = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)
		self.ServerGUID = b'\x00' * 16
		self.SecurityBlob = b''

	@property
	def extended_security(self):
		return SMBCapabilities.CAP_EXTENDED_SECURITY in SMBCapabilities(self.Capabilities)

	def _params_from_buffer(self, buff, word_count):
		self.Form = NegotiateReplyForm.CORE
		self.DialectIndex = U16.read(buff, field = 'DialectIndex')
		if word_count < 17:
			return
		self.Form = NegotiateReplyForm.NT_LM_012
		self.SecurityMode = SMBSecurityMode(U8.read(buff, field = 'SecurityMode'))
		self.MaxMpxCount = U16.read(buff, field = 'MaxMpxCount')
		self.MaxNumberVcs = U16.read(buff, field = 'MaxNumberVcs')
		self.MaxBufferSize = U32.read(buff, field = 'MaxBufferSize')
		self.MaxRawSize = U32.read(buff, field = 'MaxRawSize')
		self.SessionKey = U32.read(buff, field = 'SessionKey')
		self.Capabilities = SMBCapabilities(U32.read(buff, field = 'Capabilities'))
		self.SystemTime = FILETIME.from_buffer(buff)
		self.ServerTimeZone = I16.read(buff, field = 'ServerTimeZone')
		self.ChallengeLength = U8.read(buff, field = 'ChallengeLength')

	def _data_from_buffer(self, buff, data_offset):
		if self.Form != NegotiateReplyForm.NT_LM_012:
			return
		if self.extended_security is True:
			self.ServerGUID = read_exact(buff, 16, 'ServerGUID')
			self.SecurityBlob = read_rest(buff)
			return

		self.Challenge = read_exact(buff, self.ChallengeLength, 'Challenge')
		self.DomainName = SMB_STRING.from_buffer(buff, BufferFormat.NULL_TERMINATED_UNICODE)
		if remaining(buff) > 0:
			self.ServerName = SMB_STRING.from_buffer(buff, BufferFormat.NULL_TERMINATED_UNICODE)
		else:
			self.ServerName = None

	def _params_to_bytes(self):
		if self.Form == NegotiateReplyForm.ERROR:
			return b''
		t = U16.encode(self.DialectIndex)
		if self.Form == NegotiateReplyForm.CORE:
			return t
		t += U8.encode(int(self.SecurityMode))
		t += U16.encode(self.MaxMpxCount)
		t += U16.encode(self.MaxNumberVcs)
		t += U32.encode(self.MaxBufferSize)
		t += U32.encode(self.MaxRawSize)
		t += U32.encode(self.SessionKey)
		t += U32.encode(int(self.Capabilities))
		t += self.SystemTime.to_bytes()
		t += I16.encode(self.ServerTimeZone)
		t += U8.encode(self.ChallengeLength)
		return t

	def _data_to_bytes(self, data_offset):
		if self.Form != NegotiateReplyForm.NT_LM_012:
			return b''
		if self.extended_security is True:
			self.ChallengeLength = 0
			return self.ServerGUID + self.SecurityBlob

		self.ChallengeLength = len(self.Challenge)
		t  = self.Challenge
		t += self.DomainName.to_bytes()
		if self.ServerName is not None:
			t += self.ServerName.to_bytes()
		return t
