import io

from smbcodec.exceptions import SMBInternalInvariant
from smbcodec.protocol.smb.commons import to_enum, int_value
from smbcodec.protocol.smb.primitives import U16, U32
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.commands.transaction import SMB_COM_TRANSACTION2_REQ, SMB_COM_TRANSACTION2_REPLY
from smbcodec.protocol.smb.subcommands.codes import Transaction2Subcommand, QueryInformationLevel, QueryFSInformationLevel
from smbcodec.protocol.smb.subcommands.infolevels import decode_information_level, encode_information_level

def subcommand_of(cmd):
	if len(cmd.Setup) == 0:
		raise SMBInternalInvariant('TRANSACTION2 request without setup words')
	return to_enum(Transaction2Subcommand, cmd.Setup[0])

class Trans2RequestBase:
	SUBCOMMAND = None

	def __init__(self):
		self.MaxParameterCount = 2
		self.MaxDataCount = 0x1000

	def to_transaction2(self):
		cmd = SMB_COM_TRANSACTION2_REQ()
		cmd.Setup = [self.SUBCOMMAND.value]
		cmd.MaxParameterCount = self.MaxParameterCount
		cmd.MaxDataCount = self.MaxDataCount
		cmd.Trans_Parameters = self.to_bytes()
		return cmd

	@classmethod
	def from_transaction2(cls, cmd):
		sub = subcommand_of(cmd)
		if sub != cls.SUBCOMMAND:
			raise SMBInternalInvariant('TRANSACTION2 subcommand %s is not %s' % (sub, cls.SUBCOMMAND.name))
		req = cls.from_buffer(io.BytesIO(cmd.Trans_Parameters))
		req.MaxParameterCount = cmd.MaxParameterCount
		req.MaxDataCount = cmd.MaxDataCount
		return req

	def __repr__(self):
		t = '===%s===\r\n' % self.__class__.__name__
		for x in self.__dict__:
			t += '%s : %s \r\n' % (x, self.__dict__[x])
		return t

# MS-CIFS TRANS2_QUERY_FILE_INFORMATION
class TRANS2_QUERY_FILE_INFORMATION_REQ(Trans2RequestBase):
	SUBCOMMAND = Transaction2Subcommand.TRANS2_QUERY_FILE_INFORMATION

	def __init__(self):
		super().__init__()
		self.FID = 0
		self.InformationLevel = QueryInformationLevel.SMB_QUERY_FILE_BASIC_INFO

	@classmethod
	def from_buffer(cls, buff):
		req = cls()
		req.FID = U16.read(buff, field = 'FID')
		req.InformationLevel = to_enum(QueryInformationLevel, U16.read(buff, field = 'InformationLevel'))
		return req

	def to_bytes(self):
		return U16.encode(self.FID) + U16.encode(int_value(self.InformationLevel))

# MS-CIFS TRANS2_QUERY_PATH_INFORMATION
class TRANS2_QUERY_PATH_INFORMATION_REQ(Trans2RequestBase):
	"""
	FileName travels inside Trans_Parameters, unicode names are not padded there
	"""
	SUBCOMMAND = Transaction2Subcommand.TRANS2_QUERY_PATH_INFORMATION

	def __init__(self):
		super().__init__()
		self.InformationLevel = QueryInformationLevel.SMB_QUERY_FILE_BASIC_INFO
		self.Reserved = 0
		self.FileName = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)

	@classmethod
	def from_buffer(cls, buff, buffer_format = BufferFormat.NULL_TERMINATED_OEM):
		req = cls()
		req.InformationLevel = to_enum(QueryInformationLevel, U16.read(buff, field = 'InformationLevel'))
		req.Reserved = U32.read(buff, field = 'Reserved')
		req.FileName = SMB_STRING.from_buffer(buff, buffer_format)
		return req

	def to_bytes(self):
		t  = U16.encode(int_value(self.InformationLevel))
		t += U32.encode(self.Reserved)
		t += self.FileName.to_bytes()
		return t

# MS-CIFS TRANS2_QUERY_FS_INFORMATION
class TRANS2_QUERY_FS_INFORMATION_REQ(Trans2RequestBase):
	SUBCOMMAND = Transaction2Subcommand.TRANS2_QUERY_FS_INFORMATION

	def __init__(self):
		super().__init__()
		self.MaxParameterCount = 0
		self.InformationLevel = QueryFSInformationLevel.SMB_QUERY_FS_SIZE_INFO

	@classmethod
	def from_buffer(cls, buff):
		req = cls()
		req.InformationLevel = to_enum(QueryFSInformationLevel, U16.read(buff, field = 'InformationLevel'))
		return req

	def to_bytes(self):
		return U16.encode(int_value(self.InformationLevel))

class TRANS2_QUERY_INFORMATION_REPLY:
	"""
	Reply to TRANS2_QUERY_PATH_INFORMATION and TRANS2_QUERY_FILE_INFORMATION.
	The level is not on the wire, it comes from the request.
	Information holds the parsed Trans_Data (a list for entry chains).
	"""
	KIND = 'query'

	def __init__(self, information = None):
		self.EaErrorOffset = 0
		self.Information = information

	def _params_from_bytes(self, data):
		self.EaErrorOffset = U16.decode(data)[0]

	def _params_to_bytes(self):
		return U16.encode(self.EaErrorOffset)

	@classmethod
	def from_transaction2(cls, cmd, level):
		reply = cls()
		reply._params_from_bytes(cmd.Trans_Parameters)
		reply.Information = decode_information_level(level, cmd.Trans_Data, cls.KIND)
		return reply

	def to_transaction2(self):
		if self.Information is None:
			raise SMBInternalInvariant('%s without information' % self.__class__.__name__)
		cmd = SMB_COM_TRANSACTION2_REPLY()
		cmd.Trans_Parameters = self._params_to_bytes()
		cmd.Trans_Data = encode_information_level(self.Information)
		return cmd

	def __repr__(self):
		t = '===%s===\r\n' % self.__class__.__name__
		for x in self.__dict__:
			t += '%s : %s \r\n' % (x, self.__dict__[x])
		return t

class TRANS2_QUERY_FS_INFORMATION_REPLY(TRANS2_QUERY_INFORMATION_REPLY):
	"""
	No parameters, only the level structure in Trans_Data
	"""
	KIND = 'query_fs'

	def __init__(self, information = None):
		self.Information = information

	def _params_from_bytes(self, data):
		return

	def _params_to_bytes(self):
		return b''
