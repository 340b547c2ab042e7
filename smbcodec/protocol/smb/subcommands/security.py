import io

from winacl.dtyp.security_descriptor import SECURITY_DESCRIPTOR
from winacl.functions.constants import SE_OBJECT_TYPE

from smbcodec.exceptions import SMBInternalInvariant
from smbcodec.protocol.smb.primitives import U16, U32
from smbcodec.protocol.smb.commands.nt_transact import SMB_COM_NT_TRANSACT_REQ, SMB_COM_NT_TRANSACT_REPLY
from smbcodec.protocol.smb.subcommands.codes import NTTransactSubcommand, SecurityInfo

def check_function(cmd, function):
	if cmd.Function != function.value:
		raise SMBInternalInvariant('NT_TRANSACT function %s is not %s' % (cmd.Function, function.name))

# MS-CIFS NT_TRANSACT_QUERY_SECURITY_DESC
class NT_TRANSACT_QUERY_SECURITY_DESC_REQ:
	def __init__(self):
		self.FID = 0
		self.Reserved = 0
		self.SecurityInfoFields = SecurityInfo.OWNER_SECURITY_INFORMATION | SecurityInfo.GROUP_SECURITY_INFORMATION | SecurityInfo.DACL_SECURITY_INFORMATION
		self.MaxDataCount = 0x1000

	@staticmethod
	def from_bytes(bbuff):
		return NT_TRANSACT_QUERY_SECURITY_DESC_REQ.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		req = NT_TRANSACT_QUERY_SECURITY_DESC_REQ()
		req.FID = U16.read(buff, field = 'FID')
		req.Reserved = U16.read(buff, field = 'Reserved')
		req.SecurityInfoFields = SecurityInfo(U32.read(buff, field = 'SecurityInfoFields'))
		return req

	def to_bytes(self):
		t  = U16.encode(self.FID)
		t += U16.encode(self.Reserved)
		t += U32.encode(int(self.SecurityInfoFields))
		return t

	def to_nt_transact(self):
		cmd = SMB_COM_NT_TRANSACT_REQ()
		cmd.Function = NTTransactSubcommand.NT_TRANSACT_QUERY_SECURITY_DESC.value
		cmd.MaxParameterCount = 4
		cmd.MaxDataCount = self.MaxDataCount
		cmd.Trans_Parameters = self.to_bytes()
		return cmd

	@staticmethod
	def from_nt_transact(cmd):
		check_function(cmd, NTTransactSubcommand.NT_TRANSACT_QUERY_SECURITY_DESC)
		req = NT_TRANSACT_QUERY_SECURITY_DESC_REQ.from_bytes(cmd.Trans_Parameters)
		req.MaxDataCount = cmd.MaxDataCount
		return req

	def __repr__(self):
		t = '===NT_TRANSACT_QUERY_SECURITY_DESC_REQ===\r\n'
		for x in self.__dict__:
			t += '%s : %s \r\n' % (x, self.__dict__[x])
		return t

class NT_TRANSACT_QUERY_SECURITY_DESC_REPLY:
	"""
	When the server buffer was too small the reply only carries LengthNeeded,
	SecurityDescriptor is None then.
	"""
	def __init__(self):
		self.LengthNeeded = 0
		self.SecurityDescriptor = None

	@staticmethod
	def from_nt_transact(cmd):
		reply = NT_TRANSACT_QUERY_SECURITY_DESC_REPLY()
		reply.LengthNeeded = U32.decode(cmd.Trans_Parameters)[0]
		if len(cmd.Trans_Data) > 0:
			reply.SecurityDescriptor = SECURITY_DESCRIPTOR.from_bytes(cmd.Trans_Data, object_type = SE_OBJECT_TYPE.SE_FILE_OBJECT)
		return reply

	def to_nt_transact(self):
		cmd = SMB_COM_NT_TRANSACT_REPLY()
		data = b''
		if self.SecurityDescriptor is not None:
			data = self.SecurityDescriptor.to_bytes()
		if self.LengthNeeded == 0:
			self.LengthNeeded = len(data)
		cmd.Trans_Parameters = U32.encode(self.LengthNeeded)
		cmd.Trans_Data = data
		return cmd

	def __repr__(self):
		t = '===NT_TRANSACT_QUERY_SECURITY_DESC_REPLY===\r\n'
		t += 'LengthNeeded : %s \r\n' % self.LengthNeeded
		if self.SecurityDescriptor is not None:
			t += 'SecurityDescriptor : %s \r\n' % self.SecurityDescriptor.to_sddl()
		return t

# MS-CIFS NT_TRANSACT_SET_SECURITY_DESC
class NT_TRANSACT_SET_SECURITY_DESC_REQ:
	def __init__(self):
		self.FID = 0
		self.Reserved = 0
		self.SecurityInformation = SecurityInfo.DACL_SECURITY_INFORMATION
		self.SecurityDescriptor = None

	def to_nt_transact(self):
		if self.SecurityDescriptor is None:
			raise SMBInternalInvariant('NT_TRANSACT_SET_SECURITY_DESC needs a security descriptor')
		cmd = SMB_COM_NT_TRANSACT_REQ()
		cmd.Function = NTTransactSubcommand.NT_TRANSACT_SET_SECURITY_DESC.value
		t  = U16.encode(self.FID)
		t += U16.encode(self.Reserved)
		t += U32.encode(int(self.SecurityInformation))
		cmd.Trans_Parameters = t
		cmd.Trans_Data = self.SecurityDescriptor.to_bytes()
		return cmd

	@staticmethod
	def from_nt_transact(cmd):
		check_function(cmd, NTTransactSubcommand.NT_TRANSACT_SET_SECURITY_DESC)
		buff = io.BytesIO(cmd.Trans_Parameters)
		req = NT_TRANSACT_SET_SECURITY_DESC_REQ()
		req.FID = U16.read(buff, field = 'FID')
		req.Reserved = U16.read(buff, field = 'Reserved')
		req.SecurityInformation = SecurityInfo(U32.read(buff, field = 'SecurityInformation'))
		req.SecurityDescriptor = SECURITY_DESCRIPTOR.from_bytes(cmd.Trans_Data, object_type = SE_OBJECT_TYPE.SE_FILE_OBJECT)
		return req
