from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.commons import SMBTreeConnectAndXFlags
from smbcodec.protocol.smb.primitives import U16, U32, read_exact
from smbcodec.protocol.smb.strings import SMB_STRING, OEM_STRING, BufferFormat
from smbcodec.protocol.smb.commands.base import SMBCommandBase, unicode_pad, read_unicode_pad

# MS-CIFS SMB_COM_TREE_CONNECT
class SMB_COM_TREE_CONNECT_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_TREE_CONNECT

	def __init__(self):
		super().__init__()
		##### SMB_Data ###
		self.Path = OEM_STRING(BufferFormat.ASCII_STRING)
		self.Password = OEM_STRING(BufferFormat.ASCII_STRING)
		self.Service = OEM_STRING(BufferFormat.ASCII_STRING)

	def _data_from_buffer(self, buff, data_offset):
		self.Path = self.Path.parse(buff)
		self.Password = self.Password.parse(buff)
		self.Service = self.Service.parse(buff)

	def _data_to_bytes(self, data_offset):
		return self.Path.to_bytes() + self.Password.to_bytes() + self.Service.to_bytes()

class SMB_COM_TREE_CONNECT_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_TREE_CONNECT
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.MaxBufferSize = 0
		self.TID = 0

	def _params_from_buffer(self, buff, word_count):
		self.MaxBufferSize = U16.read(buff, field = 'MaxBufferSize')
		self.TID = U16.read(buff, field = 'TID')

	def _params_to_bytes(self):
		return U16.encode(self.MaxBufferSize) + U16.encode(self.TID)

# MS-CIFS SMB_COM_TREE_CONNECT_ANDX
class SMB_COM_TREE_CONNECT_ANDX_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_TREE_CONNECT_ANDX
	ANDX = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Flags = SMBTreeConnectAndXFlags(0)
		self.PasswordLength = 0
		##### SMB_Data ###
		self.Password = b''
		self.Path = SMB_STRING(BufferFormat.NULL_TERMINATED_OEM)
		self.Service = OEM_STRING(BufferFormat.NULL_TERMINATED_OEM)

	def _params_from_buffer(self, buff, word_count):
		self.Flags = SMBTreeConnectAndXFlags(U16.read(buff, field = 'Flags'))
		self.PasswordLength = U16.read(buff, field = 'PasswordLength')

	def _data_from_buffer(self, buff, data_offset):
		self.Password = read_exact(buff, self.PasswordLength, 'Password')
		if self.Path.is_unicode is True:
			read_unicode_pad(buff, data_offset)
		self.Path = self.Path.parse(buff)
		self.Service = self.Service.parse(buff)

	def _data_to_bytes(self, data_offset):
		self.PasswordLength = len(self.Password)
		t = self.Password
		if self.Path.is_unicode is True:
			t += unicode_pad(self.default_data_offset(data_offset) + len(t))
		t += self.Path.to_bytes()
		t += self.Service.to_bytes()
		return t

	def _params_to_bytes(self):
		return U16.encode(int(self.Flags)) + U16.encode(self.PasswordLength)

class SMB_COM_TREE_CONNECT_ANDX_REPLY(SMBCommandBase):
	"""
	The 7 word form adds the share access rights, it is sent when
	TREE_CONNECT_ANDX_EXTENDED_RESPONSE was requested.
	"""
	COMMAND = SMBCommand.SMB_COM_TREE_CONNECT_ANDX
	ANDX = True
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.OptionalSupport = 0
		self.MaximalShareAccessRights = None
		self.GuestMaximalShareAccessRights = None
		##### SMB_Data ###
		self.Service = OEM_STRING(BufferFormat.NULL_TERMINATED_OEM)
		self.NativeFileSystem = SMB_STRING(BufferFormat.NULL_TERMINATED_UNICODE)

	def _params_from_buffer(self, buff, word_count):
		self.OptionalSupport = U16.read(buff, field = 'OptionalSupport')
		if word_count >= 7:
			self.MaximalShareAccessRights = U32.read(buff, field = 'MaximalShareAccessRights')
			self.GuestMaximalShareAccessRights = U32.read(buff, field = 'GuestMaximalShareAccessRights')

	def _data_from_buffer(self, buff, data_offset):
		self.Service = self.Service.parse(buff)
		if self.NativeFileSystem.is_unicode is True:
			read_unicode_pad(buff, data_offset)
		self.NativeFileSystem = self.NativeFileSystem.parse(buff)

	def _data_to_bytes(self, data_offset):
		t = self.Service.to_bytes()
		if self.NativeFileSystem.is_unicode is True:
			t += unicode_pad(self.default_data_offset(data_offset) + len(t))
		t += self.NativeFileSystem.to_bytes()
		return t

	def _params_to_bytes(self):
		t = U16.encode(self.OptionalSupport)
		if self.MaximalShareAccessRights is not None:
			t += U32.encode(self.MaximalShareAccessRights)
			t += U32.encode(self.GuestMaximalShareAccessRights or 0)
		return t

# MS-CIFS SMB_COM_TREE_DISCONNECT
class SMB_COM_TREE_DISCONNECT_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_TREE_DISCONNECT

class SMB_COM_TREE_DISCONNECT_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_TREE_DISCONNECT
	IS_REPLY = True
