from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16, U32, UTIME
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.structures.attributes import SMB_FILE_ATTRIBUTES
from smbcodec.protocol.smb.structures.smbtime import SMB_DATE, SMB_TIME
from smbcodec.protocol.smb.commands.base import SMBCommandBase

# MS-CIFS SMB_COM_QUERY_INFORMATION
class SMB_COM_QUERY_INFORMATION_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_QUERY_INFORMATION

	def __init__(self):
		super().__init__()
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _data_from_buffer(self, buff, data_offset):
		self.FileName = self.FileName.parse(buff)

	def _data_to_bytes(self, data_offset):
		return self.FileName.to_bytes()

class BasicInformationMixin:
	"""
	FileAttributes, LastWriteTime, FileSize and 5 reserved words,
	shared by the QUERY_INFORMATION reply and the SET_INFORMATION request
	"""
	with_size = True

	def _init_info(self):
		self.FileAttributes = SMB_FILE_ATTRIBUTES(0)
		self.LastWriteTime = 0 #UTIME
		if self.with_size is True:
			self.FileSize = 0
		self.Reserved = [0, 0, 0, 0, 0]

	def _params_from_buffer(self, buff, word_count):
		self.FileAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'FileAttributes'))
		self.LastWriteTime = UTIME.read(buff, field = 'LastWriteTime')
		if self.with_size is True:
			self.FileSize = U32.read(buff, field = 'FileSize')
		self.Reserved = [U16.read(buff, field = 'Reserved') for _ in range(5)]

	def _params_to_bytes(self):
		t  = U16.encode(int(self.FileAttributes))
		t += UTIME.encode(self.LastWriteTime)
		if self.with_size is True:
			t += U32.encode(self.FileSize)
		for x in self.Reserved:
			t += U16.encode(x)
		return t

class SMB_COM_QUERY_INFORMATION_REPLY(BasicInformationMixin, SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_QUERY_INFORMATION
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		self._init_info()

# MS-CIFS SMB_COM_SET_INFORMATION
class SMB_COM_SET_INFORMATION_REQ(BasicInformationMixin, SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_SET_INFORMATION
	with_size = False

	def __init__(self):
		super().__init__()
		self._init_info()
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.ASCII_STRING)

	def _data_from_buffer(self, buff, data_offset):
		self.FileName = self.FileName.parse(buff)

	def _data_to_bytes(self, data_offset):
		return self.FileName.to_bytes()

class SMB_COM_SET_INFORMATION_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_SET_INFORMATION
	IS_REPLY = True

def read_date_times(buff):
	t = []
	for _ in range(3): #create, last access, last write
		t.append(SMB_DATE.from_buffer(buff))
		t.append(SMB_TIME.from_buffer(buff))
	return t

# MS-CIFS SMB_COM_QUERY_INFORMATION2
class SMB_COM_QUERY_INFORMATION2_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_QUERY_INFORMATION2

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')

	def _params_to_bytes(self):
		return U16.encode(self.FID)

class SMB_COM_QUERY_INFORMATION2_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_QUERY_INFORMATION2
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.CreateDate = SMB_DATE()
		self.CreationTime = SMB_TIME()
		self.LastAccessDate = SMB_DATE()
		self.LastAccessTime = SMB_TIME()
		self.LastWriteDate = SMB_DATE()
		self.LastWriteTime = SMB_TIME()
		self.FileDataSize = 0
		self.FileAllocationSize = 0
		self.FileAttributes = SMB_FILE_ATTRIBUTES(0)

	def _params_from_buffer(self, buff, word_count):
		self.CreateDate, self.CreationTime, self.LastAccessDate, self.LastAccessTime, self.LastWriteDate, self.LastWriteTime = read_date_times(buff)
		self.FileDataSize = U32.read(buff, field = 'FileDataSize')
		self.FileAllocationSize = U32.read(buff, field = 'FileAllocationSize')
		self.FileAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'FileAttributes'))

	def _params_to_bytes(self):
		t  = self.CreateDate.to_bytes()
		t += self.CreationTime.to_bytes()
		t += self.LastAccessDate.to_bytes()
		t += self.LastAccessTime.to_bytes()
		t += self.LastWriteDate.to_bytes()
		t += self.LastWriteTime.to_bytes()
		t += U32.encode(self.FileDataSize)
		t += U32.encode(self.FileAllocationSize)
		t += U16.encode(int(self.FileAttributes))
		return t

# MS-CIFS SMB_COM_SET_INFORMATION2
class SMB_COM_SET_INFORMATION2_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_SET_INFORMATION2

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.FID = 0
		self.CreateDate = SMB_DATE()
		self.CreationTime = SMB_TIME()
		self.LastAccessDate = SMB_DATE()
		self.LastAccessTime = SMB_TIME()
		self.LastWriteDate = SMB_DATE()
		self.LastWriteTime = SMB_TIME()

	def _params_from_buffer(self, buff, word_count):
		self.FID = U16.read(buff, field = 'FID')
		self.CreateDate, self.CreationTime, self.LastAccessDate, self.LastAccessTime, self.LastWriteDate, self.LastWriteTime = read_date_times(buff)

	def _params_to_bytes(self):
		t  = U16.encode(self.FID)
		t += self.CreateDate.to_bytes()
		t += self.CreationTime.to_bytes()
		t += self.LastAccessDate.to_bytes()
		t += self.LastAccessTime.to_bytes()
		t += self.LastWriteDate.to_bytes()
		t += self.LastWriteTime.to_bytes()
		return t

class SMB_COM_SET_INFORMATION2_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_SET_INFORMATION2
	IS_REPLY = True

# MS-CIFS SMB_COM_QUERY_INFORMATION_DISK
class SMB_COM_QUERY_INFORMATION_DISK_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_QUERY_INFORMATION_DISK

class SMB_COM_QUERY_INFORMATION_DISK_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_QUERY_INFORMATION_DISK
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.TotalUnits = 0
		self.BlocksPerUnit = 0
		self.BlockSize = 0
		self.FreeUnits = 0
		self.Reserved = 0

	def _params_from_buffer(self, buff, word_count):
		self.TotalUnits = U16.read(buff, field = 'TotalUnits')
		self.BlocksPerUnit = U16.read(buff, field = 'BlocksPerUnit')
		self.BlockSize = U16.read(buff, field = 'BlockSize')
		self.FreeUnits = U16.read(buff, field = 'FreeUnits')
		self.Reserved = U16.read(buff, field = 'Reserved')

	def _params_to_bytes(self):
		t  = U16.encode(self.TotalUnits)
		t += U16.encode(self.BlocksPerUnit)
		t += U16.encode(self.BlockSize)
		t += U16.encode(self.FreeUnits)
		t += U16.encode(self.Reserved)
		return t
