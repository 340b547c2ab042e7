import io

from smbcodec.protocol.smb.command_codes import SMBCommand
from smbcodec.protocol.smb.primitives import U16
from smbcodec.protocol.smb.strings import SMB_STRING, BufferFormat
from smbcodec.protocol.smb.structures.attributes import SMB_FILE_ATTRIBUTES
from smbcodec.protocol.smb.structures.directory import SMB_RESUME_KEY, SMB_DIRECTORY_INFORMATION
from smbcodec.protocol.smb.commands.base import SMBCommandBase

class SearchRequestBase(SMBCommandBase):
	"""
	ResumeKey is None when the search starts, the variable block is empty then
	"""
	def __init__(self):
		super().__init__()
		##### parameters ####
		self.MaxCount = 0
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(0)
		##### SMB_Data ###
		self.FileName = SMB_STRING(BufferFormat.ASCII_STRING)
		self.ResumeKey = None

	def _params_from_buffer(self, buff, word_count):
		self.MaxCount = U16.read(buff, field = 'MaxCount')
		self.SearchAttributes = SMB_FILE_ATTRIBUTES(U16.read(buff, field = 'SearchAttributes'))

	def _data_from_buffer(self, buff, data_offset):
		self.FileName = self.FileName.parse(buff)
		block = SMB_STRING.from_buffer(buff, BufferFormat.VARIABLE_BLOCK)
		self.ResumeKey = None
		if len(block.Buffer) > 0:
			self.ResumeKey = SMB_RESUME_KEY.from_bytes(block.Buffer)

	def _params_to_bytes(self):
		return U16.encode(self.MaxCount) + U16.encode(int(self.SearchAttributes))

	def _data_to_bytes(self, data_offset):
		key = b''
		if self.ResumeKey is not None:
			key = self.ResumeKey.to_bytes()
		return self.FileName.to_bytes() + SMB_STRING(BufferFormat.VARIABLE_BLOCK, key).to_bytes()

class SearchReplyBase(SMBCommandBase):
	IS_REPLY = True

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.Count = 0
		##### SMB_Data ###
		self.DirectoryInformationData = []

	def _params_from_buffer(self, buff, word_count):
		self.Count = U16.read(buff, field = 'Count')

	def _data_from_buffer(self, buff, data_offset):
		block = SMB_STRING.from_buffer(buff, BufferFormat.VARIABLE_BLOCK)
		entries = io.BytesIO(block.Buffer)
		self.DirectoryInformationData = [SMB_DIRECTORY_INFORMATION.from_buffer(entries) for _ in range(self.Count)]

	def _params_to_bytes(self):
		return U16.encode(self.Count)

	def _data_to_bytes(self, data_offset):
		self.Count = len(self.DirectoryInformationData)
		t = b''
		for entry in self.DirectoryInformationData:
			t += entry.to_bytes()
		return SMB_STRING(BufferFormat.VARIABLE_BLOCK, t).to_bytes()

# MS-CIFS SMB_COM_SEARCH
class SMB_COM_SEARCH_REQ(SearchRequestBase):
	COMMAND = SMBCommand.SMB_COM_SEARCH

class SMB_COM_SEARCH_REPLY(SearchReplyBase):
	COMMAND = SMBCommand.SMB_COM_SEARCH

# MS-CIFS SMB_COM_FIND
class SMB_COM_FIND_REQ(SearchRequestBase):
	COMMAND = SMBCommand.SMB_COM_FIND

class SMB_COM_FIND_REPLY(SearchReplyBase):
	COMMAND = SMBCommand.SMB_COM_FIND

# MS-CIFS SMB_COM_FIND_UNIQUE
class SMB_COM_FIND_UNIQUE_REQ(SearchRequestBase):
	COMMAND = SMBCommand.SMB_COM_FIND_UNIQUE

class SMB_COM_FIND_UNIQUE_REPLY(SearchReplyBase):
	COMMAND = SMBCommand.SMB_COM_FIND_UNIQUE

# MS-CIFS SMB_COM_FIND_CLOSE
class SMB_COM_FIND_CLOSE_REQ(SearchRequestBase):
	COMMAND = SMBCommand.SMB_COM_FIND_CLOSE

	def __init__(self):
		super().__init__()
		self.ResumeKey = SMB_RESUME_KEY()

class SMB_COM_FIND_CLOSE_REPLY(SearchReplyBase):
	COMMAND = SMBCommand.SMB_COM_FIND_CLOSE

# MS-CIFS SMB_COM_FIND_CLOSE2
class SMB_COM_FIND_CLOSE2_REQ(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_FIND_CLOSE2

	def __init__(self):
		super().__init__()
		##### parameters ####
		self.SearchHandle = 0

	def _params_from_buffer(self, buff, word_count):
		self.SearchHandle = U16.read(buff, field = 'SearchHandle')

	def _params_to_bytes(self):
		return U16.encode(self.SearchHandle)

class SMB_COM_FIND_CLOSE2_REPLY(SMBCommandBase):
	COMMAND = SMBCommand.SMB_COM_FIND_CLOSE2
	IS_REPLY = True
