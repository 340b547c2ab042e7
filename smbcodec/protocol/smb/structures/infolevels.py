import io

from smbcodec.exceptions import SMBInternalInvariant
from smbcodec.protocol.smb.primitives import U8, U16, U32, U64, read_exact
from smbcodec.protocol.smb.structures.filetime import FILETIME
from smbcodec.protocol.smb.structures.smbtime import SMB_DATE, SMB_TIME
from smbcodec.protocol.smb.structures.attributes import SMB_FILE_ATTRIBUTES, SMB_EXT_FILE_ATTR

# Information level structures carried in the Trans_Data of TRANSACTION2
# query / set / find subcommands. Names in the NT levels are unicode.

STRUCTURED = (FILETIME, SMB_DATE, SMB_TIME)

def default_of(kind):
	if kind in STRUCTURED:
		return kind()
	if kind in (SMB_EXT_FILE_ATTR, SMB_FILE_ATTRIBUTES):
		return kind(0)
	return 0

def read_field(buff, name, kind):
	if kind in STRUCTURED:
		return kind.from_buffer(buff)
	if kind is SMB_EXT_FILE_ATTR:
		return SMB_EXT_FILE_ATTR(U32.read(buff, field = name))
	if kind is SMB_FILE_ATTRIBUTES:
		return SMB_FILE_ATTRIBUTES(U16.read(buff, field = name))
	return kind.read(buff, field = name)

def encode_field(value, kind):
	if kind in STRUCTURED:
		return value.to_bytes()
	if kind is SMB_EXT_FILE_ATTR:
		return U32.encode(int(value))
	if kind is SMB_FILE_ATTRIBUTES:
		return U16.encode(int(value))
	return kind.encode(value)

def read_unicode(buff, length, field):
	return read_exact(buff, length, field).decode('utf-16-le', errors = 'replace')

class InfoLevelBase:
	"""
	Fixed part described by FIELDS as (name, type) pairs, variable
	trailing part (names, lists) handled by _tail_from_buffer / _tail_to_bytes.
	The tail is built first, length fields in the fixed part follow it.
	"""
	FIELDS = []

	def __init__(self):
		for name, kind in self.FIELDS:
			setattr(self, name, default_of(kind))

	@classmethod
	def from_bytes(cls, bbuff):
		return cls.from_buffer(io.BytesIO(bbuff))

	@classmethod
	def from_buffer(cls, buff):
		info = cls()
		for name, kind in cls.FIELDS:
			setattr(info, name, read_field(buff, name, kind))
		info._tail_from_buffer(buff)
		return info

	def to_bytes(self):
		tail = self._tail_to_bytes()
		t = b''
		for name, kind in self.FIELDS:
			t += encode_field(getattr(self, name), kind)
		return t + tail

	def _tail_from_buffer(self, buff):
		return

	def _tail_to_bytes(self):
		return b''

	def __eq__(self, other):
		if type(self) is not type(other):
			return NotImplemented
		return self.to_bytes() == other.to_bytes()

	def __repr__(self):
		t = '===%s===\r\n' % self.__class__.__name__
		for x in self.__dict__:
			t += '%s : %s \r\n' % (x, self.__dict__[x])
		return t

class FileNameMixin:
	"""
	FileNameLength (bytes) followed by the unicode FileName, no terminator
	"""
	def _tail_from_buffer(self, buff):
		self.FileName = read_unicode(buff, self.FileNameLength, 'FileName')

	def _tail_to_bytes(self):
		name = self.FileName.encode('utf-16-le')
		self.FileNameLength = len(name)
		return name

##### extended attributes #####

# MS-CIFS SMB_FEA
class SMB_FEA:
	def __init__(self, name = b'', value = b'', flags = 0):
		self.ExtendedAttributeFlag = flags
		self.AttributeName = name
		self.AttributeValue = value

	@staticmethod
	def from_buffer(buff):
		fea = SMB_FEA()
		fea.ExtendedAttributeFlag = U8.read(buff, field = 'ExtendedAttributeFlag')
		namelen = U8.read(buff, field = 'AttributeNameLengthInBytes')
		valuelen = U16.read(buff, field = 'AttributeValueLengthInBytes')
		fea.AttributeName = read_exact(buff, namelen, 'AttributeName')
		read_exact(buff, 1, 'AttributeName terminator')
		fea.AttributeValue = read_exact(buff, valuelen, 'AttributeValue')
		return fea

	def to_bytes(self):
		t  = U8.encode(self.ExtendedAttributeFlag)
		t += U8.encode(len(self.AttributeName))
		t += U16.encode(len(self.AttributeValue))
		t += self.AttributeName + b'\x00'
		t += self.AttributeValue
		return t

	def __eq__(self, other):
		if not isinstance(other, SMB_FEA):
			return NotImplemented
		return self.to_bytes() == other.to_bytes()

	def __repr__(self):
		return 'SMB_FEA(%r, %r, %s)' % (self.AttributeName, self.AttributeValue, self.ExtendedAttributeFlag)

# MS-CIFS SMB_FEA_LIST
class SMB_FEA_LIST:
	"""
	SizeOfListInBytes counts itself and every SMB_FEA entry
	"""
	def __init__(self):
		self.SizeOfListInBytes = 4
		self.FEAList = []

	@staticmethod
	def from_bytes(bbuff):
		return SMB_FEA_LIST.from_buffer(io.BytesIO(bbuff))

	@staticmethod
	def from_buffer(buff):
		feas = SMB_FEA_LIST()
		feas.SizeOfListInBytes = U32.read(buff, field = 'SizeOfListInBytes')
		if feas.SizeOfListInBytes < 4:
			raise SMBInternalInvariant('SizeOfListInBytes %s is smaller than the size field' % feas.SizeOfListInBytes)
		body = io.BytesIO(read_exact(buff, feas.SizeOfListInBytes - 4, 'FEAList'))
		end = feas.SizeOfListInBytes - 4
		while body.tell() < end:
			feas.FEAList.append(SMB_FEA.from_buffer(body))
		return feas

	def to_bytes(self):
		t = b''.join([fea.to_bytes() for fea in self.FEAList])
		self.SizeOfListInBytes = 4 + len(t)
		return U32.encode(self.SizeOfListInBytes) + t

	def __eq__(self, other):
		if not isinstance(other, SMB_FEA_LIST):
			return NotImplemented
		return self.to_bytes() == other.to_bytes()

	def __repr__(self):
		return 'SMB_FEA_LIST(%s)' % self.FEAList

class EAListMixin:
	def _tail_from_buffer(self, buff):
		self.ExtendedAttributeList = SMB_FEA_LIST.from_buffer(buff)

	def _tail_to_bytes(self):
		return self.ExtendedAttributeList.to_bytes()

##### query path / file information #####

# MS-CIFS SMB_INFO_STANDARD (query)
class SMB_INFO_STANDARD(InfoLevelBase):
	FIELDS = [
		('CreationDate', SMB_DATE),
		('CreationTime', SMB_TIME),
		('LastAccessDate', SMB_DATE),
		('LastAccessTime', SMB_TIME),
		('LastWriteDate', SMB_DATE),
		('LastWriteTime', SMB_TIME),
		('FileDataSize', U32),
		('AllocationSize', U32),
		('Attributes', SMB_FILE_ATTRIBUTES),
	]

class SMB_INFO_QUERY_EA_SIZE(InfoLevelBase):
	FIELDS = SMB_INFO_STANDARD.FIELDS + [('EaSize', U32)]

class SMB_INFO_QUERY_EAS_FROM_LIST(EAListMixin, InfoLevelBase):
	def __init__(self):
		super().__init__()
		self.ExtendedAttributeList = SMB_FEA_LIST()

class SMB_INFO_QUERY_ALL_EAS(SMB_INFO_QUERY_EAS_FROM_LIST):
	pass

class SMB_INFO_IS_NAME_VALID(InfoLevelBase):
	"""
	No data, the status of the response carries the answer
	"""

BASIC_INFO_FIELDS = [
	('CreationTime', FILETIME),
	('LastAccessTime', FILETIME),
	('LastWriteTime', FILETIME),
	('LastChangeTime', FILETIME),
	('ExtFileAttributes', SMB_EXT_FILE_ATTR),
	('Reserved', U32),
]

class SMB_QUERY_FILE_BASIC_INFO(InfoLevelBase):
	FIELDS = BASIC_INFO_FIELDS

class SMB_QUERY_FILE_STANDARD_INFO(InfoLevelBase):
	FIELDS = [
		('AllocationSize', U64),
		('EndOfFile', U64),
		('NumberOfLinks', U32),
		('DeletePending', U8),
		('Directory', U8),
	]

class SMB_QUERY_FILE_EA_INFO(InfoLevelBase):
	FIELDS = [('EaSize', U32)]

class SMB_QUERY_FILE_NAME_INFO(FileNameMixin, InfoLevelBase):
	FIELDS = [('FileNameLength', U32)]

	def __init__(self):
		super().__init__()
		self.FileName = ''

class SMB_QUERY_FILE_ALT_NAME_INFO(SMB_QUERY_FILE_NAME_INFO):
	pass

# MS-CIFS SMB_QUERY_FILE_ALL_INFO
class SMB_QUERY_FILE_ALL_INFO(FileNameMixin, InfoLevelBase):
	FIELDS = [
		('CreationTime', FILETIME),
		('LastAccessTime', FILETIME),
		('LastWriteTime', FILETIME),
		('LastChangeTime', FILETIME),
		('ExtFileAttributes', SMB_EXT_FILE_ATTR),
		('Reserved1', U32),
		('AllocationSize', U64),
		('EndOfFile', U64),
		('NumberOfLinks', U32),
		('DeletePending', U8),
		('Directory', U8),
		('Reserved2', U16),
		('EaSize', U32),
		('FileNameLength', U32),
	]

	def __init__(self):
		super().__init__()
		self.FileName = ''

class SMB_QUERY_FILE_STREAM_INFO(InfoLevelBase):
	"""
	One stream entry, the response holds a NextEntryOffset chain of them
	"""
	FIELDS = [
		('NextEntryOffset', U32),
		('StreamNameLength', U32),
		('StreamSize', U64),
		('StreamAllocationSize', U64),
	]

	def __init__(self):
		super().__init__()
		self.StreamName = ''

	def _tail_from_buffer(self, buff):
		self.StreamName = read_unicode(buff, self.StreamNameLength, 'StreamName')

	def _tail_to_bytes(self):
		name = self.StreamName.encode('utf-16-le')
		self.StreamNameLength = len(name)
		return name

class SMB_QUERY_FILE_COMPRESSION_INFO(InfoLevelBase):
	FIELDS = [
		('CompressedFileSize', U64),
		('CompressionFormat', U16),
		('CompressionUnitShift', U8),
		('ChunkShift', U8),
		('ClusterShift', U8),
	]

	def __init__(self):
		super().__init__()
		self.Reserved = b'\x00' * 3

	def _tail_from_buffer(self, buff):
		self.Reserved = read_exact(buff, 3, 'Reserved')

	def _tail_to_bytes(self):
		return self.Reserved

##### query fs information #####

class SMB_INFO_ALLOCATION(InfoLevelBase):
	FIELDS = [
		('idFileSystem', U32),
		('cSectorUnit', U32),
		('cUnit', U32),
		('cUnitAvailable', U32),
		('cbSector', U16),
	]

class SMB_INFO_VOLUME(InfoLevelBase):
	"""
	VolumeLabel is cCharCount OEM characters
	"""
	FIELDS = [
		('ulVolSerialNbr', U32),
		('cCharCount', U8),
	]

	def __init__(self):
		super().__init__()
		self.VolumeLabel = b''

	def _tail_from_buffer(self, buff):
		self.VolumeLabel = read_exact(buff, self.cCharCount, 'VolumeLabel')

	def _tail_to_bytes(self):
		self.cCharCount = len(self.VolumeLabel)
		return self.VolumeLabel

class SMB_QUERY_FS_VOLUME_INFO(InfoLevelBase):
	FIELDS = [
		('VolumeCreationTime', FILETIME),
		('SerialNumber', U32),
		('VolumeLabelSize', U32),
		('Reserved', U16),
	]

	def __init__(self):
		super().__init__()
		self.VolumeLabel = ''

	def _tail_from_buffer(self, buff):
		self.VolumeLabel = read_unicode(buff, self.VolumeLabelSize, 'VolumeLabel')

	def _tail_to_bytes(self):
		label = self.VolumeLabel.encode('utf-16-le')
		self.VolumeLabelSize = len(label)
		return label

class SMB_QUERY_FS_SIZE_INFO(InfoLevelBase):
	FIELDS = [
		('TotalAllocationUnits', U64),
		('TotalFreeAllocationUnits', U64),
		('SectorsPerAllocationUnit', U32),
		('BytesPerSector', U32),
	]

class SMB_QUERY_FS_DEVICE_INFO(InfoLevelBase):
	FIELDS = [
		('DeviceType', U32),
		('DeviceCharacteristics', U32),
	]

class SMB_QUERY_FS_ATTRIBUTE_INFO(InfoLevelBase):
	FIELDS = [
		('FileSystemAttributes', U32),
		('MaxFileNameLengthInBytes', U32),
		('LengthOfFileSystemName', U32),
	]

	def __init__(self):
		super().__init__()
		self.FileSystemName = ''

	def _tail_from_buffer(self, buff):
		self.FileSystemName = read_unicode(buff, self.LengthOfFileSystemName, 'FileSystemName')

	def _tail_to_bytes(self):
		name = self.FileSystemName.encode('utf-16-le')
		self.LengthOfFileSystemName = len(name)
		return name

##### set path / file information #####

class SMB_SET_INFO_STANDARD(InfoLevelBase):
	FIELDS = SMB_INFO_STANDARD.FIELDS[:6]

	def __init__(self):
		super().__init__()
		self.Reserved = b'\x00' * 10

	def _tail_from_buffer(self, buff):
		self.Reserved = read_exact(buff, 10, 'Reserved')

	def _tail_to_bytes(self):
		return self.Reserved

class SMB_INFO_SET_EAS(SMB_INFO_QUERY_EAS_FROM_LIST):
	pass

class SMB_SET_FILE_BASIC_INFO(InfoLevelBase):
	FIELDS = BASIC_INFO_FIELDS

class SMB_SET_FILE_DISPOSITION_INFO(InfoLevelBase):
	FIELDS = [('DeletePending', U8)]

class SMB_SET_FILE_ALLOCATION_INFO(InfoLevelBase):
	FIELDS = [('AllocationSize', U64)]

class SMB_SET_FILE_END_OF_FILE_INFO(InfoLevelBase):
	FIELDS = [('EndOfFile', U64)]

##### find first / next entries #####

DIRECTORY_INFO_FIELDS = [
	('NextEntryOffset', U32),
	('FileIndex', U32),
	('CreationTime', FILETIME),
	('LastAccessTime', FILETIME),
	('LastWriteTime', FILETIME),
	('LastAttrChangeTime', FILETIME),
	('EndOfFile', U64),
	('AllocationSize', U64),
	('ExtFileAttributes', SMB_EXT_FILE_ATTR),
	('FileNameLength', U32),
]

class SMB_FIND_FILE_DIRECTORY_INFO(FileNameMixin, InfoLevelBase):
	FIELDS = DIRECTORY_INFO_FIELDS

	def __init__(self):
		super().__init__()
		self.FileName = ''

class SMB_FIND_FILE_FULL_DIRECTORY_INFO(SMB_FIND_FILE_DIRECTORY_INFO):
	FIELDS = DIRECTORY_INFO_FIELDS + [('EaSize', U32)]

class SMB_FIND_FILE_NAMES_INFO(SMB_FIND_FILE_DIRECTORY_INFO):
	FIELDS = [
		('NextEntryOffset', U32),
		('FileIndex', U32),
		('FileNameLength', U32),
	]

class SMB_FIND_FILE_BOTH_DIRECTORY_INFO(SMB_FIND_FILE_DIRECTORY_INFO):
	"""
	ShortName is the 8.3 name in a fixed 24 byte unicode field
	"""
	FIELDS = DIRECTORY_INFO_FIELDS + [
		('EaSize', U32),
		('ShortNameLength', U8),
		('Reserved', U8),
	]

	def __init__(self):
		super().__init__()
		self.ShortName = ''

	def _tail_from_buffer(self, buff):
		raw = read_exact(buff, 24, 'ShortName')
		self.ShortName = raw[:self.ShortNameLength].decode('utf-16-le', errors = 'replace')
		super()._tail_from_buffer(buff)

	def _tail_to_bytes(self):
		short = self.ShortName.encode('utf-16-le')
		if len(short) > 24:
			raise SMBInternalInvariant('ShortName %r does not fit into 24 bytes' % self.ShortName)
		self.ShortNameLength = len(short)
		return short.ljust(24, b'\x00') + super()._tail_to_bytes()

##### entry chains #####

def entries_from_bytes(entrytype, data):
	return entries_from_buffer(entrytype, io.BytesIO(data))

def entries_from_buffer(entrytype, buff):
	"""
	Walks a NextEntryOffset chain, each offset counts from the start of its entry
	"""
	t = []
	pos = buff.tell()
	entry = entrytype.from_buffer(buff)
	t.append(entry)
	while entry.NextEntryOffset != 0:
		buff.seek(pos + entry.NextEntryOffset, 0)
		pos = buff.tell()
		entry = entrytype.from_buffer(buff)
		t.append(entry)
	return t

def entries_to_bytes(entries, alignment = 8):
	"""
	Lays out entries back to back, padded to alignment, and links them
	through NextEntryOffset. The last entry gets 0.
	"""
	t = b''
	for i, entry in enumerate(entries):
		entry.NextEntryOffset = 0
		if i < len(entries) - 1:
			size = len(entry.to_bytes())
			entry.NextEntryOffset = size + (alignment - size % alignment) % alignment
		data = entry.to_bytes()
		t += data + b'\x00' * max(entry.NextEntryOffset - len(data), 0)
	return t
